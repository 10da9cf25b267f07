"""Directory entries and iteration over directories, flat or recursive."""

from __future__ import annotations

import dataclasses
import functools
import os
from typing import Iterator, List, Optional, Union

from filesys import operations as _ops
from filesys.errors import FilesystemError
from filesys.status import FileStatus, SymlinkOption

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _remove_filename(text: str) -> str:
    head, tail = os.path.split(text)
    if not tail:
        return head.rstrip("/" + os.sep) or head
    return head


@functools.total_ordering
class DirectoryEntry:
    """A path together with cached status information about it.

    Unknown statuses are looked up on first use and remembered.
    Entries compare and hash by path alone.
    """

    def __init__(
        self,
        path: PathArg = "",
        status: Optional[FileStatus] = None,
        symlink_status: Optional[FileStatus] = None,
    ) -> None:
        self.path = os.fsdecode(path)
        self._status = status if status is not None else FileStatus()
        self._symlink_status = (
            symlink_status if symlink_status is not None else FileStatus()
        )

    def assign(
        self,
        path: PathArg,
        status: Optional[FileStatus] = None,
        symlink_status: Optional[FileStatus] = None,
    ) -> None:
        """Replace the path and both cached statuses."""
        self.path = os.fsdecode(path)
        self._status = status if status is not None else FileStatus()
        self._symlink_status = (
            symlink_status if symlink_status is not None else FileStatus()
        )

    def replace_filename(
        self,
        name: PathArg,
        status: Optional[FileStatus] = None,
        symlink_status: Optional[FileStatus] = None,
    ) -> None:
        """Swap the last path component for ``name`` and reset the statuses."""
        parent = _remove_filename(self.path)
        self.assign(os.path.join(parent, os.fsdecode(name)), status, symlink_status)

    def status(self) -> FileStatus:
        """Status of the file, following symlinks."""
        if not self._status.status_known():
            link = self._symlink_status
            if link.status_known() and not link.is_symlink():
                self._status = dataclasses.replace(link)
            else:
                self._status = _ops.status(self.path)
        return dataclasses.replace(self._status)

    def symlink_status(self) -> FileStatus:
        """Status of the entry itself, without following a final symlink."""
        if not self._symlink_status.status_known():
            self._symlink_status = _ops.symlink_status(self.path)
        return dataclasses.replace(self._symlink_status)

    def __fspath__(self) -> str:
        return self.path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryEntry):
            return NotImplemented
        return self.path == other.path

    def __lt__(self, other: "DirectoryEntry") -> bool:
        if not isinstance(other, DirectoryEntry):
            return NotImplemented
        return self.path < other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"DirectoryEntry({self.path!r})"


class DirectoryIterator:
    """Single-pass iterator over the entries of one directory.

    ``.`` and ``..`` are never produced. The directory is opened on
    construction, so a missing or unreadable directory raises at once.
    """

    def __init__(self, path: PathArg) -> None:
        self._root = os.fsdecode(path)
        try:
            self._scan: Optional[Iterator[os.DirEntry]] = os.scandir(self._root)
        except OSError as exc:
            raise FilesystemError(
                "filesys.directory_iterator::construct", exc.errno or 0, self._root
            ) from exc

    def __iter__(self) -> "DirectoryIterator":
        return self

    def __next__(self) -> DirectoryEntry:
        if self._scan is None:
            raise StopIteration
        try:
            found = next(self._scan)
        except StopIteration:
            self._close()
            raise
        except OSError as exc:
            self._close()
            raise FilesystemError(
                "filesys.directory_iterator::operator++", exc.errno or 0, self._root
            ) from exc
        return DirectoryEntry(found.path)

    def _close(self) -> None:
        if self._scan is not None:
            self._scan.close()  # type: ignore[attr-defined]
            self._scan = None

    def __del__(self) -> None:
        self._close()


class RecursiveDirectoryIterator:
    """Iterator over a directory tree, parents before their contents.

    Directory symlinks are only followed with ``SymlinkOption.RECURSE``.
    """

    def __init__(
        self, path: PathArg, options: Union[SymlinkOption, int] = SymlinkOption.NONE
    ) -> None:
        self._options = SymlinkOption(options)
        self._stack: List[DirectoryIterator] = [DirectoryIterator(path)]
        self._entry: Optional[DirectoryEntry] = None
        self._skip_push = True

    def __iter__(self) -> "RecursiveDirectoryIterator":
        return self

    def __next__(self) -> DirectoryEntry:
        if self._skip_push:
            self._skip_push = False
            return self._advance_or_stop()
        error: Optional[FilesystemError] = None
        try:
            if self._push_directory():
                assert self._entry is not None
                return self._entry
        except FilesystemError as exc:
            error = exc
        entry = self._advance()
        if error is not None:
            raise FilesystemError(
                "filesys.recursive_directory_iterator directory error",
                error.code,
                error.path1,
            ) from error
        if entry is None:
            raise StopIteration
        return entry

    def _advance(self) -> Optional[DirectoryEntry]:
        while self._stack:
            entry = next(self._stack[-1], None)
            if entry is not None:
                self._entry = entry
                return entry
            self._stack.pop()
        self._entry = None
        return None

    def _advance_or_stop(self) -> DirectoryEntry:
        entry = self._advance()
        if entry is None:
            raise StopIteration
        return entry

    def _push_directory(self) -> bool:
        entry = self._entry
        if entry is None:
            return False
        if self._options & SymlinkOption.NO_PUSH:
            self._options &= ~SymlinkOption.NO_PUSH
            return False
        following = bool(self._options & SymlinkOption.RECURSE)
        if not following and entry.symlink_status().is_symlink():
            return False
        if not entry.status().is_directory():
            return False
        child = DirectoryIterator(entry.path)
        first = next(child, None)
        if first is None:
            return False
        self._stack.append(child)
        self._entry = first
        return True

    def _require_entry(self, what: str) -> DirectoryEntry:
        if self._entry is None:
            raise ValueError(f"{what} without a current recursive_directory_iterator entry")
        return self._entry

    def depth(self) -> int:
        """Nesting level of the current entry; entries of the root are at 0."""
        if not self._stack:
            raise ValueError("depth() on end recursive_directory_iterator")
        return len(self._stack) - 1

    def recursion_pending(self) -> bool:
        """True when recursion into the current entry has been switched off."""
        if not self._stack:
            raise ValueError("recursion_pending() on end recursive_directory_iterator")
        return bool(self._options & SymlinkOption.NO_PUSH)

    def disable_recursion_pending(self, value: bool = True) -> None:
        """Skip (or, with ``value`` false, no longer skip) descending into the current entry."""
        if not self._stack:
            raise ValueError("disable_recursion_pending() on end recursive_directory_iterator")
        if value:
            self._options |= SymlinkOption.NO_PUSH
        else:
            self._options &= ~SymlinkOption.NO_PUSH

    def pop(self) -> None:
        """Leave the current directory; iteration resumes in its parent."""
        if len(self._stack) < 2:
            raise ValueError("pop() on recursive_directory_iterator with level < 1")
        self._stack.pop()
        self._entry = None
        self._skip_push = True

    def status(self) -> FileStatus:
        return self._require_entry("status()").status()

    def symlink_status(self) -> FileStatus:
        return self._require_entry("symlink_status()").symlink_status()