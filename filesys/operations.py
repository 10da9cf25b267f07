"""Queries and operations on files, directories and links."""

from __future__ import annotations

import errno
import functools
import os
import shutil
import stat as _stat
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from filesys.errors import FilesystemError
from filesys.status import CopyOption, FileStatus, FileType, Perms, SpaceInfo

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

_PREFIX = "filesys."


@contextmanager
def _os_errors(
    what: str, path1: Optional[PathArg] = None, path2: Optional[PathArg] = None
) -> Iterator[None]:
    """Turn any ``OSError`` raised in the block into a :class:`FilesystemError`."""
    try:
        yield
    except FilesystemError:
        raise
    except OSError as exc:
        raise FilesystemError(_PREFIX + what, exc.errno or 0, path1, path2) from exc


def _text(p: PathArg) -> str:
    return os.fsdecode(p)


def _type_of(mode: int) -> FileType:
    if _stat.S_ISREG(mode):
        return FileType.REGULAR_FILE
    if _stat.S_ISDIR(mode):
        return FileType.DIRECTORY_FILE
    if _stat.S_ISLNK(mode):
        return FileType.SYMLINK_FILE
    if _stat.S_ISBLK(mode):
        return FileType.BLOCK_FILE
    if _stat.S_ISCHR(mode):
        return FileType.CHARACTER_FILE
    if _stat.S_ISFIFO(mode):
        return FileType.FIFO_FILE
    if _stat.S_ISSOCK(mode):
        return FileType.SOCKET_FILE
    return FileType.TYPE_UNKNOWN


def _from_stat(st: os.stat_result) -> FileStatus:
    return FileStatus(_type_of(st.st_mode), Perms(st.st_mode & int(Perms.PERMS_MASK)))


def _query(p: PathArg, follow: bool, what: str) -> FileStatus:
    text = _text(p)
    try:
        st = os.stat(text, follow_symlinks=follow)
    except (FileNotFoundError, NotADirectoryError):
        return FileStatus(FileType.FILE_NOT_FOUND, Perms.NO_PERMS)
    except OSError as exc:
        raise FilesystemError(_PREFIX + what, exc.errno or 0, text) from exc
    return _from_stat(st)


def _stat_of(p: PathArg, what: str) -> os.stat_result:
    text = _text(p)
    with _os_errors(what, text):
        return os.stat(text)


# --- status queries ------------------------------------------------------------


def status(p: PathArg) -> FileStatus:
    """Status of ``p``, following symlinks; a missing file is not an error."""
    return _query(p, True, "status")


def symlink_status(p: PathArg) -> FileStatus:
    """Status of ``p`` itself, without following a final symlink."""
    return _query(p, False, "symlink_status")


def exists(p: PathArg) -> bool:
    return status(p).exists()


def is_directory(p: PathArg) -> bool:
    return status(p).is_directory()


def is_regular_file(p: PathArg) -> bool:
    return status(p).is_regular_file()


def is_other(p: PathArg) -> bool:
    return status(p).is_other()


def is_symlink(p: PathArg) -> bool:
    return symlink_status(p).is_symlink()


def is_empty(p: PathArg) -> bool:
    """True for a directory without entries or a file of size zero."""
    text = _text(p)
    st = _stat_of(text, "is_empty")
    if _stat.S_ISDIR(st.st_mode):
        with _os_errors("is_empty", text), os.scandir(text) as entries:
            return next(iter(entries), None) is None
    return st.st_size == 0


# --- operations ------------------------------------------------------------------


def file_size(p: PathArg) -> int:
    """Size in bytes of the regular file ``p``."""
    text = _text(p)
    st = _stat_of(text, "file_size")
    if not _stat.S_ISREG(st.st_mode):
        raise FilesystemError(_PREFIX + "file_size", errno.EPERM, text)
    return st.st_size


def hard_link_count(p: PathArg) -> int:
    return _stat_of(p, "hard_link_count").st_nlink


def last_write_time(p: PathArg) -> int:
    """Modification time of ``p`` in whole seconds since the epoch."""
    return int(_stat_of(p, "last_write_time").st_mtime)


def set_last_write_time(p: PathArg, new_time: int) -> None:
    """Set the modification time of ``p``, keeping its access time."""
    text = _text(p)
    st = _stat_of(text, "last_write_time")
    with _os_errors("last_write_time", text):
        os.utime(text, (st.st_atime, new_time))


def permissions(p: PathArg, prms: Union[Perms, int]) -> None:
    """Replace, add to or remove from the permission bits of ``p``.

    With both ``ADD_PERMS`` and ``REMOVE_PERMS`` given nothing is changed.
    ``SYMLINK_PERMS`` acts on a symlink itself rather than on its target.
    """
    text = _text(p)
    prms = Perms(prms)
    adding = bool(prms & Perms.ADD_PERMS)
    removing = bool(prms & Perms.REMOVE_PERMS)
    if adding and removing:
        return
    follow = not prms & Perms.SYMLINK_PERMS
    if adding or removing:
        current = status(text) if follow else symlink_status(text)
        if not current.exists():
            raise FilesystemError(_PREFIX + "permissions", errno.ENOENT, text)
        if adding:
            prms = prms | current.permissions
        else:
            prms = current.permissions & ~prms
    mode = int(prms) & int(Perms.PERMS_MASK)
    with _os_errors("permissions", text):
        try:
            if follow:
                os.chmod(text, mode)
            else:
                os.chmod(text, mode, follow_symlinks=False)
        except NotImplementedError as exc:
            raise FilesystemError(_PREFIX + "permissions", errno.ENOTSUP, text) from exc


def read_symlink(p: PathArg) -> str:
    """Target of the symlink ``p``."""
    text = _text(p)
    with _os_errors("read_symlink", text):
        return os.readlink(text)


def remove(p: PathArg) -> bool:
    """Remove a file, symlink or empty directory; False if ``p`` did not exist."""
    text = _text(p)
    st = symlink_status(text)
    if not st.exists():
        return False
    with _os_errors("remove", text):
        if st.is_directory():
            os.rmdir(text)
        else:
            os.unlink(text)
    return True


def _remove_all_aux(text: str, st: FileStatus) -> int:
    count = 1
    if st.is_directory():
        with _os_errors("remove_all", text), os.scandir(text) as entries:
            children = [entry.path for entry in entries]
        for child in children:
            count += _remove_all_aux(child, symlink_status(child))
    remove(text)
    return count


def remove_all(p: PathArg) -> int:
    """Remove ``p`` and everything below it; return the number of files removed."""
    text = _text(p)
    st = symlink_status(text)
    if not st.exists():
        return 0
    return _remove_all_aux(text, st)


def rename(old_p: PathArg, new_p: PathArg) -> None:
    with _os_errors("rename", old_p, new_p):
        os.rename(_text(old_p), _text(new_p))


def resize_file(p: PathArg, size: int) -> None:
    text = _text(p)
    with _os_errors("resize_file", text):
        os.truncate(text, size)


def space(p: PathArg) -> SpaceInfo:
    """Capacity, free and available bytes of the file system holding ``p``."""
    text = _text(p)
    with _os_errors("space", text):
        if hasattr(os, "statvfs"):
            vfs = os.statvfs(text)
            return SpaceInfo(
                capacity=vfs.f_blocks * vfs.f_frsize,
                free=vfs.f_bfree * vfs.f_frsize,
                available=vfs.f_bavail * vfs.f_frsize,
            )
        usage = shutil.disk_usage(text)
        return SpaceInfo(capacity=usage.total, free=usage.free, available=usage.free)


def create_directory(p: PathArg) -> bool:
    """Create directory ``p``; False if it already exists as a directory."""
    text = _text(p)
    try:
        os.mkdir(text)
    except OSError as exc:
        if is_directory(text):
            return False
        raise FilesystemError(_PREFIX + "create_directory", exc.errno or 0, text) from exc
    return True


def create_directories(p: PathArg) -> bool:
    """Create ``p`` and any missing parents; True if anything was created."""
    text = _text(p)
    if not text:
        raise FilesystemError(_PREFIX + "create_directories", errno.EINVAL, text)
    stripped = text.rstrip("/" + os.sep) or text
    parent, name = os.path.split(stripped)
    if name in (".", ".."):
        return create_directories(parent) if parent else False
    st = status(text)
    if st.is_directory():
        return False
    if st.exists():
        raise FilesystemError(_PREFIX + "create_directories", errno.EEXIST, text)
    if parent and parent != stripped and not exists(parent):
        create_directories(parent)
    return create_directory(text)


def create_symlink(to: PathArg, new_symlink: PathArg) -> None:
    with _os_errors("create_symlink", to, new_symlink):
        os.symlink(_text(to), _text(new_symlink))


def create_directory_symlink(to: PathArg, new_symlink: PathArg) -> None:
    with _os_errors("create_directory_symlink", to, new_symlink):
        os.symlink(_text(to), _text(new_symlink), target_is_directory=True)


def create_hard_link(to: PathArg, new_hard_link: PathArg) -> None:
    with _os_errors("create_hard_link", to, new_hard_link):
        os.link(_text(to), _text(new_hard_link))


def copy_file(
    source: PathArg,
    target: PathArg,
    option: CopyOption = CopyOption.FAIL_IF_EXISTS,
) -> None:
    """Copy the contents of ``source`` to ``target``, giving it the source's mode."""
    src_text, dst_text = _text(source), _text(target)
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    if option is not CopyOption.OVERWRITE_IF_EXISTS:
        flags |= os.O_EXCL
    with _os_errors("copy_file", src_text, dst_text):
        with open(src_text, "rb") as src:
            mode = os.fstat(src.fileno()).st_mode & int(Perms.PERMS_MASK)
            fd = os.open(dst_text, flags, mode)
            with open(fd, "wb") as dst:
                shutil.copyfileobj(src, dst)


def copy_symlink(existing_symlink: PathArg, new_symlink: PathArg) -> None:
    create_symlink(read_symlink(existing_symlink), new_symlink)


def current_path() -> str:
    with _os_errors("current_path"):
        return os.getcwd()


def set_current_path(p: PathArg) -> None:
    text = _text(p)
    with _os_errors("current_path", text):
        os.chdir(text)


@functools.lru_cache(maxsize=None)
def initial_path() -> str:
    """The working directory at the first call of this function."""
    return current_path()


def equivalent(p1: PathArg, p2: PathArg) -> bool:
    """True if both paths resolve to the same file.

    Raises if neither exists; False if only one does.
    """
    t1, t2 = _text(p1), _text(p2)
    try:
        s1 = os.stat(t1)
    except OSError:
        s1 = None
    try:
        s2 = os.stat(t2)
    except OSError:
        s2 = None
    if s1 is None and s2 is None:
        raise FilesystemError(_PREFIX + "equivalent", errno.ENOENT, t1, t2)
    if s1 is None or s2 is None:
        return False
    return (
        s1.st_dev == s2.st_dev
        and s1.st_ino == s2.st_ino
        and s1.st_size == s2.st_size
        and s1.st_mtime == s2.st_mtime
    )


def absolute(p: PathArg, base: Optional[PathArg] = None) -> str:
    """``p`` made absolute against ``base`` (the current directory by default)."""
    text = _text(p)
    if os.path.isabs(text):
        return text
    base_text = current_path() if base is None else _text(base)
    if not os.path.isabs(base_text):
        base_text = absolute(base_text)
    return os.path.join(base_text, text) if text else base_text


def canonical(p: PathArg, base: Optional[PathArg] = None) -> str:
    """Absolute path to an existing file with no symlinks, ``.`` or ``..``."""
    source = absolute(p, base)
    if not exists(source):
        raise FilesystemError(_PREFIX + "canonical", errno.ENOENT, source)
    with _os_errors("canonical", source):
        return os.path.realpath(source)


def system_complete(p: PathArg) -> str:
    """``p`` completed the way the operating system would resolve it."""
    text = _text(p)
    if not text or os.path.isabs(text):
        return text
    if os.name == "nt":
        return os.path.abspath(text)
    return os.path.join(current_path(), text)


def temp_directory_path() -> str:
    """Directory for temporary files, taken from the environment if set."""
    for name in ("TMPDIR", "TMP", "TEMP", "TEMPDIR"):
        value = os.environ.get(name)
        if value:
            path = value
            break
    else:
        path = "/tmp" if os.name == "posix" else tempfile.gettempdir()
    if not is_directory(path):
        raise FilesystemError(_PREFIX + "temp_directory_path", errno.ENOTDIR, path)
    return path


def possible_large_file_size_support() -> bool:
    """Whether file sizes beyond 31 bits can be reported.

    File sizes are reported as unbounded integers, so this always holds.
    """
    return _stat_of(os.curdir, "possible_large_file_size_support").st_size >= 0