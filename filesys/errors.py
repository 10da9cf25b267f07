"""Exception type raised by filesystem operations."""

from __future__ import annotations

import os
from typing import Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _as_text(path: PathArg | None) -> str:
    return "" if path is None else os.fsdecode(path)


class FilesystemError(OSError):
    """An operating-system error tied to up to two paths.

    ``what`` names the failing operation, ``code`` is an ``errno`` value
    (0 when there is none), and ``path1``/``path2`` are the paths involved.
    Missing paths are kept as empty strings.
    """

    def __init__(
        self,
        what: str,
        code: int = 0,
        path1: PathArg | None = None,
        path2: PathArg | None = None,
    ) -> None:
        message = os.strerror(code) if code else ""
        super().__init__(code, message)
        self.what = what
        self.code = code
        self.path1 = _as_text(path1)
        self.path2 = _as_text(path2)

    def __str__(self) -> str:
        text = self.what
        if self.code:
            text = f"{text}: {self.strerror}" if text else str(self.strerror)
        if self.path1:
            text += f': "{self.path1}"'
        if self.path2:
            text += f', "{self.path2}"'
        return text