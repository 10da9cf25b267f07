"""Small helpers for the name parts of a path."""

from __future__ import annotations

import os
from typing import Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

_SEPS = "/" + ("\\" if os.name == "nt" else "")
_DOT = "."


def _filename(text: str) -> str:
    if not text:
        return ""
    if text[-1] in _SEPS:
        return _DOT if text.strip(_SEPS) else text[-1]
    stops = _SEPS + (":" if os.name == "nt" else "")
    cut = max(text.rfind(ch) for ch in stops)
    return text[cut + 1 :]


def _extension(name: str) -> str:
    if name in (".", ".."):
        return ""
    pos = name.rfind(_DOT)
    return "" if pos < 0 else name[pos:]


def extension(p: PathArg) -> str:
    """The file name's last ``.`` and what follows it, or ``""``."""
    return _extension(_filename(os.fsdecode(p)))


def basename(p: PathArg) -> str:
    """The file name without its extension."""
    name = _filename(os.fsdecode(p))
    ext = _extension(name)
    return name[: len(name) - len(ext)]


def change_extension(p: PathArg, new_extension: PathArg) -> str:
    """``p`` with its extension replaced by ``new_extension``.

    A leading dot is added to a non-empty new extension that lacks one;
    an empty new extension just removes the old one.
    """
    text = os.fsdecode(p)
    new_ext = os.fsdecode(new_extension)
    result = text[: len(text) - len(extension(text))]
    if new_ext:
        if not new_ext.startswith(_DOT):
            result += _DOT
        result += new_ext
    return result