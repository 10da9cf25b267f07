"""Generation of random, probably unique, path names from a model."""

from __future__ import annotations

import os
from typing import Iterator, Union

from filesys.errors import FilesystemError

DEFAULT_MODEL = "%%%%-%%%%-%%%%-%%%%"

_HEX = "0123456789abcdef"
_BATCH = 16  # random bytes fetched at a time


def _random_bytes(count: int) -> bytes:
    try:
        return os.urandom(count)
    except OSError as exc:
        raise FilesystemError("filesys.unique_path", exc.errno or 0) from exc


def _nibbles() -> Iterator[int]:
    """Yield 4-bit values from the system's secure random source, low nibble first."""
    while True:
        for byte in _random_bytes(_BATCH):
            yield byte & 0xF
            yield byte >> 4


def unique_path(
    model: Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"] = DEFAULT_MODEL,
) -> str:
    """Return ``model`` with every ``%`` replaced by a random lower-case hex digit.

    Random data is taken from the operating system's secure source only when the
    model holds at least one ``%``. Raises :class:`FilesystemError` if that source
    cannot be read.
    """
    text = os.fsdecode(model)
    nibbles = _nibbles()
    return "".join(_HEX[next(nibbles)] if ch == "%" else ch for ch in text)