"""Separator — the one byte that delimits entries in a ``PATH`` variable.

Every platform joins its search-path entries with a single byte:

- ``:`` on POSIX-like systems (Linux, macOS, the BSDs).
- ``;`` on Windows, where ``:`` already appears in drive letters.

The byte is stored once, as ``BYTE``.  Every other form (``BYTES``,
``CHAR``, ``STR``, ``OS_STR``) is *derived* from it, so the views can never
disagree with each other.
"""

from __future__ import annotations

import os
import sys
from enum import StrEnum


class PlatformFamily(StrEnum):
    """The two families of search-path syntax.

    - POSIX — entries joined by ``:``.
    - WINDOWS — entries joined by ``;``.
    """

    POSIX = "posix"
    WINDOWS = "windows"


_SEPARATORS: dict[PlatformFamily, int] = {
    PlatformFamily.POSIX: ord(":"),
    PlatformFamily.WINDOWS: ord(";"),
}


def current_family() -> PlatformFamily:
    """Return the platform family of the running interpreter."""
    if sys.platform == "win32":
        return PlatformFamily.WINDOWS
    return PlatformFamily.POSIX


def separator_for(family: PlatformFamily) -> int:
    """Return the separator byte used by *family*."""
    return _SEPARATORS[family]


BYTE: int = separator_for(current_family())
"""The separator as an integer byte value."""

BYTES: bytes = bytes((BYTE,))
"""The separator as a one-byte ``bytes`` object."""

CHAR: str = chr(BYTE)
"""The separator as a single character."""

STR: str = CHAR
"""The separator as a string (identical to ``CHAR``)."""

OS_STR: str = os.fsdecode(BYTES)
"""The separator as a platform-native string."""
