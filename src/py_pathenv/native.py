"""Native strings — explicit conversions between text and raw bytes.

A ``PATH`` value is opaque bytes: on POSIX it can hold sequences that are
not valid in any encoding.  Python hands such values around as ``str``
(decoded with surrogate escapes) *or* as ``bytes``.  Rather than guessing,
every boundary goes through the two functions here:

- ``to_bytes`` — anything path-like → ``bytes``.
- ``to_native`` — ``bytes`` → platform-native ``str``.

Both use ``os.fsencode`` / ``os.fsdecode``, so undecodable bytes survive a
round trip unchanged.
"""

from __future__ import annotations

import os
from typing import TypeAlias, TypeGuard

NativeString: TypeAlias = str | bytes | bytearray | memoryview | os.PathLike[str] | os.PathLike[bytes]

RAW_TEXT_TYPES = (str, bytes, bytearray, memoryview, os.PathLike)


def is_raw_text(value: object) -> TypeGuard[NativeString]:
    """Return True if *value* can be converted with ``to_bytes``."""
    return isinstance(value, RAW_TEXT_TYPES)


def to_bytes(value: NativeString) -> bytes:
    """Convert a native string or bytes-like object to ``bytes``.

    Args:
        value: Text, bytes-like data, or an ``os.PathLike``.

    Returns:
        The raw byte representation of *value*.

    Raises:
        TypeError: If *value* is not a supported type.

    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (str, os.PathLike)):
        return os.fsencode(value)
    msg = f"expected str, bytes or os.PathLike, not {type(value).__name__}"
    raise TypeError(msg)


def to_native(data: bytes | bytearray) -> str:
    """Convert raw bytes to a platform-native string."""
    return os.fsdecode(bytes(data))
