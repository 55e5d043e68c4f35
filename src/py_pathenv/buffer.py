"""Path buffer — the owned byte storage behind a ``PathEnv``.

The buffer holds the literal variable text, separators included.  It
behaves like a growable array in a real allocator:

- **Capacity** — how many bytes fit before the storage must move.
- **Reallocation** — when an append exceeds capacity, the storage is
  "moved" to a block at least twice as large.  We count these so callers
  (and tests) can see growth happen.
- **Truncation** — shrinks the length in place; capacity is kept, as a
  real allocator would not compact on every pop.

Entries cached by ``PathEnv`` are *offsets* into the buffer, not
addresses, so a reallocation never invalidates them.

The sizing heuristic
    When appending many entries at once, reserving space for all of them
    up front avoids repeated reallocations.  We guess
    ``count * LEN_HEURISTIC`` bytes, where ``LEN_HEURISTIC`` is the length
    of a typical entry plus its separator (``":/usr/local/bin"``).  A
    wildly large count (e.g. a bogus ``length_hint``) must not reserve an
    absurd block, so estimates at or above ``MAX_RESERVE`` fall back to
    the plain count.
"""

from __future__ import annotations

import sys
from typing import Any

LEN_HEURISTIC = len(":/usr/local/bin")
MAX_RESERVE = sys.maxsize // 2


def reserve_heuristic(count: int) -> int:
    """Estimate the bytes needed to append *count* more entries.

    Args:
        count: Expected number of entries.

    Returns:
        ``count * LEN_HEURISTIC``, or just *count* if that estimate would
        reach ``MAX_RESERVE``.

    """
    count = max(count, 0)
    estimate = count * LEN_HEURISTIC
    if estimate >= MAX_RESERVE:
        return count
    return estimate


class PathBuffer:
    """Growable byte storage with explicit capacity tracking."""

    def __init__(self, data: bytes | bytearray = b"") -> None:
        """Create a buffer holding a copy of *data*.

        Args:
            data: Initial contents.  Capacity starts at exactly its length.

        """
        self._data = bytearray(data)
        self._capacity = len(self._data)
        self._reallocations = 0

    @property
    def data(self) -> bytearray:
        """Return the live storage (for splitting; do not resize it)."""
        return self._data

    @property
    def capacity(self) -> int:
        """Return the number of bytes that fit without reallocating."""
        return self._capacity

    @property
    def reallocations(self) -> int:
        """Return how many times the storage has grown."""
        return self._reallocations

    def __len__(self) -> int:
        """Return the number of bytes in use."""
        return len(self._data)

    def __bytes__(self) -> bytes:
        """Return a copy of the literal contents."""
        return bytes(self._data)

    def reserve(self, additional: int) -> None:
        """Ensure room for *additional* more bytes.

        Grows to at least double the current capacity, so a run of
        appends costs amortised O(1) reallocations per byte.
        """
        needed = len(self._data) + additional
        if needed <= self._capacity:
            return
        self._capacity = max(needed, self._capacity * 2)
        self._reallocations += 1

    def append(self, chunk: bytes) -> None:
        """Append *chunk* to the end, growing if necessary."""
        self.reserve(len(chunk))
        self._data += chunk

    def insert_front(self, chunk: bytes) -> None:
        """Insert *chunk* at the start, shifting every byte right."""
        self.reserve(len(chunk))
        self._data[:0] = chunk

    def truncate(self, length: int) -> None:
        """Shrink the contents to the first *length* bytes."""
        del self._data[length:]

    def drop_front(self, count: int) -> None:
        """Remove the first *count* bytes, shifting the rest left."""
        del self._data[:count]

    def clear(self) -> None:
        """Remove all contents (capacity is kept)."""
        self._data.clear()

    def slice(self, start: int, stop: int) -> bytes:
        """Return a copy of ``[start, stop)``."""
        return bytes(self._data[start:stop])

    def copy(self) -> PathBuffer:
        """Return an independent buffer with the same contents."""
        return PathBuffer(self._data)

    def stats(self) -> dict[str, Any]:
        """Return usage statistics.

        Returns:
            Dict with length, capacity, and reallocations.

        """
        return {
            "length": len(self._data),
            "capacity": self._capacity,
            "reallocations": self._reallocations,
        }
