"""PathEnv — an owned, mutable ``PATH`` variable with cached entries.

A ``PathEnv`` keeps two things in lockstep:

1. A ``PathBuffer`` holding the literal variable text, separators and all.
2. A ``SegmentCache`` of ``(offset, length)`` pairs, one per non-empty
   entry, in buffer order.

The cache always equals what ``split`` would produce for the whole buffer,
but it is never rebuilt from scratch after construction.  Each mutation
touches only what changed:

- **push_back / extend** — append a separator and the new text, then split
  *only the appended suffix* and add its segments.  Offsets are relative to
  the buffer start, so growing (even reallocating) the buffer leaves the
  existing segments valid.
- **pop_back_n** — find where the last surviving entry ends, truncate the
  buffer there, and drop segments from the back.  Nothing is re-split.
- **push_front / pop_front_n** — bytes move, so every cached offset shifts
  by the same delta.  This costs O(total length), unlike the back end.

Rendering (``bytes(env)``, ``str(env)``) joins the cached entries, so the
output is always canonical: exactly one separator between entries and none
at either end, however messy the input text was.

Equality and ordering compare decoded entries (see ``compare``), so a
``PathEnv`` built from ``"/a:/b"`` equals the raw text ``"/a:/b:"``.
Like ``list``, a ``PathEnv`` is mutable and therefore unhashable.
"""

from __future__ import annotations

import operator
from pathlib import Path
from typing import TYPE_CHECKING, Any

from py_pathenv import separator
from py_pathenv.buffer import PathBuffer, reserve_heuristic
from py_pathenv.compare import compare_segments
from py_pathenv.native import NativeString, is_raw_text, to_bytes, to_native
from py_pathenv.segments import Segment, SegmentCache
from py_pathenv.split import PathSplit, split

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class PathEnv:
    """An owned ``PATH`` value plus a cache of its decoded entries."""

    def __init__(self, value: NativeString | None = None) -> None:
        """Create a ``PathEnv`` from raw text.

        Args:
            value: The variable's text, as ``str``, bytes-like data or
                ``os.PathLike``.  ``None`` creates an empty value.

        """
        self._buffer = PathBuffer(b"" if value is None else to_bytes(value))
        self._segments = SegmentCache()
        self._segments.extend(PathSplit(self._buffer.data).spans())
        # Bumped on every mutation so live iterators can detect changes
        self._version = 0

    @classmethod
    def empty(cls) -> PathEnv:
        """Return a new ``PathEnv`` with no entries."""
        return cls()

    @classmethod
    def from_iterable(cls, entries: Iterable[NativeString]) -> PathEnv:
        """Build a ``PathEnv`` by joining *entries* with the separator.

        Empty entries are skipped.
        """
        path_env = cls()
        path_env.extend(entries)
        return path_env

    # -- Read access ---------------------------------------------------------

    def _read(self, segment: Segment) -> bytes:
        return self._buffer.slice(segment.offset, segment.stop)

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._segments)

    @property
    def is_empty(self) -> bool:
        """Return True if there are no entries."""
        return len(self._segments) == 0

    def get(self, index: int) -> bytes | None:
        """Return the entry at *index*, or None if out of range.

        Negative indices are out of range here; use ``env[index]`` for
        list-style indexing.
        """
        if 0 <= index < len(self._segments):
            return self._read(self._segments[index])
        return None

    def __getitem__(self, index: int) -> bytes:
        """Return the entry at *index* (negative indices count from the end).

        Raises:
            IndexError: If *index* is out of range.

        """
        return self._read(self._segments[index])

    @property
    def front(self) -> bytes | None:
        """Return the first entry, or None if empty."""
        return self.get(0)

    @property
    def back(self) -> bytes | None:
        """Return the last entry, or None if empty."""
        return self.get(len(self._segments) - 1)

    def contains(self, candidate: NativeString) -> bool:
        """Return True if *candidate* is one of the entries."""
        needle = to_bytes(candidate)
        data = self._buffer.data
        return any(
            segment.length == len(needle) and data.startswith(needle, segment.offset, segment.stop)
            for segment in self._segments
        )

    def __contains__(self, candidate: object) -> bool:
        """Support ``entry in path_env``."""
        return is_raw_text(candidate) and self.contains(candidate)

    def __iter__(self) -> PathEnvIter:
        """Iterate entries left to right."""
        return PathEnvIter(self)

    def __reversed__(self) -> Iterator[bytes]:
        """Iterate entries right to left."""
        return reversed(PathEnvIter(self))

    def paths(self) -> list[Path]:
        """Return the entries as ``pathlib.Path`` objects."""
        return [Path(to_native(entry)) for entry in self]

    @property
    def raw(self) -> bytes:
        """Return the literal buffer text, which may not be canonical."""
        return bytes(self._buffer)

    def stats(self) -> dict[str, Any]:
        """Return entry and buffer statistics.

        Returns:
            Dict with entries, length, capacity, and reallocations.

        """
        return {"entries": len(self._segments), **self._buffer.stats()}

    # -- Rendering -----------------------------------------------------------

    def render(self) -> bytes:
        """Return the canonical text: entries joined by one separator."""
        return separator.BYTES.join(self)

    def to_native(self) -> str:
        """Return the canonical text as a platform-native string."""
        return to_native(self.render())

    def __bytes__(self) -> bytes:
        """Return the canonical text as bytes."""
        return self.render()

    def __str__(self) -> str:
        """Return the canonical text as a string."""
        return self.to_native()

    def __repr__(self) -> str:
        """Show the decoded entries."""
        return f"PathEnv({list(self)!r})"

    # -- Mutation ------------------------------------------------------------

    def _touch(self) -> None:
        self._version += 1

    def _extend_cache(self, old_len: int) -> None:
        """Split only the bytes appended after *old_len* and cache them."""
        self._segments.extend(PathSplit(self._buffer.data, old_len).spans())

    def push_back(self, entry: NativeString) -> None:
        """Append *entry* to the end.  Empty entries are ignored."""
        data = to_bytes(entry)
        if not data:
            return
        old_len = len(self._buffer)
        if not self.is_empty:
            self._buffer.append(separator.BYTES)
        self._buffer.append(data)
        self._extend_cache(old_len)
        self._touch()

    def extend(self, entries: Iterable[NativeString]) -> None:
        """Append every entry in *entries* to the end.

        Space for the whole batch is reserved up front using
        ``reserve_heuristic`` and the iterable's length hint.  The batch is
        all or nothing: if any entry fails to convert, or *entries* itself
        raises, the value is left unchanged.

        Raises:
            TypeError: If *entries* is a single string rather than an
                iterable of entries, or if an entry is not raw text.

        """
        if is_raw_text(entries):
            msg = "extend() takes an iterable of entries; use push_back() for one entry"
            raise TypeError(msg)
        iterator = iter(entries)
        expected = operator.length_hint(iterator)

        # Nothing reaches the buffer until every entry has converted
        chunk = separator.BYTES.join(data for data in map(to_bytes, iterator) if data)
        if not chunk:
            return

        old_len = len(self._buffer)
        self._buffer.reserve(reserve_heuristic(expected))
        if not self.is_empty:
            self._buffer.append(separator.BYTES)
        self._buffer.append(chunk)
        self._extend_cache(old_len)
        self._touch()

    def push_front(self, entry: NativeString) -> None:
        """Prepend *entry* to the start.  Empty entries are ignored.

        Every existing byte moves right, so every cached offset is shifted.
        """
        data = to_bytes(entry)
        if not data:
            return
        chunk = data if self.is_empty else data + separator.BYTES
        inserted = [Segment.from_span(start, stop) for start, stop in PathSplit(chunk).spans()]
        self._buffer.insert_front(chunk)
        self._segments.shift(len(chunk))
        self._segments.extend_front(inserted)
        self._touch()

    def pop_back(self) -> None:
        """Remove the last entry (no-op when empty)."""
        self.pop_back_n(1)

    def pop_back_n(self, n: int) -> None:
        """Remove up to *n* entries from the end.

        Removing more entries than exist leaves the value empty.
        """
        survivors = max(len(self._segments) - max(n, 0), 0)
        if survivors == len(self._segments):
            return
        cut = 0 if survivors == 0 else self._segments[survivors - 1].stop
        self._buffer.truncate(cut)
        self._segments.truncate(survivors)
        self._touch()

    def pop_front(self) -> None:
        """Remove the first entry (no-op when empty)."""
        self.pop_front_n(1)

    def pop_front_n(self, n: int) -> None:
        """Remove up to *n* entries from the start.

        The remaining bytes move left, so every surviving offset shifts.
        Removing more entries than exist leaves the value empty.
        """
        count = min(max(n, 0), len(self._segments))
        if count == 0:
            return
        if count == len(self._segments):
            self.clear()
            return
        cut = self._segments[count].offset
        self._buffer.drop_front(cut)
        self._segments.drop_front(count)
        self._segments.shift(-cut)
        self._touch()

    def clear(self) -> None:
        """Remove all entries and text."""
        self._buffer.clear()
        self._segments.clear()
        self._touch()

    # -- Copying -------------------------------------------------------------

    def copy(self) -> PathEnv:
        """Return an independent copy.

        The buffer is duplicated; offsets are relative, so the segment
        cache is copied without adjustment.
        """
        clone = PathEnv()
        clone._buffer = self._buffer.copy()
        clone._segments = self._segments.copy()
        return clone

    def __copy__(self) -> PathEnv:
        """Support ``copy.copy``."""
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> PathEnv:
        """Support ``copy.deepcopy`` (there is nothing deeper to copy)."""
        return self.copy()

    # -- Comparison ----------------------------------------------------------

    def _compare(self, other: object) -> int | None:
        if isinstance(other, PathEnv):
            return compare_segments(self, other)
        if is_raw_text(other):
            return compare_segments(self, split(other))
        return None

    def __eq__(self, other: object) -> bool:
        """Return True if *other* decodes to the same entries."""
        if isinstance(other, PathEnv) and len(other) != len(self):
            return False
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: object) -> bool:
        """Order by decoded entries."""
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        """Order by decoded entries."""
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        """Order by decoded entries."""
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        """Order by decoded entries."""
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0


class PathEnvIter:
    """Double-ended iterator over the entries of a ``PathEnv``.

    ``len()`` reports exactly how many entries remain.  Mutating the
    ``PathEnv`` while iterating raises ``RuntimeError``, as ``dict`` does.
    """

    def __init__(self, path_env: PathEnv) -> None:
        """Start iterating over all of *path_env*."""
        self._path_env = path_env
        self._version = path_env._version  # noqa: SLF001
        self._front = 0
        self._back = len(path_env)

    def _check(self) -> None:
        if self._path_env._version != self._version:  # noqa: SLF001
            msg = "PathEnv mutated during iteration"
            raise RuntimeError(msg)

    def __iter__(self) -> PathEnvIter:
        """Return self (this object is its own iterator)."""
        return self

    def __next__(self) -> bytes:
        """Return the next entry from the front."""
        self._check()
        if self._front >= self._back:
            raise StopIteration
        entry = self._path_env[self._front]
        self._front += 1
        return entry

    def next_back(self) -> bytes | None:
        """Return the next entry from the back, or None when exhausted."""
        self._check()
        if self._front >= self._back:
            return None
        self._back -= 1
        return self._path_env[self._back]

    def __reversed__(self) -> Iterator[bytes]:
        """Iterate the remaining entries right to left."""
        return iter(self.next_back, None)

    def __len__(self) -> int:
        """Return the number of entries not yet yielded."""
        return self._back - self._front


def normalize(value: NativeString) -> str | bytes:
    """Remove redundant separators from a ``PATH`` value.

    Leading, trailing and repeated separators are dropped, leaving one
    separator between entries.  ``str`` input gives ``str`` output; any
    other input gives ``bytes``.  Applying it twice changes nothing.

    Args:
        value: The raw variable text.

    Returns:
        The canonical form of *value*.

    """
    result = separator.BYTES.join(split(value))
    if isinstance(value, str):
        return to_native(result)
    return result
