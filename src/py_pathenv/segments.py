"""Segment cache — the decoded entries of a ``PATH`` buffer.

A **segment** is one non-empty entry, stored as an ``(offset, length)``
pair relative to the start of the owning ``PathBuffer``.  The cache is a
``list`` of segments in buffer order:

- Indexing anywhere is O(1), so walking the cache from either end is O(n).
- The back grows and shrinks in amortised O(1).
- Front edits are O(n), but they already shift every offset, so they
  rebuild the list anyway.

Why offsets instead of copies?
    Copying each entry out would double the memory and force the cache to
    be rebuilt whenever the buffer changes.  Offsets stay valid when the
    buffer reallocates or is copied; only front insertion and removal move
    bytes, and then every offset shifts by the same amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Segment:
    """One non-empty entry, located by offset and length."""

    offset: int
    length: int

    @property
    def stop(self) -> int:
        """Return the offset one past the last byte."""
        return self.offset + self.length

    @classmethod
    def from_span(cls, start: int, stop: int, *, base: int = 0) -> Segment:
        """Build a segment from ``(start, stop)`` offsets plus *base*."""
        return cls(offset=start + base, length=stop - start)

    def shifted(self, delta: int) -> Segment:
        """Return this segment moved by *delta* bytes."""
        return Segment(offset=self.offset + delta, length=self.length)


class SegmentCache:
    """Ordered, double-ended list of segments."""

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        """Create a cache, optionally pre-populated."""
        self._segments: list[Segment] = list(segments)

    def __len__(self) -> int:
        """Return the number of cached segments."""
        return len(self._segments)

    def __getitem__(self, index: int) -> Segment:
        """Return the segment at *index* (negative indices allowed)."""
        return self._segments[index]

    def __iter__(self) -> Iterator[Segment]:
        """Iterate segments left to right."""
        return iter(self._segments)

    def __reversed__(self) -> Iterator[Segment]:
        """Iterate segments right to left."""
        return reversed(self._segments)

    def extend(self, spans: Iterable[tuple[int, int]], *, base: int = 0) -> None:
        """Append segments for *spans*, each offset by *base*."""
        self._segments.extend(Segment.from_span(start, stop, base=base) for start, stop in spans)

    def extend_front(self, segments: list[Segment]) -> None:
        """Prepend *segments*, keeping their given order."""
        self._segments[:0] = segments

    def truncate(self, count: int) -> None:
        """Keep only the first *count* segments."""
        del self._segments[max(count, 0) :]

    def drop_front(self, count: int) -> None:
        """Remove up to *count* segments from the front."""
        del self._segments[: max(count, 0)]

    def shift(self, delta: int) -> None:
        """Move every segment by *delta* bytes.

        Needed only when bytes are inserted or removed *before* the
        cached segments.  O(n) in the number of segments.
        """
        if delta:
            self._segments = [segment.shifted(delta) for segment in self._segments]

    def clear(self) -> None:
        """Remove every segment."""
        self._segments.clear()

    def copy(self) -> SegmentCache:
        """Return an independent cache with the same segments."""
        return SegmentCache(self._segments)
