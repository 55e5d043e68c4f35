"""Split — lazy, bidirectional decomposition of a ``PATH`` value.

Splitting ``"/a:/b::/c:"`` on ``:`` naively gives ``["/a", "/b", "", "/c",
""]``.  The empty strings are meaningless for a search path, so
``PathSplit`` skips them and yields only ``/a``, ``/b`` and ``/c``.

Key properties:
    - **Lazy** — segments are found one at a time with ``bytes.find``;
      nothing is split up front.
    - **Double-ended** — ``next_back`` walks from the right using
      ``bytes.rfind``.  Both ends share one window (``start``/``end``), so
      mixing them never yields a segment twice.
    - **Offsets first** — ``next_span`` / ``next_back_span`` return
      ``(start, stop)`` pairs into the input.  ``PathEnv`` caches those
      pairs directly; only the public iterator copies bytes out.

Quoting is *not* interpreted: in ``"/a:/b"`` wrapped in double quotes the
separator still splits, giving ``"/a`` and ``/b"``.  Windows shells treat
quoted entries as a unit; this module deliberately does not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from py_pathenv import separator
from py_pathenv.native import NativeString, to_bytes

if TYPE_CHECKING:
    from collections.abc import Iterator

Span: TypeAlias = tuple[int, int]
Buffer: TypeAlias = bytes | bytearray


class PathSplit:
    """Iterator over the non-empty entries of a ``PATH`` value.

    Iterating forward yields ``bytes`` entries left to right;
    ``next_back`` and ``reversed()`` yield them right to left.  The
    iterator works on a window ``[start, end)`` of the data, which shrinks
    from whichever side is consumed.
    """

    def __init__(
        self,
        data: Buffer,
        start: int = 0,
        end: int | None = None,
        *,
        sep: int = separator.BYTE,
    ) -> None:
        """Create a split iterator over ``data[start:end]``.

        Args:
            data: The raw bytes to split.  Not copied.
            start: First byte of the window.
            end: One past the last byte of the window (default: the end).
            sep: The separator byte.

        """
        self._data = data
        self._start = start
        self._end = len(data) if end is None else end
        self._sep = sep

    def next_span(self) -> Span | None:
        """Return the offsets of the next entry from the front, or None."""
        data, sep = self._data, self._sep
        while self._start < self._end:
            begin = self._start
            i = data.find(sep, begin, self._end)
            if i == -1:
                self._start = self._end
                return (begin, self._end)
            self._start = i + 1
            if i > begin:
                return (begin, i)
        return None

    def next_back_span(self) -> Span | None:
        """Return the offsets of the next entry from the back, or None."""
        data, sep = self._data, self._sep
        while self._start < self._end:
            stop = self._end
            i = data.rfind(sep, self._start, stop)
            if i == -1:
                self._end = self._start
                return (self._start, stop)
            self._end = i
            if stop > i + 1:
                return (i + 1, stop)
        return None

    def spans(self) -> Iterator[Span]:
        """Yield the remaining entries as ``(start, stop)`` offsets."""
        return iter(self.next_span, None)

    def _slice(self, span: Span | None) -> bytes | None:
        if span is None:
            return None
        return bytes(self._data[span[0] : span[1]])

    def __iter__(self) -> PathSplit:
        """Return self (this object is its own iterator)."""
        return self

    def __next__(self) -> bytes:
        """Return the next entry from the front."""
        entry = self._slice(self.next_span())
        if entry is None:
            raise StopIteration
        return entry

    def next_back(self) -> bytes | None:
        """Return the next entry from the back, or None when exhausted."""
        return self._slice(self.next_back_span())

    def __reversed__(self) -> Iterator[bytes]:
        """Iterate the remaining entries right to left."""
        return iter(self.next_back, None)

    def last(self) -> bytes | None:
        """Return the final entry using a single backward step.

        The iterator is exhausted afterwards.
        """
        entry = self.next_back()
        self._start = self._end
        return entry

    def size_hint(self) -> tuple[int, int]:
        """Return ``(lower, upper)`` bounds on the remaining entry count.

        The upper bound is one more than the number of separators left in
        the window; it is exact when there are no empty runs.
        """
        return (0, self._data.count(self._sep, self._start, self._end) + 1)

    def __length_hint__(self) -> int:
        """Return the upper size bound, for ``operator.length_hint``."""
        return self.size_hint()[1]

    def copy(self) -> PathSplit:
        """Return an independent iterator at the same position."""
        return PathSplit(self._data, self._start, self._end, sep=self._sep)

    def __repr__(self) -> str:
        """Show the remaining window."""
        return f"PathSplit({bytes(self._data[self._start : self._end])!r})"


def split(value: NativeString, *, sep: int = separator.BYTE) -> PathSplit:
    """Return a ``PathSplit`` over the entries of *value*.

    Args:
        value: A ``PATH`` value as text, bytes-like data or ``os.PathLike``.
        sep: The separator byte (defaults to the platform's).

    """
    data = value if isinstance(value, (bytes, bytearray)) else to_bytes(value)
    return PathSplit(data, sep=sep)
