"""Tests for splitting a PATH value into entries.

``PathSplit`` yields the non-empty entries of a PATH value in order,
from either end.  The reference behaviour is "split on the separator and
drop empty strings".
"""

import operator

import pytest

from py_pathenv import separator
from py_pathenv.separator import PlatformFamily, separator_for
from py_pathenv.split import PathSplit, split

SEP = separator.STR
BIN_A = "/path/to/bin"
BIN_B = "/\u007f\u0080\u07ff\u0800\uffff\U00010000\U0010ffff/bin"

# Inputs covering empty, separator-only, boundary and doubled separators,
# multi-byte content and quoted entries.
_INPUTS = [
    "",
    BIN_A,
    BIN_B,
    SEP,
    f"{SEP}{SEP}",
    f"{SEP}{SEP}{BIN_A}",
    f"{SEP}{BIN_A}{SEP}",
    f"{BIN_A}{SEP}{SEP}",
    f"{BIN_A}{SEP}{BIN_B}",
    f"{SEP}{BIN_A}{SEP}{BIN_B}",
    f"{BIN_A}{SEP}{BIN_B}{SEP}",
    f"{SEP}{BIN_A}{SEP}{BIN_B}{SEP}",
    f'"{BIN_A}"{SEP}{BIN_B}',
    f'{BIN_A}{SEP}"{BIN_B}"',
    f'"{BIN_A}{SEP}{BIN_B}"',
    f'"{BIN_A}{SEP}"{SEP}{BIN_B}',
    f'{BIN_A}{SEP}"{SEP}{BIN_B}"',
]


def _reference(text: str) -> list[bytes]:
    """Split the obvious way: on every separator, dropping empties."""
    return [part for part in text.encode().split(separator.BYTES) if part]


class TestSplitScenarios:
    """Verify the basic decomposition rules."""

    def test_empty_input(self) -> None:
        """An empty value has no entries."""
        assert list(split("")) == []

    def test_only_separators(self) -> None:
        """A value made only of separators has no entries."""
        assert list(split(SEP * 3)) == []

    def test_skips_doubled_separator(self) -> None:
        """Empty runs between separators are skipped."""
        text = f"/a{SEP}/b{SEP}{SEP}/c"
        assert list(split(text)) == [b"/a", b"/b", b"/c"]

    def test_accepts_bytes_and_bytearray(self) -> None:
        """Bytes-like input splits the same as text."""
        text = f"/a{SEP}/b"
        assert list(split(text.encode())) == list(split(bytearray(text.encode()))) == [b"/a", b"/b"]

    def test_rejects_non_text(self) -> None:
        """Integers are not PATH values."""
        with pytest.raises(TypeError):
            split(42)  # type: ignore[arg-type]

    def test_custom_separator(self) -> None:
        """A different separator can be supplied explicitly."""
        semicolon = separator_for(PlatformFamily.WINDOWS)
        assert list(split(b"C:\\bin;;D:\\tools", sep=semicolon)) == [b"C:\\bin", b"D:\\tools"]


class TestSplitMatchesReference:
    """Verify forward and backward traversal against the reference split."""

    @pytest.mark.parametrize("text", _INPUTS)
    def test_forward(self, text: str) -> None:
        """Forward iteration matches the reference decomposition."""
        assert list(split(text)) == _reference(text)

    @pytest.mark.parametrize("text", _INPUTS)
    def test_backward_is_exact_reverse(self, text: str) -> None:
        """Reverse iteration yields the forward entries reversed."""
        assert list(reversed(split(text))) == list(reversed(list(split(text))))

    @pytest.mark.parametrize("text", _INPUTS)
    def test_last_matches_forward(self, text: str) -> None:
        """last() returns the final forward entry."""
        entries = list(split(text))
        assert split(text).last() == (entries[-1] if entries else None)

    @pytest.mark.parametrize("text", _INPUTS)
    def test_size_hint_bounds(self, text: str) -> None:
        """The entry count lies within the size hint."""
        lower, upper = split(text).size_hint()
        count = len(list(split(text)))
        assert lower <= count <= upper
        assert upper == text.count(SEP) + 1


class TestQuotedEntries:
    """Quotes are not interpreted: a quoted separator still splits."""

    def test_quoted_separator_splits(self) -> None:
        """A separator inside quotes produces two entries."""
        text = f'"{BIN_A}{SEP}{BIN_B}"'
        assert list(split(text)) == [f'"{BIN_A}'.encode(), f'{BIN_B}"'.encode()]

    def test_quotes_are_kept_verbatim(self) -> None:
        """Quote characters stay part of the entry."""
        text = f'"{BIN_A}"{SEP}{BIN_B}'
        assert list(split(text)) == [f'"{BIN_A}"'.encode(), BIN_B.encode()]


class TestDoubleEnded:
    """Verify mixing front and back traversal."""

    def test_front_and_back_meet(self) -> None:
        """Alternating ends never yields an entry twice."""
        entries = split(f"{SEP}/a{SEP}/b{SEP}{SEP}/c{SEP}")
        assert next(entries) == b"/a"
        assert entries.next_back() == b"/c"
        assert next(entries) == b"/b"
        assert entries.next_back() is None
        assert list(entries) == []

    def test_last_exhausts_iterator(self) -> None:
        """After last(), nothing remains."""
        entries = split(f"/a{SEP}/b")
        assert entries.last() == b"/b"
        assert list(entries) == []

    def test_spans_are_offsets_into_input(self) -> None:
        """Spans index the original data."""
        data = f"{SEP}/a{SEP}{SEP}/bc".encode()
        spans = list(split(data).spans())
        assert [data[start:stop] for start, stop in spans] == [b"/a", b"/bc"]

    def test_back_span(self) -> None:
        """next_back_span() reports the rightmost entry's offsets."""
        data = f"/a{SEP}/bc{SEP}".encode()
        span = PathSplit(data).next_back_span()
        assert span is not None
        assert data[span[0] : span[1]] == b"/bc"

    def test_window_bounds(self) -> None:
        """Only the bytes inside [start, end) are split."""
        data = f"/a{SEP}/b{SEP}/c".encode()
        assert list(PathSplit(data, 3, 5)) == [b"/b"]

    def test_copy_is_restartable(self) -> None:
        """A copy continues independently from the same position."""
        entries = split(f"/a{SEP}/b{SEP}/c")
        next(entries)
        clone = entries.copy()
        assert list(entries) == [b"/b", b"/c"]
        assert list(clone) == [b"/b", b"/c"]

    def test_length_hint(self) -> None:
        """operator.length_hint reports the upper bound."""
        expected = 3
        assert operator.length_hint(split(f"/a{SEP}/b{SEP}/c")) == expected
