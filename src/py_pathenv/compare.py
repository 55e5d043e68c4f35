"""Comparison — ordering ``PATH`` values by their entries, not their text.

Two ``PATH`` strings can differ byte-for-byte yet describe the same
search path: ``"/a:/b"``, ``"/a:/b:"`` and ``"::/a::/b"`` all decode to
``[/a, /b]``.  Comparisons therefore walk the decoded entries:

- Entries are compared pairwise with plain byte ordering.
- The first unequal pair decides.
- If one sequence runs out first, it is the smaller one.

This is ordinary lexicographic ordering, the same rule Python applies to
tuples, but done lazily so that comparing against raw text never builds
an intermediate container.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def compare_segments(left: Iterable[bytes], right: Iterable[bytes]) -> int:
    """Compare two entry sequences lexicographically.

    Args:
        left: Entries of the left operand.
        right: Entries of the right operand.

    Returns:
        ``-1`` if *left* sorts first, ``1`` if *right* does, ``0`` if they
        are equal.

    """
    right_iter = iter(right)
    for ours in left:
        theirs = next(right_iter, None)
        if theirs is None:
            return 1
        if ours != theirs:
            return -1 if ours < theirs else 1
    return 0 if next(right_iter, None) is None else -1
