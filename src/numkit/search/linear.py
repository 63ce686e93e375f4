"""Linear search for elements in a sequence.

Both helpers compare with ``==`` and return ``NOT_FOUND`` (-1) when there is
no match. Callers must check for it before using the result as an index.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from numkit.core.types import NOT_FOUND

__all__ = ["NOT_FOUND", "find_first", "find_nth"]

T = TypeVar("T")


def find_first(target: T, sequence: Sequence[T]) -> int:
    """Index of the first element equal to ``target``, or ``NOT_FOUND``.

    Example:
        >>> find_first(3, [1, 2, 3, 4, 3])
        2
        >>> find_first(9, [1, 2, 3])
        -1
    """
    for i, item in enumerate(sequence):
        if target == item:
            return i
    return NOT_FOUND


def find_nth(target: T, sequence: Sequence[T], nth: int) -> int:
    """Index of the ``nth`` (1-based) element equal to ``target``.

    Args:
        target: Element to look for.
        sequence: Sequence to scan in order.
        nth: Which occurrence to return, starting at 1. Values below 1 never
            match.

    Returns:
        The index, or ``NOT_FOUND`` if there are fewer than ``nth`` matches.

    Example:
        >>> find_nth(3, [1, 2, 3, 4, 3], 2)
        4
    """
    seen = 0
    for i, item in enumerate(sequence):
        if target == item:
            seen += 1
            if seen == nth:
                return i
    return NOT_FOUND
