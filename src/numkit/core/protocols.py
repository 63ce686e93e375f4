"""Protocol definitions for numkit's generic functions.

This module contains Protocol classes describing what a value must support to
be used with:
- Interpolation and easing (``Interpolable``)
- Clamping (``Orderable``)
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = [
    "Interpolable",
    "Orderable",
    "InterpT",
    "OrderT",
]


@runtime_checkable
class Interpolable(Protocol):
    """Protocol for values that can be linearly interpolated.

    The value must support subtraction from a value of the same kind,
    addition of a scaled difference, and scaling by a float from the left
    (``alpha * (b - a)``). Built-in numbers and numpy arrays satisfy it.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __rmul__(self, other: Any) -> Any: ...


@runtime_checkable
class Orderable(Protocol):
    """Protocol for values ordered by ``<``."""

    def __lt__(self, other: Any) -> bool: ...


InterpT = TypeVar("InterpT", bound=Interpolable)
OrderT = TypeVar("OrderT", bound=Orderable)
