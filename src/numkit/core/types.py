"""Core type definitions and constants for numkit.

This module contains:
- Type aliases for numeric values
- Library-wide constants (tolerance, pi, 64-bit limits, not-found sentinel)
- Plain value containers: ranges and 2D/3D vectors
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

import numpy as np

__all__ = [
    "Number",
    "PI",
    "SMALL_NUMBER",
    "UINT64_MAX",
    "MASK64",
    "MASK32",
    "NOT_FOUND",
    "Range",
    "Vector2D",
    "Vector3D",
    "Vec2f32",
    "Vec2f64",
    "Vec3f32",
    "Vec3f64",
]

# Type alias for scalar numeric inputs
Number = Union[int, float]

PI = math.pi

# Tolerance below which a range span counts as zero
SMALL_NUMBER = 1e-8

UINT64_MAX = 0xFFFFFFFFFFFFFFFF
MASK64 = UINT64_MAX
MASK32 = 0xFFFFFFFF

# Returned by the search helpers when no match exists
NOT_FOUND = -1

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Range:
    """A closed numeric interval described by its two bounds.

    ``min`` may equal or exceed ``max``; degenerate ranges are valid values,
    not errors.

    Attributes:
        min: Lower bound (by convention).
        max: Upper bound (by convention).

    Example:
        >>> Range(0.0, 10.0).alpha(2.5)
        0.25
        >>> Range(5.0, 5.0).is_degenerate()
        True
    """

    min: float
    max: float

    @property
    def span(self) -> float:
        """Signed width ``max - min``."""
        return self.max - self.min

    def is_degenerate(self, tolerance: float = SMALL_NUMBER) -> bool:
        """Return True if the span is within ``tolerance`` of zero."""
        return abs(self.span) <= tolerance

    def alpha(self, value: float) -> float:
        """Normalized position of ``value`` inside this range.

        See ``numkit.interp.ranges.range_alpha`` for the degenerate-range rule.
        """
        from numkit.interp.ranges import range_alpha

        return range_alpha(self.min, self.max, value)


@dataclass(frozen=True)
class Vector2D(Generic[T]):
    """Plain 2-component aggregate. Carries no arithmetic."""

    x: T
    y: T


@dataclass(frozen=True)
class Vector3D(Generic[T]):
    """Plain 3-component aggregate. Carries no arithmetic."""

    x: T
    y: T
    z: T


# Conventional single/double precision specializations
Vec2f32 = Vector2D[np.float32]
Vec2f64 = Vector2D[np.float64]
Vec3f32 = Vector3D[np.float32]
Vec3f64 = Vector3D[np.float64]
