"""Interpolation and range mapping.

This package contains:
- Linear interpolation, power easing and clamping
- Range alpha and value mapping between ranges
- numpy element-wise variants of the range mapper
"""

from __future__ import annotations

from numkit.interp.easing import clamp, ease_in, ease_in_out, ease_out, lerp
from numkit.interp.ranges import (
    mapped_value_clamped,
    mapped_value_unclamped,
    near_tolerance,
    range_alpha,
    remap,
)
from numkit.interp.vectorized import clamp_array, mapped_value_array, range_alpha_array

__all__ = [
    # Easing
    "lerp",
    "clamp",
    "ease_in",
    "ease_out",
    "ease_in_out",
    # Ranges
    "near_tolerance",
    "range_alpha",
    "mapped_value_unclamped",
    "mapped_value_clamped",
    "remap",
    # Arrays
    "clamp_array",
    "range_alpha_array",
    "mapped_value_array",
]
