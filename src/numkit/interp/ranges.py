"""Range mapping built on the interpolation core.

This module provides:
- ``near_tolerance``: near-zero test used to avoid division by zero
- ``range_alpha``: normalized position of a value inside a range
- ``mapped_value_unclamped`` / ``mapped_value_clamped``: project a value from
  one range into another
- ``remap``: the same projection between two ``Range`` objects

A range whose span is within ``SMALL_NUMBER`` of zero is never divided by.
Its alpha is ``1.0`` when ``value >= max_value`` and ``0.0`` otherwise.
"""

from __future__ import annotations

from numkit.core.config import get_config
from numkit.core.types import SMALL_NUMBER, Number, Range
from numkit.interp.easing import clamp, lerp

__all__ = [
    "near_tolerance",
    "range_alpha",
    "mapped_value_unclamped",
    "mapped_value_clamped",
    "remap",
]


def near_tolerance(value: Number, error_tolerance: float | None = None) -> bool:
    """Return True if ``|value| <= error_tolerance``.

    Args:
        value: Value to test.
        error_tolerance: Tolerance. Defaults to the active
            ``LibraryConfig.tolerance`` (``SMALL_NUMBER`` unless changed).
    """
    if error_tolerance is None:
        error_tolerance = get_config().tolerance
    return abs(value) <= error_tolerance


def range_alpha(min_value: Number, max_value: Number, value: Number) -> float:
    """Return how far ``value`` lies between ``min_value`` and ``max_value``.

    Example:
        >>> range_alpha(0.0, 10.0, 2.5)
        0.25
        >>> range_alpha(5.0, 5.0, 3.0)
        0.0
        >>> range_alpha(5.0, 5.0, 7.0)
        1.0
    """
    div = max_value - min_value
    if near_tolerance(div, SMALL_NUMBER):
        return 1.0 if value >= max_value else 0.0
    return (value - min_value) / div


def mapped_value_unclamped(
    in_min: Number, in_max: Number, out_min: Number, out_max: Number, value: Number
) -> float:
    """Map ``value`` from ``[in_min, in_max]`` to ``[out_min, out_max]``.

    Values outside the input range extrapolate past the output range.
    """
    return lerp(float(out_min), float(out_max), range_alpha(in_min, in_max, value))


def mapped_value_clamped(
    in_min: Number, in_max: Number, out_min: Number, out_max: Number, value: Number
) -> float:
    """Map ``value`` like ``mapped_value_unclamped`` but clamp alpha to ``[0, 1]``.

    The result stays within ``[out_min, out_max]`` when ``out_min <= out_max``.
    """
    alpha = clamp(range_alpha(in_min, in_max, value), 0.0, 1.0)
    return lerp(float(out_min), float(out_max), alpha)


def remap(value: Number, source: Range, target: Range, *, clamped: bool = False) -> float:
    """Map ``value`` from ``source`` into ``target``.

    Args:
        value: Value expressed in ``source`` coordinates.
        source: Input range.
        target: Output range.
        clamped: Keep the result inside ``target``.

    Returns:
        The mapped value.
    """
    mapper = mapped_value_clamped if clamped else mapped_value_unclamped
    return mapper(source.min, source.max, target.min, target.max, value)
