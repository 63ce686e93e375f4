"""Interpolation, easing and clamping.

This module provides the numeric core that the range mapper builds on:
- ``lerp``: linear interpolation with free extrapolation
- ``ease_in`` / ``ease_out`` / ``ease_in_out``: power-curve easing
- ``clamp``: half-open clamping of a value into ``[min, max]``

None of these validate ``alpha`` or ``exp``. Non-finite inputs produce
non-finite outputs instead of raising.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from numkit.core.protocols import InterpT, OrderT

__all__ = ["lerp", "clamp", "ease_in", "ease_out", "ease_in_out"]


def _power(base: Any, exp: Any) -> Any:
    # nan for negative base with fractional exp, inf on overflow
    with np.errstate(all="ignore"):
        result = np.power(np.float64(base) if np.isscalar(base) else base, exp)
    return result


def lerp(a: InterpT, b: InterpT, alpha: Any) -> InterpT:
    """Linear interpolation between ``a`` and ``b``.

    Args:
        a: Value at ``alpha == 0``.
        b: Value at ``alpha == 1``.
        alpha: Interpolation factor. Values outside ``[0, 1]`` extrapolate.

    Returns:
        ``a + alpha * (b - a)``. When both endpoints are Python ints and the
        result is a finite scalar, it is truncated toward zero to an ``int``.

    Example:
        >>> lerp(0.0, 10.0, 0.25)
        2.5
        >>> lerp(0.0, 10.0, 1.5)
        15.0
        >>> lerp(0, 10, 0.25)
        2
    """
    result = a + alpha * (b - a)
    if type(a) is int and type(b) is int and np.isscalar(result) and math.isfinite(result):
        return int(result)
    return result


def clamp(value: OrderT, min_value: OrderT, max_value: OrderT) -> OrderT:
    """Constrain ``value`` to ``[min_value, max_value]``.

    ``value`` is returned only when ``min_value <= value < max_value``;
    anything at or past ``max_value`` yields ``max_value`` itself.

    Example:
        >>> clamp(1.5, 0.0, 1.0)
        1.0
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
    """
    if value < min_value:
        return min_value
    if value < max_value:
        return value
    return max_value


def ease_in(a: InterpT, b: InterpT, alpha: float, exp: float) -> InterpT:
    """Interpolate with acceleration: ``lerp(a, b, alpha ** exp)``.

    ``exp == 1`` is plain linear interpolation; larger values start slower.
    """
    return lerp(a, b, _power(alpha, exp))


def ease_out(a: InterpT, b: InterpT, alpha: float, exp: float) -> InterpT:
    """Interpolate with deceleration: ``lerp(a, b, 1 - (1 - alpha) ** exp)``."""
    return lerp(a, b, 1.0 - _power(1.0 - alpha, exp))


def ease_in_out(a: InterpT, b: InterpT, alpha: float, exp: float) -> InterpT:
    """Ease in over the first half and ease out over the second.

    Below ``alpha == 0.5`` the first half is rescaled to ``[0, 1]``, eased in
    and halved; from ``0.5`` on, the second half is rescaled, eased out,
    halved and offset by ``0.5``. Both halves use the same ``exp``, which
    makes the curve continuous and point-symmetric around ``(0.5, 0.5)``.

    Args:
        a: Start value.
        b: End value.
        alpha: Interpolation factor, conventionally in ``[0, 1]``.
        exp: Easing exponent.

    Returns:
        The eased interpolation between ``a`` and ``b``. An array ``alpha``
        is eased element-wise.
    """
    if not np.isscalar(alpha):
        alpha = np.asarray(alpha, dtype=np.float64)
        first = ease_in(0.0, 1.0, alpha * 2.0, exp) * 0.5
        second = ease_out(0.0, 1.0, alpha * 2.0 - 1.0, exp) * 0.5 + 0.5
        return lerp(a, b, np.where(alpha < 0.5, first, second))
    if alpha < 0.5:
        shaped = ease_in(0.0, 1.0, alpha * 2.0, exp) * 0.5
    else:
        shaped = ease_out(0.0, 1.0, alpha * 2.0 - 1.0, exp) * 0.5 + 0.5
    return lerp(a, b, shaped)
