"""Element-wise versions of clamping and range mapping for numpy arrays.

Each function matches its scalar counterpart in ``numkit.interp`` element by
element, including the half-open clamp selection and the degenerate-range
guard.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from numkit.core.types import SMALL_NUMBER

__all__ = ["clamp_array", "range_alpha_array", "mapped_value_array"]


def clamp_array(values: ArrayLike, min_value: ArrayLike, max_value: ArrayLike) -> np.ndarray:
    """Clamp every element of ``values`` into ``[min_value, max_value]``.

    Example:
        >>> clamp_array([-1.0, 0.5, 2.0], 0.0, 1.0)
        array([0. , 0.5, 1. ])
    """
    values = np.asarray(values, dtype=np.float64)
    return np.where(values < min_value, min_value, np.where(values < max_value, values, max_value))


def range_alpha_array(min_value: ArrayLike, max_value: ArrayLike, values: ArrayLike) -> np.ndarray:
    """Normalized position of each value inside ``[min_value, max_value]``.

    Bounds broadcast against ``values``. Where the span is within
    ``SMALL_NUMBER`` of zero the alpha is ``1.0`` for ``value >= max_value``
    and ``0.0`` otherwise.
    """
    values = np.asarray(values, dtype=np.float64)
    min_value = np.asarray(min_value, dtype=np.float64)
    max_value = np.asarray(max_value, dtype=np.float64)

    div = max_value - min_value
    degenerate = np.abs(div) <= SMALL_NUMBER
    safe_div = np.where(degenerate, 1.0, div)
    alpha = (values - min_value) / safe_div
    fallback = np.where(values >= max_value, 1.0, 0.0)
    return np.where(degenerate, fallback, alpha)


def mapped_value_array(
    in_min: ArrayLike,
    in_max: ArrayLike,
    out_min: ArrayLike,
    out_max: ArrayLike,
    values: ArrayLike,
    *,
    clamped: bool = False,
) -> np.ndarray:
    """Map each value from the input range to the output range.

    Args:
        in_min: Input range lower bound.
        in_max: Input range upper bound.
        out_min: Output range lower bound.
        out_max: Output range upper bound.
        values: Values to map.
        clamped: Clamp alpha to ``[0, 1]`` before interpolating.

    Returns:
        Array of mapped values (float64).
    """
    alpha = range_alpha_array(in_min, in_max, values)
    if clamped:
        alpha = clamp_array(alpha, 0.0, 1.0)
    out_min = np.asarray(out_min, dtype=np.float64)
    out_max = np.asarray(out_max, dtype=np.float64)
    return out_min + alpha * (out_max - out_min)
