"""Vectorized Lehmer mixer over numpy ``uint64`` arrays.

The arithmetic wraps modulo 2**64 exactly like the scalar ``mix``, so
``mix_array(seeds)[i] == mix(int(seeds[i]))`` for every element.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from numkit.core.types import MASK64, UINT64_MAX
from numkit.prng.lehmer import FIRST_MULTIPLIER, SECOND_MULTIPLIER, SEED_OFFSET

__all__ = ["mix_array", "mix_float_array", "mix_bool_array", "seed_range"]

_SHIFT = np.uint64(32)


def seed_range(start: int, count: int) -> np.ndarray:
    """Return ``count`` consecutive uint64 seeds beginning at ``start``."""
    return np.arange(count, dtype=np.uint64) + np.uint64(start)


def mix_array(seeds: ArrayLike) -> np.ndarray:
    """Hash every seed in ``seeds``.

    Args:
        seeds: Integers of any shape. Anything other than a uint64 array is
            reduced modulo 2**64 first, as ``mix`` does.

    Returns:
        uint64 array with the same shape.
    """
    if isinstance(seeds, np.ndarray) and seeds.dtype == np.uint64:
        state = seeds
    else:
        raw = np.asarray(seeds, dtype=object)
        reduced = (int(seed) & MASK64 for seed in raw.flat)
        state = np.fromiter(reduced, dtype=np.uint64, count=raw.size).reshape(raw.shape)
    with np.errstate(over="ignore"):
        state = state + np.uint64(SEED_OFFSET)
        tmp = state * np.uint64(FIRST_MULTIPLIER)
        state = (tmp >> _SHIFT) ^ tmp
        tmp = state * np.uint64(SECOND_MULTIPLIER)
        return (tmp >> _SHIFT) ^ tmp


def mix_float_array(seeds: ArrayLike) -> np.ndarray:
    """Floats in ``[0.0, 1.0]``, element-wise ``mix_float``."""
    return mix_array(seeds).astype(np.float64) / float(UINT64_MAX)


def mix_bool_array(seeds: ArrayLike) -> np.ndarray:
    """Booleans, element-wise ``mix_bool``."""
    return (mix_array(seeds) & np.uint64(1)).astype(bool)
