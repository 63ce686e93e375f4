"""Deterministic Lehmer-style integer mixer.

A two-round multiply/xor-shift hash of a 64-bit seed. It is a fast,
reproducible source of pseudo-random values and is not cryptographically
secure. The same seed gives the same output on every platform and run.

Every step is a bijection on 64-bit integers (both multipliers are odd), so
distinct seeds never collide.
"""

from __future__ import annotations

from numkit.core.types import MASK32, MASK64, UINT64_MAX

__all__ = [
    "SEED_OFFSET",
    "FIRST_MULTIPLIER",
    "SECOND_MULTIPLIER",
    "mix",
    "mix_float",
    "mix_bool",
]

SEED_OFFSET = 0xE120FC15
FIRST_MULTIPLIER = 0x4A39B70D
SECOND_MULTIPLIER = 0x12FAD5C9


def mix(seed: int) -> int:
    """Hash ``seed`` to a 64-bit unsigned integer.

    Args:
        seed: Any integer. It is reduced modulo 2**64 first, so negative
            seeds wrap like a C ``uint64_t`` conversion.

    Returns:
        An integer in ``[0, 2**64)``.

    Example:
        >>> mix(0)
        10913028842234356992
        >>> mix(1)
        10623002060555559689
    """
    state = ((seed & MASK64) + SEED_OFFSET) & MASK64
    tmp = (state * FIRST_MULTIPLIER) & MASK64
    state = ((tmp >> 32) & MASK32) ^ tmp
    tmp = (state * SECOND_MULTIPLIER) & MASK64
    return ((tmp >> 32) & MASK32) ^ tmp


def mix_float(seed: int) -> float:
    """Return ``mix(seed) / UINT64_MAX`` as a float in ``[0.0, 1.0]``."""
    return float(mix(seed)) / float(UINT64_MAX)


def mix_bool(seed: int) -> bool:
    """Return True when ``mix(seed)`` is odd."""
    return mix(seed) % 2 != 0
