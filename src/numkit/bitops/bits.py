"""Bit manipulation helpers for fixed-width integers.

Bit 0 is the least significant bit. Inputs are reduced to the target width
the way a C integer conversion would, so negative numbers show their
two's-complement pattern.
"""

from __future__ import annotations

from numkit.core.types import MASK32

__all__ = ["mask_bits", "reverse_bits", "dec_to_bin", "dec_to_bin32", "dec_to_bin16"]


def mask_bits(a: int, mask: int) -> int:
    """Keep only the bits of ``a`` that are set in ``mask``.

    Example:
        >>> bin(mask_bits(0b1100, 0b1010))
        '0b1000'
    """
    return a & mask & MASK32


def reverse_bits(a: int) -> int:
    """Reverse the order of the low 8 bits of ``a``.

    Works in three swap stages: nibbles, then bit pairs, then single bits.
    Only the low byte takes part; higher bits are dropped.

    Example:
        >>> bin(reverse_bits(0b11010010))
        '0b1001011'
    """
    # TODO: widen to a full 32-bit reversal once callers passing values above 0xFF are audited.
    a &= MASK32
    a = (a & 0xF0) >> 4 | (a & 0x0F) << 4
    a = (a & 0xCC) >> 2 | (a & 0x33) << 2
    a = (a & 0xAA) >> 1 | (a & 0x55) << 1
    return a


def dec_to_bin(value: int, width: int) -> str:
    """Render ``value`` as exactly ``width`` binary digits, most significant first.

    Raises:
        ValueError: If ``width`` is not positive.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return format(value & ((1 << width) - 1), f"0{width}b")


def dec_to_bin32(value: int) -> str:
    """32-character binary string of ``value`` as a signed 32-bit integer."""
    return dec_to_bin(value, 32)


def dec_to_bin16(value: int) -> str:
    """16-character binary string of ``value`` as a signed 16-bit integer."""
    return dec_to_bin(value, 16)
