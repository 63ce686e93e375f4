"""Bit manipulation helpers."""

from __future__ import annotations

from numkit.bitops.bits import dec_to_bin, dec_to_bin16, dec_to_bin32, mask_bits, reverse_bits

__all__ = ["mask_bits", "reverse_bits", "dec_to_bin", "dec_to_bin32", "dec_to_bin16"]
