"""Smoke tests to verify the package imports and exposes its public API."""

from __future__ import annotations

import numkit


def test_import_numkit() -> None:
    """Verify that every name in ``numkit.__all__`` resolves."""
    for name in numkit.__all__:
        assert getattr(numkit, name) is not None


def test_top_level_round_trip() -> None:
    assert numkit.mapped_value_clamped(0, 10, 0, 100, 15) == 100
    assert numkit.find_nth(3, [1, 2, 3, 4, 3], 2) == 4
    assert numkit.dec_to_bin16(5) == "0000000000000101"
    assert numkit.LehmerStream(seed=0).next_int() == numkit.mix(1)
