from __future__ import annotations

import pytest

from numkit.core.config import LibraryConfig, set_config
from numkit.core.types import SMALL_NUMBER, Range
from numkit.interp.ranges import (
    mapped_value_clamped,
    mapped_value_unclamped,
    near_tolerance,
    range_alpha,
    remap,
)


def test_range_alpha_regular() -> None:
    assert range_alpha(0.0, 10.0, 2.5) == pytest.approx(0.25)
    assert range_alpha(10.0, 0.0, 2.5) == pytest.approx(0.75)
    assert range_alpha(0.0, 10.0, 20.0) == pytest.approx(2.0)


def test_range_alpha_degenerate_range() -> None:
    assert range_alpha(5, 5, 3) == 0.0
    assert range_alpha(5, 5, 7) == 1.0
    assert range_alpha(5, 5, 5) == 1.0


def test_range_alpha_degenerate_compares_against_max() -> None:
    # Span below the tolerance, value between the two bounds
    assert range_alpha(5.0, 5.0 + 5e-9, 5.0 + 2e-9) == 0.0
    assert range_alpha(5.0 + 5e-9, 5.0, 5.0 + 2e-9) == 1.0


def test_range_alpha_just_above_tolerance_divides() -> None:
    assert range_alpha(0.0, 1e-6, 5e-7) == pytest.approx(0.5)


def test_range_alpha_guard_ignores_configured_tolerance() -> None:
    previous = set_config(LibraryConfig(tolerance=1.0))
    try:
        assert range_alpha(0.0, 0.5, 0.25) == pytest.approx(0.5)
        assert near_tolerance(0.5)
    finally:
        set_config(previous)


def test_near_tolerance() -> None:
    assert near_tolerance(0.0)
    assert near_tolerance(SMALL_NUMBER)
    assert near_tolerance(-SMALL_NUMBER)
    assert not near_tolerance(1e-7)
    assert near_tolerance(0.05, 0.1)
    assert not near_tolerance(-0.2, 0.1)


def test_mapped_value_clamped_stays_in_output_bounds() -> None:
    assert mapped_value_clamped(0, 10, 0, 100, -5) == 0
    assert mapped_value_clamped(0, 10, 0, 100, 15) == 100
    assert mapped_value_clamped(0, 10, 0, 100, 2.5) == pytest.approx(25.0)


def test_mapped_value_unclamped_extrapolates() -> None:
    assert mapped_value_unclamped(0, 10, 0, 100, 15) == pytest.approx(150)
    assert mapped_value_unclamped(0, 10, 0, 100, -5) == pytest.approx(-50)
    assert mapped_value_unclamped(0, 10, 100, 0, 2.5) == pytest.approx(75.0)


def test_mapping_degenerate_input_range() -> None:
    assert mapped_value_unclamped(3, 3, -1, 1, 2) == -1
    assert mapped_value_unclamped(3, 3, -1, 1, 4) == 1


def test_remap_between_ranges() -> None:
    source = Range(0.0, 1.0)
    target = Range(-1.0, 1.0)
    assert remap(0.5, source, target) == pytest.approx(0.0)
    assert remap(2.0, source, target) == pytest.approx(3.0)
    assert remap(2.0, source, target, clamped=True) == pytest.approx(1.0)


def test_mapped_values_are_floats_for_integer_bounds() -> None:
    result = mapped_value_unclamped(0, 10, 0, 5, 3)
    assert result == pytest.approx(1.5)
    assert isinstance(result, float)
    assert mapped_value_clamped(0, 10, 0, 5, 3) == pytest.approx(1.5)
    assert remap(1, Range(0, 4), Range(0, 1)) == pytest.approx(0.25)
