# This test file validates the shared normalization and axis mapping helpers.
# It exists to pin down the degenerate-range fallbacks every renderer relies on.
# The cases cover constant ranges, zero denominators, and single-position axes.
# Pure float tests keep execution deterministic and quick.

from __future__ import annotations

import pytest

from src.charts.geometry import (
    cumulative_fractions,
    even_positions,
    magnitude_scaled,
    normalize,
    ratio,
    scale_to_axis,
    value_extent,
)


def test_normalize_maps_range_onto_unit_interval() -> None:
    assert normalize(0.0, 0.0, 10.0) == 0.0
    assert normalize(10.0, 0.0, 10.0) == 1.0
    assert normalize(2.5, 0.0, 10.0) == 0.25


def test_normalize_constant_range_uses_degenerate_fraction() -> None:
    assert normalize(5.0, 5.0, 5.0) == 0.5
    assert normalize(5.0, 5.0, 5.0, degenerate_fraction=0.0) == 0.0


def test_scale_to_axis_inverts_vertical_axis() -> None:
    assert scale_to_axis(0.25, 200.0) == 50.0
    assert scale_to_axis(0.25, 200.0, inverted=True) == 150.0
    assert scale_to_axis(1.0, 80.0, inverted=True) == 0.0


def test_value_extent_single_pass_and_empty_rejected() -> None:
    assert value_extent([3.0, -1.0, 7.5, 2.0]) == (-1.0, 7.5)
    assert value_extent([4.0]) == (4.0, 4.0)
    with pytest.raises(ValueError):
        value_extent([])


def test_ratio_returns_zero_for_zero_denominator() -> None:
    assert ratio(5.0, 0.0) == 0.0
    assert ratio(5.0, 20.0) == 0.25


def test_even_positions_centers_single_position() -> None:
    assert even_positions(0, 100.0) == []
    assert even_positions(1, 100.0) == [50.0]
    assert even_positions(3, 100.0) == [0.0, 50.0, 100.0]


def test_cumulative_fractions_end_exactly_at_one() -> None:
    fractions = cumulative_fractions([1.0, 1.0, 1.0], 3.0)
    assert fractions[-1] == 1.0
    assert fractions[0] == pytest.approx(1 / 3)


def test_normalize_stays_finite_when_span_overflows() -> None:
    assert normalize(-1e308, -1e308, 1e308) == 0.0
    assert normalize(1e308, -1e308, 1e308) == 1.0
    assert normalize(0.0, -1e308, 1e308) == 0.5


def test_magnitude_scaled_divides_by_largest_magnitude() -> None:
    assert magnitude_scaled([1e308, 1e308]) == [1.0, 1.0]
    assert magnitude_scaled([3.0, -6.0]) == [0.5, -1.0]
    assert magnitude_scaled([0.0, 0.0]) == [0.0, 0.0]
    assert magnitude_scaled([]) == []
