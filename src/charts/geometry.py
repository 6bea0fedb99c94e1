# This module holds the numeric helpers shared by the line, bar, and pie renderers.
# It exists so normalization and axis mapping are implemented once instead of per renderer.
# Every helper resolves degenerate inputs to a finite value instead of dividing by zero.
# The functions are pure and operate on plain floats.

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

DEFAULT_DEGENERATE_FRACTION = 0.5


def value_extent(values: Iterable[float]) -> tuple[float, float]:
    """Return `(min, max)` of `values` in a single pass."""

    iterator = iter(values)
    try:
        first = float(next(iterator))
    except StopIteration:
        raise ValueError("value_extent requires at least one value") from None

    minimum = maximum = first
    for raw in iterator:
        value = float(raw)
        if value < minimum:
            minimum = value
        elif value > maximum:
            maximum = value
    return minimum, maximum


def normalize(
    value: float,
    minimum: float,
    maximum: float,
    *,
    degenerate_fraction: float = DEFAULT_DEGENERATE_FRACTION,
) -> float:
    """Map `value` onto [0, 1] over `[minimum, maximum]`.

    A constant range (`maximum == minimum`) has no meaningful position, so every
    value maps to `degenerate_fraction`.
    """

    span = maximum - minimum
    if span == 0:
        return degenerate_fraction
    if math.isinf(span):
        # Finite bounds far enough apart overflow; halving keeps the ratio exact.
        return (value / 2 - minimum / 2) / (maximum / 2 - minimum / 2)
    return (value - minimum) / span


def scale_to_axis(fraction: float, length: float, *, inverted: bool = False) -> float:
    """Convert a fraction into pixels along an axis of `length`.

    Vertical axes pass `inverted=True` because surfaces put the origin at the top.
    """

    scaled = fraction * length
    if inverted:
        return length - scaled
    return scaled


def ratio(value: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return value / denominator


def even_positions(count: int, length: float) -> list[float]:
    """Spread `count` positions across `[0, length]`, endpoints included.

    A single position sits in the middle of the axis.
    """

    if count <= 0:
        return []
    if count == 1:
        return [length / 2]
    last = count - 1
    return [scale_to_axis(index / last, length) for index in range(count)]


def cumulative_fractions(values: Sequence[float], total: float) -> list[float]:
    """Running share of `total` after each value; the final entry is exactly 1.0."""

    fractions: list[float] = []
    running = 0.0
    for index, value in enumerate(values):
        running += value
        if index == len(values) - 1:
            fractions.append(1.0)
        else:
            fractions.append(running / total)
    return fractions


def magnitude_scaled(values: Sequence[float]) -> list[float]:
    """Divide every value by the largest magnitude so sums of finite values stay finite."""

    largest = max((abs(value) for value in values), default=0.0)
    if largest == 0:
        return [0.0 for _ in values]
    return [value / largest for value in values]
