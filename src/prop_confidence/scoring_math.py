"""Shared clamp, hit-rate and trend helpers for factor analyzers."""

from __future__ import annotations

import math
from collections.abc import Sequence

MIN_TREND_POINTS = 3
TREND_SCALE = 10.0


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Bound a value to [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


def direction_hit(value: float, line: float, direction: str) -> bool:
    """Return True when `value` beats `line` in the bet direction."""
    if direction == "over":
        return value > line
    if direction == "under":
        return value < line
    return False


def hit_rate(values: Sequence[float], line: float, direction: str) -> float:
    """Fraction of values that satisfy the direction predicate; 0 for no values."""
    if not values:
        return 0.0
    hits = sum(1 for value in values if direction_hit(value, line, direction))
    return hits / len(values)


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def trend_estimate(values: Sequence[float]) -> float:
    """Least-squares slope of (index, value), scaled into [-1, 1].

    Fewer than three points carry no usable trend and return 0.
    """
    n = len(values)
    if n < MIN_TREND_POINTS:
        return 0.0
    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_x2 = 0.0
    for index, value in enumerate(values):
        sum_x += index
        sum_y += value
        sum_xy += index * value
        sum_x2 += index * index
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return 0.0
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    return clamp(slope / TREND_SCALE, -1.0, 1.0)
