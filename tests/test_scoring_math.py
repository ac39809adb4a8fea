from __future__ import annotations

import pytest

from prop_confidence.scoring_math import (
    clamp,
    direction_hit,
    hit_rate,
    mean,
    round_half_up,
    trend_estimate,
)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([], 0.0),
        ([5.0], 0.0),
        ([5.0, 50.0], 0.0),
        ([1.0, 2.0, 3.0], 0.1),
        ([10.0, 10.0, 10.0, 10.0], 0.0),
        ([70.0, 13.0, 35.0, 48.0, 41.0], -0.23),
    ],
)
def test_trend_estimate(values: list[float], expected: float) -> None:
    assert trend_estimate(values) == pytest.approx(expected)


@pytest.mark.parametrize(
    "values",
    [
        [0.0, 100.0, 200.0],
        [0.0, 1e6, 2e6, 3e6],
        [300.0, 150.0, 0.0],
        [-5e9, 0.0, 5e9, 1.0, -1.0],
    ],
)
def test_trend_estimate_is_bounded(values: list[float]) -> None:
    assert -1.0 <= trend_estimate(values) <= 1.0


def test_trend_estimate_saturates_at_unit_range() -> None:
    assert trend_estimate([0.0, 100.0, 200.0]) == 1.0
    assert trend_estimate([200.0, 100.0, 0.0]) == -1.0


@pytest.mark.parametrize(
    ("value", "line", "direction", "expected"),
    [
        (80.0, 79.5, "over", True),
        (79.5, 79.5, "over", False),
        (79.0, 79.5, "under", True),
        (79.5, 79.5, "under", False),
        (90.0, 79.5, "sideways", False),
    ],
)
def test_direction_hit(value: float, line: float, direction: str, expected: bool) -> None:
    assert direction_hit(value, line, direction) is expected


def test_hit_rate_and_mean_handle_empty_input() -> None:
    assert hit_rate([], 10.0, "over") == 0.0
    assert mean([]) == 0.0


def test_hit_rate_counts_direction_predicate() -> None:
    assert hit_rate([25.0, 19.0, 31.0, 28.0, 22.0], 22.5, "over") == pytest.approx(0.6)
    assert hit_rate([25.0, 19.0, 31.0, 28.0, 22.0], 22.5, "under") == pytest.approx(0.4)


def test_clamp_defaults_to_percent_range() -> None:
    assert clamp(-3.0) == 0.0
    assert clamp(104.5) == 100.0
    assert clamp(42.0) == 42.0
    assert clamp(3.0, -1.0, 1.0) == 1.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.5, 1), (2.5, 3), (57.35, 57), (53.55, 54), (60.49, 60), (0.0, 0), (100.0, 100)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
