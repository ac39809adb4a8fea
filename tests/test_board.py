from __future__ import annotations

import pytest

from prop_confidence.board import (
    build_board,
    confidence_level,
    filter_by_position,
    find_prop,
    headline,
    key_factors,
    render_analysis_markdown,
    render_board_lines,
    scored_prop_payload,
)
from prop_confidence.models import Prop
from prop_confidence.samples import sample_cards


@pytest.fixture()
def board():
    return build_board(sample_cards())


def test_build_board_scores_every_card(board) -> None:
    assert [item.id for item in board] == [
        "lamar-jackson-rush",
        "derrick-henry-rush",
        "jaylen-waddle-rec",
        "lebron-points",
        "giannis-rebounds",
    ]
    assert [item.percentage for item in board] == [57, 54, 54, 54, 61]


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        ("all", 5),
        ("", 5),
        ("ALL", 5),
        ("QB", 1),
        ("qb", 1),
        ("TE", 0),
    ],
)
def test_filter_by_position(board, position: str, expected: int) -> None:
    assert len(filter_by_position(board, position)) == expected


def test_find_prop(board) -> None:
    found = find_prop(board, "giannis-rebounds")

    assert found is not None
    assert found.card.player.name == "Giannis Antetokounmpo"
    assert find_prop(board, "nobody") is None


@pytest.mark.parametrize(
    ("percentage", "level"),
    [(100, "High"), (70, "High"), (69, "Medium"), (55, "Medium"), (54, "Low"), (0, "Low")],
)
def test_confidence_level(percentage: int, level: str) -> None:
    assert confidence_level(percentage) == level


def test_headline_falls_back_to_stat_type() -> None:
    assert headline(Prop(type="rushing", line=79.5, direction="under", market="Rushing Yards")) == (
        "UNDER 79.5 Rushing Yards"
    )
    assert headline(Prop(type="points", line=25.0, direction="over")) == "OVER 25 points"


def test_key_factors_for_lamar(board) -> None:
    lamar = find_prop(board, "lamar-jackson-rush")

    assert key_factors(lamar) == [
        "Recent performance trend: Declining",
        "Opponent difficulty: Tough matchup",
        "Historical success rate: 33% on similar props",
    ]


def test_render_board_lines(board) -> None:
    lines = render_board_lines(board[:1])

    assert lines == [
        "lamar-jackson-rush\tLamar Jackson\tQB\tUNDER 79.5 Rushing Yards\t57%\tMedium"
    ]


def test_scored_prop_payload(board) -> None:
    payload = scored_prop_payload(board[0])

    assert payload["id"] == "lamar-jackson-rush"
    assert payload["league"] == "nfl"
    assert payload["confidence"] == 57
    assert payload["level"] == "Medium"
    assert payload["analysis"]["venue_factors"]["confidence"] == 58.0
    assert payload["analysis"]["recent_performance"]["games_analyzed"] == 5


def test_render_analysis_markdown(board) -> None:
    text = render_analysis_markdown(board[0])

    assert text.startswith("# Lamar Jackson - Rushing Yards\n")
    assert "- confidence: `57%` (Medium)" in text
    assert "## Recent Performance" in text
    assert "Hit rate: 100% in last 5 games. Trend: declining." in text
    assert "## Opponent Matchup" in text
    assert "## Historical Performance" in text
    assert "| venue_factors | 58 | Home field advantage provides +8% confidence boost. |" in text
    assert "- Opponent difficulty: Tough matchup" in text
