"""Sample NFL and NBA prop cards used by the demo board and regression tests."""

from __future__ import annotations

import copy
from typing import Any

from prop_confidence.models import PropCard
from prop_confidence.normalize import normalize_cards

SAMPLE_LEAGUES: tuple[str, ...] = ("nfl", "nba")

_NFL_CARDS: list[dict[str, Any]] = [
    {
        "id": "lamar-jackson-rush",
        "player": {
            "name": "Lamar Jackson",
            "team": "Baltimore Ravens",
            "position": "QB",
            "recentStats": [70, 13, 35, 48, 41],
            "seasonStats": {"rushing": 41.5},
            "careerStats": {"rushing": 85.3},
            "historicalProps": [
                {"line": 79.5, "result": 82, "type": "rushing"},
                {"line": 79.5, "result": 65, "type": "rushing"},
                {"line": 79.5, "result": 94, "type": "rushing"},
            ],
        },
        "prop": {
            "type": "rushing",
            "line": 79.5,
            "direction": "under",
            "odds": -110,
            "market": "Rushing Yards",
        },
        "opponent": {"ranks": {"QB": 12}, "rushingAllowed": 89, "rushingTDsAllowed": 2},
    },
    {
        "id": "derrick-henry-rush",
        "player": {
            "name": "Derrick Henry",
            "team": "Baltimore Ravens",
            "position": "RB",
            "recentStats": [84, 102, 65, 78, 73],
            "seasonStats": {"rushing": 72.9},
            "careerStats": {"rushing": 89.2},
            "historicalProps": [
                {"line": 85.5, "result": 78, "type": "rushing"},
                {"line": 85.5, "result": 92, "type": "rushing"},
                {"line": 85.5, "result": 68, "type": "rushing"},
            ],
        },
        "prop": {
            "type": "rushing",
            "line": 85.5,
            "direction": "under",
            "odds": -105,
            "market": "Rushing Yards",
        },
        "opponent": {"ranks": {"RB": 8}, "rushingAllowed": 95, "rushingTDsAllowed": 3},
    },
    {
        "id": "jaylen-waddle-rec",
        "player": {
            "name": "Jaylen Waddle",
            "team": "Miami Dolphins",
            "position": "WR",
            "recentStats": [99, 15, 95, 110, 48],
            "seasonStats": {"receiving": 72.0},
            "careerStats": {"receiving": 68.5},
            "historicalProps": [
                {"line": 97.5, "result": 105, "type": "receiving"},
                {"line": 97.5, "result": 89, "type": "receiving"},
                {"line": 97.5, "result": 102, "type": "receiving"},
            ],
        },
        "prop": {
            "type": "receiving",
            "line": 97.5,
            "direction": "over",
            "odds": -110,
            "market": "Receiving Yards",
        },
        "opponent": {"ranks": {"WR": 15}, "receivingAllowed": 112, "receivingTDsAllowed": 4},
    },
]

_NBA_CARDS: list[dict[str, Any]] = [
    {
        "id": "lebron-points",
        "player": {
            "name": "LeBron James",
            "team": "Los Angeles Lakers",
            "position": "SF",
            "recentStats": [
                {"points": 25},
                {"points": 19},
                {"points": 31},
                {"points": 28},
                {"points": 22},
            ],
            "seasonStats": {"points": 24.8},
            "careerStats": {"points": 27.2},
            "historicalProps": [
                {"line": 22.5, "result": 26, "type": "points"},
                {"line": 22.5, "result": 21, "type": "points"},
                {"line": 22.5, "result": 29, "type": "points"},
            ],
        },
        "prop": {
            "type": "points",
            "line": 22.5,
            "direction": "over",
            "odds": -115,
            "market": "Total Points",
        },
        "opponent": {"ranks": {"SF": 18}, "pointsAllowed": 108.5, "pace": 102.3},
    },
    {
        "id": "giannis-rebounds",
        "player": {
            "name": "Giannis Antetokounmpo",
            "team": "Milwaukee Bucks",
            "position": "PF",
            "recentStats": [
                {"rebounds": 14},
                {"rebounds": 11},
                {"rebounds": 16},
                {"rebounds": 13},
                {"rebounds": 15},
            ],
            "seasonStats": {"rebounds": 13.2},
            "careerStats": {"rebounds": 11.8},
            "historicalProps": [
                {"line": 12.5, "result": 14, "type": "rebounds"},
                {"line": 12.5, "result": 11, "type": "rebounds"},
                {"line": 12.5, "result": 16, "type": "rebounds"},
            ],
        },
        "prop": {
            "type": "rebounds",
            "line": 12.5,
            "direction": "over",
            "odds": -108,
            "market": "Total Rebounds",
        },
        "opponent": {"ranks": {"PF": 22}, "reboundsAllowed": 44.2, "pace": 99.8},
    },
]

_SAMPLE_PAYLOADS: dict[str, list[dict[str, Any]]] = {"nfl": _NFL_CARDS, "nba": _NBA_CARDS}


def _resolve_leagues(league: str) -> list[str]:
    normalized = league.strip().lower()
    if normalized in ("", "all"):
        return list(SAMPLE_LEAGUES)
    if normalized not in _SAMPLE_PAYLOADS:
        options = ",".join(("all", *SAMPLE_LEAGUES))
        raise ValueError(f"unknown league: {league} (options: {options})")
    return [normalized]


def sample_payloads(league: str = "all") -> list[dict[str, Any]]:
    """Raw card payloads; copies, so callers may mutate them freely."""
    out: list[dict[str, Any]] = []
    for name in _resolve_leagues(league):
        for payload in _SAMPLE_PAYLOADS[name]:
            item = copy.deepcopy(payload)
            item["league"] = name
            out.append(item)
    return out


def sample_cards(league: str = "all") -> list[PropCard]:
    return normalize_cards(sample_payloads(league))
