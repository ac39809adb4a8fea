"""Immutable records passed into and returned from the scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DIRECTIONS: tuple[str, ...] = ("over", "under")
UNRANKED_DEFENSE_RANK = 50


@dataclass(frozen=True)
class HistoricalProp:
    line: float
    result: float
    type: str


@dataclass(frozen=True)
class Player:
    name: str
    team: str = ""
    position: str = ""
    recent_stats: tuple[float, ...] = ()
    season_stats: dict[str, float] = field(default_factory=dict)
    career_stats: dict[str, float] = field(default_factory=dict)
    historical_props: tuple[HistoricalProp, ...] = ()


@dataclass(frozen=True)
class Prop:
    type: str
    line: float
    direction: str
    odds: int | None = None
    market: str = ""
    line_movement: float = 0.0
    sharp_action: float = 50.0


@dataclass(frozen=True)
class OpponentDefense:
    """Opponent defensive context keyed by position and stat type."""

    ranks: dict[str, int] = field(default_factory=dict)
    allowed: dict[str, float] = field(default_factory=dict)
    touchdowns_allowed: dict[str, float] = field(default_factory=dict)
    extras: dict[str, float] = field(default_factory=dict)

    def rank_for(self, position: str) -> int:
        return self.ranks.get(position, UNRANKED_DEFENSE_RANK)

    def allowed_for(self, stat_type: str) -> float:
        return self.allowed.get(stat_type, 0.0)

    def touchdowns_allowed_for(self, stat_type: str) -> float:
        return self.touchdowns_allowed.get(stat_type, 0.0)


@dataclass(frozen=True)
class FactorResult:
    """One analyzer's verdict.

    `confidence` is None only for a factor that could not be evaluated; the
    aggregator skips such factors instead of scoring them as zero.
    """

    confidence: float | None
    reasoning: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"confidence": self.confidence, "reasoning": self.reasoning, **self.details}


@dataclass(frozen=True)
class ConfidenceReport:
    percentage: int
    analysis: dict[str, FactorResult]

    def to_dict(self) -> dict[str, Any]:
        return {
            "percentage": self.percentage,
            "analysis": {name: result.to_dict() for name, result in self.analysis.items()},
        }


@dataclass(frozen=True)
class PropCard:
    """A bettable prop as shown on the board: who, what line, against whom."""

    id: str
    league: str
    player: Player
    prop: Prop
    opponent: OpponentDefense
