from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from prop_confidence.models import FactorResult, OpponentDefense, Player, Prop
from prop_confidence.providers import VenueConditions, WeatherConditions

NEUTRAL_CONFIDENCE = 50.0


def normalize_factor_id(value: str) -> str:
    raw = value.strip().lower().replace("-", "_")
    if not raw:
        raise ValueError("factor id is required")
    allowed = set("abcdefghijklmnopqrstuvwxyz0123456789_")
    if any(ch not in allowed for ch in raw):
        raise ValueError(f"invalid factor id: {value}")
    return raw


@dataclass(frozen=True)
class FactorInfo:
    id: str
    name: str
    weight: float
    description: str


@dataclass(frozen=True)
class ScoringInputs:
    """Everything one scoring call looks at, with provider conditions resolved."""

    player: Player
    prop: Prop
    opponent_defense: OpponentDefense
    weather: WeatherConditions
    venue: VenueConditions


class FactorAnalyzer(Protocol):
    info: FactorInfo

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        raise NotImplementedError
