from __future__ import annotations

from prop_confidence.factors.base import NEUTRAL_CONFIDENCE, FactorInfo, ScoringInputs
from prop_confidence.models import FactorResult, HistoricalProp, Player, Prop
from prop_confidence.scoring_math import clamp, hit_rate

SIMILAR_LINE_TOLERANCE = 5.0
STRONG_HIT_RATE = 0.6
ELITE_HIT_RATE = 0.8
IMPROVING_SEASON_RATIO = 1.1


def season_vs_career(player: Player, stat_type: str) -> float:
    """Season average over career average; 1.0 when there is no career baseline."""
    season_average = player.season_stats.get(stat_type, 0.0)
    career_average = player.career_stats.get(stat_type, 0.0)
    if career_average == 0:
        return 1.0
    return season_average / career_average


def similar_props(player: Player, prop: Prop) -> list[HistoricalProp]:
    return [
        past
        for past in player.historical_props
        if past.type == prop.type and abs(past.line - prop.line) <= SIMILAR_LINE_TOLERANCE
    ]


def analyze_historical_trends(player: Player, prop: Prop) -> FactorResult:
    """Score past props near this line and current season form."""
    ratio = season_vs_career(player, prop.type)
    matches = similar_props(player, prop)
    # Recorded results are judged against today's line, not the line they were posted at.
    historical_hit_rate = hit_rate([past.result for past in matches], prop.line, prop.direction)

    confidence = NEUTRAL_CONFIDENCE
    if historical_hit_rate > STRONG_HIT_RATE:
        confidence += 20
    if historical_hit_rate > ELITE_HIT_RATE:
        confidence += 15
    if ratio > IMPROVING_SEASON_RATIO:
        confidence += 10

    return FactorResult(
        confidence=clamp(confidence),
        reasoning=(
            f"Historical hit rate: {historical_hit_rate * 100:.0f}% on similar props. "
            f"Season vs career: {ratio * 100:.0f}%."
        ),
        details={
            "season_vs_career": ratio,
            "historical_hit_rate": historical_hit_rate,
            "similar_props": len(matches),
        },
    )


class HistoricalTrendsFactor:
    info = FactorInfo(
        id="historical_trends",
        name="Historical Trends",
        weight=0.20,
        description="Hit rate on similar past props plus season-vs-career form.",
    )

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        return analyze_historical_trends(inputs.player, inputs.prop)
