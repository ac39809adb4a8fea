from __future__ import annotations

from prop_confidence.factors.base import FactorInfo, ScoringInputs
from prop_confidence.models import FactorResult, Player, Prop
from prop_confidence.scoring_math import clamp, hit_rate, mean, trend_estimate

RECENT_WINDOW = 5
HIT_RATE_POINTS = 60.0
TREND_POINTS = 20.0
CLEAR_PATTERN_GAP = 20.0
CLEAR_PATTERN_BONUS = 10.0


def trend_label(trend: float) -> str:
    # A flat trend reads as declining.
    return "improving" if trend > 0 else "declining"


def analyze_recent_performance(player: Player, prop: Prop) -> FactorResult:
    """Score the last few games against the line."""
    games = list(player.recent_stats[-RECENT_WINDOW:])
    games_analyzed = len(games)
    if games_analyzed == 0:
        return FactorResult(
            confidence=0.0,
            reasoning="No recent games available to analyze.",
            details={
                "hit_rate": 0.0,
                "average_performance": 0.0,
                "trend": 0.0,
                "games_analyzed": 0,
            },
        )

    rate = hit_rate(games, prop.line, prop.direction)
    average = mean(games)
    trend = trend_estimate(games)

    confidence = rate * HIT_RATE_POINTS + abs(trend) * TREND_POINTS
    if abs(average - prop.line) > CLEAR_PATTERN_GAP:
        confidence += CLEAR_PATTERN_BONUS

    return FactorResult(
        confidence=clamp(confidence),
        reasoning=(
            f"Hit rate: {rate * 100:.0f}% in last {games_analyzed} games. "
            f"Trend: {trend_label(trend)}."
        ),
        details={
            "hit_rate": rate,
            "average_performance": average,
            "trend": trend,
            "games_analyzed": games_analyzed,
        },
    )


class RecentPerformanceFactor:
    info = FactorInfo(
        id="recent_performance",
        name="Recent Performance",
        weight=0.25,
        description="Hit rate, average and trend over the last five games.",
    )

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        return analyze_recent_performance(inputs.player, inputs.prop)
