from __future__ import annotations

from prop_confidence.factors.base import NEUTRAL_CONFIDENCE, FactorInfo, ScoringInputs
from prop_confidence.models import FactorResult, Prop
from prop_confidence.scoring_math import clamp

SIGNIFICANT_MOVE_POINTS = 2.0
SHARP_HIGH = 70.0
SHARP_LOW = 30.0


def analyze_market_efficiency(prop: Prop) -> FactorResult:
    """Score line movement and sharp-money pressure.

    Lopsided sharp action adds confidence whichever side it is on.
    """
    line_movement = prop.line_movement
    sharp_action = prop.sharp_action

    confidence = NEUTRAL_CONFIDENCE
    reasoning = "Market appears balanced."

    if abs(line_movement) > SIGNIFICANT_MOVE_POINTS:
        confidence += 10 if line_movement > 0 else -10
        direction = "up" if line_movement > 0 else "down"
        reasoning = f"Line moved {direction} {abs(line_movement):g} points."

    if sharp_action > SHARP_HIGH or sharp_action < SHARP_LOW:
        confidence += 10
        reasoning += " Sharp money indicating strong opinion."

    return FactorResult(
        confidence=clamp(confidence),
        reasoning=reasoning,
        details={"line_movement": line_movement, "sharp_action": sharp_action},
    )


class MarketEfficiencyFactor:
    info = FactorInfo(
        id="market_efficiency",
        name="Market Efficiency",
        weight=0.10,
        description="Line movement and sharp-money indicator.",
    )

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        return analyze_market_efficiency(inputs.prop)
