from __future__ import annotations

from prop_confidence.factors.base import NEUTRAL_CONFIDENCE, FactorInfo, ScoringInputs
from prop_confidence.models import FactorResult
from prop_confidence.providers import WeatherConditions
from prop_confidence.scoring_math import clamp

HIGH_WIND_MPH = 15.0
FREEZING_F = 32.0
HOT_F = 85.0


def analyze_weather(conditions: WeatherConditions) -> FactorResult:
    confidence = NEUTRAL_CONFIDENCE
    reasoning = "Clear conditions, minimal weather impact."

    if conditions.wind_speed_mph > HIGH_WIND_MPH:
        confidence -= 10
        reasoning = f"High winds ({conditions.wind_speed_mph:g} mph) may impact performance."

    if conditions.temperature_f < FREEZING_F or conditions.temperature_f > HOT_F:
        confidence -= 5
        reasoning += f" Extreme temperatures ({conditions.temperature_f:g}°F) may affect play."

    return FactorResult(
        confidence=clamp(confidence),
        reasoning=reasoning,
        details={"conditions": conditions.to_dict()},
    )


class WeatherFactor:
    info = FactorInfo(
        id="weather_factors",
        name="Weather",
        weight=0.10,
        description="Wind and temperature extremes from the weather provider.",
    )

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        return analyze_weather(inputs.weather)
