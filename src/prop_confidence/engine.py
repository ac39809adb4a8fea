"""Confidence engine: run every factor and combine them into one percentage."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from prop_confidence.factors.base import ScoringInputs
from prop_confidence.factors.registry import factor_weights, list_factors
from prop_confidence.models import ConfidenceReport, FactorResult, OpponentDefense, Player, Prop
from prop_confidence.providers import (
    StaticVenueProvider,
    StaticWeatherProvider,
    VenueProvider,
    WeatherProvider,
)
from prop_confidence.scoring_math import clamp, round_half_up

logger = logging.getLogger(__name__)


def analyze_factors(inputs: ScoringInputs) -> dict[str, FactorResult]:
    """Run each registered factor on the same inputs."""
    return {factor.info.id: factor.analyze(inputs) for factor in list_factors()}


def weighted_confidence(
    analysis: Mapping[str, FactorResult], weights: Mapping[str, float]
) -> float:
    """Weighted sum of factor confidences before clamping.

    Factors without a confidence, or without a weight, contribute nothing. Their
    weight is dropped, not spread over the remaining factors.
    """
    total = 0.0
    for factor_id, result in analysis.items():
        if result.confidence is None:
            continue
        total += result.confidence * weights.get(factor_id, 0.0)
    return total


def aggregate(analysis: Mapping[str, FactorResult], weights: Mapping[str, float]) -> int:
    return round_half_up(clamp(weighted_confidence(analysis, weights)))


def score(
    player: Player,
    prop: Prop,
    opponent_defense: OpponentDefense,
    *,
    weather: WeatherProvider | None = None,
    venue: VenueProvider | None = None,
) -> ConfidenceReport:
    """Score one prop for one player against one opponent."""
    weather_provider = StaticWeatherProvider() if weather is None else weather
    venue_provider = StaticVenueProvider() if venue is None else venue
    inputs = ScoringInputs(
        player=player,
        prop=prop,
        opponent_defense=opponent_defense,
        weather=weather_provider.conditions(player=player, prop=prop),
        venue=venue_provider.conditions(player=player, prop=prop),
    )

    analysis = analyze_factors(inputs)
    weights = factor_weights()
    percentage = aggregate(analysis, weights)

    if logger.isEnabledFor(logging.DEBUG):
        total = weighted_confidence(analysis, weights)
        for factor_id, result in analysis.items():
            logger.debug("%s %s: %s=%s", player.name, prop.type, factor_id, result.confidence)
        logger.debug(
            "%s %s %s %s: weighted=%.4f percentage=%d",
            player.name,
            prop.type,
            prop.direction,
            prop.line,
            total,
            percentage,
        )
    return ConfidenceReport(percentage=percentage, analysis=analysis)
