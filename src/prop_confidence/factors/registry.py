from __future__ import annotations

from collections.abc import Iterable

from prop_confidence.factors.base import FactorAnalyzer, normalize_factor_id
from prop_confidence.factors.historical_trends import HistoricalTrendsFactor
from prop_confidence.factors.market_efficiency import MarketEfficiencyFactor
from prop_confidence.factors.opponent_matchup import OpponentMatchupFactor
from prop_confidence.factors.recent_performance import RecentPerformanceFactor
from prop_confidence.factors.venue import VenueFactor
from prop_confidence.factors.weather import WeatherFactor

FACTOR_ALIASES = {
    "recent": "recent_performance",
    "matchup": "opponent_matchup",
    "historical": "historical_trends",
    "weather": "weather_factors",
    "venue": "venue_factors",
    "market": "market_efficiency",
}


def _registry() -> dict[str, FactorAnalyzer]:
    factors: Iterable[FactorAnalyzer] = [
        RecentPerformanceFactor(),
        OpponentMatchupFactor(),
        HistoricalTrendsFactor(),
        WeatherFactor(),
        VenueFactor(),
        MarketEfficiencyFactor(),
    ]
    out: dict[str, FactorAnalyzer] = {}
    for factor in factors:
        factor_id = normalize_factor_id(factor.info.id)
        if factor_id in out:
            raise ValueError(f"duplicate factor id: {factor_id}")
        out[factor_id] = factor
    return out


def resolve_factor_id(factor_id: str) -> str:
    normalized = normalize_factor_id(factor_id)
    return FACTOR_ALIASES.get(normalized, normalized)


def list_factors() -> list[FactorAnalyzer]:
    """All factors in aggregation order."""
    return list(_registry().values())


def factor_weights() -> dict[str, float]:
    return {factor_id: factor.info.weight for factor_id, factor in _registry().items()}


def get_factor(factor_id: str) -> FactorAnalyzer:
    normalized = resolve_factor_id(factor_id)
    registry = _registry()
    factor = registry.get(normalized)
    if factor is None:
        options = ",".join(sorted(registry.keys()))
        raise ValueError(f"unknown factor id: {factor_id} (options: {options})")
    return factor
