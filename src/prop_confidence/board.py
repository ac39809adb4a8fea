"""Scored prop board: filtering, lookup and the Markdown analysis brief."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from prop_confidence.engine import score
from prop_confidence.factors.recent_performance import trend_label
from prop_confidence.models import ConfidenceReport, FactorResult, Prop, PropCard
from prop_confidence.providers import VenueProvider, WeatherProvider

ALL_POSITIONS = "all"
HIGH_CONFIDENCE_MIN = 70
MEDIUM_CONFIDENCE_MIN = 55
TOUGH_MATCHUP_MAX_RANK = 15


@dataclass(frozen=True)
class ScoredProp:
    card: PropCard
    report: ConfidenceReport

    @property
    def id(self) -> str:
        return self.card.id

    @property
    def percentage(self) -> int:
        return self.report.percentage


def build_board(
    cards: Iterable[PropCard],
    *,
    weather: WeatherProvider | None = None,
    venue: VenueProvider | None = None,
) -> list[ScoredProp]:
    return [
        ScoredProp(
            card=card,
            report=score(card.player, card.prop, card.opponent, weather=weather, venue=venue),
        )
        for card in cards
    ]


def filter_by_position(props: Sequence[ScoredProp], position: str) -> list[ScoredProp]:
    wanted = position.strip()
    if not wanted or wanted.lower() == ALL_POSITIONS:
        return list(props)
    wanted = wanted.upper()
    return [item for item in props if item.card.player.position == wanted]


def find_prop(props: Iterable[ScoredProp], prop_id: str) -> ScoredProp | None:
    for item in props:
        if item.id == prop_id:
            return item
    return None


def confidence_level(percentage: int) -> str:
    if percentage >= HIGH_CONFIDENCE_MIN:
        return "High"
    if percentage >= MEDIUM_CONFIDENCE_MIN:
        return "Medium"
    return "Low"


def headline(prop: Prop) -> str:
    return f"{prop.direction.upper()} {prop.line:g} {prop.market or prop.type}".strip()


def _factor(report: ConfidenceReport, factor_id: str) -> FactorResult | None:
    return report.analysis.get(factor_id)


def key_factors(scored: ScoredProp) -> list[str]:
    """Short risk-assessment bullets for the brief."""
    out: list[str] = []
    recent = _factor(scored.report, "recent_performance")
    if recent is not None:
        trend = float(recent.details.get("trend", 0.0))
        out.append(f"Recent performance trend: {trend_label(trend).capitalize()}")
    matchup = _factor(scored.report, "opponent_matchup")
    if matchup is not None:
        rank = int(matchup.details.get("defense_rank", 0))
        difficulty = "Tough matchup" if rank <= TOUGH_MATCHUP_MAX_RANK else "Favorable matchup"
        out.append(f"Opponent difficulty: {difficulty}")
    historical = _factor(scored.report, "historical_trends")
    if historical is not None:
        rate = float(historical.details.get("historical_hit_rate", 0.0))
        out.append(f"Historical success rate: {rate * 100:.0f}% on similar props")
    return out


def scored_prop_payload(scored: ScoredProp) -> dict[str, Any]:
    card = scored.card
    return {
        "id": card.id,
        "league": card.league,
        "player": {
            "name": card.player.name,
            "team": card.player.team,
            "position": card.player.position,
        },
        "prop": {
            "type": card.prop.type,
            "line": card.prop.line,
            "direction": card.prop.direction,
            "odds": card.prop.odds,
            "market": card.prop.market,
        },
        "confidence": scored.percentage,
        "level": confidence_level(scored.percentage),
        "analysis": scored.report.to_dict()["analysis"],
    }


def render_board_lines(props: Iterable[ScoredProp]) -> list[str]:
    lines: list[str] = []
    for item in props:
        card = item.card
        lines.append(
            "\t".join(
                [
                    card.id,
                    card.player.name,
                    card.player.position,
                    headline(card.prop),
                    f"{item.percentage}%",
                    confidence_level(item.percentage),
                ]
            )
        )
    return lines


def render_analysis_markdown(scored: ScoredProp) -> str:
    card = scored.card
    report = scored.report
    lines: list[str] = []
    lines.append(f"# {card.player.name} - {card.prop.market or card.prop.type}")
    lines.append("")
    lines.append(f"- team: `{card.player.team}`")
    lines.append(f"- position: `{card.player.position}`")
    lines.append(f"- prop: `{headline(card.prop)}`")
    if card.prop.odds is not None:
        lines.append(f"- odds: `{card.prop.odds}`")
    lines.append(f"- confidence: `{report.percentage}%` ({confidence_level(report.percentage)})")
    lines.append("")

    recent = _factor(report, "recent_performance")
    if recent is not None:
        lines.append("## Recent Performance")
        lines.append("")
        lines.append(f"- hit_rate: `{float(recent.details.get('hit_rate', 0.0)) * 100:.0f}%`")
        lines.append(f"- games_analyzed: `{recent.details.get('games_analyzed', 0)}`")
        average = float(recent.details.get("average_performance", 0.0))
        lines.append(f"- average_performance: `{average:.1f}`")
        lines.append("")
        lines.append(recent.reasoning)
        lines.append("")

    matchup = _factor(report, "opponent_matchup")
    if matchup is not None:
        lines.append("## Opponent Matchup")
        lines.append("")
        lines.append(f"- defense_rank: `{matchup.details.get('defense_rank', '')}`")
        lines.append(f"- yards_allowed: `{matchup.details.get('yards_allowed', 0)}`")
        lines.append("")
        lines.append(matchup.reasoning)
        lines.append("")

    historical = _factor(report, "historical_trends")
    if historical is not None:
        rate = float(historical.details.get("historical_hit_rate", 0.0))
        ratio = float(historical.details.get("season_vs_career", 1.0))
        lines.append("## Historical Performance")
        lines.append("")
        lines.append(f"- historical_hit_rate: `{rate * 100:.0f}%`")
        lines.append(f"- season_vs_career: `{ratio * 100:.0f}%`")
        lines.append(f"- similar_props: `{historical.details.get('similar_props', 0)}`")
        lines.append("")
        lines.append(historical.reasoning)
        lines.append("")

    lines.append("## External Factors")
    lines.append("")
    lines.append("| Factor | Confidence | Reasoning |")
    lines.append("| --- | --- | --- |")
    for factor_id in ("weather_factors", "venue_factors", "market_efficiency"):
        result = _factor(report, factor_id)
        if result is None:
            continue
        shown = "n/a" if result.confidence is None else f"{result.confidence:g}"
        lines.append(f"| {factor_id} | {shown} | {result.reasoning} |")
    lines.append("")

    lines.append("## Risk Assessment")
    lines.append("")
    for bullet in key_factors(scored):
        lines.append(f"- {bullet}")
    lines.append("")
    return "\n".join(lines)
