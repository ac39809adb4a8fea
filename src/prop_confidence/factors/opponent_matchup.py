from __future__ import annotations

from prop_confidence.factors.base import NEUTRAL_CONFIDENCE, FactorInfo, ScoringInputs
from prop_confidence.models import FactorResult, OpponentDefense, Player, Prop
from prop_confidence.scoring_math import clamp

ELITE_DEFENSE_MAX_RANK = 10
WEAK_DEFENSE_MIN_RANK = 20
GENEROUS_ALLOWED_THRESHOLD = 100.0


def analyze_opponent_matchup(
    player: Player, prop: Prop, opponent_defense: OpponentDefense
) -> FactorResult:
    """Score the opponent's defense against the player's position and stat type.

    The yards-allowed bonus ignores the bet direction: a generous defense adds
    confidence to unders as well as overs.
    """
    position = player.position
    stat_type = prop.type
    defense_rank = opponent_defense.rank_for(position)
    yards_allowed = opponent_defense.allowed_for(stat_type)
    touchdowns_allowed = opponent_defense.touchdowns_allowed_for(stat_type)

    confidence = NEUTRAL_CONFIDENCE
    if defense_rank <= ELITE_DEFENSE_MAX_RANK:
        confidence -= 15
    elif defense_rank >= WEAK_DEFENSE_MIN_RANK:
        confidence += 20
    if yards_allowed > GENEROUS_ALLOWED_THRESHOLD:
        confidence += 10

    return FactorResult(
        confidence=clamp(confidence),
        reasoning=(
            f"Opponent defense ranks {defense_rank}th vs {position}s. "
            f"Allows {yards_allowed:g} {stat_type} yards/game."
        ),
        details={
            "defense_rank": defense_rank,
            "yards_allowed": yards_allowed,
            "touchdowns_allowed": touchdowns_allowed,
        },
    )


class OpponentMatchupFactor:
    info = FactorInfo(
        id="opponent_matchup",
        name="Opponent Matchup",
        weight=0.20,
        description="Defensive rank vs position and stat volume allowed per game.",
    )

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        return analyze_opponent_matchup(inputs.player, inputs.prop, inputs.opponent_defense)
