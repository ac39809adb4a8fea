from __future__ import annotations

from prop_confidence.factors.base import NEUTRAL_CONFIDENCE, FactorInfo, ScoringInputs
from prop_confidence.models import FactorResult
from prop_confidence.providers import VenueConditions
from prop_confidence.scoring_math import clamp


def analyze_venue(venue: VenueConditions) -> FactorResult:
    confidence = NEUTRAL_CONFIDENCE
    reasoning = "Standard venue conditions."

    if venue.is_home:
        confidence += 8
        reasoning = "Home field advantage provides +8% confidence boost."

    if venue.dome:
        confidence += 5
        reasoning += " Dome venue favors passing performance."

    return FactorResult(
        confidence=clamp(confidence),
        reasoning=reasoning,
        details={"venue_data": venue.to_dict()},
    )


class VenueFactor:
    info = FactorInfo(
        id="venue_factors",
        name="Venue",
        weight=0.15,
        description="Home advantage and dome from the venue provider.",
    )

    def analyze(self, inputs: ScoringInputs) -> FactorResult:
        return analyze_venue(inputs.venue)
