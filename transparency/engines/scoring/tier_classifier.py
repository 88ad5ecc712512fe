"""
Tier Classifier - Maps a score to its disclosure tier.

Tiers (inclusive bands):
- 0-20: Minimal AI Usage
- 21-45: Moderate AI Usage
- 46-70: Significant AI Usage
- 71-100: High AI Usage
"""

from typing import List, Sequence

from transparency.logging_config import get_logger
from transparency.schemas.disclosure import Tier

logger = get_logger(__name__)


TIERS: List[Tier] = [
    Tier(min_score=0, max_score=20, label="Minimal AI Usage", color="#2ecc71", glyph="🟢"),
    Tier(min_score=21, max_score=45, label="Moderate AI Usage", color="#f1c40f", glyph="🟡"),
    Tier(min_score=46, max_score=70, label="Significant AI Usage", color="#e67e22", glyph="🟠"),
    Tier(min_score=71, max_score=100, label="High AI Usage", color="#e74c3c", glyph="🔴"),
]


class TierClassifier:
    """
    Classifies scores against an ordered list of bands.

    The bands must partition 0-100. A score outside every band falls back to
    the first tier so the badge always renders.
    """

    SCORE_MIN = 0
    SCORE_MAX = 100

    def __init__(self, tiers: Sequence[Tier] = tuple(TIERS)):
        if not tiers:
            raise ValueError("TierClassifier needs at least one tier")
        self.tiers = list(tiers)

    def classify(self, score: int) -> Tier:
        """Return the first tier whose band contains the score."""
        for tier in self.tiers:
            if tier.contains(score):
                return tier

        logger.warning(
            "Score outside all tier bands, falling back to lowest tier (invariant violation)",
            extra={"score": score, "fallback_tier": self.tiers[0].label},
        )
        return self.tiers[0]

    def find_gaps_and_overlaps(self) -> List[int]:
        """Scores in range that match zero or several bands."""
        problems = []
        for score in range(self.SCORE_MIN, self.SCORE_MAX + 1):
            matches = sum(1 for tier in self.tiers if tier.contains(score))
            if matches != 1:
                problems.append(score)
        return problems

    def validate_bands(self) -> bool:
        """True when the bands partition SCORE_MIN..SCORE_MAX exactly."""
        return not self.find_gaps_and_overlaps()


_default_classifier = TierClassifier()


def classify(score: int) -> Tier:
    """Classify against the default tier table."""
    return _default_classifier.classify(score)
