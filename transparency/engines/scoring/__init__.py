"""
Scoring Engine - Weight table, score calculation and tier classification.
"""

from transparency.engines.scoring.weights import (
    WEIGHTS,
    weight,
    max_score,
)
from transparency.engines.scoring.score_calculator import (
    ScoreCalculator,
    calculate_score,
)
from transparency.engines.scoring.tier_classifier import (
    TIERS,
    TierClassifier,
    classify,
)
from transparency.schemas.disclosure import DisclosureRecord, DisclosureResult


def evaluate(record: DisclosureRecord) -> DisclosureResult:
    """Score and classify a record in one step."""
    score = calculate_score(record.selection)
    return DisclosureResult(record=record, score=score, tier=classify(score))


__all__ = [
    "WEIGHTS",
    "weight",
    "max_score",
    "ScoreCalculator",
    "calculate_score",
    "TIERS",
    "TierClassifier",
    "classify",
    "evaluate",
]
