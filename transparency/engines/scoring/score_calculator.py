"""
Score Calculator - Sums the weight table over a selection.
"""

from typing import Dict

from transparency.engines.scoring.weights import weight
from transparency.schemas.disclosure import Selection, Stage


class ScoreCalculator:
    """
    Turns a Selection into the 0-100 transparency score.

    The score is derived on demand and never cached, so it cannot drift from
    the selection it came from.
    """

    SCORE_MIN = 0
    SCORE_MAX = 100

    @classmethod
    def breakdown(cls, selection: Selection) -> Dict[Stage, int]:
        """Per-stage weight contributions, in stage order."""
        return {stage: weight(stage, level) for stage, level in selection.items()}

    @classmethod
    def raw_total(cls, selection: Selection) -> int:
        """Uncapped weight sum, rounded to the nearest integer."""
        return int(round(sum(cls.breakdown(selection).values())))

    @classmethod
    def calculate(cls, selection: Selection) -> int:
        """
        Calculate the score for a selection.

        The weight table can sum past 100 (all stages at "high" is 120), so
        the total is capped to SCORE_MIN..SCORE_MAX.
        """
        return max(cls.SCORE_MIN, min(cls.SCORE_MAX, cls.raw_total(selection)))


def calculate_score(selection: Selection) -> int:
    """Module-level shortcut for ScoreCalculator.calculate."""
    return ScoreCalculator.calculate(selection)
