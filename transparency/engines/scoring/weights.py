"""
Weight Table - per-stage contribution of each intensity level.

Each (stage, level) pair is configured independently; levels are not
interpolated. NONE is 0 for every stage. The HIGH column sums to 120, so the
calculator caps totals at 100.
"""

from typing import Any, Dict

from transparency.logging_config import get_logger
from transparency.schemas.disclosure import IntensityLevel, Stage

logger = get_logger(__name__)


WEIGHTS: Dict[Stage, Dict[IntensityLevel, int]] = {
    Stage.IDEATION: {
        IntensityLevel.NONE: 0,
        IntensityLevel.LOW: 8,
        IntensityLevel.MEDIUM: 18,
        IntensityLevel.HIGH: 25,
    },
    Stage.RESEARCH: {
        IntensityLevel.NONE: 0,
        IntensityLevel.LOW: 12,
        IntensityLevel.MEDIUM: 20,
        IntensityLevel.HIGH: 25,
    },
    Stage.TEXT_CREATION: {
        IntensityLevel.NONE: 0,
        IntensityLevel.LOW: 15,
        IntensityLevel.MEDIUM: 25,
        IntensityLevel.HIGH: 40,
    },
    Stage.VISUAL_CREATION: {
        IntensityLevel.NONE: 0,
        IntensityLevel.LOW: 15,
        IntensityLevel.MEDIUM: 20,
        IntensityLevel.HIGH: 30,
    },
}


def weight(stage: Any, level: Any) -> int:
    """
    Look up the weight for a stage at a level.

    Unknown stages or levels contribute 0 instead of raising, so a corrupted
    selection lowers the score rather than breaking the pipeline.
    """
    try:
        return WEIGHTS[Stage(stage)][IntensityLevel(level)]
    except (KeyError, ValueError):
        logger.debug(
            "Unknown weight lookup, contributing 0",
            extra={"stage": str(stage), "level": str(level)},
        )
        return 0


def max_score() -> int:
    """Raw table total with every stage at its heaviest level (before capping)."""
    return sum(max(levels.values()) for levels in WEIGHTS.values())
