"""
Disclosure schemas - stages, intensity levels, selections and computed results.
"""

from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Stage(str, Enum):
    """Content-production stages a creator discloses AI usage for."""
    IDEATION = "ideation"
    RESEARCH = "research"
    TEXT_CREATION = "textCreation"
    VISUAL_CREATION = "visualCreation"


class IntensityLevel(str, Enum):
    """How heavily AI assisted a stage."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Stage -> Selection attribute name
_STAGE_FIELDS = {
    Stage.IDEATION: "ideation",
    Stage.RESEARCH: "research",
    Stage.TEXT_CREATION: "text_creation",
    Stage.VISUAL_CREATION: "visual_creation",
}


def coerce_stage(value: Any) -> Optional[Stage]:
    """Return the Stage for a raw value, or None if it is not a known stage."""
    try:
        return Stage(value)
    except ValueError:
        return None


def coerce_level(value: Any) -> IntensityLevel:
    """Return the IntensityLevel for a raw value; anything unknown is NONE."""
    if value is None:
        return IntensityLevel.NONE
    try:
        return IntensityLevel(value)
    except ValueError:
        return IntensityLevel.NONE


class Selection(BaseModel):
    """
    One intensity level per stage.

    Total over Stage: an unselected or unrecognised level is NONE, never missing.
    Serialises with the stage wire names (textCreation, visualCreation).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ideation: IntensityLevel = IntensityLevel.NONE
    research: IntensityLevel = IntensityLevel.NONE
    text_creation: IntensityLevel = Field(default=IntensityLevel.NONE, alias="textCreation")
    visual_creation: IntensityLevel = Field(default=IntensityLevel.NONE, alias="visualCreation")

    @field_validator("*", mode="before")
    @classmethod
    def _default_to_none(cls, value: Any) -> IntensityLevel:
        return coerce_level(value)

    @classmethod
    def from_mapping(cls, levels: Mapping[Any, Any]) -> "Selection":
        """Build from a {stage: level} mapping; unknown stages are ignored."""
        values = {}
        for raw_stage, raw_level in levels.items():
            stage = coerce_stage(raw_stage)
            if stage is not None:
                values[_STAGE_FIELDS[stage]] = raw_level
        return cls(**values)

    def level(self, stage: Stage) -> IntensityLevel:
        return getattr(self, _STAGE_FIELDS[Stage(stage)])

    def __getitem__(self, stage: Stage) -> IntensityLevel:
        return self.level(stage)

    def items(self) -> Iterator[Tuple[Stage, IntensityLevel]]:
        """Yield (stage, level) pairs in stage order."""
        for stage in Stage:
            yield stage, self.level(stage)

    def to_wire(self) -> dict[str, str]:
        return {stage.value: level.value for stage, level in self.items()}

    def has_any_usage(self) -> bool:
        return any(level != IntensityLevel.NONE for _, level in self.items())


class DisclosureRecord(BaseModel):
    """
    Point-in-time snapshot of the form inputs.

    Rebuilt from the input state on every recomputation; never mutated.
    """

    model_config = ConfigDict(frozen=True)

    creator_name: str = ""
    content_reference: str = ""
    selection: Selection = Field(default_factory=Selection)

    @field_validator("creator_name", "content_reference", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()


class Tier(BaseModel):
    """A band of the score range with its display attributes."""

    model_config = ConfigDict(frozen=True)

    min_score: int
    max_score: int
    label: str
    color: str
    glyph: str

    def contains(self, score: int) -> bool:
        return self.min_score <= score <= self.max_score


class DisclosureResult(BaseModel):
    """Record plus its derived score and tier; the input to every encoder."""

    model_config = ConfigDict(frozen=True)

    record: DisclosureRecord
    score: int
    tier: Tier


class RenderedBadge(BaseModel):
    """Escaped, ready-to-embed pieces of the live badge."""

    model_config = ConfigDict(frozen=True)

    creator_html: str
    reference_html: str
    tier_line: str
    accent_color: str
    export_enabled: bool
    html: str


class CompletionProgress(BaseModel):
    """How much of the form is filled in."""

    completed: int
    total: int
    percent: int
    status_title: str

    @property
    def is_complete(self) -> bool:
        return self.completed == self.total


class PreviewState(BaseModel):
    """Everything the surrounding UI needs after one recomputation cycle."""

    result: DisclosureResult
    badge: RenderedBadge
    progress: CompletionProgress

    @property
    def export_enabled(self) -> bool:
        return self.badge.export_enabled
