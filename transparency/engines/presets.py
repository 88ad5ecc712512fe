"""
Presets - Example disclosures for demonstrating the tool.

Each preset's expected score is the weight-table sum of its levels; the
tests check that the two agree.
"""

from typing import List, Optional, Protocol

from pydantic import BaseModel, ConfigDict

from transparency.logging_config import get_logger
from transparency.schemas.disclosure import DisclosureRecord, IntensityLevel, Selection

logger = get_logger(__name__)


class Preset(BaseModel):
    """A named example record."""

    model_config = ConfigDict(frozen=True)

    record: DisclosureRecord
    expected_score: int

    @property
    def name(self) -> str:
        return self.record.creator_name


PRESETS: List[Preset] = [
    Preset(
        record=DisclosureRecord(
            creator_name="Jane Doe",
            content_reference="https://blog.example.com/post-123",
            selection=Selection(
                ideation=IntensityLevel.LOW,          # 8
                research=IntensityLevel.MEDIUM,       # 20
                text_creation=IntensityLevel.LOW,     # 15
                visual_creation=IntensityLevel.NONE,  # 0
            ),
        ),
        expected_score=43,  # Moderate AI Usage
    ),
    Preset(
        record=DisclosureRecord(
            creator_name="Alex Smith",
            content_reference="https://portfolio.test/illustration",
            selection=Selection(
                ideation=IntensityLevel.HIGH,            # 25
                research=IntensityLevel.LOW,             # 12
                text_creation=IntensityLevel.MEDIUM,     # 25
                visual_creation=IntensityLevel.HIGH,     # 30
            ),
        ),
        expected_score=92,  # High AI Usage
    ),
    Preset(
        record=DisclosureRecord(
            creator_name="News Editor",
            content_reference="https://news.corp/article/ai-future",
            selection=Selection(
                ideation=IntensityLevel.MEDIUM,       # 18
                research=IntensityLevel.HIGH,         # 25
                text_creation=IntensityLevel.HIGH,    # 40
                visual_creation=IntensityLevel.NONE,  # 0
            ),
        ),
        expected_score=83,  # High AI Usage
    ),
]


class PresetTarget(Protocol):
    """Input state a preset can be written into."""

    def replace_all(self, record: DisclosureRecord) -> None: ...


def get_preset(index: int) -> Optional[Preset]:
    """Preset at index, or None when out of range (negative included)."""
    if 0 <= index < len(PRESETS):
        return PRESETS[index]
    return None


def load_preset(target: PresetTarget, index: int) -> bool:
    """
    Overwrite every input with a preset.

    An unknown index leaves the target untouched and returns False.
    """
    preset = get_preset(index)
    if preset is None:
        logger.debug("Ignoring unknown preset index %s", index)
        return False

    target.replace_all(preset.record)
    logger.info("Loaded preset", extra={"preset_index": index, "preset_name": preset.name})
    return True
