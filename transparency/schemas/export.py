"""
Export payload schemas.

DisclosureExport is the machine-readable wire format. Field names are a
contract: add fields freely, but renaming or removing one means bumping
SCHEMA_VERSION.
"""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from transparency.schemas.disclosure import Selection

SCHEMA_VERSION = "1.0"


class DisclosureExport(BaseModel):
    """Structured-data export of one disclosure."""

    model_config = ConfigDict(populate_by_name=True)

    creator_name: str = Field(alias="creatorName")
    content_url: str = Field(alias="contentURL")
    levels: Selection
    score: int = Field(ge=0, le=100)
    label: str
    color: str
    emoji: str
    timestamp: datetime
    version: str = SCHEMA_VERSION


class BadgeSnapshot(BaseModel):
    """
    Detached copy of the live badge, restyled for a printed page.

    Holds plain strings only, so later changes to the preview cannot reach it.
    """

    model_config = ConfigDict(frozen=True)

    html: str
    style: Dict[str, str]
    css: str

    def to_html(self) -> str:
        return f'<div class="badge-preview" style="{self.css}">{self.html}</div>'


class SnapshotOptions(BaseModel):
    """Page and image options handed to the rasterizer with a snapshot."""

    model_config = ConfigDict(frozen=True)

    filename: str
    margin: int = 20
    image_type: str = "jpeg"
    image_quality: float = 0.98
    scale: int = 2
    use_cors: bool = True
    page_unit: str = "mm"
    page_format: str = "a4"
    orientation: str = "portrait"
