"""
Pydantic schemas for disclosure records, results and export payloads.
"""

from transparency.schemas.disclosure import (
    Stage,
    IntensityLevel,
    Selection,
    DisclosureRecord,
    Tier,
    DisclosureResult,
    RenderedBadge,
    CompletionProgress,
    PreviewState,
)
from transparency.schemas.export import (
    SCHEMA_VERSION,
    DisclosureExport,
    BadgeSnapshot,
    SnapshotOptions,
)
from transparency.schemas.common import (
    ExportKind,
    ExportNotice,
)

__all__ = [
    # Disclosure
    "Stage",
    "IntensityLevel",
    "Selection",
    "DisclosureRecord",
    "Tier",
    "DisclosureResult",
    "RenderedBadge",
    "CompletionProgress",
    "PreviewState",
    # Export
    "SCHEMA_VERSION",
    "DisclosureExport",
    "BadgeSnapshot",
    "SnapshotOptions",
    # Common
    "ExportKind",
    "ExportNotice",
]
