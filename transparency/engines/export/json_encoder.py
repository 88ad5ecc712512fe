"""
Structured-data Encoder - Canonical machine-readable export.

Wire format (version 1.0):
    {
      "creatorName": "...",
      "contentURL": "...",
      "levels": {"ideation": "low", "research": "medium", ...},
      "score": 43,
      "label": "Moderate AI Usage",
      "color": "#f1c40f",
      "emoji": "🟡",
      "timestamp": "2026-10-19T09:30:00Z",
      "version": "1.0"
    }
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from transparency.config import get_settings
from transparency.engines.audit.export_controller import ExportController
from transparency.engines.export.filenames import export_filename
from transparency.schemas.disclosure import DisclosureRecord, DisclosureResult
from transparency.schemas.export import SCHEMA_VERSION, DisclosureExport


class JsonEncoder:
    """Encodes and decodes the structured-data export."""

    FILE_EXTENSION = "json"

    @classmethod
    def encode(
        cls,
        result: DisclosureResult,
        generated_at: Optional[datetime] = None,
    ) -> DisclosureExport:
        """
        Build the export payload for a result.

        Raises:
            ExportNotAllowedError: if the record fails the export gate
        """
        record = result.record
        ExportController.require_exportable(record)

        return DisclosureExport(
            creator_name=record.creator_name,
            content_url=record.content_reference,
            levels=record.selection,
            score=result.score,
            label=result.tier.label,
            color=result.tier.color,
            emoji=result.tier.glyph,
            timestamp=generated_at or datetime.now(timezone.utc),
            version=SCHEMA_VERSION,
        )

    @classmethod
    def dumps(cls, payload: DisclosureExport, indent: Optional[int] = None) -> str:
        """Serialise with the wire field names."""
        if indent is None:
            indent = get_settings().json_indent
        return payload.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def decode(cls, payload: Union[str, bytes, Mapping[str, Any]]) -> DisclosureExport:
        """
        Parse a previously exported payload.

        Raises:
            pydantic.ValidationError: if the payload does not match the schema
        """
        if isinstance(payload, (str, bytes)):
            return DisclosureExport.model_validate_json(payload)
        return DisclosureExport.model_validate(dict(payload))

    @classmethod
    def to_record(cls, payload: DisclosureExport) -> DisclosureRecord:
        """The disclosure inputs an export was produced from."""
        return DisclosureRecord(
            creator_name=payload.creator_name,
            content_reference=payload.content_url,
            selection=payload.levels,
        )

    @classmethod
    def filename(cls, now: Optional[datetime] = None) -> str:
        return export_filename(cls.FILE_EXTENSION, now)


def encode_json(result: DisclosureResult, generated_at: Optional[datetime] = None) -> DisclosureExport:
    return JsonEncoder.encode(result, generated_at)


def decode_json(payload: Union[str, bytes, Mapping[str, Any]]) -> DisclosureExport:
    return JsonEncoder.decode(payload)
