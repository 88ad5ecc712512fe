"""
Export Controller - Decides if a disclosure can be exported.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel

from transparency.engines.validation.format_validator import FormatValidator
from transparency.schemas.disclosure import DisclosureRecord


class ExportBlockReason(str, Enum):
    """Reasons export might be blocked."""
    MISSING_CREATOR_NAME = "missing_creator_name"
    INVALID_CONTENT_URL = "invalid_content_url"


class ExportNotAllowedError(ValueError):
    """An encoder was asked to export a record the export gate rejects."""

    def __init__(self, reasons: List[ExportBlockReason]):
        self.reasons = reasons
        joined = ", ".join(r.value for r in reasons)
        super().__init__(f"Export not allowed: {joined}")


class ExportDecision(BaseModel):
    """Decision on whether export is allowed."""

    allowed: bool
    reasons: List[ExportBlockReason]
    messages: List[str]


class ExportController:
    """
    Controls export based on form completeness.

    Export is blocked if:
    - The creator name is empty
    - The content URL does not parse as an absolute URL

    Stage selections never block export; an all-"none" disclosure is valid.
    """

    @classmethod
    def evaluate(cls, record: DisclosureRecord) -> ExportDecision:
        """
        Evaluate if a record is ready for export.

        An incomplete form is an ordinary state, so this reports rather than raises.
        """
        reasons: List[ExportBlockReason] = []
        messages: List[str] = []

        name_check = FormatValidator.validate_creator_name(record.creator_name)
        if not name_check.is_valid:
            reasons.append(ExportBlockReason.MISSING_CREATOR_NAME)
            messages.append(name_check.message)

        url_check = FormatValidator.validate_url(record.content_reference)
        if not url_check.is_valid:
            reasons.append(ExportBlockReason.INVALID_CONTENT_URL)
            messages.append(url_check.message)

        return ExportDecision(
            allowed=not reasons,
            reasons=reasons,
            messages=messages,
        )

    @classmethod
    def can_export(cls, record: DisclosureRecord) -> bool:
        return cls.evaluate(record).allowed

    @classmethod
    def require_exportable(cls, record: DisclosureRecord) -> None:
        """Raise ExportNotAllowedError unless the record passes the gate."""
        decision = cls.evaluate(record)
        if not decision.allowed:
            raise ExportNotAllowedError(decision.reasons)
