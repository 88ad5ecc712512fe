"""
Common schema types used across the engine.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ExportKind(str, Enum):
    """Export mechanisms offered for a badge."""
    MARKUP = "markup"
    JSON = "json"
    SNAPSHOT = "snapshot"


class ExportNotice(BaseModel):
    """User-visible outcome of an export action. Failures are never fatal."""

    kind: ExportKind
    success: bool
    message: str
    filename: Optional[str] = None
    content: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def ok(cls, kind: ExportKind, message: str, filename: Optional[str] = None) -> "ExportNotice":
        return cls(kind=kind, success=True, message=message, filename=filename)

    @classmethod
    def failed(cls, kind: ExportKind, message: str, detail: Optional[str] = None) -> "ExportNotice":
        return cls(kind=kind, success=False, message=message, detail=detail)
