"""
Format Validation - The only input checks the engine performs.

A creator name must be non-empty and a content reference must parse as an
absolute URL. Nothing else about the inputs is validated.
"""

from enum import Enum
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel


class ValidationStatus(str, Enum):
    """Validation status."""
    VALID = "valid"
    INVALID = "invalid"


class ValidationResult(BaseModel):
    """Result of a validation check."""

    status: ValidationStatus
    message: str
    field: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == ValidationStatus.VALID


def is_valid_url(value: Optional[str]) -> bool:
    """True if the value parses as an absolute URL with a scheme and a host."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        # .port raises ValueError for a malformed port
        parts.port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)


class FormatValidator:
    """
    Format validation for disclosure inputs.

    Runs locally; a failed check is reported, never raised.
    """

    @classmethod
    def validate_creator_name(cls, name: Optional[str]) -> ValidationResult:
        """Validate the creator name is present."""
        if not name or not name.strip():
            return ValidationResult(
                status=ValidationStatus.INVALID,
                message="Enter a creator name",
                field="creator_name",
            )
        return ValidationResult(
            status=ValidationStatus.VALID,
            message="Creator name is present",
            field="creator_name",
        )

    @classmethod
    def validate_url(cls, url: Optional[str]) -> ValidationResult:
        """Validate the content reference is an absolute URL."""
        if not url:
            return ValidationResult(
                status=ValidationStatus.INVALID,
                message="Enter the content URL",
                field="content_reference",
            )

        if not is_valid_url(url):
            return ValidationResult(
                status=ValidationStatus.INVALID,
                message="Content URL is not a valid URL",
                field="content_reference",
            )

        return ValidationResult(
            status=ValidationStatus.VALID,
            message="URL format is valid",
            field="content_reference",
        )
