"""
Validation Engine - Creator name and content URL checks.
"""

from transparency.engines.validation.format_validator import (
    FormatValidator,
    ValidationResult,
    ValidationStatus,
    is_valid_url,
)

__all__ = [
    "FormatValidator",
    "ValidationResult",
    "ValidationStatus",
    "is_valid_url",
]
