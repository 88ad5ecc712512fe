"""Orchestration layer - form state and export session."""

from transparency.orchestration.form_state import (
    FormState,
    DisclosureSession,
    PreviewListener,
)

__all__ = [
    "FormState",
    "DisclosureSession",
    "PreviewListener",
]
