"""
Audit Engine - Export readiness of a disclosure.
"""

from transparency.engines.audit.export_controller import (
    ExportController,
    ExportDecision,
    ExportBlockReason,
    ExportNotAllowedError,
)

__all__ = [
    "ExportController",
    "ExportDecision",
    "ExportBlockReason",
    "ExportNotAllowedError",
]
