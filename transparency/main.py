"""
AI Transparency Disclosure Tool

Engine entry point: builds a ready-to-use disclosure session for a host UI.

## Pipeline

- **Score**: weight table lookups for four stages, summed to 0-100
- **Tier**: Minimal / Moderate / Significant / High AI Usage
- **Badge**: escaped live preview plus the export gate
- **Exports**: inline-styled markup, versioned JSON, PDF snapshot via a rasterizer
"""

from typing import Optional

from transparency.config import get_settings
from transparency.engines.export.clipboard import ClipboardExporter, ClipboardWriter, ManualCopy
from transparency.engines.export.snapshot import SnapshotExporter, SnapshotRasterizer
from transparency.logging_config import configure_logging, get_logger
from transparency.orchestration.form_state import DisclosureSession, FormState

logger = get_logger(__name__)

INITIAL_PRESET_INDEX = 0


def create_session(
    *,
    rasterizer: Optional[SnapshotRasterizer] = None,
    clipboard: Optional[ClipboardWriter] = None,
    manual_copy: Optional[ManualCopy] = None,
    secure_context: bool = True,
    configure_logs: bool = True,
) -> DisclosureSession:
    """
    Create a session seeded with the first preset.

    Args:
        rasterizer: Document rasterizer for PDF snapshots; None disables that export
        clipboard: Asynchronous system clipboard, if the host has one
        manual_copy: Synchronous copy fallback
        secure_context: Whether the host allows the asynchronous clipboard
        configure_logs: Configure root logging from settings first
    """
    settings = get_settings()
    if configure_logs:
        configure_logging(
            log_level=settings.log_level,
            environment=settings.environment,
            debug=settings.debug,
        )

    logger.info("Starting %s v%s", settings.project_name, settings.version)

    session = DisclosureSession(
        state=FormState(),
        clipboard=ClipboardExporter(
            primary=clipboard,
            fallback=manual_copy,
            secure_context=secure_context,
        ),
        snapshot_exporter=SnapshotExporter(rasterizer=rasterizer, settings=settings),
    )
    session.load_preset(INITIAL_PRESET_INDEX)

    logger.info("%s initialized", settings.project_name)
    return session
