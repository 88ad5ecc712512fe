"""
Document Snapshot - Hands a print-styled copy of the badge to a rasterizer.

The engine never renders pages itself. It builds a detached snapshot plus
page options and submits both to whatever SnapshotRasterizer the host
application provides (an HTML-to-PDF library, a headless browser, a test
double).
"""

from datetime import datetime, timezone
from typing import Optional, Protocol

from transparency.config import Settings, get_settings
from transparency.engines.audit.export_controller import ExportController
from transparency.engines.export.filenames import export_filename
from transparency.engines.render.badge_renderer import BadgeRenderer
from transparency.engines.render.formatting import style_to_css
from transparency.logging_config import export_context, get_logger
from transparency.schemas.common import ExportKind, ExportNotice
from transparency.schemas.disclosure import DisclosureResult
from transparency.schemas.export import BadgeSnapshot, SnapshotOptions

logger = get_logger(__name__)

RASTERIZER_MISSING_MESSAGE = "PDF library not loaded. Please refresh the page and try again."


class SnapshotRasterizer(Protocol):
    """Anything that can turn a styled snapshot into a document."""

    async def submit(self, snapshot: BadgeSnapshot, options: SnapshotOptions) -> None: ...


class RasterizerUnavailableError(RuntimeError):
    """No rasterizer is configured for snapshot export."""


class SnapshotExporter:
    """
    Builds and submits document snapshots.

    A missing or failing rasterizer is reported as a failed ExportNotice.
    There is no fallback: the rasterizer is a hard dependency of this export.
    """

    FILE_EXTENSION = "pdf"

    def __init__(
        self,
        rasterizer: Optional[SnapshotRasterizer] = None,
        settings: Optional[Settings] = None,
    ):
        self.rasterizer = rasterizer
        self.settings = settings or get_settings()

    @classmethod
    def export_style(cls, accent_color: str) -> dict[str, str]:
        """Print layout: a full border replaces the live left accent."""
        return {
            "padding": "40px",
            "font-family": "system-ui, -apple-system, sans-serif",
            "background": "white",
            "border-radius": "12px",
            "box-shadow": "none",
            "border": f"2px solid {accent_color}",
            "max-width": "500px",
            "margin": "20px auto",
        }

    @classmethod
    def build_snapshot(cls, result: DisclosureResult) -> BadgeSnapshot:
        """Render the badge and freeze it with the export styling."""
        badge = BadgeRenderer.render(result)
        style = cls.export_style(badge.accent_color)
        return BadgeSnapshot(html=badge.html, style=style, css=style_to_css(style))

    def build_options(self, now: Optional[datetime] = None) -> SnapshotOptions:
        s = self.settings
        return SnapshotOptions(
            filename=export_filename(self.FILE_EXTENSION, now),
            margin=s.snapshot_margin_mm,
            image_type=s.snapshot_image_type,
            image_quality=s.snapshot_image_quality,
            scale=s.snapshot_canvas_scale,
            use_cors=s.snapshot_use_cors,
            page_unit=s.snapshot_page_unit,
            page_format=s.snapshot_page_format,
            orientation=s.snapshot_orientation,
        )

    def require_rasterizer(self) -> SnapshotRasterizer:
        if self.rasterizer is None:
            raise RasterizerUnavailableError(RASTERIZER_MISSING_MESSAGE)
        return self.rasterizer

    async def export(
        self,
        result: DisclosureResult,
        now: Optional[datetime] = None,
    ) -> ExportNotice:
        """
        Snapshot the badge and submit it.

        The snapshot is built before the first await, so later edits to the
        form cannot change what is submitted.

        Raises:
            ExportNotAllowedError: if the record fails the export gate
        """
        ExportController.require_exportable(result.record)
        snapshot = self.build_snapshot(result)
        options = self.build_options(now or datetime.now(timezone.utc))

        with export_context():
            try:
                rasterizer = self.require_rasterizer()
            except RasterizerUnavailableError as e:
                logger.warning("Snapshot export failed: no rasterizer configured")
                return ExportNotice.failed(ExportKind.SNAPSHOT, str(e))

            try:
                await rasterizer.submit(snapshot, options)
            except Exception as e:
                logger.exception("Rasterizer rejected snapshot", extra={"export_filename": options.filename})
                return ExportNotice.failed(
                    ExportKind.SNAPSHOT,
                    "Could not create the PDF. Please try again.",
                    detail=str(e),
                )

            logger.info(
                "Snapshot submitted",
                extra={"export_filename": options.filename, "score": result.score},
            )
            return ExportNotice.ok(ExportKind.SNAPSHOT, "PDF export started", filename=options.filename)
