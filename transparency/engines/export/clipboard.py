"""
Clipboard Export - Copies the markup snippet for pasting elsewhere.

The primary writer is asynchronous and may be unavailable (insecure
context) or reject the write. The fallback is a synchronous manual-selection
copy that finishes before returning.
"""

from typing import Optional, Protocol

from transparency.logging_config import export_context, get_logger
from transparency.schemas.common import ExportKind, ExportNotice

logger = get_logger(__name__)

COPIED_MESSAGE = "Copied!"
COPY_FAILED_MESSAGE = "Copy failed. Select the snippet and copy it manually."


class ClipboardWriter(Protocol):
    """Asynchronous system clipboard."""

    async def write_text(self, text: str) -> None: ...


class ManualCopy(Protocol):
    """Synchronous fallback; returns once the text has been copied."""

    def copy(self, text: str) -> None: ...


class ManualSelectionFallback:
    """
    Puts the text where the user can select it by hand.

    The host UI reads selected_text and shows it in a pre-selected box.
    """

    def __init__(self):
        self.selected_text: Optional[str] = None

    def copy(self, text: str) -> None:
        self.selected_text = text


class ClipboardExporter:
    """Copies text with the primary writer, falling back to manual copy."""

    def __init__(
        self,
        primary: Optional[ClipboardWriter] = None,
        fallback: Optional[ManualCopy] = None,
        secure_context: bool = True,
    ):
        self.primary = primary
        self.fallback = fallback or ManualSelectionFallback()
        self.secure_context = secure_context

    @property
    def primary_available(self) -> bool:
        return self.primary is not None and self.secure_context

    def copy_with_fallback(self, text: str) -> ExportNotice:
        """Synchronous copy; always completes before returning."""
        try:
            self.fallback.copy(text)
        except Exception as e:
            logger.error("Fallback copy failed: %s", e)
            return ExportNotice.failed(ExportKind.MARKUP, COPY_FAILED_MESSAGE, detail=str(e))
        return ExportNotice.ok(ExportKind.MARKUP, COPIED_MESSAGE)

    async def copy(self, text: str) -> ExportNotice:
        """Copy text, trying the primary writer first."""
        with export_context():
            if not self.primary_available:
                logger.debug("Primary clipboard unavailable, using fallback")
                return self.copy_with_fallback(text)

            try:
                await self.primary.write_text(text)
            except Exception as e:
                logger.warning("Clipboard write rejected, using fallback: %s", e)
                return self.copy_with_fallback(text)

            logger.info("Copied snippet to clipboard", extra={"chars": len(text)})
            return ExportNotice.ok(ExportKind.MARKUP, COPIED_MESSAGE)
