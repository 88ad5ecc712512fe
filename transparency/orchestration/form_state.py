"""
Form state and disclosure session.

FormState is the only mutable part of the engine: it owns the raw inputs and,
on every change, rebuilds an immutable DisclosureRecord and pushes it through
score -> classify -> render. DisclosureSession connects that state to the
exporters; each export takes its own fresh snapshot at trigger time.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from transparency.engines.audit.export_controller import ExportController
from transparency.engines.export.clipboard import ClipboardExporter
from transparency.engines.export.json_encoder import JsonEncoder
from transparency.engines.export.markup_encoder import MarkupEncoder
from transparency.engines.export.snapshot import SnapshotExporter
from transparency.engines.presets import load_preset
from transparency.engines.progress_tracker import ProgressTracker
from transparency.engines.render.badge_renderer import BadgeRenderer
from transparency.engines.scoring import evaluate
from transparency.logging_config import get_logger
from transparency.schemas.common import ExportKind, ExportNotice
from transparency.schemas.disclosure import (
    DisclosureRecord,
    DisclosureResult,
    IntensityLevel,
    PreviewState,
    Selection,
    Stage,
    coerce_level,
    coerce_stage,
)

logger = get_logger(__name__)

PreviewListener = Callable[[PreviewState], None]


class FormState:
    """
    Raw form inputs plus recomputation.

    Stage slots may be unset (no radio checked); a snapshot reads an unset
    slot as "none".
    """

    def __init__(self):
        self._creator_name = ""
        self._content_reference = ""
        self._levels: Dict[Stage, Optional[IntensityLevel]] = {stage: None for stage in Stage}
        self._listeners: List[PreviewListener] = []
        self.last_preview: Optional[PreviewState] = None

    def subscribe(self, listener: PreviewListener) -> None:
        """Call listener with every new PreviewState."""
        self._listeners.append(listener)

    def selected_level(self, stage: Stage) -> Optional[IntensityLevel]:
        """Raw slot value; None means nothing is selected for the stage."""
        return self._levels[Stage(stage)]

    def snapshot(self) -> DisclosureRecord:
        """Immutable record of the inputs as they are right now."""
        return DisclosureRecord(
            creator_name=self._creator_name,
            content_reference=self._content_reference,
            selection=Selection.from_mapping(self._levels),
        )

    def set_name(self, text: Optional[str]) -> PreviewState:
        self._creator_name = text or ""
        return self.recompute()

    def set_reference(self, text: Optional[str]) -> PreviewState:
        self._content_reference = text or ""
        return self.recompute()

    def select(self, stage: Any, level: Any) -> PreviewState:
        """Select a level for a stage. Unknown stages are ignored."""
        known = coerce_stage(stage)
        if known is None:
            logger.debug("Ignoring selection for unknown stage %r", stage)
        else:
            self._levels[known] = coerce_level(level)
        return self.recompute()

    def clear_selections(self) -> PreviewState:
        self._clear_levels()
        return self.recompute()

    def replace_all(self, record: DisclosureRecord) -> PreviewState:
        """
        Overwrite every input with the record's values.

        Slots are cleared before the new levels are set and the preview is
        recomputed once, after all writes.
        """
        self._creator_name = record.creator_name
        self._content_reference = record.content_reference
        self._clear_levels()
        for stage, level in record.selection.items():
            self._levels[stage] = level
        return self.recompute()

    def _clear_levels(self) -> None:
        for stage in Stage:
            self._levels[stage] = None

    def recompute(self) -> PreviewState:
        """Run the pipeline on a fresh snapshot and notify listeners."""
        record = self.snapshot()
        result = evaluate(record)
        preview = PreviewState(
            result=result,
            badge=BadgeRenderer.render(result),
            progress=ProgressTracker.evaluate(record),
        )
        self.last_preview = preview
        for listener in self._listeners:
            listener(preview)
        return preview


class DisclosureSession:
    """
    Export actions over a FormState.

    Actions check the export gate first and answer with an ExportNotice, so
    an incomplete form or a failing export mechanism never raises.
    """

    def __init__(
        self,
        state: Optional[FormState] = None,
        clipboard: Optional[ClipboardExporter] = None,
        snapshot_exporter: Optional[SnapshotExporter] = None,
    ):
        self.state = state or FormState()
        self.clipboard = clipboard or ClipboardExporter()
        self.snapshot_exporter = snapshot_exporter or SnapshotExporter()

    def current_result(self) -> DisclosureResult:
        return evaluate(self.state.snapshot())

    def load_preset(self, index: int) -> bool:
        return load_preset(self.state, index)

    def _blocked(self, kind: ExportKind, record: DisclosureRecord) -> Optional[ExportNotice]:
        decision = ExportController.evaluate(record)
        if decision.allowed:
            return None
        logger.info("Export blocked", extra={"export_kind": kind.value, "reasons": [r.value for r in decision.reasons]})
        return ExportNotice.failed(kind, "; ".join(decision.messages))

    async def copy_markup(self) -> ExportNotice:
        """Copy the embeddable snippet to the clipboard."""
        result = self.current_result()
        blocked = self._blocked(ExportKind.MARKUP, result.record)
        if blocked:
            return blocked

        snippet = MarkupEncoder.encode(result)
        notice = await self.clipboard.copy(snippet)
        return notice.model_copy(update={"content": snippet})

    def export_json(self, now: Optional[datetime] = None) -> ExportNotice:
        """Produce the JSON download (content plus suggested filename)."""
        result = self.current_result()
        blocked = self._blocked(ExportKind.JSON, result.record)
        if blocked:
            return blocked

        payload = JsonEncoder.encode(result, generated_at=now)
        content = JsonEncoder.dumps(payload)
        filename = JsonEncoder.filename(payload.timestamp)
        logger.info("JSON export ready", extra={"export_filename": filename, "score": result.score})
        return ExportNotice(
            kind=ExportKind.JSON,
            success=True,
            message="JSON export ready",
            filename=filename,
            content=content,
        )

    async def export_snapshot(self, now: Optional[datetime] = None) -> ExportNotice:
        """Submit a PDF snapshot of the badge to the configured rasterizer."""
        result = self.current_result()
        blocked = self._blocked(ExportKind.SNAPSHOT, result.record)
        if blocked:
            return blocked
        return await self.snapshot_exporter.export(result, now)
