"""
Export Engine - Markup, structured-data and document-snapshot exports.

Each encoder takes the same DisclosureResult and none depends on another
having run.
"""

from transparency.engines.export.markup_encoder import (
    MarkupEncoder,
    encode_markup,
)
from transparency.engines.export.json_encoder import (
    JsonEncoder,
    encode_json,
    decode_json,
)
from transparency.engines.export.snapshot import (
    SnapshotExporter,
    SnapshotRasterizer,
    RasterizerUnavailableError,
)
from transparency.engines.export.clipboard import (
    ClipboardExporter,
    ClipboardWriter,
    ManualCopy,
    ManualSelectionFallback,
)
from transparency.engines.export.filenames import export_filename

__all__ = [
    "MarkupEncoder",
    "encode_markup",
    "JsonEncoder",
    "encode_json",
    "decode_json",
    "SnapshotExporter",
    "SnapshotRasterizer",
    "RasterizerUnavailableError",
    "ClipboardExporter",
    "ClipboardWriter",
    "ManualCopy",
    "ManualSelectionFallback",
    "export_filename",
]
