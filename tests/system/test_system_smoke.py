"""
System smoke test: full disclosure flow in-process.
Verifies session start-up, preset loading, live preview, all three exports,
the JSON round trip and the logging configuration.
"""

import json
import logging

import pytest

from transparency.config import get_settings
from transparency.engines.export import decode_json
from transparency.engines.export.json_encoder import JsonEncoder
from transparency.logging_config import (
    JsonFormatter,
    configure_logging,
    export_context,
    get_export_id,
)
from transparency.main import INITIAL_PRESET_INDEX, create_session


@pytest.fixture
def session(rasterizer, clipboard):
    return create_session(rasterizer=rasterizer, clipboard=clipboard, configure_logs=False)


def test_session_starts_on_first_preset(session):
    """The tool opens with the first example already filled in."""
    assert INITIAL_PRESET_INDEX == 0
    preview = session.state.last_preview

    assert preview is not None
    assert preview.result.record.creator_name == "Jane Doe"
    assert preview.badge.tier_line == "🟡 43% – Moderate AI Usage"
    assert preview.export_enabled is True
    assert preview.progress.status_title == "AI Transparency Disclosure Tool - Ready to Export"


@pytest.mark.asyncio
async def test_full_flow(session, clipboard, rasterizer, fixed_now):
    """Edit, preview, then export markup, JSON and PDF from the same inputs."""
    session.load_preset(1)
    preview = session.state.select("visualCreation", "low")
    assert preview.result.score == 77
    assert preview.result.tier.label == "High AI Usage"

    copied = await session.copy_markup()
    assert copied.success is True
    assert clipboard.written == [copied.content]
    assert 'data-score="77"' in copied.content

    exported = session.export_json(now=fixed_now)
    assert exported.success is True
    data = json.loads(exported.content)
    assert data["creatorName"] == "Alex Smith"
    assert data["levels"]["visualCreation"] == "low"

    pdf = await session.export_snapshot(now=fixed_now)
    assert pdf.success is True
    assert pdf.filename == "ai-transparency-1792402200000.pdf"
    snapshot, options = rasterizer.submissions[0]
    assert "77% – High AI Usage" in snapshot.html
    assert options.image_quality == 0.98

    decoded = decode_json(exported.content)
    assert JsonEncoder.to_record(decoded) == session.state.snapshot()


@pytest.mark.asyncio
async def test_clearing_name_blocks_everything(session, clipboard):
    preview = session.state.set_name("   ")
    assert preview.export_enabled is False

    notice = await session.copy_markup()
    assert notice.success is False
    assert notice.message == "Enter a creator name"
    assert clipboard.written == []


@pytest.mark.asyncio
async def test_no_rasterizer_configured(clipboard):
    session = create_session(clipboard=clipboard, configure_logs=False)
    notice = await session.export_snapshot()
    assert notice.success is False


def test_settings_from_environment(monkeypatch, fixed_now):
    monkeypatch.setenv("EXPORT_FILENAME_PREFIX", "disclosure")
    get_settings.cache_clear()

    session = create_session(configure_logs=False)
    notice = session.export_json(now=fixed_now)

    assert notice.filename == "disclosure-1792402200000.json"


def test_json_log_format_includes_export_id():
    record = logging.LogRecord("transparency.test", logging.INFO, __file__, 1, "Exported", None, None)
    record.export_id = "abc123"
    record.score = 43

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "Exported"
    assert data["export_id"] == "abc123"
    assert data["score"] == 43


def test_export_context_binds_and_resets():
    assert get_export_id() is None
    with export_context("fixed") as export_id:
        assert export_id == "fixed"
        assert get_export_id() == "fixed"
    assert get_export_id() is None


def test_configure_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(log_level="WARNING", environment="production")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

        configure_logging(debug=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
