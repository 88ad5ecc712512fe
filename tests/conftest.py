"""
Pytest fixtures for disclosure engine tests.
"""

import asyncio
from datetime import datetime, timezone
from typing import List, Optional, Tuple

import pytest

from transparency.config import get_settings
from transparency.engines.scoring import evaluate
from transparency.schemas.disclosure import (
    DisclosureRecord,
    DisclosureResult,
    IntensityLevel,
    Selection,
)
from transparency.schemas.export import BadgeSnapshot, SnapshotOptions


# 2026-10-19T09:30:00Z
FIXED_NOW = datetime(2026, 10, 19, 9, 30, 0, tzinfo=timezone.utc)


class RecordingRasterizer:
    """Rasterizer double that keeps every submission."""

    def __init__(self, fail_with: Optional[Exception] = None):
        self.submissions: List[Tuple[BadgeSnapshot, SnapshotOptions]] = []
        self.fail_with = fail_with
        self.release: Optional[asyncio.Event] = None

    async def submit(self, snapshot: BadgeSnapshot, options: SnapshotOptions) -> None:
        if self.release is not None:
            await self.release.wait()
        if self.fail_with is not None:
            raise self.fail_with
        self.submissions.append((snapshot, options))


class RecordingClipboard:
    """Asynchronous clipboard double."""

    def __init__(self, reject: bool = False):
        self.reject = reject
        self.written: List[str] = []

    async def write_text(self, text: str) -> None:
        if self.reject:
            raise PermissionError("Write permission denied")
        self.written.append(text)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; start every test from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def complete_record() -> DisclosureRecord:
    """An exportable record (score 43, Moderate AI Usage)."""
    return DisclosureRecord(
        creator_name="Jane Doe",
        content_reference="https://blog.example.com/post-123",
        selection=Selection(
            ideation=IntensityLevel.LOW,
            research=IntensityLevel.MEDIUM,
            text_creation=IntensityLevel.LOW,
            visual_creation=IntensityLevel.NONE,
        ),
    )


@pytest.fixture
def complete_result(complete_record: DisclosureRecord) -> DisclosureResult:
    return evaluate(complete_record)


@pytest.fixture
def hostile_record() -> DisclosureRecord:
    """Exportable record whose name tries to inject markup."""
    return DisclosureRecord(
        creator_name='<script>alert("x")</script>',
        content_reference="https://example.com/a?b=1&c=2",
        selection=Selection(text_creation=IntensityLevel.HIGH),
    )


@pytest.fixture
def rasterizer() -> RecordingRasterizer:
    return RecordingRasterizer()


@pytest.fixture
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()


@pytest.fixture
def rejecting_clipboard() -> RecordingClipboard:
    return RecordingClipboard(reject=True)


@pytest.fixture
def failing_rasterizer() -> RecordingRasterizer:
    return RecordingRasterizer(fail_with=RuntimeError("canvas tainted"))
