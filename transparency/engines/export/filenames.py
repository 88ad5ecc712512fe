"""Suggested download names for exported artifacts."""

from datetime import datetime, timezone
from typing import Optional

from transparency.config import get_settings


def export_filename(extension: str, now: Optional[datetime] = None) -> str:
    """'<prefix>-<epoch milliseconds>.<extension>', e.g. ai-transparency-1792402200000.json"""
    moment = now or datetime.now(timezone.utc)
    millis = int(moment.timestamp() * 1000)
    return f"{get_settings().export_filename_prefix}-{millis}.{extension}"
