"""
Central logging configuration for the disclosure engine.

Provides:
- Structured logging (JSON in production, human-readable in development)
- Export correlation via contextvars (export_id set for the duration of an export)
- Environment-aware log levels

Usage:
    from transparency.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Badge exported", extra={"score": result.score})
"""

import json
import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

# Context var for export ID - set by the exporters, available for the whole export
export_id_var: ContextVar[Optional[str]] = ContextVar("export_id", default=None)


def get_export_id() -> Optional[str]:
    """Get the current export ID from context, if set."""
    return export_id_var.get()


@contextmanager
def export_context(export_id: Optional[str] = None) -> Iterator[str]:
    """Bind an export ID to every log record emitted inside the block."""
    value = export_id or uuid.uuid4().hex[:12]
    token = export_id_var.set(value)
    try:
        yield value
    finally:
        export_id_var.reset(token)


class ExportIdFilter(logging.Filter):
    """Filter that adds export_id to log records from context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.export_id = get_export_id() or "-"  # type: ignore[attr-defined]
        return True


_RESERVED_ATTRS = frozenset((
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "taskName", "export_id",
))


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for production log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        exp_id = getattr(record, "export_id", None)
        if exp_id and exp_id != "-":
            log_obj["export_id"] = exp_id

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Add extra fields (anything passed via extra= in the log call)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and value is not None:
                try:
                    json.dumps(value)
                    log_obj[key] = value
                except (TypeError, ValueError):
                    log_obj[key] = str(value)

        return json.dumps(log_obj)


def _create_dev_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] export=%(export_id)s %(message)s",
        datefmt="%H:%M:%S",
    )


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: 'development' or 'production'
        debug: If True, use DEBUG level regardless of log_level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    # Ensure export_id exists on all records (default before filter runs)
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        if not hasattr(record, "export_id"):
            setattr(record, "export_id", "-")
        return record

    logging.setLogRecordFactory(record_factory)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates on reconfigure
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(ExportIdFilter())

    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(_create_dev_formatter())

    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module name.

    Logs will automatically include export_id while an export is running.
    Use extra={} for additional structured fields:
        logger.info("Exported", extra={"score": 43, "tier": "Moderate AI Usage"})
    """
    return logging.getLogger(name)
