"""Logging setup for the editor.

Two output styles share one root configuration:

- JSON lines (``StructuredFormatter``) tagged with an editor category derived
  from the logger name, plus any ``extra={...}`` fields of the call
- a compact plain-text format for terminals

File logging rotates; an optional second file collects ERROR and above only.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import TextIO

PLAIN_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"
PLAIN_DATEFMT = "%H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
QUIET_LOGGERS = ("PIL", "asyncio")

# Module (first component under pen_editor) -> category
MODULE_CATEGORIES = {
    "curves": "model",
    "svg": "model",
    "hit_testing": "model",
    "types": "model",
    "history": "history",
    "session": "session",
    "router": "session",
    "files": "io",
    "rendering": "render",
    "interpolation": "render",
    "cli": "cli",
}

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def category_for(logger_name: str) -> str:
    """Map a logger name like ``pen_editor.session`` to its category."""
    package, _, rest = logger_name.partition(".")
    if package != "pen_editor" or not rest:
        return "system"
    return MODULE_CATEGORIES.get(rest.split(".", 1)[0], "system")


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "category": category_for(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: _jsonable(value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry)


class ErrorFilter(logging.Filter):
    """Pass ERROR and CRITICAL only."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def _rotating_handler(path: str, backup_count: int) -> RotatingFileHandler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=backup_count, encoding="utf-8"
    )


def configure_logging(
    *,
    json_format: bool = False,
    log_level: int = logging.INFO,
    log_file: str | None = None,
    error_log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Replace the root logger's handlers.

    Args:
        json_format: Emit JSON lines instead of plain text
        log_level: Minimum level on the root logger
        log_file: Rotating log file receiving everything (optional)
        error_log_file: Rotating log file receiving ERROR and above (optional)
        stream: Console stream, sys.stderr when omitted
    """
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter: logging.Formatter = (
        StructuredFormatter() if json_format else logging.Formatter(PLAIN_FORMAT, PLAIN_DATEFMT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(_rotating_handler(log_file, backup_count=3))
    if error_log_file:
        error_handler = _rotating_handler(error_log_file, backup_count=7)
        error_handler.addFilter(ErrorFilter())
        handlers.append(error_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_dev_logging() -> None:
    """Configure logging from settings (plain text unless log_json is set)."""
    from pen_editor.config import settings

    configure_logging(
        json_format=settings.log_json,
        log_level=logging.getLevelName(settings.log_level.upper()),
        log_file=settings.log_file,
    )
