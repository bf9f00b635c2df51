"""
Log Formatters - Plain-text and JSON output for weft records.

Messages from ``WeftLogger`` carry Rich markup for the console handler;
both formatters here strip it.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from rich.errors import MarkupError
from rich.text import Text

# Structured fields passed through ``extra=`` by WeftLogger
EXTRA_FIELDS = ("origin", "binding", "check", "statement")


def plain_message(record: logging.LogRecord) -> str:
    """Return the record message with Rich markup removed."""
    message = record.getMessage()
    try:
        return Text.from_markup(message).plain
    except MarkupError:
        # Not markup after all, e.g. a binding name containing "[/"
        return message


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line.

    Fallback and check records keep their structured fields so a log
    file can be filtered by origin or checker name.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": plain_message(record),
        }
        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


class CompactFormatter(logging.Formatter):
    """Single-line output for ``--plain``: time, level symbol, logger, message."""

    LEVEL_SYMBOLS = {
        "DEBUG": "·",
        "INFO": "→",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "✗",
    }

    def format(self, record: logging.LogRecord) -> str:
        symbol = self.LEVEL_SYMBOLS.get(record.levelname, "?")
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        name = record.name.removeprefix("weft.")
        return f"{timestamp} {symbol} [{name}] {plain_message(record)}"


def create_file_handler(
    path: str | Path,
    formatter: logging.Formatter | None = None,
    level: int = logging.DEBUG,
) -> logging.FileHandler:
    """
    Create a UTF-8 file handler, creating parent directories as needed.

    Args:
        path: Log file path
        formatter: Defaults to JSONFormatter
        level: Handler level

    Returns:
        Configured file handler
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter or JSONFormatter())
    return handler
