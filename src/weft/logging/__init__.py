"""
Weft Logging Module.

Provides structured logging with Rich console output.
"""

from weft.logging.config import (
    WeftLogger,
    console,
    get_logger,
    logger,
    setup_logging,
)
from weft.logging.formatters import (
    CompactFormatter,
    JSONFormatter,
    create_file_handler,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "WeftLogger",
    "logger",
    "console",
    "JSONFormatter",
    "CompactFormatter",
    "create_file_handler",
]
