"""
Logging Configuration - Structured logging with Rich console.

Provides readable logging for script rendering and tree checks.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from weft.config import DEFAULT_LOG_LEVEL, LogLevel
from weft.logging.formatters import CompactFormatter, create_file_handler

# Custom theme for Weft logs
WEFT_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "binding": "bold green",
        "fallback": "bold magenta",
        "check": "dim cyan",
    }
)

# Shared console instance, on stderr so command output stays clean
console = Console(theme=WEFT_THEME, stderr=True)


def setup_logging(
    level: LogLevel = DEFAULT_LOG_LEVEL,
    show_path: bool = False,
    json_file: str | None = None,
    plain: bool = False,
) -> None:
    """
    Configure logging with Rich console handler.

    Args:
        level: Logging level
        show_path: Show file path in log messages
        json_file: Also write JSON lines to this file
        plain: Use single-line output instead of Rich formatting
    """
    handler: logging.Handler
    if plain:
        handler = logging.StreamHandler()
        handler.setFormatter(CompactFormatter())
    else:
        handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=show_path,
            rich_tracebacks=True,
            markup=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    handlers: list[logging.Handler] = [handler]
    if json_file:
        handlers.append(create_file_handler(json_file))

    # Configure root weft logger
    weft_logger = logging.getLogger("weft")
    weft_logger.setLevel(level)
    weft_logger.handlers = handlers
    weft_logger.propagate = False

    for name in ["weft.js", "weft.dom", "weft.cli"]:
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with weft prefix.

    Args:
        name: Logger name (will be prefixed with 'weft.')

    Returns:
        Configured logger
    """
    if not name.startswith("weft."):
        name = f"weft.{name}"
    return logging.getLogger(name)


class WeftLogger:
    """
    Structured logger for Weft operations.

    Provides semantic logging methods for different operation types.
    """

    def __init__(self, name: str = "weft"):
        self._logger = get_logger(name)

    def binding(self, statement: str) -> None:
        """Log a rendered binding (debug level)."""
        truncated = statement[:80] + ("..." if len(statement) > 80 else "")
        self._logger.debug(
            f"[binding]binding[/binding]: {escape(truncated)}", extra={"statement": statement}
        )

    def fallback(self, origin: str, name: str) -> None:
        """Log an invalid binding rendered as inert output."""
        self._logger.warning(
            f"[fallback]{origin}[/fallback]: invalid identifier {escape(repr(name))}",
            extra={"origin": origin, "binding": name},
        )

    def check(self, name: str, passed: bool, detail: str = "") -> None:
        """Log a render checker result."""
        msg = f"[check]{name}[/check] {'passed' if passed else 'failed'}"
        if detail:
            msg += f" - {escape(detail)}"
        self._logger.info(msg, extra={"check": name})

    def parsed(self, source: str, node_count: int) -> None:
        """Log a parsed HTML source."""
        self._logger.debug(f"Parsed {source}: {node_count} top-level nodes")

    def error(self, message: str) -> None:
        """Log a failed command."""
        self._logger.error(f"[error]Error:[/error] {escape(message)}")


# Default logger instance
logger = WeftLogger()
