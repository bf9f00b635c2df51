"""
Weft Configuration.

Centralizes default values and configuration settings.
"""

from typing import Literal

# Script rendering
FALLBACK_MARKER = "</script> add By"
ORIGIN_PREFIX = "js."
JSON_SEPARATORS = (",", ":")

# HTML parsing
DOCUMENT_PARSER = "html5lib"
FRAGMENT_PARSER = "html.parser"

# Logging
LOG_LEVEL_ENV = "WEFT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
