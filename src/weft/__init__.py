"""
Weft - Fluent HTML building with script-safe JavaScript literals.

Builds and edits HTML trees on top of BeautifulSoup and renders
let/const/assignment statements that can be embedded in an inline
``<script>`` element without closing it early.

Usage:
    from weft import js
    from weft.dom import elem, script, text

    page = elem("body").append(
        elem("h1").append(text("Hello")),
        script(js.const_string("greeting", user_input)),
    )
    html = page.render()
"""

__version__ = "0.1.0"

from weft import js
from weft.dom import Document, Element, Selector, elem, parse_fragment, parse_html, script, text
from weft.exceptions import (
    InvalidIdentifierError,
    ScriptEncodingError,
    ScriptError,
    WeftError,
)
from weft.js import assign, declare, is_identifier, is_property_access
from weft.logging import logger, setup_logging

__all__ = [
    "__version__",
    "js",
    "declare",
    "assign",
    "is_identifier",
    "is_property_access",
    "Document",
    "Element",
    "Selector",
    "elem",
    "text",
    "script",
    "parse_html",
    "parse_fragment",
    "WeftError",
    "ScriptError",
    "InvalidIdentifierError",
    "ScriptEncodingError",
    "setup_logging",
    "logger",
]
