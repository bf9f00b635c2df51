"""
Literal Encoding - Script-safe rendering of Python values.

Every encoder here produces text that can sit inside an inline
``<script>`` element: no output can contain ``</script>`` or a raw
line terminator that would change how the statement parses.
"""

import json
import operator
import re
from typing import Any

from pydantic import BaseModel, JsonValue

from weft.config import JSON_SEPARATORS
from weft.exceptions import ScriptEncodingError

_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
    "=": "\\u003D",
}

# Lone surrogates cannot be encoded as UTF-8.
_LONE_SURROGATE = re.compile("[\\ud800-\\udfff]")

# JSON structure never contains these outside of string values.
_JSON_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "'": "&#39;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&#34;",
    }
)


def _unicode_escape(cp: int) -> str:
    if cp > 0xFFFF:
        cp -= 0x10000
        return f"\\u{0xD800 + (cp >> 10):04X}\\u{0xDC00 + (cp & 0x3FF):04X}"
    return f"\\u{cp:04X}"


def escape_string(value: str) -> str:
    """
    Escape text for use inside a quoted script string literal.

    Quotes and backslashes get a backslash; ``< > & =`` and control
    characters become ``\\uXXXX``; non-ASCII characters pass through
    unless they are not printable.

    Args:
        value: Raw string

    Returns:
        Escaped text, without surrounding quotes
    """
    out = []
    for ch in value:
        if ch in _STRING_ESCAPES:
            out.append(_STRING_ESCAPES[ch])
        elif ch < " ":
            out.append(_unicode_escape(ord(ch)))
        elif ch >= "\x80" and not ch.isprintable():
            out.append(_unicode_escape(ord(ch)))
        else:
            out.append(ch)
    return "".join(out)


def encode_string(value: str) -> str:
    """Render a double-quoted string literal."""
    return f'"{escape_string(value)}"'


def encode_int(value: int) -> str:
    """
    Render an integer literal.

    Raises:
        TypeError: If value is not an integer, e.g. a float
    """
    return str(operator.index(value))


def encode_bool(value: bool) -> str:
    """Render a boolean literal."""
    return "true" if value else "false"


def _json_default(obj: Any) -> JsonValue:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise ScriptEncodingError(f"json: unsupported type: {type(obj).__name__}")


def encode_json(value: Any) -> str:
    """
    Serialize a value to compact, HTML-safe JSON.

    Accepts the JSON value set (None, bool, numbers, strings, mappings
    with string keys, lists and tuples) plus pydantic models.

    Lone surrogates in strings are replaced with U+FFFD.

    Raises:
        ScriptEncodingError: If the value cannot be represented as JSON
    """
    try:
        text = json.dumps(
            value,
            separators=JSON_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except RecursionError as e:
        raise ScriptEncodingError("json: value nested too deeply") from e
    except (TypeError, ValueError) as e:
        raise ScriptEncodingError(f"json: {e}") from e
    text = _LONE_SURROGATE.sub("\ufffd", text)
    return text.translate(_JSON_HTML_ESCAPES)


def escape_html(text: str) -> str:
    """Escape the five HTML-special characters."""
    return text.translate(_HTML_ESCAPES)
