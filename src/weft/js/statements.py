"""
Statement Rendering - let/const declarations and assignments.

String, int and bool renderers never raise. When the name is not a
valid identifier they return an inert statement whose target starts
with ``</script>``: the enclosing script element is closed and the
remaining text is a syntax error, so misuse is visible but cannot run.

JSON renderers raise instead, since serialization can already fail.
"""

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from weft.config import FALLBACK_MARKER, ORIGIN_PREFIX
from weft.exceptions import InvalidIdentifierError
from weft.js.identifiers import is_identifier, is_property_access
from weft.js.literals import (
    encode_bool,
    encode_int,
    encode_json,
    encode_string,
    escape_html,
)

logger = logging.getLogger(__name__)


class DeclarationKind(StrEnum):
    """Declaration keyword."""

    LET = "let"
    CONST = "const"


class Statement(BaseModel):
    """A rendered statement, either valid or inert."""

    keyword: DeclarationKind | None = None
    target: str
    literal: str
    origin: str = ""
    fallback: bool = False

    model_config = {"frozen": True}

    @classmethod
    def ok(
        cls, keyword: DeclarationKind | None, target: str, literal: str, origin: str = ""
    ) -> "Statement":
        return cls(keyword=keyword, target=target, literal=literal, origin=origin)

    @classmethod
    def inert(
        cls, keyword: DeclarationKind | None, target: str, literal: str, origin: str
    ) -> "Statement":
        broken = f"{FALLBACK_MARKER} {origin}: {escape_html(target)}"
        return cls(keyword=keyword, target=broken, literal=literal, origin=origin, fallback=True)

    def __str__(self) -> str:
        if self.keyword is None:
            return f"{self.target} = {self.literal};"
        return f"{self.keyword} {self.target} = {self.literal};"


def _origin(func_name: str) -> str:
    return f"{ORIGIN_PREFIX}{func_name}"


def _build(
    keyword: DeclarationKind | None,
    name: str,
    literal: str,
    func_name: str,
) -> Statement:
    valid = is_identifier(name) if keyword is not None else is_property_access(name)
    origin = _origin(func_name)
    if valid:
        return Statement.ok(keyword, name, literal, origin)
    logger.debug(f"Invalid binding {name!r} in {origin}, rendering inert statement")
    return Statement.inert(keyword, name, literal, origin)


def _build_json(keyword: DeclarationKind | None, name: str, value: Any) -> Statement:
    valid = is_identifier(name) if keyword is not None else is_property_access(name)
    if not valid:
        raise InvalidIdentifierError(name)
    return Statement.ok(keyword, name, encode_json(value))


def make_declaration(
    kind: DeclarationKind, name: str, literal: str, func_name: str
) -> Statement:
    """Build a declaration from an already-encoded literal."""
    return _build(DeclarationKind(kind), name, literal, func_name)


def make_assignment(path: str, literal: str, func_name: str) -> Statement:
    """Build an assignment from an already-encoded literal."""
    return _build(None, path, literal, func_name)


# ── let ──────────────────────────────────────────────────────────────────────


def let_string(name: str, value: str) -> str:
    """Render ``let name = "value";``."""
    return str(make_declaration(DeclarationKind.LET, name, encode_string(value), "let_string"))


def let_int(name: str, value: int) -> str:
    """Render ``let name = value;`` for an integer."""
    return str(make_declaration(DeclarationKind.LET, name, encode_int(value), "let_int"))


def let_bool(name: str, value: bool) -> str:
    """Render ``let name = true|false;``."""
    return str(make_declaration(DeclarationKind.LET, name, encode_bool(value), "let_bool"))


def let_json(name: str, value: Any) -> str:
    """
    Render ``let name = <json>;``.

    Raises:
        InvalidIdentifierError: If name is not a valid identifier
        ScriptEncodingError: If value cannot be serialized
    """
    return str(_build_json(DeclarationKind.LET, name, value))


# ── const ────────────────────────────────────────────────────────────────────


def const_string(name: str, value: str) -> str:
    """Render ``const name = "value";``."""
    return str(
        make_declaration(DeclarationKind.CONST, name, encode_string(value), "const_string")
    )


def const_int(name: str, value: int) -> str:
    """Render ``const name = value;`` for an integer."""
    return str(make_declaration(DeclarationKind.CONST, name, encode_int(value), "const_int"))


def const_bool(name: str, value: bool) -> str:
    """Render ``const name = true|false;``."""
    return str(make_declaration(DeclarationKind.CONST, name, encode_bool(value), "const_bool"))


def const_json(name: str, value: Any) -> str:
    """Render ``const name = <json>;``. Raises like :func:`let_json`."""
    return str(_build_json(DeclarationKind.CONST, name, value))


# ── assignment ───────────────────────────────────────────────────────────────


def assign_string(path: str, value: str) -> str:
    """Render ``a.b.c = "value";``."""
    return str(make_assignment(path, encode_string(value), "assign_string"))


def assign_int(path: str, value: int) -> str:
    return str(make_assignment(path, encode_int(value), "assign_int"))


def assign_bool(path: str, value: bool) -> str:
    return str(make_assignment(path, encode_bool(value), "assign_bool"))


def assign_json(path: str, value: Any) -> str:
    """
    Render ``a.b.c = <json>;``.

    Raises:
        InvalidIdentifierError: If any path segment is not a valid identifier
        ScriptEncodingError: If value cannot be serialized
    """
    return str(_build_json(None, path, value))


# ── generic dispatch ─────────────────────────────────────────────────────────

_ENCODERS: dict[str, tuple[Callable[[Any], str], str]] = {
    "bool": (encode_bool, "bool"),
    "int": (encode_int, "int"),
    "str": (encode_string, "string"),
}


def value_kind(value: Any) -> str:
    """Classify a value as ``bool``, ``int``, ``str`` or ``json``."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, str):
        return "str"
    return "json"


def declaration(kind: DeclarationKind | str, name: str, value: Any) -> Statement:
    """
    Build a declaration, picking the encoder from the value's type.

    Strings, ints and bools never raise and may come back inert;
    anything else is encoded as JSON and raises like :func:`let_json`.
    """
    kind = DeclarationKind(kind)
    vk = value_kind(value)
    if vk == "json":
        return _build_json(kind, name, value)
    encoder, suffix = _ENCODERS[vk]
    return make_declaration(kind, name, encoder(value), f"{kind}_{suffix}")


def assignment(path: str, value: Any) -> Statement:
    """Build an assignment, picking the encoder from the value's type."""
    vk = value_kind(value)
    if vk == "json":
        return _build_json(None, path, value)
    encoder, suffix = _ENCODERS[vk]
    return make_assignment(path, encoder(value), f"assign_{suffix}")


def declare(kind: DeclarationKind | str, name: str, value: Any) -> str:
    """Render a declaration for any supported value."""
    return str(declaration(kind, name, value))


def assign(path: str, value: Any) -> str:
    """Render an assignment for any supported value."""
    return str(assignment(path, value))
