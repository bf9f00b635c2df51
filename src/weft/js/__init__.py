"""
Weft JS Module.

Renders let/const declarations and assignments that are safe to
embed in an inline ``<script>`` element.
"""

from weft.js.identifiers import (
    is_id_continue,
    is_id_start,
    is_identifier,
    is_property_access,
)
from weft.js.literals import (
    encode_bool,
    encode_int,
    encode_json,
    encode_string,
    escape_html,
    escape_string,
)
from weft.js.statements import (
    DeclarationKind,
    Statement,
    assign,
    assignment,
    assign_bool,
    assign_int,
    assign_json,
    assign_string,
    const_bool,
    const_int,
    const_json,
    const_string,
    declaration,
    declare,
    let_bool,
    let_int,
    let_json,
    let_string,
    make_assignment,
    make_declaration,
    value_kind,
)

__all__ = [
    "is_identifier",
    "is_property_access",
    "is_id_start",
    "is_id_continue",
    "escape_string",
    "escape_html",
    "encode_string",
    "encode_int",
    "encode_bool",
    "encode_json",
    "DeclarationKind",
    "Statement",
    "make_declaration",
    "make_assignment",
    "value_kind",
    "declaration",
    "assignment",
    "declare",
    "assign",
    "let_string",
    "let_int",
    "let_bool",
    "let_json",
    "const_string",
    "const_int",
    "const_bool",
    "const_json",
    "assign_string",
    "assign_int",
    "assign_bool",
    "assign_json",
]
