"""
Weft DOM Module.

Provides fluent node wrappers, parsing, CSS queries, render checkers
and tree dumps on top of BeautifulSoup.
"""

from weft.dom.checks import (
    DEFAULT_CHECKERS,
    id_duplicate_check,
    id_has_blank_check,
    id_missing_check,
)
from weft.dom.dump import dump_tree, node_label
from weft.dom.nodes import (
    Attribute,
    Checker,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    NodeType,
    Raw,
    Text,
    attr,
    attr_href,
    attr_id,
    elem,
    lf,
    raw_text,
    remove,
    script,
    text,
    wrap,
)
from weft.dom.parser import parse_fragment, parse_html
from weft.dom.selectors import Selector

__all__ = [
    "Node",
    "NodeType",
    "Document",
    "Element",
    "Text",
    "Raw",
    "Comment",
    "Doctype",
    "Attribute",
    "Checker",
    "Selector",
    "attr",
    "attr_id",
    "attr_href",
    "elem",
    "text",
    "raw_text",
    "lf",
    "script",
    "wrap",
    "remove",
    "parse_html",
    "parse_fragment",
    "id_duplicate_check",
    "id_missing_check",
    "id_has_blank_check",
    "DEFAULT_CHECKERS",
    "dump_tree",
    "node_label",
]
