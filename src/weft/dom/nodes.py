"""
DOM Nodes - Fluent wrappers over BeautifulSoup trees.

Each wrapper holds the underlying BeautifulSoup object and exposes
chainable builder methods. Mutators return ``self``.
"""

import copy
import logging
import string
from collections.abc import Callable, Iterable
from enum import Enum
from urllib.parse import ParseResult, SplitResult

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Comment as BsComment
from bs4.element import Doctype as BsDoctype
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from bs4.formatter import HTMLFormatter
from pydantic import BaseModel

from weft.config import FRAGMENT_PARSER
from weft.dom.selectors import Selector
from weft.exceptions import DOMError

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Escape only & < > (and quotes in attributes); void elements as <br>.
FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def lower(s: str) -> str:
    """ASCII-only lower-casing, as HTML attribute names use."""
    return s.translate(_ASCII_LOWER)


class RawString(PreformattedString):
    """A string emitted verbatim, without entity substitution."""

    PREFIX = ""
    SUFFIX = ""


class NodeType(Enum):
    DOCUMENT = "Document"
    ELEMENT = "Element"
    TEXT = "Text"
    COMMENT = "Comment"
    DOCTYPE = "Doctype"
    RAW = "Raw"


class Attribute(BaseModel):
    """A single attribute; keys are stored lower-cased."""

    key: str
    value: str = ""

    model_config = {"frozen": True}


def attr(key: str, value: str) -> Attribute:
    """Create an attribute."""
    return Attribute(key=lower(key), value=value)


def attr_id(value: str) -> Attribute:
    return attr("id", value)


def attr_href(url: str | ParseResult | SplitResult) -> Attribute:
    """Create an ``href`` attribute from a string or a parsed URL."""
    if not isinstance(url, str):
        url = url.geturl()
    return attr("href", url)


class Node:
    """Base wrapper around a BeautifulSoup object."""

    node_type: NodeType

    def __init__(self, node: PageElement):
        self._node = node

    @property
    def raw(self) -> PageElement:
        """The wrapped BeautifulSoup object."""
        return self._node

    @property
    def parent_element(self) -> "Element | None":
        parent = self._node.parent
        if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup):
            return Element(parent)
        return None

    def clone(self) -> "Node":
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and other._node is self._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._node)[:40]!r})"


class _StringNode(Node):
    _node: NavigableString

    @property
    def data(self) -> str:
        return str(self._node)

    def clone(self) -> "_StringNode":
        return type(self)(type(self._node)(str(self._node)))


class Text(_StringNode):
    node_type = NodeType.TEXT


class Raw(_StringNode):
    node_type = NodeType.RAW


class Comment(_StringNode):
    node_type = NodeType.COMMENT


class Doctype(_StringNode):
    node_type = NodeType.DOCTYPE


Checker = Callable[["Element"], None]


def _select(root: Tag, selector: str | Selector) -> list["Element"]:
    if isinstance(selector, str):
        selector = Selector.parse(selector)
    return [Element(tag) for tag in selector.select(root)]


def _input_text(root: Tag, selector: str) -> list["Element"]:
    return [
        e
        for e in _select(root, selector)
        if e.tag == "input" and e.has_attr_value_lower("type", "text")
    ]


class Element(Node):
    """An element node with fluent builder methods."""

    node_type = NodeType.ELEMENT
    _node: Tag

    @property
    def tag(self) -> str:
        return self._node.name

    # ── children ─────────────────────────────────────────────────────────────

    def clear_contents(self) -> "Element":
        """Remove all children."""
        self._node.clear()
        return self

    def children(self, *nodes: "ChildNode") -> "Element":
        """Replace all children with the given nodes."""
        self.clear_contents()
        return self.append(*nodes)

    def append(self, *nodes: "ChildNode") -> "Element":
        """Append nodes after the existing children."""
        for node in nodes:
            if isinstance(node, Document):
                raise DOMError("a document cannot be appended to an element")
            self._node.append(node.raw)
        return self

    @property
    def contents(self) -> list[Node]:
        return [wrap(child) for child in self._node.contents]

    # ── attributes ───────────────────────────────────────────────────────────

    @property
    def attributes(self) -> list[Attribute]:
        return [
            Attribute(key=k, value=" ".join(v) if isinstance(v, list) else v)
            for k, v in self._node.attrs.items()
        ]

    def attrs(self, *attributes: Attribute) -> "Element":
        """
        Replace all attributes.

        Attributes are sorted by key; for duplicate keys the last one
        wins. Attributes with an empty key are dropped.
        """
        merged: list[Attribute] = []
        last_key = ""
        for a in sorted(attributes, key=lambda a: lower(a.key)):
            if not a.key:
                continue
            if a.key == last_key:
                merged.pop()
            last_key = a.key
            merged.append(a)

        self._node.attrs = {a.key: a.value for a in merged}
        return self

    def set_attrs(self, *attributes: Attribute) -> "Element":
        """Add attributes, overwriting existing values for the same keys."""
        return self.attrs(*self.attributes, *attributes)

    def set_bool_attr(self, key: str, value: bool) -> "Element":
        """Set a boolean attribute (``key=""``) or remove it."""
        if value:
            return self.set_attrs(attr(key, ""))
        return self.remove_attr(key)

    def remove_attr(self, key: str) -> "Element":
        key = lower(key)
        self._node.attrs = {k: v for k, v in self._node.attrs.items() if k != key}
        return self

    def get_attr(self, key: str) -> str:
        """Return the attribute value, or an empty string if absent."""
        value = self._node.attrs.get(key, "")
        return " ".join(value) if isinstance(value, list) else value

    @property
    def id(self) -> str:
        return self.get_attr("id")

    def has_attr_value_lower(self, key: str, value: str) -> bool:
        """Check an attribute value case-insensitively."""
        return any(
            a.key == lower(key) and lower(a.value) == lower(value) for a in self.attributes
        )

    # ── classes ──────────────────────────────────────────────────────────────

    def set_classes(self, *classes: str) -> "Element":
        """Merge classes into the class attribute, sorted and de-duplicated."""
        old = self.get_attr("class")
        if old == "":
            return self.set_attrs(attr("class", " ".join(classes)))

        merged: list[str] = []
        for c in sorted([*old.split(" "), *classes]):
            if not merged or merged[-1] != c:
                merged.append(c)
        return self.set_attrs(attr("class", " ".join(merged)))

    def remove_class(self, name: str) -> "Element":
        """Remove every occurrence of a class."""
        classes = [c for c in self.get_attr("class").split(" ") if c != name]
        return self.set_attrs(attr("class", " ".join(classes)))

    # ── tree ─────────────────────────────────────────────────────────────────

    def has_root(self, root: "Element") -> bool:
        """Check whether root is an ancestor of this element."""
        return any(parent is root.raw for parent in self._node.parents)

    def clone(self) -> "Element":
        """Deep copy, detached from any tree."""
        return Element(copy.copy(self._node))

    def query(self, selector: str) -> list["Element"]:
        """
        Return descendants matching a CSS selector.

        Raises:
            SelectorError: If the selector is invalid
        """
        return _select(self._node, selector)

    def query_selector(self, selector: Selector) -> list["Element"]:
        return _select(self._node, selector)

    def input_text(self, selector: str) -> list["Element"]:
        """Return matching ``<input type="text">`` elements."""
        return _input_text(self._node, selector)

    def render(self, *checkers: Checker) -> str:
        """
        Serialize the element after running the given checkers.

        Raises:
            CheckError: If a checker rejects the element
        """
        for check in checkers:
            check(self)
        return self._node.decode(formatter=FORMATTER)


ChildNode = Text | Raw | Comment | Doctype | Element


class Document(Node):
    """A parsed HTML document."""

    node_type = NodeType.DOCUMENT
    _node: BeautifulSoup

    def clone(self) -> "Document":
        """Deep copy of the whole document."""
        soup = BeautifulSoup("", FRAGMENT_PARSER, multi_valued_attributes=None)
        for child in self._node.contents:
            soup.append(copy.copy(child))
        return Document(soup)

    @property
    def contents(self) -> list[Node]:
        return [wrap(child) for child in self._node.contents]

    def query(self, selector: str) -> list[Element]:
        return _select(self._node, selector)

    def query_selector(self, selector: Selector) -> list[Element]:
        return _select(self._node, selector)

    def input_text(self, selector: str) -> list[Element]:
        return _input_text(self._node, selector)

    def render(self, *checkers: Checker) -> str:
        """Serialize the document; checkers run against each ``<html>`` element."""
        if checkers:
            for html in self.query("html"):
                for check in checkers:
                    check(html)
        return self._node.decode(formatter=FORMATTER)


def wrap(node: PageElement) -> Node:
    """Return the wrapper matching a BeautifulSoup object."""
    if isinstance(node, BeautifulSoup):
        return Document(node)
    if isinstance(node, Tag):
        return Element(node)
    if isinstance(node, RawString):
        return Raw(node)
    if isinstance(node, BsComment):
        return Comment(node)
    if isinstance(node, BsDoctype):
        return Doctype(node)
    if isinstance(node, NavigableString):
        return Text(node)
    raise DOMError(f"unsupported node: {type(node).__name__}")


def remove(node: Node) -> None:
    """Detach a node from its parent; no-op for a detached node."""
    if node.raw.parent is None:
        return
    node.raw.extract()


# ── factories ────────────────────────────────────────────────────────────────

_factory = BeautifulSoup("", FRAGMENT_PARSER, multi_valued_attributes=None)


def elem(tag: str) -> Element:
    """Create an empty element."""
    return Element(_factory.new_tag(lower(tag)))


def text(data: str) -> Text:
    """Create a text node; markup characters are escaped on output."""
    return Text(NavigableString(data))


def raw_text(markup: str) -> Raw:
    """Create a node emitted verbatim on output."""
    return Raw(RawString(markup))


def lf() -> Text:
    return text("\n")


def script(*statements: str | Iterable[str]) -> Element:
    """
    Create a ``<script>`` element holding the given statements.

    Statements are emitted verbatim, one per line.
    """
    lines: list[str] = []
    for s in statements:
        if isinstance(s, str):
            lines.append(s)
        else:
            lines.extend(s)
    return elem("script").append(raw_text("\n".join(lines)))
