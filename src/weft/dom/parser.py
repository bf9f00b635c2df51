"""
HTML Parsing - Documents via html5lib, fragments via html.parser.
"""

import logging
from typing import IO

from bs4 import BeautifulSoup, FeatureNotFound

from weft.config import DOCUMENT_PARSER, FRAGMENT_PARSER
from weft.dom.nodes import Document, Node, wrap
from weft.exceptions import ConfigurationError, ParseError

logger = logging.getLogger(__name__)

Source = str | bytes | IO[str] | IO[bytes]


def _read(source: Source) -> str | bytes:
    if isinstance(source, str | bytes):
        return source
    try:
        return source.read()
    except OSError as e:
        raise ParseError(f"could not read HTML source: {e}") from e


def _soup(markup: str | bytes, parser: str, **options) -> BeautifulSoup:
    try:
        return BeautifulSoup(markup, parser, multi_valued_attributes=None, **options)
    except FeatureNotFound as e:
        raise ConfigurationError(f"HTML parser {parser!r} is not installed") from e


def parse_html(source: Source) -> Document:
    """
    Parse a complete HTML document.

    Args:
        source: Markup as str/bytes, or a readable file object

    Returns:
        Document built by the HTML5 tree construction algorithm
    """
    markup = _read(source)
    soup = _soup(markup, DOCUMENT_PARSER)
    logger.debug(f"Parsed document ({len(markup)} chars) with {DOCUMENT_PARSER}")
    return Document(soup)


def parse_fragment(source: Source) -> list[Node]:
    """
    Parse an HTML fragment into detached top-level nodes.

    Duplicate attributes keep their first value.
    """
    markup = _read(source)
    soup = _soup(markup, FRAGMENT_PARSER, on_duplicate_attribute="ignore")
    nodes = [child.extract() for child in list(soup.contents)]
    logger.debug(f"Parsed fragment into {len(nodes)} nodes")
    return [wrap(node) for node in nodes]
