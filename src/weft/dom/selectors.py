"""
CSS Selectors - Compiled selector wrapper over soupsieve.
"""

import logging

import soupsieve
from bs4 import Tag

from weft.exceptions import SelectorError

logger = logging.getLogger(__name__)


class Selector:
    """A compiled CSS selector."""

    def __init__(self, compiled: soupsieve.SoupSieve):
        self._compiled = compiled

    @classmethod
    def parse(cls, pattern: str) -> "Selector":
        """
        Compile a CSS selector.

        Raises:
            SelectorError: If the selector syntax is invalid
        """
        try:
            compiled = soupsieve.compile(pattern)
        except soupsieve.SelectorSyntaxError as e:
            raise SelectorError(f"invalid selector {pattern!r}: {e}") from e
        logger.debug(f"Compiled selector: {pattern}")
        return cls(compiled)

    @property
    def pattern(self) -> str:
        return self._compiled.pattern

    def select(self, root: Tag) -> list[Tag]:
        """Return descendants of root matching the selector, in document order."""
        return self._compiled.select(root)

    def match(self, tag: Tag) -> bool:
        return self._compiled.match(tag)

    def __repr__(self) -> str:
        return f"Selector({self.pattern!r})"
