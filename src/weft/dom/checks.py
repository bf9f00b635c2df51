"""
Render Checkers - Validations run before serializing a tree.

A checker receives the element being rendered and raises
``CheckError`` to reject it.
"""

from weft.dom.nodes import Element
from weft.exceptions import CheckError


def id_duplicate_check(element: Element) -> None:
    """Reject trees where two elements share an id."""
    seen: set[str] = set()
    for e in element.query("[id]"):
        if e.id in seen:
            raise CheckError(f"duplicate id: {e.id}")
        seen.add(e.id)


def id_missing_check(element: Element) -> None:
    """Reject ``id`` attributes without a value."""
    for e in element.query("[id]"):
        if e.id == "":
            raise CheckError("missing id")


def id_has_blank_check(element: Element) -> None:
    """Reject ids containing a space."""
    for e in element.query("[id]"):
        if " " in e.id:
            raise CheckError(f"id has blank: {e.id}")


DEFAULT_CHECKERS = (id_duplicate_check, id_missing_check, id_has_blank_check)
