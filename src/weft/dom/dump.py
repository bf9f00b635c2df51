"""
Tree Dump - Debug view of a node tree as a Rich tree.
"""

from rich.text import Text as RichText
from rich.tree import Tree

from weft.dom.nodes import Document, Element, Node, wrap


def _data(node: Node) -> str:
    if isinstance(node, Document):
        return ""
    if isinstance(node, Element):
        return node.tag
    return node.data.replace("\n", "<LF>")


def node_label(node: Node) -> str:
    """One-line label, e.g. ``Element <p>`` or ``Text <Hello<LF>>``."""
    return f"{node.node_type.value} <{_data(node)}>"


def _add(tree: Tree, node: Node, attrs: bool) -> None:
    if attrs and isinstance(node, Element):
        for a in node.attributes:
            tree.add(RichText(f"Attr {a.key} {a.value}", style="dim"))
    if isinstance(node, Document | Element):
        for child in node.raw.contents:
            wrapped = wrap(child)
            _add(tree.add(RichText(node_label(wrapped))), wrapped, attrs)


def dump_tree(node: Node, attrs: bool = False) -> Tree:
    """
    Build a Rich tree mirroring the node tree.

    Args:
        node: Root node
        attrs: Add one leaf per attribute under each element

    Returns:
        Tree ready for ``Console.print``
    """
    tree = Tree(RichText(node_label(node)))
    _add(tree, node, attrs)
    return tree
