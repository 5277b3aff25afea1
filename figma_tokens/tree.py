"""Search helpers over the Figma document tree."""

import re

from .models import FigmaNode, NodeType

_NON_ALPHANUMERIC = re.compile(r"[^0-9a-z]")


def find_page(document: FigmaNode, page_name: str) -> FigmaNode | None:
    """Find a page canvas of the document by name.

    Canvas names are compared lowercased with every non-alphanumeric
    character removed, so "🎨 Colours" matches the page name "Colours".

    Args:
        document: The DOCUMENT root node.
        page_name: Name of the page to look for.

    Returns:
        The first matching CANVAS node, or None.
    """
    wanted = page_name.lower()
    for canvas in document.children:
        if canvas.type is not NodeType.CANVAS:
            continue
        if _NON_ALPHANUMERIC.sub("", canvas.name.lower()) == wanted:
            return canvas
    return None


def find_nodes_by_type(node_type: NodeType, root: FigmaNode) -> list[FigmaNode]:
    """Recursively collect all descendants of ``root`` of a given kind.

    Nodes are returned depth-first in document order. A matching node is
    collected and its children are still searched. Component instances are
    skipped entirely, as they may carry overridden values.
    """
    nodes: list[FigmaNode] = []

    for child in root.children:
        if child.type is NodeType.INSTANCE:
            continue
        if child.type is node_type:
            nodes.append(child)
        if child.has_children:
            nodes.extend(find_nodes_by_type(node_type, child))

    return nodes


def find_frames(root: FigmaNode) -> list[FigmaNode]:
    return find_nodes_by_type(NodeType.FRAME, root)


def find_rectangles(root: FigmaNode) -> list[FigmaNode]:
    return find_nodes_by_type(NodeType.RECTANGLE, root)


def find_texts(root: FigmaNode) -> list[FigmaNode]:
    return find_nodes_by_type(NodeType.TEXT, root)


def find_components(root: FigmaNode) -> list[FigmaNode]:
    return find_nodes_by_type(NodeType.COMPONENT, root)


def find_swatches(root: FigmaNode) -> list[FigmaNode]:
    """All rectangles followed by all frames, the shapes used as token swatches."""
    return find_rectangles(root) + find_frames(root)
