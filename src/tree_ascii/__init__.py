"""tree-ascii: print trees as plain text diagrams."""

from tree_ascii.adapters import GraphTreeNode, LabelNode, from_graph, from_mapping
from tree_ascii.config import FrameConfig, TreeLayoutConfig
from tree_ascii.layout import MISSING_CHILD, UNLIMITED_DEPTH, NodeKey, ParentRelation, PrintableTreeNode
from tree_ascii.printer import TreeLayout, TreePrinter
from tree_ascii.renderers import DefaultBoxStyle, TextCanvas


def render_tree(root: PrintableTreeNode | None, layout: str | TreeLayout = "top-down", max_depth: int | None = None) -> str:
    """Print a tree and return the diagram as text.

    Args:
        root: Root node of the tree.
        layout: A ``TreeLayout`` or its name, e.g. ``"top-down"`` or ``"index-slim"``.
        max_depth: Number of levels to print; None prints all of them.

    Returns:
        The diagram, lines joined by ``\\n``, without a trailing newline.

    Raises:
        ValueError: If the layout name is unknown.
    """
    if isinstance(layout, str):
        layout = TreeLayout.from_name(layout)
    canvas = TreePrinter(layout).print(root, UNLIMITED_DEPTH if max_depth is None else max_depth)
    return canvas.export()


__all__ = [
    "MISSING_CHILD",
    "UNLIMITED_DEPTH",
    "DefaultBoxStyle",
    "FrameConfig",
    "GraphTreeNode",
    "LabelNode",
    "NodeKey",
    "ParentRelation",
    "PrintableTreeNode",
    "TextCanvas",
    "TreeLayout",
    "TreeLayoutConfig",
    "from_graph",
    "from_mapping",
    "render_tree",
]
