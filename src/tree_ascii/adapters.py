"""Ready-made ``PrintableTreeNode`` implementations for common tree sources.

* ``LabelNode`` holds a label and a list of children in memory.
* ``from_mapping`` builds ``LabelNode`` trees from nested dicts (e.g. parsed JSON).
* ``GraphTreeNode`` views a ``networkx.DiGraph`` as a tree rooted at one node.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

import networkx as nx

from tree_ascii.layout.node import MISSING_CHILD, PrintableTreeNode
from tree_ascii.layout.types import ParentRelation
from tree_ascii.renderers.charset import BoxStyle, DefaultBoxStyle


class LabelNode(PrintableTreeNode):
    """In-memory tree node. ``None`` entries in ``children`` are absent children."""

    def __init__(
        self,
        label: str,
        children: Sequence[PrintableTreeNode | None] = (),
        box_style: BoxStyle | None = None,
    ) -> None:
        self.label = label
        self.children = list(children)
        self.box_style = box_style

    def get_label(self) -> str:
        return self.label

    def get_child_count(self) -> int:
        return len(self.children)

    def get_child(self, selector: int) -> PrintableTreeNode:
        child = self.children[selector]
        return MISSING_CHILD if child is None else child

    def get_box_style(self, relation: ParentRelation) -> BoxStyle:
        if self.box_style is None:
            return super().get_box_style(relation)
        return self.box_style

    def __repr__(self) -> str:
        return f"LabelNode({self.label!r}, children={len(self.children)})"


def from_mapping(data: Mapping[str, Any] | str) -> LabelNode:
    """Build a ``LabelNode`` tree from nested mappings.

    Each mapping needs a ``label``; ``children`` is an optional list whose
    entries are mappings, plain strings (leaf shorthand) or ``null`` for an
    absent child. An optional ``box_style`` names a ``DefaultBoxStyle``.

    Args:
        data: The root mapping, or a string for a single leaf.

    Returns:
        The root node.

    Raises:
        ValueError: If an entry is neither a mapping nor a string, lacks a
            label, or names an unknown box style.
    """
    if isinstance(data, str):
        return LabelNode(data)
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a mapping or a string as tree node, got {type(data).__name__}")
    if "label" not in data:
        raise ValueError(f"tree node without 'label': {dict(data)!r}")

    children = data.get("children") or []
    if isinstance(children, (str, Mapping)) or not isinstance(children, Sequence):
        raise ValueError(f"'children' of '{data['label']}' must be a list")

    box_style = data.get("box_style")
    return LabelNode(
        "" if data["label"] is None else str(data["label"]),
        [None if child is None else from_mapping(child) for child in children],
        DefaultBoxStyle.from_name(box_style) if box_style is not None else None,
    )


# ─── networkx ────────────────────────────────────────────────────────────────


class GraphTreeNode(PrintableTreeNode):
    """One node of a ``networkx.DiGraph``; its children are its successors.

    The view is lazy and does not check for cycles, so printing a cyclic graph
    only terminates with a finite ``max_depth``.
    """

    def __init__(self, graph: nx.DiGraph, node: Hashable, label_attr: str = "label") -> None:
        self.graph = graph
        self.node = node
        self.label_attr = label_attr
        self._successors: list[Hashable] | None = None

    @property
    def successors(self) -> list[Hashable]:
        if self._successors is None:
            self._successors = list(self.graph.successors(self.node))
        return self._successors

    def get_label(self) -> str:
        label = self.graph.nodes[self.node].get(self.label_attr)
        return str(self.node) if label is None else str(label)

    def get_child_count(self) -> int:
        return len(self.successors)

    def get_child(self, selector: int) -> PrintableTreeNode:
        return GraphTreeNode(self.graph, self.successors[selector], self.label_attr)

    def __repr__(self) -> str:
        return f"GraphTreeNode({self.node!r})"


def find_root(graph: nx.DiGraph) -> Hashable:
    """Return the only node of ``graph`` without predecessors.

    Raises:
        ValueError: If there is no such node or more than one.
    """
    roots = [n for n in graph.nodes if graph.in_degree(n) == 0]
    if len(roots) != 1:
        found = ", ".join(repr(n) for n in roots) or "none"
        raise ValueError(f"expected exactly one node without incoming edges, found: {found}")
    return roots[0]


def from_graph(graph: nx.DiGraph, root: Hashable | None = None, label_attr: str = "label") -> GraphTreeNode:
    """Wrap ``graph`` as a printable tree.

    Args:
        graph: A directed graph; edges point from parent to child.
        root: Node to start from; defaults to the only node without incoming edges.
        label_attr: Node attribute holding the label; the node id is used where it is missing.

    Raises:
        ValueError: If ``root`` is not in the graph or cannot be determined.
    """
    if root is None:
        root = find_root(graph)
    elif root not in graph:
        raise ValueError(f"root {root!r} is not a node of the graph")
    return GraphTreeNode(graph, root, label_attr)


def graph_from_json(data: Mapping[str, Any]) -> nx.DiGraph:
    """Build a ``DiGraph`` from ``{"nodes": [...], "edges": [...]}``.

    Nodes are ids or mappings with an ``id`` and further attributes. Edges
    (``links`` is accepted too) are ``[source, target]`` pairs or mappings
    with ``source`` and ``target``.

    Raises:
        ValueError: If a node has no id or an edge has no endpoints.
    """
    graph: nx.DiGraph = nx.DiGraph()
    for node in data.get("nodes", []):
        if isinstance(node, Mapping):
            if "id" not in node:
                raise ValueError(f"graph node without 'id': {dict(node)!r}")
            attrs = {k: v for k, v in node.items() if k != "id"}
            graph.add_node(node["id"], **attrs)
        else:
            graph.add_node(node)

    edges = data.get("edges", data.get("links", []))
    for edge in edges:
        if isinstance(edge, Mapping):
            if "source" not in edge or "target" not in edge:
                raise ValueError(f"graph edge needs 'source' and 'target': {dict(edge)!r}")
            graph.add_edge(edge["source"], edge["target"])
        elif isinstance(edge, Sequence) and not isinstance(edge, str) and len(edge) == 2:
            graph.add_edge(edge[0], edge[1])
        else:
            raise ValueError(f"graph edge must be a [source, target] pair, got: {edge!r}")
    return graph


def is_graph_document(data: Any) -> bool:
    """True if parsed JSON looks like a node/edge list rather than a nested tree."""
    return isinstance(data, Mapping) and "nodes" in data and ("edges" in data or "links" in data)
