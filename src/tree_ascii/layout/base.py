"""Shared machinery of the tree drawing policies.

A policy prints a tree in two phases. ``scan()`` walks the source tree
once, depth first, and records the geometry of every node in a fresh
``LayoutSession``, keyed by ``NodeKey``. ``draw()`` then walks that
session, never the source tree, and paints boxes and connector lines.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from tree_ascii.config import FrameConfig, TreeLayoutConfig
from tree_ascii.errors import ConfigurationError, TreePrintError
from tree_ascii.layout.node import MISSING_CHILD, PrintableTreeNode, is_missing
from tree_ascii.layout.types import (
    MISSING_INFO,
    NULL_INFO,
    TRUNCATED_INFO,
    EntryKind,
    NodeFormatInfo,
    NodeKey,
    ParentRelation,
)
from tree_ascii.renderers.alignment import TextAlignment
from tree_ascii.renderers.canvas import TextCanvas
from tree_ascii.renderers.charset import BoxStyle
from tree_ascii.types import CanvasFormat

logger = logging.getLogger(__name__)

UNLIMITED_DEPTH = sys.maxsize

ROOT_KEY = NodeKey.root()


class TreeDrawingPolicy(Protocol):
    """Protocol that all tree drawing policies must implement."""

    def scan(self, root: PrintableTreeNode | None, max_depth: int = UNLIMITED_DEPTH) -> CanvasFormat:
        """Compute the layout of ``root`` and return the canvas size it needs."""
        ...

    def draw(self, canvas: TextCanvas) -> None:
        """Paint the tree of the last scan onto ``canvas``."""
        ...


# ─── Layout Session ──────────────────────────────────────────────────────────


@dataclass
class LayoutSession:
    """Everything one scan computes and the following draw consumes."""

    max_depth: int
    scratch: TextCanvas
    entries: dict[NodeKey, NodeFormatInfo] = field(default_factory=dict)
    level_sizes: list[int] = field(default_factory=list)

    def update_level_size(self, level: int, size: int) -> None:
        """Raise the recorded maximum own node size of ``level`` to at least ``size``."""
        while len(self.level_sizes) <= level:
            self.level_sizes.append(0)
        self.level_sizes[level] = max(self.level_sizes[level], size)

    def level_offset(self, key: NodeKey, spacing: int) -> int:
        """Sum of all level sizes above ``key``'s level, each followed by ``spacing``."""
        return sum(self.level_sizes[i] + spacing for i in range(len(key) - 1))

    def levels_extent(self, spacing: int) -> int:
        if not self.level_sizes:
            return 1
        return sum(self.level_sizes) + (len(self.level_sizes) - 1) * spacing

    def root(self) -> NodeFormatInfo | None:
        return self.entries.get(ROOT_KEY)


@dataclass(frozen=True)
class NodeFacts:
    """What the scan reads from a source node, each accessor called once."""

    node: PrintableTreeNode
    relation: ParentRelation
    label: str
    child_count: int
    box_style: BoxStyle
    print_width: int
    print_height: int
    children: tuple[PrintableTreeNode | None, ...]

    @property
    def expanded(self) -> bool:
        """True if the children are laid out, False if there are none or the depth limit cut them off."""
        return len(self.children) > 0


def sibling_draw_order(count: int) -> list[int]:
    """Order in which siblings are painted: outer ones first, the middle one last.

    Lines painted later win where strokes overlap, so this order decides how
    crossings look.
    """
    mid = count // 2
    return list(range(mid)) + list(range(count - 1, mid, -1)) + [mid]


# ─── Policy Base ─────────────────────────────────────────────────────────────


class StandardTreeDrawingPolicy(ABC):
    """Base of the standard policies: memoized scan, node rendering, degenerate roots.

    Subclasses supply the subtree width and height recursion, the canvas
    size and the drawing of a non-degenerate tree.
    """

    text_alignment = TextAlignment.CENTER_CENTER

    def __init__(self, frame_config: FrameConfig, layout_config: TreeLayoutConfig) -> None:
        if frame_config is None or layout_config is None:
            raise ConfigurationError(
                "Arguments frame_config and layout_config are mandatory, given: "
                f"frame_config={frame_config}, layout_config={layout_config}"
            )
        self.frame_config = frame_config
        self.layout_config = layout_config
        self._session: LayoutSession | None = None
        logger.debug("%s created with %s, %s", type(self).__name__, frame_config, layout_config)

    @property
    def session(self) -> LayoutSession:
        """The session of the last scan."""
        if self._session is None:
            raise TreePrintError("draw() called before scan()")
        return self._session

    # ── scan ──

    def scan(self, root: PrintableTreeNode | None, max_depth: int = UNLIMITED_DEPTH) -> CanvasFormat:
        """Compute the layout of the tree below ``root``.

        Args:
            root: Root node; None prints as ``<null>``, ``MISSING_CHILD`` as an
                empty frame.
            max_depth: Number of levels to print; nodes on the last printed
                level that have children get a truncation marker.

        Returns:
            The canvas size the drawing needs, frame included.
        """
        session = LayoutSession(
            max_depth=max_depth,
            scratch=TextCanvas(self.layout_config.max_node_width, self.layout_config.max_node_height),
        )
        placeholder = None
        if root is None:
            placeholder = NULL_INFO
        elif root is MISSING_CHILD:
            placeholder = MISSING_INFO
        elif max_depth <= 0:
            placeholder = TRUNCATED_INFO

        if placeholder is not None:
            session.entries[ROOT_KEY] = placeholder
            self.register_root_placeholder(session, placeholder)
        else:
            self.get_or_create_entry(session, ROOT_KEY, root, ParentRelation.NONE)

        self._session = session
        fmt = self.compute_canvas_format(session)
        logger.debug(
            "scan complete: %d entries, root %s, canvas %dx%d",
            len(session.entries),
            session.root().describe(),
            fmt.width,
            fmt.height,
        )
        return fmt

    def register_root_placeholder(self, session: LayoutSession, placeholder: NodeFormatInfo) -> None:
        """Hook for policies that track level sizes to account for a placeholder root."""

    def collect_facts(
        self, session: LayoutSession, key: NodeKey, node: PrintableTreeNode, relation: ParentRelation
    ) -> NodeFacts:
        child_count = node.get_child_count()
        children: tuple[PrintableTreeNode | None, ...] = ()
        if child_count > 0 and len(key) < session.max_depth:
            children = tuple(node.get_child(i) for i in range(child_count))
        label = node.get_label()
        return NodeFacts(
            node=node,
            relation=relation,
            label="" if label is None else str(label),
            child_count=child_count,
            box_style=node.get_box_style(relation),
            print_width=node.get_print_width(relation, self.layout_config.max_node_width),
            print_height=node.get_print_height(relation, self.layout_config.max_node_height),
            children=children,
        )

    def get_or_create_entry(
        self, session: LayoutSession, key: NodeKey, node: PrintableTreeNode, relation: ParentRelation
    ) -> NodeFormatInfo:
        """Return the cached entry of ``key``, computing it (and its subtree) on first use."""
        entry = session.entries.get(key)
        if entry is not None:
            return entry
        facts = self.collect_facts(session, key, node, relation)
        total_width = self.compute_subtree_width(session, key, facts)
        total_height = self.compute_subtree_height(session, key, facts)
        entry = NodeFormatInfo(
            node=node,
            box_style=facts.box_style,
            representation=self.render_representation(session, facts),
            child_keys=tuple(key.child(i) for i in range(facts.child_count)),
            total_width=total_width,
            total_height=total_height,
            kind=EntryKind.PRESENT,
            draw_placeholder_appendix=facts.child_count > 0 and len(key) == session.max_depth,
        )
        session.entries[key] = entry
        return entry

    def child_entry(self, session: LayoutSession, key: NodeKey, facts: NodeFacts, index: int) -> NodeFormatInfo:
        """Entry of the present child ``index`` of the node described by ``facts``."""
        relation = ParentRelation(key, facts.child_count, index)
        return self.get_or_create_entry(session, key.child(index), facts.children[index], relation)

    def render_representation(self, session: LayoutSession, facts: NodeFacts) -> tuple[str, ...]:
        """Render the node's box once on the scratch canvas and read it back line by line."""
        width = min(self.layout_config.max_node_width, facts.print_width)
        height = min(self.layout_config.max_node_height, facts.print_height)
        scratch = session.scratch
        scratch.clear()
        scratch.draw_box(facts.box_style, width, height, facts.label, self.text_alignment)
        lines = []
        for y in range(height):
            scratch.set_cursor(0, y)
            lines.append("".join(scratch.read(move_cursor=True) for _ in range(width)))
        return tuple(lines)

    def is_spacing_required(self, key: NodeKey, parent_child_count: int) -> bool:
        """Extra spacing goes before a node unless it is on the leftmost path or an only child."""
        if key.is_leftmost_path():
            return False
        return parent_child_count > 1

    @abstractmethod
    def compute_subtree_width(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int: ...

    @abstractmethod
    def compute_subtree_height(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int: ...

    @abstractmethod
    def compute_canvas_format(self, session: LayoutSession) -> CanvasFormat: ...

    # ── draw ──

    def draw(self, canvas: TextCanvas) -> None:
        session = self.session
        if not self.handle_defaults(session, canvas):
            self.draw_tree(session, canvas)

    def handle_defaults(self, session: LayoutSession, canvas: TextCanvas) -> bool:
        """Draw the frame, and the whole picture if the root is a placeholder.

        Returns:
            True if nothing is left to draw.
        """
        canvas.set_cursor(0, 0)
        canvas.draw_box(self.frame_config.box_style, canvas.width, canvas.height)
        root = session.root()
        if root is None or root.kind is EntryKind.NULL:
            canvas.set_cursor(self.frame_config.indent_left, self.frame_config.indent_top)
            canvas.write("<null>")
            return True
        if root.kind is EntryKind.TRUNCATED:
            canvas.set_cursor(self.frame_config.indent_left, self.frame_config.indent_top)
            canvas.write("...")
            return True
        return root.kind is EntryKind.MISSING

    @abstractmethod
    def draw_tree(self, session: LayoutSession, canvas: TextCanvas) -> None: ...

    def draw_representation(self, canvas: TextCanvas, x: int, y: int, entry: NodeFormatInfo) -> None:
        for i, line in enumerate(entry.representation):
            canvas.set_cursor(x, y + i)
            canvas.write(line)


def child_is_present(facts: NodeFacts, index: int) -> bool:
    return not is_missing(facts.children[index])
