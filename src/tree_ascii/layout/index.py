"""Index policy: a directory-listing style tree.

::

  root
   |
   +--child 1
   |    |
   |    +--grandchild
   |
   +--child 2
"""

from __future__ import annotations

from tree_ascii.config import FrameConfig, TreeLayoutConfig
from tree_ascii.layout.base import ROOT_KEY, LayoutSession, NodeFacts, StandardTreeDrawingPolicy, child_is_present
from tree_ascii.layout.types import NodeFormatInfo, NodeKey, ParentRelation
from tree_ascii.renderers.alignment import TextAlignment
from tree_ascii.renderers.canvas import TextCanvas
from tree_ascii.renderers.charset import DefaultConnectorEndType, resolve_line_crossing
from tree_ascii.types import BoxConnectionPoint, BoxSide, CanvasFormat


class IndexTreeDrawingPolicy(StandardTreeDrawingPolicy):
    """Every child below its parent, indented by two horizontal spacing units.

    There is no level alignment; each subtree only depends on itself. With
    ``suppress_connectors`` the indentation stays but no lines are drawn.
    """

    text_alignment = TextAlignment.LEFT_TOP

    def __init__(
        self, frame_config: FrameConfig, layout_config: TreeLayoutConfig, suppress_connectors: bool = False
    ) -> None:
        super().__init__(frame_config, layout_config)
        self.suppress_connectors = suppress_connectors

    @property
    def indent(self) -> int:
        return 2 * self.layout_config.horizontal_spacing

    # ─── Scan ────────────────────────────────────────────────────────────────

    def compute_subtree_width(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int:
        sub_width = self.indent if facts.relation.child_index >= 0 else 0
        if facts.expanded:
            for i in range(facts.child_count):
                if child_is_present(facts, i):
                    sub_width = max(sub_width, self.child_entry(session, key, facts, i).total_width)
        elif facts.child_count > 0:
            sub_width += 3
        return max(facts.print_width, self.indent + sub_width)

    def compute_subtree_height(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int:
        vs = self.layout_config.vertical_spacing
        sub_height = 0
        if facts.expanded:
            for i in range(facts.child_count):
                child_key = key.child(i)
                if child_is_present(facts, i):
                    entry = self.child_entry(session, key, facts, i)
                    session.entries[child_key] = entry.with_position_y(sub_height)
                    sub_height += entry.total_height
                else:
                    gap_height = min(1, vs)
                    session.entries[child_key] = NodeFormatInfo.gap((" ",) * gap_height, position_y=sub_height)
                    sub_height += gap_height + 1
        elif facts.child_count > 0:
            sub_height += vs + 1
        return facts.print_height + sub_height + vs

    def compute_canvas_format(self, session: LayoutSession) -> CanvasFormat:
        frame = self.frame_config
        root = session.root()
        width = (root.total_width if root is not None else 1) + frame.indent_left + frame.indent_right
        height = (root.total_height if root is not None else 1) + frame.indent_top + frame.indent_bottom
        return CanvasFormat(width, height)

    # ─── Draw ────────────────────────────────────────────────────────────────

    def draw_tree(self, session: LayoutSession, canvas: TextCanvas) -> None:
        frame = self.frame_config
        self._draw_subtree(session, canvas, ROOT_KEY, ParentRelation.NONE, frame.indent_left, frame.indent_top, 0)

    def _draw_subtree(
        self,
        session: LayoutSession,
        canvas: TextCanvas,
        key: NodeKey,
        relation: ParentRelation,
        width_offset: int,
        height_offset: int,
        abs_parent_y: int,
    ) -> None:
        entry = session.entries[key]
        abs_x = width_offset + entry.position_x
        abs_y = height_offset + entry.position_y
        self.draw_representation(canvas, abs_x, abs_y, entry)
        if not self.suppress_connectors and relation.parent_key.is_valid():
            connect_x = abs_x - 1
            connect_y = abs_y
            style = entry.box_style
            if style.has_side_line(BoxSide.TOP) and style.has_side_line(BoxSide.BOTTOM):
                connect_y += max(0, entry.simple_height() - 1) // 2
            self._draw_parent_connector(session, canvas, key, entry, relation, connect_x, connect_y, abs_parent_y)
        entry.node.decorate_node(relation, canvas, abs_x, abs_y, entry.simple_width(), entry.simple_height())
        if entry.draw_placeholder_appendix:
            self._draw_placeholder_appendix(canvas, abs_x, abs_y, entry.simple_width(), entry.simple_height())
        elif entry.has_children():
            child_x = abs_x + self.indent
            child_y = abs_y + entry.simple_height() + self.layout_config.vertical_spacing
            count = len(entry.child_keys)
            for i in range(count):
                child_key = key.child(i)
                if not session.entries[child_key].is_gap():
                    child_relation = ParentRelation(key, count, i)
                    self._draw_subtree(session, canvas, child_key, child_relation, child_x, child_y, abs_y)

    def _draw_parent_connector(
        self,
        session: LayoutSession,
        canvas: TextCanvas,
        key: NodeKey,
        entry: NodeFormatInfo,
        relation: ParentRelation,
        connect_x: int,
        connect_y: int,
        abs_parent_y: int,
    ) -> None:
        hs = self.layout_config.horizontal_spacing
        parent = session.entries[key.parent()]
        parent_x = connect_x - self.indent + min((parent.simple_width() + 1) // 2, hs)
        parent_y = abs_parent_y + parent.simple_height()
        canvas.draw_line(
            connect_x,
            connect_y,
            parent_x,
            parent_y,
            DefaultConnectorEndType.LEFT_PLAIN,
            DefaultConnectorEndType.BOTTOM_PLAIN,
            resolve_line_crossing,
        )
        entry.node.decorate_parent_connector(
            relation,
            canvas,
            BoxConnectionPoint(BoxSide.LEFT, connect_x, connect_y),
            BoxConnectionPoint(BoxSide.BOTTOM, parent_x, parent_y),
        )

    def _draw_placeholder_appendix(self, canvas: TextCanvas, x: int, y: int, width: int, height: int) -> None:
        """An angled stub below the node, ending in ``...`` at the children's indentation."""
        hs = self.layout_config.horizontal_spacing
        start_x = x + min((width + 1) // 2, hs)
        start_y = y + height
        end_x = x + max(0, self.indent - 1)
        end_y = start_y + self.layout_config.vertical_spacing
        if not self.suppress_connectors:
            canvas.draw_line(
                start_x,
                start_y,
                end_x,
                end_y,
                DefaultConnectorEndType.BOTTOM_PLAIN,
                DefaultConnectorEndType.LEFT_PLAIN,
                resolve_line_crossing,
            )
        canvas.set_cursor(end_x + 1, end_y)
        canvas.write("...")
