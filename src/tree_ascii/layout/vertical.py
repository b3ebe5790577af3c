"""Vertical policy: root on top (or at the bottom), children side by side below it.

::

         +---+                  +---+  +---+  +---+
         | A |                  | B |  | C |  | D |
         +---+                  +---+  +---+  +---+
           |                      |      |      |
    +------+------+               +------+------+
    |      |      |                      |
  +---+  +---+  +---+                  +---+
  | B |  | C |  | D |                  | A |
  +---+  +---+  +---+                  +---+
"""

from __future__ import annotations

from tree_ascii.config import FrameConfig, TreeLayoutConfig
from tree_ascii.layout.base import (
    ROOT_KEY,
    LayoutSession,
    NodeFacts,
    StandardTreeDrawingPolicy,
    child_is_present,
    sibling_draw_order,
)
from tree_ascii.layout.types import NodeFormatInfo, NodeKey, ParentRelation
from tree_ascii.renderers.canvas import TextCanvas
from tree_ascii.renderers.charset import DefaultConnectorEndType, resolve_line_crossing
from tree_ascii.types import BoxConnectionPoint, BoxSide, CanvasFormat


class VerticalTreeDrawingPolicy(StandardTreeDrawingPolicy):
    """Levels stacked top to bottom (bottom to top if ``bottom_up``).

    All nodes of a level share one row band as high as the highest box on
    that level.
    """

    def __init__(self, frame_config: FrameConfig, layout_config: TreeLayoutConfig, bottom_up: bool = False) -> None:
        super().__init__(frame_config, layout_config)
        self.bottom_up = bottom_up

    # ─── Scan ────────────────────────────────────────────────────────────────

    def register_root_placeholder(self, session: LayoutSession, placeholder: NodeFormatInfo) -> None:
        session.update_level_size(0, placeholder.simple_height())

    def compute_subtree_width(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int:
        hs = self.layout_config.horizontal_spacing
        count = facts.child_count
        sub_width = 0
        if facts.expanded:
            for i in range(count):
                sub_width = self._update_subtree_width(session, key, facts, i, sub_width)
            if count > 1:
                sub_width += hs // 2
        elif count > 0:
            sub_width = 3
        return max(facts.print_width, sub_width) + (hs if facts.relation.parent_child_count > 1 else 0)

    def _update_subtree_width(
        self, session: LayoutSession, key: NodeKey, facts: NodeFacts, index: int, current: int
    ) -> int:
        hs = self.layout_config.horizontal_spacing
        count = facts.child_count
        parent_width = facts.print_width
        child_key = key.child(index)
        if child_is_present(facts, index):
            entry = self.child_entry(session, key, facts, index)
            subtree_width = entry.total_width + (1 if index > 0 else 0)
            position_x = current
            if subtree_width < parent_width and count == 1:
                position_x += (parent_width - subtree_width) // 2 + hs // 2
            elif self.is_spacing_required(child_key, count):
                position_x += hs // 2
            session.entries[child_key] = entry.with_position_x(position_x)
            return current + subtree_width
        gap_width = parent_width * 2 if count == 2 else 3
        session.entries[child_key] = NodeFormatInfo.gap((" " * gap_width,), position_x=current)
        return current + gap_width - (1 if index < count - 1 else 0)

    def compute_subtree_height(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int:
        own_height = facts.print_height
        level = len(key) - 1
        sub_height = 0
        if facts.expanded:
            for i in range(facts.child_count):
                if child_is_present(facts, i):
                    sub_height = max(sub_height, self.child_entry(session, key, facts, i).total_height)
        elif facts.child_count > 0:
            sub_height = 2
            session.update_level_size(level, own_height + 2)
        session.update_level_size(level, own_height)
        return own_height + sub_height + self.layout_config.vertical_spacing

    def compute_canvas_format(self, session: LayoutSession) -> CanvasFormat:
        frame = self.frame_config
        root = session.root()
        width = (root.total_width if root is not None else 1) + frame.indent_left + frame.indent_right
        height = session.levels_extent(self.layout_config.vertical_spacing) + frame.indent_top + frame.indent_bottom
        return CanvasFormat(width, height)

    # ─── Draw ────────────────────────────────────────────────────────────────

    def draw_tree(self, session: LayoutSession, canvas: TextCanvas) -> None:
        self._draw_subtree(session, canvas, ROOT_KEY, ParentRelation.NONE, self.frame_config.indent_left)

    def _abs_y(self, session: LayoutSession, canvas: TextCanvas, key: NodeKey) -> int:
        frame = self.frame_config
        y = session.level_offset(key, self.layout_config.vertical_spacing)
        if self.bottom_up:
            drawing_height = canvas.height - frame.indent_top - frame.indent_bottom
            y = drawing_height - y - session.entries[key].simple_height()
        return y + frame.indent_top

    def _abs_total_x(self, key: NodeKey, entry: NodeFormatInfo, relation: ParentRelation, width_offset: int) -> int:
        spacing = self.layout_config.horizontal_spacing // 2 if self.is_spacing_required(key, relation.parent_child_count) else 0
        return width_offset + spacing + entry.position_x

    def _draw_subtree(
        self, session: LayoutSession, canvas: TextCanvas, key: NodeKey, relation: ParentRelation, width_offset: int
    ) -> None:
        height_offset = self._abs_y(session, canvas, key)
        entry = session.entries[key]
        abs_total_x = self._abs_total_x(key, entry, relation, width_offset)
        abs_local_x = abs_total_x + entry.total_width // 2 - entry.simple_width() // 2
        abs_y = height_offset + entry.position_y
        self.draw_representation(canvas, abs_local_x, abs_y, entry)
        if relation.parent_key.is_valid():
            self._draw_parent_connector(session, canvas, entry, relation, width_offset, height_offset, abs_local_x)
        entry.node.decorate_node(relation, canvas, abs_local_x, abs_y, entry.simple_width(), entry.simple_height())
        if entry.draw_placeholder_appendix:
            self._draw_placeholder_appendix(canvas, abs_local_x, abs_y, entry.simple_width(), entry.simple_height())
        elif entry.has_children():
            count = len(entry.child_keys)
            for i in sibling_draw_order(count):
                child_key = key.child(i)
                if not session.entries[child_key].is_gap():
                    self._draw_subtree(session, canvas, child_key, ParentRelation(key, count, i), abs_total_x)

    def _draw_parent_connector(
        self,
        session: LayoutSession,
        canvas: TextCanvas,
        entry: NodeFormatInfo,
        relation: ParentRelation,
        width_offset: int,
        height_offset: int,
        abs_local_x: int,
    ) -> None:
        parent = session.entries[relation.parent_key]
        parent_start_x = width_offset + parent.total_width // 2 - parent.simple_width() // 2
        start_x = parent_start_x + parent.simple_width() // 2
        parent_y = self._abs_y(session, canvas, relation.parent_key)
        end_x = abs_local_x + entry.simple_width() // 2
        if self.bottom_up:
            start_y = parent_y - 1
            end_y = height_offset + entry.position_y + entry.simple_height()
        else:
            start_y = parent_y + parent.position_y + parent.simple_height()
            end_y = height_offset + entry.position_y - 1
        if relation.parent_child_count == 1:
            start_x = end_x
        canvas.draw_line(
            start_x,
            start_y,
            end_x,
            end_y,
            DefaultConnectorEndType.BOTTOM_PLAIN,
            DefaultConnectorEndType.TOP_PLAIN,
            resolve_line_crossing,
        )
        if self.bottom_up:
            start = BoxConnectionPoint(BoxSide.TOP, start_x, start_y)
            end = BoxConnectionPoint(BoxSide.BOTTOM, end_x, end_y)
        else:
            start = BoxConnectionPoint(BoxSide.BOTTOM, start_x, start_y)
            end = BoxConnectionPoint(BoxSide.TOP, end_x, end_y)
        entry.node.decorate_parent_connector(relation, canvas, start, end)

    def _draw_placeholder_appendix(self, canvas: TextCanvas, x: int, y: int, width: int, height: int) -> None:
        """A short stub pointing away from the node, ending in ``...``."""
        stub_x = x + width // 2
        if self.bottom_up:
            stub_y, dots_y = y - 1, y - 2
        else:
            stub_y, dots_y = y + height, y + height + 1
        canvas.set_cursor(stub_x, stub_y)
        canvas.write("|")
        canvas.set_cursor(stub_x - 1, dots_y)
        canvas.write("...")
