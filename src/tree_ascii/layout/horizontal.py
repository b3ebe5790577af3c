"""Horizontal policy: root on the left (or right), children stacked beside it.

::

                 +---+          +---+
               +-| B |          | B |-+
               | +---+          +---+ |
        +---+  | +---+          +---+ |  +---+
        | A |--+-| C |          | C |-+--| A |
        +---+  | +---+          +---+ |  +---+
               | +---+          +---+ |
               +-| D |          | D |-+
                 +---+          +---+
"""

from __future__ import annotations

import math

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


class HorizontalTreeDrawingPolicy(StandardTreeDrawingPolicy):
    """Levels laid out left to right (right to left if ``right_to_left``).

    All nodes of a level share one column band as wide as the widest box on
    that level.
    """

    def __init__(self, frame_config: FrameConfig, layout_config: TreeLayoutConfig, right_to_left: bool = False) -> None:
        super().__init__(frame_config, layout_config)
        self.right_to_left = right_to_left

    # ─── Scan ────────────────────────────────────────────────────────────────

    def register_root_placeholder(self, session: LayoutSession, placeholder: NodeFormatInfo) -> None:
        session.update_level_size(0, placeholder.simple_width())

    def compute_subtree_width(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int:
        own_width = facts.print_width
        level = len(key) - 1
        sub_width = 0
        if facts.expanded:
            for i in range(facts.child_count):
                if child_is_present(facts, i):
                    sub_width = max(sub_width, self.child_entry(session, key, facts, i).total_width)
        elif facts.child_count > 0:
            sub_width = 2
            session.update_level_size(level, own_width + 2)
        session.update_level_size(level, own_width)
        return own_width + sub_width + self.layout_config.horizontal_spacing

    def compute_subtree_height(self, session: LayoutSession, key: NodeKey, facts: NodeFacts) -> int:
        vs = self.layout_config.vertical_spacing
        count = facts.child_count
        sub_height = 0
        if facts.expanded:
            for i in range(count):
                sub_height = self._update_subtree_height(session, key, facts, i, sub_height)
        elif count > 0:
            sub_height = 3
        return max(facts.print_height, sub_height) + (vs // 2 if facts.relation.parent_child_count > 1 else 0)

    def _update_subtree_height(
        self, session: LayoutSession, key: NodeKey, facts: NodeFacts, index: int, current: int
    ) -> int:
        vs = self.layout_config.vertical_spacing
        count = facts.child_count
        parent_height = facts.print_height
        child_key = key.child(index)
        if child_is_present(facts, index):
            entry = self.child_entry(session, key, facts, index)
            subtree_height = entry.total_height + (1 if index > 0 else 0)
            position_y = self._relative_position_y(child_key, count, parent_height, current, subtree_height)
            current += subtree_height
            if self.is_spacing_required(child_key, count):
                current += vs // 2
            session.entries[child_key] = entry.with_position_y(position_y)
            return current
        gap_height = parent_height * 2 if count == 2 else 3
        session.entries[child_key] = NodeFormatInfo.gap((" ",) * gap_height, position_y=current)
        return current + gap_height - (1 if index < count - 1 else 0)

    def _relative_position_y(
        self, key: NodeKey, parent_child_count: int, parent_height: int, current: int, subtree_height: int
    ) -> int:
        vs = self.layout_config.vertical_spacing
        position_y = current
        if self.is_spacing_required(key, parent_child_count):
            position_y += vs // 2
        if parent_child_count == 1:
            position_y = math.ceil(vs / 4)
            if subtree_height < parent_height:
                position_y += (parent_height - subtree_height) // 2
        return position_y

    def compute_canvas_format(self, session: LayoutSession) -> CanvasFormat:
        frame = self.frame_config
        root = session.root()
        width = session.levels_extent(self.layout_config.horizontal_spacing) + frame.indent_left + frame.indent_right
        height = (root.total_height if root is not None else 1) + frame.indent_top + frame.indent_bottom
        return CanvasFormat(width, height)

    # ─── Draw ────────────────────────────────────────────────────────────────

    def draw_tree(self, session: LayoutSession, canvas: TextCanvas) -> None:
        self._draw_subtree(session, canvas, ROOT_KEY, ParentRelation.NONE, self.frame_config.indent_top)

    def _abs_x(self, session: LayoutSession, canvas: TextCanvas, key: NodeKey) -> int:
        frame = self.frame_config
        x = session.level_offset(key, self.layout_config.horizontal_spacing)
        if self.right_to_left:
            drawing_width = canvas.width - frame.indent_left - frame.indent_right
            x = drawing_width - x - session.entries[key].simple_width()
        return x + frame.indent_left

    def _abs_local_y(self, key: NodeKey, entry: NodeFormatInfo, relation: ParentRelation, height_offset: int) -> tuple[int, int]:
        spacing = self.layout_config.vertical_spacing // 2 if self.is_spacing_required(key, relation.parent_child_count) else 0
        abs_total_y = height_offset + spacing + entry.position_y
        return abs_total_y, abs_total_y + entry.total_height // 2 - entry.simple_height() // 2

    def _draw_subtree(
        self, session: LayoutSession, canvas: TextCanvas, key: NodeKey, relation: ParentRelation, height_offset: int
    ) -> None:
        width_offset = self._abs_x(session, canvas, key)
        entry = session.entries[key]
        abs_x = width_offset + entry.position_x
        abs_total_y, abs_local_y = self._abs_local_y(key, entry, relation, height_offset)
        self.draw_representation(canvas, abs_x, abs_local_y, entry)
        if relation.parent_key.is_valid():
            self._draw_parent_connector(session, canvas, entry, relation, width_offset, height_offset, abs_local_y)
        entry.node.decorate_node(relation, canvas, abs_x, abs_local_y, entry.simple_width(), entry.simple_height())
        if entry.draw_placeholder_appendix:
            self._draw_placeholder_appendix(canvas, abs_x, abs_local_y, entry.simple_width(), entry.simple_height())
        elif entry.has_children():
            count = len(entry.child_keys)
            for i in sibling_draw_order(count):
                child_key = key.child(i)
                if not session.entries[child_key].is_gap():
                    self._draw_subtree(session, canvas, child_key, ParentRelation(key, count, i), abs_total_y)

    def _draw_parent_connector(
        self,
        session: LayoutSession,
        canvas: TextCanvas,
        entry: NodeFormatInfo,
        relation: ParentRelation,
        width_offset: int,
        height_offset: int,
        abs_local_y: int,
    ) -> None:
        parent = session.entries[relation.parent_key]
        parent_start_y = height_offset + parent.total_height // 2 - parent.simple_height() // 2
        start_y = parent_start_y + parent.simple_height() // 2
        parent_x = self._abs_x(session, canvas, relation.parent_key)
        end_y = abs_local_y + entry.simple_height() // 2
        if self.right_to_left:
            start_x = parent_x - 1
            end_x = width_offset + entry.position_x + entry.simple_width()
        else:
            start_x = parent_x + parent.position_x + parent.simple_width()
            end_x = width_offset + entry.position_x - 1
        if relation.parent_child_count == 1:
            start_y = end_y
        canvas.draw_line(
            start_x,
            start_y,
            end_x,
            end_y,
            DefaultConnectorEndType.RIGHT_PLAIN,
            DefaultConnectorEndType.LEFT_PLAIN,
            resolve_line_crossing,
        )
        if self.right_to_left:
            start = BoxConnectionPoint(BoxSide.LEFT, start_x, start_y)
            end = BoxConnectionPoint(BoxSide.RIGHT, end_x, end_y)
        else:
            start = BoxConnectionPoint(BoxSide.RIGHT, start_x, start_y)
            end = BoxConnectionPoint(BoxSide.LEFT, end_x, end_y)
        entry.node.decorate_parent_connector(relation, canvas, start, end)

    def _draw_placeholder_appendix(self, canvas: TextCanvas, x: int, y: int, width: int, height: int) -> None:
        """A dash next to the node followed by three stacked dots."""
        mid_y = y + height // 2
        if self.right_to_left:
            stub_x, dots_x = x - 1, x - 2
        else:
            stub_x, dots_x = x + width, x + width + 1
        canvas.set_cursor(stub_x, mid_y)
        canvas.write("-")
        for dy in (-1, 0, 1):
            canvas.set_cursor(dots_x, mid_y + dy)
            canvas.write(".")
