"""Shared fixtures: node variants and the reference tree used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tree_ascii.adapters import LabelNode
from tree_ascii.layout.types import ParentRelation
from tree_ascii.renderers.canvas import TextCanvas
from tree_ascii.renderers.charset import BoxStyle, DefaultBoxStyle
from tree_ascii.types import BoxConnectionPoint, BoxSide

GOLDEN_DIR = Path(__file__).parent / "golden"


class SpecialBoxNode(LabelNode):
    """Hash box for the root, thin boxes for inner nodes, double top/bottom for leaves."""

    def get_box_style(self, relation: ParentRelation) -> BoxStyle:
        if relation == ParentRelation.NONE:
            return DefaultBoxStyle.HASH
        if self.children:
            return DefaultBoxStyle.THIN
        return DefaultBoxStyle.TOP_AND_BOTTOM_DOUBLE_SIDE_THIN


class DecoratedNode(LabelNode):
    """Marks each box corner with ``X`` and each connector end with a side-specific symbol."""

    def decorate_node(self, relation, canvas: TextCanvas, x, y, width, height) -> None:
        canvas.set_cursor(x, y)
        canvas.write("X")

    def decorate_parent_connector(
        self, relation: ParentRelation, canvas: TextCanvas, start: BoxConnectionPoint, end: BoxConnectionPoint
    ) -> None:
        canvas.set_cursor(end.x, end.y)
        if end.side is BoxSide.LEFT:
            canvas.write(">")
        elif end.side is BoxSide.RIGHT:
            canvas.set_cursor(end.x, end.y - 1)
            canvas.write(str(relation.child_index))
        elif end.side is BoxSide.TOP:
            canvas.write("V")
        else:
            canvas.set_cursor(end.x - 1, end.y)
            canvas.write(str(relation.child_index))


class NoBoxNode(LabelNode):
    def get_box_style(self, relation: ParentRelation) -> BoxStyle:
        return DefaultBoxStyle.NONE


NODE_VARIANTS: dict[str, type[LabelNode]] = {
    "plain": LabelNode,
    "special_box": SpecialBoxNode,
    "decorated": DecoratedNode,
    "no_box": NoBoxNode,
}


def build_reference_tree(node_cls: type[LabelNode] = LabelNode) -> LabelNode:
    """Five levels, multi-line labels, absent children and an uneven fan-out."""
    n = node_cls
    inner_q = n("innerQ", [n("L16")])
    inner_a = n("innerA", [n("L10"), n("L11"), None])
    inner_b = n("innerB", [None, n("L12"), n("L13")])
    inner_c = n("innerC", [n("L14"), None, n("L15"), inner_q])
    inner_d = n("innerD", [inner_a, inner_b, inner_c])
    inner_e = n("innerE", [n("L6"), n("L7"), n("L8"), n("L9 Long Label")])
    inner_f = n("innerF", [inner_d, inner_e])
    inner_g = n("innerG", [n("L3"), n("L4\nline1\nline2"), n("L5\nsub1")])
    inner_h = n("innerH", [n("L"), n("L2")])
    inner_i = n("I", [inner_g, inner_h])
    return n("root", [inner_i, inner_f])


@pytest.fixture
def reference_tree() -> LabelNode:
    return build_reference_tree()


@pytest.fixture
def make_tree() -> Callable[[str], LabelNode]:
    """Factory building the reference tree from one of the ``NODE_VARIANTS``."""

    def _make(variant: str = "plain") -> LabelNode:
        return build_reference_tree(NODE_VARIANTS[variant])

    return _make


@pytest.fixture
def golden() -> Callable[[str], str]:
    def _read(name: str) -> str:
        return (GOLDEN_DIR / f"{name}.expect.txt").read_text()

    return _read
