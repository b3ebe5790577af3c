"""Tests for layout/types.py and layout/node.py: keys, relations, cache entries, the missing child."""

from __future__ import annotations

import pytest

from tree_ascii.errors import KeyNavigationError, MissingNodeError
from tree_ascii.layout.node import MISSING_CHILD, is_missing
from tree_ascii.layout.types import (
    MISSING_INFO,
    NULL_INFO,
    TRUNCATED_INFO,
    EntryKind,
    NodeFormatInfo,
    NodeKey,
    ParentRelation,
)
from tree_ascii.renderers.canvas import TextCanvas
from tree_ascii.renderers.charset import DefaultBoxStyle
from tree_ascii.types import BoxConnectionPoint, BoxSide


class TestNodeKey:
    def test_root_and_none(self):
        assert NodeKey.root().path == (0,)
        assert len(NodeKey.root()) == 1
        assert NodeKey.root().is_valid()
        assert not NodeKey.none().is_valid()
        assert len(NodeKey.none()) == 0

    def test_str(self):
        assert str(NodeKey((1, 2, 3))) == "NodeKey(1/2/3)"
        assert str(NodeKey.none()) == "NodeKey()"

    def test_parent(self):
        assert NodeKey((1, 2, 3)).parent() == NodeKey((1, 2))

    @pytest.mark.parametrize("key", [NodeKey.root(), NodeKey.none()])
    def test_parent_of_root_raises(self, key):
        with pytest.raises(KeyNavigationError):
            key.parent()

    @pytest.mark.parametrize("path", [(0,), (0, 1), (0, 3, 0, 2), (0, 0, 0, 0, 7)])
    def test_child_parent_round_trip(self, path):
        key = NodeKey(path)
        for selector in (0, 1, 5):
            child = key.child(selector)
            assert child.parent() == key
            assert len(child) == len(key) + 1

    def test_structural_equality(self):
        assert NodeKey.root().child(1).child(2) == NodeKey((0, 1, 2))
        assert hash(NodeKey((0, 1))) == hash(NodeKey.root().child(1))
        assert NodeKey((0, 1)) != NodeKey((0, 2))

    def test_leftmost_path(self):
        assert NodeKey.root().is_leftmost_path()
        assert NodeKey((0, 0, 0)).is_leftmost_path()
        assert not NodeKey((0, 1)).is_leftmost_path()
        assert not NodeKey((0, 0, 2)).is_leftmost_path()
        assert not NodeKey.none().is_leftmost_path()


class TestParentRelation:
    def test_none_relation(self):
        none = ParentRelation.NONE
        assert not none.parent_key.is_valid()
        assert (none.parent_child_count, none.child_index) == (-1, -1)

    def test_equality(self):
        assert ParentRelation(NodeKey.root(), 3, 1) == ParentRelation(NodeKey((0,)), 3, 1)
        assert ParentRelation(NodeKey.none(), -1, -1) == ParentRelation.NONE


class TestNodeFormatInfo:
    def _info(self, **overrides) -> NodeFormatInfo:
        fields = dict(
            node=None,
            box_style=DefaultBoxStyle.THIN,
            representation=("+-+", "|a|", "+-+"),
            child_keys=(NodeKey((0, 0)),),
            total_width=10,
            total_height=8,
        )
        fields.update(overrides)
        return NodeFormatInfo(**fields)

    def test_sizes(self):
        info = self._info()
        assert (info.simple_width(), info.simple_height()) == (3, 3)
        assert info.has_children()
        assert not info.is_gap()

    def test_structural_equality(self):
        assert self._info() == self._info()
        assert self._info() != self._info(total_width=11)

    def test_with_position_copies(self):
        info = self._info()
        moved = info.with_position_x(4).with_position_y(2)
        assert (moved.position_x, moved.position_y) == (4, 2)
        assert (info.position_x, info.position_y) == (0, 0)

    def test_gap_reserves_its_representation(self):
        gap = NodeFormatInfo.gap(("     ",), position_x=7)
        assert (gap.total_width, gap.total_height) == (5, 1)
        assert gap.position_x == 7
        assert gap.is_gap()
        assert gap.kind is EntryKind.MISSING
        assert not gap.has_children()

    def test_sentinels(self):
        assert NULL_INFO.kind is EntryKind.NULL and NULL_INFO.simple_width() == 6
        assert MISSING_INFO.kind is EntryKind.MISSING and MISSING_INFO.simple_width() == 1
        assert TRUNCATED_INFO.kind is EntryKind.TRUNCATED and TRUNCATED_INFO.simple_width() == 3
        assert all(s.simple_height() == 1 for s in (NULL_INFO, MISSING_INFO, TRUNCATED_INFO))

    def test_describe(self):
        summary = self._info(position_x=2).describe()
        assert summary["kind"] == "PRESENT"
        assert summary["size"] == (3, 3)
        assert summary["position"] == (2, 0)


class TestMissingChild:
    def test_is_missing(self):
        assert is_missing(MISSING_CHILD)
        assert is_missing(None)
        assert repr(MISSING_CHILD) == "MISSING_CHILD"

    @pytest.mark.parametrize(
        "call",
        [
            lambda n: n.get_label(),
            lambda n: n.get_child_count(),
            lambda n: n.get_child(0),
            lambda n: n.get_box_style(ParentRelation.NONE),
            lambda n: n.get_print_width(ParentRelation.NONE, 10),
            lambda n: n.get_print_height(ParentRelation.NONE, 10),
            lambda n: n.decorate_node(ParentRelation.NONE, TextCanvas(1, 1), 0, 0, 1, 1),
            lambda n: n.decorate_parent_connector(
                ParentRelation.NONE,
                TextCanvas(1, 1),
                BoxConnectionPoint(BoxSide.BOTTOM, 0, 0),
                BoxConnectionPoint(BoxSide.TOP, 0, 0),
            ),
        ],
    )
    def test_every_accessor_raises(self, call):
        with pytest.raises(MissingNodeError, match="MISSING_CHILD"):
            call(MISSING_CHILD)
