"""Tests for renderers/connector.py and renderers/charset.py."""

from __future__ import annotations

import pytest

from tree_ascii.renderers.charset import (
    CharacterConflictResolver,
    DefaultBoxStyle,
    DefaultConnectorEndType,
    resolve_line_crossing,
)
from tree_ascii.renderers.connector import ConnectorDescriptor, ConnectorShape, determine_shape
from tree_ascii.types import BoxSide

E = DefaultConnectorEndType


class TestDetermineShape:
    @pytest.mark.parametrize(
        "from_end,to_end,shape",
        [
            (E.RIGHT_PLAIN, E.LEFT_PLAIN, ConnectorShape.HVH_LINE),
            (E.LEFT_PLAIN, E.LEFT_PLAIN, ConnectorShape.HVHC_LINE),
            (E.RIGHT_PLAIN, E.RIGHT_PLAIN, ConnectorShape.HVHCT_LINE),
            (E.LEFT_PLAIN, E.BOTTOM_PLAIN, ConnectorShape.HV_LINE),
            (E.BOTTOM_PLAIN, E.TOP_PLAIN, ConnectorShape.VHV_LINE),
            (E.BOTTOM_PLAIN, E.BOTTOM_PLAIN, ConnectorShape.VHVU_LINE),
            (E.TOP_PLAIN, E.TOP_PLAIN, ConnectorShape.VHVUT_LINE),
            (E.TOP_PLAIN, E.RIGHT_PLAIN, ConnectorShape.VH_LINE),
        ],
    )
    def test_by_sides(self, from_end, to_end, shape):
        assert determine_shape(from_end, 0, 0, to_end, 5, 5) is shape

    def test_aligned_ends_become_straight(self):
        assert determine_shape(E.RIGHT_PLAIN, 0, 3, E.LEFT_PLAIN, 9, 3) is ConnectorShape.H_LINE
        assert determine_shape(E.BOTTOM_PLAIN, 4, 0, E.TOP_PLAIN, 4, 9) is ConnectorShape.V_LINE

    def test_c_and_u_shapes_stay_bent_when_aligned(self):
        assert determine_shape(E.LEFT_PLAIN, 0, 3, E.LEFT_PLAIN, 9, 3) is ConnectorShape.HVHC_LINE
        assert determine_shape(E.TOP_PLAIN, 4, 0, E.TOP_PLAIN, 4, 9) is ConnectorShape.VHVUT_LINE


class TestConnectorDescriptor:
    def test_special_ends_shorten_line(self):
        d = ConnectorDescriptor(E.RIGHT_ARROW, 10, 2, E.LEFT_ARROW, 20, 2)
        assert d.shape is ConnectorShape.H_LINE
        assert (d.line_from_x, d.line_to_x) == (11, 19)
        assert not d.suppress_horizontal_line
        assert d.suppress_vertical_line

    def test_shortening_follows_direction(self):
        d = ConnectorDescriptor(E.LEFT_ARROW, 20, 2, E.RIGHT_ARROW, 10, 2)
        assert (d.line_from_x, d.line_to_x) == (19, 11)

    def test_too_short_is_suppressed(self):
        d = ConnectorDescriptor(E.RIGHT_ARROW, 10, 2, E.LEFT_ARROW, 11, 2)
        assert d.suppress_horizontal_line

    def test_single_point_is_not_suppressed(self):
        d = ConnectorDescriptor(E.RIGHT_ARROW, 10, 2, E.LEFT_ARROW, 10, 2)
        assert not d.suppress_horizontal_line

    def test_plain_ends_keep_line(self):
        d = ConnectorDescriptor(E.BOTTOM_PLAIN, 4, 0, E.TOP_PLAIN, 9, 6)
        assert d.shape is ConnectorShape.VHV_LINE
        assert (d.line_from_x, d.line_from_y, d.line_to_x, d.line_to_y) == (4, 0, 9, 6)
        assert not d.suppress_horizontal_line
        assert not d.suppress_vertical_line

    def test_close_columns_suppress_horizontal(self):
        d = ConnectorDescriptor(E.BOTTOM_PLAIN, 4, 0, E.TOP_PLAIN, 5, 6)
        assert d.suppress_horizontal_line

    @pytest.mark.parametrize("start,end,mid", [(0, 3, 2), (0, 4, 2), (3, 0, 1), (4, 0, 2), (2, 2, 2)])
    def test_midpoint_rounds_away_from_start(self, start, end, mid):
        d = ConnectorDescriptor(E.BOTTOM_PLAIN, 0, start, E.TOP_PLAIN, 5, end)
        assert d.mid_y() == mid

    def test_default_resolver(self):
        d = ConnectorDescriptor(E.RIGHT_PLAIN, 0, 0, E.LEFT_PLAIN, 5, 0)
        assert d.conflict_resolver is CharacterConflictResolver.OVERWRITE
        assert "H_LINE" in repr(d)


class TestConflictResolvers:
    def test_overwrite(self):
        assert CharacterConflictResolver.OVERWRITE("x", "-") == "-"

    def test_preserve(self):
        assert CharacterConflictResolver.PRESERVE("x", "-") == "x"
        assert CharacterConflictResolver.PRESERVE(" ", "-") == "-"

    @pytest.mark.parametrize(
        "existing,update,result",
        [("|", "-", "+"), ("-", "|", "+"), ("+", "-", "+"), ("+", "|", "+"), (" ", "-", "-"), ("-", "-", "-"), ("a", "|", "|")],
    )
    def test_line_crossing(self, existing, update, result):
        assert resolve_line_crossing(existing, update) == result


class TestBoxStyles:
    def test_thin_has_all_sides(self):
        assert all(DefaultBoxStyle.THIN.has_side_line(side) for side in BoxSide)
        assert not DefaultBoxStyle.THIN.suppress_border()

    def test_none_suppresses_border(self):
        assert DefaultBoxStyle.NONE.suppress_border()
        assert not DefaultBoxStyle.SPACE.suppress_border()

    def test_top_and_bottom(self):
        style = DefaultBoxStyle.TOP_AND_BOTTOM_DOUBLE
        assert style.has_side_line(BoxSide.TOP) and style.has_side_line(BoxSide.BOTTOM)
        assert not style.has_side_line(BoxSide.LEFT)

    def test_from_name(self):
        assert DefaultBoxStyle.from_name("top-and-bottom") is DefaultBoxStyle.TOP_AND_BOTTOM
        assert DefaultBoxStyle.from_name("Hash") is DefaultBoxStyle.HASH
        with pytest.raises(ValueError, match="Unknown box style"):
            DefaultBoxStyle.from_name("wavy")

    def test_connector_end_symbols(self):
        assert (E.LEFT_ARROW.symbol, E.RIGHT_ARROW.symbol, E.TOP_ARROW.symbol, E.BOTTOM_ARROW.symbol) == (">", "<", "V", "A")
        assert not E.TOP_PLAIN.special_end_symbol
        assert E.BOTTOM_PLUS.special_end_symbol
