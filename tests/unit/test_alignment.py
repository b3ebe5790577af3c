"""Tests for renderers/alignment.py: line alignment, label fitting and trimmed dimensions."""

from __future__ import annotations

import pytest

from tree_ascii.renderers.alignment import (
    TextAlignment,
    center,
    compute_trimmed_dimensions,
    left_align,
    right_align,
    split_lines,
)

LABEL = "Fluffy, Tuffy, and Muffy\nwent to town.\nThey all died\n  in a terrible accident."


def _combine(lines: list[str]) -> str:
    return "\n".join(lines).replace(" ", "_")


class TestLineAlignment:
    def test_padding(self):
        assert center("foo", 7) == "  foo  "
        assert left_align("foo", 7) == "foo    "
        assert right_align("foo", 7) == "    foo"

    @pytest.mark.parametrize("align", [center, left_align, right_align])
    def test_cut_to_width(self, align):
        assert align("foo", 2) == "fo"

    @pytest.mark.parametrize("align", [center, left_align, right_align])
    def test_exact_fit(self, align):
        assert align("foo", 3) == "foo"

    @pytest.mark.parametrize("align", [center, left_align, right_align])
    def test_single_spare_column_stays_unpadded(self, align):
        assert align("foo", 4) == "foo"

    def test_surrounding_whitespace_is_stripped(self):
        assert center("  foo ", 5) == " foo "

    def test_odd_space_puts_extra_column_after(self):
        assert center("ab", 5) == " ab  "


class TestSplitLines:
    def test_no_line_break(self):
        assert split_lines("") == [""]
        assert split_lines("abc") == ["abc"]

    def test_trailing_empty_lines_dropped(self):
        assert split_lines("a\nb\n\n") == ["a", "b"]
        assert split_lines("\n") == []

    def test_inner_empty_lines_kept(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_any_line_break(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]


class TestComputeTrimmedDimensions:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", (0, 0)),
            ("a", (1, 1)),
            ("abba", (4, 1)),
            ("  abba  \n  baba", (4, 2)),
            ("  abba  \n  ali baba", (8, 2)),
            ("  abba  \n  ali baba\n", (8, 2)),
        ],
    )
    def test_unbounded(self, text, expected):
        assert compute_trimmed_dimensions(text) == expected

    @pytest.mark.parametrize(
        "text,width,height,expected",
        [
            ("a", 3, 1, (1, 1)),
            ("abba", 3, 1, (3, 1)),
            ("  abba  \n  baba", 3, 2, (3, 2)),
            ("  abba  \n  ali baba", 3, 1, (3, 1)),
            ("  abba  \n  ali baba\n", 3, 1, (3, 1)),
        ],
    )
    def test_bounded(self, text, width, height, expected):
        assert compute_trimmed_dimensions(text, width, height) == expected

    def test_blank_lines_not_counted(self):
        assert compute_trimmed_dimensions("a\n   \nb") == (1, 2)


class TestLabelAlignment:
    def test_center_bottom(self):
        assert _combine(TextAlignment.CENTER_BOTTOM.apply(LABEL, 25, 10)) == "\n".join(
            ["_" * 25] * 6
            + [
                "Fluffy,_Tuffy,_and_Muffy",
                "______went_to_town.______",
                "______They_all_died______",
                "_in_a_terrible_accident._",
            ]
        )

    def test_center_center(self):
        assert _combine(TextAlignment.CENTER_CENTER.apply(LABEL, 25, 10)) == "\n".join(
            ["_" * 25] * 3
            + [
                "Fluffy,_Tuffy,_and_Muffy",
                "______went_to_town.______",
                "______They_all_died______",
                "_in_a_terrible_accident._",
            ]
            + ["_" * 25] * 3
        )

    def test_left_top(self):
        assert _combine(TextAlignment.LEFT_TOP.apply(LABEL, 25, 10)) == "\n".join(
            [
                "Fluffy,_Tuffy,_and_Muffy",
                "went_to_town.____________",
                "They_all_died____________",
                "in_a_terrible_accident.__",
            ]
            + ["_" * 25] * 6
        )

    def test_right_center(self):
        assert _combine(TextAlignment.RIGHT_CENTER.apply(LABEL, 25, 10)) == "\n".join(
            ["_" * 25] * 3
            + [
                "Fluffy,_Tuffy,_and_Muffy",
                "____________went_to_town.",
                "____________They_all_died",
                "__in_a_terrible_accident.",
            ]
            + ["_" * 25] * 3
        )

    def test_long_line_wraps(self):
        assert TextAlignment.LEFT_TOP.apply("abcdefgh", 3, 3) == ["abc", "def", "gh"]

    def test_cut_at_height(self):
        assert TextAlignment.LEFT_TOP.apply("a\nb\nc\nd", 1, 2) == ["a", "b"]

    @pytest.mark.parametrize("alignment", list(TextAlignment))
    def test_always_height_lines(self, alignment):
        assert len(alignment.apply("x", 5, 4)) == 4
