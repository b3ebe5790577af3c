"""Tests that printed trees match the .expect.txt golden files byte for byte."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tree_ascii.config import FrameConfig, TreeLayoutConfig
from tree_ascii.layout.base import UNLIMITED_DEPTH, TreeDrawingPolicy
from tree_ascii.layout.horizontal import HorizontalTreeDrawingPolicy
from tree_ascii.layout.index import IndexTreeDrawingPolicy
from tree_ascii.layout.node import MISSING_CHILD
from tree_ascii.layout.vertical import VerticalTreeDrawingPolicy
from tree_ascii.printer import TreeLayout, TreePrinter

GOLDEN_DIR = Path(__file__).parent.parent / "golden"

FRAMED: dict[TreeLayout, Callable[[], TreeDrawingPolicy]] = {
    TreeLayout.TOP_DOWN: lambda: VerticalTreeDrawingPolicy(FrameConfig.frame10x5(), TreeLayoutConfig.default(), False),
    TreeLayout.BOTTOM_UP: lambda: VerticalTreeDrawingPolicy(FrameConfig.frame10x5(), TreeLayoutConfig.default(), True),
    TreeLayout.LEFT_TO_RIGHT: lambda: HorizontalTreeDrawingPolicy(
        FrameConfig.frame10x5(), TreeLayoutConfig.default(), False
    ),
    TreeLayout.RIGHT_TO_LEFT: lambda: HorizontalTreeDrawingPolicy(
        FrameConfig.frame10x5(), TreeLayoutConfig.default(), True
    ),
    TreeLayout.INDEX: lambda: IndexTreeDrawingPolicy(FrameConfig.frame10x5(), TreeLayoutConfig.index(), False),
}


def _cases() -> list[tuple[str, TreeLayout, str, int, str, bool]]:
    """(golden name, layout, node variant, max depth, root kind, framed)."""
    cases = []
    for layout in (TreeLayout.TOP_DOWN, TreeLayout.BOTTOM_UP, TreeLayout.LEFT_TO_RIGHT, TreeLayout.RIGHT_TO_LEFT):
        prefix = layout.name.lower()
        cases += [
            (f"{prefix}_plain", layout, "plain", UNLIMITED_DEPTH, "tree", False),
            (f"{prefix}_special_box", layout, "special_box", UNLIMITED_DEPTH, "tree", False),
            (f"{prefix}_decorated", layout, "decorated", UNLIMITED_DEPTH, "tree", False),
        ]
        cases += [(f"{prefix}_depth{d}", layout, "plain", d, "tree", False) for d in (4, 3, 1, 0)]
        cases += [
            (f"{prefix}_frame10x5_depth0", layout, "plain", 0, "tree", True),
            (f"{prefix}_null_root", layout, "plain", 0, "null", False),
            (f"{prefix}_missing_root", layout, "plain", UNLIMITED_DEPTH, "missing", False),
            (f"{prefix}_frame10x5_missing_root", layout, "plain", UNLIMITED_DEPTH, "missing", True),
        ]
    index = TreeLayout.INDEX
    cases += [
        ("index_no_box", index, "no_box", UNLIMITED_DEPTH, "tree", False),
        ("index_slim_no_box", TreeLayout.INDEX_SLIM, "no_box", UNLIMITED_DEPTH, "tree", False),
        ("index_slim_no_connectors_no_box", TreeLayout.INDEX_SLIM_NO_CONNECTORS, "no_box", UNLIMITED_DEPTH, "tree", False),
        ("index_wide_no_box_depth4", TreeLayout.INDEX_WIDE, "no_box", 4, "tree", False),
        ("index_special_box", index, "special_box", UNLIMITED_DEPTH, "tree", False),
    ]
    cases += [(f"index_depth{d}", index, "plain", d, "tree", False) for d in (4, 3, 1, 0)]
    cases += [
        ("index_frame10x5_depth0", index, "plain", 0, "tree", True),
        ("index_null_root", index, "plain", 0, "null", False),
        ("index_missing_root", index, "plain", UNLIMITED_DEPTH, "missing", False),
        ("index_frame10x5_missing_root", index, "plain", UNLIMITED_DEPTH, "missing", True),
    ]
    return cases


CASES = _cases()


@pytest.mark.parametrize(
    "name,layout,variant,max_depth,root_kind,framed", CASES, ids=[c[0] for c in CASES]
)
def test_matches_golden(
    name: str, layout: TreeLayout, variant: str, max_depth: int, root_kind: str, framed: bool, make_tree, golden
) -> None:
    if root_kind == "tree":
        root = make_tree(variant)
    elif root_kind == "missing":
        root = MISSING_CHILD
    else:
        root = None
    printer = TreePrinter(FRAMED[layout]() if framed else layout)
    actual = printer.print(root, max_depth).export()
    assert actual == golden(name), f"Output for {name} differs from .expect.txt"


def test_every_golden_file_has_a_case() -> None:
    names = {p.name.removesuffix(".expect.txt") for p in GOLDEN_DIR.glob("*.expect.txt")}
    assert names == {c[0] for c in CASES}
