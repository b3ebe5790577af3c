"""Tree drawing policies and the node contract they print."""

from __future__ import annotations

from tree_ascii.layout.base import UNLIMITED_DEPTH, LayoutSession, StandardTreeDrawingPolicy, TreeDrawingPolicy
from tree_ascii.layout.horizontal import HorizontalTreeDrawingPolicy
from tree_ascii.layout.index import IndexTreeDrawingPolicy
from tree_ascii.layout.node import MISSING_CHILD, PrintableTreeNode, is_missing
from tree_ascii.layout.types import EntryKind, NodeFormatInfo, NodeKey, ParentRelation
from tree_ascii.layout.vertical import VerticalTreeDrawingPolicy

__all__ = [
    "MISSING_CHILD",
    "UNLIMITED_DEPTH",
    "EntryKind",
    "HorizontalTreeDrawingPolicy",
    "IndexTreeDrawingPolicy",
    "LayoutSession",
    "NodeFormatInfo",
    "NodeKey",
    "ParentRelation",
    "PrintableTreeNode",
    "StandardTreeDrawingPolicy",
    "TreeDrawingPolicy",
    "VerticalTreeDrawingPolicy",
    "is_missing",
]
