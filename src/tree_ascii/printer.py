"""Tree printer entry points: named layouts and the scan/draw driver."""

from __future__ import annotations

import logging
from enum import Enum, auto

from tree_ascii.config import FrameConfig, TreeLayoutConfig
from tree_ascii.layout.base import UNLIMITED_DEPTH, TreeDrawingPolicy
from tree_ascii.layout.horizontal import HorizontalTreeDrawingPolicy
from tree_ascii.layout.index import IndexTreeDrawingPolicy
from tree_ascii.layout.node import PrintableTreeNode
from tree_ascii.layout.vertical import VerticalTreeDrawingPolicy
from tree_ascii.renderers.canvas import TextCanvas

logger = logging.getLogger(__name__)


class TreeLayout(Enum):
    """Predefined layouts, each backed by a drawing policy with standard settings."""

    TOP_DOWN = auto()
    BOTTOM_UP = auto()
    LEFT_TO_RIGHT = auto()
    RIGHT_TO_LEFT = auto()
    INDEX = auto()
    INDEX_SLIM = auto()
    INDEX_SLIM_NO_CONNECTORS = auto()
    INDEX_WIDE = auto()

    def create_drawing_policy(self) -> TreeDrawingPolicy:
        """Return a new policy instance for this layout."""
        frame = FrameConfig.default()
        if self is TreeLayout.TOP_DOWN:
            return VerticalTreeDrawingPolicy(frame, TreeLayoutConfig.default(), bottom_up=False)
        if self is TreeLayout.BOTTOM_UP:
            return VerticalTreeDrawingPolicy(frame, TreeLayoutConfig.default(), bottom_up=True)
        if self is TreeLayout.LEFT_TO_RIGHT:
            return HorizontalTreeDrawingPolicy(frame, TreeLayoutConfig.default(), right_to_left=False)
        if self is TreeLayout.RIGHT_TO_LEFT:
            return HorizontalTreeDrawingPolicy(frame, TreeLayoutConfig.default(), right_to_left=True)
        if self is TreeLayout.INDEX:
            return IndexTreeDrawingPolicy(frame, TreeLayoutConfig.index())
        if self is TreeLayout.INDEX_SLIM:
            return IndexTreeDrawingPolicy(frame, TreeLayoutConfig.index_slim())
        if self is TreeLayout.INDEX_SLIM_NO_CONNECTORS:
            return IndexTreeDrawingPolicy(frame, TreeLayoutConfig.index_slim(), suppress_connectors=True)
        return IndexTreeDrawingPolicy(frame, TreeLayoutConfig.index_wide())

    @property
    def cli_name(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_name(cls, name: str) -> TreeLayout:
        """Look up a layout by name, e.g. ``top-down``, ``TOP_DOWN`` or ``index-slim``.

        Raises:
            ValueError: If no layout has that name.
        """
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(layout.cli_name for layout in cls)
            raise ValueError(f"Unknown layout '{name}'; use one of {choices}") from None


class TreePrinter:
    """Prints a tree onto a fresh canvas sized by the policy's scan.

    Not thread-safe: the policy keeps the layout of the last scan until the
    following draw.
    """

    def __init__(self, policy_or_layout: TreeDrawingPolicy | TreeLayout = TreeLayout.TOP_DOWN) -> None:
        if isinstance(policy_or_layout, TreeLayout):
            policy_or_layout = policy_or_layout.create_drawing_policy()
        self.policy = policy_or_layout

    def print(self, root: PrintableTreeNode | None, max_depth: int = UNLIMITED_DEPTH) -> TextCanvas:
        """Scan and draw ``root``.

        Args:
            root: Root of the tree; None and ``MISSING_CHILD`` produce placeholder pictures.
            max_depth: Number of levels to draw before truncating.

        Returns:
            The canvas holding the picture; call ``export()`` for the text.
        """
        canvas = TextCanvas.from_format(self.policy.scan(root, max_depth))
        logger.debug("printing with %s onto %r", type(self.policy).__name__, canvas)
        self.policy.draw(canvas)
        return canvas
