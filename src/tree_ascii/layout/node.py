"""The contract a tree must fulfil to be printed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tree_ascii.errors import MissingNodeError
from tree_ascii.renderers.alignment import compute_trimmed_dimensions
from tree_ascii.renderers.charset import BoxStyle, DefaultBoxStyle
from tree_ascii.types import BoxConnectionPoint, BoxSide

if TYPE_CHECKING:
    from tree_ascii.layout.types import ParentRelation
    from tree_ascii.renderers.canvas import TextCanvas


class PrintableTreeNode(ABC):
    """A node of a tree to be printed.

    Subclasses provide the label, the number of children and access to each
    child. Box style, print size and the two decoration hooks have defaults
    and can be overridden per node, depending on where the node hangs.
    """

    @abstractmethod
    def get_label(self) -> str:
        """Label text; lines are separated by line breaks."""

    @abstractmethod
    def get_child_count(self) -> int:
        """Declared number of children; any of them may turn out to be missing."""

    @abstractmethod
    def get_child(self, selector: int) -> PrintableTreeNode | None:
        """Return the child at ``selector``, or ``MISSING_CHILD`` (or None) if absent."""

    def get_box_style(self, relation: ParentRelation) -> BoxStyle:
        return DefaultBoxStyle.THIN

    def get_print_width(self, relation: ParentRelation, max_width: int) -> int:
        """Width of the node's box: widest label line plus the left/right border.

        The default asks ``get_label()`` and ``get_box_style()`` again; override
        it when those are expensive.
        """
        style = self.get_box_style(relation)
        overhead = int(style.has_side_line(BoxSide.LEFT)) + int(style.has_side_line(BoxSide.RIGHT))
        return min(max_width, compute_trimmed_dimensions(self.get_label() or "")[0] + overhead)

    def get_print_height(self, relation: ParentRelation, max_height: int) -> int:
        """Height of the node's box: number of label lines plus the top/bottom border.

        Like ``get_print_width()``, the default reads the label and style again.
        """
        style = self.get_box_style(relation)
        overhead = int(style.has_side_line(BoxSide.TOP)) + int(style.has_side_line(BoxSide.BOTTOM))
        return min(max_height, compute_trimmed_dimensions(self.get_label() or "")[1] + overhead)

    def decorate_node(self, relation: ParentRelation, canvas: TextCanvas, x: int, y: int, width: int, height: int) -> None:
        """Called once the node's box is on the canvas, at upper left corner ``(x, y)``."""

    def decorate_parent_connector(
        self,
        relation: ParentRelation,
        canvas: TextCanvas,
        start: BoxConnectionPoint,
        end: BoxConnectionPoint,
    ) -> None:
        """Called once the line from the parent (``start``) to this node (``end``) is drawn."""


class _MissingChild(PrintableTreeNode):
    """Placeholder for a declared child that does not exist."""

    _MESSAGE = "Called on MISSING_CHILD"

    def get_label(self) -> str:
        raise MissingNodeError(self._MESSAGE)

    def get_child_count(self) -> int:
        raise MissingNodeError(self._MESSAGE)

    def get_child(self, selector: int) -> PrintableTreeNode | None:
        raise MissingNodeError(self._MESSAGE)

    def get_box_style(self, relation: ParentRelation) -> BoxStyle:
        raise MissingNodeError(self._MESSAGE)

    def get_print_width(self, relation: ParentRelation, max_width: int) -> int:
        raise MissingNodeError(self._MESSAGE)

    def get_print_height(self, relation: ParentRelation, max_height: int) -> int:
        raise MissingNodeError(self._MESSAGE)

    def decorate_node(self, relation: ParentRelation, canvas: TextCanvas, x: int, y: int, width: int, height: int) -> None:
        raise MissingNodeError(self._MESSAGE)

    def decorate_parent_connector(
        self,
        relation: ParentRelation,
        canvas: TextCanvas,
        start: BoxConnectionPoint,
        end: BoxConnectionPoint,
    ) -> None:
        raise MissingNodeError(self._MESSAGE)

    def __repr__(self) -> str:
        return "MISSING_CHILD"


MISSING_CHILD: PrintableTreeNode = _MissingChild()


def is_missing(node: PrintableTreeNode | None) -> bool:
    return node is None or node is MISSING_CHILD
