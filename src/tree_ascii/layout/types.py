"""Layout data types: node keys, parent relations and cached node geometry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, ClassVar

from tree_ascii.errors import KeyNavigationError
from tree_ascii.renderers.charset import BoxStyle, DefaultBoxStyle

if TYPE_CHECKING:
    from tree_ascii.layout.node import PrintableTreeNode


# ─── Node Key ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NodeKey:
    """Address of a node as the child indices taken from the root.

    Two nodes reached via the same path share a key, whatever objects they
    are; the same node object reached via two paths has two keys. The root
    key is ``(0,)``; the empty key means "no node" and serves as the parent
    key of the root.
    """

    path: tuple[int, ...] = ()

    @classmethod
    def root(cls) -> NodeKey:
        return cls((0,))

    @classmethod
    def none(cls) -> NodeKey:
        return cls(())

    def child(self, selector: int) -> NodeKey:
        return NodeKey(self.path + (selector,))

    def parent(self) -> NodeKey:
        if len(self.path) < 2:
            raise KeyNavigationError(f"Node does not have a parent: {self}")
        return NodeKey(self.path[:-1])

    def __len__(self) -> int:
        return len(self.path)

    def is_valid(self) -> bool:
        return len(self.path) > 0

    def is_leftmost_path(self) -> bool:
        """True if every step from the root took the first child."""
        return self.is_valid() and not any(self.path)

    def __str__(self) -> str:
        return "NodeKey(" + "/".join(str(i) for i in self.path) + ")"


@dataclass(frozen=True)
class ParentRelation:
    """Where a node hangs: its parent's key, the parent's child count, its own index."""

    parent_key: NodeKey
    parent_child_count: int
    child_index: int

    NONE: ClassVar[ParentRelation]


ParentRelation.NONE = ParentRelation(NodeKey.none(), -1, -1)


# ─── Cache Entries ───────────────────────────────────────────────────────────


class EntryKind(Enum):
    PRESENT = auto()  # a real node
    MISSING = auto()  # declared child that is absent, or a missing root
    NULL = auto()  # no tree at all
    TRUNCATED = auto()  # root cut off by a zero depth limit


@dataclass(frozen=True)
class NodeFormatInfo:
    """Geometry of one node as computed during the scan.

    ``representation`` holds the rendered box, one string per line, all of
    equal length. ``total_width``/``total_height`` span the node together
    with its visible subtree, ``position_x``/``position_y`` are relative to
    the space the parent reserved for its children.
    """

    node: PrintableTreeNode | None
    box_style: BoxStyle
    representation: tuple[str, ...]
    child_keys: tuple[NodeKey, ...]
    total_width: int
    total_height: int
    position_x: int = 0
    position_y: int = 0
    kind: EntryKind = EntryKind.PRESENT
    draw_placeholder_appendix: bool = False

    @classmethod
    def gap(
        cls,
        representation: tuple[str, ...],
        position_x: int = 0,
        position_y: int = 0,
        kind: EntryKind = EntryKind.MISSING,
    ) -> NodeFormatInfo:
        """A blank placeholder that reserves exactly the space of ``representation``."""
        width = len(representation[0]) if representation else 0
        return cls(
            node=None,
            box_style=DefaultBoxStyle.NONE,
            representation=representation,
            child_keys=(),
            total_width=width,
            total_height=len(representation),
            position_x=position_x,
            position_y=position_y,
            kind=kind,
        )

    def with_position_x(self, position_x: int) -> NodeFormatInfo:
        return replace(self, position_x=position_x)

    def with_position_y(self, position_y: int) -> NodeFormatInfo:
        return replace(self, position_y=position_y)

    def simple_width(self) -> int:
        return len(self.representation[0]) if self.representation else 0

    def simple_height(self) -> int:
        return len(self.representation)

    def has_children(self) -> bool:
        return len(self.child_keys) > 0

    def is_gap(self) -> bool:
        return self.kind is not EntryKind.PRESENT

    def describe(self) -> dict[str, Any]:
        """Plain summary of the geometry, handy for logging and debugging."""
        return {
            "kind": self.kind.name,
            "size": (self.simple_width(), self.simple_height()),
            "total": (self.total_width, self.total_height),
            "position": (self.position_x, self.position_y),
            "children": len(self.child_keys),
            "appendix": self.draw_placeholder_appendix,
        }


NULL_INFO = NodeFormatInfo.gap(("      ",), kind=EntryKind.NULL)
MISSING_INFO = NodeFormatInfo.gap((" ",), kind=EntryKind.MISSING)
TRUNCATED_INFO = NodeFormatInfo.gap(("   ",), kind=EntryKind.TRUNCATED)
