"""Shared type definitions for tree-ascii.

Enums and small value types used across the canvas, the renderers and the
layout policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from tree_ascii.errors import ConfigurationError


class BoxSide(Enum):
    LEFT = auto()
    TOP = auto()
    RIGHT = auto()
    BOTTOM = auto()


class CanvasBoundCheckStrategy(Enum):
    IGNORE = auto()  # out-of-range writes are dropped
    ERROR = auto()  # out-of-range writes raise CanvasBoundsError

    @classmethod
    def default(cls) -> CanvasBoundCheckStrategy:
        return cls.ERROR


@dataclass(frozen=True)
class BoxConnectionPoint:
    """A point where a connector line touches a box, tagged with the box side."""

    side: BoxSide
    x: int
    y: int


@dataclass(frozen=True)
class CanvasFormat:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"expected: width > 0, height > 0, given: width={self.width}, height={self.height}"
            )
