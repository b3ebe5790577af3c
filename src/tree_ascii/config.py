"""Centralized configuration for tree-ascii."""

from __future__ import annotations

from dataclasses import dataclass, fields

from tree_ascii.errors import ConfigurationError
from tree_ascii.renderers.charset import BoxStyle, DefaultBoxStyle

DEFAULT_HORIZONTAL_SPACING = 3
DEFAULT_VERTICAL_SPACING = 3
DEFAULT_MAX_NODE_WIDTH = 25
DEFAULT_MAX_NODE_HEIGHT = 5


def _check_non_negative(config: object) -> None:
    for f in fields(config):
        value = getattr(config, f.name)
        if isinstance(value, int) and value < 0:
            raise ConfigurationError(f"{type(config).__name__}.{f.name} must not be negative, given: {value}")


@dataclass(frozen=True)
class TreeLayoutConfig:
    """Spacing between nodes and the size cap of a single node box."""

    horizontal_spacing: int = DEFAULT_HORIZONTAL_SPACING
    vertical_spacing: int = DEFAULT_VERTICAL_SPACING
    max_node_width: int = DEFAULT_MAX_NODE_WIDTH
    max_node_height: int = DEFAULT_MAX_NODE_HEIGHT

    def __post_init__(self) -> None:
        _check_non_negative(self)

    @classmethod
    def default(cls) -> TreeLayoutConfig:
        return cls()

    @classmethod
    def index(cls) -> TreeLayoutConfig:
        return cls(2, 1, 100, DEFAULT_MAX_NODE_HEIGHT)

    @classmethod
    def index_slim(cls) -> TreeLayoutConfig:
        return cls(1, 0, 100, DEFAULT_MAX_NODE_HEIGHT)

    @classmethod
    def index_wide(cls) -> TreeLayoutConfig:
        return cls(5, 1, 100, DEFAULT_MAX_NODE_HEIGHT)


@dataclass(frozen=True)
class FrameConfig:
    """The outer frame box and the gap between it and the tree."""

    box_style: BoxStyle = DefaultBoxStyle.THIN
    indent_left: int = 2
    indent_top: int = 1
    indent_right: int = 2
    indent_bottom: int = 1

    def __post_init__(self) -> None:
        _check_non_negative(self)

    @classmethod
    def default(cls) -> FrameConfig:
        return cls()

    @classmethod
    def frame10x5(cls) -> FrameConfig:
        return cls(DefaultBoxStyle.THIN, 10, 5, 10, 5)
