"""Box styles, connector end symbols and character conflict resolution."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol

from tree_ascii.types import BoxSide

ConflictResolver = Callable[[str, str], str]
"""Decides which character ends up in a cell: ``resolver(existing, update)``."""


class BoxStyle(Protocol):
    """Protocol for the characters used to draw a box border."""

    @property
    def corner_char(self) -> str: ...

    @property
    def horizontal_line_char(self) -> str: ...

    @property
    def vertical_line_char(self) -> str: ...

    def has_side_line(self, side: BoxSide) -> bool: ...

    def suppress_border(self) -> bool: ...


_ALL_SIDES = frozenset(BoxSide)


class DefaultBoxStyle(Enum):
    # (horizontal, vertical, corner, sides)
    THIN = ("-", "|", "+", _ALL_SIDES)
    DOUBLE = ("=", "=", "=", _ALL_SIDES)
    HASH = ("#", "#", "#", _ALL_SIDES)
    ASTERISK = ("*", "*", "*", _ALL_SIDES)
    DOTTED = (".", ":", ".", _ALL_SIDES)
    DOTTED_2 = (":", ":", ":", _ALL_SIDES)
    NONE = (" ", " ", " ", frozenset())
    BOTTOM = ("-", " ", "-", frozenset({BoxSide.BOTTOM}))
    BOTTOM_DOUBLE = ("=", " ", "=", frozenset({BoxSide.BOTTOM}))
    TOP = ("-", " ", "-", frozenset({BoxSide.TOP}))
    TOP_AND_BOTTOM = ("-", " ", "-", frozenset({BoxSide.TOP, BoxSide.BOTTOM}))
    TOP_DOUBLE = ("=", " ", "=", frozenset({BoxSide.TOP}))
    TOP_AND_BOTTOM_DOUBLE = ("=", " ", "=", frozenset({BoxSide.TOP, BoxSide.BOTTOM}))
    TOP_AND_BOTTOM_DOUBLE_SIDE_THIN = ("=", "|", "=", _ALL_SIDES)
    SPACE = (" ", " ", " ", _ALL_SIDES)

    def __init__(self, horizontal: str, vertical: str, corner: str, sides: frozenset[BoxSide]) -> None:
        self.horizontal_line_char = horizontal
        self.vertical_line_char = vertical
        self.corner_char = corner
        self.sides = sides

    def has_side_line(self, side: BoxSide) -> bool:
        return side in self.sides

    def suppress_border(self) -> bool:
        return not self.sides

    @classmethod
    def from_name(cls, name: str) -> DefaultBoxStyle:
        """Look up a style by name, case-insensitive, ``-`` and ``_`` interchangeable."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"Unknown box style '{name}'; use one of {choices}") from None


class ConnectorEndType(Protocol):
    """Protocol for the symbol drawn at one end of a connector line."""

    @property
    def side(self) -> BoxSide: ...

    @property
    def symbol(self) -> str: ...

    @property
    def special_end_symbol(self) -> bool: ...


class DefaultConnectorEndType(Enum):
    # (side, symbol, special end symbol)
    LEFT_PLAIN = (BoxSide.LEFT, "-", False)
    LEFT_ARROW = (BoxSide.LEFT, ">", True)
    LEFT_PLUS = (BoxSide.LEFT, "+", True)
    RIGHT_PLAIN = (BoxSide.RIGHT, "-", False)
    RIGHT_ARROW = (BoxSide.RIGHT, "<", True)
    RIGHT_PLUS = (BoxSide.RIGHT, "+", True)
    TOP_PLAIN = (BoxSide.TOP, "|", False)
    TOP_ARROW = (BoxSide.TOP, "V", True)
    TOP_PLUS = (BoxSide.TOP, "+", True)
    BOTTOM_PLAIN = (BoxSide.BOTTOM, "|", False)
    BOTTOM_ARROW = (BoxSide.BOTTOM, "A", True)
    BOTTOM_PLUS = (BoxSide.BOTTOM, "+", True)

    def __init__(self, side: BoxSide, symbol: str, special_end_symbol: bool) -> None:
        self.side = side
        self.symbol = symbol
        self.special_end_symbol = special_end_symbol


class CharacterConflictResolver(Enum):
    """Simple resolvers: always take the new character, or keep any visible old one."""

    OVERWRITE = "overwrite"
    PRESERVE = "preserve"

    def __call__(self, existing: str, update: str) -> str:
        if self is CharacterConflictResolver.PRESERVE and not existing.isspace():
            return existing
        return update


def resolve_line_crossing(existing: str, update: str) -> str:
    """Turn a crossing of a horizontal and a vertical stroke into ``+``.

    An existing ``+`` is kept; any other combination lets the new character win.
    """
    if existing == "+":
        return "+"
    if existing == "|" and update == "-":
        return "+"
    if existing == "-" and update == "|":
        return "+"
    return update
