"""Text canvas and the drawing primitives it is built from."""

from __future__ import annotations

from tree_ascii.renderers.alignment import TextAlignment, compute_trimmed_dimensions
from tree_ascii.renderers.canvas import TextCanvas
from tree_ascii.renderers.charset import (
    BoxStyle,
    CharacterConflictResolver,
    ConnectorEndType,
    DefaultBoxStyle,
    DefaultConnectorEndType,
    resolve_line_crossing,
)
from tree_ascii.renderers.connector import ConnectorDescriptor, ConnectorShape

__all__ = [
    "BoxStyle",
    "CharacterConflictResolver",
    "ConnectorDescriptor",
    "ConnectorEndType",
    "ConnectorShape",
    "DefaultBoxStyle",
    "DefaultConnectorEndType",
    "TextAlignment",
    "TextCanvas",
    "compute_trimmed_dimensions",
    "resolve_line_crossing",
]
