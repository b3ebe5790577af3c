"""Exception hierarchy for tree-ascii."""


class TreePrintError(Exception):
    pass


class ConfigurationError(TreePrintError, ValueError):
    """Missing or invalid layout/frame/canvas configuration."""


class KeyNavigationError(TreePrintError):
    """A node key was asked for a parent it does not have."""


class MissingNodeError(TreePrintError):
    """An accessor was called on the missing-child placeholder."""


class CanvasBoundsError(TreePrintError, IndexError):
    """A write would leave the canvas (only raised in ERROR bound-check mode)."""
