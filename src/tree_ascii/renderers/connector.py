"""Connector routing: which segments a line between two box sides consists of."""

from __future__ import annotations

from enum import Enum, auto

from tree_ascii.renderers.charset import CharacterConflictResolver, ConflictResolver, ConnectorEndType
from tree_ascii.types import BoxSide


class ConnectorShape(Enum):
    H_LINE = auto()  # straight horizontal
    HV_LINE = auto()  # horizontal, then vertical
    HVH_LINE = auto()  # horizontal, vertical at mid, horizontal
    HVHC_LINE = auto()  # C shape, opening to the right
    HVHCT_LINE = auto()  # turned C, opening to the left
    V_LINE = auto()  # straight vertical
    VH_LINE = auto()  # vertical, then horizontal
    VHV_LINE = auto()  # vertical, horizontal at mid, vertical
    VHVU_LINE = auto()  # U shape, opening upwards
    VHVUT_LINE = auto()  # turned U, opening downwards


_SHAPE_BY_SIDES: dict[tuple[BoxSide, BoxSide], ConnectorShape] = {
    (BoxSide.LEFT, BoxSide.LEFT): ConnectorShape.HVHC_LINE,
    (BoxSide.LEFT, BoxSide.RIGHT): ConnectorShape.HVH_LINE,
    (BoxSide.LEFT, BoxSide.TOP): ConnectorShape.HV_LINE,
    (BoxSide.LEFT, BoxSide.BOTTOM): ConnectorShape.HV_LINE,
    (BoxSide.RIGHT, BoxSide.LEFT): ConnectorShape.HVH_LINE,
    (BoxSide.RIGHT, BoxSide.RIGHT): ConnectorShape.HVHCT_LINE,
    (BoxSide.RIGHT, BoxSide.TOP): ConnectorShape.HV_LINE,
    (BoxSide.RIGHT, BoxSide.BOTTOM): ConnectorShape.HV_LINE,
    (BoxSide.TOP, BoxSide.TOP): ConnectorShape.VHVUT_LINE,
    (BoxSide.TOP, BoxSide.BOTTOM): ConnectorShape.VHV_LINE,
    (BoxSide.TOP, BoxSide.LEFT): ConnectorShape.VH_LINE,
    (BoxSide.TOP, BoxSide.RIGHT): ConnectorShape.VH_LINE,
    (BoxSide.BOTTOM, BoxSide.TOP): ConnectorShape.VHV_LINE,
    (BoxSide.BOTTOM, BoxSide.BOTTOM): ConnectorShape.VHVU_LINE,
    (BoxSide.BOTTOM, BoxSide.LEFT): ConnectorShape.VH_LINE,
    (BoxSide.BOTTOM, BoxSide.RIGHT): ConnectorShape.VH_LINE,
}


def determine_shape(
    from_end: ConnectorEndType, from_x: int, from_y: int, to_end: ConnectorEndType, to_x: int, to_y: int
) -> ConnectorShape:
    shape = _SHAPE_BY_SIDES[(from_end.side, to_end.side)]
    if shape is ConnectorShape.HVH_LINE and from_y == to_y:
        return ConnectorShape.H_LINE
    if shape is ConnectorShape.VHV_LINE and from_x == to_x:
        return ConnectorShape.V_LINE
    return shape


def _step_toward(start: int, target: int) -> int:
    if start < target:
        return 1
    if start > target:
        return -1
    return 0


class ConnectorDescriptor:
    """Geometry of one connector line.

    ``from_*``/``to_*`` are the end points where the end symbols go, while
    ``line_from_*``/``line_to_*`` are the end points of the line segments,
    moved inwards by one wherever a special end symbol (arrow, plus) takes
    the cell. Segments too short to draw are flagged as suppressed.
    """

    def __init__(
        self,
        from_end: ConnectorEndType,
        from_x: int,
        from_y: int,
        to_end: ConnectorEndType,
        to_x: int,
        to_y: int,
        conflict_resolver: ConflictResolver = CharacterConflictResolver.OVERWRITE,
    ) -> None:
        self.from_end = from_end
        self.from_x = from_x
        self.from_y = from_y
        self.to_end = to_end
        self.to_x = to_x
        self.to_y = to_y
        self.line_from_x = from_x
        self.line_from_y = from_y
        self.line_to_x = to_x
        self.line_to_y = to_y
        self.suppress_horizontal_line = False
        self.suppress_vertical_line = False
        self.conflict_resolver = conflict_resolver
        self.shape = determine_shape(from_end, from_x, from_y, to_end, to_x, to_y)
        self._init_line_dimensions()

    def __repr__(self) -> str:
        return (
            f"ConnectorDescriptor(shape={self.shape.name}, from=({self.from_x}, {self.from_y}), "
            f"to=({self.to_x}, {self.to_y}))"
        )

    # ─── Line Shortening ─────────────────────────────────────────────────────

    def _inc_line_from_x(self) -> None:
        self.line_from_x += _step_toward(self.from_x, self.to_x)

    def _inc_line_from_y(self) -> None:
        self.line_from_y += _step_toward(self.from_y, self.to_y)

    def _dec_line_to_x(self) -> None:
        self.line_to_x -= _step_toward(self.from_x, self.to_x)

    def _dec_line_to_y(self) -> None:
        self.line_to_y -= _step_toward(self.from_y, self.to_y)

    def _init_line_dimensions(self) -> None:
        shape = self.shape
        if shape in (ConnectorShape.H_LINE, ConnectorShape.HVH_LINE):
            self._init_horizontal_to_horizontal()
        elif shape is ConnectorShape.HV_LINE:
            self._init_horizontal_to_vertical()
        elif shape is ConnectorShape.HVHC_LINE:
            self._init_c_shape(-1)
        elif shape is ConnectorShape.HVHCT_LINE:
            self._init_c_shape(1)
        elif shape in (ConnectorShape.V_LINE, ConnectorShape.VHV_LINE):
            self._init_vertical_to_vertical()
        elif shape is ConnectorShape.VH_LINE:
            self._init_vertical_to_horizontal()
        elif shape is ConnectorShape.VHVU_LINE:
            self._init_u_shape(1)
        else:
            self._init_u_shape(-1)

    def _both_special(self) -> bool:
        return self.from_end.special_end_symbol and self.to_end.special_end_symbol

    def _symbol_size(self) -> int:
        return int(self.from_end.special_end_symbol) + int(self.to_end.special_end_symbol)

    def _init_horizontal_to_horizontal(self) -> None:
        if abs(self.from_x - self.to_x) - self._symbol_size() < 0:
            if self.from_x != self.to_x or self.from_y != self.to_y:
                self.suppress_horizontal_line = True
        else:
            if self.from_end.special_end_symbol:
                self._inc_line_from_x()
            if self.to_end.special_end_symbol:
                self._dec_line_to_x()
        if abs(self.from_y - self.to_y) < 2:
            self.suppress_vertical_line = True
        elif abs(self.from_x - self.to_x) == 1 and (self.shape is ConnectorShape.H_LINE or self._both_special()):
            self._dec_line_to_y()

    def _init_vertical_to_vertical(self) -> None:
        if abs(self.from_y - self.to_y) - self._symbol_size() < 0:
            if self.from_x != self.to_x or self.from_y != self.to_y:
                self.suppress_vertical_line = True
        else:
            if self.from_end.special_end_symbol:
                self._inc_line_from_y()
            if self.to_end.special_end_symbol:
                self._dec_line_to_y()
        if abs(self.from_x - self.to_x) < 2:
            self.suppress_horizontal_line = True
        elif abs(self.from_y - self.to_y) == 1 and (self.shape is ConnectorShape.V_LINE or self._both_special()):
            self._dec_line_to_x()

    def _init_horizontal_to_vertical(self) -> None:
        from_special = self.from_end.special_end_symbol
        to_special = self.to_end.special_end_symbol

        size = int(from_special) + int(self.from_y == self.to_y and to_special)
        if abs(self.from_x - self.to_x) - size < 0:
            self.suppress_horizontal_line = True
        else:
            if from_special:
                self._inc_line_from_x()
            if self.from_y == self.to_y and to_special:
                self._dec_line_to_x()

        size = int(to_special) + int(self.from_x == self.to_x and from_special)
        if abs(self.from_y - self.to_y) - size < 0:
            self.suppress_vertical_line = True
        else:
            if to_special:
                self._dec_line_to_y()
            if self.from_x == self.to_x and to_special:
                self._inc_line_from_y()

    def _init_vertical_to_horizontal(self) -> None:
        from_special = self.from_end.special_end_symbol
        to_special = self.to_end.special_end_symbol

        size = int(from_special) + int(self.from_x == self.to_x and to_special)
        if abs(self.from_y - self.to_y) - size < 0:
            self.suppress_vertical_line = True
        else:
            if from_special:
                self._inc_line_from_y()
            if self.from_x == self.to_x and to_special:
                self._dec_line_to_y()

        size = int(to_special) + int(self.from_y == self.to_y and from_special)
        if abs(self.from_x - self.to_x) - size < 0:
            self.suppress_horizontal_line = True
        else:
            if to_special:
                self._dec_line_to_x()
            if self.from_y == self.to_y and from_special:
                self._inc_line_from_x()

    def _init_c_shape(self, direction: int) -> None:
        if self.from_end.special_end_symbol:
            self.line_from_x += direction
        if self.to_end.special_end_symbol:
            self.line_to_x += direction
        if abs(self.from_y - self.to_y) < 2:
            self.suppress_vertical_line = True

    def _init_u_shape(self, direction: int) -> None:
        if self.from_end.special_end_symbol:
            self.line_from_y += direction
        if self.to_end.special_end_symbol:
            self.line_to_y += direction
        if abs(self.from_x - self.to_x) < 2:
            self.suppress_horizontal_line = True

    # ─── Bends ───────────────────────────────────────────────────────────────

    def mid_x(self) -> int:
        return _midpoint(self.line_from_x, self.line_to_x)

    def mid_y(self) -> int:
        return _midpoint(self.line_from_y, self.line_to_y)


def _midpoint(start: int, end: int) -> int:
    """Halfway point, rounded away from ``start``."""
    if start > end:
        return start - (start - end + 1) // 2
    return start + (end - start + 1) // 2
