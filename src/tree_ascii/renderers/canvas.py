"""Canvas: fixed-size 2D character grid with a write cursor."""

from __future__ import annotations

from tree_ascii.errors import CanvasBoundsError
from tree_ascii.renderers.alignment import TextAlignment
from tree_ascii.renderers.charset import (
    BoxStyle,
    CharacterConflictResolver,
    ConflictResolver,
    ConnectorEndType,
)
from tree_ascii.renderers.connector import ConnectorDescriptor, ConnectorShape
from tree_ascii.types import BoxSide, CanvasBoundCheckStrategy, CanvasFormat


class TextCanvas:
    """A 2D character grid onto which boxes, labels and lines are painted.

    All drawing starts at the cursor. Writes that would leave the grid raise
    ``CanvasBoundsError`` in ``ERROR`` mode; in ``IGNORE`` mode the part
    outside the grid is dropped.
    """

    def __init__(
        self,
        width: int,
        height: int,
        strategy: CanvasBoundCheckStrategy = CanvasBoundCheckStrategy.ERROR,
    ) -> None:
        self.format = CanvasFormat(width, height)
        self.strategy = strategy
        self.cursor_x = 0
        self.cursor_y = 0
        self.cells: list[list[str]] = []
        self.clear()

    @classmethod
    def from_format(
        cls, fmt: CanvasFormat, strategy: CanvasBoundCheckStrategy = CanvasBoundCheckStrategy.ERROR
    ) -> TextCanvas:
        return cls(fmt.width, fmt.height, strategy)

    @property
    def width(self) -> int:
        return self.format.width

    @property
    def height(self) -> int:
        return self.format.height

    def __repr__(self) -> str:
        return f"TextCanvas [width={self.width}, height={self.height}, strategy={self.strategy.name}]"

    def clear(self) -> None:
        self.cells = [[" "] * self.width for _ in range(self.height)]
        self.set_cursor(0, 0)

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor_x = x
        self.cursor_y = y

    def is_cursor_position_valid(self) -> bool:
        return 0 <= self.cursor_x < self.width and 0 <= self.cursor_y < self.height

    # ─── Reading & Writing ───────────────────────────────────────────────────

    def read(self, move_cursor: bool = False) -> str | None:
        """Return the character under the cursor, or None outside the grid."""
        if not self.is_cursor_position_valid():
            return None
        ch = self.cells[self.cursor_y][self.cursor_x]
        if move_cursor:
            self.cursor_x += 1
        return ch

    def write(self, text: str, transparent: bool = False) -> None:
        """Write ``text`` at the cursor and advance it.

        Args:
            text: Characters to write, left to right.
            transparent: Skip leading and trailing whitespace so that it does
                not blank out what is already on the canvas.

        Raises:
            CanvasBoundsError: In ERROR mode, if the text does not fit.
        """
        self._assert_can_write(text)
        start = 0
        end = len(text)
        if transparent:
            start = len(text) - len(text.lstrip())
            end = len(text.rstrip())
        self.cursor_x += start
        for ch in text[start:end]:
            if not self._put(ch):
                return

    def _put(self, ch: str) -> bool:
        if not self.is_cursor_position_valid():
            return False
        self.cells[self.cursor_y][self.cursor_x] = ch
        self.cursor_x += 1
        return True

    def _write_resolved(self, ch: str, resolver: ConflictResolver) -> None:
        existing = self.read()
        if existing is not None:
            ch = resolver(existing, ch)
        self.write(ch)

    def _assert_can_write(self, text: str) -> None:
        if self.strategy is CanvasBoundCheckStrategy.IGNORE:
            return
        required = len(text)
        if (
            self.cursor_x < 0
            or self.cursor_x + required > self.width
            or self.cursor_y < 0
            or self.cursor_y >= self.height
        ):
            raise CanvasBoundsError(
                f"Cannot write outside canvas bounds (width={self.width}, height={self.height}) limit: "
                f"cursor as ({self.cursor_x}, {self.cursor_y}), text='{text}'({required})"
            )

    def export(self) -> str:
        """Return the grid as text, rows joined by newlines, no trailing newline."""
        return "\n".join("".join(row) for row in self.cells)

    # ─── Boxes & Labels ──────────────────────────────────────────────────────

    def fill_square(self, width: int, height: int, ch: str) -> None:
        x0 = self.cursor_x
        y0 = self.cursor_y
        fill = ch * width
        for y in range(y0, y0 + height):
            self.set_cursor(x0, y)
            self.write(fill)

    def draw_box(
        self,
        style: BoxStyle,
        width: int,
        height: int,
        label: str = "",
        alignment: TextAlignment = TextAlignment.CENTER_CENTER,
        transparent: bool = False,
    ) -> None:
        """Draw a box with its upper left corner at the cursor.

        Args:
            style: Border characters; a style without any side draws no border.
            width: Box width including the border.
            height: Box height including the border.
            label: Text placed inside the border.
            alignment: How the label is placed inside the box.
            transparent: Keep the existing content under the box interior.
        """
        x0 = self.cursor_x
        y0 = self.cursor_y
        if not transparent:
            self.fill_square(width, height, " ")
        has_label = bool(label) and not label.isspace()
        if not style.suppress_border():
            self._draw_box_border(style, width, height, x0, y0)
            if has_label:
                self.set_cursor(x0 + 1, y0 + 1)
                self._draw_label(width - 2, height - 2, label, alignment, transparent)
        elif has_label:
            self.set_cursor(x0, y0)
            self._draw_label(width, height, label, alignment, transparent)

    def _draw_box_border(self, style: BoxStyle, width: int, height: int, x0: int, y0: int) -> None:
        x1 = x0 + width - 1
        y1 = y0 + height - 1
        if style.has_side_line(BoxSide.TOP):
            self.set_cursor(x0, y0)
            self.write(style.corner_char)
            self.set_cursor(x1, y0)
            self.write(style.corner_char)
        if style.has_side_line(BoxSide.BOTTOM):
            self.set_cursor(x0, y1)
            self.write(style.corner_char)
            self.set_cursor(x1, y1)
            self.write(style.corner_char)
        for x in range(x0 + 1, x1):
            if style.has_side_line(BoxSide.TOP):
                self.set_cursor(x, y0)
                self.write(style.horizontal_line_char)
            if style.has_side_line(BoxSide.BOTTOM):
                self.set_cursor(x, y1)
                self.write(style.horizontal_line_char)
        for y in range(y0 + 1, y1):
            if style.has_side_line(BoxSide.LEFT):
                self.set_cursor(x0, y)
                self.write(style.vertical_line_char)
            if style.has_side_line(BoxSide.RIGHT):
                self.set_cursor(x1, y)
                self.write(style.vertical_line_char)

    def draw_label(
        self,
        width: int,
        height: int,
        label: str,
        alignment: TextAlignment = TextAlignment.CENTER_CENTER,
    ) -> None:
        self._draw_label(width, height, label, alignment, False)

    def _draw_label(self, width: int, height: int, label: str, alignment: TextAlignment, transparent: bool) -> None:
        if width <= 0 or height <= 0:
            return
        x0 = self.cursor_x
        y0 = self.cursor_y
        for i, line in enumerate(alignment.apply(label, width, height)):
            self.set_cursor(x0, y0 + i)
            self.write(line, transparent)

    # ─── Lines ───────────────────────────────────────────────────────────────

    def draw_line(
        self,
        from_x: int,
        from_y: int,
        to_x: int,
        to_y: int,
        connector_from: ConnectorEndType,
        connector_to: ConnectorEndType,
        conflict_resolver: ConflictResolver = CharacterConflictResolver.OVERWRITE,
    ) -> None:
        """Connect two points with a line of ``-`` and ``|`` segments.

        The end types decide both the symbol at each end and, through the box
        sides they belong to, the route the line takes. Every character
        written goes through ``conflict_resolver`` first.
        """
        d = ConnectorDescriptor(connector_from, from_x, from_y, connector_to, to_x, to_y, conflict_resolver)
        self._draw_connector_end(d.from_x, d.from_y, d.from_end.symbol, d.conflict_resolver)
        self._draw_connector_end(d.to_x, d.to_y, d.to_end.symbol, d.conflict_resolver)
        _SHAPE_DRAWERS[d.shape](self, d)

    def _draw_connector_end(self, x: int, y: int, symbol: str, resolver: ConflictResolver) -> None:
        self.set_cursor(x, y)
        self._write_resolved(symbol, resolver)

    def _plus(self, x: int, y: int, resolver: ConflictResolver) -> None:
        self.set_cursor(x, y)
        self._write_resolved("+", resolver)

    def _stroke(self, ch: str, length: int, resolver: ConflictResolver, vertical: bool) -> None:
        x0 = self.cursor_x
        y0 = self.cursor_y
        for i in range(length):
            if vertical:
                self.set_cursor(x0, y0 + i)
            else:
                self.set_cursor(x0 + i, y0)
            self._write_resolved(ch, resolver)

    def _horizontal_line(self, from_x: int, to_x: int, y: int, resolver: ConflictResolver) -> None:
        lo, hi = (from_x, to_x) if from_x <= to_x else (to_x, from_x)
        self.set_cursor(lo, y)
        self._stroke("-", hi - lo + 1, resolver, vertical=False)

    def _vertical_line(self, x: int, from_y: int, to_y: int, resolver: ConflictResolver) -> None:
        lo, hi = (from_y, to_y) if from_y <= to_y else (to_y, from_y)
        self.set_cursor(x, lo)
        self._stroke("|", hi - lo + 1, resolver, vertical=True)

    def _draw_h(self, d: ConnectorDescriptor) -> None:
        if d.suppress_horizontal_line:
            return
        y = d.line_from_y
        if d.line_from_y != d.line_to_y and d.line_from_x > d.line_to_x:
            y = d.line_to_y
        self._horizontal_line(d.line_from_x, d.line_to_x, y, d.conflict_resolver)

    def _draw_hv(self, d: ConnectorDescriptor) -> None:
        if not d.suppress_horizontal_line:
            self._horizontal_line(d.line_from_x, d.line_to_x, d.line_from_y, d.conflict_resolver)
        if not d.suppress_vertical_line:
            self._vertical_line(d.line_to_x, d.line_from_y, d.line_to_y, d.conflict_resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._plus(d.line_to_x, d.line_from_y, d.conflict_resolver)

    def _draw_hvh(self, d: ConnectorDescriptor) -> None:
        mid_x = d.mid_x()
        if not d.suppress_horizontal_line:
            self._horizontal_line(d.line_from_x, mid_x, d.line_from_y, d.conflict_resolver)
            if mid_x != d.line_to_x:
                self._horizontal_line(mid_x, d.line_to_x, d.line_to_y, d.conflict_resolver)
        if not d.suppress_vertical_line:
            self._vertical_line(mid_x, d.line_from_y, d.line_to_y, d.conflict_resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._plus(mid_x, d.line_from_y, d.conflict_resolver)
            self._plus(mid_x, d.line_to_y, d.conflict_resolver)

    def _draw_hvhc(self, d: ConnectorDescriptor, turned: bool) -> None:
        if turned:
            ext_x = max(d.line_from_x, d.line_to_x) + 2
        else:
            ext_x = min(d.line_from_x, d.line_to_x) - 2
        self._horizontal_line(d.line_from_x, ext_x, d.line_from_y, d.conflict_resolver)
        self._horizontal_line(d.line_to_x, ext_x, d.line_to_y, d.conflict_resolver)
        if not d.suppress_vertical_line:
            self._vertical_line(ext_x, d.line_from_y, d.line_to_y, d.conflict_resolver)
        self._plus(ext_x, d.line_from_y, d.conflict_resolver)
        self._plus(ext_x, d.line_to_y, d.conflict_resolver)

    def _draw_v(self, d: ConnectorDescriptor) -> None:
        if d.suppress_vertical_line:
            return
        x = d.line_from_x
        if d.line_from_x != d.line_to_x and d.line_from_y > d.line_to_y:
            x = d.line_to_x
        self._vertical_line(x, d.line_from_y, d.line_to_y, d.conflict_resolver)

    def _draw_vh(self, d: ConnectorDescriptor) -> None:
        if not d.suppress_vertical_line:
            self._vertical_line(d.line_from_x, d.line_from_y, d.line_to_y, d.conflict_resolver)
        if not d.suppress_horizontal_line:
            self._horizontal_line(d.line_from_x, d.line_to_x, d.line_to_y, d.conflict_resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._plus(d.line_from_x, d.line_to_y, d.conflict_resolver)

    def _draw_vhv(self, d: ConnectorDescriptor) -> None:
        mid_y = d.mid_y()
        if not d.suppress_vertical_line:
            self._vertical_line(d.line_from_x, d.line_from_y, mid_y, d.conflict_resolver)
            if mid_y != d.line_to_y:
                self._vertical_line(d.line_to_x, mid_y, d.line_to_y, d.conflict_resolver)
        if not d.suppress_horizontal_line:
            self._horizontal_line(d.line_from_x, d.line_to_x, mid_y, d.conflict_resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._plus(d.line_from_x, mid_y, d.conflict_resolver)
            self._plus(d.line_to_x, mid_y, d.conflict_resolver)

    def _draw_vhvu(self, d: ConnectorDescriptor, turned: bool) -> None:
        if turned:
            ext_y = min(d.line_from_y, d.line_to_y) - 1
        else:
            ext_y = max(d.line_from_y, d.line_to_y) + 1
        self._vertical_line(d.line_from_x, d.line_from_y, ext_y, d.conflict_resolver)
        self._vertical_line(d.line_to_x, d.line_to_y, ext_y, d.conflict_resolver)
        if not d.suppress_horizontal_line:
            self._horizontal_line(d.line_from_x, d.line_to_x, ext_y, d.conflict_resolver)
        self._plus(d.line_from_x, ext_y, d.conflict_resolver)
        self._plus(d.line_to_x, ext_y, d.conflict_resolver)


_SHAPE_DRAWERS = {
    ConnectorShape.H_LINE: TextCanvas._draw_h,
    ConnectorShape.HV_LINE: TextCanvas._draw_hv,
    ConnectorShape.HVH_LINE: TextCanvas._draw_hvh,
    ConnectorShape.HVHC_LINE: lambda canvas, d: canvas._draw_hvhc(d, turned=False),
    ConnectorShape.HVHCT_LINE: lambda canvas, d: canvas._draw_hvhc(d, turned=True),
    ConnectorShape.V_LINE: TextCanvas._draw_v,
    ConnectorShape.VH_LINE: TextCanvas._draw_vh,
    ConnectorShape.VHV_LINE: TextCanvas._draw_vhv,
    ConnectorShape.VHVU_LINE: lambda canvas, d: canvas._draw_vhvu(d, turned=False),
    ConnectorShape.VHVUT_LINE: lambda canvas, d: canvas._draw_vhvu(d, turned=True),
}
