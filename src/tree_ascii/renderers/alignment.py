"""Label alignment, wrapping and trimming inside a fixed text rectangle."""

from __future__ import annotations

import re
from enum import Enum

_LINE_BREAK = re.compile(r"\r?\n|\r")


def split_lines(text: str) -> list[str]:
    """Split on any line break; trailing empty lines are dropped.

    A text without line breaks comes back unchanged as a single line, so
    ``""`` yields ``[""]`` while ``"\\n"`` yields ``[]``.
    """
    parts = _LINE_BREAK.split(text)
    if len(parts) > 1:
        while parts and parts[-1] == "":
            parts.pop()
    return parts


def center(text: str, width: int) -> str:
    text = text.strip()
    space = width - len(text)
    if space > 1:
        before = space // 2
        return " " * before + text + " " * (space - before)
    if space < 0:
        return text[:width]
    return text


def left_align(text: str, width: int) -> str:
    text = text.strip()
    space = width - len(text)
    if space > 1:
        return text + " " * space
    if space < 0:
        return text[:width]
    return text


def right_align(text: str, width: int) -> str:
    text = text.strip()
    space = width - len(text)
    if space > 1:
        return " " * space + text
    if space < 0:
        return text[:width]
    return text


class TextAlignment(Enum):
    LEFT_TOP = ("left", "top")
    LEFT_CENTER = ("left", "center")
    LEFT_BOTTOM = ("left", "bottom")
    CENTER_TOP = ("center", "top")
    CENTER_CENTER = ("center", "center")
    CENTER_BOTTOM = ("center", "bottom")
    RIGHT_TOP = ("right", "top")
    RIGHT_CENTER = ("right", "center")
    RIGHT_BOTTOM = ("right", "bottom")

    def __init__(self, horizontal: str, vertical: str) -> None:
        self.horizontal = horizontal
        self.vertical = vertical

    def align_line(self, text: str, width: int) -> str:
        if self.horizontal == "left":
            return left_align(text, width)
        if self.horizontal == "right":
            return right_align(text, width)
        return center(text, width)

    def apply(self, text: str, width: int, height: int) -> list[str]:
        """Fit ``text`` into ``width`` x ``height``.

        Long lines are wrapped at ``width``; whatever does not fit into
        ``height`` lines is cut off. A line with exactly one spare column is
        left unpadded.

        Args:
            text: Label text, lines separated by any line break.
            width: Available columns.
            height: Available lines.

        Returns:
            The formatted lines, padded with blank lines up to ``height``.
        """
        lines = self._wrap(text, width, height)
        blank = self.align_line("", width)
        if self.vertical == "center":
            vertical_space = height - len(lines)
            if vertical_space > 1:
                lines[0:0] = [blank] * (vertical_space // 2)
        if self.vertical == "bottom":
            lines[0:0] = [blank] * max(0, height - len(lines))
        lines.extend([blank] * max(0, height - len(lines)))
        return lines

    def _wrap(self, text: str, width: int, height: int) -> list[str]:
        lines: list[str] = []
        for raw in split_lines(text):
            rest = raw.strip()
            eol = False
            while not eol and len(lines) < height:
                part = rest
                if len(part) > width:
                    part = part[:width]
                    rest = rest[width:].strip()
                    eol = not rest
                else:
                    eol = True
                lines.append(self.align_line(part, width))
            if len(lines) == height:
                break
        return lines


def compute_trimmed_dimensions(text: str, width: int | None = None, height: int | None = None) -> tuple[int, int]:
    """Return ``(max line width, number of non-blank lines)`` of a label.

    With ``width`` and ``height`` the label is first fitted into that
    rectangle the way a centered box label would be.
    """
    if width is not None and height is not None:
        lines = TextAlignment.CENTER_CENTER.apply(text, width, height)
    else:
        lines = split_lines(text)
    max_width = 0
    count = 0
    for line in lines:
        length = len(line.strip())
        if length > 0:
            count += 1
            max_width = max(max_width, length)
    return max_width, count
