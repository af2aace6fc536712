"""Cursor and scroll-offset state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hecto.buffer import Document, ORIGIN, Position


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


VERTICAL = frozenset(
    {Direction.UP, Direction.DOWN, Direction.PAGE_UP, Direction.PAGE_DOWN}
)


@dataclass(frozen=True, slots=True)
class Size:
    """Viewport size in terminal cells, status rows excluded."""

    width: int
    height: int


class Viewport:
    """Tracks the logical cursor and the buffer cell shown top-left.

    The cursor may sit one past the last grapheme of a line and on the
    virtual line one past the last line; both are valid insert positions.
    The viewport never holds Line references, only indices, so it survives
    any document edit once ``clamp`` has been re-applied.
    """

    def __init__(
        self, cursor: Position = ORIGIN, scroll_offset: Position = ORIGIN
    ) -> None:
        self.cursor = cursor
        self.scroll_offset = scroll_offset

    def move(self, direction: Direction, document: Document, size: Size) -> None:
        line, column = self.cursor.line, self.cursor.column
        count = document.line_count()
        width = _line_length(document, line)
        height = max(size.height, 1)

        if direction is Direction.LEFT:
            if column > 0:
                column -= 1
            elif line > 0:
                line -= 1
                column = _line_length(document, line)
        elif direction is Direction.RIGHT:
            if column < width:
                column += 1
            elif line < count:
                line += 1
                column = 0
        elif direction is Direction.UP:
            line = max(line - 1, 0)
        elif direction is Direction.PAGE_UP:
            line = max(line - height, 0)
        elif direction is Direction.DOWN:
            line = min(line + 1, count)
        elif direction is Direction.PAGE_DOWN:
            line = min(line + height, count)
        elif direction is Direction.HOME:
            column = 0
        elif direction is Direction.END:
            column = width

        if direction in VERTICAL:
            target = _line_length(document, line)
            if column > target:
                column = target
                self.scroll_offset = self.scroll_offset.with_column(0)

        self.cursor = Position(line, column)
        self.recompute_scroll(size)

    def place(self, position: Position, document: Document, size: Size) -> None:
        """Put the cursor at ``position`` after an edit, clamped to the document."""

        self.cursor = position
        self.clamp(document)
        self.recompute_scroll(size)

    def clamp(self, document: Document) -> None:
        line = min(max(self.cursor.line, 0), document.line_count())
        column = min(max(self.cursor.column, 0), _line_length(document, line))
        self.cursor = Position(line, column)

    def recompute_scroll(self, size: Size) -> None:
        width = max(size.width, 1)
        height = max(size.height, 1)
        top = _follow(self.cursor.line, self.scroll_offset.line, height)
        left = _follow(self.cursor.column, self.scroll_offset.column, width)
        self.scroll_offset = Position(top, left)

    def screen_cursor(self) -> tuple[int, int]:
        """Return the cursor as (x, y) relative to the viewport's top-left cell."""

        return (
            self.cursor.column - self.scroll_offset.column,
            self.cursor.line - self.scroll_offset.line,
        )


def _follow(target: int, offset: int, extent: int) -> int:
    if target < offset:
        return target
    if target >= offset + extent:
        return target - extent + 1
    return offset


def _line_length(document: Document, index: int) -> int:
    line = document.line_at(index)
    return line.length() if line is not None else 0


__all__ = ["Direction", "Size", "Viewport"]
