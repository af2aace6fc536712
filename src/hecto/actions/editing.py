"""Text-mutating actions: typing, line breaks and deletion."""

from __future__ import annotations

from hecto.buffer import ORIGIN, Document, Position
from hecto.modes.base_mode import ModeContext, ModeResult
from hecto.view import Direction


def _length(document: Document, index: int) -> int:
    line = document.line_at(index)
    return line.length() if line is not None else 0


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Insert ``text`` at the cursor and step over what was actually added.

    A combining mark typed after a base character merges into that cluster,
    so the cursor only advances by the change in grapheme count.
    """

    document, viewport = context.document, context.viewport
    cursor = viewport.cursor
    before = _length(document, cursor.line)
    document.insert_char(cursor, text)
    added = max(_length(document, cursor.line) - before, 0)
    viewport.place(cursor.with_column(cursor.column + added), document, context.size)
    return ModeResult(consumed=True, status="insert")


def insert_newline(context: ModeContext, match) -> ModeResult:
    del match
    document, viewport = context.document, context.viewport
    line = viewport.cursor.line
    document.insert_line_break(viewport.cursor)
    viewport.place(Position(line + 1, 0), document, context.size)
    return ModeResult(consumed=True, status="newline")


def delete_forward(context: ModeContext, match) -> ModeResult:
    del match
    document, viewport = context.document, context.viewport
    document.delete(viewport.cursor)
    viewport.place(viewport.cursor, document, context.size)
    return ModeResult(consumed=True, status="delete")


def delete_backward(context: ModeContext, match) -> ModeResult:
    del match
    document, viewport = context.document, context.viewport
    if viewport.cursor == ORIGIN:
        return ModeResult(consumed=True, status="noop")
    viewport.move(Direction.LEFT, document, context.size)
    document.delete(viewport.cursor)
    viewport.place(viewport.cursor, document, context.size)
    return ModeResult(consumed=True, status="delete")


__all__ = [
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "insert_text",
]
