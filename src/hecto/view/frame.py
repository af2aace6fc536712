"""Pure composition of the text the terminal should display."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

import grapheme

from hecto import __version__
from hecto.buffer import Document, Line

from .viewport import Size, Viewport

MESSAGE_TTL_SECONDS = 5.0
NAME_LIMIT = 20
NO_NAME = "[No Name]"
FILLER = "~"


@dataclass(slots=True)
class StatusMessage:
    """Ephemeral message bar text stamped with the moment it was set."""

    text: str = ""
    time: float = field(default_factory=time.monotonic)

    def visible_text(self, now: Optional[float] = None) -> str:
        current = time.monotonic() if now is None else now
        if current - self.time < MESSAGE_TTL_SECONDS:
            return self.text
        return ""


@dataclass(frozen=True, slots=True)
class Frame:
    rows: tuple[str, ...]
    status: str
    message: str
    cursor: tuple[int, int]


def compose_frame(
    document: Document,
    viewport: Viewport,
    size: Size,
    *,
    message: Optional[StatusMessage] = None,
    now: Optional[float] = None,
) -> Frame:
    width = max(size.width, 0)
    text = message.visible_text(now) if message else ""
    return Frame(
        rows=tuple(draw_rows(document, viewport, size)),
        status=status_line(document, viewport, width),
        message=_fit(text, width),
        cursor=viewport.screen_cursor(),
    )


def draw_rows(document: Document, viewport: Viewport, size: Size) -> List[str]:
    rows: List[str] = []
    top = viewport.scroll_offset.line
    left = viewport.scroll_offset.column
    for screen_row in range(size.height):
        line = document.line_at(top + screen_row)
        if line is not None:
            rows.append(draw_line(line, left, size.width))
        elif document.is_empty() and screen_row == size.height // 3:
            rows.append(welcome_line(size.width))
        else:
            rows.append(FILLER)
    return rows


def draw_line(line: Line, left: int, width: int) -> str:
    return line.render(left, left + width)


def welcome_line(width: int) -> str:
    banner = f"Hecto editor -- version {__version__}"
    padding = max(width - len(banner), 0) // 2
    spaces = " " * max(padding - 1, 0)
    return f"{FILLER}{spaces}{banner}"[:width]


def status_line(document: Document, viewport: Viewport, width: int) -> str:
    count = document.line_count()
    name = _fit(document.source_name or NO_NAME, NAME_LIMIT)
    modified = " (modified)" if document.dirty else ""
    left = f"{name} - {count} lines{modified}"
    # the append line past the end is shown as the last line
    right = f"{min(viewport.cursor.line + 1, count)}/{count}"
    gap = " " * max(width - grapheme.length(left) - grapheme.length(right), 0)
    return _fit(f"{left}{gap}{right}", width)


def _fit(text: str, width: int) -> str:
    return grapheme.slice(text, 0, max(width, 0))


__all__ = [
    "Frame",
    "StatusMessage",
    "MESSAGE_TTL_SECONDS",
    "compose_frame",
    "draw_rows",
    "status_line",
    "welcome_line",
]
