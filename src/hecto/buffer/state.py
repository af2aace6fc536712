"""Position type shared by document edits and cursor state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based (line, grapheme column) pair."""

    line: int = 0
    column: int = 0

    def with_column(self, column: int) -> "Position":
        return Position(self.line, column)


ORIGIN = Position(0, 0)
