"""Document model: an ordered list of grapheme-indexed lines."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from hecto.runtime import telemetry

from .errors import DocumentIOError
from .line import ENCODING, Line
from .state import Position

TERMINATOR = "\n"


class Document:
    """Owns every Line of one open file.

    An empty document has zero lines, not one empty line. Positions handed to
    the edit methods must satisfy the cursor invariant: ``line`` may be one
    past the last line (the append position) but never further.
    """

    def __init__(
        self,
        lines: Optional[Iterable[Line]] = None,
        *,
        source_name: Optional[str] = None,
    ) -> None:
        self._lines: List[Line] = list(lines or ())
        self.source_name = source_name
        self.dirty = False

    @classmethod
    def from_text(cls, text: str, *, source_name: Optional[str] = None) -> "Document":
        return cls((Line(raw) for raw in _split_lines(text)), source_name=source_name)

    @classmethod
    def open(cls, source_name: str) -> "Document":
        with telemetry.span(
            "document::open",
            component="document",
            metadata={"source": source_name},
        ):
            try:
                with open(source_name, "r", encoding=ENCODING, newline="") as handle:
                    text = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                telemetry.record_event(
                    "document.open_failed",
                    level="warning",
                    data={"source": source_name, "error": str(exc)},
                )
                raise DocumentIOError(
                    f"Could not open {source_name!r}: {exc}", source_name=source_name
                ) from exc
            return cls.from_text(text, source_name=source_name)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def is_empty(self) -> bool:
        return not self._lines

    def snapshot(self) -> tuple[str, ...]:
        """Return the current line contents without exposing the Line objects."""

        return tuple(line.content for line in self._lines)

    def insert_char(self, position: Position, text: str) -> None:
        count = len(self._lines)
        if position.line > count:
            return
        with self._edit("insert_char", position):
            if position.line == count:
                self._lines.append(Line(text))
            else:
                self._lines[position.line].insert(position.column, text)
            self.dirty = True

    def insert_line_break(self, position: Position) -> None:
        count = len(self._lines)
        if position.line > count:
            return
        with self._edit("insert_line_break", position):
            if position.line == count:
                self._lines.append(Line())
            else:
                tail = self._lines[position.line].split(position.column)
                self._lines.insert(position.line + 1, tail)
            self.dirty = True

    def delete(self, position: Position) -> None:
        count = len(self._lines)
        if position.line >= count:
            return
        line = self._lines[position.line]
        merge = position.column == line.length() and position.line + 1 < count
        if not merge and position.column >= line.length():
            return
        with self._edit("delete", position):
            if merge:
                line.append(self._lines.pop(position.line + 1))
            else:
                line.delete(position.column)
            self.dirty = True

    def save(self) -> bool:
        """Rewrite the destination; return False when there is none yet."""

        if not self.source_name:
            return False
        with telemetry.span(
            "document::save",
            component="document",
            metadata={"source": self.source_name, "lines": len(self._lines)},
        ):
            try:
                with open(self.source_name, "wb") as handle:
                    for line in self._lines:
                        handle.write(line.as_bytes())
                        handle.write(TERMINATOR.encode(ENCODING))
            except OSError as exc:
                telemetry.record_event(
                    "document.save_failed",
                    level="error",
                    data={"source": self.source_name, "error": str(exc)},
                )
                raise DocumentIOError(
                    f"Could not write {self.source_name!r}: {exc}",
                    source_name=self.source_name,
                ) from exc
        self.dirty = False
        return True

    def save_as(self, source_name: str) -> bool:
        self.source_name = source_name
        return self.save()

    def _edit(self, label: str, position: Position):
        return telemetry.span(
            f"document::{label}",
            component="document",
            metadata={"line": position.line, "column": position.column},
        )


def _split_lines(text: str) -> List[str]:
    if not text:
        return []
    parts = text.split(TERMINATOR)
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


__all__ = ["Document", "TERMINATOR"]
