"""Single logical line addressed by grapheme-cluster offsets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import grapheme

ENCODING = "utf-8"


@dataclass(slots=True)
class Line:
    """Mutable line of text whose offsets count user-perceived characters.

    ``content`` never holds a line terminator. Every mutation goes through
    the grapheme segmenter so that ``"e\\u0301"`` or a flag emoji counts as one
    position, exactly like the cell the user sees.
    """

    content: str = ""
    _length: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._update_length()

    def __len__(self) -> int:
        return self._length

    def length(self) -> int:
        return self._length

    def render(self, start: int, end: int) -> str:
        """Return graphemes ``[start, end)`` with both bounds clamped."""

        end = min(end, self._length)
        start = min(start, end)
        if start <= 0 and end >= self._length:
            visible = self.content
        else:
            visible = grapheme.slice(self.content, start, end)
        # one grapheme per cell; a literal tab would jump the terminal cursor
        return visible.replace("\t", " ")

    def insert(self, at: int, text: str) -> None:
        if at >= self._length:
            self.content += text
        else:
            clusters = self._clusters()
            head = "".join(clusters[:at])
            tail = "".join(clusters[at:])
            self.content = head + text + tail
        self._update_length()

    def delete(self, at: int) -> None:
        if at >= self._length or at < 0:
            return
        clusters = self._clusters()
        del clusters[at]
        self.content = "".join(clusters)
        self._update_length()

    def split(self, at: int) -> "Line":
        """Keep the first ``at`` graphemes here and return the rest."""

        if at >= self._length:
            return Line()
        clusters = self._clusters()
        tail = Line("".join(clusters[at:]))
        self.content = "".join(clusters[:at])
        self._update_length()
        return tail

    def append(self, other: "Line") -> None:
        self.content += other.content
        self._update_length()

    def as_bytes(self) -> bytes:
        return self.content.encode(ENCODING)

    def _clusters(self) -> List[str]:
        return list(grapheme.graphemes(self.content))

    def _update_length(self) -> None:
        self._length = grapheme.length(self.content)


__all__ = ["Line", "ENCODING"]
