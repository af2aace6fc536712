"""Error types raised by the buffer layer."""

from __future__ import annotations

from typing import Optional


class DocumentIOError(OSError):
    """Raised when a document cannot be read from or written to its source."""

    def __init__(self, message: str, *, source_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.source_name = source_name
