"""Grapheme-indexed text storage: lines, documents and positions."""

from .document import Document, TERMINATOR
from .errors import DocumentIOError
from .line import Line
from .state import ORIGIN, Position

__all__ = [
    "Document",
    "DocumentIOError",
    "Line",
    "ORIGIN",
    "Position",
    "TERMINATOR",
]
