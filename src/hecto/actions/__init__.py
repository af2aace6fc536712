"""Editing verbs bound to keys."""

from .editing import delete_backward, delete_forward, insert_newline, insert_text
from .file import quit_editor, save_document, write_document
from .movement import MOVES, move_cursor

__all__ = [
    "MOVES",
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "insert_text",
    "move_cursor",
    "quit_editor",
    "save_document",
    "write_document",
]
