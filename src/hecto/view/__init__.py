"""Cursor/viewport engine and frame composition."""

from .frame import Frame, StatusMessage, compose_frame
from .viewport import Direction, Size, Viewport

__all__ = [
    "Direction",
    "Frame",
    "Size",
    "StatusMessage",
    "Viewport",
    "compose_frame",
]
