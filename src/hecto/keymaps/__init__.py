"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, KeyStroke, make_token
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "make_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "load_default_keymaps",
]
