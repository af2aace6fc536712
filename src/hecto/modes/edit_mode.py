"""Edit mode: arrows move, printable keys type, bindings do the rest."""

from __future__ import annotations

from hecto.actions import editing

from .base_mode import ModeResult
from .keyed import KeyedMode


class EditMode(KeyedMode):
    name = "edit"

    def insert(self, text: str) -> ModeResult:
        return editing.insert_text(self.context, text)
