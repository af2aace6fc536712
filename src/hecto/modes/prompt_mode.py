"""One-line prompt shown in the message bar (e.g. "Save as: ")."""

from __future__ import annotations

from hecto.actions import prompt as prompt_actions

from .base_mode import ModeResult
from .keyed import KeyedMode


class PromptMode(KeyedMode):
    name = "prompt"

    def on_enter(self, previous: str | None) -> None:
        del previous
        prompt_actions.show_prompt(self.context)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        prompt_actions.clear_prompt(self.context)

    def insert(self, text: str) -> ModeResult:
        return prompt_actions.append_text(self.context, text)
