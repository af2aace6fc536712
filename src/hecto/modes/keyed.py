"""Shared dispatch for modes driven by the keymap."""

from __future__ import annotations

from hecto.keymaps import ResolutionMatch, make_token
from hecto.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class KeyedMode(Mode):
    """Runs the bound action for a key, or hands typed text to ``insert``.

    Subclasses only decide where typed text goes.
    """

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = context.require_resolver()
        self.logger = telemetry.get_logger(f"hecto.modes.{self.name}")

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = make_token(key.key, key.modifiers)
        result = self._resolver.resolve(self.name, token)
        if result.match is not None:
            return self._execute(result.match)
        if key.types_text:
            return self.insert(key.text or "")
        self.logger.debug(f"unbound key {token!r}")
        return ModeResult.unhandled()

    def insert(self, text: str) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def _execute(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)
        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["KeyedMode"]
