"""Routes keys to the active mode and applies the switches it asks for."""

from __future__ import annotations

from typing import Dict, Iterable, Type

from hecto.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Holds one instance per mode class; the first one starts active.

    The context must already carry its keymap resolver, since every keyed
    mode looks it up on construction.
    """

    def __init__(self, context: ModeContext, modes: Iterable[Type[Mode]]) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        for mode_cls in modes:
            mode = mode_cls(context)
            if mode.name in self._modes:
                raise ValueError(f"Mode '{mode.name}' listed twice")
            self._modes[mode.name] = mode
        if not self._modes:
            raise ValueError("ModeManager needs at least one mode")
        self._active = next(iter(self._modes.values()))
        self._active.on_enter(None)

    @property
    def active_mode(self) -> Mode:
        return self._active

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        if target is self._active:
            return
        previous = self._active
        previous.on_exit(name)
        self._active = target
        target.on_enter(previous.name)
        telemetry.record_event("mode.switch", data={"from": previous.name, "to": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        with telemetry.span(
            f"mode::{self._active.name}",
            component="modes",
            metadata={"key": key.key},
        ):
            result = self._active.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
