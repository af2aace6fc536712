"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from typing import Dict, Optional

from hecto.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a binding reuses a key already bound in the same mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on '{binding.token}' in mode '{binding.mode}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the per-mode key index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_key: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def lookup(self, mode: str, token: str) -> Optional[Binding]:
        binding_id = self._by_key.get(mode, {}).get(token)
        return self._bindings[binding_id] if binding_id else None

    def register_action(self, action: ActionRef) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            existing = self.lookup(binding.mode, binding.token)
            if existing is not None:
                handle.add_metadata("conflict", existing.id)
                raise KeymapConflictError(binding, existing)

            self._bindings[binding.id] = binding
            self._by_key.setdefault(binding.mode, {})[binding.token] = binding.id
            return binding


__all__ = [
    "KeymapConflictError",
    "KeymapRegistry",
]
