"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def make_token(key: str, modifiers: Iterable[str] = ()) -> str:
    normalized = normalize_modifiers(modifiers)
    if normalized:
        return "+".join(normalized + (key,))
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``KeyStroke("s", ("ctrl",))``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return make_token(self.key, self.modifiers)

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Parse ``"ctrl+s"`` style strings; a lone ``"+"`` is the plus key."""

        if spec == "+" or "+" not in spec:
            return cls(spec)
        *modifiers, key = spec.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named callable invoked as ``handler(context, match)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one keystroke in one mode with an action id."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @classmethod
    def for_key(
        cls, binding_id: str, mode: str, spec: str, action_id: str, description: str = ""
    ) -> "Binding":
        return cls(
            id=binding_id,
            mode=mode,
            stroke=KeyStroke.parse(spec),
            action_id=action_id,
            description=description,
        )

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "make_token",
    "normalize_modifiers",
]
