"""Key events, results and the context every mode and action works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from hecto.buffer import Document
from hecto.view import Size, Viewport

if TYPE_CHECKING:
    from hecto.keymaps import KeymapResolver


@dataclass(slots=True)
class KeyInput:
    """One key press, already stripped of host-toolkit details.

    ``text`` is set for keys that type something; ``key`` and ``modifiers``
    are what the keymap is matched against.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def types_text(self) -> bool:
        return bool(self.text) and not self.modifiers


@dataclass(slots=True)
class ModeResult:
    """Outcome of one key; ``switch_to`` names the mode to enter next."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None

    @classmethod
    def unhandled(cls) -> "ModeResult":
        return cls(consumed=False, status="miss", message="unhandled")


def _ignore(*_args: object) -> None:
    return None


@dataclass(slots=True)
class SessionSignals:
    """Callbacks through which actions reach the session hosting them."""

    message: Callable[[str], None] = _ignore
    quit: Callable[[], None] = _ignore


@dataclass(slots=True)
class ModeContext:
    """Everything an action may touch while handling one key.

    ``extras`` holds per-action scratch state such as the prompt buffer and
    the remaining quit confirmations.
    """

    document: Document
    viewport: Viewport
    size: Size = field(default_factory=lambda: Size(80, 24))
    resolver: Optional["KeymapResolver"] = None
    signals: SessionSignals = field(default_factory=SessionSignals)
    extras: Dict[str, object] = field(default_factory=dict)

    def notify(self, text: str) -> None:
        """Replace the message bar text."""

        self.signals.message(text)

    def require_resolver(self) -> "KeymapResolver":
        if self.resolver is None:
            raise RuntimeError("ModeContext has no keymap resolver")
        return self.resolver


class Mode:
    """A named key handler; the manager calls the hooks around switches."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = [
    "KeyInput",
    "Mode",
    "ModeContext",
    "ModeResult",
    "SessionSignals",
]
