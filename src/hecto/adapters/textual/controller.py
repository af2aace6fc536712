"""Textual-facing controller that feeds keys to the session and pushes frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from hecto.modes import KeyInput, ModeResult
from hecto.session import EditorSession
from hecto.view import Frame, Size


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the controller to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    exit: Callable[[], None] = _noop
    # optional debug sink, one line per key round-trip
    log: Callable[[str], None] = _noop


def normalize_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Turn a Textual key name (``"ctrl+s"``, ``"left"``, ``"a"``) into a KeyInput."""

    if not key:
        return None
    *modifiers, name = key.split("+")
    printable = bool(character) and character.isprintable()
    if printable and not set(modifiers) - {"shift"}:
        return KeyInput(key=character, text=character)
    if key == "tab":
        return KeyInput(key="tab", text="\t")
    return KeyInput(key=name.lower(), modifiers=tuple(mod.lower() for mod in modifiers))


class TextualEditorAdapter:
    """Bridges an EditorSession to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        normalized = normalize_key(key, character)
        if normalized is None:
            return None
        self._log_state("key ->", key=key, token=normalized.key)
        result = self.session.handle_key(normalized)
        self._log_state("result <-", status=result.status, switch_to=result.switch_to)
        self.refresh()
        if self.session.should_quit:
            self.hooks.exit()
        return result

    def resize(self, width: int, height: int) -> None:
        self.session.resize(Size(width, height))
        self.refresh()

    def refresh(self) -> None:
        self.hooks.update_frame(self.session.frame())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        viewport = self.session.viewport
        return {
            "mode": self.session.mode,
            "cursor": (viewport.cursor.line, viewport.cursor.column),
            "scroll": (viewport.scroll_offset.line, viewport.scroll_offset.column),
            "lines": self.session.document.line_count(),
            "dirty": self.session.document.dirty,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_key"]
