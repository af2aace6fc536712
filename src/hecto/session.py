"""Editor session: one document, one viewport, one stream of keys."""

from __future__ import annotations

from typing import Optional

from hecto.actions import file as file_actions
from hecto.buffer import Document, DocumentIOError
from hecto.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from hecto.modes import (
    EditMode,
    KeyInput,
    ModeContext,
    ModeResult,
    PromptMode,
    SessionSignals,
)
from hecto.modes.mode_manager import ModeManager
from hecto.runtime import telemetry
from hecto.view import Frame, Size, StatusMessage, Viewport, compose_frame

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit"


class EditorSession:
    """Owns everything that changes while the editor runs.

    The shell feeds keys through ``handle_key`` and reads back a ``Frame``;
    the session never touches the terminal itself.
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        size: Size = Size(80, 24),
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.logger = telemetry.get_logger("hecto.session")
        self.should_quit = False
        self.message = StatusMessage(HELP_MESSAGE)

        if registry is None:
            registry = KeymapRegistry(logger_name="hecto.keymaps")
            load_default_keymaps(registry)
        self.context = ModeContext(
            # an empty Document is falsy, so test identity
            document=document if document is not None else Document(),
            viewport=Viewport(),
            size=size,
            resolver=KeymapResolver(registry, logger_name="hecto.keymaps"),
            signals=SessionSignals(message=self.set_message, quit=self._on_quit),
        )
        self.manager = ModeManager(self.context, (EditMode, PromptMode))
        file_actions.reset_quit_confirmation(self.context)

    @classmethod
    def open(cls, source_name: Optional[str], *, size: Size = Size(80, 24)) -> "EditorSession":
        """Start on ``source_name``, or on an empty unnamed buffer if it can't be read."""

        if source_name is None:
            return cls(size=size)
        try:
            document = Document.open(source_name)
        except DocumentIOError:
            session = cls(size=size)
            session.set_message(f"ERR: Could not open file: {source_name}")
            return session
        return cls(document, size=size)

    @property
    def document(self) -> Document:
        return self.context.document

    @property
    def viewport(self) -> Viewport:
        return self.context.viewport

    @property
    def size(self) -> Size:
        return self.context.size

    @property
    def mode(self) -> str:
        return self.manager.active_mode.name

    def resize(self, size: Size) -> None:
        self.context.size = size
        self.viewport.recompute_scroll(size)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self.manager.handle_key(key)
        if result.status != "quit_confirm":
            file_actions.reset_quit_confirmation(self.context)
        return result

    def set_message(self, text: str) -> None:
        self.message = StatusMessage(text)

    def frame(self, *, now: Optional[float] = None) -> Frame:
        return compose_frame(
            self.document, self.viewport, self.size, message=self.message, now=now
        )

    def _on_quit(self) -> None:
        self.logger.info("quit requested")
        self.should_quit = True


__all__ = ["EditorSession", "HELP_MESSAGE"]
