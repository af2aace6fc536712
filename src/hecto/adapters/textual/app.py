"""Executable Textual app that hosts the editor session."""

from __future__ import annotations

import argparse
import os
from typing import Callable, Optional, Sequence

import grapheme
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from hecto import __version__
from hecto.runtime import telemetry
from hecto.session import EditorSession
from hecto.view import Frame

from .controller import TextualEditorAdapter, TextualUIHooks

MESSAGE_REFRESH_SECONDS = 1.0


def frame_text(frame: Frame) -> Text:
    """Render frame rows as rich Text with the cursor cell reversed."""

    text = Text(no_wrap=True, overflow="crop")
    cursor_x, cursor_y = frame.cursor
    for index, row in enumerate(frame.rows):
        if index:
            text.append("\n")
        if index != cursor_y:
            text.append(row)
            continue
        cells = list(grapheme.graphemes(row))
        text.append("".join(cells[:cursor_x]))
        text.append(cells[cursor_x] if cursor_x < len(cells) else " ", style="reverse")
        text.append("".join(cells[cursor_x + 1 :]))
    return text


class EditorView(Static):
    """Buffer area; reports its own size so the viewport matches it."""

    def __init__(self, on_size: Callable[[int, int], None], **kwargs) -> None:
        super().__init__("", **kwargs)
        self._on_size = on_size

    def on_resize(self, event: events.Resize) -> None:
        self._on_size(event.size.width, event.size.height)


class HectoApp(App[None]):
    """Full-screen line editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor-view {
		height: 1fr;
	}

	#status-bar {
		height: 1;
		background: $foreground;
		color: $background;
	}

	#message-bar {
		height: 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+q", "editor_key('ctrl+q')", "Quit", priority=True),
        Binding("ctrl+c", "editor_key('ctrl+q')", "Quit", show=False, priority=True),
        Binding("ctrl+s", "editor_key('ctrl+s')", "Save", priority=True),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._editor_view: EditorView | None = None
        self._status_bar: Static | None = None
        self._message_bar: Static | None = None
        self.logger = telemetry.get_logger("hecto.adapters.textual")

    def compose(self) -> ComposeResult:
        self._editor_view = EditorView(self._resize_viewport, id="editor-view")
        self._status_bar = Static("", id="status-bar")
        self._message_bar = Static("", id="message-bar")
        yield self._editor_view
        yield self._status_bar
        yield self._message_bar

    def on_mount(self) -> None:
        self.title = f"hecto {__version__}"
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            exit=self.exit,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.set_interval(MESSAGE_REFRESH_SECONDS, self.adapter.refresh)

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is not None and result.consumed:
            event.stop()
            event.prevent_default()

    def action_editor_key(self, key: str) -> None:
        if self.adapter is not None:
            self.adapter.handle_textual_key(key)

    def _resize_viewport(self, width: int, height: int) -> None:
        if self.adapter is not None:
            self.adapter.resize(width, height)

    def _update_frame(self, frame: Frame) -> None:
        if self._editor_view:
            self._editor_view.update(frame_text(frame))
        if self._status_bar:
            self._status_bar.update(Text(frame.status, no_wrap=True))
        if self._message_bar:
            self._message_bar.update(Text(frame.message, no_wrap=True))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hecto", description="Terminal line editor.")
    parser.add_argument("filename", nargs="?", help="File to open")
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        default=os.environ.get("HECTO_LOG_PRESET", "production"),
        help="telelog preset (default: production, file output only)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    session = EditorSession.open(args.filename)
    HectoApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
