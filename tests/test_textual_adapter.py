from __future__ import annotations

from typing import List

from hecto.adapters.textual import TextualEditorAdapter, TextualUIHooks, normalize_key
from hecto.adapters.textual.app import frame_text
from hecto.buffer import Document
from hecto.session import EditorSession
from hecto.view import Frame


def make_adapter(
    session: EditorSession, frames: List[Frame], **hooks: object
) -> TextualEditorAdapter:
    return TextualEditorAdapter(
        session, TextualUIHooks(update_frame=frames.append, **hooks)  # type: ignore[arg-type]
    )


def test_normalize_key_printable_and_named() -> None:
    typed = normalize_key("A", character="A")
    assert typed is not None
    assert (typed.key, typed.text) == ("A", "A")

    space = normalize_key("space", character=" ")
    assert space is not None
    assert space.text == " "

    save = normalize_key("ctrl+s", character="\x13")
    assert save is not None
    assert (save.key, save.modifiers, save.text) == ("s", ("ctrl",), None)

    page = normalize_key("pagedown")
    assert page is not None
    assert (page.key, page.text) == ("pagedown", None)

    tab = normalize_key("tab", character="\t")
    assert tab is not None
    assert tab.text == "\t"

    assert normalize_key("") is None


def test_adapter_pushes_frame_on_start_and_each_key() -> None:
    frames: List[Frame] = []
    adapter = make_adapter(EditorSession(), frames)

    adapter.handle_textual_key("h", character="h")
    adapter.handle_textual_key("i", character="i")

    assert len(frames) == 3
    assert frames[-1].rows[0] == "hi"
    assert frames[-1].cursor == (2, 0)


def test_adapter_resize_updates_viewport() -> None:
    frames: List[Frame] = []
    adapter = make_adapter(EditorSession(Document.from_text("a\nb\nc\n")), frames)

    adapter.resize(12, 2)

    assert adapter.session.size.height == 2
    assert frames[-1].rows == ("a", "b")


def test_adapter_calls_exit_on_quit() -> None:
    frames: List[Frame] = []
    exits: List[bool] = []
    adapter = make_adapter(
        EditorSession(), frames, exit=lambda: exits.append(True)
    )

    result = adapter.handle_textual_key("ctrl+q")

    assert result is not None
    assert result.status == "quit"
    assert exits == [True]


def test_adapter_emits_log_lines() -> None:
    frames: List[Frame] = []
    logs: List[str] = []
    adapter = make_adapter(EditorSession(), frames, log=logs.append)

    adapter.handle_textual_key("x", character="x")

    assert any(line.startswith("key ->") for line in logs)
    assert any("status='insert'" in line for line in logs)


def test_frame_text_highlights_cursor_cell() -> None:
    frame = Frame(rows=("ab", "~"), status="", message="", cursor=(2, 0))

    text = frame_text(frame)

    assert text.plain == "ab \n~"
    assert any(str(span.style) == "reverse" for span in text.spans)
