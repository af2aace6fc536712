from __future__ import annotations

from typing import List, Optional

import pytest

from hecto.actions import prompt as prompt_actions
from hecto.buffer import Document, Position
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
from hecto.view import Size, Viewport


def make_context(
    document: Optional[Document] = None, messages: Optional[List[str]] = None
) -> ModeContext:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    signals = SessionSignals()
    if messages is not None:
        signals.message = messages.append
    return ModeContext(
        document=document if document is not None else Document(),
        viewport=Viewport(),
        size=Size(20, 5),
        resolver=KeymapResolver(registry),
        signals=signals,
    )


def make_manager(context: ModeContext) -> ModeManager:
    return ModeManager(context, (EditMode, PromptMode))


def test_keyed_mode_requires_resolver() -> None:
    context = ModeContext(document=Document(), viewport=Viewport())

    with pytest.raises(RuntimeError):
        EditMode(context)


def test_edit_mode_inserts_printable_text() -> None:
    context = make_context()
    mode = EditMode(context)

    result = mode.handle_key(KeyInput(key="a", text="a"))

    assert result.consumed is True
    assert result.status == "insert"
    assert context.document.snapshot() == ("a",)
    assert context.viewport.cursor == Position(0, 1)


def test_edit_mode_uses_movement_binding() -> None:
    context = make_context(Document.from_text("abc\n"))
    mode = EditMode(context)

    result = mode.handle_key(KeyInput(key="end"))

    assert result.status == "move_end"
    assert context.viewport.cursor == Position(0, 3)


def test_edit_mode_reports_unbound_keys() -> None:
    context = make_context()
    mode = EditMode(context)

    result = mode.handle_key(KeyInput(key="f9"))

    assert result.consumed is False
    assert result.status == "miss"
    assert context.document.is_empty()


def test_edit_mode_ignores_text_with_modifiers() -> None:
    context = make_context()
    mode = EditMode(context)

    result = mode.handle_key(KeyInput(key="x", modifiers=("ctrl",), text="x"))

    assert result.status == "miss"
    assert context.document.is_empty()


def test_prompt_mode_collects_text_and_backspace() -> None:
    messages: List[str] = []
    context = make_context(messages=messages)
    prompt_actions.open_prompt(context, "Name: ", lambda ctx, text: ModeResult(True))
    mode = PromptMode(context)
    mode.on_enter("edit")

    mode.handle_key(KeyInput(key="a", text="a"))
    mode.handle_key(KeyInput(key="b", text="b"))
    mode.handle_key(KeyInput(key="backspace"))

    assert prompt_actions.prompt_text(context) == "a"
    assert messages == ["Name: ", "Name: a", "Name: ab", "Name: a"]


def test_mode_manager_starts_in_first_mode() -> None:
    manager = make_manager(make_context())

    assert manager.active_mode.name == "edit"
    with pytest.raises(KeyError):
        manager.switch_mode("visual")


def test_mode_manager_rejects_duplicate_and_empty_mode_lists() -> None:
    with pytest.raises(ValueError):
        ModeManager(make_context(), (EditMode, EditMode))
    with pytest.raises(ValueError):
        ModeManager(make_context(), ())


def test_mode_manager_round_trip_through_prompt() -> None:
    messages: List[str] = []
    context = make_context(messages=messages)
    submitted: List[str] = []

    def on_submit(ctx: ModeContext, text: str) -> ModeResult:
        submitted.append(text)
        return ModeResult(consumed=True, status="accepted")

    manager = make_manager(context)
    opened = prompt_actions.open_prompt(context, "Q: ", on_submit)
    manager.switch_mode(opened.switch_to or "")
    manager.handle_key(KeyInput(key="y", text="y"))
    result = manager.handle_key(KeyInput(key="enter"))

    assert submitted == ["y"]
    assert result.status == "accepted"
    assert manager.active_mode.name == "edit"
    assert "prompt_state" not in context.extras
    assert messages[-1] == "Q: y"


def test_escape_in_prompt_reports_cancel_message() -> None:
    messages: List[str] = []
    context = make_context(messages=messages)
    manager = make_manager(context)

    prompt_actions.open_prompt(
        context, "Q: ", lambda ctx, text: ModeResult(True), cancel_message="nope"
    )
    manager.switch_mode("prompt")
    result = manager.handle_key(KeyInput(key="escape"))

    assert result.status == "prompt_cancel"
    assert messages[-1] == "nope"
    assert manager.active_mode.name == "edit"


def test_empty_prompt_answer_aborts() -> None:
    context = make_context()
    called: List[str] = []
    manager = make_manager(context)

    prompt_actions.open_prompt(
        context, "Q: ", lambda ctx, text: called.append(text) or ModeResult(True)
    )
    manager.switch_mode("prompt")
    result = manager.handle_key(KeyInput(key="enter"))

    assert called == []
    assert result.status == "prompt_cancel"
