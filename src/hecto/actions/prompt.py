"""Actions backing the one-line prompt."""

from __future__ import annotations

from typing import Callable, MutableMapping, Optional, cast

import grapheme

from hecto.modes.base_mode import ModeContext, ModeResult

SubmitHandler = Callable[[ModeContext, str], ModeResult]


def _prompt_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("prompt_state", {})
    )
    state.setdefault("label", "")
    state.setdefault("text", "")
    state.setdefault("cancel_message", "")
    return state


def open_prompt(
    context: ModeContext,
    label: str,
    on_submit: SubmitHandler,
    *,
    cancel_message: str = "",
) -> ModeResult:
    """Arm the prompt; the manager enters prompt mode from the returned result."""

    context.extras["prompt_state"] = {
        "label": label,
        "text": "",
        "on_submit": on_submit,
        "cancel_message": cancel_message,
    }
    return ModeResult(consumed=True, switch_to="prompt", status="prompt_open")


def prompt_text(context: ModeContext) -> str:
    return str(_prompt_state(context)["text"])


def show_prompt(context: ModeContext) -> None:
    state = _prompt_state(context)
    context.notify(f"{state['label']}{state['text']}")


def clear_prompt(context: ModeContext) -> None:
    context.extras.pop("prompt_state", None)


def append_text(context: ModeContext, text: str) -> ModeResult:
    state = _prompt_state(context)
    state["text"] = f"{state['text']}{text}"
    show_prompt(context)
    return ModeResult(consumed=True, status="editing")


def backspace(context: ModeContext, match) -> ModeResult:
    del match
    state = _prompt_state(context)
    current = str(state["text"])
    state["text"] = grapheme.slice(current, 0, max(grapheme.length(current) - 1, 0))
    show_prompt(context)
    return ModeResult(consumed=True, status="editing")


def submit(context: ModeContext, match) -> ModeResult:
    del match
    state = _prompt_state(context)
    text = str(state["text"])
    handler = cast(Optional[SubmitHandler], state.get("on_submit"))
    if not text or handler is None:
        return _abort(context, state)
    outcome = handler(context, text)
    if outcome.switch_to is None:
        outcome.switch_to = "edit"
    return outcome


def cancel(context: ModeContext, match) -> ModeResult:
    del match
    return _abort(context, _prompt_state(context))


def _abort(context: ModeContext, state: MutableMapping[str, object]) -> ModeResult:
    context.notify(str(state["cancel_message"]))
    return ModeResult(consumed=True, switch_to="edit", status="prompt_cancel")


__all__ = [
    "append_text",
    "backspace",
    "cancel",
    "clear_prompt",
    "open_prompt",
    "prompt_text",
    "show_prompt",
    "submit",
]
