"""Built-in actions and key bindings for the edit and prompt modes."""

from __future__ import annotations

from hecto.actions import editing as editing_actions
from hecto.actions import file as file_actions
from hecto.actions import movement as movement_actions
from hecto.actions import prompt as prompt_actions
from hecto.view import Direction

from .models import ActionRef, Binding
from .registry import KeymapRegistry

_MOVE_KEYS = {
    Direction.LEFT: "left",
    Direction.RIGHT: "right",
    Direction.UP: "up",
    Direction.DOWN: "down",
    Direction.PAGE_UP: "pageup",
    Direction.PAGE_DOWN: "pagedown",
    Direction.HOME: "home",
    Direction.END: "end",
}


def default_actions() -> tuple[ActionRef, ...]:
    """Built at call time; the action modules import the modes package."""

    return (
        *(
            ActionRef(
                id=f"cursor.{direction.value}",
                handler=movement_actions.MOVES[direction],
                description=f"Move cursor {direction.value.replace('_', ' ')}",
            )
            for direction in Direction
        ),
        ActionRef(
            id="edit.newline",
            handler=editing_actions.insert_newline,
            description="Break the line at the cursor",
        ),
        ActionRef(
            id="edit.delete_forward",
            handler=editing_actions.delete_forward,
            description="Delete the grapheme under the cursor",
        ),
        ActionRef(
            id="edit.delete_backward",
            handler=editing_actions.delete_backward,
            description="Delete the grapheme before the cursor",
        ),
        ActionRef(
            id="file.save",
            handler=file_actions.save_document,
            description="Save, asking for a file name if there is none",
        ),
        ActionRef(
            id="editor.quit",
            handler=file_actions.quit_editor,
            description="Quit the editor",
        ),
        ActionRef(
            id="prompt.submit",
            handler=prompt_actions.submit,
            description="Accept the prompt answer",
        ),
        ActionRef(
            id="prompt.cancel",
            handler=prompt_actions.cancel,
            description="Abort the prompt",
        ),
        ActionRef(
            id="prompt.backspace",
            handler=prompt_actions.backspace,
            description="Remove the last typed grapheme",
        ),
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *(
        Binding.for_key(f"edit.{key}", "edit", key, f"cursor.{direction.value}")
        for direction, key in _MOVE_KEYS.items()
    ),
    Binding.for_key("edit.enter", "edit", "enter", "edit.newline"),
    Binding.for_key("edit.delete", "edit", "delete", "edit.delete_forward"),
    Binding.for_key("edit.backspace", "edit", "backspace", "edit.delete_backward"),
    Binding.for_key("edit.save", "edit", "ctrl+s", "file.save"),
    Binding.for_key("edit.quit", "edit", "ctrl+q", "editor.quit"),
    Binding.for_key("prompt.enter", "prompt", "enter", "prompt.submit"),
    Binding.for_key("prompt.escape", "prompt", "escape", "prompt.cancel"),
    Binding.for_key("prompt.backspace", "prompt", "backspace", "prompt.backspace"),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register the built-in actions, then every binding that points at them."""

    for action in default_actions():
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
