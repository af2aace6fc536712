"""Save and quit actions."""

from __future__ import annotations

from hecto.buffer import DocumentIOError
from hecto.modes.base_mode import ModeContext, ModeResult
from hecto.runtime import telemetry

from .prompt import open_prompt

QUIT_TIMES = 3
SAVE_AS_LABEL = "Save as: "


def save_document(context: ModeContext, match) -> ModeResult:
    del match
    if context.document.source_name is None:
        return open_prompt(
            context, SAVE_AS_LABEL, save_as, cancel_message="Save aborted."
        )
    return write_document(context)


def save_as(context: ModeContext, source_name: str) -> ModeResult:
    context.document.source_name = source_name
    return write_document(context)


def write_document(context: ModeContext) -> ModeResult:
    try:
        context.document.save()
    except DocumentIOError as exc:
        telemetry.get_logger("hecto.actions").error(f"save failed: {exc}")
        context.notify("Error writing file!")
        return ModeResult(consumed=True, status="save_failed", message=str(exc))
    context.notify("File saved successfully.")
    return ModeResult(consumed=True, status="saved")


def quit_editor(context: ModeContext, match) -> ModeResult:
    """Quit, asking for extra presses while there are unsaved changes."""

    del match
    remaining = int(context.extras.get("quit_times", QUIT_TIMES))
    if context.document.dirty and remaining > 0:
        context.notify(
            "WARNING! File has unsaved changes. "
            f"Press Ctrl-Q {remaining} more times to quit."
        )
        context.extras["quit_times"] = remaining - 1
        return ModeResult(consumed=True, status="quit_confirm")
    context.signals.quit()
    return ModeResult(consumed=True, status="quit")


def reset_quit_confirmation(context: ModeContext) -> None:
    context.extras["quit_times"] = QUIT_TIMES


__all__ = [
    "QUIT_TIMES",
    "quit_editor",
    "reset_quit_confirmation",
    "save_as",
    "save_document",
    "write_document",
]
