"""Cursor movement actions, one per Direction."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict

from hecto.modes.base_mode import ModeContext, ModeResult
from hecto.view import Direction


def move_cursor(context: ModeContext, match, *, direction: Direction) -> ModeResult:
    del match
    context.viewport.move(direction, context.document, context.size)
    return ModeResult(consumed=True, status=f"move_{direction.value}")


MOVES: Dict[Direction, Callable[..., ModeResult]] = {
    direction: partial(move_cursor, direction=direction) for direction in Direction
}


__all__ = ["MOVES", "move_cursor"]
