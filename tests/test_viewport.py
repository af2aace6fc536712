from __future__ import annotations

import pytest

from hecto.buffer import Document, Position
from hecto.view import Direction, Size, Viewport


def make_document(*lines: str) -> Document:
    return Document.from_text("".join(f"{line}\n" for line in lines))


def make_viewport(line: int = 0, column: int = 0) -> Viewport:
    return Viewport(cursor=Position(line, column))


WIDE = Size(80, 24)


def test_left_wraps_to_end_of_previous_line() -> None:
    document = make_document("abc", "de")
    viewport = make_viewport(1, 0)

    viewport.move(Direction.LEFT, document, WIDE)

    assert viewport.cursor == Position(0, 3)


def test_right_wraps_to_start_of_next_line() -> None:
    document = make_document("abc", "de")
    viewport = make_viewport(0, 3)

    viewport.move(Direction.RIGHT, document, WIDE)

    assert viewport.cursor == Position(1, 0)


def test_left_at_origin_stays_put() -> None:
    viewport = make_viewport()

    viewport.move(Direction.LEFT, make_document("abc"), WIDE)

    assert viewport.cursor == Position(0, 0)


def test_right_reaches_append_line_then_stops() -> None:
    document = make_document("ab")
    viewport = make_viewport(0, 2)

    viewport.move(Direction.RIGHT, document, WIDE)
    assert viewport.cursor == Position(1, 0)

    viewport.move(Direction.RIGHT, document, WIDE)
    assert viewport.cursor == Position(1, 0)


def test_right_counts_graphemes() -> None:
    document = make_document("\U0001F1EB\U0001F1F7x")
    viewport = make_viewport()

    viewport.move(Direction.RIGHT, document, WIDE)
    viewport.move(Direction.RIGHT, document, WIDE)

    assert viewport.cursor == Position(0, 2)


def test_down_is_clamped_to_line_count() -> None:
    document = make_document("a", "b")
    viewport = make_viewport()

    for _ in range(5):
        viewport.move(Direction.DOWN, document, WIDE)

    assert viewport.cursor == Position(2, 0)


def test_up_saturates_at_zero() -> None:
    viewport = make_viewport(1, 0)
    document = make_document("a", "b")

    viewport.move(Direction.UP, document, WIDE)
    viewport.move(Direction.UP, document, WIDE)

    assert viewport.cursor == Position(0, 0)


def test_vertical_move_snaps_column_to_shorter_line() -> None:
    document = make_document("a long line", "ab")
    viewport = make_viewport(0, 9)

    viewport.move(Direction.DOWN, document, WIDE)

    assert viewport.cursor == Position(1, 2)


def test_vertical_move_keeps_column_when_line_is_long_enough() -> None:
    document = make_document("abcdef", "ghijkl")
    viewport = make_viewport(0, 4)

    viewport.move(Direction.DOWN, document, WIDE)

    assert viewport.cursor == Position(1, 4)


def test_column_clamp_resets_horizontal_scroll() -> None:
    document = make_document("x" * 30, "short")
    size = Size(10, 5)
    viewport = make_viewport(0, 25)
    viewport.recompute_scroll(size)
    assert viewport.scroll_offset == Position(0, 16)

    viewport.move(Direction.DOWN, document, size)

    assert viewport.cursor == Position(1, 5)
    assert viewport.scroll_offset == Position(0, 0)


def test_page_moves_by_viewport_height() -> None:
    document = make_document(*[str(i) for i in range(50)])
    size = Size(20, 10)
    viewport = make_viewport(3, 0)

    viewport.move(Direction.PAGE_DOWN, document, size)
    assert viewport.cursor.line == 13

    viewport.move(Direction.PAGE_UP, document, size)
    assert viewport.cursor.line == 3

    viewport.move(Direction.PAGE_UP, document, size)
    assert viewport.cursor.line == 0


def test_page_down_clamps_to_append_line() -> None:
    document = make_document("a", "b", "c")
    viewport = make_viewport()

    viewport.move(Direction.PAGE_DOWN, document, Size(10, 10))

    assert viewport.cursor == Position(3, 0)


def test_home_and_end() -> None:
    document = make_document("hello")
    viewport = make_viewport(0, 2)

    viewport.move(Direction.END, document, WIDE)
    assert viewport.cursor == Position(0, 5)

    viewport.move(Direction.HOME, document, WIDE)
    assert viewport.cursor == Position(0, 0)


def test_scroll_follows_cursor_down_to_far_edge() -> None:
    document = make_document(*[str(i) for i in range(20)])
    size = Size(10, 5)
    viewport = make_viewport()

    for _ in range(7):
        viewport.move(Direction.DOWN, document, size)

    assert viewport.cursor.line == 7
    assert viewport.scroll_offset.line == 3


def test_scroll_follows_cursor_up_to_near_edge() -> None:
    viewport = Viewport(cursor=Position(2, 0), scroll_offset=Position(6, 0))

    viewport.recompute_scroll(Size(10, 5))

    assert viewport.scroll_offset == Position(2, 0)


def test_scroll_unchanged_while_cursor_visible() -> None:
    viewport = Viewport(cursor=Position(8, 4), scroll_offset=Position(6, 2))

    viewport.recompute_scroll(Size(10, 5))

    assert viewport.scroll_offset == Position(6, 2)


@pytest.mark.parametrize(
    "cursor, offset",
    [
        (Position(0, 0), Position(0, 0)),
        (Position(40, 3), Position(0, 0)),
        (Position(2, 90), Position(10, 50)),
        (Position(5, 5), Position(0, 0)),
    ],
)
def test_recompute_scroll_is_idempotent(cursor: Position, offset: Position) -> None:
    viewport = Viewport(cursor=cursor, scroll_offset=offset)
    size = Size(12, 7)

    viewport.recompute_scroll(size)
    first = viewport.scroll_offset
    viewport.recompute_scroll(size)

    assert viewport.scroll_offset == first


def test_zero_sized_viewport_is_treated_as_one_cell() -> None:
    viewport = Viewport(cursor=Position(3, 4))

    viewport.recompute_scroll(Size(0, 0))
    viewport.recompute_scroll(Size(0, 0))

    assert viewport.scroll_offset == Position(3, 4)
    assert viewport.screen_cursor() == (0, 0)


def test_place_clamps_to_document() -> None:
    document = make_document("abc")
    viewport = make_viewport()

    viewport.place(Position(7, 9), document, WIDE)

    assert viewport.cursor == Position(1, 0)
