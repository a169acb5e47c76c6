"""Terminal rendering tests."""

from __future__ import annotations

from rich.console import Console

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board
from npuzzle_cli.render import render_plain, render_solution, render_table

ONE_MOVE = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


def _text(table) -> str:
    console = Console(width=80, no_color=True)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def test_plain_is_canonical() -> None:
    board = Board.from_grid(ONE_MOVE)
    assert render_plain(board) == str(board)


def test_solution_separated_by_blank_lines() -> None:
    boards = Solver(Board.from_grid(ONE_MOVE)).solution()
    assert boards is not None

    assert render_solution(boards) == (
        "3\n 1  2  3\n 4  5  6\n 7  0  8\n\n3\n 1  2  3\n 4  5  6\n 7  8  0"
    )


def test_table_caption_shows_distance() -> None:
    table = render_table(Board.from_grid([[8, 1, 3], [4, 0, 2], [7, 6, 5]]))

    assert table.title is None
    assert table.caption == "manhattan 10"
    assert table.row_count == 3


def test_table_title_tracks_solution_step() -> None:
    boards = Solver(Board.from_grid(ONE_MOVE)).solution()
    assert boards is not None

    tables = [render_table(b, i, len(boards) - 1) for i, b in enumerate(boards)]

    assert [t.title for t in tables] == ["Move 0/1", "Move 1/1"]
    assert [t.caption for t in tables] == ["manhattan 1", "manhattan 0"]
    assert render_table(boards[0], 3).title == "Move 3"


def test_table_marks_blank() -> None:
    text = _text(render_table(Board.from_grid(ONE_MOVE), 0, 1))

    assert "Move 0/1" in text
    assert "manhattan 1" in text
    assert "·" in text
    assert " 0 " not in text
