"""Board rendering for the terminal."""

from __future__ import annotations

import rich.box
from rich.table import Table

from npuzzle.models.board import Board


def render_plain(board: Board) -> str:
    """The canonical text form: dimension, then one line per row."""
    return str(board)


def render_solution(boards: list[Board]) -> str:
    """Every board of a solution in order, separated by blank lines."""
    return "\n\n".join(render_plain(board) for board in boards)


def render_table(
    board: Board, step: int | None = None, total: int | None = None
) -> Table:
    """Return a Rich Table of the grid with its distance to the goal.

    When *step* is given the table is titled with its position in a
    solution of *total* moves.
    """
    width = len(str(board.size * board.size - 1))
    title = None
    if step is not None:
        title = f"Move {step}" if total is None else f"Move {step}/{total}"
    table = Table(
        title=title,
        title_style="bold cyan",
        caption=f"manhattan {board.manhattan()}",
        caption_style="dim",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.size):
        table.add_row(*(_cell(board, r, c, width) for c in range(board.size)))

    return table


def _cell(board: Board, row: int, col: int, width: int) -> str:
    val = board.get_tile(row, col)
    if val == 0:
        return "[dim]·[/dim]"
    style = "bold green" if board.is_tile_correct(row, col) else "bold white"
    return f"[{style}]{val:>{width}}[/{style}]"
