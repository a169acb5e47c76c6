"""Reads boards from the plain-text puzzle format.

The format is a sequence of whitespace separated integers: the dimension N
followed by the N² cell values in row-major order, 0 for the blank::

    3
     0  1  3
     4  2  5
     7  8  6

The canonical rendering of a board (``str(board)``) is valid input.
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.errors import BoardFormatError
from npuzzle.models.board import Board


def parse_board(text: str) -> Board:
    """Parse *text* into a validated :class:`Board`."""
    tokens = text.split()
    if not tokens:
        raise BoardFormatError("Board text is empty.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise BoardFormatError(f"Board text contains a non-integer token: {exc}") from exc

    size, cells = values[0], values[1:]
    if size < 1:
        raise BoardFormatError(f"Board dimension must be positive, got {size}.")
    if len(cells) != size * size:
        raise BoardFormatError(
            f"Expected {size * size} cell values for a {size}×{size} board, "
            f"got {len(cells)}."
        )
    return Board.from_flat(size, cells)


def read_board(path: Path) -> Board:
    """Read and parse the board stored at *path*."""
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise BoardFormatError(f"Can't read {path}: {exc}") from exc
    return parse_board(text)
