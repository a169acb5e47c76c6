"""Generates sliding puzzle boards for the solver."""

from __future__ import annotations

import random

from npuzzle.errors import InvalidArgumentError
from npuzzle.models.board import Board

# Random slides per cell when no step count is given.
SHUFFLES_PER_CELL = 100


class GameGenerator:
    """Creates puzzles by random-walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        if size < 1:
            raise InvalidArgumentError(f"Board size must be positive, got {size}.")
        flat = list(range(1, size * size)) + [0]
        return Board.from_flat(size, flat)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random) -> Board:
        """Return *board* after *steps* random slides.

        The blank never steps straight back to the cell it just left unless
        it has nowhere else to go.
        """
        prev_pos: tuple[int, int] | None = None
        for _ in range(steps):
            neighbors = list(board.neighbors())
            if len(neighbors) > 1:
                neighbors = [nb for nb in neighbors if nb.blank_pos != prev_pos]
            if not neighbors:
                break
            prev_pos = board.blank_pos
            board = rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int,
        steps: int | None = None,
        seed: int | None = None,
        solvable: bool = True,
    ) -> Board:
        """Return a random board of the given size.

        Unsolvable boards are the twin of a scrambled solvable one.
        """
        rng = random.Random(seed)
        if steps is None:
            steps = size * size * SHUFFLES_PER_CELL
        board = GameGenerator.scramble(GameGenerator.solved(size), steps, rng)
        return board if solvable else board.twin()
