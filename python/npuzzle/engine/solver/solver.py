"""Sliding puzzle solver."""

from __future__ import annotations

import logging

from npuzzle.engine.solver.search import SearchTree
from npuzzle.errors import InvalidArgumentError
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Finds a shortest solution for *initial*, or proves there is none.

    Boards fall into two reachability classes and swapping two tiles moves a
    board into the other class.  A* runs on the initial board and on its
    twin in lockstep, one expansion each per round; exactly one of the two
    frontiers reaches the goal.  If it is the initial board's, the puzzle
    is solvable and the path to that goal is optimal since the Manhattan
    distance never overestimates.

    The whole search happens in the constructor.
    """

    def __init__(self, initial: Board | None) -> None:
        if initial is None:
            raise InvalidArgumentError("Can't solve a board that is None.")
        self.initial = initial

        original = SearchTree(initial)
        twin = SearchTree(initial.twin())
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Searching %d×%d board (manhattan %d)",
                initial.size, initial.size, initial.manhattan(),
            )

        while not original.at_goal() and not twin.at_goal():
            original.step()
            twin.step()

        self.expanded: tuple[int, int] = (original.expanded, twin.expanded)
        self._solution: list[Board] | None = None
        if original.at_goal():
            self._solution = original.path_to_min()

        if logger.isEnabledFor(logging.DEBUG):
            outcome = f"{self.moves()} moves" if self.is_solvable() else "unsolvable"
            logger.debug(
                "Search finished: %s after expanding %d + %d nodes",
                outcome, *self.expanded,
            )

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        """Return True if the initial board can reach the goal."""
        return self._solution is not None

    def moves(self) -> int:
        """Minimum number of slides to the goal; -1 if unsolvable."""
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial board first.

        ``None`` if unsolvable.  Each call returns a new list.
        """
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """The tile slides of :meth:`solution`, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        moves: list[Direction] = []
        for current, following in zip(self._solution, self._solution[1:]):
            moves.append(
                next(d for d, board in current.successors() if board == following)
            )
        return moves
