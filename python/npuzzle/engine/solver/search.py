"""Best-first search tree over one reachability class of boards."""

from __future__ import annotations

import heapq
from dataclasses import dataclass

from npuzzle.models.board import Board


@dataclass(frozen=True)
class SearchNode:
    board: Board
    moves: int
    parent: int | None
    priority: int


class SearchTree:
    """A* frontier plus the arena of every node generated so far.

    Nodes refer to their parent by arena index.  The frontier is a binary
    heap of ``(priority, manhattan, index)``: lowest priority first, then
    the board closer to the goal, then insertion order.
    """

    def __init__(self, root: Board) -> None:
        self._nodes: list[SearchNode] = []
        self._frontier: list[tuple[int, int, int]] = []
        self.expanded: int = 0
        self._push(root, 0, None)

    # -- frontier -------------------------------------------------------------

    @property
    def exhausted(self) -> bool:
        return not self._frontier

    def peek(self) -> SearchNode:
        """The node with the minimum priority, left in the frontier."""
        return self._nodes[self._frontier[0][2]]

    def at_goal(self) -> bool:
        """True if the frontier minimum is the goal board."""
        return not self.exhausted and self.peek().board.is_goal()

    def step(self) -> None:
        """Remove the minimum node and push its unvisited neighbors.

        Tiny boards can run out of unvisited paths; stepping an exhausted
        tree does nothing.
        """
        if self.exhausted:
            return
        _, _, index = heapq.heappop(self._frontier)
        node = self._nodes[index]
        self.expanded += 1
        for board in node.board.neighbors():
            if not self._on_path(index, board):
                self._push(board, node.moves + 1, index)

    # -- paths ----------------------------------------------------------------

    def path_to_min(self) -> list[Board]:
        """Boards from the root to the current frontier minimum."""
        return self.path(self._frontier[0][2])

    def path(self, index: int) -> list[Board]:
        boards: list[Board] = []
        cursor: int | None = index
        while cursor is not None:
            node = self._nodes[cursor]
            boards.append(node.board)
            cursor = node.parent
        boards.reverse()
        return boards

    def __len__(self) -> int:
        return len(self._nodes)

    # -- helpers --------------------------------------------------------------

    def _push(self, board: Board, moves: int, parent: int | None) -> None:
        h = board.manhattan()
        index = len(self._nodes)
        self._nodes.append(SearchNode(board, moves, parent, moves + h))
        heapq.heappush(self._frontier, (moves + h, h, index))

    def _on_path(self, index: int, board: Board) -> bool:
        # Walks the whole ancestor chain, not just the parent.
        cursor: int | None = index
        while cursor is not None:
            node = self._nodes[cursor]
            if node.board == board:
                return True
            cursor = node.parent
        return False
