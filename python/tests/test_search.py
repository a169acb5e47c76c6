"""Search tree tests — frontier order, pruning and path reconstruction."""

from __future__ import annotations

from npuzzle.engine.solver import SearchTree
from npuzzle.models.board import Board

ONE_MOVE = Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
GOAL = Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


def test_root_is_the_only_node() -> None:
    tree = SearchTree(ONE_MOVE)

    root = tree.peek()
    assert root.board == ONE_MOVE
    assert root.moves == 0
    assert root.parent is None
    assert root.priority == 1
    assert len(tree) == 1
    assert not tree.at_goal()


def test_step_orders_frontier_by_priority() -> None:
    tree = SearchTree(ONE_MOVE)
    tree.step()

    assert tree.expanded == 1
    assert len(tree) == 4
    assert tree.at_goal()
    best = tree.peek()
    assert best.moves == 1
    assert best.priority == 1
    assert tree.path_to_min() == [ONE_MOVE, GOAL]


def test_ancestors_are_not_regenerated() -> None:
    tree = SearchTree(ONE_MOVE)
    tree.step()
    tree.step()  # expands the goal; sliding back to ONE_MOVE is pruned

    assert len(tree) == 5
    boards = [tree.path(i)[-1] for i in range(len(tree))]
    assert boards.count(ONE_MOVE) == 1


def test_whole_ancestor_chain_is_pruned() -> None:
    # 2×2 boards lie on 12-cycles: with every ancestor pruned, each of the
    # two directions stops after 11 slides and the tree runs dry.
    tree = SearchTree(Board.from_grid([[2, 1], [3, 0]]))
    for _ in range(100):
        if tree.exhausted:
            break
        tree.step()

    assert tree.exhausted
    assert len(tree) == 23
    assert tree.expanded == 23
    assert not tree.at_goal()
    for i in range(len(tree)):
        path = tree.path(i)
        assert len(set(path)) == len(path)


def test_step_on_exhausted_tree_is_a_no_op() -> None:
    tree = SearchTree(Board.from_grid([[0]]))
    tree.step()
    assert tree.exhausted

    tree.step()
    assert tree.expanded == 1
