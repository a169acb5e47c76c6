"""Puzzle generator tests."""

from __future__ import annotations

import random

import pytest

from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.solver import Solver
from npuzzle.errors import InvalidArgumentError
from npuzzle.models.board import Board


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_solved_is_goal(size: int) -> None:
    board = GameGenerator.solved(size)
    assert board.is_goal()
    assert board.blank_pos == (size - 1, size - 1)


def test_solved_rejects_bad_size() -> None:
    with pytest.raises(InvalidArgumentError):
        GameGenerator.solved(0)


def test_scramble_without_steps_keeps_board() -> None:
    board = GameGenerator.solved(3)
    assert GameGenerator.scramble(board, 0, random.Random(1)) == board


@pytest.mark.parametrize("seed", range(5))
def test_scramble_stays_within_reach(seed: int) -> None:
    steps = 8
    board = GameGenerator.scramble(GameGenerator.solved(3), steps, random.Random(seed))

    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() <= steps
    assert board.manhattan() <= steps


def test_scramble_does_not_mutate_input() -> None:
    board = GameGenerator.solved(3)
    GameGenerator.scramble(board, 20, random.Random(3))
    assert board == Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


def test_generate_is_reproducible() -> None:
    a = GameGenerator.generate(4, steps=30, seed=42)
    b = GameGenerator.generate(4, steps=30, seed=42)
    assert a == b
    assert a.dimension == 4


def test_generate_default_steps() -> None:
    board = GameGenerator.generate(3, seed=0)
    assert board.dimension == 3


@pytest.mark.parametrize("seed", range(3))
def test_generate_unsolvable(seed: int) -> None:
    board = GameGenerator.generate(3, steps=6, seed=seed, solvable=False)
    assert not Solver(board).is_solvable()
