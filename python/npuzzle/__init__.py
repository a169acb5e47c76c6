"""Optimal sliding-tile puzzle solver."""

from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.solver import Solver
from npuzzle.errors import BoardFormatError, InvalidArgumentError
from npuzzle.models.board import Board, Direction

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardFormatError",
    "Direction",
    "GameGenerator",
    "InvalidArgumentError",
    "Solver",
]
