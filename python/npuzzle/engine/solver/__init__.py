from npuzzle.engine.solver.search import SearchNode, SearchTree
from npuzzle.engine.solver.solver import Solver

__all__ = ["SearchNode", "SearchTree", "Solver"]
