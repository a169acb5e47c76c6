#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve board.txt      # shortest solution
    python main.py solve board.txt --pretty
    python main.py generate -s 4        # random 4×4 board
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle_cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
