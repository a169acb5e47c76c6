"""Command-line interface for the sliding puzzle solver.

Usage::

    npuzzle solve puzzle04.txt              # shortest solution, plain text
    npuzzle solve puzzle04.txt --pretty     # Rich tables
    npuzzle generate -s 3 --steps 20        # print a random 3×3 board
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.solver import Solver
from npuzzle.errors import InvalidArgumentError
from npuzzle_cli.reader import read_board
from npuzzle_cli.render import render_plain, render_solution, render_table

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Optimal sliding puzzle solver.")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


# -- commands -----------------------------------------------------------------


@app.command()
def solve(
    path: Path = typer.Argument(
        ...,
        exists=True, dir_okay=False, readable=True,
        help="Board file: the dimension followed by the tiles, 0 for the blank.",
    ),
    pretty: bool = typer.Option(
        False, "--pretty",
        help="Draw each board as a table instead of plain text.",
    ),
    directions: bool = typer.Option(
        False, "--directions",
        help="Also list the tile slides of the solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Print a shortest solution for the board in PATH."""
    _configure_logging(verbose)
    try:
        board = read_board(path)
    except InvalidArgumentError as exc:
        _fail(str(exc))

    solver = Solver(board)
    boards = solver.solution()
    if boards is None:
        typer.echo("No solution possible")
        return

    typer.echo(f"Minimum number of moves = {solver.moves()}")
    if directions:
        slides = solver.directions() or []
        typer.echo("Slides: " + (", ".join(d.value for d in slides) or "none"))

    if pretty:
        for i, step in enumerate(boards):
            console.print(render_table(step, i, solver.moves()))
        return

    typer.echo()
    typer.echo(render_solution(boards))


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        min=0,
        help="Random slides away from the goal (default: 100 per cell).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible boards.",
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable",
        help="Generate a board that cannot reach the goal.",
    ),
    pretty: bool = typer.Option(
        False, "--pretty",
        help="Draw the board as a table instead of plain text.",
    ),
) -> None:
    """Print a random board."""
    board = GameGenerator.generate(size, steps=steps, seed=seed, solvable=not unsolvable)
    if pretty:
        console.print(render_table(board))
    else:
        typer.echo(render_plain(board))


if __name__ == "__main__":
    app()
