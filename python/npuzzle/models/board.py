"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.errors import InvalidArgumentError


class Direction(StrEnum):
    """Direction a *tile* slides into the adjacent blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP    → tile at (br+1, bc) moves up
# DOWN  → tile at (br-1, bc) moves down
# LEFT  → tile at (br, bc+1) moves left
# RIGHT → tile at (br, bc-1) moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank swaps left, up, down, right.
_NEIGHBOR_ORDER = (Direction.RIGHT, Direction.DOWN, Direction.UP, Direction.LEFT)


@dataclass(frozen=True)
class Board:
    """Immutable N×N arrangement of tiles; 0 is the blank.

    Every transformation returns a new board.  Equality and hashing are by
    value over ``size`` and ``tiles``.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        tiles = _validate(self.size, self.tiles)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank_pos", _find_blank(tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]] | None) -> Board:
        """Create a board from an N×N grid, copying it.

        Example::

            Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        if grid is None:
            raise InvalidArgumentError("Can't build a board from None.")
        try:
            size = len(grid)
        except TypeError as exc:
            raise InvalidArgumentError(f"Can't build a board from {grid!r}.") from exc
        return cls(size=size, tiles=grid)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidArgumentError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        rows = [flat[r * size : (r + 1) * size] for r in range(size)]
        return cls(size=size, tiles=rows)

    @classmethod
    def _derive(
        cls, tiles: tuple[tuple[int, ...], ...], blank_pos: tuple[int, int]
    ) -> Board:
        # Swapping two cells of a valid board keeps it valid.
        obj = object.__new__(cls)
        object.__setattr__(obj, "size", len(tiles))
        object.__setattr__(obj, "tiles", tiles)
        object.__setattr__(obj, "blank_pos", blank_pos)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def to_grid(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return val == row * self.size + col + 1

    def hamming(self) -> int:
        """Number of tiles (blank excluded) out of their goal position."""
        n = self.size
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, val in enumerate(row)
            if val != 0 and val != r * n + c + 1
        )

    def manhattan(self) -> int:
        """Sum of row and column distances of every tile from its goal."""
        n = self.size
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, n)
                total += abs(r - goal_r) + abs(c - goal_c)
        return total

    def is_goal(self) -> bool:
        return self.hamming() == 0

    # -- moves ----------------------------------------------------------------

    def slide(self, direction: Direction) -> Board | None:
        """Return the board after sliding a tile in *direction*.

        ``None`` if no tile sits on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._derive(self._swap(self.tiles, (br, bc), (tr, tc)), (tr, tc))

    def successors(self) -> Iterator[tuple[Direction, Board]]:
        """Yield ``(direction, board)`` for every legal slide."""
        for direction in _NEIGHBOR_ORDER:
            board = self.slide(direction)
            if board is not None:
                yield direction, board

    def neighbors(self) -> Iterator[Board]:
        """Yield every board one slide away.

        The blank is swapped left, up, down, then right, skipping the sides
        that fall off the grid.
        """
        for _, board in self.successors():
            yield board

    def twin(self) -> Board:
        """Return this board with two adjacent non-blank tiles exchanged.

        The first row whose first two cells are both tiles gets them swapped.
        A 1×1 board has no such pair and is returned unchanged.
        """
        if self.size < 2:
            return self
        for r, row in enumerate(self.tiles):
            if row[0] != 0 and row[1] != 0:
                tiles = self._swap(self.tiles, (r, 0), (r, 1))
                return self._derive(tiles, self.blank_pos)
        raise AssertionError("a board with one blank always has a twin")

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(
        tiles: tuple[tuple[int, ...], ...],
        a: tuple[int, int],
        b: tuple[int, int],
    ) -> tuple[tuple[int, ...], ...]:
        grid = [list(row) for row in tiles]
        (ar, ac), (br, bc) = a, b
        grid[ar][ac], grid[br][bc] = grid[br][bc], grid[ar][ac]
        return tuple(tuple(row) for row in grid)

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append(" ".join(f"{val:2d}" for val in row))
        return "\n".join(lines)


# -- validation ---------------------------------------------------------------


def _validate(size: int, tiles: object) -> tuple[tuple[int, ...], ...]:
    if tiles is None:
        raise InvalidArgumentError("Can't build a board from None.")
    if not isinstance(size, int) or size < 1:
        raise InvalidArgumentError(f"Board size must be a positive integer, got {size!r}.")
    try:
        rows = [tuple(row) for row in tiles]  # type: ignore[attr-defined]
    except TypeError as exc:
        raise InvalidArgumentError(f"Can't build a board from {tiles!r}.") from exc
    if len(rows) != size:
        raise InvalidArgumentError(
            f"Expected {size} rows for a {size}×{size} board, got {len(rows)}."
        )

    limit = size * size
    seen: set[int] = set()
    for r, row in enumerate(rows):
        if len(row) != size:
            raise InvalidArgumentError(
                f"Can't build a non-square board: row {r} has {len(row)} cells, "
                f"expected {size}."
            )
        for val in row:
            if isinstance(val, bool) or not isinstance(val, int):
                raise InvalidArgumentError(f"Tile {val!r} is not an integer.")
            if val < 0 or val >= limit:
                raise InvalidArgumentError(
                    f"Tile {val} is out of range for a {size}×{size} board "
                    f"(expected 0..{limit - 1})."
                )
            if val in seen:
                if val == 0:
                    raise InvalidArgumentError("More than one blank cell.")
                raise InvalidArgumentError(f"Tile {val} appears more than once.")
            seen.add(val)
    # N² distinct values in 0..N²-1 always include the blank.
    return tuple(rows)


def _find_blank(tiles: tuple[tuple[int, ...], ...]) -> tuple[int, int]:
    for r, row in enumerate(tiles):
        for c, val in enumerate(row):
            if val == 0:
                return (r, c)
    raise InvalidArgumentError("Board has no blank cell.")
