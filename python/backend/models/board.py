"""Board model for the 8-puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import lru_cache
from typing import Iterable

SIZE = 3
CELLS = SIZE * SIZE


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of 0..8."""


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"


def _build_neighbors() -> tuple[tuple[tuple[Direction, int], ...], ...]:
    """Precompute, per blank index, the legal (direction, tile index) pairs.

    The offset points to the tile that will slide into the blank.
    UP    → tile at (br+1, bc) moves up    → blank shifts down
    DOWN  → tile at (br-1, bc) moves down  → blank shifts up
    RIGHT → tile at (br, bc-1) moves right → blank shifts left
    LEFT  → tile at (br, bc+1) moves left  → blank shifts right
    """
    offsets = (
        (Direction.UP, (1, 0)),
        (Direction.DOWN, (-1, 0)),
        (Direction.RIGHT, (0, -1)),
        (Direction.LEFT, (0, 1)),
    )
    table: list[tuple[tuple[Direction, int], ...]] = []
    for i in range(CELLS):
        br, bc = divmod(i, SIZE)
        nb: list[tuple[Direction, int]] = []
        for direction, (dr, dc) in offsets:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < SIZE and 0 <= tc < SIZE:
                nb.append((direction, tr * SIZE + tc))
        table.append(tuple(nb))
    return tuple(table)


_NEIGHBORS = _build_neighbors()


@dataclass(frozen=True)
class PuzzleState:
    """Immutable 3×3 board configuration.

    Tiles are stored as a flat row-major tuple of ints. 0 represents the
    blank. Two states are equal iff their cells are equal.
    """

    cells: tuple[int, ...]
    blank_index: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        try:
            cells = tuple(self.cells)
        except TypeError:
            raise InvalidBoardError(
                f"Board must be a sequence of tiles, got {self.cells!r}."
            ) from None
        object.__setattr__(self, "cells", cells)
        _validate(self.cells)
        object.__setattr__(self, "blank_index", self.cells.index(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> PuzzleState:
        """Create a state from a flat row-major tile sequence.

        Example::

            PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(flat)

    def _swapped(self, target: int) -> PuzzleState:
        # Derived states are permutations by construction; skip validation.
        cells = list(self.cells)
        cells[self.blank_index], cells[target] = cells[target], 0
        obj = object.__new__(PuzzleState)
        object.__setattr__(obj, "cells", tuple(cells))
        object.__setattr__(obj, "blank_index", target)
        return obj

    # -- successors -----------------------------------------------------------

    def moves(self) -> list[tuple[Direction, PuzzleState]]:
        """Return every legal move with the state it produces.

        Order is always up, down, right, left (skipping illegal ones).
        """
        return [
            (direction, self._swapped(target))
            for direction, target in _NEIGHBORS[self.blank_index]
        ]

    def successors(self) -> list[PuzzleState]:
        return [state for _, state in self.moves()]

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> list[tuple[int, ...]]:
        return [self.cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * SIZE + col]

    def is_goal(self, goal: PuzzleState | None = None) -> bool:
        return self.cells == (goal or GOAL).cells

    def is_tile_correct(
        self, row: int, col: int, goal: PuzzleState | None = None
    ) -> bool:
        """Check if the tile at (row, col) sits on its goal cell."""
        index = row * SIZE + col
        return self.cells[index] == (goal or GOAL).cells[index]

    def manhattan_distance(self, goal: PuzzleState | None = None) -> int:
        """Sum of grid distances of every tile from its goal cell.

        The blank is not counted, which keeps the estimate admissible and
        consistent under unit move cost.
        """
        positions = _positions((goal or GOAL).cells)
        distance = 0
        for index, tile in enumerate(self.cells):
            if tile == 0:
                continue
            row, col = divmod(index, SIZE)
            goal_row, goal_col = positions[tile]
            distance += abs(row - goal_row) + abs(col - goal_col)
        return distance

    def misplaced_tiles(self, goal: PuzzleState | None = None) -> int:
        target = (goal or GOAL).cells
        return sum(
            1 for tile, want in zip(self.cells, target) if tile and tile != want
        )

    def is_solvable(self, goal: PuzzleState | None = None) -> bool:
        """Return True if *goal* is reachable from this state.

        On an odd-width board every move preserves inversion parity, so the
        two states must agree on it.
        """
        return _inversions(self.cells) % 2 == _inversions((goal or GOAL).cells) % 2

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows)


# -- helpers ------------------------------------------------------------------


def _validate(cells: tuple[int, ...]) -> None:
    if len(cells) != CELLS:
        raise InvalidBoardError(
            f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, got {len(cells)}."
        )
    for v in cells:
        if not isinstance(v, int) or isinstance(v, bool):
            raise InvalidBoardError(f"Tile {v!r} is not an integer.")
        if not 0 <= v < CELLS:
            raise InvalidBoardError(f"Tile {v} is outside the range 0-{CELLS - 1}.")
    if len(set(cells)) != CELLS:
        dupes = sorted({v for v in cells if cells.count(v) > 1})
        missing = sorted(set(range(CELLS)) - set(cells))
        raise InvalidBoardError(
            f"Tiles must be a permutation of 0-{CELLS - 1}: "
            f"duplicated {dupes}, missing {missing}."
        )


@lru_cache(maxsize=None)
def _positions(cells: tuple[int, ...]) -> dict[int, tuple[int, int]]:
    return {tile: divmod(index, SIZE) for index, tile in enumerate(cells)}


def _inversions(cells: tuple[int, ...]) -> int:
    flat = [v for v in cells if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


GOAL = PuzzleState((1, 2, 3, 4, 5, 6, 7, 8, 0))
