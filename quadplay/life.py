"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Optional


class CellState(Enum):
    """State of one cell."""

    ALIVE = "alive"
    DEAD = "dead"


def next_state(state: CellState, neighbors: int) -> CellState:
    """State of a cell in the next generation, given its live neighbour count."""
    if state is CellState.ALIVE:
        if neighbors < 2 or neighbors > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if neighbors == 3:
        return CellState.ALIVE
    return state


_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class Life:
    """A width x height grid; cells outside the grid count as dead."""

    def __init__(
        self, width: int, height: int, alive: Iterable[tuple[int, int]] = ()
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [[CellState.DEAD] * width for _ in range(height)]
        for x, y in alive:
            if not self._inside(x, y):
                raise ValueError(f"cell ({x}, {y}) lies outside the grid")
            self._cells[y][x] = CellState.ALIVE

    @classmethod
    def random(
        cls, width: int, height: int, rng: Optional[random.Random] = None
    ) -> Life:
        """A grid where each cell is alive with probability 1/5."""
        rng = rng if rng is not None else random.Random()
        life = cls(width, height)
        life._cells = [
            [
                CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD
                for _ in range(width)
            ]
            for _ in range(height)
        ]
        return life

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _neighbors(self, x: int, y: int) -> int:
        return sum(
            1
            for dx, dy in _OFFSETS
            if self._inside(x + dx, y + dy)
            and self._cells[y + dy][x + dx] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the grid by one generation."""
        self._cells = [
            [
                next_state(state, self._neighbors(x, y))
                for x, state in enumerate(row)
            ]
            for y, row in enumerate(self._cells)
        ]

    def is_alive(self, x: int, y: int) -> bool:
        """True if the cell at (x, y) is alive."""
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) lies outside the grid")
        return self._cells[y][x] is CellState.ALIVE

    @property
    def alive_cells(self) -> frozenset[tuple[int, int]]:
        """Coordinates of every live cell."""
        return frozenset(
            (x, y)
            for y, row in enumerate(self._cells)
            for x, state in enumerate(row)
            if state is CellState.ALIVE
        )