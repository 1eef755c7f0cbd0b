from __future__ import annotations

import random
from typing import List, Optional, Tuple

Coord = Tuple[int, int]  # (x, y), y grows upward on screen

SIDE = 5
CELL_COUNT = SIDE * SIDE

# Index is the robot size; index 0 is the empty tile.
ROBOT_COLORS: Tuple[str, ...] = ("black", "red", "green", "blue", "purple")
MAX_SIZE = len(ROBOT_COLORS) - 1


class GridBoundsError(IndexError):
    """Raised when a coordinate or flat index falls outside the 5x5 board."""


def to_index(x: int, y: int) -> int:
    """Maps (x, y) to a flat index. Row y=4 is stored first."""
    if not (0 <= x < SIDE and 0 <= y < SIDE):
        raise GridBoundsError(f"coordinate out of range: ({x}, {y})")
    return (SIDE - 1 - y) * SIDE + x


def from_index(i: int) -> Coord:
    """Inverse of to_index."""
    if not 0 <= i < CELL_COUNT:
        raise GridBoundsError(f"flat index out of range: {i}")
    x = i % SIDE
    y = SIDE - 1 - (i - x) // SIDE
    return x, y


class Grid:
    """The 25-cell board. Each cell holds a robot size, 0 meaning empty."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.cells: List[int] = [0] * CELL_COUNT
        self.rng = rng or random.Random()

    def reset(self) -> None:
        """Removes every robot from the board."""
        for i in range(CELL_COUNT):
            self.cells[i] = 0

    def get(self, x: int, y: int) -> int:
        return self.cells[to_index(x, y)]

    def set(self, x: int, y: int, size: int) -> None:
        # Size is not range checked; callers keep it within 0..MAX_SIZE.
        self.cells[to_index(x, y)] = size

    def get_index(self, i: int) -> int:
        from_index(i)
        return self.cells[i]

    def set_index(self, i: int, size: int) -> None:
        from_index(i)
        self.cells[i] = size

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) == 0

    def empty_cells(self) -> List[Coord]:
        """All empty coordinates in ascending flat-index order."""
        return [from_index(i) for i, size in enumerate(self.cells) if size == 0]

    def random_empty_cell(self) -> Coord:
        """
        Picks an empty cell uniformly at random.
        A full board is reset first, so this always succeeds.
        """
        candidates = self.empty_cells()
        if not candidates:
            self.reset()
            candidates = self.empty_cells()
        return candidates[self.rng.randint(0, len(candidates) - 1)]

    def spawn_random(self, size: int) -> Coord:
        coord = self.random_empty_cell()
        self.set(*coord, size)
        return coord

    def color_at(self, x: int, y: int) -> str:
        return ROBOT_COLORS[self.get(x, y)]

    def is_full(self) -> bool:
        return all(size > 0 for size in self.cells)

    def pretty(self, controlled: Optional[int] = None) -> str:
        """Generates a text view of the board, top row first. The controlled robot is bracketed."""
        lines: List[str] = []
        for y in range(SIDE - 1, -1, -1):
            row: List[str] = []
            for x in range(SIDE):
                i = to_index(x, y)
                size = self.cells[i]
                cell = str(size) if size else "."
                if i == controlled:
                    row.append(f"[{cell}]")
                else:
                    row.append(f" {cell} ")
            lines.append(f"{y} " + "".join(row))
        lines.append("  " + "".join(f" {x} " for x in range(SIDE)))
        return "\n".join(lines)
