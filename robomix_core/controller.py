from __future__ import annotations

import random
from typing import Optional, Set, Tuple

from .grid import CELL_COUNT, MAX_SIZE, SIDE, Coord, Grid, from_index, to_index

# 3x3 neighbourhood minus the centre, as flat-index offsets.
NEIGHBOR_OFFSETS: Tuple[int, ...] = (-6, -5, -4, -1, 1, 4, 5, 6)


class IllegalMoveError(ValueError):
    """Raised when a move or mix targets a cell the controlled robot cannot reach."""


class Controller:
    """Tracks the player-controlled robot and applies its moves to the grid."""

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None, wrap_edges: bool = True, spawn: bool = True) -> None:
        self.grid = grid
        self.rng = rng or grid.rng
        # Offsets alone let x=0 and x=4 of adjacent rows touch; True keeps that.
        self.wrap_edges = wrap_edges
        self._controlled: Optional[int] = None
        if spawn:
            self.spawn()

    @property
    def controlled(self) -> Optional[int]:
        return self._controlled

    def has_controlled(self) -> bool:
        return self._controlled is not None

    def controlled_size(self) -> int:
        if self._controlled is None:
            return 0
        return self.grid.get_index(self._controlled)

    def spawn(self) -> Coord:
        """Places a robot of random size on a random empty cell and takes control of it."""
        size = self.rng.randint(1, MAX_SIZE)
        coord = self.grid.spawn_random(size)
        self._controlled = to_index(*coord)
        return coord

    def take(self, index: Optional[int]) -> None:
        """Points the controller at an existing robot, or at nothing."""
        if index is not None and self.grid.get_index(index) == 0:
            raise IllegalMoveError(f"no robot at flat index {index}")
        self._controlled = index

    def release(self) -> None:
        self._controlled = None

    def available_moves(self) -> Set[int]:
        """Flat indices the controlled robot may move or mix into."""
        if self._controlled is None:
            return set()
        here = self._controlled
        size = self.grid.get_index(here)
        here_x = here % SIDE
        moves: Set[int] = set()
        for offset in NEIGHBOR_OFFSETS:
            i = here + offset
            if not 0 <= i < CELL_COUNT:
                continue
            if not self.wrap_edges and abs(i % SIDE - here_x) > 1:
                continue
            other = self.grid.get_index(i)
            if other == 0 or other == size:
                moves.add(i)
        return moves

    def available_coords(self) -> Set[Coord]:
        return {from_index(i) for i in self.available_moves()}

    def can_move_to(self, x: int, y: int) -> bool:
        if not (0 <= x < SIDE and 0 <= y < SIDE):
            return False
        return to_index(x, y) in self.available_moves()

    def _check_target(self, x: int, y: int) -> int:
        if not self.can_move_to(x, y):
            raise IllegalMoveError(f"({x}, {y}) is not reachable from the controlled robot")
        return to_index(x, y)

    def move_to(self, x: int, y: int) -> None:
        """Moves the controlled robot onto an empty neighbour and gives up control."""
        dest = self._check_target(x, y)
        if self.grid.get_index(dest) != 0:
            raise IllegalMoveError(f"({x}, {y}) is occupied; mix instead")
        src = self._controlled
        if src is None:
            raise IllegalMoveError("no robot is controlled")
        self.grid.set_index(dest, self.grid.get_index(src))
        self.grid.set_index(src, 0)
        self._controlled = None

    def mix_into(self, x: int, y: int) -> bool:
        """
        Merges the controlled robot into an equal-sized neighbour.
        The result grows by one size. Past MAX_SIZE both robots are removed
        and control is dropped. Returns True in that case.
        """
        dest = self._check_target(x, y)
        if self.grid.get_index(dest) == 0:
            raise IllegalMoveError(f"({x}, {y}) is empty; move instead")
        src = self._controlled
        if src is None:
            raise IllegalMoveError("no robot is controlled")
        grown = self.grid.get_index(src) + 1
        self.grid.set_index(src, 0)
        if grown > MAX_SIZE:
            self.grid.set_index(dest, 0)
            self._controlled = None
            return True
        self.grid.set_index(dest, grown)
        self._controlled = dest
        return False
