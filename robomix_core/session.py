from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from .config import GameConfig
from .controller import Controller
from .grid import CELL_COUNT, MAX_SIZE, Coord, Grid
from .render import pixel_to_tile

IGNORED = "ignored"
MOVED = "moved"
MIXED = "mixed"
DESTROYED = "destroyed"


class InvalidStateError(ValueError):
    """Raised when a serialized board cannot be turned back into a session."""


class Session:
    """
    One game: a grid, its controller and the rules for reacting to clicks and ticks.

    A session is built once per game (or once per web request from the posted
    state) and handed to whoever draws it or feeds it input.
    """

    def __init__(self, grid: Grid, controller: Controller, config: Optional[GameConfig] = None) -> None:
        self.grid = grid
        self.controller = controller
        self.config = config or GameConfig()
        self.resets = 0

    @classmethod
    def new(cls, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> "Session":
        config = config or GameConfig()
        rng = random.Random(seed)
        grid = Grid(rng)
        controller = Controller(grid, rng, wrap_edges=config.wrap_edges)
        return cls(grid, controller, config)

    # ---------- input ----------

    def click(self, x: int, y: int) -> str:
        """Moves or mixes the controlled robot into (x, y) when legal, then respawns if needed."""
        ctl = self.controller
        if not ctl.can_move_to(x, y):
            return IGNORED
        if self.grid.is_empty(x, y):
            ctl.move_to(x, y)
            outcome = MOVED
        else:
            outcome = DESTROYED if ctl.mix_into(x, y) else MIXED
        if not ctl.has_controlled():
            self._respawn()
        return outcome

    def click_pixel(self, px: float, py: float) -> str:
        tile = pixel_to_tile(px, py)
        if tile is None:
            return IGNORED
        return self.click(*tile)

    # ---------- timer ----------

    def tick(self) -> Optional[Coord]:
        """
        Spawns an uncontrolled robot when the spawn policy is "tick".
        Also hands the player a fresh robot if none is controlled.
        """
        coord: Optional[Coord] = None
        if self.config.spawns_on_tick:
            was_full = self.grid.is_full()
            coord = self.grid.spawn_random(self.grid.rng.randint(1, MAX_SIZE))
            if was_full:
                # The reset wiped the controlled robot too.
                self.resets += 1
                self.controller.release()
        if not self.controller.has_controlled():
            self._respawn()
        return coord

    def _respawn(self) -> Coord:
        if self.grid.is_full():
            self.resets += 1
        return self.controller.spawn()

    # ---------- serialization ----------

    def moves(self) -> List[List[int]]:
        return [list(c) for c in sorted(self.controller.available_coords())]

    def to_json(self) -> Dict[str, Any]:
        return {
            "cells": list(self.grid.cells),
            "controlled": self.controller.controlled,
        }

    @classmethod
    def from_json(
        cls,
        obj: Any,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
    ) -> "Session":
        if not isinstance(obj, dict):
            raise InvalidStateError("state must be an object")
        cells = obj.get("cells")
        if not isinstance(cells, list) or len(cells) != CELL_COUNT:
            raise InvalidStateError(f"cells must be a list of {CELL_COUNT} sizes")
        sizes: List[int] = []
        for v in cells:
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= MAX_SIZE:
                raise InvalidStateError(f"cell size out of range: {v!r}")
            sizes.append(v)
        controlled = obj.get("controlled")
        if controlled is not None:
            if isinstance(controlled, bool) or not isinstance(controlled, int) or not 0 <= controlled < CELL_COUNT:
                raise InvalidStateError(f"controlled index out of range: {controlled!r}")
            if sizes[controlled] == 0:
                raise InvalidStateError(f"controlled index {controlled} holds no robot")

        config = config or GameConfig()
        rng = random.Random(seed)
        grid = Grid(rng)
        grid.cells[:] = sizes
        controller = Controller(grid, rng, wrap_edges=config.wrap_edges, spawn=False)
        controller.take(controlled)
        return cls(grid, controller, config)
