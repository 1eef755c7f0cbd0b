from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple

from .grid import ROBOT_COLORS, SIDE, Coord, Grid, to_index

TILE_WIDTH = 100
TILE_PITCH = 120  # tile width plus the gap between tiles
CANVAS_SIZE = 800

_CENTER = CANVAS_SIZE // 2
_MID = SIDE // 2

Rect = Tuple[int, int, int, int]


def color_for(size: int) -> str:
    return ROBOT_COLORS[size]


def tile_rect(x: int, y: int) -> Rect:
    """Pixel rectangle (left, top, width, height) of tile (x, y). Higher y is drawn higher up."""
    left = (x - _MID) * TILE_PITCH + _CENTER - TILE_WIDTH // 2
    top = ((SIDE - 1 - y) - _MID) * TILE_PITCH + _CENTER - TILE_WIDTH // 2
    return left, top, TILE_WIDTH, TILE_WIDTH


def pixel_to_tile(px: float, py: float) -> Optional[Coord]:
    """Inverse of tile_rect, floored to whole tiles. Returns None off the board."""
    if not (math.isfinite(px) and math.isfinite(py)):
        return None
    origin = _CENTER - TILE_WIDTH // 2 - _MID * TILE_PITCH
    x = math.floor((px - origin) / TILE_PITCH)
    row = math.floor((py - origin) / TILE_PITCH)
    y = SIDE - 1 - row
    if not (0 <= x < SIDE and 0 <= y < SIDE):
        return None
    return x, y


def build_frame(grid: Grid, controlled: Optional[int] = None) -> List[Dict[str, Any]]:
    frame: List[Dict[str, Any]] = []
    for x in range(SIDE):
        for y in range(SIDE):
            size = grid.get(x, y)
            frame.append({
                "x": x,
                "y": y,
                "size": size,
                "color": color_for(size),
                "rect": list(tile_rect(x, y)),
                "controlled": controlled is not None and to_index(x, y) == controlled,
            })
    return frame
