from __future__ import annotations

import logging
from typing import List, Set, Tuple

from ..map.grid import GridMap

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def within_radius(ax: int, ay: int, bx: int, by: int, radius: int) -> bool:
    """Euclidean disk test on integer coordinates."""
    dx, dy = ax - bx, ay - by
    return dx * dx + dy * dy <= radius * radius


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Coord]:
    """
    Bresenham's line algorithm. Returns the list of points from (x0, y0) to (x1, y1) inclusive.
    """
    points: List[Coord] = []

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return points


def is_visible_line(grid: GridMap, x0: int, y0: int, x1: int, y1: int) -> bool:
    """
    Checks line of sight between (x0, y0) and (x1, y1) on the grid.

    The origin and the target may be opaque; every tile strictly between them
    must be transparent.
    """
    if not grid.in_bounds(x0, y0) or not grid.in_bounds(x1, y1):
        return False

    line = bresenham_line(x0, y0, x1, y1)
    for x, y in line[1:-1]:
        if grid.is_opaque(grid.xy_idx(x, y)):
            return False
    return True


def compute_fov(grid: GridMap, origin: Coord, radius: int) -> Set[Coord]:
    """
    Compute the set of visible tiles from origin within a Euclidean radius using line-of-sight.

    Every in-bounds tile with dx*dx + dy*dy <= radius*radius is tested with a
    Bresenham ray from the origin. Opaque tiles are visible themselves (walls
    are seen) but hide whatever lies behind them. The origin is always visible.
    """
    ox, oy = origin
    if not grid.in_bounds(ox, oy):
        raise ValueError(f"Origin {origin} out of bounds")
    if radius < 0:
        raise ValueError("radius must be >= 0")

    visible: Set[Coord] = {(ox, oy)}

    min_x = max(0, ox - radius)
    max_x = min(grid.width - 1, ox + radius)
    min_y = max(0, oy - radius)
    max_y = min(grid.height - 1, oy + radius)

    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            if (x, y) in visible:
                continue
            if within_radius(ox, oy, x, y, radius) and is_visible_line(grid, ox, oy, x, y):
                visible.add((x, y))

    logger.debug("FOV from (%d,%d) radius %d -> %d visible tiles", ox, oy, radius, len(visible))
    return visible
