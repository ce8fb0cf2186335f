from __future__ import annotations

import logging

from ..ecs.components import Player, Position
from ..ecs.world import World
from ..map.grid import GridMap
from .fov import compute_fov
from .viewshed import Viewshed

logger = logging.getLogger(__name__)


class VisibilitySystem:
    """
    Recomputes stale viewsheds and feeds the player's view into explored memory.

    Only viewsheds flagged dirty are touched; a clean viewshed is trusted as-is,
    so the FOV cost is paid only on turns where its owner moved.

    Known limitation: opening a door near an entity that did not move leaves
    that entity's viewshed clean. Callers that need line of sight to react to
    such changes must mark the affected viewsheds dirty themselves.
    """

    def run(self, world: World, grid: GridMap) -> int:
        """Run one visibility pass. Returns the number of viewsheds recomputed."""
        recomputed = 0
        for entity, viewshed, pos in world.join(Viewshed, Position):
            if not viewshed.dirty:
                continue
            viewshed.visible_tiles.clear()
            viewshed.visible_tiles = {
                (x, y)
                for (x, y) in compute_fov(grid, (pos.x, pos.y), viewshed.range)
                if grid.in_bounds(x, y)
            }
            viewshed.dirty = False
            recomputed += 1

            if world.has_component(entity, Player):
                for x, y in viewshed.visible_tiles:
                    grid.mark_explored(grid.xy_idx(x, y))
                logger.debug(
                    "Player %d sees %d tiles; %d explored", entity, len(viewshed.visible_tiles), grid.explored_count()
                )
        return recomputed
