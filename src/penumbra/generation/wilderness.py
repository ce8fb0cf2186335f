from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import MapSettings, WildernessSettings
from ..map.biomes import Biome
from ..map.grid import GridMap
from ..map.tiles import Tile
from ..rng import RandomSource
from .base import MapGenerator

logger = logging.getLogger(__name__)


class WildernessGenerator(MapGenerator):
    """Open-field generator: a walled border with scattered obstacles.

    Phases, each overriding the previous one where they touch the same cell:
    1. floor everywhere, walls on the four border rows/columns
    2. `wall_trials` random interior cells become a wall, a door or a locked door
    3. `water_count` random interior cells become water (if the biome has it)
    4. `trap_count` random interior cells become traps (if the biome has them)

    The reserved player start cell is never touched by any phase.
    """

    def __init__(
        self,
        map_settings: Optional[MapSettings] = None,
        settings: Optional[WildernessSettings] = None,
    ) -> None:
        self.map_settings = map_settings or MapSettings()
        self.settings = settings or WildernessSettings()

    def generate(self, biome: Biome, rng: Optional[RandomSource] = None) -> GridMap:
        rng = rng or RandomSource()
        width, height = self.map_settings.width, self.map_settings.height
        start = self.map_settings.start
        logger.debug("Generating wilderness: biome=%s size=%dx%d start=%s", biome.name, width, height, start)

        grid = GridMap.filled(width, height, biome.get_floor())
        wall = biome.get_wall()
        for x in range(width):
            grid.set_tile(x, 0, wall)
            grid.set_tile(x, height - 1, wall)
        for y in range(height):
            grid.set_tile(0, y, wall)
            grid.set_tile(width - 1, y, wall)

        placed = 0
        for _ in range(self.settings.wall_trials):
            x, y = self._random_interior(rng, width, height)
            if (x, y) == start:
                continue
            grid.set_tile(x, y, self._roll_obstacle(biome, rng))
            placed += 1

        water = biome.get_water()
        if water is not None:
            self._scatter(grid, water, self.settings.water_count, rng, start)

        trap = biome.get_trap()
        if trap is not None:
            self._scatter(grid, trap, self.settings.trap_count, rng, start)

        logger.info(
            "Wilderness generated: biome=%s %dx%d, %d obstacles placed (water=%s traps=%s)",
            biome.name,
            width,
            height,
            placed,
            water is not None,
            trap is not None,
        )
        return grid

    def _roll_obstacle(self, biome: Biome, rng: RandomSource) -> Tile:
        roll = rng.roll_dice(1, 100)
        if roll > self.settings.locked_door_threshold:
            return biome.or_wall(biome.get_locked_door())
        if roll > self.settings.door_threshold:
            return biome.or_wall(biome.get_door())
        return biome.get_wall()

    @staticmethod
    def _random_interior(rng: RandomSource, width: int, height: int) -> Tuple[int, int]:
        return rng.randint(1, width - 2), rng.randint(1, height - 2)

    def _scatter(self, grid: GridMap, tile: Tile, count: int, rng: RandomSource, start: Tuple[int, int]) -> None:
        for _ in range(count):
            x, y = self._random_interior(rng, grid.width, grid.height)
            if (x, y) == start:
                continue
            grid.set_tile(x, y, tile)
