from __future__ import annotations

import logging
from typing import Optional

from ..config import ALGORITHMS, Settings
from ..errors import ConfigError
from ..map.biomes import get_biome
from ..map.grid import GridMap
from ..rng import RandomSource
from .base import MapGenerator
from .dungeon import DungeonGenerator
from .wilderness import WildernessGenerator

logger = logging.getLogger(__name__)


class LevelFactory:
    """Factory to produce levels using the selected algorithm and biome.

    Usage:
      settings = Settings.load()
      grid = LevelFactory.generate(settings)
    """

    @staticmethod
    def build_generator(settings: Settings) -> MapGenerator:
        algo = settings.algorithm
        if algo == "dungeon":
            logger.info("LevelFactory: using DungeonGenerator")
            return DungeonGenerator(settings.map, settings.dungeon)
        if algo == "wilderness":
            logger.info("LevelFactory: using WildernessGenerator")
            return WildernessGenerator(settings.map, settings.wilderness)
        raise ConfigError(f"Unknown algorithm {algo!r}; expected one of {ALGORITHMS}")

    @staticmethod
    def generate(settings: Settings, rng: Optional[RandomSource] = None) -> GridMap:
        gen = LevelFactory.build_generator(settings)
        biome = get_biome(settings.biome)
        return gen.generate(biome, rng if rng is not None else RandomSource(settings.seed))
