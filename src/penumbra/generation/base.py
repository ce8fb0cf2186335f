from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..map.biomes import Biome
from ..map.grid import GridMap
from ..rng import RandomSource


class MapGenerator(ABC):
    """Abstract base for level generators.

    Generators receive the biome and their random source per call; they keep
    no random state of their own between calls.
    """

    @abstractmethod
    def generate(self, biome: Biome, rng: Optional[RandomSource] = None) -> GridMap:
        """Generate a fully populated map themed by `biome`."""
        raise NotImplementedError
