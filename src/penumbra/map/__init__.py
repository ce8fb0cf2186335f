from .biomes import BIOMES, Biome, get_biome
from .colors import RGB
from .grid import GridMap, TileView
from .rect import Rect
from .tiles import DoorState, StatusEffect, Tile

__all__ = [
    "BIOMES",
    "Biome",
    "DoorState",
    "GridMap",
    "RGB",
    "Rect",
    "StatusEffect",
    "Tile",
    "TileView",
    "get_biome",
]
