from .base import MapGenerator
from .dungeon import DungeonGenerator, exit_point, find_door_candidate
from .factory import LevelFactory
from .wilderness import WildernessGenerator

__all__ = [
    "DungeonGenerator",
    "LevelFactory",
    "MapGenerator",
    "WildernessGenerator",
    "exit_point",
    "find_door_candidate",
]
