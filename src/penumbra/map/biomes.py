"""
Biome catalog.

A biome is a fixed table of tile archetypes. Generators only ask a biome for
capabilities (floor, wall and the optional water/trap/door/locked door) and
never branch on which biome they were handed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..errors import UnknownBiomeError
from . import colors
from .tiles import DoorState, StatusEffect, Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Biome:
    """Capability set used by the level generators.

    `floor` and `wall` are mandatory; an optional archetype is None when the
    biome does not have it. Use `or_wall` when an optional archetype is
    needed, so that its absence falls back to the wall.
    """

    name: str
    floor: Tile
    wall: Tile
    water: Optional[Tile] = None
    trap: Optional[Tile] = None
    door: Optional[Tile] = None
    locked_door: Optional[Tile] = None

    def __post_init__(self) -> None:
        if self.door is not None and self.door.door_state is not DoorState.CLOSED:
            raise ValueError(f"Biome {self.name!r}: door archetype must start CLOSED")
        if self.locked_door is not None and self.locked_door.door_state is not DoorState.LOCKED:
            raise ValueError(f"Biome {self.name!r}: locked_door archetype must be LOCKED")

    def get_floor(self) -> Tile:
        return self.floor

    def get_wall(self) -> Tile:
        return self.wall

    def get_water(self) -> Optional[Tile]:
        return self.water

    def get_trap(self) -> Optional[Tile]:
        return self.trap

    def get_door(self) -> Optional[Tile]:
        return self.door

    def get_locked_door(self) -> Optional[Tile]:
        return self.locked_door

    def or_wall(self, tile: Optional[Tile]) -> Tile:
        return tile if tile is not None else self.wall


# 1. Indoor: plain walls and floors, the only biome with doors
BUILDING = Biome(
    name="building",
    floor=Tile(glyph=".", fg=colors.DARK_GRAY),
    wall=Tile(glyph="#", fg=colors.WHITE, walkable=False, transparent=False, provides_cover=True),
    door=Tile(
        glyph="+",
        fg=colors.CHOCOLATE,
        walkable=False,
        transparent=False,
        provides_cover=True,
        door_state=DoorState.CLOSED,
    ),
    locked_door=Tile(
        glyph="+",
        fg=colors.RED,
        walkable=False,
        transparent=False,
        provides_cover=True,
        door_state=DoorState.LOCKED,
    ),
)

# 2. Forest: grass, trees, rivers and entangling vines
FOREST = Biome(
    name="forest",
    floor=Tile(glyph=".", fg=colors.GREEN),
    wall=Tile(glyph="♣", fg=colors.BROWN1, walkable=False, transparent=False, provides_cover=True),
    water=Tile(glyph="~", fg=colors.BLUE, bg=colors.DARK_BLUE, walkable=False, direct_damage=5),
    trap=Tile(
        glyph=";",
        fg=colors.DARK_GREEN,
        direct_damage=1,
        status_effect=StatusEffect.ENTANGLED,
        trap_dc=15,
    ),
)

# 3. Volcano: ash, obsidian and lava in place of water
VOLCANO = Biome(
    name="volcano",
    floor=Tile(glyph="▒", fg=colors.DARK_GRAY),
    wall=Tile(glyph="▲", fg=colors.PURPLE, walkable=False, transparent=False, provides_cover=True),
    water=Tile(
        glyph="~",
        fg=colors.ORANGE,
        bg=colors.RED,
        walkable=False,
        direct_damage=10,
        status_effect=StatusEffect.BURNING,
    ),
)

# 4. Snowy mountains: slippery snow and icy rock
SNOWY_MOUNTAINS = Biome(
    name="snowy_mountains",
    floor=Tile(glyph=" ", fg=colors.WHITE, bg=colors.LIGHT_GRAY, slipperiness=2),
    wall=Tile(
        glyph="▲",
        fg=colors.LIGHT_CYAN,
        walkable=False,
        transparent=False,
        provides_cover=True,
        slipperiness=1,
    ),
)

BIOMES: Tuple[Biome, ...] = (BUILDING, FOREST, VOLCANO, SNOWY_MOUNTAINS)

_BY_NAME: Dict[str, Biome] = {b.name: b for b in BIOMES}


def get_biome(name: str) -> Biome:
    """Look up a biome by name (case-insensitive, '-' and '_' interchangeable)."""
    key = name.strip().lower().replace("-", "_")
    try:
        return _BY_NAME[key]
    except KeyError:
        logger.error("Unknown biome %r; known: %s", name, ", ".join(sorted(_BY_NAME)))
        raise UnknownBiomeError(name) from None


__all__ = ["Biome", "BIOMES", "BUILDING", "FOREST", "VOLCANO", "SNOWY_MOUNTAINS", "get_biome"]
