from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..map.colors import BLACK, RGB


@dataclass
class Position:
    x: int
    y: int


@dataclass
class Renderable:
    glyph: str
    fg: RGB
    bg: RGB = BLACK


@dataclass(frozen=True)
class Player:
    """Tag component marking the player-controlled entity."""


class CharacterSize(IntEnum):
    """Size class of a creature, ordered smallest to largest."""

    TINY = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    HUGE = 4

    @property
    def blocked_by_corners(self) -> bool:
        """Medium and larger creatures cannot squeeze diagonally between two solid tiles."""
        return self >= CharacterSize.MEDIUM
