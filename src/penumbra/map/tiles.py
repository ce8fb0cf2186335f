from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional

from .colors import BLACK, RGB

OPEN_DOOR_GLYPH = "/"


class DoorState(Enum):
    OPEN = auto()
    CLOSED = auto()
    LOCKED = auto()


class StatusEffect(Enum):
    """Status effects a tile applies to whatever stands on it."""

    BURNING = auto()
    ENTANGLED = auto()


@dataclass(frozen=True)
class Tile:
    """Full visual and gameplay property set of one grid cell.

    Tiles are values: the grid stores them by slot and structural edits (like
    opening a door) replace the slot with a new Tile. `transparent` alone
    drives opacity queries and `walkable` alone drives movement legality.

    Door invariant, checked on construction:
    - CLOSED/LOCKED doors are never walkable
    - OPEN doors are always walkable and transparent
    """

    glyph: str
    fg: RGB
    bg: RGB = BLACK
    walkable: bool = True
    transparent: bool = True
    provides_cover: bool = False
    door_state: Optional[DoorState] = None
    status_effect: Optional[StatusEffect] = None
    trap_dc: Optional[int] = None
    direct_damage: int = 0
    slipperiness: int = 0

    def __post_init__(self) -> None:
        if self.door_state in (DoorState.CLOSED, DoorState.LOCKED) and self.walkable:
            raise ValueError(f"{self.door_state.name} door tile cannot be walkable")
        if self.door_state is DoorState.OPEN and not (self.walkable and self.transparent):
            raise ValueError("OPEN door tile must be walkable and transparent")

    @property
    def is_door(self) -> bool:
        return self.door_state is not None

    @property
    def is_trap(self) -> bool:
        return self.trap_dc is not None

    @property
    def blocks_passage(self) -> bool:
        """True for doors that must be opened before they can be entered."""
        return self.door_state in (DoorState.CLOSED, DoorState.LOCKED)

    def opened(self) -> "Tile":
        """Return the open-door version of a CLOSED door tile."""
        if self.door_state is not DoorState.CLOSED:
            raise ValueError(f"Only CLOSED doors can be opened, got {self.door_state}")
        return replace(
            self,
            door_state=DoorState.OPEN,
            glyph=OPEN_DOOR_GLYPH,
            walkable=True,
            transparent=True,
            provides_cover=False,
        )
