from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set, Tuple


@dataclass
class Viewshed:
    """An entity's field-of-view state.

    `dirty` means the visible set is stale and must be recomputed before it is
    trusted. New viewsheds start dirty so the first pass always computes them.
    """

    range: int = 8
    visible_tiles: Set[Tuple[int, int]] = field(default_factory=set)
    dirty: bool = True

    def __post_init__(self) -> None:
        if self.range < 0:
            raise ValueError("Viewshed range must be >= 0")

    def mark_dirty(self) -> None:
        self.dirty = True

    def can_see(self, x: int, y: int) -> bool:
        return (x, y) in self.visible_tiles
