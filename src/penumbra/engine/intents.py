from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Move:
    """Step by (dx, dy); each delta in {-1, 0, 1}, not both zero."""

    dx: int
    dy: int

    def __post_init__(self) -> None:
        if self.dx not in (-1, 0, 1) or self.dy not in (-1, 0, 1):
            raise ValueError(f"Move deltas must be in {{-1, 0, 1}}, got ({self.dx}, {self.dy})")
        if self.dx == 0 and self.dy == 0:
            raise ValueError("Move requires a non-zero delta")

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


@dataclass(frozen=True)
class OpenDoor:
    """Open the door at a tile index instead of stepping onto it."""

    index: int


@dataclass(frozen=True)
class DoNothing:
    pass


Intent = Union[Move, OpenDoor, DoNothing]

__all__ = ["DoNothing", "Intent", "Move", "OpenDoor"]
