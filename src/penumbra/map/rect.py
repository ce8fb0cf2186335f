from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room rectangle with inclusive bounds (x1, y1)..(x2, y2).

    The bounds are the room's walls; the carved interior is strictly inside them.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def center(self) -> Tuple[int, int]:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Rect") -> bool:
        # Closed intervals: rooms sharing an edge count as overlapping
        return self.x1 <= other.x2 and self.x2 >= other.x1 and self.y1 <= other.y2 and self.y2 >= other.y1

    def is_within(self, min_x: int, min_y: int, max_x: int, max_y: int) -> bool:
        return self.x1 >= min_x and self.y1 >= min_y and self.x2 <= max_x and self.y2 <= max_y

    def on_perimeter(self, x: int, y: int) -> bool:
        inside = self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2
        return inside and (x in (self.x1, self.x2) or y in (self.y1, self.y2))

    def interior(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y1 + 1, self.y2):
            for x in range(self.x1 + 1, self.x2):
                yield (x, y)
