from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from ..errors import MapInvariantError
from .colors import RGB
from .rect import Rect
from .tiles import Tile

logger = logging.getLogger(__name__)


class TileView(NamedTuple):
    """What a renderer needs for one cell."""

    fg: RGB
    bg: RGB
    glyph: str
    explored: bool


class GridMap:
    """
    The authoritative tile buffer of a level plus the player's explored memory.

    - `tiles` is row-major: index = y * width + x.
    - `explored` is a parallel bool buffer that only ever flips False -> True.
    - `rooms` lists the dungeon rooms in acceptance order (empty for wilderness).

    Width and height are fixed for the map's lifetime. Tile slots may be
    replaced (e.g. a door being opened) but the buffer never changes length.
    """

    def __init__(
        self,
        width: int,
        height: int,
        tiles: Sequence[Tile],
        rooms: Optional[Sequence[Rect]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise MapInvariantError(f"GridMap width/height must be > 0, got {width}x{height}")
        if len(tiles) != width * height:
            raise MapInvariantError(
                f"Tile buffer length {len(tiles)} does not match {width}x{height}={width * height}"
            )
        self._width = width
        self._height = height
        self.tiles: List[Tile] = list(tiles)
        self.rooms: List[Rect] = list(rooms or [])
        self._explored: List[bool] = [False] * (width * height)
        logger.debug("GridMap created: %dx%d with %d rooms", width, height, len(self.rooms))

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile) -> "GridMap":
        if width <= 0 or height <= 0:
            raise MapInvariantError(f"GridMap width/height must be > 0, got {width}x{height}")
        return cls(width, height, [tile] * (width * height))

    @classmethod
    def from_ascii(cls, rows: Sequence[str], legend: Mapping[str, Tile]) -> "GridMap":
        """
        Build a map from ASCII rows for tests/tools. Every character must be in `legend`.
        """
        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        tiles: List[Tile] = []
        for row in rows:
            for ch in row:
                if ch not in legend:
                    raise ValueError(f"No tile in legend for character {ch!r}")
                tiles.append(legend[ch])
        return cls(width, len(rows), tiles)

    # ---- Dimensions / coordinates ---------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def valid_idx(self, idx: int) -> bool:
        return 0 <= idx < len(self.tiles)

    def xy_idx(self, x: int, y: int) -> int:
        """Convert (x, y) to a buffer index. Out-of-range coordinates are a caller bug."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for map {self._width}x{self._height}")
        return y * self._width + x

    def idx_xy(self, idx: int) -> Tuple[int, int]:
        if not self.valid_idx(idx):
            raise IndexError(f"Tile index {idx} out of range for map {self._width}x{self._height}")
        return (idx % self._width, idx // self._width)

    # ---- Tile access ----------------------------------------------------
    def get_tile(self, x: int, y: int) -> Tile:
        return self.tiles[self.xy_idx(x, y)]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self.tiles[self.xy_idx(x, y)] = tile

    def is_opaque(self, idx: int) -> bool:
        return not self.tiles[idx].transparent

    def is_transparent(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.tiles[y * self._width + x].transparent

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.tiles[y * self._width + x].walkable

    # ---- Explored memory ------------------------------------------------
    @property
    def explored(self) -> Tuple[bool, ...]:
        """Snapshot of the explored buffer."""
        return tuple(self._explored)

    def is_explored(self, x: int, y: int) -> bool:
        return self._explored[self.xy_idx(x, y)]

    def mark_explored(self, idx: int) -> None:
        self._explored[idx] = True

    def mark_all_explored(self) -> None:
        """Debug/cheat: reveal the whole map."""
        self._explored = [True] * len(self.tiles)
        logger.debug("GridMap marked all %d tiles as explored", len(self.tiles))

    def explored_count(self) -> int:
        return sum(self._explored)

    # ---- Renderer view --------------------------------------------------
    def render_cells(self) -> Iterator[TileView]:
        """Yield (fg, bg, glyph, explored) for every index in buffer order."""
        for tile, seen in zip(self.tiles, self._explored):
            yield TileView(tile.fg, tile.bg, tile.glyph, seen)

    def to_str_lines(self) -> List[str]:
        w = self._width
        return ["".join(t.glyph for t in self.tiles[y * w:(y + 1) * w]) for y in range(self._height)]

    def __repr__(self) -> str:
        return f"GridMap({self._width}x{self._height}, rooms={len(self.rooms)})"
