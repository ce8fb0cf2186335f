"""
Rooms-and-corridors dungeon generation.

The map starts as solid wall. Rooms are rejection-sampled, carved, and each
room is joined to the previously accepted one by an L-shaped corridor that
starts and ends just outside a door on each room's wall. Door tiles are
stamped only after every corridor is carved, so no corridor can erase a door.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config import DungeonSettings, MapSettings
from ..map.biomes import Biome
from ..map.grid import GridMap
from ..map.rect import Rect
from ..map.tiles import Tile
from ..rng import RandomSource
from .base import MapGenerator

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def find_door_candidate(room: Rect, target: Coord) -> Coord:
    """
    Pick the point on `room`'s wall where a door toward `target` should go.

    Wall points on the target's column (north/south) are candidates when the
    target x lies strictly inside the room's x-span, and points on its row
    (west/east) when the target y lies strictly inside the y-span. With no
    cardinal candidate the four corners are used. The candidate closest to the
    room's centre wins; ties keep N, S, W, E (then corner) order.
    """
    tx, ty = target
    candidates: List[Coord] = []
    if room.x1 < tx < room.x2:
        candidates.append((tx, room.y1))  # north
        candidates.append((tx, room.y2))  # south
    if room.y1 < ty < room.y2:
        candidates.append((room.x1, ty))  # west
        candidates.append((room.x2, ty))  # east
    if not candidates:
        candidates = [
            (room.x1, room.y1),
            (room.x1, room.y2),
            (room.x2, room.y1),
            (room.x2, room.y2),
        ]
    cx, cy = room.center()
    return min(candidates, key=lambda p: (p[0] - cx) ** 2 + (p[1] - cy) ** 2)


def exit_point(door: Coord, room: Rect) -> Coord:
    """The tile one step outside `door`, on the side of the room the door sits on."""
    x, y = door
    if x == room.x1:
        return (x - 1, y)
    if x == room.x2:
        return (x + 1, y)
    if y == room.y1:
        return (x, y - 1)
    return (x, y + 1)


def carve_room(grid: GridMap, room: Rect, floor: Tile) -> None:
    for x, y in room.interior():
        _carve(grid, x, y, floor)


def carve_h_corridor(grid: GridMap, x1: int, x2: int, y: int, floor: Tile) -> None:
    if x2 < x1:
        x1, x2 = x2, x1
    for x in range(x1, x2 + 1):
        _carve(grid, x, y, floor)


def carve_v_corridor(grid: GridMap, y1: int, y2: int, x: int, floor: Tile) -> None:
    if y2 < y1:
        y1, y2 = y2, y1
    for y in range(y1, y2 + 1):
        _carve(grid, x, y, floor)


def _carve(grid: GridMap, x: int, y: int, floor: Tile) -> None:
    if not grid.in_bounds(x, y):
        # Unreachable for rooms accepted by place_rooms
        logger.error("Attempt to carve out-of-bounds tile at (%d,%d)", x, y)
        return
    grid.set_tile(x, y, floor)


def connect_rooms(
    grid: GridMap,
    a: Rect,
    b: Rect,
    floor: Tile,
    rng: RandomSource,
    *,
    aim_a: Optional[Coord] = None,
    aim_b: Optional[Coord] = None,
) -> Tuple[Coord, Coord]:
    """
    Carve an L-shaped corridor between a door on `a` and a door on `b`.

    Each door is aimed at the room's own centre unless `aim_a`/`aim_b` say
    otherwise. Returns the two door coordinates; the door tiles are not written.
    """
    door_a = find_door_candidate(a, aim_a if aim_a is not None else a.center())
    door_b = find_door_candidate(b, aim_b if aim_b is not None else b.center())
    (x1, y1), (x2, y2) = exit_point(door_a, a), exit_point(door_b, b)
    if rng.coin_flip():
        # horizontal then vertical
        carve_h_corridor(grid, x1, x2, y1, floor)
        carve_v_corridor(grid, y1, y2, x2, floor)
    else:
        # vertical then horizontal
        carve_v_corridor(grid, y1, y2, x1, floor)
        carve_h_corridor(grid, x1, x2, y2, floor)
    return door_a, door_b


class DungeonGenerator(MapGenerator):
    """Rooms + corridors generator.

    Makes exactly `max_rooms` placement trials; a trial whose room overlaps an
    accepted room (edges included) is dropped, so anywhere between 0 and
    `max_rooms` rooms result. Rooms are connected in acceptance order.
    """

    def __init__(
        self,
        map_settings: Optional[MapSettings] = None,
        settings: Optional[DungeonSettings] = None,
    ) -> None:
        self.map_settings = map_settings or MapSettings()
        self.settings = settings or DungeonSettings()

    def generate(self, biome: Biome, rng: Optional[RandomSource] = None) -> GridMap:
        rng = rng or RandomSource()
        rooms = self.place_rooms(self.map_settings.width, self.map_settings.height, rng)
        return self.build(rooms, biome, rng)

    def build(self, rooms: List[Rect], biome: Biome, rng: RandomSource) -> GridMap:
        """Carve, connect and door the given rooms on a solid-wall map."""
        width, height = self.map_settings.width, self.map_settings.height
        grid = GridMap.filled(width, height, biome.get_wall())
        floor = biome.get_floor()

        for room in rooms:
            carve_room(grid, room, floor)

        doors: List[Coord] = []
        for prev, room in zip(rooms, rooms[1:]):
            doors.extend(connect_rooms(grid, prev, room, floor, rng))

        door = biome.get_door()
        if door is not None:
            for x, y in doors:
                grid.set_tile(x, y, door)

        grid.rooms = list(rooms)
        logger.info(
            "Dungeon generated: biome=%s %dx%d, %d rooms, %d door positions (doors placed=%s)",
            biome.name,
            width,
            height,
            len(rooms),
            len(doors),
            door is not None,
        )
        return grid

    def place_rooms(self, width: int, height: int, rng: RandomSource) -> List[Rect]:
        s = self.settings
        rooms: List[Rect] = []
        for _ in range(s.max_rooms):
            w = rng.randint(s.room_min_size, s.room_max_size)
            h = rng.randint(s.room_min_size, s.room_max_size)
            # Keep a two-tile margin so door exit points never land on the border
            max_x = width - w - 3
            max_y = height - h - 3
            if max_x < 2 or max_y < 2:
                logger.debug("Dropped %dx%d room trial: does not fit a %dx%d map", w, h, width, height)
                continue
            new_room = Rect.new(rng.randint(2, max_x), rng.randint(2, max_y), w, h)
            if not new_room.is_within(1, 1, width - 2, height - 2):
                continue
            if any(new_room.intersects(other) for other in rooms):
                continue
            rooms.append(new_room)
        logger.debug("Accepted %d/%d room trials", len(rooms), s.max_rooms)
        return rooms
