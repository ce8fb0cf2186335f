"""
Player movement and door interaction.

Resolution happens in two phases. `resolve_player_move` only reads the world
and the map and returns an intent; `apply_intent` then performs the single
write that intent implies. Nothing read in the first phase is held while the
second phase mutates.
"""
from __future__ import annotations

import logging

from ..ecs.components import CharacterSize, Player, Position
from ..ecs.world import World
from ..fov.viewshed import Viewshed
from ..map.grid import GridMap
from ..map.tiles import DoorState
from .intents import DoNothing, Intent, Move, OpenDoor

logger = logging.getLogger(__name__)


def resolve_player_move(world: World, grid: GridMap, dx: int, dy: int) -> Intent:
    """
    Decide what a (dx, dy) request from the player means. Read-only.

    - destination off the map: DoNothing
    - destination is a closed or locked door: OpenDoor(index), no step is taken
    - diagonal step by a Medium-or-larger creature with both orthogonal
      neighbours unwalkable: DoNothing
    - walkable destination: Move(dx, dy)
    """
    move = Move(dx, dy)
    for entity, _player, pos in world.join(Player, Position):
        dest_x, dest_y = pos.x + dx, pos.y + dy
        if not grid.in_bounds(dest_x, dest_y):
            logger.debug("Blocked move for %d: (%d,%d) out of bounds", entity, dest_x, dest_y)
            return DoNothing()

        dest_idx = grid.xy_idx(dest_x, dest_y)
        dest = grid.tiles[dest_idx]
        if dest.blocks_passage:
            return OpenDoor(dest_idx)

        size = world.get_component(entity, CharacterSize)
        if size is None:
            size = CharacterSize.MEDIUM
        if move.is_diagonal and size.blocked_by_corners:
            if not grid.is_walkable(pos.x + dx, pos.y) and not grid.is_walkable(pos.x, pos.y + dy):
                logger.debug("Blocked diagonal move for %d at (%d,%d): corner", entity, pos.x, pos.y)
                return DoNothing()

        if dest.walkable:
            return move
        logger.debug("Blocked move for %d: (%d,%d) not walkable", entity, dest_x, dest_y)
        return DoNothing()
    return DoNothing()


def try_open_door(grid: GridMap, idx: int) -> bool:
    """Open the CLOSED door at `idx` in place. Locked and open doors are left alone.

    Returns True if the tile changed. An index outside the map is ignored.
    """
    if not grid.valid_idx(idx):
        logger.warning("Ignoring door at out-of-range index %d", idx)
        return False
    tile = grid.tiles[idx]
    if tile.door_state is DoorState.CLOSED:
        grid.tiles[idx] = tile.opened()
        logger.info("Door at %s opened", grid.idx_xy(idx))
        return True
    if tile.door_state is DoorState.LOCKED:
        # TODO: let a key or lock-pick item open locked doors
        logger.info("Door at %s is locked", grid.idx_xy(idx))
    return False


def apply_intent(world: World, grid: GridMap, intent: Intent) -> bool:
    """Apply a resolved intent. Returns True if the world or the map changed."""
    if isinstance(intent, OpenDoor):
        return try_open_door(grid, intent.index)
    if isinstance(intent, Move):
        moved = False
        for _entity, _player, pos, viewshed in world.join(Player, Position, Viewshed):
            pos.x = min(grid.width - 1, max(0, pos.x + intent.dx))
            pos.y = min(grid.height - 1, max(0, pos.y + intent.dy))
            viewshed.mark_dirty()
            moved = True
        return moved
    return False


def try_move_player(world: World, grid: GridMap, dx: int, dy: int) -> Intent:
    """Resolve and apply a player step. Returns the intent that was acted on."""
    intent = resolve_player_move(world, grid, dx, dy)
    apply_intent(world, grid, intent)
    return intent
