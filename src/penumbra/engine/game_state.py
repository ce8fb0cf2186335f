from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from ..config import Settings
from ..ecs.components import CharacterSize, Player, Position, Renderable
from ..ecs.world import World
from ..fov.viewshed import Viewshed
from ..fov.visibility import VisibilitySystem
from ..generation.factory import LevelFactory
from ..map import colors
from ..map.biomes import get_biome
from ..map.grid import GridMap, TileView
from ..map.tiles import DoorState
from ..rng import RandomSource
from .events import GameEvent
from .intents import DoNothing, Intent, Move, OpenDoor
from .movement import apply_intent, resolve_player_move

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "GameState"], None]


class GameState:
    """Holds the current level: its map, the entity world and the player.

    One `tick` is one full turn: resolve the intent, apply it, then run the
    visibility pass. The GridMap is handed to each step explicitly.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
        grid: Optional[GridMap] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._listeners: List[Listener] = []
        self.grid: GridMap = grid if grid is not None else LevelFactory.generate(self.settings, rng)
        self.world = World()
        self.visibility = VisibilitySystem()

        if self.grid.rooms:
            spawn = self.grid.rooms[0].center()
        else:
            spawn = self.settings.map.start
            if not self.grid.is_walkable(*spawn):
                # Roomless dungeons are solid rock; give the player a cell to stand on
                logger.warning("No walkable spawn at %s; carving it to floor", spawn)
                self.grid.set_tile(spawn[0], spawn[1], get_biome(self.settings.biome).get_floor())
        self.player = self.world.create_entity(
            Position(*spawn),
            Renderable(glyph="@", fg=colors.YELLOW),
            Player(),
            CharacterSize.MEDIUM,
            Viewshed(range=self.settings.view_range),
        )
        self.visibility.run(self.world, self.grid)
        logger.info(
            "Initialized GameState: %s map %dx%d, player at %s",
            self.settings.biome,
            self.grid.width,
            self.grid.height,
            spawn,
        )

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events (movement, doors)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # listeners must not break the turn
                logger.exception("Listener errored on %s: %s", event, ex)

    @property
    def player_pos(self) -> Tuple[int, int]:
        pos = self.world.get_component(self.player, Position)
        return (pos.x, pos.y)

    @property
    def player_viewshed(self) -> Viewshed:
        return self.world.get_component(self.player, Viewshed)

    def tick(self, intent: Intent) -> bool:
        """Run one turn for the player's intent. Returns True if anything changed."""
        if isinstance(intent, Move):
            intent = resolve_player_move(self.world, self.grid, intent.dx, intent.dy)

        door_before = None
        if isinstance(intent, OpenDoor) and self.grid.valid_idx(intent.index):
            door_before = self.grid.tiles[intent.index].door_state
        changed = apply_intent(self.world, self.grid, intent)

        if isinstance(intent, Move) and changed:
            logger.debug("Player moved to %s", self.player_pos)
            self._emit(GameEvent.PLAYER_MOVED)
        elif isinstance(intent, OpenDoor):
            if changed:
                self._emit(GameEvent.DOOR_OPENED)
            elif door_before is DoorState.LOCKED:
                self._emit(GameEvent.DOOR_LOCKED)

        self.visibility.run(self.world, self.grid)
        return changed

    def move(self, dx: int, dy: int) -> bool:
        return self.tick(Move(dx, dy))

    def wait(self) -> bool:
        return self.tick(DoNothing())

    def render_cells(self) -> Iterator[TileView]:
        return self.grid.render_cells()
