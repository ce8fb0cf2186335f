import pytest

from penumbra.config import DungeonSettings, MapSettings, Settings
from penumbra.ecs.components import CharacterSize, Player
from penumbra.engine.events import GameEvent
from penumbra.engine.game_state import GameState
from penumbra.engine.intents import OpenDoor
from penumbra.map.biomes import BUILDING
from penumbra.map.grid import GridMap
from penumbra.map.tiles import DoorState
from penumbra.rng import RandomSource

LEGEND = {
    ".": BUILDING.get_floor(),
    "#": BUILDING.get_wall(),
    "+": BUILDING.get_door(),
    "L": BUILDING.get_locked_door(),
}


def _small_state(rows):
    grid = GridMap.from_ascii(rows, LEGEND)
    settings = Settings(map=MapSettings(width=grid.width, height=grid.height))
    return GameState(settings, grid=grid)


def test_wilderness_spawn_at_reserved_start():
    state = GameState(Settings(seed=1))
    assert state.player_pos == (40, 25)
    assert state.grid.is_walkable(40, 25)


def test_dungeon_spawn_in_first_room():
    state = GameState(Settings(algorithm="dungeon", seed=7))
    assert state.grid.rooms
    assert state.player_pos == state.grid.rooms[0].center()
    assert state.grid.is_walkable(*state.player_pos)


def test_player_entity_components():
    state = GameState(Settings(seed=2))
    assert state.world.has_component(state.player, Player)
    assert state.world.get_component(state.player, CharacterSize) is CharacterSize.MEDIUM
    assert state.player_viewshed.range == 8


def test_initial_visibility_pass_explores_around_player():
    state = GameState(Settings(seed=3))
    assert not state.player_viewshed.dirty
    assert state.grid.is_explored(*state.player_pos)
    assert state.grid.explored_count() == len(state.player_viewshed.visible_tiles)


def test_same_seed_same_level():
    a = GameState(Settings(algorithm="dungeon", seed="abc"))
    b = GameState(Settings(algorithm="dungeon", seed="abc"))
    assert a.grid.tiles == b.grid.tiles
    assert a.player_pos == b.player_pos


def test_explicit_rng_wins_over_seed():
    a = GameState(Settings(seed=1), rng=RandomSource(seed=99))
    b = GameState(Settings(seed=2), rng=RandomSource(seed=99))
    assert a.grid.tiles == b.grid.tiles


def test_move_emits_and_updates_visibility():
    state = _small_state(["#######", "#.....#", "#.....#", "#.....#", "#######"])
    events = []
    state.add_listener(lambda e, s: events.append(e))
    assert state.player_pos == (3, 2)

    assert state.move(1, 0) is True
    assert state.player_pos == (4, 2)
    assert events == [GameEvent.PLAYER_MOVED]
    assert state.player_viewshed.can_see(5, 2)
    assert not state.player_viewshed.dirty


def test_blocked_move_emits_nothing():
    state = _small_state(["#####", "#...#", "##.##", "#...#", "#####"])
    events = []
    state.add_listener(lambda e, s: events.append(e))
    assert state.move(1, 0) is False
    assert state.player_pos == (2, 2)
    assert events == []


def test_door_open_then_walk_through():
    state = _small_state(["#####", "#...#", "#...#", "#.+.#", "#####"])
    events = []
    state.add_listener(lambda e, s: events.append(e))

    assert state.move(0, 1) is True
    assert state.player_pos == (2, 2)
    assert state.grid.get_tile(2, 3).door_state is DoorState.OPEN
    assert events == [GameEvent.DOOR_OPENED]

    assert state.move(0, 1) is True
    assert state.player_pos == (2, 3)
    assert events[-1] is GameEvent.PLAYER_MOVED


def test_locked_door_event():
    state = _small_state(["#####", "#...#", "#...#", "#.L.#", "#####"])
    events = []
    state.add_listener(lambda e, s: events.append(e))
    assert state.move(0, 1) is False
    assert state.grid.get_tile(2, 3).door_state is DoorState.LOCKED
    assert events == [GameEvent.DOOR_LOCKED]


def test_listener_errors_do_not_break_the_turn():
    state = _small_state(["#######", "#.....#", "#.....#", "#.....#", "#######"])
    seen = []

    def broken(event, s):
        raise RuntimeError("boom")

    state.add_listener(broken)
    state.add_listener(lambda e, s: seen.append(e))
    assert state.move(-1, 0) is True
    assert seen == [GameEvent.PLAYER_MOVED]


def test_wait_only_runs_visibility():
    state = _small_state(["#####", "#...#", "#...#", "#...#", "#####"])
    before = state.player_pos
    assert state.wait() is False
    assert state.player_pos == before


def test_render_cells_covers_every_tile():
    state = GameState(Settings(seed=4))
    cells = list(state.render_cells())
    assert len(cells) == 80 * 50
    assert sum(1 for c in cells if c.explored) == state.grid.explored_count()


def test_roomless_dungeon_spawn_is_carved_to_floor():
    settings = Settings(algorithm="dungeon", seed=1, dungeon=DungeonSettings(max_rooms=0))
    state = GameState(settings)
    assert state.grid.rooms == []
    assert state.player_pos == (40, 25)
    assert state.grid.get_tile(40, 25) == BUILDING.get_floor()
    assert state.grid.is_explored(40, 25)


@pytest.mark.parametrize("index", [-1, 5 * 5, 10**6])
def test_out_of_range_door_index_is_ignored(index):
    rows = ["#####", "#...#", "#...#", "#...#", "#####"]
    state = _small_state(rows)
    events = []
    state.add_listener(lambda e, s: events.append(e))
    assert state.tick(OpenDoor(index)) is False
    assert events == []
    assert state.grid.to_str_lines() == rows
