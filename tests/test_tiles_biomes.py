import pytest

from penumbra.errors import UnknownBiomeError
from penumbra.map import colors
from penumbra.map.biomes import BIOMES, BUILDING, FOREST, SNOWY_MOUNTAINS, VOLCANO, Biome, get_biome
from penumbra.map.tiles import OPEN_DOOR_GLYPH, DoorState, StatusEffect, Tile


def test_closed_and_locked_doors_cannot_be_walkable():
    with pytest.raises(ValueError):
        Tile(glyph="+", fg=colors.WHITE, walkable=True, door_state=DoorState.CLOSED)
    with pytest.raises(ValueError):
        Tile(glyph="+", fg=colors.WHITE, walkable=True, door_state=DoorState.LOCKED)


def test_open_door_must_be_walkable_and_transparent():
    with pytest.raises(ValueError):
        Tile(glyph="/", fg=colors.WHITE, transparent=False, door_state=DoorState.OPEN)


def test_opened_door_tile():
    door = BUILDING.get_door()
    opened = door.opened()
    assert opened.door_state is DoorState.OPEN
    assert opened.glyph == OPEN_DOOR_GLYPH
    assert opened.walkable and opened.transparent
    assert not opened.provides_cover
    # Colour is kept, original archetype is untouched
    assert opened.fg == door.fg
    assert door.door_state is DoorState.CLOSED


def test_only_closed_doors_can_be_opened():
    with pytest.raises(ValueError):
        BUILDING.get_locked_door().opened()
    with pytest.raises(ValueError):
        BUILDING.get_floor().opened()


def test_tile_properties():
    trap = FOREST.get_trap()
    assert trap.is_trap and trap.trap_dc == 15
    assert trap.status_effect is StatusEffect.ENTANGLED
    assert BUILDING.get_door().is_door and BUILDING.get_door().blocks_passage
    assert not BUILDING.get_floor().is_door
    assert not BUILDING.get_floor().blocks_passage


def test_building_capabilities():
    assert BUILDING.get_water() is None
    assert BUILDING.get_trap() is None
    assert BUILDING.get_door().door_state is DoorState.CLOSED
    assert BUILDING.get_locked_door().door_state is DoorState.LOCKED


def test_outdoor_biomes_have_no_doors():
    for biome in (FOREST, VOLCANO, SNOWY_MOUNTAINS):
        assert biome.get_door() is None
        assert biome.get_locked_door() is None
        assert biome.or_wall(biome.get_door()) == biome.get_wall()


def test_volcano_lava_burns():
    lava = VOLCANO.get_water()
    assert lava.status_effect is StatusEffect.BURNING
    assert lava.direct_damage == 10
    assert VOLCANO.get_trap() is None


def test_snow_is_slippery():
    assert SNOWY_MOUNTAINS.get_floor().slipperiness == 2
    assert SNOWY_MOUNTAINS.get_wall().slipperiness == 1
    assert SNOWY_MOUNTAINS.get_water() is None


def test_walls_block_sight_and_movement():
    for biome in BIOMES:
        wall = biome.get_wall()
        assert not wall.walkable
        assert not wall.transparent
        assert biome.get_floor().walkable


def test_biome_rejects_wrong_door_state():
    with pytest.raises(ValueError):
        Biome(name="bad", floor=BUILDING.floor, wall=BUILDING.wall, door=BUILDING.locked_door)


def test_get_biome_lookup():
    assert get_biome("forest") is FOREST
    assert get_biome("Snowy-Mountains") is SNOWY_MOUNTAINS
    with pytest.raises(UnknownBiomeError):
        get_biome("swamp")
    # Still usable as a KeyError by callers that expect mapping semantics
    with pytest.raises(KeyError):
        get_biome("swamp")


def test_greyscale_uses_luma_weights():
    grey = colors.RGB(1.0, 0.0, 0.0).to_greyscale()
    assert grey.r == pytest.approx(0.2126)
    assert grey.r == grey.g == grey.b
    assert colors.WHITE.to_greyscale().r == pytest.approx(1.0)
