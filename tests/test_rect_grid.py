import pytest

from penumbra.errors import MapInvariantError
from penumbra.map.biomes import BUILDING
from penumbra.map.grid import GridMap
from penumbra.map.rect import Rect

FLOOR = BUILDING.get_floor()
WALL = BUILDING.get_wall()


def test_rect_new_and_center():
    r = Rect.new(2, 3, 6, 4)
    assert (r.x1, r.y1, r.x2, r.y2) == (2, 3, 8, 7)
    assert r.center() == (5, 5)
    assert (r.width, r.height) == (6, 4)


def test_rect_intersection_includes_shared_edges():
    a = Rect.new(0, 0, 5, 5)
    assert a.intersects(Rect.new(5, 5, 3, 3))
    assert not a.intersects(Rect.new(6, 0, 3, 3))


def test_rect_interior_and_perimeter():
    r = Rect.new(0, 0, 3, 3)
    assert set(r.interior()) == {(1, 1), (2, 1), (1, 2), (2, 2)}
    assert r.on_perimeter(0, 2) and r.on_perimeter(3, 3)
    assert not r.on_perimeter(1, 1)
    assert not r.on_perimeter(4, 0)


def test_grid_rejects_bad_dimensions():
    with pytest.raises(MapInvariantError):
        GridMap(3, 3, [FLOOR] * 8)
    with pytest.raises(MapInvariantError):
        GridMap.filled(0, 4, FLOOR)


def test_grid_indexing_is_row_major():
    grid = GridMap.filled(10, 4, FLOOR)
    assert grid.xy_idx(3, 2) == 23
    assert grid.idx_xy(23) == (3, 2)
    with pytest.raises(IndexError):
        grid.xy_idx(10, 0)
    with pytest.raises(IndexError):
        grid.xy_idx(-1, 0)


def test_grid_queries():
    grid = GridMap.from_ascii(["#.", ".."], {"#": WALL, ".": FLOOR})
    assert grid.is_opaque(0)
    assert not grid.is_opaque(1)
    assert not grid.is_walkable(0, 0)
    assert grid.is_walkable(1, 1)
    assert not grid.is_walkable(5, 5)
    assert not grid.is_transparent(-1, 0)
    assert grid.to_str_lines() == ["#.", ".."]


def test_from_ascii_validates_rows():
    with pytest.raises(ValueError):
        GridMap.from_ascii(["..", "."], {".": FLOOR})
    with pytest.raises(ValueError):
        GridMap.from_ascii(["?"], {".": FLOOR})


def test_explored_starts_empty_and_only_grows():
    grid = GridMap.filled(5, 5, FLOOR)
    assert grid.explored_count() == 0
    grid.mark_explored(grid.xy_idx(2, 2))
    grid.mark_explored(grid.xy_idx(2, 2))
    assert grid.explored_count() == 1
    assert grid.is_explored(2, 2)
    grid.mark_all_explored()
    assert all(grid.explored)


def test_render_cells_pairs_tiles_with_explored():
    grid = GridMap.from_ascii(["#."], {"#": WALL, ".": FLOOR})
    grid.mark_explored(1)
    cells = list(grid.render_cells())
    assert len(cells) == 2
    assert cells[0].glyph == "#" and not cells[0].explored
    assert cells[1].glyph == "." and cells[1].explored
    assert cells[1].fg == FLOOR.fg and cells[1].bg == FLOOR.bg


def test_tile_slots_can_be_replaced_but_length_is_fixed():
    grid = GridMap.filled(3, 3, FLOOR)
    grid.set_tile(1, 1, WALL)
    assert grid.get_tile(1, 1) is WALL
    assert len(grid.tiles) == 9
