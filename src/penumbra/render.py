"""
Renderer-side helpers.

The core only tracks `explored`; deciding how explored-but-not-visible cells
look is the renderer's job. These helpers cover what a text renderer needs.
"""
from __future__ import annotations

from typing import AbstractSet, List, Optional, Tuple

from .map.colors import RGB
from .map.grid import GridMap
from .map.tiles import Tile
from .rng import RandomSource

HIDDEN_TRAP_GLYPH = "."


def to_greyscale(color: RGB) -> RGB:
    return color.to_greyscale()


def displayed_glyph(tile: Tile, rng: RandomSource) -> str:
    """Glyph to draw for a tile, concealing traps the viewer fails to spot.

    A trap is spotted when a d20 roll meets its detection difficulty.
    """
    if tile.trap_dc is None:
        return tile.glyph
    if rng.roll_dice(1, 20) < tile.trap_dc:
        return HIDDEN_TRAP_GLYPH
    return tile.glyph


def cell_colors(grid: GridMap, x: int, y: int, visible: AbstractSet[Tuple[int, int]]) -> Tuple[RGB, RGB]:
    """Foreground/background for an explored cell: full colour when visible, grey otherwise."""
    tile = grid.get_tile(x, y)
    if (x, y) in visible:
        return tile.fg, tile.bg
    return tile.fg.to_greyscale(), tile.bg


def render_ascii(
    grid: GridMap,
    visible: Optional[AbstractSet[Tuple[int, int]]] = None,
    *,
    reveal_all: bool = False,
    player: Optional[Tuple[int, int]] = None,
    player_glyph: str = "@",
    rng: Optional[RandomSource] = None,
) -> List[str]:
    """One string per map row. Unexplored cells are blank unless `reveal_all`.

    With an `rng`, each trap gets a spotting roll (see `displayed_glyph`);
    without one every tile shows its real glyph.
    """
    visible = visible or frozenset()
    rows: List[str] = []
    for y in range(grid.height):
        row: List[str] = []
        for x in range(grid.width):
            if player is not None and (x, y) == player:
                row.append(player_glyph)
            elif reveal_all or (x, y) in visible or grid.is_explored(x, y):
                tile = grid.get_tile(x, y)
                row.append(displayed_glyph(tile, rng) if rng is not None else tile.glyph)
            else:
                row.append(" ")
        rows.append("".join(row))
    return rows
