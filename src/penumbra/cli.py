from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ALGORITHMS, Settings
from .engine.game_state import GameState
from .errors import PenumbraError
from .logging_config import configure_logging
from .map.biomes import BIOMES
from .render import render_ascii
from .rng import RandomSource

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="penumbra",
        description="Generate a level and print what the player can see of it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file merged over the defaults")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default=None, help="Level generator")
    parser.add_argument("--biome", choices=[b.name for b in BIOMES], default=None, help="Tile theme")
    parser.add_argument("--seed", default=None, help="Seed for reproducible output")
    parser.add_argument("--width", type=int, default=None, help="Map width in tiles")
    parser.add_argument("--height", type=int, default=None, help="Map height in tiles")
    parser.add_argument("--reveal", action="store_true", help="Print the whole map, not just explored tiles")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.load(args.config)
    # Honor CLI over config file and env vars
    if args.algorithm:
        settings.algorithm = args.algorithm
    if args.biome:
        settings.biome = args.biome
    if args.seed is not None:
        settings.seed = int(args.seed) if args.seed.lstrip("-").isdigit() else args.seed
    if args.width is not None:
        settings.map.width = args.width
    if args.height is not None:
        settings.map.height = args.height
    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = build_settings(args)
        state = GameState(settings, rng=RandomSource(settings.seed))
    except PenumbraError as e:
        logger.error("Cannot generate level: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    lines = render_ascii(
        state.grid,
        state.player_viewshed.visible_tiles,
        reveal_all=args.reveal,
        player=state.player_pos,
        rng=RandomSource(settings.seed),
    )
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
