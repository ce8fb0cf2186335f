from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ..errors import ConfigError

logger = logging.getLogger(__name__)

ALGORITHMS = ("wilderness", "dungeon")


@dataclass
class MapSettings:
    width: int = 80
    height: int = 50
    player_start: Optional[Tuple[int, int]] = None

    @property
    def start(self) -> Tuple[int, int]:
        """Reserved player start cell; defaults to the map centre."""
        if self.player_start is not None:
            return (int(self.player_start[0]), int(self.player_start[1]))
        return (self.width // 2, self.height // 2)


@dataclass
class WildernessSettings:
    wall_trials: int = 400
    water_count: int = 20
    trap_count: int = 10
    locked_door_threshold: int = 90
    door_threshold: int = 80


@dataclass
class DungeonSettings:
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10


@dataclass
class Settings:
    """Level generation and visibility settings.

    Loaded from the packaged default_settings.yaml, optionally overlaid with a
    user YAML file and PENUMBRA_* environment variables:

        settings = Settings.load(Path("my_level.yaml"))
    """

    map: MapSettings = field(default_factory=MapSettings)
    wilderness: WildernessSettings = field(default_factory=WildernessSettings)
    dungeon: DungeonSettings = field(default_factory=DungeonSettings)
    view_range: int = 8
    biome: str = "building"
    algorithm: str = "wilderness"
    seed: Optional[int | str] = None

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        map_data = dict(data.get("map") or {})
        if map_data.get("player_start") is not None:
            map_data["player_start"] = tuple(map_data["player_start"])
        try:
            settings = cls(
                map=MapSettings(**map_data),
                wilderness=WildernessSettings(**(data.get("wilderness") or {})),
                dungeon=DungeonSettings(**(data.get("dungeon") or {})),
                view_range=int(data.get("view_range", 8)),
                biome=str(data.get("biome", "building")),
                algorithm=str(data.get("algorithm", "wilderness")),
                seed=data.get("seed"),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid settings structure: {e}") from e
        return settings

    @classmethod
    def load(cls, user_path: Optional[Path] = None, *, use_env: bool = True) -> "Settings":
        """Load settings from built-in defaults and an optional user override file.

        If user_path is provided it must exist. Environment overrides apply last.
        """
        try:
            text = resources.files("penumbra.config").joinpath("default_settings.yaml").read_text(encoding="utf-8")
            default_data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data: dict = {}
        if user_path is not None:
            if not user_path.exists():
                raise ConfigError(f"Settings file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.info("Loaded user settings from %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls.from_dict(merged)
        if use_env:
            settings.apply_env()
        settings.validate()
        logger.debug("Settings merged: %s", settings)
        return settings

    def apply_env(self, environ: Optional[Dict[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        if env.get("PENUMBRA_BIOME"):
            self.biome = env["PENUMBRA_BIOME"]
        if env.get("PENUMBRA_ALGORITHM"):
            self.algorithm = env["PENUMBRA_ALGORITHM"]
        seed = env.get("PENUMBRA_SEED")
        if seed:
            self.seed = int(seed) if seed.lstrip("-").isdigit() else seed

    def validate(self) -> None:
        """Raise ConfigError if these settings cannot produce a valid level."""
        m = self.map
        if m.width < 3 or m.height < 3:
            raise ConfigError(f"Map must be at least 3x3 to keep a wall border, got {m.width}x{m.height}")
        sx, sy = m.start
        if not (1 <= sx <= m.width - 2 and 1 <= sy <= m.height - 2):
            raise ConfigError(f"player_start {m.start} must lie inside the map border")
        if self.view_range < 0:
            raise ConfigError("view_range must be >= 0")
        w = self.wilderness
        if min(w.wall_trials, w.water_count, w.trap_count) < 0:
            raise ConfigError("wilderness counts must be >= 0")
        if not 0 <= w.door_threshold <= w.locked_door_threshold <= 100:
            raise ConfigError("wilderness thresholds must satisfy 0 <= door <= locked_door <= 100")
        d = self.dungeon
        if d.max_rooms < 0:
            raise ConfigError("max_rooms must be >= 0")
        if d.room_min_size < 2 or d.room_min_size > d.room_max_size:
            raise ConfigError(
                f"room sizes must satisfy 2 <= min <= max, got {d.room_min_size}..{d.room_max_size}"
            )
        if self.algorithm not in ALGORITHMS:
            raise ConfigError(f"Unknown algorithm {self.algorithm!r}; expected one of {ALGORITHMS}")

    def save(self, path: Path) -> None:
        data = dataclasses.asdict(self)
        if data["map"]["player_start"] is not None:
            data["map"]["player_start"] = list(data["map"]["player_start"])
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        logger.info("Saved settings to %s", path)


__all__ = ["ALGORITHMS", "DungeonSettings", "MapSettings", "Settings", "WildernessSettings"]
