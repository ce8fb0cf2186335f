"""
Penumbra package root.

Procedural level generation (wilderness and rooms-and-corridors dungeons) over
biome-themed tiles, plus per-entity field of view with explored-tile memory.
Rendering and input handling live outside this package; it only exposes the
data a renderer needs.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "ecs",
    "engine",
    "fov",
    "generation",
    "map",
]
