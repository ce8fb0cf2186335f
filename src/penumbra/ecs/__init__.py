from .components import CharacterSize, Player, Position, Renderable
from .world import World

__all__ = ["CharacterSize", "Player", "Position", "Renderable", "World"]
