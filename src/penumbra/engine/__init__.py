from .events import GameEvent
from .game_state import GameState
from .intents import DoNothing, Intent, Move, OpenDoor
from .movement import apply_intent, resolve_player_move, try_move_player, try_open_door

__all__ = [
    "DoNothing",
    "GameEvent",
    "GameState",
    "Intent",
    "Move",
    "OpenDoor",
    "apply_intent",
    "resolve_player_move",
    "try_move_player",
    "try_open_door",
]
