from .game import GameLoop, Phase
from .game_state import GameState
from .state import Command, Direction, Point, Snapshot

__all__ = ["GameLoop", "Phase", "GameState", "Command", "Direction", "Point", "Snapshot"]
