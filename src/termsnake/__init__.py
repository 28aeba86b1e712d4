"""Terminal snake game."""

from .geometry import Coordinate, Direction, PlayArea, collides
from .player import NonAdjacentSegmentsError, Player
from .food import Food, spawn_location
from .game import Command, GameState, apply_command, draw_game, new_game_state, step_game

__all__ = [
    "Coordinate", "Direction", "PlayArea", "collides",
    "NonAdjacentSegmentsError", "Player",
    "Food", "spawn_location",
    "Command", "GameState", "apply_command", "draw_game", "new_game_state", "step_game",
]
