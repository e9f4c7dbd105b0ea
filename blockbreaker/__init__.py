"""Single-player block breaker built on pygame.

The simulation (collision, entities, board, round and game state machine)
is independent of the window; :mod:`blockbreaker.app` wires it to pygame.
"""

from .collision import Box, resolve_collision
from .entities import Ball, Block, BlockType, Colour, InputSnapshot, Paddle, Sprite
from .game import Game, GameMode
from .round import RoundOutcome, RoundState, advance_round, new_round

__all__ = [
    "Ball",
    "Block",
    "BlockType",
    "Box",
    "Colour",
    "Game",
    "GameMode",
    "InputSnapshot",
    "Paddle",
    "RoundOutcome",
    "RoundState",
    "Sprite",
    "advance_round",
    "new_round",
    "resolve_collision",
]

__version__ = "0.1.0"
