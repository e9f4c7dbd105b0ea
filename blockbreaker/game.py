"""Top-level game state machine.

The game is always in one of four modes.  Only ``GAME`` runs physics; the
others wait for the start key:

    MENU --start--> GAME --board cleared--> WON  --start--> MENU
                         --lives gone-----> DEAD --start--> MENU

Returning to the menu from ``WON`` or ``DEAD`` starts a brand new round.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .config import HUD_FONT_SIZE, TITLE_FONT_SIZE, ScreenSize
from .entities import InputSnapshot, Sprite
from .round import RoundOutcome, RoundState, advance_round, first_serve, new_round

logger = logging.getLogger(__name__)


class GameMode(Enum):
    MENU = "menu"
    GAME = "game"
    WON = "won"
    DEAD = "dead"


class Anchor(Enum):
    """Where on screen a line of overlay text goes."""

    CENTRE = "centre"
    TOP_CENTRE = "top_centre"
    TOP_LEFT = "top_left"


@dataclass(frozen=True)
class TextLine:
    text: str
    size: int
    anchor: Anchor


Overlay = Tuple[TextLine, ...]


_OUTCOME_MODES = {
    RoundOutcome.WON: GameMode.WON,
    RoundOutcome.LOST: GameMode.DEAD,
}


class Game:
    """Owns the current mode and the round being played.

    ``update`` is called once per frame with the frame time and the sampled
    input; ``sprites`` and ``overlay`` are then read to draw the frame.
    """

    def __init__(self, screen: ScreenSize, rng: Optional[random.Random] = None) -> None:
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.mode = GameMode.MENU
        self.round: RoundState = new_round(screen, self.rng, first_serve(screen))

    def update(self, dt: float, inputs: InputSnapshot) -> None:
        if self.mode is GameMode.MENU:
            if inputs.start_pressed:
                self._enter(GameMode.GAME)
        elif self.mode is GameMode.GAME:
            outcome = advance_round(self.round, dt, inputs, self.screen, self.rng)
            if outcome is not None:
                self._enter(_OUTCOME_MODES[outcome])
        elif inputs.start_pressed:
            self.reset()
            self._enter(GameMode.MENU)

    def reset(self) -> None:
        """Throw away the current round and set up a fresh one."""

        self.round = new_round(self.screen, self.rng)
        logger.info("round reset")

    def _enter(self, mode: GameMode) -> None:
        logger.info("mode %s -> %s (score %d, lives %d)",
                    self.mode.value, mode.value, self.round.score, self.round.lives)
        self.mode = mode

    def sprites(self) -> Iterator[Sprite]:
        """Yield what to paint, back to front: paddle, blocks, balls."""

        yield self.round.paddle.draw()
        for block in self.round.blocks:
            yield block.draw()
        for ball in self.round.balls:
            yield ball.draw()

    def overlay(self) -> Overlay:
        """Text to show on top of the playfield for the current mode."""

        if self.mode is GameMode.MENU:
            return (TextLine("Press SPACE to start", TITLE_FONT_SIZE, Anchor.CENTRE),)
        if self.mode is GameMode.GAME:
            return (
                TextLine(f"Score: {self.round.score}", HUD_FONT_SIZE, Anchor.TOP_CENTRE),
                TextLine(f"Lives: {self.round.lives}", HUD_FONT_SIZE, Anchor.TOP_LEFT),
            )
        if self.mode is GameMode.WON:
            message = f"You won with a score of {self.round.score}!"
        else:
            message = f"You lost with a score of {self.round.score}!"
        return (TextLine(message, TITLE_FONT_SIZE, Anchor.CENTRE),)
