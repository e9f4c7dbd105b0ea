"""Per-frame simulation of one round of play.

A round runs from leaving the menu until every block is gone or the player
runs out of lives.  All of its mutable data lives in :class:`RoundState`;
:func:`advance_round` is the only thing that changes it while the round is
being played, and the state machine replaces it wholesale on reset.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import pygame

from .board import init_blocks
from .collision import resolve_collision
from .config import BALL_SIZE, BLOCK_SCORE, PLAYER_LIVES, RESPAWN_HEIGHT, ScreenSize
from .entities import Ball, Block, BlockType, InputSnapshot, Paddle

logger = logging.getLogger(__name__)


class RoundOutcome(Enum):
    WON = "won"
    LOST = "lost"


@dataclass
class RoundState:
    """Everything a round owns: paddle, balls, blocks, score and lives."""

    paddle: Paddle
    balls: List[Ball] = field(default_factory=list)
    blocks: List[Block] = field(default_factory=list)
    score: int = 0
    lives: int = PLAYER_LIVES


def first_serve(screen: ScreenSize) -> pygame.Vector2:
    """Where the ball waits when the program starts."""

    return pygame.Vector2(screen.width * 0.5, screen.height * 0.6)


def reset_serve(screen: ScreenSize) -> pygame.Vector2:
    """Where the ball waits after a finished round sends the player back to the menu."""

    return pygame.Vector2(screen.width * 0.5 - BALL_SIZE * 0.5, screen.height * 0.5)


def new_round(
    screen: ScreenSize, rng: random.Random, serve: Optional[pygame.Vector2] = None
) -> RoundState:
    """Build the starting state: centred paddle, one ball at ``serve``, a full board.

    ``serve`` defaults to :func:`reset_serve`.
    """

    if serve is None:
        serve = reset_serve(screen)
    return RoundState(
        paddle=Paddle.centred(screen),
        balls=[Ball.spawn(serve, rng)],
        blocks=init_blocks(screen.width, rng),
    )


def advance_round(
    state: RoundState,
    dt: float,
    inputs: InputSnapshot,
    screen: ScreenSize,
    rng: random.Random,
) -> Optional[RoundOutcome]:
    """Advance ``state`` by ``dt`` seconds.

    The frame runs in a fixed order, every step using the same ``dt``:

    1. move the paddle, then every ball;
    2. bounce every ball off the paddle;
    3. bounce every ball off every block on the board, damaging it.  Destroying a
       block scores ``BLOCK_SCORE``; destroying a spawner queues a new ball at
       the hitting ball's position.  Queued balls join only after the scan;
    4. drop balls that fell past the bottom.  Losing the last one costs a
       life and serves a replacement above the paddle;
    5. drop destroyed blocks.

    Returns
    -------
    RoundOutcome | None
        ``WON`` once the board is clear, ``LOST`` once the last life is gone,
        otherwise ``None``.  Clearing the board on the frame the last life is
        lost counts as a win.
    """

    outcome = None

    state.paddle.update(dt, inputs, screen.width)
    for ball in state.balls:
        ball.update(dt, screen.width)

    spawn_later = []
    for ball in state.balls:
        resolve_collision(ball.box, ball.direction, state.paddle.box)
        for block in state.blocks:
            if not resolve_collision(ball.box, ball.direction, block.box):
                continue
            # A block broken earlier this frame still deflects but scores only once.
            if block.alive and block.hit():
                state.score += BLOCK_SCORE
                if block.block_type is BlockType.SPAWN_BALL_ON_DEATH:
                    spawn_later.append(Ball.spawn(ball.box.topleft, rng))
    state.balls.extend(spawn_later)

    balls_before = len(state.balls)
    state.balls = [ball for ball in state.balls if ball.box.y < screen.height]
    if balls_before > len(state.balls) and not state.balls:
        state.lives -= 1
        logger.debug("last ball lost, %d lives left", state.lives)
        paddle = state.paddle.box
        respawn = pygame.Vector2(
            paddle.x + paddle.w * 0.5 - BALL_SIZE * 0.5, paddle.y - RESPAWN_HEIGHT
        )
        state.balls.append(Ball.spawn(respawn, rng))
        if state.lives <= 0:
            outcome = RoundOutcome.LOST

    state.blocks = [block for block in state.blocks if block.alive]
    if not state.blocks:
        outcome = RoundOutcome.WON

    return outcome
