"""Paddle, ball and block entities.

Each entity owns a :class:`~blockbreaker.collision.Box` and exposes an
``update`` step (where it moves on its own) and a ``draw`` step that returns a
:class:`Sprite` describing what to paint.  Entities never touch pygame's
display; the renderer turns sprites into pixels.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

import pygame

from .collision import Box
from .config import (
    BALL_SIZE,
    BALL_SPEED,
    BLOCK_H,
    BLOCK_LIVES,
    BLOCK_W,
    PADDLE_BOTTOM_OFFSET,
    PADDLE_H,
    PADDLE_SPEED,
    PADDLE_W,
    ScreenSize,
)

logger = logging.getLogger(__name__)


class Colour(Enum):
    """Semantic colours; the renderer maps them to RGB through ``PALETTE``."""

    BLACK = "black"
    WHITE = "white"
    RED = "red"
    ORANGE = "orange"
    GREEN = "green"


@dataclass(frozen=True)
class Sprite:
    """What to paint for one entity: a rectangle and its colour."""

    box: Box
    colour: Colour


@dataclass(frozen=True)
class InputSnapshot:
    """Player input sampled once per frame.

    Attributes
    ----------
    left, right: bool
        Whether the movement keys are held down this frame.
    start_pressed: bool
        Whether the start key went down this frame.  Holding the key does not
        repeat it.
    """

    left: bool = False
    right: bool = False
    start_pressed: bool = False


# --------------------------------------------------------------------------------------
# Paddle
# --------------------------------------------------------------------------------------
@dataclass
class Paddle:
    box: Box

    @classmethod
    def centred(cls, screen: ScreenSize) -> "Paddle":
        """Create a paddle in the middle of the screen, near the bottom."""

        return cls(
            Box(
                screen.width * 0.5 - PADDLE_W * 0.5,
                screen.height - PADDLE_BOTTOM_OFFSET,
                PADDLE_W,
                PADDLE_H,
            )
        )

    def update(self, dt: float, inputs: InputSnapshot, screen_width: float) -> None:
        """Slide the paddle with the held keys and keep it on screen."""

        # Both keys held cancel each other out.
        if inputs.left and not inputs.right:
            x_move = -1.0
        elif inputs.right and not inputs.left:
            x_move = 1.0
        else:
            x_move = 0.0

        self.box.x += x_move * dt * PADDLE_SPEED
        self.box.x = max(0.0, min(self.box.x, screen_width - self.box.w))

    def draw(self) -> Sprite:
        return Sprite(Box(self.box.x, self.box.y, self.box.w, self.box.h), Colour.BLACK)


# --------------------------------------------------------------------------------------
# Ball
# --------------------------------------------------------------------------------------
@dataclass
class Ball:
    """A square ball travelling along a unit-length ``direction``.

    Speed is the constant ``BALL_SPEED`` applied during :meth:`update`; the
    direction vector only ever says where the ball is heading.
    """

    box: Box
    direction: pygame.Vector2

    @classmethod
    def spawn(cls, pos: pygame.Vector2, rng: random.Random) -> "Ball":
        """Create a ball at ``pos`` heading downwards at a random slant."""

        # Randomising one component breaks the unit length, so normalise afterwards.
        direction = pygame.Vector2(rng.uniform(-1.0, 1.0), 1.0).normalize()
        logger.debug("spawned ball at (%.1f, %.1f) heading %s", pos.x, pos.y, direction)
        return cls(Box(pos.x, pos.y, BALL_SIZE, BALL_SIZE), direction)

    def update(self, dt: float, screen_width: float) -> None:
        """Move the ball and turn it back from the side walls and the ceiling.

        Falling past the bottom edge is left to the round controller.
        """

        self.box.x += self.direction.x * dt * BALL_SPEED
        self.box.y += self.direction.y * dt * BALL_SPEED

        bounced = False
        # If we hit the left wall
        if self.box.x < 0.0:
            self.direction.x = 1.0
            bounced = True
        # If we hit the right wall
        if self.box.x > screen_width - self.box.w:
            self.direction.x = -1.0
            bounced = True
        # If we hit the ceiling
        if self.box.y < 0.0:
            self.direction.y = 1.0
            bounced = True

        if bounced:
            self.direction.normalize_ip()

    def draw(self) -> Sprite:
        return Sprite(Box(self.box.x, self.box.y, self.box.w, self.box.h), Colour.WHITE)


# --------------------------------------------------------------------------------------
# Blocks
# --------------------------------------------------------------------------------------
class BlockType(Enum):
    REGULAR = "regular"
    SPAWN_BALL_ON_DEATH = "spawn_ball_on_death"


@dataclass
class Block:
    """A breakable block.  It leaves the board once ``lives`` reaches zero."""

    box: Box
    lives: int = BLOCK_LIVES
    block_type: BlockType = field(default=BlockType.REGULAR)

    @classmethod
    def at(cls, pos: pygame.Vector2, block_type: BlockType = BlockType.REGULAR) -> "Block":
        return cls(Box(pos.x, pos.y, BLOCK_W, BLOCK_H), block_type=block_type)

    @property
    def alive(self) -> bool:
        return self.lives > 0

    def hit(self) -> bool:
        """Take one hit; return ``True`` if this hit destroyed the block."""

        self.lives -= 1
        return self.lives <= 0

    def draw(self) -> Sprite:
        if self.block_type is BlockType.SPAWN_BALL_ON_DEATH:
            colour = Colour.GREEN
        elif self.lives >= BLOCK_LIVES:
            colour = Colour.RED
        else:
            colour = Colour.ORANGE
        return Sprite(Box(self.box.x, self.box.y, self.box.w, self.box.h), colour)
