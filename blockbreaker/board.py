"""Block grid construction."""

from __future__ import annotations

import logging
import random
from typing import List

import pygame

from .config import (
    BLOCK_H,
    BLOCK_W,
    BOARD_COLS,
    BOARD_PADDING,
    BOARD_ROWS,
    BOARD_TOP,
    SPAWN_BLOCK_COUNT,
)
from .entities import Block, BlockType

logger = logging.getLogger(__name__)


def init_blocks(screen_width: float, rng: random.Random) -> List[Block]:
    """Return a fresh board of blocks centred horizontally near the top.

    Blocks are laid out row by row: index ``i`` lands in column
    ``i % BOARD_COLS`` and row ``i // BOARD_COLS``.  Afterwards
    ``SPAWN_BLOCK_COUNT`` random indices are retagged as ball spawners.  The
    indices are drawn with replacement, so the same block may be picked more
    than once and the board can end up with fewer special blocks.
    """

    pitch = pygame.Vector2(BLOCK_W + BOARD_PADDING, BLOCK_H + BOARD_PADDING)
    start = pygame.Vector2((screen_width - pitch.x * BOARD_COLS) * 0.5, BOARD_TOP)

    blocks = []
    for i in range(BOARD_COLS * BOARD_ROWS):
        offset = pygame.Vector2((i % BOARD_COLS) * pitch.x, (i // BOARD_COLS) * pitch.y)
        blocks.append(Block.at(start + offset))

    picked = [rng.randrange(len(blocks)) for _ in range(SPAWN_BLOCK_COUNT)]
    for index in picked:
        blocks[index].block_type = BlockType.SPAWN_BALL_ON_DEATH

    logger.debug("built board of %d blocks, ball spawners at %s", len(blocks), picked)
    return blocks
