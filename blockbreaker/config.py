"""Tuning constants and settings records for the block breaker.

Every number that shapes how the game plays lives here so the simulation
modules never carry bare literals.  Distances are in screen units (pixels for
the pygame front end) and speeds in units per second.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import ConfigError

# --------------------------------------------------------------------------------------
# Window and frame timing
# --------------------------------------------------------------------------------------
WIDTH, HEIGHT = 800, 600
FPS = 60
# Longest frame the shell will feed to the simulation, in seconds.
MAX_FRAME_TIME = 0.1

# --------------------------------------------------------------------------------------
# Entity sizes and speeds
# --------------------------------------------------------------------------------------
PADDLE_W, PADDLE_H = 150.0, 40.0
PADDLE_SPEED = 700.0
# Distance between the paddle's top edge and the bottom of the screen.
PADDLE_BOTTOM_OFFSET = 100.0

BALL_SIZE = 50.0
BALL_SPEED = 450.0
# How far above the paddle a replacement ball appears after a life is lost.
RESPAWN_HEIGHT = 50.0

BLOCK_W, BLOCK_H = 100.0, 40.0
BLOCK_LIVES = 2

# --------------------------------------------------------------------------------------
# Board layout and scoring
# --------------------------------------------------------------------------------------
BOARD_COLS, BOARD_ROWS = 6, 5
BOARD_PADDING = 5.0
BOARD_TOP = 50.0
SPAWN_BLOCK_COUNT = 3

PLAYER_LIVES = 3
BLOCK_SCORE = 10

# --------------------------------------------------------------------------------------
# Presentation
# --------------------------------------------------------------------------------------
TITLE_FONT_SIZE = 50
HUD_FONT_SIZE = 30
HUD_MARGIN_X, HUD_BASELINE_Y = 30, 40

# Colour palette, keyed by the semantic colour names the entities use.
PALETTE = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (230, 41, 55),
    "orange": (255, 161, 0),
    "green": (0, 228, 48),
    "darkgray": (80, 80, 80),
}
BACKGROUND = "darkgray"
TEXT_COLOUR = "white"


@dataclass(frozen=True)
class ScreenSize:
    """Dimensions of the playfield handed to the simulation."""

    width: float = WIDTH
    height: float = HEIGHT

    @property
    def size(self) -> Tuple[int, int]:
        return int(self.width), int(self.height)


def board_width() -> float:
    """Total horizontal extent of the block grid, padding included."""

    return (BLOCK_W + BOARD_PADDING) * BOARD_COLS


@dataclass
class Settings:
    """Runtime options collected from the command line.

    Attributes
    ----------
    screen: ScreenSize
        Window and playfield size.
    fps: int
        Frame rate cap passed to ``pygame.time.Clock.tick``.
    font_path: str | None
        TTF file for overlay text; ``None`` uses pygame's bundled font.
    seed: int | None
        Seed for the ball/board random source, for reproducible rounds.
    log_level: str
        Name of a ``logging`` level.
    """

    screen: ScreenSize = field(default_factory=ScreenSize)
    fps: int = FPS
    font_path: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def validate(self) -> "Settings":
        """Raise :class:`ConfigError` when the settings cannot produce a playable board."""

        if self.screen.width <= 0 or self.screen.height <= 0:
            raise ConfigError(f"screen size must be positive, got {self.screen.size}")
        if self.screen.width < board_width():
            raise ConfigError(
                f"screen width {self.screen.width} is narrower than the board ({board_width()})"
            )
        if self.screen.width < PADDLE_W:
            raise ConfigError(f"screen width {self.screen.width} is narrower than the paddle")
        if self.screen.height <= PADDLE_BOTTOM_OFFSET:
            raise ConfigError(f"screen height {self.screen.height} leaves no room for the paddle")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        return self
