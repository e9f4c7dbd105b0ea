"""Window, frame loop and command line for the block breaker.

This is the only module that talks to the pygame display, the clock and the
keyboard.  Each frame it samples the elapsed time and the keys, hands them to
:class:`~blockbreaker.game.Game`, and paints the result with
:class:`~blockbreaker.render.Renderer`.
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Union

import pygame

from .config import FPS, HEIGHT, HUD_FONT_SIZE, MAX_FRAME_TIME, TITLE_FONT_SIZE, WIDTH, ScreenSize, Settings
from .entities import InputSnapshot
from .errors import BlockBreakerError
from .game import Game
from .render import Renderer

logger = logging.getLogger(__name__)

KeyState = Union[Sequence[bool], Mapping[int, bool]]


@dataclass
class ControlScheme:
    """Keyboard controls for the player.

    Attributes
    ----------
    left, right, start: int
        ``pygame`` key constants for each action.
    """

    left: int = pygame.K_LEFT
    right: int = pygame.K_RIGHT
    start: int = pygame.K_SPACE


def read_input(keys: KeyState, events: Iterable[pygame.event.Event],
               controls: ControlScheme) -> InputSnapshot:
    """Translate this frame's key state and events into an :class:`InputSnapshot`.

    Movement comes from the held-key state so it repeats every frame; start
    only fires on a ``KEYDOWN`` event, once per physical press.
    """

    start_pressed = any(
        event.type == pygame.KEYDOWN and event.key == controls.start for event in events
    )
    return InputSnapshot(
        left=bool(keys[controls.left]),
        right=bool(keys[controls.right]),
        start_pressed=start_pressed,
    )


def frame_seconds(elapsed_ms: int) -> float:
    """Convert ``Clock.tick`` milliseconds to a clamped ``dt`` in seconds."""

    return min(max(elapsed_ms, 0) / 1000.0, MAX_FRAME_TIME)


def parse_args(argv: Optional[List[str]] = None) -> Settings:
    parser = argparse.ArgumentParser(prog="blockbreaker", description="Single-player block breaker")
    parser.add_argument("--width", type=int, default=WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Window height")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("--font", dest="font_path", default=None, help="TTF font for overlay text")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball directions and the board")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    args = parser.parse_args(argv)

    return Settings(
        screen=ScreenSize(args.width, args.height),
        fps=args.fps,
        font_path=args.font_path,
        seed=args.seed,
        log_level=args.log_level,
    )


def run(settings: Settings, controls: Optional[ControlScheme] = None) -> None:
    """Open the window and play until it is closed or Escape is pressed."""

    controls = controls or ControlScheme()
    pygame.init()
    try:
        pygame.display.set_caption("Block Breaker")
        window = pygame.display.set_mode(settings.screen.size)
        renderer = Renderer(window, settings.font_path, (TITLE_FONT_SIZE, HUD_FONT_SIZE))
        game = Game(settings.screen, random.Random(settings.seed))
        clock = pygame.time.Clock()

        running = True
        while running:
            dt = frame_seconds(clock.tick(settings.fps))

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            game.update(dt, read_input(pygame.key.get_pressed(), events, controls))
            renderer.draw(game.sprites(), game.overlay())
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Program entry point; returns the process exit status."""

    settings = parse_args(argv)
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        settings.validate()
        logger.info("starting %dx%d at %d fps, seed %s",
                    settings.screen.width, settings.screen.height, settings.fps, settings.seed)
        run(settings)
    except BlockBreakerError as exc:
        logger.error("%s", exc)
        return 1
    return 0
