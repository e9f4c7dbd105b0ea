from collections import defaultdict

import pygame
import pytest

from blockbreaker.app import ControlScheme, frame_seconds, main, parse_args, read_input
from blockbreaker.config import MAX_FRAME_TIME, ScreenSize, Settings
from blockbreaker.errors import ConfigError


def keys(*held):
    state = defaultdict(bool)
    for key in held:
        state[key] = True
    return state


def test_held_keys_become_movement():
    snapshot = read_input(keys(pygame.K_LEFT), [], ControlScheme())

    assert snapshot.left
    assert not snapshot.right
    assert not snapshot.start_pressed


def test_start_fires_only_on_key_down():
    controls = ControlScheme()
    down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    up = pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE)

    assert read_input(keys(), [down], controls).start_pressed
    # Holding the key without a new press does not start again.
    assert not read_input(keys(pygame.K_SPACE), [up], controls).start_pressed


def test_custom_control_scheme():
    controls = ControlScheme(left=pygame.K_a, right=pygame.K_d, start=pygame.K_RETURN)
    snapshot = read_input(
        keys(pygame.K_d), [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)], controls
    )

    assert snapshot.right
    assert snapshot.start_pressed


def test_frame_seconds_converts_and_clamps():
    assert frame_seconds(16) == pytest.approx(0.016)
    assert frame_seconds(0) == 0
    assert frame_seconds(5000) == MAX_FRAME_TIME


def test_parse_args_defaults():
    settings = parse_args([])

    assert settings.screen == ScreenSize(800, 600)
    assert settings.fps == 60
    assert settings.font_path is None
    assert settings.seed is None
    assert settings.log_level == "WARNING"


def test_parse_args_options():
    settings = parse_args(["--width", "1024", "--height", "768", "--seed", "3", "--font", "x.ttf",
                           "--log-level", "DEBUG"])

    assert settings.screen == ScreenSize(1024, 768)
    assert settings.seed == 3
    assert settings.font_path == "x.ttf"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "settings",
    [
        Settings(screen=ScreenSize(0, 600)),
        Settings(screen=ScreenSize(500, 600)),
        Settings(screen=ScreenSize(800, 80)),
        Settings(fps=0),
    ],
)
def test_unplayable_settings_are_rejected(settings):
    with pytest.raises(ConfigError):
        settings.validate()


def test_default_settings_are_valid():
    assert Settings().validate() == Settings()


def test_main_reports_bad_settings_without_opening_a_window(caplog):
    assert main(["--width", "300"]) == 1
    assert "narrower than the board" in caplog.text
