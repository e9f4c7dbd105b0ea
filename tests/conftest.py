import os
import random

# No window is ever opened by the tests, but pygame.font and Surface still
# want a video driver to exist.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from blockbreaker.config import ScreenSize


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def screen():
    return ScreenSize(800, 600)
