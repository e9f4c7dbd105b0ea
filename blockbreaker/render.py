"""Drawing sprites and overlay text with pygame."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

import pygame

from .config import BACKGROUND, HUD_BASELINE_Y, HUD_MARGIN_X, PALETTE, TEXT_COLOUR
from .entities import Sprite
from .errors import FontLoadError
from .game import Anchor, Overlay, TextLine

logger = logging.getLogger(__name__)


def load_font(path: Optional[str], size: int) -> pygame.font.Font:
    """Load ``path`` at ``size`` points, or pygame's bundled font when ``path`` is ``None``.

    Raises :class:`FontLoadError` if the file is missing or unreadable.
    """

    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        raise FontLoadError(f"could not load font {path!r}: {exc}") from exc


class Renderer:
    """Paints one frame onto a surface.

    Fonts are loaded eagerly, one per text size, so a bad font path fails at
    start-up rather than on the first overlay that needs it.
    """

    def __init__(self, surface: pygame.Surface, font_path: Optional[str], sizes: Iterable[int]) -> None:
        self.surface = surface
        self.font_path = font_path
        self.fonts: Dict[int, pygame.font.Font] = {size: load_font(font_path, size) for size in sizes}
        logger.debug("loaded font %s at sizes %s", font_path or "<default>", sorted(self.fonts))

    def draw(self, sprites: Iterable[Sprite], overlay: Overlay) -> None:
        self.surface.fill(PALETTE[BACKGROUND])
        for sprite in sprites:
            pygame.draw.rect(self.surface, PALETTE[sprite.colour.value], sprite.box.to_rect())
        for line in overlay:
            self.draw_text(line)

    def draw_text(self, line: TextLine) -> pygame.Rect:
        """Render one overlay line and return the rectangle it covers."""

        font = self.fonts.get(line.size)
        if font is None:
            font = self.fonts[line.size] = load_font(self.font_path, line.size)
        text_surface = font.render(line.text, True, PALETTE[TEXT_COLOUR])
        text_rect = text_surface.get_rect()

        width, height = self.surface.get_size()
        if line.anchor is Anchor.CENTRE:
            text_rect.center = (width // 2, height // 2)
        elif line.anchor is Anchor.TOP_CENTRE:
            text_rect.midbottom = (width // 2, HUD_BASELINE_Y)
        else:
            text_rect.bottomleft = (HUD_MARGIN_X, HUD_BASELINE_Y)

        self.surface.blit(text_surface, text_rect)
        return text_rect
