"""Axis-aligned boxes and the bounce resolver.

``pygame.Rect`` stores integers, which would throw away the fractional
movement produced by ``dt``-scaled integration, so the simulation keeps its
own float box and only converts to ``pygame.Rect`` when drawing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import pygame


@dataclass
class Box:
    """A float axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def topleft(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def intersection(self, other: "Box") -> Optional["Box"]:
        """Return the overlapping area of two boxes, or ``None`` if they only touch or miss."""

        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Box(left, top, right - left, bottom - top)

    def overlaps(self, other: "Box") -> bool:
        return self.intersection(other) is not None

    def to_rect(self) -> pygame.Rect:
        # Rounded so the drawn rectangle does not drift a pixel left of the float one.
        return pygame.Rect(round(self.x), round(self.y), round(self.w), round(self.h))


def _sign(value: float) -> float:
    return -1.0 if value < 0 else 1.0


def _place_before(edge: float, size: float) -> float:
    """Return a start coordinate whose far side (start + size) ends at or before ``edge``."""

    start = edge - size
    # (edge - size) + size can round past edge by an ulp.
    while start + size > edge:
        start = math.nextafter(start, -math.inf)
    return start


def resolve_collision(moving: Box, velocity: pygame.Vector2, static: Box) -> bool:
    """Push ``moving`` out of ``static`` and bounce ``velocity`` away from it.

    The overlap decides which face was hit: a wide, flat overlap means the
    box came in from above or below, a tall one means it came in from the
    side.  Along that axis the box is moved back out of ``static`` on the
    side facing away from ``static``'s centre, and the velocity component is
    pointed the same way.  The other axis is left untouched.

    For an ordinary partial overlap the move equals the overlap extent; when
    one box spans the other along that axis the box is snapped to the edge,
    so the two never overlap afterwards.

    Returns ``True`` when a correction was applied.  When the boxes do not
    overlap nothing is changed and ``False`` is returned.
    """

    overlap = moving.intersection(static)
    if overlap is None:
        return False

    # The sign of zero counts as positive so centred hits still resolve.
    to_static = static.center - moving.center
    sign_x, sign_y = _sign(to_static.x), _sign(to_static.y)

    if overlap.w > overlap.h:
        # Bounce on the y axis
        moving.y = _place_before(static.y, moving.h) if sign_y > 0 else static.bottom
        velocity.y = -sign_y * abs(velocity.y)
    else:
        # Bounce on the x axis
        moving.x = _place_before(static.x, moving.w) if sign_x > 0 else static.right
        velocity.x = -sign_x * abs(velocity.x)
    return True
