import logging
import math

import pygame

logger = logging.getLogger(__name__)


class Ray:
    def __init__(self, origin, angle):
        """
        origin: pygame.Vector2 owned by the caster. Stored by reference, so
                moving the owner moves the ray.
        angle:  direction in radians (0 = +x, positive turns towards +y)
        """
        self.origin = origin
        self.direction = pygame.Vector2(math.cos(angle), math.sin(angle))

    # =====================================================
    # AIM
    # =====================================================

    def point_towards(self, x, y):
        """Aim the ray at (x, y).

        Returns False and keeps the old direction when the target sits on
        the origin.
        """
        direction = pygame.Vector2(x, y) - self.origin
        if direction.length_squared() == 0:
            logger.debug(f"Look-at target ({x}, {y}) is the ray origin, keeping direction")
            return False
        self.direction = direction.normalize()
        return True

    # =====================================================
    # INTERSECTION
    # =====================================================

    def intersect(self, segment):
        """Intersect this ray with a wall segment.

        Returns the hit point as a new Vector2, or None when the lines are
        parallel, the hit falls outside the open segment (0 < t < 1), or it
        lies behind or on the origin (u <= 0).
        """
        a = segment.a
        b = segment.b
        x1, y1 = a.x, a.y
        x2, y2 = b.x, b.y

        x3, y3 = self.origin.x, self.origin.y
        x4 = x3 + self.direction.x
        y4 = y3 + self.direction.y

        den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        if den == 0:
            return None

        t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
        u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den

        if 0 < t < 1 and u > 0:
            return pygame.Vector2(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
        return None

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, color, length):
        end = self.origin + self.direction * length
        pygame.draw.line(screen, color, self.origin, end)
