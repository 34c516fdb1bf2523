import math

import pygame

from core.ray import Ray
from settings import RAY_COUNT


class Emitter:
    """Point light that casts one ray per integer degree.

    The rays are built once and share ``pos`` with the emitter, so
    update_position() moves every ray without touching them.
    """

    def __init__(self, position):
        self.pos = pygame.Vector2(position)
        self.rays = tuple(
            Ray(self.pos, math.radians(deg)) for deg in range(RAY_COUNT)
        )

    def update_position(self, x, y):
        # In place: the rays hold a reference to this vector
        self.pos.update(x, y)

    # =====================================================
    # SCAN
    # =====================================================

    def nearest_hit(self, ray, walls):
        """Closest valid hit of ``ray`` across ``walls``, or None.

        On an exact distance tie the first wall in ``walls`` wins; callers
        should not rely on which one.
        """
        record = float("inf")
        closest = None
        for wall in walls:
            pt = ray.intersect(wall)
            if pt is None:
                continue
            d = self.pos.distance_to(pt)
            if d < record:
                record = d
                closest = pt
        return closest

    def scan(self, walls):
        """Nearest hit per ray, in ray order. Misses are None."""
        return [self.nearest_hit(ray, walls) for ray in self.rays]

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, style):
        pygame.draw.circle(screen, style["color"], self.pos, style["radius"])
        for ray in self.rays:
            ray.draw(screen, style["ray_color"], style["ray_length"])

    def draw_hits(self, screen, hits, color, width=1):
        for pt in hits:
            if pt is not None:
                pygame.draw.line(screen, color, self.pos, pt, width)
