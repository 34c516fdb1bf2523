import pygame


class Segment:
    """A finite wall between two fixed endpoints.

    Endpoints are handed out as copies so a segment never changes after
    construction. A segment with a == b is allowed; rays never hit it.
    """

    def __init__(self, x1, y1, x2, y2):
        self._a = pygame.Vector2(x1, y1)
        self._b = pygame.Vector2(x2, y2)

    @classmethod
    def from_list(cls, values):
        """Build a segment from [x1, y1, x2, y2]."""
        if len(values) != 4:
            raise ValueError(f"Wall needs 4 coordinates, got {len(values)}")
        x1, y1, x2, y2 = (float(v) for v in values)
        return cls(x1, y1, x2, y2)

    @property
    def a(self):
        return pygame.Vector2(self._a)

    @property
    def b(self):
        return pygame.Vector2(self._b)

    def is_degenerate(self):
        return self._a == self._b

    def to_list(self):
        return [self._a.x, self._a.y, self._b.x, self._b.y]

    def draw(self, screen, color, width=1):
        pygame.draw.line(screen, color, self._a, self._b, width)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self._a == other._a and self._b == other._b

    def __hash__(self):
        return hash((self._a.x, self._a.y, self._b.x, self._b.y))

    def __repr__(self):
        return (f"Segment(({self._a.x:g}, {self._a.y:g}) -> "
                f"({self._b.x:g}, {self._b.y:g}))")
