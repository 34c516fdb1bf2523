import json
import logging

import pygame

from core.emitter import Emitter
from core.segment import Segment
from data.style_stats import STYLE_STATS

logger = logging.getLogger(__name__)

# The canvas outline always occupies the first walls of a scene
BOUNDARY_COUNT = 4


class Scene:
    def __init__(self, width, height, style=None):
        self.width = width
        self.height = height
        self.style = style or STYLE_STATS

        self.walls = [
            Segment(0, 0, width, 0),
            Segment(width, 0, width, height),
            Segment(width, height, 0, height),
            Segment(0, height, 0, 0),
        ]
        self.emitter = Emitter((width / 2, height / 2))

        self.drag_start = None
        self.hits = []

    @classmethod
    def from_json(cls, path, style=None):
        """Construct a Scene from a layout file.

        Format: {"width": W, "height": H, "walls": [[x1, y1, x2, y2], ...]}
        Only user walls are stored; the boundary comes from the size.
        """
        with open(path, "r") as f:
            data = json.load(f)

        try:
            scene = cls(width=data["width"], height=data["height"], style=style)
            walls = data.get("walls", [])
            for values in walls:
                scene.walls.append(Segment.from_list(values))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed layout file '{path}': {e}") from e

        logger.info(f"Loaded {len(walls)} walls from {path}")
        return scene

    def save_json(self, path):
        data = {
            "width": self.width,
            "height": self.height,
            "walls": [wall.to_list() for wall in self.user_walls],
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved {len(data['walls'])} walls to {path}")

    @property
    def boundary(self):
        return self.walls[:BOUNDARY_COUNT]

    @property
    def user_walls(self):
        return self.walls[BOUNDARY_COUNT:]

    # =====================================================
    # TICK
    # =====================================================

    def update(self, pointer_x, pointer_y):
        """Move the emitter to the pointer and recompute the nearest hits."""
        self.emitter.update_position(pointer_x, pointer_y)
        self.hits = self.emitter.scan(self.walls)
        return self.hits

    # =====================================================
    # EDITING
    # =====================================================

    @property
    def dragging(self):
        return self.drag_start is not None

    def begin_drag(self, x, y):
        self.drag_start = pygame.Vector2(x, y)

    def end_drag(self, x, y):
        """Finish a drag and append the new wall. Returns it, or None when
        no drag was in progress."""
        if self.drag_start is None:
            return None
        wall = Segment(self.drag_start.x, self.drag_start.y, x, y)
        self.walls.append(wall)
        self.drag_start = None
        logger.debug(f"Added wall {wall}")
        return wall

    def cancel_drag(self):
        if self.drag_start is not None:
            logger.debug("Drag cancelled")
        self.drag_start = None

    def reset(self):
        """Remove every user wall, keeping the boundary."""
        removed = len(self.walls) - BOUNDARY_COUNT
        self.walls = self.walls[:BOUNDARY_COUNT]
        self.drag_start = None
        logger.info(f"Reset scene, removed {removed} walls")

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, pointer=None):
        wall_style = self.style["wall"]
        for wall in self.walls:
            wall.draw(screen, wall_style["color"], wall_style["width"])

        self.emitter.draw(screen, self.style["emitter"])

        light = self.style["light"]
        self.emitter.draw_hits(screen, self.hits, light["color"], light["width"])

        # Preview of the wall being drawn
        if self.drag_start is not None and pointer is not None:
            drag = self.style["drag"]
            pygame.draw.line(screen, drag["color"], self.drag_start, pointer, drag["width"])
