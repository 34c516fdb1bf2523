"""Tests for scene setup, wall editing and layout files."""

import json
import tempfile
from pathlib import Path

import pygame
import pytest

from core.scene import Scene, BOUNDARY_COUNT
from core.segment import Segment


def _boundary(width, height):
    return [
        Segment(0, 0, width, 0),
        Segment(width, 0, width, height),
        Segment(width, height, 0, height),
        Segment(0, height, 0, 0),
    ]


def test_initial_scene_is_canvas_outline():
    scene = Scene(400, 300)
    assert scene.walls == _boundary(400, 300)
    assert scene.boundary == scene.walls
    assert scene.user_walls == []
    assert scene.emitter.pos == pygame.Vector2(200, 150)


def test_every_ray_hits_from_centre():
    width, height = 400, 300
    scene = Scene(width, height)
    hits = scene.update(width / 2, height / 2)

    assert len(hits) == 360
    eps = 1e-9
    for hit in hits:
        assert hit is not None
        assert -eps <= hit.x <= width + eps
        assert -eps <= hit.y <= height + eps


def test_drag_appends_wall():
    scene = Scene(400, 400)
    scene.begin_drag(10, 20)
    assert scene.dragging

    wall = scene.end_drag(100, 120)

    assert wall == Segment(10, 20, 100, 120)
    assert scene.walls[-1] is wall
    assert len(scene.walls) == BOUNDARY_COUNT + 1
    assert not scene.dragging


def test_end_drag_without_begin_does_nothing():
    scene = Scene(400, 400)
    assert scene.end_drag(5, 5) is None
    assert len(scene.walls) == BOUNDARY_COUNT


def test_cancel_drag():
    scene = Scene(400, 400)
    scene.begin_drag(10, 20)
    scene.cancel_drag()
    assert scene.end_drag(50, 50) is None
    assert scene.user_walls == []


def test_reset_restores_boundary():
    scene = Scene(400, 400)
    original = list(scene.walls)

    for x in (50, 100, 150):
        scene.begin_drag(x, 10)
        scene.end_drag(x, 300)
    assert len(scene.walls) == BOUNDARY_COUNT + 3

    scene.reset()

    assert scene.walls == original
    assert all(a is b for a, b in zip(scene.walls, original))


def test_user_wall_blocks_light():
    scene = Scene(400, 400)
    scene.begin_drag(300, 100)
    scene.end_drag(300, 300)

    hits = scene.update(200, 200)
    assert (hits[0].x, hits[0].y) == pytest.approx((300, 200))

    scene.reset()
    hits = scene.update(200, 200)
    assert (hits[0].x, hits[0].y) == pytest.approx((400, 200))


def test_layout_save_and_load():
    scene = Scene(320, 240)
    scene.begin_drag(10, 10)
    scene.end_drag(100, 50)

    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "layout.json"
        scene.save_json(str(path))

        data = json.loads(path.read_text())
        assert data == {"width": 320, "height": 240, "walls": [[10, 10, 100, 50]]}

        loaded = Scene.from_json(str(path))

    assert (loaded.width, loaded.height) == (320, 240)
    assert loaded.walls == scene.walls


def test_layout_with_bad_wall_is_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.json"
        path.write_text(json.dumps({"width": 100, "height": 100, "walls": [[1, 2, 3]]}))
        with pytest.raises(ValueError):
            Scene.from_json(str(path))

        path.write_text(json.dumps({"walls": []}))
        with pytest.raises(ValueError):
            Scene.from_json(str(path))


def test_draw_renders_walls_light_and_drag_preview():
    scene = Scene(100, 100)
    scene.begin_drag(10, 80)

    # Nothing scanned yet, so no light lines cover the walls
    surface = pygame.Surface((101, 101))
    scene.draw(surface, pygame.Vector2(40, 80))
    assert surface.get_at((50, 0))[:3] == scene.style["wall"]["color"]
    assert surface.get_at((25, 80))[:3] == scene.style["drag"]["color"]
    assert surface.get_at((80, 50))[:3] == (0, 0, 0)

    scene.update(50, 50)
    surface = pygame.Surface((101, 101))
    scene.draw(surface)
    # Light line east of the ray stubs
    assert surface.get_at((80, 50))[:3] == scene.style["light"]["color"]


def test_square_canvas_corner_rays_miss():
    # Rays aimed exactly at a corner land on wall endpoints, which the
    # open interval 0 < t < 1 excludes
    scene = Scene(400, 400)
    hits = scene.update(200, 200)

    misses = [i for i, hit in enumerate(hits) if hit is None]
    assert misses == [45, 135, 225, 315]
