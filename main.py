import argparse
import logging
import os
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, CAPTION

from core.input_manager import InputManager
from core.scene import Scene
from data.style_stats import STYLE_STATS
from hud import SceneHud
from logging_config import setup_logging

logger = logging.getLogger(__name__)

# pygame mouse button numbers
LEFT_BUTTON = 1
RIGHT_BUTTON = 3


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D light raycasting demo")
    parser.add_argument("--width", type=int, default=WIDTH,
                        help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT,
                        help="Canvas height in pixels")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Frame rate cap")
    parser.add_argument("--layout", type=str, default=None,
                        help="JSON wall layout to load at startup; S saves to it")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, default=None)
    return parser.parse_args(argv)


def load_scene(args):
    """Scene from --layout when the file exists, otherwise an empty one."""
    if args.layout and os.path.exists(args.layout):
        try:
            return Scene.from_json(args.layout)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load layout '{args.layout}': {e}")
    return Scene(args.width, args.height)


def save_layout(scene, path):
    """Write the user walls to ``path``. Returns False if nothing was written."""
    if not path:
        logger.warning("No --layout path given, nothing saved")
        return False
    try:
        scene.save_json(path)
    except OSError:
        logger.exception(f"Failed to save layout to '{path}'")
        return False
    return True


def handle_mouse_event(scene, event):
    """Left button down/up draws a wall, right button drops the drag."""
    if event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == LEFT_BUTTON:
            scene.begin_drag(*event.pos)
        elif event.button == RIGHT_BUTTON:
            scene.cancel_drag()
    elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
        scene.end_drag(*event.pos)


def main():
    args = parse_args()
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    pygame.init()

    scene = load_scene(args)
    screen = pygame.display.set_mode((scene.width, scene.height))
    pygame.display.set_caption(CAPTION)

    clock = pygame.time.Clock()
    input_manager = InputManager()
    hud = SceneHud(scene, STYLE_STATS["hud"])

    logger.info(f"Scene {scene.width}x{scene.height}, "
                f"{len(scene.emitter.rays)} rays, {len(scene.user_walls)} walls")

    running = True

    while running:
        clock.tick(args.fps)

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                handle_mouse_event(scene, event)

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()
        mouse = input_manager.get_mouse_pos()

        if input_manager.is_pressed("quit"):
            running = False

        if input_manager.is_pressed("cancel"):
            scene.cancel_drag()

        if input_manager.is_pressed("reset"):
            scene.reset()

        if input_manager.is_pressed("save"):
            save_layout(scene, args.layout)

        # -----------------------------
        # Update
        # -----------------------------
        scene.update(mouse.x, mouse.y)

        # -----------------------------
        # Draw
        # -----------------------------
        screen.fill(BACKGROUND_COLOR)
        scene.draw(screen, mouse)
        hud.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
