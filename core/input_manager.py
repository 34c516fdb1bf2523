import pygame


class InputManager:
    """Per-frame keyboard polling with edge detection.

    Mouse buttons arrive as events in main.handle_mouse_event, so a click
    shorter than a frame still registers.
    """

    def __init__(self):
        self.keymap = {
            "reset": pygame.K_c,
            "save": pygame.K_s,
            "cancel": pygame.K_BACKSPACE,
            "quit": pygame.K_ESCAPE,
        }

        self.keys = pygame.key.get_pressed()
        self.prev_keys = self.keys
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    # Call once per frame before reading actions
    def update(self):
        self.prev_keys = self.keys
        self.keys = pygame.key.get_pressed()
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    def is_pressed(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False
        return bool(self.keys[key] and not self.prev_keys[key])

    def is_released(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False
        return bool(not self.keys[key] and self.prev_keys[key])

    def get_mouse_pos(self):
        return pygame.Vector2(self.mouse_pos)
