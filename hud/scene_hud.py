import pygame

HELP_TEXT = "Drag: wall  C: clear  S: save  Bksp/RMB: cancel  Esc: quit"


class SceneHud:
    """Translucent bar along the bottom edge: wall count, then key help."""

    def __init__(self, scene, style, padding=4):
        self.scene = scene
        self.color = style["text_color"]
        self.padding = padding
        self.font = pygame.font.SysFont(None, style["font_size"])

        self.line_height = self.font.get_linesize()
        height = self.line_height * 2 + padding * 2
        self.rect = pygame.Rect(0, scene.height - height, scene.width, height)

        self.background = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        self.background.fill(style["bg_color"])

        # Static line is rendered once
        self.help_surface = self.font.render(HELP_TEXT, True, self.color)

    def status_text(self):
        count = len(self.scene.user_walls)
        text = f"Walls: {count}"
        if self.scene.dragging:
            text += "  (drawing)"
        return text

    def draw(self, screen):
        screen.blit(self.background, self.rect.topleft)

        x = self.rect.x + self.padding
        y = self.rect.y + self.padding
        status = self.font.render(self.status_text(), True, self.color)
        screen.blit(status, (x, y))
        screen.blit(self.help_surface, (x, y + self.line_height))
