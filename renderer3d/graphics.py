"""
Graphics - minimal drawing surface used by the map, player and raycaster
"""

import pygame
from utils.colors import COLOR_BG


class Graphics:
    """
    Draws points, rectangles and lines onto a pygame surface

    Anything with draw_point/draw_rect/draw_line/clear can stand in for it.
    """

    def __init__(self, surface, background=COLOR_BG):
        """
        Args:
            surface: pygame.Surface to draw on
            background: Fill color used by clear()
        """
        self.surface = surface
        self.background = background

    def draw_point(self, x, y, size, color=(0, 0, 0)):
        """Draw a filled square of `size` centered on (x, y)"""
        rect = pygame.Rect(int(x - size / 2), int(y - size / 2), int(size), int(size))
        pygame.draw.rect(self.surface, color, rect)

    def draw_rect(self, x, y, w, h, color=(0, 0, 0)):
        """Draw a filled rectangle"""
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def draw_line(self, x0, y0, x1, y1, color=(0, 0, 0)):
        """Draw a 1px line"""
        pygame.draw.line(self.surface, color, (int(x0), int(y0)), (int(x1), int(y1)))

    def clear(self):
        """Reset the surface to the background color"""
        self.surface.fill(self.background)
