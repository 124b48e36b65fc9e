"""
Grid Raycaster
Top-down map on the left, first-person projection on the right
"""

import os

os.environ.setdefault('SDL_VIDEO_ALLOW_SCREENSAVER', '1')

import pygame

from game.input_handler import InputHandler
from maze.grid_map import GridMap
from entities.player import Player
from renderer3d import Raycaster, Graphics
from utils.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, NUM_RAYS,
    KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS,
    PLAYER_START_X, PLAYER_START_Y, PLAYER_START_ANGLE
)
from config import GAME_TITLE, GAME_VERSION


class RaycastDemo:
    """
    Main application class
    """
    def __init__(self, grid_map=None, player=None):
        pygame.init()

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")
        self.clock = pygame.time.Clock()

        # Held keys keep stepping, like browser key repeat
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)

        self.gfx = Graphics(self.screen)
        self.grid_map = grid_map or GridMap.default()
        self.player = player or Player(PLAYER_START_X, PLAYER_START_Y, PLAYER_START_ANGLE)
        self.raycaster = Raycaster(self.player, self.grid_map, num_rays=NUM_RAYS)
        self.input_handler = InputHandler(self.player)

        # Drawn back to front every frame
        self.drawables = [self.grid_map, self.raycaster, self.player]

    def render(self):
        """Draw one frame"""
        self.gfx.clear()
        for drawable in self.drawables:
            drawable.draw(self.gfx)
        pygame.display.flip()

    def run(self):
        """Main loop: input, render, then wait for the next tick"""
        print(f"{GAME_TITLE} v{GAME_VERSION} - {self.grid_map}")
        running = True
        while running:
            running = self.input_handler.process_events(pygame.event.get())
            if not running:
                break
            self.render()
            self.clock.tick(FPS)

        pygame.quit()
        print("Game closed.")


def main():
    RaycastDemo().run()


if __name__ == "__main__":
    main()
