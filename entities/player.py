"""
Player - observer position and heading on the grid
"""

import math
from utils.constants import (
    STEP_LENGTH, TURN_ANGLE, PLAYER_MARKER_SIZE, PLAYER_HEADING_LENGTH
)
from utils.colors import COLOR_PLAYER, COLOR_PLAYER_HEADING
from utils.helpers import normalize_angle


class Player:
    """
    Observer with a world position and a heading

    The heading step vector (heading_dx, heading_dy) is derived from the
    heading and only ever written together with it, by set_heading().
    """

    def __init__(self, x, y, angle=0.0, step_length=STEP_LENGTH, turn_angle=TURN_ANGLE):
        """
        Initialize player

        Args:
            x, y: Starting world coordinates
            angle: Starting heading in radians, clockwise from +x (pi = west)
            step_length: World units per move step
            turn_angle: Radians per turn step
        """
        self.x = float(x)
        self.y = float(y)
        self.step_length = step_length
        self.turn_angle = turn_angle

        self._heading = 0.0
        self._heading_dx = 0.0
        self._heading_dy = 0.0
        self.set_heading(angle)

    @property
    def heading(self):
        """Heading in radians, always in [0, 2pi)"""
        return self._heading

    @property
    def heading_dx(self):
        return self._heading_dx

    @property
    def heading_dy(self):
        return self._heading_dy

    def set_heading(self, angle):
        """
        Set heading and recompute the step vector

        The step vector uses the raw angle; cos/sin are periodic so it
        matches the normalized heading.
        """
        self._heading = normalize_angle(angle)
        self._heading_dx = self.step_length * math.cos(angle)
        self._heading_dy = self.step_length * math.sin(angle)

    def move(self, steps):
        """Move `steps` steps along the heading (negative moves back)"""
        self.x += steps * self._heading_dx
        self.y += steps * self._heading_dy

    def turn(self, steps):
        """Turn by `steps` turn increments (positive turns clockwise)"""
        self.set_heading(self._heading + steps * self.turn_angle)

    def get_position(self):
        """Get current world position"""
        return self.x, self.y

    def draw(self, gfx):
        """Draw the player position on the map and its heading"""
        gfx.draw_point(self.x, self.y, PLAYER_MARKER_SIZE, COLOR_PLAYER)
        gfx.draw_line(
            self.x, self.y,
            self.x + PLAYER_HEADING_LENGTH * self._heading_dx,
            self.y + PLAYER_HEADING_LENGTH * self._heading_dy,
            COLOR_PLAYER_HEADING
        )

    def __repr__(self):
        return f"Player(pos=({self.x:.2f}, {self.y:.2f}), angle={math.degrees(self._heading):.1f}°)"
