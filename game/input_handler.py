"""
Input handling - translates key presses into player commands
"""

from enum import Enum, auto
import pygame


class Command(Enum):
    """Player commands"""
    MOVE_FORWARD = auto()
    MOVE_BACKWARD = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()


# Arrow keys or WASD
KEY_BINDINGS = {
    pygame.K_UP: Command.MOVE_FORWARD,
    pygame.K_w: Command.MOVE_FORWARD,
    pygame.K_DOWN: Command.MOVE_BACKWARD,
    pygame.K_s: Command.MOVE_BACKWARD,
    pygame.K_LEFT: Command.TURN_LEFT,
    pygame.K_a: Command.TURN_LEFT,
    pygame.K_RIGHT: Command.TURN_RIGHT,
    pygame.K_d: Command.TURN_RIGHT,
}


def command_for_key(key):
    """Get the command bound to a key, or None"""
    return KEY_BINDINGS.get(key)


def apply_command(player, command):
    """Apply one fixed-size step of a command to the player"""
    if command == Command.MOVE_FORWARD:
        player.move(1)
    elif command == Command.MOVE_BACKWARD:
        player.move(-1)
    elif command == Command.TURN_LEFT:
        player.turn(-1)
    elif command == Command.TURN_RIGHT:
        player.turn(1)


class InputHandler:
    """
    Applies keyboard events to the player
    """
    def __init__(self, player):
        self.player = player
        self.quit_requested = False

    def handle_event(self, event):
        """
        Handle a single pygame event

        Returns:
            The command applied, or None
        """
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return None

        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            self.quit_requested = True
            return None

        command = command_for_key(event.key)
        if command is not None:
            apply_command(self.player, command)
        return command

    def process_events(self, events):
        """Handle a batch of events (e.g. pygame.event.get())"""
        for event in events:
            self.handle_event(event)
        return not self.quit_requested
