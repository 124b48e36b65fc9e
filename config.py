"""
Game configuration
"""

GAME_TITLE = "Grid Raycaster"
GAME_VERSION = "1.0.0"
