"""
Color palette for the grid raycaster
"""

# Background colors
COLOR_BG = (85, 85, 85)              # Canvas background

# Map colors
COLOR_TILE_EMPTY = (0, 0, 0)         # Empty tile
COLOR_TILE_WALL = (250, 250, 250)    # Wall tile

# Player colors
COLOR_PLAYER = (255, 0, 0)           # Position dot
COLOR_PLAYER_HEADING = (238, 204, 17)  # Heading line

# Raycasting colors
COLOR_RAY = (0, 255, 0)              # Ray drawn on the map
COLOR_COLUMN_VERTICAL = (0, 255, 0)  # Vertical grid line hit (lighter)
COLOR_COLUMN_HORIZONTAL = (0, 170, 17)  # Horizontal grid line hit (darker)
