"""
Global constants for the grid raycaster
"""

import math

# Screen settings
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 512
FPS = 30

# Key repeat (held arrow keeps stepping)
KEY_REPEAT_DELAY_MS = 200
KEY_REPEAT_INTERVAL_MS = 33

# Map settings
TILE_SIZE = 64       # World units (and map pixels) per tile
MAP_WIDTH = 8        # Tiles per row
MAP_HEIGHT = 8       # Tiles per column
WALL_HEIGHT = 64     # How tall every wall is
MAP_GAP = 2          # Gap between tiles on the top-down map

# Player settings
STEP_LENGTH = 10     # World units per move step
TURN_ANGLE = 0.1     # Radians per turn step
PLAYER_START_X = 300
PLAYER_START_Y = 300
PLAYER_START_ANGLE = math.pi
PLAYER_MARKER_SIZE = 8
PLAYER_HEADING_LENGTH = 5  # Heading line length, in move steps

# Projection plane (right half of the window)
PROJECTION_PLANE_WIDTH = 512
PROJECTION_PLANE_HEIGHT = 512
PROJECTION_PLANE_X = 512

# Camera settings
FIELD_OF_VIEW = math.pi / 3
NUM_RAYS = PROJECTION_PLANE_WIDTH  # One ray per column of pixels
CAMERA_HEIGHT = 32

# Near clipping distance for projection
MIN_DISTANCE = 0.1

# Rays closer than this to a tan/cot singularity skip the affected axis
SINGULARITY_EPSILON = 1e-9
