"""
Raycaster Engine - grid line intersection raycasting
Wolfenstein3D style: one ray per screen column, nearest wall wins
Optimized with Numba JIT compilation
"""

import math
from collections import namedtuple
import numpy as np
from numba import njit
from maze.grid_map import tile_value_at, NO_TILE, WALL
from utils.constants import (
    PROJECTION_PLANE_WIDTH, PROJECTION_PLANE_HEIGHT, PROJECTION_PLANE_X,
    FIELD_OF_VIEW, CAMERA_HEIGHT, MIN_DISTANCE, SINGULARITY_EPSILON
)
from utils.colors import COLOR_RAY, COLOR_COLUMN_VERTICAL, COLOR_COLUMN_HORIZONTAL
from utils.helpers import normalize_angle, distance, clamp

# Column layout of the cast_all_rays() result array
RAY_ANGLE = 0
RAY_HIT = 1
RAY_HIT_X = 2
RAY_HIT_Y = 3
RAY_DISTANCE = 4
RAY_VERTICAL = 5
RAY_CORRECTED = 6
RAY_FIELDS = 7

Intersection = namedtuple('Intersection', ['x', 'y'])
RayHit = namedtuple('RayHit', ['angle', 'x', 'y', 'distance', 'corrected_distance', 'vertical'])
Column = namedtuple('Column', ['index', 'x', 'top', 'bottom', 'vertical'])


@njit(cache=True)
def horizontal_intersection(tiles, width, height, tile_size, px, py, angle):
    """
    Find where a ray first crosses a horizontal grid line at a wall
    (Numba JIT compiled)

    Angles are measured clockwise from +x, so rays with angle > pi go up
    the screen and look for lines above the player, otherwise below.

    Returns:
        (hit, x, y) - hit is False when the ray leaves the grid, runs out
        of lines or is parallel to the horizontal lines
    """
    sin_a = math.sin(angle)
    if abs(sin_a) < SINGULARITY_EPSILON:
        return False, 0.0, 0.0
    cot = math.cos(angle) / sin_a
    looking_up = angle > math.pi

    # Snap to the grid line above the player, then one row down if looking down
    iy = math.floor(py / tile_size) * tile_size
    if not looking_up:
        iy += tile_size
    ix = px + (iy - py) * cot

    # At most `height` horizontal lines to cross
    for _ in range(height):
        # Looking up, the tile is the one above the line
        if looking_up:
            tile = tile_value_at(tiles, width, height, tile_size, ix, iy - tile_size)
        else:
            tile = tile_value_at(tiles, width, height, tile_size, ix, iy)
        if tile == NO_TILE:
            return False, 0.0, 0.0
        if tile == WALL:
            return True, ix, iy

        if looking_up:
            iy -= tile_size
        else:
            iy += tile_size
        ix = px + (iy - py) * cot

    return False, 0.0, 0.0


@njit(cache=True)
def vertical_intersection(tiles, width, height, tile_size, px, py, angle):
    """
    Find where a ray first crosses a vertical grid line at a wall
    (Numba JIT compiled)

    Returns:
        (hit, x, y) - hit is False when the ray leaves the grid, runs out
        of lines or is parallel to the vertical lines
    """
    cos_a = math.cos(angle)
    if abs(cos_a) < SINGULARITY_EPSILON:
        return False, 0.0, 0.0
    tan = math.sin(angle) / cos_a
    looking_right = angle < math.pi / 2 or angle > 3 * math.pi / 2

    ix = math.floor(px / tile_size) * tile_size
    if looking_right:
        ix += tile_size
    iy = py + (ix - px) * tan

    for _ in range(width):
        # Looking left, the tile is the one left of the line
        if looking_right:
            tile = tile_value_at(tiles, width, height, tile_size, ix, iy)
        else:
            tile = tile_value_at(tiles, width, height, tile_size, ix - tile_size, iy)
        if tile == NO_TILE:
            return False, 0.0, 0.0
        if tile == WALL:
            return True, ix, iy

        if looking_right:
            ix += tile_size
        else:
            ix -= tile_size
        iy = py + (ix - px) * tan

    return False, 0.0, 0.0


@njit(cache=True)
def resolve_ray(tiles, width, height, tile_size, px, py, angle):
    """
    Cast one ray and keep the nearer of the two intersections

    Ties go to the horizontal hit: the vertical one only wins on strict <.

    Returns:
        (hit, x, y, dist, vertical)
    """
    h_hit, hx, hy = horizontal_intersection(tiles, width, height, tile_size, px, py, angle)
    v_hit, vx, vy = vertical_intersection(tiles, width, height, tile_size, px, py, angle)

    if not h_hit and not v_hit:
        return False, 0.0, 0.0, 0.0, False

    h_dist = distance(px, py, hx, hy) if h_hit else 0.0
    v_dist = distance(px, py, vx, vy) if v_hit else 0.0

    if v_hit and (not h_hit or v_dist < h_dist):
        return True, vx, vy, v_dist, True
    return True, hx, hy, h_dist, False


@njit(cache=True)
def _numba_cast_all_rays(tiles, width, height, tile_size, px, py,
                         player_angle, ray_offsets, fish_eye_table):
    """
    Cast all rays for one frame (Numba JIT compiled)

    Args:
        tiles: 1D numpy int32 array of tile values
        width, height: Grid dimensions in tiles
        tile_size: World units per tile (float)
        px, py: Player position
        player_angle: Player heading in radians
        ray_offsets: 1D float64 array of ray angle offsets from the heading
        fish_eye_table: 1D float64 array, cos of each offset

    Returns:
        results: numpy array shape (num_rays, 7)
                 [angle, hit, hit_x, hit_y, dist, vertical, corrected_dist]
    """
    num_rays = ray_offsets.shape[0]
    results = np.zeros((num_rays, RAY_FIELDS), dtype=np.float64)

    for i in range(num_rays):
        angle = normalize_angle(player_angle + ray_offsets[i])
        hit, x, y, dist, vertical = resolve_ray(tiles, width, height, tile_size, px, py, angle)

        results[i, 0] = angle
        if not hit:
            continue
        results[i, 1] = 1.0
        results[i, 2] = x
        results[i, 3] = y
        results[i, 4] = dist
        results[i, 5] = 1.0 if vertical else 0.0
        # Fish-eye correction: project onto the view plane, not an arc
        results[i, 6] = dist * fish_eye_table[i]

    return results


class Raycaster:
    """
    Casts the player's field of view against the grid and projects
    the nearest wall of every ray as one column of the projection plane
    """

    def __init__(self, player, grid_map,
                 plane_width=PROJECTION_PLANE_WIDTH,
                 plane_height=PROJECTION_PLANE_HEIGHT,
                 plane_x=PROJECTION_PLANE_X,
                 fov=FIELD_OF_VIEW, num_rays=None,
                 camera_height=CAMERA_HEIGHT):
        """
        Initialize raycaster

        Args:
            player: Player to cast from (read only)
            grid_map: GridMap to cast against (read only)
            plane_width, plane_height: Projection plane size in pixels
            plane_x: Left edge of the projection plane on screen
            fov: Field of view in radians
            num_rays: Rays per frame (defaults to plane_width, one per pixel column)
            camera_height: Eye height above the floor
        """
        self.player = player
        self.grid_map = grid_map
        self.plane_width = plane_width
        self.plane_height = plane_height
        self.plane_x = plane_x
        self.fov = fov
        self.half_fov = fov / 2
        self.camera_height = camera_height

        # Distance from the player to the projection plane
        self.distance_to_plane = (plane_width / 2) / math.tan(self.half_fov)

        self.num_rays = 0
        self.set_resolution(plane_width if num_rays is None else num_rays)

    @staticmethod
    def _build_ray_offsets(num_rays, fov):
        """Angle of every ray relative to the heading, left to right"""
        return -(fov / 2) + np.arange(num_rays, dtype=np.float64) * (fov / num_rays)

    def set_resolution(self, num_rays):
        """Update ray count and the derived tables"""
        if num_rays <= 0:
            raise ValueError(f"Ray count must be positive, got {num_rays}")
        if num_rays != self.num_rays:
            self.num_rays = num_rays
            self.delta_angle = self.fov / num_rays
            self.column_width = self.plane_width / num_rays
            self._ray_offsets = self._build_ray_offsets(num_rays, self.fov)
            self._fish_eye_table = np.cos(self._ray_offsets)

    @property
    def ray_offsets(self):
        return self._ray_offsets

    @property
    def fish_eye_table(self):
        return self._fish_eye_table

    def _grid_args(self):
        grid = self.grid_map
        return grid.tiles, grid.width, grid.height, float(grid.tile_size)

    def horizontal_intersection(self, angle):
        """
        Nearest wall crossing on a horizontal grid line

        Returns:
            Intersection or None
        """
        hit, x, y = horizontal_intersection(*self._grid_args(), self.player.x, self.player.y,
                                            normalize_angle(angle))
        return Intersection(x, y) if hit else None

    def vertical_intersection(self, angle):
        """
        Nearest wall crossing on a vertical grid line

        Returns:
            Intersection or None
        """
        hit, x, y = vertical_intersection(*self._grid_args(), self.player.x, self.player.y,
                                          normalize_angle(angle))
        return Intersection(x, y) if hit else None

    def cast_ray(self, angle):
        """
        Cast a single ray

        Args:
            angle: Ray angle in radians (normalized to [0, 2pi))

        Returns:
            RayHit, or None if neither axis finds a wall
        """
        angle = normalize_angle(angle)
        hit, x, y, dist, vertical = resolve_ray(*self._grid_args(), self.player.x, self.player.y,
                                                angle)
        if not hit:
            return None
        corrected = dist * math.cos(self.player.heading - angle)
        return RayHit(angle, x, y, dist, corrected, vertical)

    def cast_all_rays(self):
        """
        Cast all rays for the screen using Numba JIT

        Returns:
            numpy array shape (num_rays, 7):
            [angle, hit, hit_x, hit_y, dist, vertical, corrected_dist]
        """
        return _numba_cast_all_rays(
            *self._grid_args(),
            float(self.player.x), float(self.player.y), float(self.player.heading),
            self._ray_offsets, self._fish_eye_table
        )

    def project(self, corrected_distance):
        """
        Project a wall at a given distance onto the plane

        Similar triangles: the wall part above the eye and the part below
        it scale by distance_to_plane / distance around the plane middle.

        Returns:
            (top, bottom) screen y, clamped to the plane
        """
        d = max(corrected_distance, MIN_DISTANCE)
        top_half = (self.grid_map.wall_height - self.camera_height) * self.distance_to_plane / d
        bottom_half = self.camera_height * self.distance_to_plane / d
        top = self.plane_height / 2 - top_half
        bottom = top + top_half + bottom_half
        return clamp(top, 0, self.plane_height), clamp(bottom, 0, self.plane_height)

    def column_x(self, index):
        """Screen x of a column"""
        return self.plane_x + index * self.column_width

    def columns(self, results=None):
        """
        Project every ray that hit a wall

        Rays without a hit produce no column.

        Args:
            results: Optional cast_all_rays() output to reuse

        Returns:
            List of Column
        """
        if results is None:
            results = self.cast_all_rays()

        columns = []
        for i in range(results.shape[0]):
            if results[i, RAY_HIT] == 0:
                continue
            top, bottom = self.project(results[i, RAY_CORRECTED])
            columns.append(Column(i, self.column_x(i), top, bottom,
                                  bool(results[i, RAY_VERTICAL])))
        return columns

    def draw(self, gfx):
        """Draw the rays on the map and the projected columns"""
        results = self.cast_all_rays()
        px, py = self.player.x, self.player.y

        for column in self.columns(results):
            row = results[column.index]
            gfx.draw_line(px, py, row[RAY_HIT_X], row[RAY_HIT_Y], COLOR_RAY)
            # Darker horizontal hits fake the lighting
            gfx.draw_line(
                column.x, column.top, column.x, column.bottom,
                COLOR_COLUMN_VERTICAL if column.vertical else COLOR_COLUMN_HORIZONTAL
            )
