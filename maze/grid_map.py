"""
Grid Map - fixed tile grid the rays are cast against
"""

import math
from enum import IntEnum
import numpy as np
from numba import njit
from utils.constants import TILE_SIZE, MAP_WIDTH, MAP_HEIGHT, WALL_HEIGHT, MAP_GAP
from utils.colors import COLOR_TILE_EMPTY, COLOR_TILE_WALL
from maze.layouts import DEFAULT_LAYOUT


class Tile(IntEnum):
    """Tile kinds (0 is reserved for 'outside the grid')"""
    WALL = 1
    EMPTY = 2


# Tile values as module-level ints for Numba access
NO_TILE = 0
WALL = int(Tile.WALL)


@njit(cache=True)
def tile_value_at(tiles, width, height, tile_size, world_x, world_y):
    """
    Look up the tile covering a world coordinate (Numba JIT compiled)

    Given the top-left corner of a tile C: (Cx, Cy), a point yields that
    tile if x in [Cx, Cx + tile_size) and y in [Cy, Cy + tile_size).

    Args:
        tiles: 1D numpy int32 array of tile values, row-major
        width, height: Grid dimensions in tiles
        tile_size: World units per tile (float)
        world_x, world_y: World coordinates (float)

    Returns:
        Tile value, or 0 when the point is outside the grid
    """
    if not (math.isfinite(world_x) and math.isfinite(world_y)):
        return 0
    col = math.floor(world_x / tile_size)
    row = math.floor(world_y / tile_size)
    if col < 0 or col >= width or row < 0 or row >= height:
        return 0
    return tiles[col + row * width]


class GridMap:
    """
    Immutable tile grid, indexed row-major
    """

    def __init__(self, cells, width=MAP_WIDTH, height=MAP_HEIGHT,
                 tile_size=TILE_SIZE, wall_height=None, gap=MAP_GAP):
        """
        Initialize grid map

        Args:
            cells: Flat sequence of Tile values (or 1/2 ints), length width*height
            width, height: Grid dimensions in tiles
            tile_size: World units per tile
            wall_height: Height of every wall (defaults to tile_size)
            gap: Gap between tiles when drawn on the map
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {tile_size}")

        try:
            cells = tuple(Tile(c) for c in cells)
        except ValueError as e:
            raise ValueError(f"Unknown tile value: {e}") from e
        if len(cells) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {width}x{height} grid, got {len(cells)}"
            )

        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.wall_height = tile_size if wall_height is None else wall_height
        self.gap = gap
        self._cells = cells

        # Packed copy for the ray kernels
        self._tiles = np.array(cells, dtype=np.int32)
        self._tiles.flags.writeable = False

    @classmethod
    def from_rows(cls, rows, **kwargs):
        """
        Build a grid from a list of rows (1 = wall, 0 = empty)

        Args:
            rows: List of equal-length rows, top to bottom
            **kwargs: Passed to GridMap (tile_size, wall_height, gap)
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")

        cells = []
        for row in rows:
            for value in row:
                if isinstance(value, Tile):
                    cells.append(value)
                else:
                    cells.append(Tile.WALL if value else Tile.EMPTY)
        return cls(cells, width=width, height=height, **kwargs)

    @classmethod
    def default(cls):
        """The built-in 8x8 map"""
        return cls.from_rows(DEFAULT_LAYOUT, tile_size=TILE_SIZE, wall_height=WALL_HEIGHT)

    @property
    def cells(self):
        """Row-major tuple of tiles"""
        return self._cells

    @property
    def tiles(self):
        """Read-only numpy int32 array of tile values (for Numba kernels)"""
        return self._tiles

    def tile_at(self, world_x, world_y):
        """
        Get the tile at a world coordinate

        Returns:
            Tile, or None if the point is outside the grid
        """
        value = tile_value_at(self._tiles, self.width, self.height,
                              float(self.tile_size), float(world_x), float(world_y))
        if value == NO_TILE:
            return None
        return Tile(value)

    def tile_rects(self):
        """
        Yield the map rectangle of every tile, row-major

        Yields:
            (x, y, w, h, color) tuples
        """
        size = self.tile_size - self.gap
        for i, tile in enumerate(self._cells):
            color = COLOR_TILE_EMPTY if tile == Tile.EMPTY else COLOR_TILE_WALL
            x = (i % self.width) * self.tile_size + self.gap / 2
            y = (i // self.width) * self.tile_size + self.gap / 2
            yield x, y, size, size, color

    def draw(self, gfx):
        """Draw the map with a little gap in between the tiles"""
        for x, y, w, h, color in self.tile_rects():
            gfx.draw_rect(x, y, w, h, color)

    def __repr__(self):
        return f"GridMap({self.width}x{self.height}, tile_size={self.tile_size})"
