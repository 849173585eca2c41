"""
RD Rescue Tile Maps - Land and Object Layers

Tile grids that the car drives over:
- Land layer: a tile means drivable land, no tile means water
- Object layer: one marker per cell (duck, gas can or nothing)
- Tile sets with named tile groups used as marker templates
- Procedural island generation with a guaranteed land spawn patch
- Cell geometry (scene position -> column/row)
"""

import math
from enum import IntEnum

import numpy as np

# -------------------------------------------------
# Constants
# -------------------------------------------------
TILE_SIZE = 128.0  # scene units (pixels) per tile side

WATER_COLOR = (38, 104, 178)
WATER_LINE_COLOR = (52, 120, 196)
LAND_COLOR = (112, 168, 82)
LAND_LINE_COLOR = (98, 150, 70)


class SceneConfigError(RuntimeError):
    """A required scene collaborator or tile template is missing."""


class MarkerType(IntEnum):
    """Marker held by a cell of the object layer."""
    NONE = 0
    DUCK = 1
    GAS_CAN = 2


class TileGroup:
    """Named tile template (e.g. "Duck") placed into an object layer."""

    def __init__(self, name, marker, color):
        self.name = name
        self.marker = MarkerType(marker)
        self.color = color

    def __repr__(self):
        return f"TileGroup({self.name!r}, {self.marker.name})"


class TileSet:
    """Collection of tile groups an object layer can be painted with."""

    def __init__(self, tile_groups):
        self.tile_groups = list(tile_groups)

    def group_named(self, name):
        """Return the tile group called `name`, or None."""
        return next((g for g in self.tile_groups if g.name == name), None)


def default_object_tile_set():
    """Tile set with the two marker templates the game scatters."""
    return TileSet([
        TileGroup("Duck", MarkerType.DUCK, (250, 220, 60)),
        TileGroup("Gas Can", MarkerType.GAS_CAN, (210, 40, 40)),
    ])


# -------------------------------------------------
# Tile Maps
# -------------------------------------------------
class TileMap:
    """
    Dense 2D tile grid indexed [column, row].

    The map origin is at scene (0, 0) and rows grow upward, matching the
    Box2D y-up convention used by the car.
    """

    def __init__(self, columns, rows, tile_size=TILE_SIZE, dtype=bool):
        """
        Initialize an empty tile map.

        Args:
            columns: Number of columns
            rows: Number of rows
            tile_size: Side length of one tile in scene units
            dtype: numpy dtype of the per-cell value
        """
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Tile map needs a positive size, got {columns}x{rows}")

        self.columns = int(columns)
        self.rows = int(rows)
        self.tile_size = float(tile_size)
        self.tiles = np.zeros((self.columns, self.rows), dtype=dtype)

    @property
    def width(self):
        return self.columns * self.tile_size

    @property
    def height(self):
        return self.rows * self.tile_size

    def column_index(self, x):
        """Column containing scene x (may be out of range)."""
        return int(math.floor(x / self.tile_size))

    def row_index(self, y):
        """Row containing scene y (may be out of range)."""
        return int(math.floor(y / self.tile_size))

    def cell_at(self, position):
        """(column, row) containing a scene position."""
        return self.column_index(position[0]), self.row_index(position[1])

    def in_bounds(self, column, row):
        return 0 <= column < self.columns and 0 <= row < self.rows

    def cell_center(self, column, row):
        """Scene position of the centre of a cell."""
        return ((column + 0.5) * self.tile_size, (row + 0.5) * self.tile_size)


class LandMap(TileMap):
    """Terrain layer: True where there is land."""

    def __init__(self, columns, rows, tile_size=TILE_SIZE):
        super().__init__(columns, rows, tile_size, dtype=bool)

    def has_tile(self, column, row):
        """True if the cell holds a land tile. Out-of-range cells are water."""
        if not self.in_bounds(column, row):
            return False
        return bool(self.tiles[column, row])

    def set_tile(self, column, row, present=True):
        if self.in_bounds(column, row):
            self.tiles[column, row] = present

    def land_fraction(self):
        return float(self.tiles.mean())


class ObjectMap(TileMap):
    """Object layer: one MarkerType per cell."""

    def __init__(self, columns, rows, tile_size=TILE_SIZE, tile_set=None):
        super().__init__(columns, rows, tile_size, dtype=np.int8)
        self.tile_set = tile_set if tile_set is not None else default_object_tile_set()

    def marker_at(self, column, row):
        """Marker in a cell. Out-of-range cells hold no marker."""
        if not self.in_bounds(column, row):
            return MarkerType.NONE
        return MarkerType(int(self.tiles[column, row]))

    def set_tile_group(self, group, column, row):
        """Paint a cell with a tile group, or clear it when group is None."""
        if not self.in_bounds(column, row):
            return
        self.tiles[column, row] = MarkerType.NONE if group is None else group.marker

    def clear(self, column, row):
        self.set_tile_group(None, column, row)

    def count(self, marker):
        return int(np.count_nonzero(self.tiles == marker))

    def cells(self, marker):
        """List of (column, row) cells holding `marker`."""
        cols, rows = np.nonzero(self.tiles == marker)
        return list(zip(cols.tolist(), rows.tolist()))

    def color_for(self, marker):
        for group in self.tile_set.tile_groups:
            if group.marker == marker:
                return group.color
        return (255, 255, 255)


# -------------------------------------------------
# Terrain Generation
# -------------------------------------------------
class RescueTerrain:
    """Generate island/lake land layers for RD Rescue."""

    def __init__(self, columns=48, rows=32, land_fraction=0.55, smoothing_passes=4):
        """
        Initialize terrain generator.

        Args:
            columns: Map width in tiles
            rows: Map height in tiles
            land_fraction: Chance that a cell starts out as land
            smoothing_passes: Cellular-automaton passes that merge noise into islands
        """
        self.columns = columns
        self.rows = rows
        self.land_fraction = land_fraction
        self.smoothing_passes = smoothing_passes

    @property
    def spawn_cell(self):
        """Cell at the map centre, always land."""
        return self.columns // 2, self.rows // 2

    def generate_land(self, rng, tile_size=TILE_SIZE):
        """
        Generate a land layer.

        Args:
            rng: numpy Generator
            tile_size: Tile side length in scene units

        Returns:
            LandMap
        """
        land_map = LandMap(self.columns, self.rows, tile_size)

        # Random noise
        field = rng.random((self.columns, self.rows)) < self.land_fraction

        # Smooth into coherent islands and lakes
        for _ in range(self.smoothing_passes):
            neighbours = self._count_neighbours(field)
            field = np.where(neighbours >= 5, True, np.where(neighbours <= 3, False, field))

        # Flatten a 3x3 land patch for the car to start on
        sc, sr = self.spawn_cell
        field[max(0, sc - 1):sc + 2, max(0, sr - 1):sr + 2] = True

        land_map.tiles[:, :] = field
        return land_map

    def _count_neighbours(self, field):
        """Number of land cells among the 8 neighbours of each cell."""
        padded = np.pad(field.astype(np.int8), 1, mode="constant", constant_values=0)
        neighbours = np.zeros(field.shape, dtype=np.int8)
        for dc in (-1, 0, 1):
            for dr in (-1, 0, 1):
                if dc == 0 and dr == 0:
                    continue
                neighbours += padded[1 + dc:1 + dc + self.columns, 1 + dr:1 + dr + self.rows]
        return neighbours


# -------------------------------------------------
# Drawing
# -------------------------------------------------
def visible_cells(tile_map, cam_x, cam_y, screen_width, screen_height):
    """Column and row ranges of the cells intersecting the camera view."""
    left = cam_x - screen_width / 2
    bottom = cam_y - screen_height / 2
    c0 = max(0, tile_map.column_index(left))
    c1 = min(tile_map.columns - 1, tile_map.column_index(left + screen_width))
    r0 = max(0, tile_map.row_index(bottom))
    r1 = min(tile_map.rows - 1, tile_map.row_index(bottom + screen_height))
    return range(c0, c1 + 1), range(r0, r1 + 1)


def draw_tilemap_pygame(surface, land_map, cam_x, cam_y, screen_width, screen_height):
    """
    Draw land and water tiles using pygame.

    Args:
        surface: Pygame surface
        land_map: LandMap to draw
        cam_x, cam_y: Camera centre in scene coordinates
        screen_width, screen_height: Screen dimensions
    """
    import pygame

    def world_to_screen(pos):
        sx = pos[0] - cam_x + screen_width / 2
        sy = screen_height / 2 - (pos[1] - cam_y)
        return int(sx), int(sy)

    size = int(math.ceil(land_map.tile_size))
    columns, rows = visible_cells(land_map, cam_x, cam_y, screen_width, screen_height)
    for column in columns:
        for row in rows:
            # Top-left corner of the tile on screen (row + 1 because y is flipped)
            sx, sy = world_to_screen((column * land_map.tile_size, (row + 1) * land_map.tile_size))
            if land_map.has_tile(column, row):
                fill, line = LAND_COLOR, LAND_LINE_COLOR
            else:
                fill, line = WATER_COLOR, WATER_LINE_COLOR
            pygame.draw.rect(surface, fill, (sx, sy, size, size), 0)
            pygame.draw.rect(surface, line, (sx, sy, size, size), 1)
