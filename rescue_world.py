"""
RD Rescue World - Single Scene with Physics

Contains the rescue scene built from a map preset:
- Zero-gravity Box2D world with an edge loop around the map frame
- Land layer generation and object (marker) placement
- The car, spawned on land at the map centre
- The drive controller and the per-frame ordering:
  sensing -> physics step -> steering
"""

import numpy as np
from Box2D import b2World

from rescue_car import RescueCar, to_meters, draw_car
from rescue_controller import DriveController, LAND_MAX_SPEED
from rescue_objects import NUM_OBJECTS, place_objects, draw_markers_pygame
from rescue_tilemap import (
    MarkerType,
    ObjectMap,
    RescueTerrain,
    TILE_SIZE,
    draw_tilemap_pygame,
)


# Map presets table
MAP_PRESETS = {
    # Format: size in tiles, starting land chance, smoothing passes, marker picks
    "lagoon":      {"columns": 48, "rows": 32, "land_fraction": 0.58, "smoothing": 4, "objects": NUM_OBJECTS},
    "archipelago": {"columns": 64, "rows": 40, "land_fraction": 0.45, "smoothing": 5, "objects": 96},
    "delta":       {"columns": 32, "rows": 24, "land_fraction": 0.52, "smoothing": 2, "objects": 40},
}

VELOCITY_ITERATIONS = 8
POSITION_ITERATIONS = 3


def follow_camera(position, map_width, map_height, screen_width, screen_height):
    """Camera centre following `position`, kept inside the map where it fits."""
    def axis(value, map_size, screen_size):
        if map_size <= screen_size:
            return map_size / 2
        half = screen_size / 2
        return max(half, min(map_size - half, value))

    return (axis(position[0], map_width, screen_width),
            axis(position[1], map_height, screen_height))


class RescueWorld:
    """
    The rescue scene: maps, car, physics and controller.

    Call touch() from input handling and frame() once per tick.
    """

    def __init__(self, map_name="lagoon", seed=None, num_objects=None, cue_sink=None, tile_size=TILE_SIZE):
        """
        Initialize world from a map preset.

        Args:
            map_name: Name of preset from MAP_PRESETS
            seed: Seed for terrain and marker placement (random if None)
            num_objects: Marker picks (preset default if None)
            cue_sink: CueSink for pickup sounds (silent if None)
            tile_size: Tile side length in scene units
        """
        if map_name not in MAP_PRESETS:
            raise ValueError(f"Unknown map '{map_name}'. Available: {list(MAP_PRESETS.keys())}")

        self.map_name = map_name
        self.map_props = MAP_PRESETS[map_name]
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.num_objects = self.map_props["objects"] if num_objects is None else num_objects

        # Land layer
        self.terrain = RescueTerrain(
            columns=self.map_props["columns"],
            rows=self.map_props["rows"],
            land_fraction=self.map_props["land_fraction"],
            smoothing_passes=self.map_props["smoothing"],
        )
        self.land_map = self.terrain.generate_land(self.rng, tile_size)

        # Object layer
        self.objects_map = ObjectMap(self.land_map.columns, self.land_map.rows, tile_size)

        # Box2D world, top-down so no gravity
        self.b2world = b2World(gravity=(0, 0), doSleep=True)
        self.boundary_body = self._create_boundary()

        # Car on the spawn patch
        spawn = self.land_map.cell_center(*self.terrain.spawn_cell)
        self.car = RescueCar(self.b2world, spawn)

        self.controller = DriveController(
            self.car, self.land_map, self.objects_map, cue_sink, max_speed=LAND_MAX_SPEED
        )

        place_objects(self.land_map, self.objects_map, self.rng, self.num_objects)

        # Start with the car parked on its own position
        self.controller.set_target(spawn)
        self.frame_count = 0

    def _create_boundary(self):
        """Edge loop around the map frame."""
        w = self.land_map.width
        h = self.land_map.height
        corners = [to_meters(p) for p in ((0, 0), (w, 0), (w, h), (0, h))]
        body = self.b2world.CreateStaticBody(position=(0, 0))
        for i in range(len(corners)):
            body.CreateEdgeFixture(
                vertices=[corners[i], corners[(i + 1) % len(corners)]],
                density=0.0,
                friction=0.2,
            )
        body.userData = {"type": "boundary"}
        return body

    def touch(self, point):
        """Move the target to a scene point."""
        self.controller.set_target(point)

    def frame(self, current_time, dt):
        """
        Advance one tick.

        Args:
            current_time: Absolute time of this frame in seconds
            dt: Physics time step in seconds

        Returns:
            List of (MarkerType, column, row) picked up this frame
        """
        pickups = self.controller.update(current_time)
        self.b2world.Step(dt, VELOCITY_ITERATIONS, POSITION_ITERATIONS)
        self.controller.did_simulate_physics()
        self.frame_count += 1
        return pickups

    def markers_left(self):
        return {
            MarkerType.DUCK: self.objects_map.count(MarkerType.DUCK),
            MarkerType.GAS_CAN: self.objects_map.count(MarkerType.GAS_CAN),
        }

    def draw_terrain(self, surface, cam_x, cam_y, screen_width, screen_height):
        draw_tilemap_pygame(surface, self.land_map, cam_x, cam_y, screen_width, screen_height)

    def draw_objects(self, surface, cam_x, cam_y, screen_width, screen_height):
        draw_markers_pygame(surface, self.objects_map, cam_x, cam_y, screen_width, screen_height)
        draw_car(surface, self.car, cam_x, screen_width, screen_height, cam_y)

    def get_info(self):
        """
        Get world information for display.

        Returns:
            Dictionary with world info
        """
        markers = self.markers_left()
        return {
            "map": self.map_name.upper(),
            "seed": self.seed,
            "columns": self.land_map.columns,
            "rows": self.land_map.rows,
            "land_fraction": self.land_map.land_fraction(),
            "speed": self.car.speed,
            "max_speed": self.controller.max_speed,
            "acceleration": self.controller.acceleration,
            "on_land": self.controller.on_land,
            "distance": self.controller.distance,
            "ducks_left": markers[MarkerType.DUCK],
            "gas_cans_left": markers[MarkerType.GAS_CAN],
        }
