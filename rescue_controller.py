"""
RD Rescue Drive Controller - Terrain Sensing and Target Seeking

Runs twice per frame around the physics step:
- update(): before the step, reads the tile under the car to pick the
  speed cap and collects any duck or gas can in that cell
- did_simulate_physics(): after the step, steers toward the target and
  moves the acceleration scalar toward the cap (or toward zero when
  close to the target)

The velocity written after a step only moves the car on the next step.
"""

import math

from rescue_audio import DUCK_CUE, REFUEL_CUE, NullCueSink
from rescue_tilemap import MarkerType, SceneConfigError

# -------------------------------------------------
# Constants
# -------------------------------------------------
WATER_MAX_SPEED = 200.0
LAND_MAX_SPEED = 4000.0

# Within this distance of the target the car starts slowing
TARGET_THRESHOLD = 200.0

MAX_DECEL_STEP = 80.0  # per frame, when above the cap
MAX_ACCEL_STEP = 40.0  # per frame, when below the cap

STOP_ACCELERATION = 2.0       # near the target, below this snaps to 0
HEADING_MIN_ACCELERATION = 5.0  # below this the heading is left alone


def next_acceleration(acceleration, distance, max_speed, threshold=TARGET_THRESHOLD):
    """
    Acceleration for the next frame.

    Near the target (distance < threshold) acceleration is scaled by
    distance / threshold and snapped to 0 once it falls below
    STOP_ACCELERATION. Otherwise it moves toward max_speed, at most
    MAX_DECEL_STEP down or MAX_ACCEL_STEP up per frame.
    """
    if distance < threshold:
        delta = threshold - distance
        acceleration = acceleration * ((threshold - delta) / threshold)
        if acceleration < STOP_ACCELERATION:
            acceleration = 0.0
    else:
        if acceleration > max_speed:
            acceleration = max(acceleration - MAX_DECEL_STEP, max_speed)
        if acceleration < max_speed:
            acceleration = min(acceleration + MAX_ACCEL_STEP, max_speed)
    return acceleration


class DriveController:
    """
    Steers the car toward the last touch location.

    Collaborators are passed in directly and checked once here, so a
    broken scene fails at start-up instead of mid-game.
    """

    def __init__(self, car, land_map, objects_map, cue_sink=None, max_speed=LAND_MAX_SPEED):
        """
        Initialize controller.

        Args:
            car: Object with position (read), velocity and heading (write)
            land_map: LandMap used for the speed cap
            objects_map: ObjectMap holding collectible markers
            cue_sink: CueSink for pickup sounds (silent if None)
            max_speed: Initial speed cap

        Raises:
            SceneConfigError: if car, land_map or objects_map is missing
        """
        missing = [name for name, node in (("car", car),
                                           ("land map", land_map),
                                           ("objects map", objects_map)) if node is None]
        if missing:
            raise SceneConfigError(f"Scene nodes not loaded: {', '.join(missing)}")

        self.car = car
        self.land_map = land_map
        self.objects_map = objects_map
        self.cue_sink = cue_sink if cue_sink is not None else NullCueSink()

        self.max_speed = max_speed
        self.acceleration = 0.0
        self.target = (0.0, 0.0)

        # Last sensed/steered values, for display
        self.on_land = max_speed == LAND_MAX_SPEED
        self.distance = 0.0

    def set_target(self, point):
        """Store the latest touch location. Takes effect on the next frame."""
        self.target = (float(point[0]), float(point[1]))

    def update(self, current_time=None):
        """
        Sense the tile under the car (pre-physics).

        Args:
            current_time: Frame timestamp (unused, frames are fixed-rate)

        Returns:
            List of (MarkerType, column, row) picked up this frame
        """
        column, row = self.land_map.cell_at(self.car.position)

        # Speed cap from the tile the car is on
        self.on_land = self.land_map.has_tile(column, row)
        self.max_speed = LAND_MAX_SPEED if self.on_land else WATER_MAX_SPEED

        pickups = []
        marker = self.objects_map.marker_at(column, row)
        if marker == MarkerType.GAS_CAN:
            self.cue_sink.play(REFUEL_CUE)
            self.objects_map.clear(column, row)
            pickups.append((MarkerType.GAS_CAN, column, row))

        if marker == MarkerType.DUCK:
            self.cue_sink.play(DUCK_CUE)
            self.objects_map.clear(column, row)
            pickups.append((MarkerType.DUCK, column, row))

        return pickups

    def did_simulate_physics(self):
        """Steer toward the target and update acceleration (post-physics)."""
        x, y = self.car.position
        offset_x = self.target[0] - x
        offset_y = self.target[1] - y
        distance = math.hypot(offset_x, offset_y)
        self.distance = distance

        # On the target: no direction this frame, keep last velocity
        if distance > 0.0:
            velocity_x = offset_x / distance * self.acceleration
            velocity_y = offset_y / distance * self.acceleration
            self.car.velocity = (velocity_x, velocity_y)

            if self.acceleration > HEADING_MIN_ACCELERATION:
                self.car.heading = math.atan2(velocity_y, velocity_x)

        self.acceleration = next_acceleration(self.acceleration, distance, self.max_speed)
