"""
RD Rescue Car - Physics Body and Rendering

Top-down car on a Box2D dynamic body:
- Scene units (pixels) outside, Box2D metres inside (PPM)
- Velocity and heading are written by the drive controller
- Rotation is fixed so collisions with the map edge never spin the car
- All drawing functions for the car
"""

import math
import pygame
from Box2D import b2PolygonShape, b2Vec2

# -------------------------------------------------
# Constants
# -------------------------------------------------
PPM = 64.0  # scene pixels per Box2D metre

CAR_LENGTH = 96.0  # scene units, along the heading
CAR_WIDTH = 48.0

CAR_COLOR = (230, 70, 50)
CAR_TRIM_COLOR = (40, 40, 48)
WINDSHIELD_COLOR = (170, 220, 250)


def to_meters(point):
    """Scene (pixel) point -> Box2D vector."""
    return b2Vec2(point[0] / PPM, point[1] / PPM)


def to_scene(vec):
    """Box2D vector -> scene (pixel) tuple."""
    return (vec[0] * PPM, vec[1] * PPM)


def world_to_screen(pos, cam_x=0.0, screen_width=1024, screen_height=768, cam_y=0.0):
    """Convert scene coordinates to screen coordinates with camera support."""
    x = screen_width / 2 + (pos[0] - cam_x)
    y = screen_height / 2 - (pos[1] - cam_y)
    return int(x), int(y)


def screen_to_world(pos, cam_x=0.0, screen_width=1024, screen_height=768, cam_y=0.0):
    """Convert screen coordinates back to scene coordinates."""
    x = cam_x + (pos[0] - screen_width / 2)
    y = cam_y - (pos[1] - screen_height / 2)
    return float(x), float(y)


# -------------------------------------------------
# Rescue Car Class
# -------------------------------------------------
class RescueCar:
    """
    Car sprite backed by a single box fixture.

    position, velocity and heading are exposed in scene units so the
    drive controller never deals with metres.
    """

    def __init__(
        self,
        world,
        position,
        length: float = CAR_LENGTH,
        width: float = CAR_WIDTH,
        density: float = 1.0,
        friction: float = 0.3,
        restitution: float = 0.2,
    ):
        self.world = world
        self.length = length
        self.width = width

        self.body = world.CreateDynamicBody(
            position=to_meters(position),
            angle=0.0,
            linearDamping=0.0,
            fixedRotation=True,
            bullet=True,  # fast on land, avoid tunnelling through the edge loop
        )
        self.body.userData = {"type": "car"}

        shape = b2PolygonShape(box=(length / 2 / PPM, width / 2 / PPM))
        self.body.CreateFixture(
            shape=shape,
            density=density,
            friction=friction,
            restitution=restitution,
        )

    @property
    def position(self):
        return to_scene(self.body.position)

    @position.setter
    def position(self, point):
        self.body.position = to_meters(point)

    @property
    def velocity(self):
        return to_scene(self.body.linearVelocity)

    @velocity.setter
    def velocity(self, value):
        self.body.linearVelocity = to_meters(value)
        self.body.awake = True

    @property
    def heading(self):
        return self.body.angle

    @heading.setter
    def heading(self, angle):
        self.body.angle = angle

    @property
    def speed(self):
        vx, vy = self.velocity
        return math.hypot(vx, vy)


def draw_car(surface, car, cam_x=0.0, screen_width=1024, screen_height=768, cam_y=0.0):
    """Draw the car body, windshield and wheels."""
    body = car.body

    def local_to_screen(lx, ly):
        world_pt = body.transform * b2Vec2(lx / PPM, ly / PPM)
        return world_to_screen(to_scene(world_pt), cam_x, screen_width, screen_height, cam_y)

    hl = car.length / 2
    hw = car.width / 2

    # Wheels first so the body covers their inner half
    wheel_l = car.length * 0.22
    wheel_w = car.width * 0.2
    for wx in (-hl * 0.6, hl * 0.6):
        for wy in (-hw, hw):
            wheel = [
                local_to_screen(wx - wheel_l / 2, wy - wheel_w / 2),
                local_to_screen(wx + wheel_l / 2, wy - wheel_w / 2),
                local_to_screen(wx + wheel_l / 2, wy + wheel_w / 2),
                local_to_screen(wx - wheel_l / 2, wy + wheel_w / 2),
            ]
            pygame.draw.polygon(surface, CAR_TRIM_COLOR, wheel, 0)

    # Body
    for fixture in body.fixtures:
        shape = fixture.shape
        if isinstance(shape, b2PolygonShape):
            vertices = [to_scene(body.transform * v) for v in shape.vertices]
            pts = [world_to_screen(v, cam_x, screen_width, screen_height, cam_y) for v in vertices]
            pygame.draw.polygon(surface, CAR_COLOR, pts, 0)
            pygame.draw.polygon(surface, CAR_TRIM_COLOR, pts, 2)

    # Windshield toward the front (+x local)
    windshield = [
        local_to_screen(hl * 0.15, -hw * 0.7),
        local_to_screen(hl * 0.55, -hw * 0.6),
        local_to_screen(hl * 0.55, hw * 0.6),
        local_to_screen(hl * 0.15, hw * 0.7),
    ]
    pygame.draw.polygon(surface, WINDSHIELD_COLOR, windshield, 0)
