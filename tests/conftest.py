"""Shared fixtures: headless pygame, fake car and recording cue sink."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from rescue_audio import CueSink
from rescue_tilemap import LandMap, ObjectMap


class FakeCar:
    """Car stand-in that stays where it is put."""

    def __init__(self, position=(0.0, 0.0)):
        self.position = position
        self.velocity = (0.0, 0.0)
        self.heading = 0.0


class RecordingCueSink(CueSink):
    def __init__(self):
        self.played = []

    def play(self, cue):
        self.played.append(cue)


@pytest.fixture
def cue_sink():
    return RecordingCueSink()


@pytest.fixture
def split_maps():
    """20x4 map: land in columns 0-9, water in columns 10-19."""
    land_map = LandMap(20, 4)
    land_map.tiles[:10, :] = True
    return land_map, ObjectMap(20, 4)


@pytest.fixture
def pygame_display():
    import pygame

    pygame.init()
    yield pygame
    pygame.quit()


@pytest.fixture
def fake_car():
    """Car parked in the middle of cell (0, 0)."""
    return FakeCar((64.0, 64.0))
