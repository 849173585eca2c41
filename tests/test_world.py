"""Tests for the Box2D-backed rescue scene."""

import numpy as np
import pytest

from rescue_audio import REFUEL_CUE
from rescue_controller import LAND_MAX_SPEED
from rescue_tilemap import MarkerType
from rescue_world import MAP_PRESETS, RescueWorld, follow_camera


def test_every_preset_builds_with_car_on_land():
    for name, props in MAP_PRESETS.items():
        world = RescueWorld(name, seed=4)

        assert world.land_map.columns == props["columns"]
        assert world.land_map.rows == props["rows"]
        column, row = world.land_map.cell_at(world.car.position)
        assert world.land_map.has_tile(column, row)
        assert world.controller.max_speed == LAND_MAX_SPEED


def test_unknown_map_is_rejected():
    with pytest.raises(ValueError, match="Unknown map"):
        RescueWorld("atlantis")


def test_placement_respects_object_count():
    world = RescueWorld("delta", seed=1, num_objects=25)
    markers = world.markers_left()
    assert 0 < markers[MarkerType.DUCK] + markers[MarkerType.GAS_CAN] <= 25

    empty = RescueWorld("delta", seed=1, num_objects=0)
    assert empty.markers_left() == {MarkerType.DUCK: 0, MarkerType.GAS_CAN: 0}


def test_same_seed_builds_the_same_map():
    first = RescueWorld("lagoon", seed=7)
    second = RescueWorld("lagoon", seed=7)

    assert np.array_equal(first.land_map.tiles, second.land_map.tiles)
    assert np.array_equal(first.objects_map.tiles, second.objects_map.tiles)


def test_car_starts_parked():
    world = RescueWorld("delta", seed=2)
    start = world.car.position

    for tick in range(10):
        world.frame(tick / 60.0, 1 / 60.0)

    assert world.car.position == pytest.approx(start)
    assert world.controller.acceleration == 0.0


def test_velocity_takes_effect_one_step_later():
    world = RescueWorld("delta", seed=2)
    start_x, start_y = world.car.position
    world.touch((start_x + 1000.0, start_y))

    # Frame 1 steers with zero acceleration, frame 2 steps with that zero velocity
    world.frame(0.0, 1 / 60.0)
    world.frame(1 / 60.0, 1 / 60.0)
    assert world.car.position == pytest.approx((start_x, start_y))
    assert world.car.velocity == pytest.approx((40.0, 0.0), abs=1e-3)

    # Frame 3 integrates the 40 px/s set at the end of frame 2
    world.frame(2 / 60.0, 1 / 60.0)
    x, y = world.car.position
    assert x - start_x == pytest.approx(40.0 / 60.0, abs=1e-3)
    assert y == pytest.approx(start_y, abs=1e-3)
    assert world.car.heading == pytest.approx(0.0)


def test_car_drives_toward_target():
    world = RescueWorld("lagoon", seed=3)
    start_x, start_y = world.car.position
    world.touch((start_x, start_y + 600.0))

    for tick in range(30):
        world.frame(tick / 60.0, 1 / 60.0)

    x, y = world.car.position
    assert y > start_y
    assert x == pytest.approx(start_x, abs=1.0)
    assert world.car.heading == pytest.approx(np.pi / 2, abs=1e-3)


def test_pickup_through_the_world(cue_sink):
    world = RescueWorld("delta", seed=5, num_objects=0, cue_sink=cue_sink)
    column, row = world.land_map.cell_at(world.car.position)
    gas_can = world.objects_map.tile_set.group_named("Gas Can")
    world.objects_map.set_tile_group(gas_can, column, row)

    pickups = world.frame(0.0, 1 / 60.0)

    assert pickups == [(MarkerType.GAS_CAN, column, row)]
    assert cue_sink.played == [REFUEL_CUE]
    assert world.frame(1 / 60.0, 1 / 60.0) == []
    assert world.get_info()["gas_cans_left"] == 0


def test_map_edge_keeps_car_inside():
    world = RescueWorld("delta", seed=6)
    _, start_y = world.car.position
    world.touch((-5000.0, start_y))

    for tick in range(1500):
        world.frame(tick / 60.0, 1 / 60.0)

    x, y = world.car.position
    assert 0.0 < x < world.land_map.width
    assert 0.0 < y < world.land_map.height


def test_get_info_reports_controller_state():
    world = RescueWorld("delta", seed=8)
    info = world.get_info()

    assert info["map"] == "DELTA"
    assert info["seed"] == 8
    assert info["max_speed"] == LAND_MAX_SPEED
    assert info["on_land"] is True
    assert info["acceleration"] == 0.0
    assert info["ducks_left"] == world.objects_map.count(MarkerType.DUCK)
    assert info["gas_cans_left"] == world.objects_map.count(MarkerType.GAS_CAN)


def test_follow_camera_clamps_to_map():
    assert follow_camera((100.0, 100.0), 4000.0, 3000.0, 1000.0, 800.0) == (500.0, 400.0)
    assert follow_camera((3900.0, 2900.0), 4000.0, 3000.0, 1000.0, 800.0) == (3500.0, 2600.0)
    assert follow_camera((2000.0, 1500.0), 4000.0, 3000.0, 1000.0, 800.0) == (2000.0, 1500.0)
    # Map narrower than the screen stays centred
    assert follow_camera((10.0, 1500.0), 600.0, 3000.0, 1000.0, 800.0) == (300.0, 1500.0)
