"""Tests for random marker placement."""

import numpy as np
import pytest

from rescue_objects import place_objects, resolve_marker_templates
from rescue_tilemap import (
    LandMap,
    MarkerType,
    ObjectMap,
    SceneConfigError,
    TileGroup,
    TileSet,
)


def test_marker_type_follows_terrain(split_maps):
    land_map, objects_map = split_maps

    place_objects(land_map, objects_map, np.random.default_rng(0), num_objects=200)

    populated = 0
    for column in range(objects_map.columns):
        for row in range(objects_map.rows):
            marker = objects_map.marker_at(column, row)
            if marker == MarkerType.NONE:
                continue
            populated += 1
            if land_map.has_tile(column, row):
                assert marker == MarkerType.GAS_CAN
            else:
                assert marker == MarkerType.DUCK

    assert 0 < populated <= 200
    assert objects_map.count(MarkerType.DUCK) > 0
    assert objects_map.count(MarkerType.GAS_CAN) > 0


def test_repeated_picks_overwrite_instead_of_adding():
    land_map = LandMap(1, 1)
    objects_map = ObjectMap(1, 1)

    place_objects(land_map, objects_map, np.random.default_rng(1), num_objects=5)

    assert objects_map.count(MarkerType.DUCK) == 1
    assert objects_map.count(MarkerType.GAS_CAN) == 0


def test_visible_markers_never_exceed_picks():
    land_map = LandMap(6, 6)
    objects_map = ObjectMap(6, 6)

    place_objects(land_map, objects_map, np.random.default_rng(2), num_objects=30)

    assert objects_map.count(MarkerType.DUCK) <= 30


def test_zero_objects_leaves_layer_empty(split_maps):
    land_map, objects_map = split_maps

    place_objects(land_map, objects_map, np.random.default_rng(0), num_objects=0)

    assert not objects_map.tiles.any()


def test_placement_is_reproducible_from_seed(split_maps):
    land_map, first = split_maps
    second = ObjectMap(first.columns, first.rows)

    place_objects(land_map, first, np.random.default_rng(9))
    place_objects(land_map, second, np.random.default_rng(9))

    assert np.array_equal(first.tiles, second.tiles)


def test_missing_duck_template_is_a_config_error():
    tile_set = TileSet([TileGroup("Gas Can", MarkerType.GAS_CAN, (255, 0, 0))])
    objects_map = ObjectMap(4, 4, tile_set=tile_set)

    with pytest.raises(SceneConfigError, match="Duck"):
        place_objects(LandMap(4, 4), objects_map, np.random.default_rng(0))

    assert not objects_map.tiles.any()


def test_missing_gas_can_template_is_a_config_error():
    tile_set = TileSet([TileGroup("Duck", MarkerType.DUCK, (255, 255, 0))])

    with pytest.raises(SceneConfigError, match="Gas Can"):
        resolve_marker_templates(tile_set)
