"""
RD Rescue Objects - Marker Placement and Rendering

Scatters collectible markers over the object layer:
- Ducks float on water cells
- Gas cans sit on land cells
- Cells are drawn at random with repetition, so later picks may
  overwrite earlier ones and fewer than N markers can be visible
"""

from rescue_tilemap import MarkerType, SceneConfigError, visible_cells

NUM_OBJECTS = 64

DUCK_TILE_NAME = "Duck"
GAS_CAN_TILE_NAME = "Gas Can"


def resolve_marker_templates(tile_set):
    """
    Look up the duck and gas can tile groups.

    Returns:
        (duck_tile, gascan_tile)

    Raises:
        SceneConfigError: if either template is missing from the tile set
    """
    duck_tile = tile_set.group_named(DUCK_TILE_NAME)
    if duck_tile is None:
        raise SceneConfigError("No Duck tile definition found")
    gascan_tile = tile_set.group_named(GAS_CAN_TILE_NAME)
    if gascan_tile is None:
        raise SceneConfigError("No Gas Can tile definition found")
    return duck_tile, gascan_tile


def place_objects(land_map, objects_map, rng, num_objects=NUM_OBJECTS):
    """
    Scatter markers over the object layer in place.

    Args:
        land_map: LandMap deciding duck (water) or gas can (land)
        objects_map: ObjectMap to paint
        rng: numpy Generator
        num_objects: Number of random picks (visible markers <= this)
    """
    duck_tile, gascan_tile = resolve_marker_templates(objects_map.tile_set)

    columns = objects_map.columns
    rows = objects_map.rows

    for _ in range(num_objects):
        column = int(rng.integers(0, columns))
        row = int(rng.integers(0, rows))

        ground_tile = land_map.has_tile(column, row)
        tile = gascan_tile if ground_tile else duck_tile

        objects_map.set_tile_group(tile, column, row)


# -------------------------------------------------
# Drawing
# -------------------------------------------------
def draw_markers_pygame(surface, objects_map, cam_x, cam_y, screen_width, screen_height):
    """
    Draw ducks and gas cans visible through the camera.

    Args:
        surface: Pygame surface
        objects_map: ObjectMap to draw
        cam_x, cam_y: Camera centre in scene coordinates
        screen_width, screen_height: Screen dimensions
    """
    import pygame

    size = objects_map.tile_size
    columns, rows = visible_cells(objects_map, cam_x, cam_y, screen_width, screen_height)
    for column in columns:
        for row in rows:
            marker = objects_map.marker_at(column, row)
            if marker == MarkerType.NONE:
                continue

            wx, wy = objects_map.cell_center(column, row)
            cx = int(wx - cam_x + screen_width / 2)
            cy = int(screen_height / 2 - (wy - cam_y))
            color = objects_map.color_for(marker)

            if marker == MarkerType.DUCK:
                # Body, head and beak
                body_r = int(size * 0.22)
                head_r = int(size * 0.12)
                pygame.draw.ellipse(surface, color,
                                    (cx - body_r, cy - body_r // 2, body_r * 2, body_r * 1.4))
                head = (cx + body_r // 2, cy - body_r // 2)
                pygame.draw.circle(surface, color, head, head_r)
                pygame.draw.circle(surface, (20, 20, 20), (head[0] + head_r // 3, head[1] - head_r // 3), 2)
                beak = [
                    (head[0] + head_r - 2, head[1] - 2),
                    (head[0] + head_r + head_r // 2 + 4, head[1] + 1),
                    (head[0] + head_r - 2, head[1] + 4),
                ]
                pygame.draw.polygon(surface, (245, 140, 30), beak)
            elif marker == MarkerType.GAS_CAN:
                # Can, cap and handle
                w = int(size * 0.34)
                h = int(size * 0.44)
                pygame.draw.rect(surface, color, (cx - w // 2, cy - h // 2, w, h), 0, 4)
                pygame.draw.rect(surface, (120, 20, 20), (cx - w // 2, cy - h // 2, w, h), 2, 4)
                pygame.draw.rect(surface, (60, 60, 60), (cx + w // 6, cy - h // 2 - 8, w // 4, 8), 0)
                pygame.draw.line(surface, (120, 20, 20),
                                 (cx - w // 3, cy - h // 2 - 4), (cx, cy - h // 2 - 4), 3)
