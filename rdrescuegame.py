"""
RD Rescue - Rubber Duck Rescue Driving Game

A single-scene top-down driving game with:
- Procedurally generated islands and lakes on a tile map
- A car that chases the mouse pointer or touch location
- Full speed on land, slow going on water
- Ducks to rescue on the water and gas cans to pick up on land
- Camera scrolling to follow the car and a mini-map of the whole map

Usage:
    python rdrescuegame.py                      # Default lagoon map
    python rdrescuegame.py --map archipelago    # Another map preset
    python rdrescuegame.py --seed 42 --objects 100
    python rdrescuegame.py --mute               # No sound
"""

import argparse
import pygame

from mini_map import MiniMap
from rescue_audio import NullCueSink, PygameCueSink
from rescue_hud import RescueHUD
from rescue_input import TouchTracker
from rescue_tilemap import MarkerType
from rescue_world import MAP_PRESETS, RescueWorld, follow_camera

# -------------------------------------------------
# Config
# -------------------------------------------------
SCREEN_WIDTH, SCREEN_HEIGHT = 1280, 800
TARGET_FPS = 60
TIME_STEP = 1.0 / TARGET_FPS

MINIMAP_WIDTH, MINIMAP_HEIGHT = 240, 160

BACKGROUND_COLOR = (20, 60, 110)

MARKER_NAMES = {
    MarkerType.DUCK: "duck",
    MarkerType.GAS_CAN: "gas can",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="RD Rescue driving game")
    parser.add_argument('--map', type=str, default='lagoon', choices=sorted(MAP_PRESETS),
                        help='Map preset')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (random map if omitted)')
    parser.add_argument('--objects', type=int, default=None,
                        help='Number of markers to scatter (preset default if omitted)')
    parser.add_argument('--mute', action='store_true', help='Disable sound cues')
    parser.add_argument('--frames', type=int, default=0,
                        help='Quit after this many frames (0 = run until closed)')
    return parser.parse_args(argv)


def create_cue_sink(mute):
    """Sound cue sink, silent when muted or when there is no audio device."""
    if mute:
        return NullCueSink()
    try:
        return PygameCueSink()
    except pygame.error as exc:
        print(f"Audio unavailable ({exc}), playing without sound")
        return NullCueSink()


def print_world_info(world):
    info = world.get_info()
    print(f"Driving on {info['map']}")
    print(f"   Size: {info['columns']}x{info['rows']} tiles")
    print(f"   Land: {info['land_fraction'] * 100:.0f}%")
    print(f"   Seed: {info['seed'] if info['seed'] is not None else 'random'}")
    print(f"   Markers: {info['ducks_left']} ducks, {info['gas_cans_left']} gas cans "
          f"(from {world.num_objects} picks)")


# -------------------------------------------------
# Main Game
# -------------------------------------------------
def main(argv=None):
    args = parse_args(argv)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("RD Rescue")
    clock = pygame.time.Clock()

    cue_sink = create_cue_sink(args.mute)
    hud = RescueHUD(SCREEN_WIDTH, SCREEN_HEIGHT)
    touches = TouchTracker()

    world = None
    minimap = None
    games_played = 0

    def new_game():
        nonlocal world, minimap, games_played
        seed = None if args.seed is None else args.seed + games_played
        world = RescueWorld(args.map, seed=seed, num_objects=args.objects, cue_sink=cue_sink)
        minimap = MiniMap(SCREEN_WIDTH - MINIMAP_WIDTH - 10, SCREEN_HEIGHT - MINIMAP_HEIGHT - 10,
                          MINIMAP_WIDTH, MINIMAP_HEIGHT, world)
        games_played += 1
        print_world_info(world)

    new_game()

    running = True
    while running:
        land_map = world.land_map
        cam_x, cam_y = follow_camera(world.car.position, land_map.width, land_map.height,
                                     SCREEN_WIDTH, SCREEN_HEIGHT)

        # Event handling
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_BACKSPACE:
                    new_game()

        target = touches.target_from_events(events, cam_x, cam_y, SCREEN_WIDTH, SCREEN_HEIGHT)
        if target is not None:
            world.touch(target)

        # Sensing -> physics -> steering
        pickups = world.frame(pygame.time.get_ticks() / 1000.0, TIME_STEP)
        for marker, column, row in pickups:
            print(f"Picked up {MARKER_NAMES[marker]} at ({column}, {row})")

        # Rendering
        cam_x, cam_y = follow_camera(world.car.position, land_map.width, land_map.height,
                                     SCREEN_WIDTH, SCREEN_HEIGHT)
        screen.fill(BACKGROUND_COLOR)
        world.draw_terrain(screen, cam_x, cam_y, SCREEN_WIDTH, SCREEN_HEIGHT)
        world.draw_objects(screen, cam_x, cam_y, SCREEN_WIDTH, SCREEN_HEIGHT)
        hud.draw(screen, world.get_info())
        minimap.draw(screen, cam_x, cam_y, SCREEN_WIDTH, SCREEN_HEIGHT)

        pygame.display.flip()
        clock.tick(TARGET_FPS)

        if args.frames and world.frame_count >= args.frames:
            running = False

    pygame.quit()


if __name__ == "__main__":
    main()
