"""
Mini-map visualization for the RD Rescue map.

Displays a top-down overview of the whole tile map showing:
- Land and water
- Remaining ducks and gas cans
- The car
- Camera viewport indicator
"""

import pygame

from rescue_tilemap import MarkerType


class MiniMap:
    """
    Mini-map visualization showing the entire map.

    The mini-map displays a scaled-down view of the land layer with the
    markers, the car and the current camera viewport on top.
    """

    def __init__(self, x, y, width, height, world):
        """
        Initialize mini-map.

        Args:
            x: Screen X position (top-left corner)
            y: Screen Y position (top-left corner)
            width: Mini-map width in pixels
            height: Mini-map height in pixels
            world: RescueWorld instance
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.world = world

        # Colors
        self.bg_color = (20, 20, 30, 180)  # Semi-transparent dark blue
        self.border_color = (100, 100, 120)
        self.land_color = (112, 168, 82, 220)
        self.camera_color = (255, 255, 0, 60)  # Semi-transparent yellow
        self.car_color = (255, 80, 60)

        self._land_surface = None

    def world_to_minimap(self, world_x, world_y):
        """
        Convert scene coordinates to mini-map pixel coordinates.

        Args:
            world_x: Scene X coordinate
            world_y: Scene Y coordinate

        Returns:
            Tuple of (screen_x, screen_y) in mini-map coordinates
        """
        land_map = self.world.land_map

        # Normalize scene coordinates to [0, 1] range
        norm_x = world_x / land_map.width
        norm_y = world_y / land_map.height

        # Map to mini-map coordinates
        map_x = self.x + norm_x * self.width
        map_y = self.y + self.height - (norm_y * self.height)  # Flip Y axis

        return int(map_x), int(map_y)

    def draw(self, surface, camera_x, camera_y, screen_width, screen_height):
        """
        Draw the mini-map.

        Args:
            surface: Pygame surface to draw on
            camera_x: Main camera X position (scene coordinates)
            camera_y: Main camera Y position (scene coordinates)
            screen_width: Main screen width
            screen_height: Main screen height
        """
        minimap_surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        minimap_surface.fill(self.bg_color)

        # Land never changes during a session, render it once
        if self._land_surface is None:
            self._land_surface = self._render_land()
        minimap_surface.blit(self._land_surface, (0, 0))

        self._draw_markers(minimap_surface)
        self._draw_camera_viewport(minimap_surface, camera_x, camera_y, screen_width, screen_height)
        self._draw_car(minimap_surface)

        # Draw border
        pygame.draw.rect(minimap_surface, self.border_color,
                         (0, 0, self.width, self.height), 2)

        # Blit mini-map to main surface
        surface.blit(minimap_surface, (self.x, self.y))

    def _render_land(self):
        """Draw land cells onto a cached transparent surface."""
        land_map = self.world.land_map
        land_surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

        cell_w = self.width / land_map.columns
        cell_h = self.height / land_map.rows
        for column in range(land_map.columns):
            for row in range(land_map.rows):
                if land_map.has_tile(column, row):
                    rect = (int(column * cell_w), int(self.height - (row + 1) * cell_h),
                            int(cell_w) + 1, int(cell_h) + 1)
                    pygame.draw.rect(land_surface, self.land_color, rect, 0)
        return land_surface

    def _draw_markers(self, surface):
        """Draw remaining ducks and gas cans as dots."""
        objects_map = self.world.objects_map
        for marker in (MarkerType.DUCK, MarkerType.GAS_CAN):
            color = objects_map.color_for(marker)
            for column, row in objects_map.cells(marker):
                mx, my = self.world_to_minimap(*objects_map.cell_center(column, row))
                pygame.draw.circle(surface, color, (mx - self.x, my - self.y), 2, 0)

    def _draw_camera_viewport(self, surface, camera_x, camera_y, screen_width, screen_height):
        """Draw camera viewport indicator (shows what's visible on main screen)."""
        # Camera is centered, so calculate corners
        left = camera_x - screen_width / 2
        right = camera_x + screen_width / 2
        top = camera_y + screen_height / 2
        bottom = camera_y - screen_height / 2

        # Convert to mini-map coordinates
        tl_x, tl_y = self.world_to_minimap(left, top)
        br_x, br_y = self.world_to_minimap(right, bottom)

        # Adjust relative to mini-map surface
        tl_x -= self.x
        tl_y -= self.y
        br_x -= self.x
        br_y -= self.y

        width = max(1, br_x - tl_x)
        height = max(1, br_y - tl_y)

        viewport_surface = pygame.Surface((width, height), pygame.SRCALPHA)
        viewport_surface.fill(self.camera_color)
        surface.blit(viewport_surface, (tl_x, tl_y))

        pygame.draw.rect(surface, (255, 255, 0), (tl_x, tl_y, width, height), 1)

    def _draw_car(self, surface):
        cx, cy = self.world.car.position
        mx, my = self.world_to_minimap(cx, cy)
        pygame.draw.circle(surface, self.car_color, (mx - self.x, my - self.y), 4, 0)
