"""
RD Rescue HUD - Heads-Up Display Rendering

Manages all on-screen information display including:
- Telemetry (speed, speed cap, terrain, distance to target)
- Acceleration bar against the current cap
- Markers left (ducks and gas cans)
- Controls help and the all-collected message
"""

import pygame

from rescue_controller import LAND_MAX_SPEED


class RescueHUD:
    """Renders game HUD with telemetry, acceleration and marker counts."""

    def __init__(self, screen_width=1024, screen_height=768):
        """Initialize HUD renderer."""
        self.screen_width = screen_width
        self.screen_height = screen_height

        # Fonts
        self.font_large = pygame.font.SysFont("consolas", 24, bold=True)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_small = pygame.font.SysFont("consolas", 14)

        # Colors
        self.color_white = (255, 255, 255)
        self.color_yellow = (255, 255, 100)
        self.color_green = (100, 255, 100)
        self.color_orange = (255, 165, 0)
        self.color_red = (255, 100, 100)
        self.color_gray = (200, 200, 200)
        self.color_cyan = (100, 255, 255)

    def draw_telemetry(self, surface, info):
        """
        Draw telemetry panel (top-left).

        Args:
            surface: Pygame surface
            info: Dictionary from RescueWorld.get_info()
        """
        x, y = 10, 10
        line_height = 25

        # Terrain
        if info["on_land"]:
            text = self.font_medium.render("TERRAIN: LAND", True, self.color_green)
        else:
            text = self.font_medium.render("TERRAIN: WATER", True, self.color_cyan)
        surface.blit(text, (x, y))
        y += line_height

        # Speed, orange while still above the cap (just drove into water)
        speed_color = self.color_white if info["speed"] <= info["max_speed"] else self.color_orange
        text = self.font_medium.render(f"SPEED: {info['speed']:7.0f}", True, speed_color)
        surface.blit(text, (x, y))
        y += line_height

        text = self.font_medium.render(f"CAP:   {info['max_speed']:7.0f}", True, self.color_gray)
        surface.blit(text, (x, y))
        y += line_height

        text = self.font_medium.render(f"DIST:  {info['distance']:7.0f}", True, self.color_gray)
        surface.blit(text, (x, y))

    def draw_acceleration_bar(self, surface, acceleration, max_speed):
        """
        Draw acceleration bar with a tick at the current cap.

        Args:
            surface: Pygame surface
            acceleration: Current acceleration scalar
            max_speed: Current speed cap
        """
        x = 10
        y = self.screen_height - 120
        bar_width = 240
        bar_height = 18

        text = self.font_small.render("ACCEL", True, self.color_white)
        surface.blit(text, (x, y - 18))

        # Background
        pygame.draw.rect(surface, (40, 40, 40), (x, y, bar_width, bar_height), 0)
        pygame.draw.rect(surface, self.color_white, (x, y, bar_width, bar_height), 2)

        # Level, scaled against the land cap
        ratio = max(0.0, min(1.0, acceleration / LAND_MAX_SPEED))
        level_width = int((bar_width - 4) * ratio)
        if level_width > 0:
            level_color = self.color_green if acceleration <= max_speed else self.color_orange
            pygame.draw.rect(surface, level_color, (x + 2, y + 2, level_width, bar_height - 4), 0)

        # Cap marker
        cap_x = x + 2 + int((bar_width - 4) * min(1.0, max_speed / LAND_MAX_SPEED))
        pygame.draw.line(surface, self.color_red, (cap_x, y - 3), (cap_x, y + bar_height + 3), 2)

        value_text = self.font_small.render(f"{acceleration:.0f}", True, self.color_white)
        surface.blit(value_text, (x + bar_width + 10, y))

    def draw_markers_left(self, surface, ducks, gas_cans):
        """
        Draw marker counts (top-center).

        Args:
            surface: Pygame surface
            ducks: Ducks still on the map
            gas_cans: Gas cans still on the map
        """
        text = self.font_large.render(f"DUCKS: {ducks}   GAS: {gas_cans}", True, self.color_yellow)
        text_rect = text.get_rect(centerx=self.screen_width // 2, top=10)
        surface.blit(text, text_rect)

    def draw_controls_help(self, surface):
        """Draw controls help (bottom)."""
        y = self.screen_height - 40
        help_text = "CLICK/DRAG or TOUCH=steer  BACKSPACE=new map  ESC=quit"
        text = self.font_small.render(help_text, True, self.color_gray)
        text_rect = text.get_rect(centerx=self.screen_width // 2, top=y)
        surface.blit(text, text_rect)

    def draw_all_collected(self, surface):
        """Draw the message shown once every marker has been picked up."""
        text = self.font_large.render("ALL DUCKS RESCUED!", True, self.color_green)
        text_rect = text.get_rect(centerx=self.screen_width // 2, centery=self.screen_height // 2)
        surface.blit(text, text_rect)

        text = self.font_medium.render("Press BACKSPACE for a new map or ESC to quit", True, self.color_cyan)
        text_rect = text.get_rect(centerx=self.screen_width // 2, top=self.screen_height // 2 + 30)
        surface.blit(text, text_rect)

    def draw(self, surface, info):
        """Draw the full HUD for one frame."""
        self.draw_telemetry(surface, info)
        self.draw_acceleration_bar(surface, info["acceleration"], info["max_speed"])
        self.draw_markers_left(surface, info["ducks_left"], info["gas_cans_left"])
        self.draw_controls_help(surface)
        if info["ducks_left"] == 0 and info["gas_cans_left"] == 0:
            self.draw_all_collected(surface)
