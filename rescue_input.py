"""
RD Rescue Input - Pointer and Touch Targets

Turns pygame pointer events into target points in scene coordinates.
Only the first finger on the screen steers; extra fingers are ignored
until it lifts.
"""

import pygame

from rescue_car import screen_to_world


class TouchTracker:
    """Maps press/drag events to scene points, following one finger."""

    def __init__(self):
        self.primary_finger = None

    def handle(self, event, cam_x, cam_y, screen_width, screen_height):
        """
        Scene point for a press or drag event.

        Args:
            event: pygame event
            cam_x, cam_y: Camera centre in scene coordinates
            screen_width, screen_height: Screen dimensions

        Returns:
            (x, y) scene point, or None if the event does not move the target
        """
        pos = None

        if event.type == pygame.MOUSEBUTTONDOWN:
            # Mouse events synthesised from touches are handled as fingers
            if event.button == 1 and not getattr(event, "touch", False):
                pos = event.pos
        elif event.type == pygame.MOUSEMOTION:
            if event.buttons[0] and not getattr(event, "touch", False):
                pos = event.pos
        elif event.type == pygame.FINGERDOWN:
            if self.primary_finger is None:
                self.primary_finger = event.finger_id
            if event.finger_id == self.primary_finger:
                pos = (event.x * screen_width, event.y * screen_height)
        elif event.type == pygame.FINGERMOTION:
            if event.finger_id == self.primary_finger:
                pos = (event.x * screen_width, event.y * screen_height)
        elif event.type == pygame.FINGERUP:
            if event.finger_id == self.primary_finger:
                self.primary_finger = None

        if pos is None:
            return None
        return screen_to_world(pos, cam_x, screen_width, screen_height, cam_y)

    def target_from_events(self, events, cam_x, cam_y, screen_width, screen_height):
        """Latest target point in a batch of events, or None."""
        target = None
        for event in events:
            point = self.handle(event, cam_x, cam_y, screen_width, screen_height)
            if point is not None:
                target = point
        return target
