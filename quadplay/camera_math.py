"""Angle helpers and the state of a mouse-wheel controlled 2D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass

FULL_TURN = 360.0
ROTATION_STEP = 10.0
ZOOM_FACTOR = 1.1
SMOOTHING = 0.1


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation in degrees from a0 to a1."""
    da = math.fmod(a1 - a0, FULL_TURN)
    return math.fmod(2.0 * da, FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from a0 towards a1 along the shortest way round."""
    return a0 + short_angle_dist(a0, a1) * t


@dataclass
class CameraControls:
    """Camera parameters driven by keys and the mouse wheel."""

    target: tuple[float, float] = (0.0, 0.0)
    offset: tuple[float, float] = (0.0, 0.0)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0

    def apply_wheel(self, y: float, zoom_modifier: bool = False) -> None:
        """Zoom with the modifier held, otherwise rotate in 10 degree steps."""
        if y == 0.0:
            return
        if zoom_modifier:
            self.zoom *= ZOOM_FACTOR**y
            return
        self.rotation += ROTATION_STEP * y
        if self.rotation >= FULL_TURN:
            self.rotation -= FULL_TURN
        elif self.rotation < 0.0:
            self.rotation += FULL_TURN

    def smooth(self) -> float:
        """Ease the displayed rotation towards the target rotation."""
        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, SMOOTHING)
        return self.smooth_rotation