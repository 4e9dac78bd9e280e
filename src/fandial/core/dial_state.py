"""
State and geometry of the fan speed dial.

Holds the active speed and the last size reported by the host, and derives
the dial radius and the positions of the indicator and labels from them.
Nothing in here knows about Qt.
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from fandial import constants
from fandial.core.fan_speed import FanSpeed, INITIAL_SPEED

logger = logging.getLogger("FanDial.DialState")


def compute_radius(width: float, height: float) -> float:
    """Dial radius for an allocated size: 80% of half the smaller side."""
    return min(width, height) / 2.0 * constants.dial.RADIUS_SCALE


def position_for_speed(speed: FanSpeed, radial_distance: float, width: int, height: int) -> Tuple[float, float]:
    """
    Screen coordinates of a speed's slot on a circle around the widget center.

    The angle starts at 9/8 pi for OFF and advances a quarter pi per level.
    The center is the integer half of the allocated size.
    """
    angle = constants.dial.START_ANGLE + speed.ordinal * constants.dial.ANGLE_STEP
    x = radial_distance * math.cos(angle) + width // 2
    y = radial_distance * math.sin(angle) + height // 2
    return (x, y)


@dataclass(frozen=True)
class DialSnapshot:
    """Immutable view of the dial for painting."""
    speed: FanSpeed
    radius: float
    width: int
    height: int

    def position_for_speed(self, speed: FanSpeed, radial_distance: float) -> Tuple[float, float]:
        return position_for_speed(speed, radial_distance, self.width, self.height)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.width // 2, self.height // 2)


class DialState:
    """
    Holds the current speed and size-derived geometry.

    Responsibilities:
      - Track the speed, advancing it one step per activation
      - Recompute the radius whenever the host reports a new size
      - Provide immutable snapshots for painting
    """

    def __init__(self) -> None:
        self._speed: FanSpeed = INITIAL_SPEED
        self._width: int = 0
        self._height: int = 0
        self._radius: float = 0.0

    @property
    def speed(self) -> FanSpeed:
        return self._speed

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def center(self) -> Tuple[int, int]:
        return (self._width // 2, self._height // 2)

    def resize(self, width: int, height: int) -> None:
        # Zero or negative sizes pass through; they just yield a radius nothing visible is drawn with.
        self._width = width
        self._height = height
        self._radius = compute_radius(width, height)
        logger.debug("Dial resized to %sx%s, radius %.2f", width, height, self._radius)

    def advance(self) -> FanSpeed:
        previous = self._speed
        self._speed = previous.next()
        logger.debug("Fan speed advanced: %s -> %s", previous, self._speed)
        return self._speed

    def position_for_speed(self, speed: FanSpeed, radial_distance: float) -> Tuple[float, float]:
        return position_for_speed(speed, radial_distance, self._width, self._height)

    def snapshot(self) -> DialSnapshot:
        return DialSnapshot(
            speed=self._speed,
            radius=self._radius,
            width=self._width,
            height=self._height,
        )
