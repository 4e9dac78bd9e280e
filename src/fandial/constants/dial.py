"""
Geometry constants for laying out the fan speed dial.
"""
import math
from typing import Final

class DialConstants:
    """Defines the proportions and angles used to draw the dial."""
    # The dial fills 80% of half the smaller side, leaving room for the labels.
    RADIUS_SCALE: Final[float] = 0.8

    # Signed offsets added to the dial radius. Negative is inside the edge.
    RADIUS_OFFSET_INDICATOR: Final[int] = -35
    RADIUS_OFFSET_LABEL: Final[int] = 30

    # Indicator dot radius is the dial radius divided by this.
    INDICATOR_RADIUS_DIVISOR: Final[int] = 12

    # Radians. OFF sits at 202.5 degrees (lower left), each level 45 degrees further clockwise.
    START_ANGLE: Final[float] = math.pi * (9 / 8.0)
    ANGLE_STEP: Final[float] = math.pi / 4

    DEFAULT_SIZE: Final[int] = 300
    MINIMUM_SIZE: Final[int] = 120

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not (0.0 < self.RADIUS_SCALE <= 1.0):
            raise ValueError("RADIUS_SCALE must be between 0 and 1")
        if self.RADIUS_OFFSET_INDICATOR >= 0:
            raise ValueError("RADIUS_OFFSET_INDICATOR must be negative so the indicator sits inside the dial")
        if self.RADIUS_OFFSET_LABEL <= 0:
            raise ValueError("RADIUS_OFFSET_LABEL must be positive so labels sit outside the dial")
        if self.INDICATOR_RADIUS_DIVISOR <= 0:
            raise ValueError("INDICATOR_RADIUS_DIVISOR must be positive")
        if self.MINIMUM_SIZE > self.DEFAULT_SIZE:
            raise ValueError("MINIMUM_SIZE must be <= DEFAULT_SIZE")

# Singleton instance for easy access
dial = DialConstants()
