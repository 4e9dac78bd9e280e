"""
The fan speed levels the dial cycles through.

The order is spelled out in `FAN_SPEEDS` rather than taken from enum
definition order, and the wrap from HIGH back to OFF is an explicit modulo.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FanSpeed:
    """One discrete speed level and the i18n key of its label."""
    name: str
    ordinal: int
    label_key: str

    def next(self) -> "FanSpeed":
        """Returns the successor level; HIGH wraps to OFF."""
        return FAN_SPEEDS[(self.ordinal + 1) % len(FAN_SPEEDS)]

    def __str__(self) -> str:
        return self.name


OFF = FanSpeed("OFF", 0, "FAN_OFF")
LOW = FanSpeed("LOW", 1, "FAN_LOW")
MEDIUM = FanSpeed("MEDIUM", 2, "FAN_MEDIUM")
HIGH = FanSpeed("HIGH", 3, "FAN_HIGH")

FAN_SPEEDS: Tuple[FanSpeed, ...] = (OFF, LOW, MEDIUM, HIGH)

INITIAL_SPEED: FanSpeed = OFF
