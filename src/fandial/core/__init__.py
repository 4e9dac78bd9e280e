"""
Core submodule for FanDial.

Holds the toolkit-independent model of the dial: the speed cycle, the
configured colors and the size-derived geometry. The DialController that
ties them to a host lives in `fandial.core.dial_controller`.
"""

from fandial.core.fan_speed import FanSpeed, FAN_SPEEDS, OFF, LOW, MEDIUM, HIGH
from fandial.core.fan_colors import FanColors, configure
from fandial.core.dial_state import DialState, DialSnapshot, compute_radius, position_for_speed

__all__ = [
    "FanSpeed",
    "FAN_SPEEDS",
    "OFF",
    "LOW",
    "MEDIUM",
    "HIGH",
    "FanColors",
    "configure",
    "DialState",
    "DialSnapshot",
    "compute_radius",
    "position_for_speed",
]
