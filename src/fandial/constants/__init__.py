"""
Provides centralized, immutable constants for the FanDial application.

Each constant group is exposed as a singleton that validates itself on import,
so an inconsistent definition fails fast instead of surfacing as a drawing bug.

Usage:
    from fandial import constants

    # Geometry of the dial
    radius = min(width, height) / 2 * constants.dial.RADIUS_SCALE

    # A translated label
    print(constants.i18n.get_i18n().FAN_LOW)
"""

from .app import app
from .color import color
from .config import config
from .dial import dial
from .fonts import fonts
from .logs import logs
from . import i18n

__all__ = [
    "app",
    "color",
    "config",
    "dial",
    "fonts",
    "i18n",
    "logs",
]
