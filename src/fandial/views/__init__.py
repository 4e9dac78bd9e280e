"""
Views submodule for FanDial.

Contains the PyQt6 widget hosting the fan speed dial.
"""

from .dial import FanDialWidget, QPainterCanvas

__all__ = ["FanDialWidget", "QPainterCanvas"]
