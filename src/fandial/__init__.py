"""
FanDial: a clickable dial that cycles a fan through Off, Low, Medium and High.
"""

__version__ = "0.1.0"
