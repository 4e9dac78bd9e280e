"""
Dial rendering for FanDial.

Turns a DialSnapshot into an ordered sequence of canvas calls: the dial disc,
the indicator dot for the active speed, then one label per speed. The
renderer holds no drawing state between calls, so every render is a full
redraw of the snapshot it is given.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from fandial import constants
from fandial.core.dial_state import DialSnapshot
from fandial.core.fan_colors import FanColors
from fandial.core.fan_speed import FanSpeed, FAN_SPEEDS
from fandial.core.interfaces import DialCanvas, LabelFont

logger = logging.getLogger("FanDial.DialRenderer")


@dataclass(frozen=True)
class DialRenderConfig:
    """A snapshot of all configuration relevant to rendering."""
    colors: FanColors = field(default_factory=FanColors)
    font: LabelFont = field(default_factory=LabelFont)
    indicator_color: Any = constants.color.INDICATOR_COLOR
    label_color: Any = constants.color.LABEL_COLOR

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'DialRenderConfig':
        """Creates a DialRenderConfig from a standard application config dictionary."""
        try:
            pixel_size = int(config.get('label_font_size', constants.config.defaults.DEFAULT_LABEL_FONT_SIZE))
            return cls(
                colors=FanColors.from_config(config),
                font=LabelFont(pixel_size=pixel_size),
            )
        except (TypeError, ValueError) as e:
            logger.error("Failed to create DialRenderConfig: %s", e)
            raise ValueError("Invalid rendering configuration") from e


class DialRenderer:
    """
    Draws the fan dial onto any DialCanvas.
    """

    def __init__(self, config: DialRenderConfig, i18n) -> None:
        self.config = config
        self.i18n = i18n

    def fill_color(self, speed: FanSpeed) -> Any:
        """Dial fill for a speed: gray when off, otherwise the configured color."""
        return self.config.colors.fill_for(speed)

    def label_for(self, speed: FanSpeed) -> str:
        return getattr(self.i18n, speed.label_key)

    def render(self, canvas: DialCanvas, snapshot: DialSnapshot) -> None:
        """Draws disc, indicator and labels for the snapshot, in that order."""
        radius = snapshot.radius
        center_x, center_y = snapshot.center

        self._draw_circle(canvas, center_x, center_y, radius, self.fill_color(snapshot.speed))

        marker_distance = radius + constants.dial.RADIUS_OFFSET_INDICATOR
        marker_x, marker_y = snapshot.position_for_speed(snapshot.speed, marker_distance)
        marker_radius = radius / constants.dial.INDICATOR_RADIUS_DIVISOR
        self._draw_circle(canvas, marker_x, marker_y, marker_radius, self.config.indicator_color)

        label_distance = radius + constants.dial.RADIUS_OFFSET_LABEL
        for speed in FAN_SPEEDS:
            label_x, label_y = snapshot.position_for_speed(speed, label_distance)
            canvas.draw_centered_text(label_x, label_y, self.label_for(speed), self.config.label_color, self.config.font)

    @staticmethod
    def _draw_circle(canvas: DialCanvas, x: float, y: float, radius: float, color: Any) -> None:
        # A degenerate dial (zero or negative size) draws nothing rather than failing.
        if radius <= 0:
            return
        canvas.draw_filled_circle(x, y, radius, color)
