"""
Controller for the fan speed dial.

Exposes the three entry points a host wires to its own events: a resize
handler, an activation handler and a render function. The host supplies a
DialHost for redraw requests and accessibility updates; drawing goes through
whatever DialCanvas the host passes to render().
"""

import logging
from typing import Any, Callable, Optional

from fandial import constants
from fandial.core.dial_state import DialState
from fandial.core.fan_speed import FanSpeed
from fandial.core.interfaces import DialCanvas, DialHost
from fandial.utils.dial_renderer import DialRenderer, DialRenderConfig


class DialController:
    """
    Owns the dial state and reacts to host events.
    """

    def __init__(self, host: DialHost, i18n, render_config: Optional[DialRenderConfig] = None) -> None:
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self.host = host
        self.i18n = i18n
        self.state = DialState()
        self.renderer = DialRenderer(render_config or DialRenderConfig(), i18n)

    @property
    def speed(self) -> FanSpeed:
        return self.state.speed

    @property
    def radius(self) -> float:
        return self.state.radius

    def current_label(self) -> str:
        return self.renderer.label_for(self.state.speed)

    def fill_color(self) -> Any:
        """Fill color the next render will use for the dial disc."""
        return self.renderer.fill_color(self.state.speed)

    def on_resize(self, width: int, height: int) -> None:
        """Recomputes the geometry for a newly allocated size."""
        self.state.resize(width, height)

    def on_activate(self, base_handler: Optional[Callable[[], bool]] = None) -> bool:
        """
        Handles a click, tap or keyboard activation.

        The base handler, if any, gets the event first; when it reports the
        event as consumed the speed stays as it is. Otherwise the dial steps to
        the next speed, publishes the new label as its accessible description
        and asks the host for a redraw.

        Returns:
            bool: Always True, the activation is handled either way.
        """
        if base_handler is not None and base_handler():
            self.logger.debug("Activation consumed by base handler; speed stays %s.", self.state.speed)
            return True

        new_speed = self.state.advance()
        self.host.set_accessible_description(self.renderer.label_for(new_speed))
        self.host.request_redraw()
        return True

    def render(self, canvas: DialCanvas) -> None:
        """Draws the current state onto the canvas."""
        self.renderer.render(canvas, self.state.snapshot())
