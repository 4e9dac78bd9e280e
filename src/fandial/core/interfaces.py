"""
Boundaries between the dial core and the framework hosting it.

The core only talks to these protocols, so it can be driven by a Qt widget
in the application and by plain fakes in tests.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from fandial import constants


@dataclass(frozen=True)
class LabelFont:
    """Toolkit-neutral description of the label font."""
    family: str = constants.fonts.LABEL_FONT_FAMILY
    pixel_size: int = constants.fonts.LABEL_PIXEL_SIZE
    weight: int = constants.fonts.LABEL_WEIGHT


class DialCanvas(Protocol):
    """2D drawing primitives the renderer needs."""

    def draw_filled_circle(self, x: float, y: float, radius: float, color: Any) -> None:
        ...

    def draw_centered_text(self, x: float, y: float, text: str, color: Any, font: LabelFont) -> None:
        """Draws text horizontally centered on x, with its baseline at y."""
        ...


class DialHost(Protocol):
    """Services the hosting view provides to the dial."""

    def request_redraw(self) -> None:
        """Schedules a repaint; the host calls render() later."""
        ...

    def set_accessible_description(self, text: str) -> None:
        ...
