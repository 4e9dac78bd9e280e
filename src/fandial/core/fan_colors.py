"""
Fill colors of the dial for each fan speed.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from fandial import constants
from fandial.core.fan_speed import FanSpeed, OFF, LOW, MEDIUM, HIGH


@dataclass(frozen=True)
class FanColors:
    """
    The three configured fill colors. Immutable once built.

    Values are passed to the canvas untouched: hex strings such as "#00FF00"
    or integer RGB values such as 0x00FF00 both work. The OFF fill is always
    gray and cannot be configured.
    """
    low: Any = constants.color.UNSET
    medium: Any = constants.color.UNSET
    high: Any = constants.color.UNSET

    def fill_for(self, speed: FanSpeed) -> Any:
        """Returns the dial fill color for a speed, even if it is the unset sentinel."""
        if speed == OFF:
            return constants.color.OFF_COLOR
        if speed == LOW:
            return self.low
        if speed == MEDIUM:
            return self.medium
        if speed == HIGH:
            return self.high
        raise ValueError(f"Unknown fan speed: {speed!r}")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FanColors":
        """Builds colors from the fanColor1..fanColor3 styling attributes."""
        low_key, medium_key, high_key = constants.config.defaults.COLOR_KEYS
        return configure(config.get(low_key), config.get(medium_key), config.get(high_key))


def configure(color_low: Optional[Any] = None,
              color_medium: Optional[Any] = None,
              color_high: Optional[Any] = None) -> FanColors:
    """Stores the three fan colors; any color left out renders as the unset sentinel."""
    unset = constants.color.UNSET
    return FanColors(
        low=unset if color_low is None else color_low,
        medium=unset if color_medium is None else color_medium,
        high=unset if color_high is None else color_high,
    )
