"""
Defines the named colors used to paint the dial.
"""
import re
from typing import Final

_HEX_COLOR = re.compile(r"#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")

class ColorConstants:
    """Defines a static palette of named colors."""
    BLACK: Final[str] = "#000000"
    GRAY: Final[str] = "#888888"

    # Fully transparent, in #AARRGGBB form. Stands in for a fan color nobody configured.
    UNSET: Final[str] = "#00000000"

    # Fill of the dial while the fan is off. Not configurable.
    OFF_COLOR: Final[str] = GRAY
    INDICATOR_COLOR: Final[str] = BLACK
    LABEL_COLOR: Final[str] = BLACK

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not (isinstance(value, str) and _HEX_COLOR.fullmatch(value)):
                    raise ValueError(f"Color '{attr_name}' must be a #RRGGBB or #AARRGGBB hex string.")

# Singleton instance for easy access
color = ColorConstants()
