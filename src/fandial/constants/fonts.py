"""
Constants for the font used to draw the speed labels.
"""
from typing import Final

class FontConstants:
    """Defines label font family, pixel sizes and weight."""
    LABEL_FONT_FAMILY: Final[str] = "Sans Serif"
    LABEL_PIXEL_SIZE: Final[int] = 18
    LABEL_PIXEL_SIZE_MIN: Final[int] = 6
    LABEL_PIXEL_SIZE_MAX: Final[int] = 72

    WEIGHT_BOLD: Final[int] = 700
    LABEL_WEIGHT: Final[int] = WEIGHT_BOLD

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.LABEL_PIXEL_SIZE_MAX < self.LABEL_PIXEL_SIZE_MIN:
            raise ValueError("LABEL_PIXEL_SIZE_MAX must be >= LABEL_PIXEL_SIZE_MIN")
        if not (self.LABEL_PIXEL_SIZE_MIN <= self.LABEL_PIXEL_SIZE <= self.LABEL_PIXEL_SIZE_MAX):
            raise ValueError("LABEL_PIXEL_SIZE must lie within the allowed range")
        if not 1 <= self.LABEL_WEIGHT <= 1000:
            raise ValueError("LABEL_WEIGHT must be between 1 and 1000")

# Singleton instance for easy access
fonts = FontConstants()
