"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any, Tuple

from .color import color
from .fonts import fonts

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_NUMERIC: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_COLOR: Final[str] = "Invalid color '{value}' for {key}, resetting to default '{default}'"
    INVALID_LANGUAGE: Final[str] = "Unsupported language '{value}', falling back to system locale detection"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all application settings."""
    # Styling attribute names for the LOW, MEDIUM and HIGH fill colors, in that order.
    COLOR_KEYS: Final[Tuple[str, str, str]] = ("fanColor1", "fanColor2", "fanColor3")

    DEFAULT_FAN_COLOR: Final[str] = color.UNSET
    DEFAULT_LABEL_FONT_SIZE: Final[int] = fonts.LABEL_PIXEL_SIZE

    CONFIG_FILENAME: Final[str] = "FanDial_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "fanColor1": DEFAULT_FAN_COLOR,
        "fanColor2": DEFAULT_FAN_COLOR,
        "fanColor3": DEFAULT_FAN_COLOR,
        "language": None,
        "label_font_size": DEFAULT_LABEL_FONT_SIZE,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")
        if len(set(self.COLOR_KEYS)) != 3:
            raise ValueError("COLOR_KEYS must name three distinct attributes")

        actual_keys = set(self.DEFAULT_CONFIG.keys())
        expected_keys = set(self.COLOR_KEYS) | {"language", "label_font_size"}
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
