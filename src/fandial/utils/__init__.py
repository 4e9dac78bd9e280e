"""
Utilities submodule for FanDial.

Provides configuration management, logging setup and the dial renderer.
"""

from .config import ConfigManager, ConfigError
from .helpers import setup_logging, get_app_data_path

__all__ = ["ConfigManager", "ConfigError", "setup_logging", "get_app_data_path"]
