"""
Standalone FanDial application.

Loads the configuration, sets up logging and i18n, and shows the dial in a
window of its own.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QVBoxLayout, QWidget

from fandial import constants
from fandial.utils.config import ConfigError, ConfigManager
from fandial.utils.helpers import setup_logging
from fandial.views.dial import FanDialWidget


def build_window(config, i18n) -> QWidget:
    """Creates the top-level window holding a single dial."""
    window = QWidget()
    window.setWindowTitle(i18n.WINDOW_TITLE)
    layout = QVBoxLayout(window)
    dial = FanDialWidget(config=config, i18n=i18n, parent=window)
    layout.addWidget(dial)
    window.resize(dial.sizeHint())
    return window


def main() -> int:
    logger = setup_logging()
    logger.info("Starting %s %s", constants.app.APP_NAME, constants.app.VERSION)

    app = QApplication(sys.argv)
    app.setApplicationName(constants.app.APP_NAME)
    app.setApplicationVersion(constants.app.VERSION)

    try:
        config = ConfigManager().load()
    except ConfigError as e:
        logger.error("Could not load configuration, using defaults: %s", e)
        config = constants.config.defaults.DEFAULT_CONFIG.copy()

    i18n = constants.i18n.get_i18n(config.get("language"))

    window = build_window(config, i18n)
    window.show()
    exit_code = app.exec()
    logging.getLogger(constants.app.APP_NAME).info("Exiting with code %s", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
