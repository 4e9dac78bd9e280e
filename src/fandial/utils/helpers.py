"""
Helper utilities for FanDial.

Provides app-data directory management and logging setup.
"""

import os
import sys
import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from fandial import constants

# Thread lock for logging setup
_logging_lock: threading.Lock = threading.Lock()


def get_app_data_path() -> Path:
    """
    Retrieve the application data directory, creating it if needed.

    Uses %APPDATA% where it is set and the home directory otherwise.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    appdata: Optional[str] = os.getenv("APPDATA")
    if not appdata:
        appdata = os.path.expanduser("~")
        logger.debug("APPDATA environment variable not set, using home directory: %s", appdata)
    path: Path = Path(appdata) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        logger.error("Permission denied creating app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e
    return path


def is_production() -> bool:
    return os.environ.get(constants.app.ENV_VAR_PROD_MODE, "").lower() == "true"


def setup_logging() -> logging.Logger:
    """
    Configure logging with a rotating file handler and a console handler, once per process.
    """
    logger: logging.Logger = logging.getLogger(constants.app.APP_NAME)
    with _logging_lock:
        if logger.handlers:
            return logger

        production = is_production()
        root_log_level = constants.logs.PRODUCTION_LOG_LEVEL if production else logging.DEBUG
        logger.setLevel(root_log_level)

        log_formatter = logging.Formatter(
            fmt=constants.logs.LOG_FORMAT, datefmt=constants.logs.LOG_DATE_FORMAT
        )

        file_log_level = constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.FILE_LOG_LEVEL
        try:
            log_file_path: Path = get_app_data_path() / constants.logs.LOG_FILENAME
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding='utf-8',
                delay=True,
            )
            file_handler.setFormatter(log_formatter)
            file_handler.setLevel(file_log_level)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"CRITICAL: Failed to set up file logging: {e}. File logging will be disabled.", file=sys.stderr)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(log_formatter)
        console_handler.setLevel(constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.CONSOLE_LOG_LEVEL)
        logger.addHandler(console_handler)

        if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            logger.info("File logging level: %s", logging.getLevelName(file_log_level))
        else:
            logger.warning("File logging is NOT active due to previous errors.")
        logger.info("Application logging initialized. Production mode: %s. Root Log Level: %s.",
                    production, logging.getLevelName(root_log_level))

    return logger
