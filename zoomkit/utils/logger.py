import logging
import sys
from typing import Optional

from zoomkit.config.settings import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def create_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Create a console logger for a Zoom client component.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured ZOOM_LOG_LEVEL.

    Returns:
        Configured logger. Calling this twice with the same name does not
        attach a second handler.
    """
    if log_level is None:
        log_level = get_settings().log_level

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)
        logger.propagate = False

    return logger
