"""Logging utilities."""

import logging
from typing import Optional

from georegions.settings.base import settings

EXCLUDED_LOGGERS: tuple[str, ...] = ("pycountry",)


def setup_logging(
    name: str, log_level: Optional[str] = None, dev_mode: Optional[bool] = None
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        name (str): The name of the logger.
        log_level (Optional[str], optional): The log level. Defaults to `settings.log_level`.
        dev_mode (Optional[bool], optional): Whether to enable development mode. Defaults to
            `settings.dev_mode`.

    Returns:
        logging.Logger: The configured logger.

    """
    log_level = log_level or settings.log_level
    dev_mode = settings.dev_mode if dev_mode is None else dev_mode

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if dev_mode or log_level == "DEBUG":
        logging.basicConfig(level=log_level)
    else:
        for excluded in EXCLUDED_LOGGERS:
            logging.getLogger(excluded).setLevel(logging.WARNING)

    return logger
