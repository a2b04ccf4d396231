"""Logging configuration"""

import logging
import sys
from typing import Optional

from flask.logging import default_handler

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(app, format_string: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler with consistent formatting to the app logger.

    Level comes from the LOG_LEVEL config key. Calling this twice on the
    same app does not add a second handler.
    """
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = app.logger
    logger.setLevel(level)
    logger.removeHandler(default_handler)

    if any(getattr(h, "_portfolio_handler", False) for h in logger.handlers):
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler._portfolio_handler = True

    logger.addHandler(handler)
    return logger
