"""Logging configuration shared by the app and the engine."""

import logging
import os
from typing import Optional

from config.defaults import LOG_LEVEL, LOG_LEVEL_ENV_VAR, LOG_FORMAT

_HANDLER_NAME = "attendance-console"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the root logger once and set its level.

    Returns the root logger; modules log under their own __name__ loggers,
    which propagate to it.

    Resolution order for the level: argument, environment variable, default.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for h in root.handlers:
        if h.get_name() == _HANDLER_NAME:
            h.setLevel(log_level)

    root.debug("Logging configured at %s", level_name)
    return root
