from __future__ import annotations
import logging
from typing import Optional

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for the host process.

    `level` is a level name such as "INFO" (usually `HostSettings.log_level`).
    Unknown or missing names fall back to WARNING. Returns a module logger
    for the caller.
    """
    numeric = DEFAULT_LOG_LEVEL
    if level:
        candidate = getattr(logging, str(level).upper(), None)
        if isinstance(candidate, int):
            numeric = candidate

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.info("Log level set to: %s", logging.getLevelName(numeric))
    return logger
