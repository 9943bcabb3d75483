import logging
import os
from typing import Optional, TextIO

LOG_LEVEL_ENV = "INPUTWRITR_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

# Handler installed by configure_logging, reused on later calls
_handler: Optional[logging.Handler] = None


def configure_logging(default_level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stream handler to the ``inputwritr`` logger and set its level.

    INPUTWRITR_LOG_LEVEL (e.g. "debug") overrides ``default_level``. Calling
    this again only adjusts the level; no second handler is added.
    """
    global _handler
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)

    package_logger = logging.getLogger("inputwritr")
    package_logger.setLevel(level)
    if _handler is None or _handler not in package_logger.handlers:
        _handler = logging.StreamHandler(stream)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_handler)
    return package_logger
