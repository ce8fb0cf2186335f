import logging
import os

LOG_LEVEL_ENV = "PENUMBRA_LOG_LEVEL"


def level_for_verbosity(verbosity: int) -> int:
    """Map a count of -v flags to a log level: none is WARNING, -v INFO, -vv DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> int:
    """Configure the root logger for command-line use and return the chosen level.

    PENUMBRA_LOG_LEVEL (e.g. "debug") wins over the verbosity count when it
    names a real level.
    """
    level = level_for_verbosity(verbosity)
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        named = logging.getLevelName(level_name.upper())
        if isinstance(named, int):
            level = named
        else:
            logging.getLogger(__name__).warning("Ignoring unknown %s=%r", LOG_LEVEL_ENV, level_name)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    return level
