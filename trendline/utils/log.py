from __future__ import annotations

import logging
import sys

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """
    Attach a console handler to the ``trendline`` logger.

    Safe to call more than once; only the first call installs a handler,
    later calls just adjust the level.
    """
    global _LOGGER_CONFIGURED

    logger = logging.getLogger("trendline")
    logger.setLevel(level)

    if _LOGGER_CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True
