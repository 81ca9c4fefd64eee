"""
Package-wide logger.

Library code never installs handlers; scripts call `configure_logging`.
"""

from __future__ import annotations

import logging

from .config import config

LOGGER_NAME = "activity_selection"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
if config.debug:
    logger.setLevel(logging.DEBUG)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose or config.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(level)
