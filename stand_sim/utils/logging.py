"""Logging setup for the stand_sim package loggers."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from stand_sim.config import StandConfig

PACKAGE_LOGGER = "stand_sim"


def setup_logging(config: StandConfig, stream: TextIO | None = None) -> logging.Logger:
    """Attach one handler to the ``stand_sim`` logger at ``config.log_level``.

    Output goes to stderr so ``--json`` keeps stdout parseable.  Calling this
    again replaces the handler instead of stacking another one.  The root
    logger is left alone.
    """
    numeric_level = getattr(logging, config.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt=f"%(asctime)s [%(levelname)-5s] {config.stand_name} %(name)-30s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger
