from __future__ import annotations

import logging
import sys

ROOT = "argus"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logger(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the ``argus`` logger tree; later calls only change the level."""
    logger = logging.getLogger(ROOT)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(component: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT}.{component}")
