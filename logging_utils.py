"""Logging setup shared by the engine and the console entry point."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (console/main.py)."""
    level = (level or config.log.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
