"""Logging setup. Records go to stderr so stdout carries only game text."""

import logging
import sys

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (terminal_ui/app.py)."""
    settings = config.logging
    level_name = (level or settings.level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=settings.format,
        datefmt=settings.datefmt,
        stream=sys.stderr,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
