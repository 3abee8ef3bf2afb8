"""Loguru setup for the go-memo CLI."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} | {message}"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG when ``verbose`` else WARNING."""

    logger.remove()
    logger.add(
        sys.stderr,
        format=_FORMAT,
        level="DEBUG" if verbose else "WARNING",
        colorize=None,
        backtrace=False,
        diagnose=False,
    )
