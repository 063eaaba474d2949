"""Logging setup for the memo service."""

import logging
import sys

APP_LOGGER_NAME = "memo_app"


def setup_logger(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configure the application logger and return it.

    Handlers are attached only once, so calling this again (e.g. when
    the app factory runs several times in tests) is a no-op apart from
    updating the level.
    """
    log = logging.getLogger(APP_LOGGER_NAME)
    log.setLevel(level)
    if log.handlers:
        return log

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    log.addHandler(handler)

    return log


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a child of it"""
    if name is None:
        return logging.getLogger(APP_LOGGER_NAME)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
