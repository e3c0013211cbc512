"""
Logging setup driven by ``Settings``.

Root logging goes to the console and, when ``LOG_FILE`` is set, to a
file.  The ``contact_manager_api`` loggers follow ``LOG_LEVEL`` (or
DEBUG when ``DEBUG`` is on) independently of the root level, so view
invalidations and store errors can be traced without turning on debug
output for FastAPI and uvicorn as well.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "contact_manager_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def package_level(config: Settings) -> int:
    """Level for the package loggers; unknown names fall back to INFO."""
    if config.debug:
        return logging.DEBUG
    return getattr(logging, config.log_level.upper(), logging.INFO)


def setup_logging(config: Settings) -> None:
    """Configure the package logger and, once per process, the root handlers.

    The package level is applied on every call so that a changed
    ``Settings`` takes effect in a new ``create_app``; handlers are
    only attached if the root logger has none yet (e.g. under pytest
    it already does).
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level(config))

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(logging.WARNING if not config.debug else logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
