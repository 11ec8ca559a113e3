"""Logging helpers.

Library modules obtain loggers via :func:`get_logger` and never touch
handlers.  The host (or a test) opts into rendered output by calling
:func:`configure_logging` once; records are rendered by Rich on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "tailwind_hook"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when *name* is given."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    """Attach a single :class:`RichHandler` to the package logger.

    Repeated calls only adjust the level.
    """
    log = get_logger()
    log.setLevel(level)
    if any(isinstance(h, RichHandler) for h in log.handlers):
        return log
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    return log
