"""Logging helpers for the schedule organizer."""

from __future__ import annotations

import logging
import sys

from daily_schedule.core.settings import get_settings

_ROOT_NAME = "daily_schedule"


def get_logger(name: str = _ROOT_NAME) -> logging.Logger:
    """Return a logger under the package hierarchy.

    The package root logger gets a single stderr handler the first time it is
    requested; child loggers propagate to it.
    """
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)
        root.setLevel(get_settings().log_level)
    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")


class Logger:
    """Writes ``[LOG]`` prefixed diagnostic lines for callers of the schedule.

    Each instance owns its own named logger, so two consoles never steal each
    other's stream.
    """

    def __init__(self, stream=None) -> None:
        self._logger = logging.getLogger(f"{_ROOT_NAME}.console.{id(self):x}")
        self._logger.propagate = False
        self._logger.setLevel(logging.INFO)
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter("[LOG] %(message)s"))
        self._logger.handlers = [handler]

    def log(self, message: str) -> None:
        self._logger.info(message)
