"""Logging capability accepted by :class:`TempFileStream`."""

from __future__ import annotations

import logging
from typing import Any, Protocol

LOGGER_NAME = "temp_file_stream"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class ErrorLogger(Protocol):
    """Anything with a ``logging.Logger``-style ``error`` method."""

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


class NullLogger:
    """Discards everything. Used when the caller supplies no logger."""

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        pass


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it named *name*."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return get_logger()
