"""Logging configuration for the book registry."""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "book_registry"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Colors the level names the service emits: registry DEBUG, request INFO, failure ERROR."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",   # Green
        "ERROR": "\033[31m",  # Red
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        # Copy so other handlers see the plain record
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """Set up the ``book_registry`` logger.

    Colors are only used when ``stream`` is a terminal.
    """
    stream = stream or sys.stdout
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = []

    handler = logging.StreamHandler(stream)
    formatter_cls = ColoredFormatter if stream.isatty() else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
