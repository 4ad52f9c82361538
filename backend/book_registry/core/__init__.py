"""Core utilities."""
from book_registry.core.exceptions import (
    AppException,
    MalformedInputError,
    MethodNotSupportedError,
    NotFoundError,
)
from book_registry.core.logging import get_logger, setup_logging

__all__ = [
    # Exceptions
    "AppException",
    "MalformedInputError",
    "NotFoundError",
    "MethodNotSupportedError",
    # Logging
    "get_logger",
    "setup_logging",
]
