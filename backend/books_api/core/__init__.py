"""Core utilities."""
from books_api.core.exceptions import (
    AppException,
    NotFoundError,
    StartupLoadError,
    ValidationError,
)
from books_api.core.logging import get_logger, setup_logging

__all__ = [
    "AppException",
    "NotFoundError",
    "StartupLoadError",
    "ValidationError",
    "get_logger",
    "setup_logging",
]
