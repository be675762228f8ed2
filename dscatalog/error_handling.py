"""Centralized error handling and custom exceptions for ds-catalog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import ERRORS, VALID_LOG_LEVELS


class DSCatalogError(Exception):
    """Base exception for ds-catalog errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(DSCatalogError):
    """Raised when configuration is invalid or missing."""
    pass


class IndexOutOfRangeError(DSCatalogError, IndexError):
    """Raised by the copying array operations for an index outside their range."""
    pass


class AlgorithmNotFoundError(DSCatalogError, KeyError):
    """Raised when a catalog key is not registered."""

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0]) if self.args else ""


def format_error_message(error_key: str, **kwargs) -> str:
    """Format an error message from the constants."""
    try:
        template = ERRORS.get(error_key, "Unknown error")
        return template.format(**kwargs)
    except KeyError as e:
        return f"Error formatting message for '{error_key}': missing key {e}"


def index_out_of_range(index: int, length: int, *, inclusive: bool = False) -> IndexOutOfRangeError:
    """Build the error for ``index`` against a sequence of ``length``.

    ``inclusive`` widens the valid range to ``[0, length]``, the range used by
    insertion where ``length`` means append.
    """
    high = length if inclusive else length - 1
    message = format_error_message("INDEX_OUT_OF_RANGE", index=index, low=0, high=high)
    return IndexOutOfRangeError(message, details={"index": index, "length": length})


def validate_log_level(level: str) -> str:
    """Normalize a log level name, raising ConfigurationError when unknown."""
    normalized = (level or "").strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            format_error_message("INVALID_LOG_LEVEL", levels=", ".join(VALID_LOG_LEVELS)),
            details={"level": level},
        )
    return normalized


class ErrorHandler:
    """Context manager for consistent error handling around CLI operations."""

    def __init__(
        self,
        operation: str,
        reraise: bool = True,
        log_level: int = logging.ERROR,
    ):
        self.operation = operation
        self.reraise = reraise
        self.log_level = log_level
        self.error: Optional[Exception] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False

        self.error = exc_val
        error_msg = f"Error in {self.operation}: {exc_val}"
        logging.getLogger("dscatalog").log(self.log_level, error_msg)

        if not self.reraise:
            return True  # Suppress the exception

        if isinstance(exc_val, DSCatalogError):
            return False
        if issubclass(exc_type, OSError):
            raise ConfigurationError(error_msg) from exc_val
        raise DSCatalogError(error_msg) from exc_val


def setup_logging(level: int | str = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    """Set up centralized logging for ds-catalog.

    Calling it again replaces the handlers installed by the previous call
    instead of stacking duplicates.
    """
    if isinstance(level, str):
        level = getattr(logging, validate_log_level(level))

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger('dscatalog')
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_dscatalog", False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler._dscatalog = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            file_handler._dscatalog = True  # type: ignore[attr-defined]
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(f"Could not set up file logging: {e}")

    return root_logger


def handle_errors(operation: str, error_type: type = DSCatalogError):
    """Decorator to wrap unexpected exceptions in a ds-catalog error type."""
    def decorator(func):
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except error_type:
                raise  # Re-raise specific ds-catalog errors
            except Exception as e:
                raise error_type(f"Error in {operation}: {e}") from e
        wrapper.__name__ = getattr(func, "__name__", "wrapper")
        wrapper.__doc__ = getattr(func, "__doc__", None)
        return wrapper
    return decorator
