"""Custom exceptions and error handling utilities for the images resizer."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from .logging_config import get_logger


class ImagesResizerError(Exception):
    """Base exception for all images resizer errors."""


class ConfigurationError(ImagesResizerError):
    """Error raised for invalid arguments, directories or size lists.

    Always fatal: raised before any concurrent work starts.
    """


class ImageLoadError(ImagesResizerError):
    """Error raised when a source file cannot be opened or decoded."""


class ImageResizeError(ImagesResizerError):
    """Error raised when one resize task cannot produce its output."""


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Wrap a function with standardized error handling.

    Resizer errors are logged and re-raised unchanged, anything else is
    logged and re-raised as ``ImageResizeError``.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # type: ignore[override]
        logger = get_logger("resizer")
        try:
            return func(*args, **kwargs)
        except ImagesResizerError:
            logger.debug(f"Resizer error in {func.__name__}", exc_info=True)
            raise
        except Exception as exc:  # noqa: BLE001
            logger.error(f"Unhandled error in {func.__name__}: {exc}", exc_info=True)
            raise ImageResizeError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]
