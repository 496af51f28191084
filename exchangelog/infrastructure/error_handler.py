"""
Error types and error handling helpers for exchangelog.
"""

from functools import wraps
from typing import Callable, Optional, TypeVar

from .logger import logger


F = TypeVar("F", bound=Callable[..., str])

# Raised by extractors reading a field that is absent or of the wrong shape
EXTRACTION_ERRORS = (AttributeError, KeyError, TypeError, ValueError, OSError)


class FormatterError(Exception):
    """Base exception for formatting errors."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class ExtractorError(FormatterError):
    """Raised when a placeholder cannot produce a value for an exchange."""

    def __init__(
        self,
        placeholder: str,
        message: str,
        original_error: Optional[BaseException] = None
    ):
        self.placeholder = placeholder
        super().__init__(f":{placeholder}: {message}", original_error)


def handle_extractor_error(placeholder: str) -> Callable[[F], F]:
    """
    Decorator converting field access failures inside an extractor into
    ExtractorError for the given placeholder.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except EXTRACTION_ERRORS as e:
                logger.debug(f"Placeholder :{placeholder} failed: {type(e).__name__}: {e}")
                raise ExtractorError(
                    placeholder, f"cannot extract value ({type(e).__name__})", e
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "FormatterError",
    "ExtractorError",
    "EXTRACTION_ERRORS",
    "handle_extractor_error",
]
