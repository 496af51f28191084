"""
Data models API surface for exchangelog.

Re-exports model classes so callers can write `from exchangelog.models import X`.
"""

from .exchange import (
    DEFAULT_PORTS,
    Endpoint,
    HttpRequest,
    HttpResponse,
    Exchange,
)
from .config import DEFAULT_MAX_STRING_SIZE, FormatterConfig

__all__ = [
    # Exchange models
    "DEFAULT_PORTS",
    "Endpoint",
    "HttpRequest",
    "HttpResponse",
    "Exchange",
    # Config models
    "DEFAULT_MAX_STRING_SIZE",
    "FormatterConfig",
]
