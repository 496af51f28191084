"""
exchangelog: pattern based log lines for HTTP request/response exchanges.
"""

from .core import Formatter, Summarizer
from .infrastructure.error_handler import ExtractorError, FormatterError
from .models import (
    Endpoint,
    Exchange,
    FormatterConfig,
    HttpRequest,
    HttpResponse,
)

__version__ = "0.1.0"

__all__ = [
    "Formatter",
    "Summarizer",
    "FormatterConfig",
    "Endpoint",
    "HttpRequest",
    "HttpResponse",
    "Exchange",
    "ExtractorError",
    "FormatterError",
]
