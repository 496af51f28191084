"""
Configuration models for exchangelog formatters.
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_MAX_STRING_SIZE = 1000


@dataclass(frozen=True)
class FormatterConfig:
    """
    Settings shared by a formatter and its summarizer.

    Strings longer than ``max_string_size`` are truncated when request
    parameters are summarized.
    """

    max_string_size: int = DEFAULT_MAX_STRING_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.max_string_size, bool) or not isinstance(self.max_string_size, int):
            raise ValueError(f"max_string_size must be an integer: {self.max_string_size!r}")
        if self.max_string_size <= 0:
            raise ValueError("max_string_size must be positive")


__all__ = [
    "DEFAULT_MAX_STRING_SIZE",
    "FormatterConfig",
]
