"""
Pattern based log line formatter.
"""

from __future__ import annotations

import re
from typing import Optional

from ..infrastructure.logger import logger
from ..models.config import FormatterConfig
from ..models.exchange import Exchange
from .placeholders import PLACEHOLDERS, extract_config
from .presets import PRESETS
from .summarizer import Summarizer


# ':config:NAME' is matched as a single token before plain ':name'
TOKEN_PATTERN = re.compile(r':config:(\w+)|:(\w+)', re.ASCII)


####
##      FORMATTER
#####
class Formatter:
    """
    Formats an Exchange into a log line by substituting placeholders in a
    pattern string.

        formatter = Formatter('[REQUEST :http_response_status_code] :operation_name :total_time')
        formatter.format(exchange)
        #=> '[REQUEST 200] get_bucket 0.0352'

    Placeholders are ``:`` followed by word characters. Names without an
    extractor are left in the output as written, as is ``:config:NAME``
    when the exchange has no configuration value ``NAME``. Extractor
    failures raise ExtractorError and are not caught here.

    A formatter never changes after construction and can be shared
    between threads, provided each ``format`` call gets its own exchange
    (body placeholders rewind the body stream).
    """

    def __init__(self, pattern: str, config: Optional[FormatterConfig] = None):
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be a string, got {type(pattern).__name__}")

        self._pattern = pattern
        self._config = config or FormatterConfig()
        self._summarizer = Summarizer(self._config.max_string_size)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def max_string_size(self) -> int:
        return self._config.max_string_size

    def format(self, exchange: Exchange) -> str:
        """
        Render the pattern for one exchange.

        Args:
            exchange: Transaction to describe

        Returns:
            The formatted log line

        Raises:
            ExtractorError: A placeholder could not be read from the exchange
        """

        return TOKEN_PATTERN.sub(lambda match: self._substitute(match, exchange), self._pattern)

    def _substitute(self, match: re.Match, exchange: Exchange) -> str:
        token = match.group(0)

        option = match.group(1)
        if option is not None:
            value = extract_config(exchange, option)
            if value is None:
                logger.debug(f"Unknown configuration option in {token!r}, left as is")
                return token
            return value

        extractor = PLACEHOLDERS.get(match.group(2))
        if extractor is None:
            logger.debug(f"Unknown placeholder {token!r}, left as is")
            return token
        return extractor(exchange, self._summarizer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formatter):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._pattern!r}, max_string_size={self.max_string_size})'

    ####
    ##      CANNED FORMATTERS
    #####
    @classmethod
    def preset(cls, name: str, config: Optional[FormatterConfig] = None) -> Formatter:
        """Build a formatter from one of the canned patterns in PRESETS."""

        if name not in PRESETS:
            raise ValueError(
                f"Unknown preset: {name} (expected one of {', '.join(sorted(PRESETS))})"
            )
        return cls(PRESETS[name], config)

    @classmethod
    def default(cls, config: Optional[FormatterConfig] = None) -> Formatter:
        """
        Service, status, duration, retries, operation with its params and
        the error, if any.
        """
        return cls.preset('default', config)

    @classmethod
    def short(cls, config: Optional[FormatterConfig] = None) -> Formatter:
        """Like default, without request params or retries."""
        return cls.preset('short', config)

    @classmethod
    def debug(cls, config: Optional[FormatterConfig] = None) -> Formatter:
        """Boxed multi-line dump of the HTTP request and response."""
        return cls.preset('debug', config)

    @classmethod
    def colored(cls, config: Optional[FormatterConfig] = None) -> Formatter:
        """The default pattern with ANSI bold and blue."""
        return cls.preset('colored', config)


__all__ = [
    "TOKEN_PATTERN",
    "Formatter",
]
