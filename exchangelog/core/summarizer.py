"""
Bounded, deterministic rendering of request values for log lines.

Mappings are rendered as ``key=>value`` entries sorted by their rendered
text, so the same parameters always produce the same line regardless of
insertion order.
"""

from __future__ import annotations

import json
import os
from enum import Enum
from pathlib import PurePath
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Union

from ..models.config import DEFAULT_MAX_STRING_SIZE


class ValueKind(Enum):
    """Value shapes the summarizer knows how to render."""

    TEXT = "text"
    BYTES = "bytes"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    FILE = "file"
    OPAQUE = "opaque"


def _is_open_file(value: Any) -> bool:
    return (
        isinstance(getattr(value, 'name', None), str)
        and hasattr(value, 'read')
        and hasattr(value, 'fileno')
    )


def classify(value: Any) -> ValueKind:
    """Return the ValueKind used to summarize ``value``."""

    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.BYTES
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, PurePath) or _is_open_file(value):
        return ValueKind.FILE
    return ValueKind.OPAQUE


def quote(text: str) -> str:
    """Double-quoted, escaped string literal."""

    return json.dumps(text, ensure_ascii=False)


def inspect(value: Any) -> str:
    """
    Debug representation used for headers and configuration values.

    Strings are double quoted, mappings render as ``{"k"=>"v", ...}`` in
    their own order, lists and tuples as ``[a, b]``. Anything else falls
    back to ``repr``.
    """

    if isinstance(value, str):
        return quote(value)
    if isinstance(value, Mapping):
        entries = ', '.join(f'{inspect(k)}=>{inspect(v)}' for k, v in value.items())
        return '{' + entries + '}'
    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(inspect(v) for v in value) + ']'
    return repr(value)


class Summarizer:
    """
    Renders request parameters and other values as bounded text.

    Strings (and bytes) longer than ``max_string_size`` are truncated to a
    marker that keeps the first ``max_string_size`` characters and the
    original length.
    """

    def __init__(self, max_string_size: int = DEFAULT_MAX_STRING_SIZE):
        self.max_string_size = max_string_size
        # Mappings and sequences are handled in summarize_value
        self._handlers: Dict[ValueKind, Callable[[Any], str]] = {
            ValueKind.TEXT: self.summarize_string,
            ValueKind.BYTES: self.summarize_bytes,
            ValueKind.FILE: self.summarize_file,
            ValueKind.OPAQUE: repr,
        }

    def summarize_value(self, value: Any, _active: FrozenSet[int] = frozenset()) -> str:
        """
        ``_active`` holds the ids of the containers being rendered; a
        container that contains itself renders as ``{...}`` or ``[...]``.
        """

        kind = classify(value)
        if kind is ValueKind.MAPPING:
            if id(value) in _active:
                return '{...}'
            return '{' + self.summarize_hash(value, _active) + '}'
        if kind is ValueKind.SEQUENCE:
            if id(value) in _active:
                return '[...]'
            return self.summarize_array(value, _active)
        return self._handlers[kind](value)

    def summarize_hash(
        self,
        mapping: Mapping[Any, Any],
        _active: FrozenSet[int] = frozenset()
    ) -> str:
        """Sorted ``key=>value`` entries joined by commas, without braces."""

        active = _active | {id(mapping)}
        entries = [
            f'{inspect(key)}=>{self.summarize_value(value, active)}'
            for key, value in mapping.items()
        ]
        return ','.join(sorted(entries))

    def summarize_array(
        self,
        values: Iterable[Any],
        _active: FrozenSet[int] = frozenset()
    ) -> str:
        active = _active | {id(values)}
        return '[' + ','.join(self.summarize_value(v, active) for v in values) + ']'

    def summarize_string(self, text: str) -> str:
        limit = self.max_string_size
        if len(text) > limit:
            return f'#<String {quote(text[:limit])} ... ({len(text)} bytes)>'
        return quote(text)

    def summarize_bytes(self, data: Union[bytes, bytearray]) -> str:
        limit = self.max_string_size
        data = bytes(data)
        if len(data) > limit:
            return f'#<Bytes {data[:limit]!r} ... ({len(data)} bytes)>'
        return repr(data)

    def summarize_file(self, file: Any) -> str:
        """
        Path plus the current on-disk size. Accepts a path or an open
        file object; the size is read at call time.
        """

        path = file if isinstance(file, (str, PurePath)) else file.name
        return f'#<File:{path} ({os.path.getsize(path)} bytes)>'


__all__ = [
    "ValueKind",
    "classify",
    "quote",
    "inspect",
    "Summarizer",
]
