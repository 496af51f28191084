"""
Placeholder extractors.

Each extractor reads one field off an Exchange and renders it as text.
Extractors are registered by name in ``PLACEHOLDERS``; a name may have
aliases (``:operation`` and ``:operation_name`` read the same field).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TypeVar

from ..infrastructure.error_handler import handle_extractor_error
from ..models.exchange import Exchange, HttpResponse
from .summarizer import Summarizer, inspect


Extractor = Callable[[Exchange, Summarizer], str]
T = TypeVar("T")

PLACEHOLDERS: Dict[str, Extractor] = {}


def placeholder(*names: str) -> Callable[[Extractor], Extractor]:
    """Register an extractor under one or more placeholder names."""

    def decorator(func: Extractor) -> Extractor:
        for name in names:
            PLACEHOLDERS[name] = handle_extractor_error(name)(func)
        return func

    return decorator


def format_seconds(seconds: float) -> str:
    """
    Six decimal places with trailing zeros removed.

    The decimal point is kept, so exactly one second renders as ``1.``.
    """

    return ('%.06f' % seconds).rstrip('0')


def _require(value: Optional[T], field_name: str) -> T:
    if value is None:
        raise ValueError(f"{field_name} is not set on the exchange")
    return value


def _response(exchange: Exchange) -> HttpResponse:
    return _require(exchange.http_response, 'http_response')


def _read_body(body: Any) -> str:
    """Rewind a body stream and read it to the end."""

    body = _require(body, 'body')
    if isinstance(body, str):
        return body
    if isinstance(body, (bytes, bytearray)):
        data = body
    else:
        body.seek(0)
        data = body.read()
    if isinstance(data, str):
        return data
    return bytes(data).decode('utf-8', errors='replace')


####
##      CLIENT AND OPERATION
#####
@placeholder('client_class')
def _client_class(exchange, summarizer):
    return _require(exchange.client_class, 'client_class')


@placeholder('operation_name', 'operation')
def _operation_name(exchange, summarizer):
    return _require(exchange.operation_name, 'operation_name')


@placeholder('request_params', 'options')
def _request_params(exchange, summarizer):
    return summarizer.summarize_hash(exchange.params)


@placeholder('service')
def _service(exchange, summarizer):
    return _require(exchange.service_name, 'service_name')


@placeholder('region')
def _region(exchange, summarizer):
    return str(exchange.config_value('region'))


@placeholder('retry_count')
def _retry_count(exchange, summarizer):
    return str(_require(exchange.retry_count, 'retry_count'))


@placeholder('error_class')
def _error_class(exchange, summarizer):
    if exchange.error is None:
        return ''
    return type(exchange.error).__name__


@placeholder('error_message')
def _error_message(exchange, summarizer):
    if exchange.error is None:
        return ''
    return str(exchange.error)


####
##      TIMING
#####
@placeholder('total_time', 'duration')
def _total_time(exchange, summarizer):
    return format_seconds(_require(exchange.total_time, 'started_at/completed_at'))


@placeholder('http_time')
def _http_time(exchange, summarizer):
    return format_seconds(_require(exchange.http_time, 'http_elapsed'))


@placeholder('client_time')
def _client_time(exchange, summarizer):
    return format_seconds(_require(exchange.client_time, 'started_at/completed_at/http_elapsed'))


####
##      HTTP REQUEST
#####
@placeholder('http_request_uri')
def _http_request_uri(exchange, summarizer):
    return exchange.http_request.uri


@placeholder('http_request_endpoint')
def _http_request_endpoint(exchange, summarizer):
    return str(exchange.http_request.endpoint)


@placeholder('http_request_scheme', 'http_request_protocol')
def _http_request_scheme(exchange, summarizer):
    return exchange.http_request.endpoint.scheme


@placeholder('http_request_host')
def _http_request_host(exchange, summarizer):
    return exchange.http_request.endpoint.host


@placeholder('http_request_port')
def _http_request_port(exchange, summarizer):
    return str(exchange.http_request.endpoint.port)


@placeholder('http_request_method')
def _http_request_method(exchange, summarizer):
    return exchange.http_request.method


@placeholder('http_request_path')
def _http_request_path(exchange, summarizer):
    return exchange.http_request.path


@placeholder('http_request_pathname')
def _http_request_pathname(exchange, summarizer):
    return exchange.http_request.pathname


@placeholder('http_request_querystring')
def _http_request_querystring(exchange, summarizer):
    return exchange.http_request.querystring


@placeholder('http_request_headers')
def _http_request_headers(exchange, summarizer):
    return inspect(exchange.http_request.headers)


@placeholder('http_request_body')
def _http_request_body(exchange, summarizer):
    return _read_body(exchange.http_request.body)


####
##      HTTP RESPONSE
#####
@placeholder('http_response_status_code', 'http_response_status')
def _http_response_status_code(exchange, summarizer):
    return str(_response(exchange).status_code)


@placeholder('http_response_headers')
def _http_response_headers(exchange, summarizer):
    return inspect(_response(exchange).headers)


@placeholder('http_response_body')
def _http_response_body(exchange, summarizer):
    return _read_body(_response(exchange).body)


def extract_config(exchange: Exchange, option: str) -> Optional[str]:
    """
    Inspected value of a named configuration option, or None when the
    exchange has no such option.
    """

    if not exchange.has_config(option):
        return None
    return inspect(exchange.config_value(option))


__all__ = [
    "Extractor",
    "PLACEHOLDERS",
    "placeholder",
    "format_seconds",
    "extract_config",
]
