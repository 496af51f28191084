"""
Exchange domain models for exchangelog.

An exchange is the read-only record of one request/response transaction.
Formatters only ever read from these objects.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import IO, Any, Mapping, Optional, Union

import httpx


DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}

BodySource = Union[IO[bytes], IO[str], bytes, str, None]


@dataclass(frozen=True)
class Endpoint:
    """Scheme, host and port of a request target."""

    scheme: str
    host: str
    port: int

    def __post_init__(self) -> None:
        if self.scheme not in DEFAULT_PORTS:
            raise ValueError(f"Invalid scheme: {self.scheme}")
        if not self.host:
            raise ValueError("Endpoint host is required")
        if self.port <= 0:
            raise ValueError(f"Invalid port: {self.port}")

    @property
    def is_default_port(self) -> bool:
        return DEFAULT_PORTS[self.scheme] == self.port

    @property
    def netloc(self) -> str:
        # IPv6 literals are bracketed in URIs
        host = f'[{self.host}]' if ':' in self.host else self.host
        if self.is_default_port:
            return host
        return f'{host}:{self.port}'

    def __str__(self) -> str:
        return f'{self.scheme}://{self.netloc}'


@dataclass(frozen=True)
class HttpRequest:
    """Outgoing HTTP request. ``path`` includes the querystring."""

    method: str
    endpoint: Endpoint
    path: str = '/'
    headers: Mapping[str, Any] = field(default_factory=dict)
    body: IO[bytes] = field(default_factory=io.BytesIO)

    @property
    def pathname(self) -> str:
        return self.path.split('?', 1)[0]

    @property
    def querystring(self) -> str:
        parts = self.path.split('?', 1)
        return parts[1] if len(parts) > 1 else ''

    @property
    def uri(self) -> str:
        return str(self.endpoint) + self.path


@dataclass(frozen=True)
class HttpResponse:
    """HTTP response as seen by the client. ``body`` is None when unknown."""

    status_code: int
    headers: Mapping[str, Any] = field(default_factory=dict)
    body: BodySource = None


@dataclass(frozen=True)
class Exchange:
    """
    One request/response transaction handed to a formatter.

    Timing markers are plain float seconds (e.g. ``time.monotonic()``
    readings). Optional fields left as None make the placeholders that
    depend on them fail instead of printing a guess.
    """

    operation_name: str
    http_request: HttpRequest
    params: Mapping[str, Any] = field(default_factory=dict)
    http_response: Optional[HttpResponse] = None

    # Timing
    started_at: Optional[float] = None
    completed_at: Optional[float] = None
    http_elapsed: Optional[float] = None

    # Client metadata
    retry_count: Optional[int] = None
    client_class: Optional[str] = None
    service_name: Optional[str] = None
    error: Optional[BaseException] = None

    # Named configuration values (region, endpoint overrides, ...)
    config: Mapping[str, Any] = field(default_factory=dict)

    @property
    def total_time(self) -> Optional[float]:
        if self.started_at is None or self.completed_at is None:
            return None
        return self.completed_at - self.started_at

    @property
    def http_time(self) -> Optional[float]:
        return self.http_elapsed

    @property
    def client_time(self) -> Optional[float]:
        total = self.total_time
        if total is None or self.http_elapsed is None:
            return None
        return total - self.http_elapsed

    def has_config(self, name: str) -> bool:
        return name in self.config

    def config_value(self, name: str) -> Any:
        """Return a named configuration value, raising KeyError when unset."""

        if name not in self.config:
            raise KeyError(f"Unknown configuration option: {name}")
        return self.config[name]

    @classmethod
    def from_httpx(
        cls,
        response: httpx.Response,
        operation_name: str,
        **fields: Any
    ) -> Exchange:
        """
        Build an exchange from a completed ``httpx.Response``.

        The request is taken from ``response.request``. Both request and
        response content are read eagerly, so streaming bodies are consumed.
        Extra keyword arguments are passed through to the dataclass
        (params, started_at, retry_count, config, ...).
        """

        request = response.request
        url = request.url
        scheme = url.scheme
        endpoint = Endpoint(
            scheme=scheme,
            host=url.host,
            port=url.port or DEFAULT_PORTS.get(scheme, 0),
        )

        http_request = HttpRequest(
            method=request.method,
            endpoint=endpoint,
            path=url.raw_path.decode('ascii'),
            headers=dict(request.headers.items()),
            body=io.BytesIO(request.read()),
        )
        http_response = HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            body=response.read(),
        )

        if 'http_elapsed' not in fields:
            # Only set once the client has closed the response stream
            try:
                fields['http_elapsed'] = response.elapsed.total_seconds()
            except RuntimeError:
                pass

        return cls(
            operation_name=operation_name,
            http_request=http_request,
            http_response=http_response,
            **fields
        )


__all__ = [
    "DEFAULT_PORTS",
    "Endpoint",
    "HttpRequest",
    "HttpResponse",
    "Exchange",
]
