import io

import pytest

from exchangelog.core.placeholders import PLACEHOLDERS, extract_config, format_seconds
from exchangelog.core.summarizer import Summarizer
from exchangelog.infrastructure.error_handler import ExtractorError
from exchangelog.models import Endpoint, Exchange, HttpRequest, HttpResponse


def make_exchange(**overrides) -> Exchange:
    """Helper building a fully populated exchange for placeholder tests."""
    request = HttpRequest(
        method="GET",
        endpoint=Endpoint("https", "s3.amazonaws.com", 443),
        path="/bucket/key?versions",
        headers={"host": "s3.amazonaws.com"},
        body=io.BytesIO(b"request-body"),
    )
    response = HttpResponse(
        status_code=200,
        headers={"x-amz-request-id": "REQ1"},
        body=b"<ok/>",
    )
    fields = dict(
        operation_name="get_object",
        http_request=request,
        http_response=response,
        params={"bucket": "b", "key": "k"},
        started_at=1000.0,
        completed_at=1000.0352,
        http_elapsed=0.0252,
        retry_count=0,
        client_class="S3Client",
        service_name="S3",
        config={"region": "us-east-1"},
    )
    fields.update(overrides)
    return Exchange(**fields)


def extract(name, exchange, max_string_size=1000):
    return PLACEHOLDERS[name](exchange, Summarizer(max_string_size))


# ---- Time rendering --------------------------------------------------------

@pytest.mark.parametrize("seconds, expected", [
    (0.0352, "0.0352"),
    (0.5, "0.5"),
    (1.0, "1."),
    (0.0, "0."),
    (12.345678, "12.345678"),
])
def test_format_seconds(seconds, expected):
    assert format_seconds(seconds) == expected


def test_total_time_and_alias():
    exchange = make_exchange()
    assert extract("total_time", exchange) == "0.0352"
    assert extract("duration", exchange) == "0.0352"


def test_http_and_client_time():
    exchange = make_exchange()
    assert extract("http_time", exchange) == "0.0252"
    assert extract("client_time", exchange) == "0.01"


# ---- Request fields --------------------------------------------------------

@pytest.mark.parametrize("name, expected", [
    ("operation_name", "get_object"),
    ("operation", "get_object"),
    ("client_class", "S3Client"),
    ("service", "S3"),
    ("region", "us-east-1"),
    ("retry_count", "0"),
    ("http_request_uri", "https://s3.amazonaws.com/bucket/key?versions"),
    ("http_request_endpoint", "https://s3.amazonaws.com"),
    ("http_request_scheme", "https"),
    ("http_request_protocol", "https"),
    ("http_request_host", "s3.amazonaws.com"),
    ("http_request_port", "443"),
    ("http_request_method", "GET"),
    ("http_request_path", "/bucket/key?versions"),
    ("http_request_pathname", "/bucket/key"),
    ("http_request_querystring", "versions"),
    ("http_request_headers", '{"host"=>"s3.amazonaws.com"}'),
    ("http_response_status_code", "200"),
    ("http_response_status", "200"),
    ("http_response_headers", '{"x-amz-request-id"=>"REQ1"}'),
    ("http_response_body", "<ok/>"),
    ("request_params", '"bucket"=>"b","key"=>"k"'),
    ("options", '"bucket"=>"b","key"=>"k"'),
    ("error_class", ""),
    ("error_message", ""),
])
def test_extractors(name, expected):
    assert extract(name, make_exchange()) == expected


def test_querystring_absent():
    request = HttpRequest("GET", Endpoint("https", "s3.amazonaws.com", 443), path="/bucket/key")
    exchange = make_exchange(http_request=request)
    assert extract("http_request_pathname", exchange) == "/bucket/key"
    assert extract("http_request_querystring", exchange) == ""


def test_non_default_port_in_endpoint():
    request = HttpRequest("PUT", Endpoint("http", "localhost", 8080), path="/a")
    exchange = make_exchange(http_request=request)
    assert extract("http_request_endpoint", exchange) == "http://localhost:8080"
    assert extract("http_request_uri", exchange) == "http://localhost:8080/a"
    assert extract("http_request_port", exchange) == "8080"


def test_error_fields():
    exchange = make_exchange(error=KeyError("NoSuchKey"))
    assert extract("error_class", exchange) == "KeyError"
    assert extract("error_message", exchange) == "'NoSuchKey'"


def test_request_params_respect_max_string_size():
    exchange = make_exchange(params={"body": "x" * 20})
    assert extract("request_params", exchange, max_string_size=4) == \
        '"body"=>#<String "xxxx" ... (20 bytes)>'


# ---- Bodies ----------------------------------------------------------------

def test_request_body_is_rewound_before_reading():
    exchange = make_exchange()
    exchange.http_request.body.read()

    assert extract("http_request_body", exchange) == "request-body"
    assert extract("http_request_body", exchange) == "request-body"


def test_text_stream_body():
    response = HttpResponse(status_code=500, body=io.StringIO("boom"))
    assert extract("http_response_body", make_exchange(http_response=response)) == "boom"


def test_body_without_seek_fails():
    response = HttpResponse(status_code=200, body=object())
    with pytest.raises(ExtractorError) as exc_info:
        extract("http_response_body", make_exchange(http_response=response))
    assert exc_info.value.placeholder == "http_response_body"
    assert isinstance(exc_info.value.original_error, AttributeError)


# ---- Missing data ----------------------------------------------------------

@pytest.mark.parametrize("name, overrides", [
    ("client_class", {"client_class": None}),
    ("retry_count", {"retry_count": None}),
    ("service", {"service_name": None}),
    ("http_time", {"http_elapsed": None}),
    ("client_time", {"http_elapsed": None}),
    ("total_time", {"completed_at": None}),
    ("region", {"config": {}}),
    ("http_response_status_code", {"http_response": None}),
    ("http_response_headers", {"http_response": None}),
    ("http_response_body", {"http_response": HttpResponse(status_code=200)}),
])
def test_missing_fields_raise_extractor_error(name, overrides):
    with pytest.raises(ExtractorError) as exc_info:
        extract(name, make_exchange(**overrides))
    assert exc_info.value.placeholder == name
    assert f":{name}" in str(exc_info.value)


# ---- Configuration ---------------------------------------------------------

def test_extract_config():
    exchange = make_exchange(config={"region": "us-east-1", "max_attempts": 3})
    assert extract_config(exchange, "region") == '"us-east-1"'
    assert extract_config(exchange, "max_attempts") == "3"
    assert extract_config(exchange, "endpoint") is None
