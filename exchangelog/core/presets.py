"""
Canned log patterns.

These strings are consumed by log parsers; keep them byte for byte.
"""

BOLD = "\x1b[1m"
BLUE = "\x1b[34m"
RESET = "\x1b[0m"

RULE = "+" + "-" * 79


# [AWS SimpleEmailService 200 0.580066 0 retries] list_verified_email_addresses()
DEFAULT_PATTERN = " ".join([
    "[AWS",
    ":service",
    ":http_response_status",
    ":duration",
    ":retry_count retries]",
    ":operation(:options)",
    ":error_class",
    ":error_message",
]) + "\n"

# [AWS SimpleEmailService 200 0.494532] list_verified_email_addresses
SHORT_PATTERN = " ".join([
    "[AWS",
    ":service",
    ":http_response_status",
    ":duration]",
    ":operation",
    ":error_class",
]) + "\n"

_DEBUG_SIGNATURE = " ".join([
    ":region",
    ":service",
    ":operation",
    ":duration",
    ":retry_count retries",
])

_DEBUG_URL = "".join([
    ":http_request_protocol",
    "://",
    ":http_request_host",
    "::",
    ":http_request_port",
    ":",
    ":http_request_uri",
])

DEBUG_PATTERN = "\n".join([
    RULE,
    f"| AWS {_DEBUG_SIGNATURE}",
    RULE,
    "|   REQUEST",
    RULE,
    "|    METHOD: :http_request_method",
    f"|       URL: {_DEBUG_URL}",
    "|   HEADERS: :http_request_headers",
    "|      BODY: :http_request_body",
    RULE,
    "|  RESPONSE",
    RULE,
    "|    STATUS: :http_response_status",
    "|   HEADERS: :http_response_headers",
    "|      BODY: :http_response_body",
]) + "\n"

COLORED_PATTERN = " ".join([
    f"{BOLD}{BLUE}[AWS",
    ":service",
    ":http_response_status",
    ":duration",
    f":retry_count retries]{RESET}{BOLD}",
    ":operation(:options)",
    ":error_class",
    f":error_message{RESET}",
]) + "\n"


PRESETS = {
    "default": DEFAULT_PATTERN,
    "short": SHORT_PATTERN,
    "debug": DEBUG_PATTERN,
    "colored": COLORED_PATTERN,
}


__all__ = [
    "RULE",
    "DEFAULT_PATTERN",
    "SHORT_PATTERN",
    "DEBUG_PATTERN",
    "COLORED_PATTERN",
    "PRESETS",
]
