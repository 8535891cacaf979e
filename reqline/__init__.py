"""Parse and execute one-line HTTP request descriptions."""

from reqline.errors import (
    MissingFieldError,
    NetworkError,
    ReqlineError,
    ReqlineParseError,
    TransportError,
)
from reqline.executor import RequestExecutor
from reqline.parser import parse_reqline, parse_reqline_or_raise
from reqline.shared.models import (
    ExecutionResult,
    HttpMethod,
    ParseError,
    ParseErrorCode,
    RequestDescriptor,
    Timing,
    TransportResponse,
)
from reqline.transport.base_transport import HttpTransport

__all__ = [
    "ExecutionResult",
    "HttpMethod",
    "HttpTransport",
    "MissingFieldError",
    "NetworkError",
    "ParseError",
    "ParseErrorCode",
    "ReqlineError",
    "ReqlineParseError",
    "RequestDescriptor",
    "RequestExecutor",
    "Timing",
    "TransportError",
    "TransportResponse",
    "parse_reqline",
    "parse_reqline_or_raise",
]
