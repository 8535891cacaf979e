"""Exceptions raised by the reqline service."""

from reqline.shared.models import ParseError, TransportResponse


class ReqlineError(Exception):
    """Base exception for failures reported back to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReqlineParseError(ReqlineError):
    """Raised when a reqline is rejected by the parser."""

    def __init__(self, error: ParseError):
        super().__init__(error.message)
        self.error = error


class TransportError(ReqlineError):
    """Raised when the outbound call produced no response at all."""


class MissingFieldError(ReqlineError):
    """Raised when the incoming payload carries no reqline."""


class NetworkError(Exception):
    """
    Failure reported by an HTTP transport.

    ``response`` is set when the failure is itself an HTTP error response
    and left as ``None`` for connection level failures.
    """

    def __init__(self, message: str, response: TransportResponse | None = None):
        super().__init__(message)
        self.message = message
        self.response = response
