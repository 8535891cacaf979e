"""Data models for the reqline service."""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP methods a reqline may use."""

    GET = "GET"
    POST = "POST"


class ParseErrorCode(str, Enum):
    """Reasons a reqline can be rejected."""

    INVALID_INPUT = "InvalidInput"
    MISSING_SECTION = "MissingSection"
    MISSING_KEYWORD = "MissingKeyword"
    INVALID_METHOD = "InvalidMethod"
    EMPTY_URL = "EmptyUrl"
    MALFORMED_SECTION = "MalformedSection"
    UNKNOWN_KEYWORD = "UnknownKeyword"
    INVALID_JSON = "InvalidJson"


class ParseError(BaseModel):
    """A rejected reqline."""

    model_config = ConfigDict(frozen=True)

    code: Annotated[ParseErrorCode, Field(description="Which grammar rule failed")]
    message: Annotated[str, Field(description="Human readable explanation")]


class RequestDescriptor(BaseModel):
    """Validated, immutable representation of a parsed reqline."""

    model_config = ConfigDict(frozen=True)

    method: Annotated[HttpMethod, Field(description="HTTP method")]
    url: Annotated[str, Field(min_length=1, description="Target URL without the query string")]
    headers: Annotated[dict[str, Any] | None, Field(description="HTTP headers")] = None
    query: Annotated[dict[str, Any], Field(default_factory=dict, description="Query parameters")]
    body: Annotated[Any, Field(default_factory=dict, description="JSON request body")]
    full_url: Annotated[str, Field(min_length=1, description="URL with the encoded query string appended")]


class Timing(BaseModel):
    """Timing of a single outbound call."""

    duration: Annotated[int, Field(ge=0, description="Elapsed monotonic time in milliseconds")]
    start_timestamp: Annotated[int, Field(description="Wall clock start, epoch milliseconds")]
    end_timestamp: Annotated[int, Field(description="Wall clock end, epoch milliseconds")]


class TransportResponse(BaseModel):
    """Response returned by an HTTP transport."""

    status: Annotated[int, Field(ge=100, le=999, description="HTTP status code")]
    data: Annotated[Any, Field(description="Decoded response body")] = None


class ExecutionResult(BaseModel):
    """Response of an executed request together with its timing."""

    response: TransportResponse
    timing: Timing


class RequestSummary(BaseModel):
    """Request half of the success envelope."""

    query: dict[str, Any]
    body: Any
    headers: dict[str, Any] | None
    full_url: str


class ResponseSummary(BaseModel):
    """Response half of the success envelope."""

    http_status: int
    duration: int
    request_start_timestamp: int
    request_stop_timestamp: int
    response_data: Any


class ReqlineEnvelope(BaseModel):
    """Payload returned for a successfully executed reqline."""

    request: RequestSummary
    response: ResponseSummary

    @classmethod
    def build(cls, descriptor: RequestDescriptor, result: ExecutionResult) -> "ReqlineEnvelope":
        return cls(
            request=RequestSummary(
                query=descriptor.query,
                body=descriptor.body,
                headers=descriptor.headers,
                full_url=descriptor.full_url,
            ),
            response=ResponseSummary(
                http_status=result.response.status,
                duration=result.timing.duration,
                request_start_timestamp=result.timing.start_timestamp,
                request_stop_timestamp=result.timing.end_timestamp,
                response_data=result.response.data,
            ),
        )


class ErrorEnvelope(BaseModel):
    """Payload returned when a reqline cannot be parsed or executed."""

    error: bool = True
    message: str
