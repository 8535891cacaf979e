"""Reqline grammar parser.

A reqline looks like::

    HTTP GET | URL https://api.example.com/users | QUERY {"page": 1}

The first two sections are fixed (``HTTP <method>`` then ``URL <target>``);
the remaining ``HEADERS``, ``QUERY`` and ``BODY`` sections may appear in any
order and carry JSON values.
"""

import json
from typing import Any

from reqline.errors import ReqlineParseError
from reqline.querystring import build_full_url
from reqline.shared.models import HttpMethod, ParseError, ParseErrorCode, RequestDescriptor

SECTION_DELIMITER = " | "
HTTP_PREFIX = "HTTP "
URL_PREFIX = "URL "
ALLOWED_METHODS = tuple(method.value for method in HttpMethod)
ALLOWED_KEYWORDS = ("HEADERS", "QUERY", "BODY")

# Sections whose JSON value must be an object
_OBJECT_SECTIONS = ("HEADERS", "QUERY")


def _fail(code: ParseErrorCode, message: str) -> ParseError:
    return ParseError(code=code, message=message)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _decode_section(keyword: str, value: str) -> Any | ParseError:
    invalid = _fail(ParseErrorCode.INVALID_JSON, f"Invalid JSON format in {keyword} section")
    try:
        decoded = json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return invalid
    if keyword in _OBJECT_SECTIONS and not isinstance(decoded, dict):
        return invalid
    return decoded


def parse_reqline(text: object) -> RequestDescriptor | ParseError:
    """
    Parse a reqline into a RequestDescriptor.

    Validation failures are returned, not raised. The first rule violated,
    in section order, determines the error.

    Args:
        text: The raw reqline

    Returns:
        The parsed descriptor, or the ParseError describing the rejection
    """
    if not isinstance(text, str) or not text:
        return _fail(ParseErrorCode.INVALID_INPUT, "Reqline must be a string")

    parts = text.split(SECTION_DELIMITER)
    if len(parts) < 2:
        return _fail(ParseErrorCode.MISSING_SECTION, "Missing required HTTP or URL keyword")

    http_part, url_part, *optional_parts = parts

    if not http_part.startswith(HTTP_PREFIX):
        return _fail(ParseErrorCode.MISSING_KEYWORD, "Missing HTTP keyword")

    method = http_part[len(HTTP_PREFIX):].strip()
    if method not in ALLOWED_METHODS:
        return _fail(
            ParseErrorCode.INVALID_METHOD,
            f"Invalid HTTP method, only {', '.join(ALLOWED_METHODS)} are allowed",
        )

    if not url_part.startswith(URL_PREFIX):
        return _fail(ParseErrorCode.MISSING_KEYWORD, "Missing required URL keyword")

    url = url_part[len(URL_PREFIX):].strip()
    if not url:
        return _fail(ParseErrorCode.EMPTY_URL, "URL value cannot be empty")

    sections: dict[str, Any] = {}
    for part in optional_parts:
        keyword, space, value = part.partition(" ")
        if not space:
            return _fail(ParseErrorCode.MALFORMED_SECTION, "Missing space after keyword")

        if keyword not in ALLOWED_KEYWORDS:
            return _fail(
                ParseErrorCode.UNKNOWN_KEYWORD,
                f"Invalid keyword: {keyword}. Only {', '.join(ALLOWED_KEYWORDS)} are allowed",
            )

        decoded = _decode_section(keyword, value.strip())
        if isinstance(decoded, ParseError):
            return decoded

        # A repeated keyword replaces the earlier value
        sections[keyword] = decoded

    query = sections.get("QUERY", {})
    try:
        full_url = build_full_url(url, query)
    except UnicodeEncodeError:
        return _fail(ParseErrorCode.INVALID_JSON, "Invalid JSON format in QUERY section")

    return RequestDescriptor(
        method=HttpMethod(method),
        url=url,
        headers=sections.get("HEADERS"),
        query=query,
        body=sections.get("BODY", {}),
        full_url=full_url,
    )


def parse_reqline_or_raise(text: object) -> RequestDescriptor:
    """Parse a reqline, raising ReqlineParseError on rejection."""
    result = parse_reqline(text)
    if isinstance(result, ParseError):
        raise ReqlineParseError(result)
    return result
