"""Form encoding of QUERY section values."""

from typing import Any
from urllib.parse import quote

# Characters left unescaped besides ASCII letters, digits and "-_.".
_SAFE = "!~*'()"


def _escape(value: str) -> str:
    return quote(value, safe=_SAFE)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    # null, objects and nested arrays carry no scalar representation
    return ""


def build_query_string(params: dict[str, Any]) -> str:
    """
    Serialize a mapping into an ``&``-joined, percent-encoded query string.

    Keys keep their insertion order. List values expand to one pair per
    element, so ``{"id": [1, 2]}`` becomes ``id=1&id=2``.
    """
    pairs: list[str] = []
    for key, value in params.items():
        escaped_key = _escape(str(key))
        if isinstance(value, list):
            pairs.extend(
                f"{escaped_key}={_escape(_scalar(item))}"
                for item in value
            )
        else:
            pairs.append(f"{escaped_key}={_escape(_scalar(value))}")
    return "&".join(pairs)


def build_full_url(url: str, query: dict[str, Any]) -> str:
    """Append the encoded query string to ``url`` when there is one."""
    if not query:
        return url
    return f"{url}?{build_query_string(query)}"
