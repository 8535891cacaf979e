"""aiohttp implementation of the HTTP transport."""

import asyncio
import json
from typing import Any

import aiohttp

from reqline.errors import NetworkError
from reqline.shared.logging import get_logger
from reqline.shared.models import TransportResponse
from reqline.transport.base_transport import HttpTransport

logger = get_logger(__name__)


def _prepare_headers(headers: dict[str, Any] | None) -> dict[str, str] | None:
    if headers is None:
        return None
    return {str(name): str(value) for name, value in headers.items()}


def _decode_body(text: str) -> Any:
    """Decode a response body as JSON, falling back to the raw text."""
    if not text:
        return ""
    try:
        return json.loads(text)
    except ValueError:
        return text


class AiohttpTransport(HttpTransport):
    """aiohttp-based implementation of the HTTP transport."""

    def __init__(self, session: aiohttp.ClientSession):
        """
        Initialize the transport.

        Args:
            session: Open client session; its timeout applies to every call
        """
        self._session = session

    async def get(self, url: str, headers: dict[str, Any] | None) -> TransportResponse:
        return await self._request("GET", url, headers=_prepare_headers(headers))

    async def post(self, url: str, body: Any, headers: dict[str, Any] | None) -> TransportResponse:
        return await self._request("POST", url, headers=_prepare_headers(headers), json=body)

    async def _request(self, method: str, url: str, **kwargs: Any) -> TransportResponse:
        logger.debug(f"Sending {method} {url}")

        try:
            async with self._session.request(method, url, **kwargs) as resp:
                status = resp.status
                text = await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise NetworkError(f"timeout of {self._session.timeout.total}s exceeded") from exc
        except aiohttp.ClientError as exc:
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            # aiohttp refuses to serialize the request, e.g. CR/LF in a header value
            raise NetworkError(str(exc)) from exc

        response = TransportResponse(status=status, data=_decode_body(text))
        logger.debug(f"Received {response.status} from {url}")

        if response.status >= 400:
            raise NetworkError(f"Request failed with status code {response.status}", response=response)

        return response
