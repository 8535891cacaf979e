"""Test doubles for the HTTP transport."""

from typing import Any

from reqline.shared.models import TransportResponse
from reqline.transport.base_transport import HttpTransport


class FakeTransport(HttpTransport):
    """Records calls and replays a canned outcome."""

    def __init__(self, response: TransportResponse | None = None, error: Exception | None = None):
        self.response = response or TransportResponse(status=200, data={"ok": True})
        self.error = error
        self.calls: list[tuple[str, str, Any, Any]] = []

    async def get(self, url, headers):
        self.calls.append(("GET", url, None, headers))
        return self._reply()

    async def post(self, url, body, headers):
        self.calls.append(("POST", url, body, headers))
        return self._reply()

    def _reply(self) -> TransportResponse:
        if self.error is not None:
            raise self.error
        return self.response
