import pytest

from reqline.errors import NetworkError, TransportError
from reqline.executor import RequestExecutor
from reqline.parser import parse_reqline
from reqline.shared.models import TransportResponse
from tests.fakes import FakeTransport


@pytest.mark.asyncio
async def test_get_sends_headers_only(transport):
    descriptor = parse_reqline(
        'HTTP GET | URL http://x.test/items | QUERY {"page": 1} | HEADERS {"X-Id": "7"} | BODY {"ignored": true}'
    )

    result = await RequestExecutor(transport).execute(descriptor)

    assert transport.calls == [("GET", "http://x.test/items?page=1", None, {"X-Id": "7"})]
    assert result.response.status == 200
    assert result.response.data == {"ok": True}


@pytest.mark.asyncio
async def test_post_sends_body_and_headers(transport):
    descriptor = parse_reqline('HTTP POST | URL http://x.test | BODY {"a": 1}')

    await RequestExecutor(transport).execute(descriptor)

    assert transport.calls == [("POST", "http://x.test", {"a": 1}, None)]


@pytest.mark.asyncio
async def test_error_status_is_a_result():
    error_response = TransportResponse(status=500, data={"error": "boom"})
    transport = FakeTransport(error=NetworkError("Request failed with status code 500", response=error_response))
    descriptor = parse_reqline("HTTP GET | URL http://x.test")

    result = await RequestExecutor(transport).execute(descriptor)

    assert result.response.status == 500
    assert result.response.data == {"error": "boom"}


@pytest.mark.asyncio
async def test_plain_500_response_is_a_result():
    transport = FakeTransport(response=TransportResponse(status=500, data="oops"))

    result = await RequestExecutor(transport).execute(parse_reqline("HTTP GET | URL http://x.test"))

    assert result.response.status == 500


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error(failing_transport):
    descriptor = parse_reqline("HTTP GET | URL http://x.test")

    with pytest.raises(TransportError) as exc_info:
        await RequestExecutor(failing_transport).execute(descriptor)

    assert exc_info.value.message == "Request failed: connect ECONNREFUSED 127.0.0.1:9"


@pytest.mark.asyncio
async def test_unexpected_transport_exception_propagates():
    transport = FakeTransport(error=RuntimeError("misbehaving transport"))

    with pytest.raises(RuntimeError):
        await RequestExecutor(transport).execute(parse_reqline("HTTP GET | URL http://x.test"))


class _Clock:
    def __init__(self, monotonic, wall):
        self._monotonic = iter(monotonic)
        self._wall = iter(wall)

    def perf_counter(self):
        return next(self._monotonic)

    def time(self):
        return next(self._wall)


@pytest.mark.asyncio
async def test_timing(transport, monkeypatch):
    clock = _Clock(monotonic=[10.0, 10.2504], wall=[1700000000.0, 1700000000.25])
    monkeypatch.setattr("reqline.executor.time", clock)

    result = await RequestExecutor(transport).execute(parse_reqline("HTTP GET | URL http://x.test"))

    assert result.timing.duration == 250
    assert result.timing.start_timestamp == 1700000000000
    assert result.timing.end_timestamp == 1700000000250
