"""Execution of parsed reqlines."""

import time

from reqline.errors import NetworkError, TransportError
from reqline.shared.logging import get_logger
from reqline.shared.models import ExecutionResult, HttpMethod, RequestDescriptor, Timing, TransportResponse
from reqline.transport.base_transport import HttpTransport

logger = get_logger(__name__)


class RequestExecutor:
    """Performs the single outbound call described by a RequestDescriptor."""

    def __init__(self, transport: HttpTransport):
        self._transport = transport

    async def execute(self, descriptor: RequestDescriptor) -> ExecutionResult:
        """
        Send the described request and time it.

        HTTP error statuses are returned as regular results. Only a failure
        that produced no response at all is raised.

        Raises:
            TransportError: If the transport could not obtain any response
        """
        start = time.perf_counter()
        start_timestamp = int(time.time() * 1000)

        logger.debug(f"Executing {descriptor.method.value} {descriptor.full_url}")

        try:
            response = await self._dispatch(descriptor)
        except NetworkError as exc:
            if exc.response is None:
                logger.warning(f"Request to {descriptor.full_url} failed: {exc.message}")
                raise TransportError(f"Request failed: {exc.message}") from exc
            response = exc.response

        end = time.perf_counter()
        end_timestamp = int(time.time() * 1000)

        timing = Timing(
            duration=round((end - start) * 1000),
            start_timestamp=start_timestamp,
            end_timestamp=end_timestamp,
        )
        logger.info(
            f"{descriptor.method.value} {descriptor.full_url} -> {response.status} in {timing.duration}ms"
        )

        return ExecutionResult(response=response, timing=timing)

    async def _dispatch(self, descriptor: RequestDescriptor) -> TransportResponse:
        if descriptor.method is HttpMethod.GET:
            return await self._transport.get(descriptor.full_url, descriptor.headers)
        return await self._transport.post(descriptor.full_url, descriptor.body, descriptor.headers)
