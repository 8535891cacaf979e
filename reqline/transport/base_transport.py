"""Abstract HTTP transport used to execute reqlines."""

from abc import ABC, abstractmethod
from typing import Any

from reqline.shared.models import TransportResponse


class HttpTransport(ABC):
    """Abstract interface for performing the outbound HTTP call."""

    @abstractmethod
    async def get(self, url: str, headers: dict[str, Any] | None) -> TransportResponse:
        """
        Send a GET request.

        Args:
            url: Fully resolved target URL
            headers: Headers to send, or None for none

        Returns:
            Response from the target

        Raises:
            NetworkError: If the call fails. The error carries the response
                when the failure is an HTTP error status.
        """
        pass

    @abstractmethod
    async def post(self, url: str, body: Any, headers: dict[str, Any] | None) -> TransportResponse:
        """
        Send a POST request with a JSON body.

        Args:
            url: Fully resolved target URL
            body: JSON compatible request body
            headers: Headers to send, or None for none

        Returns:
            Response from the target

        Raises:
            NetworkError: If the call fails. The error carries the response
                when the failure is an HTTP error status.
        """
        pass
