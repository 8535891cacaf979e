"""HTTP request handlers for the reqline service."""

from aiohttp import web

from reqline.errors import MissingFieldError, ReqlineError
from reqline.executor import RequestExecutor
from reqline.parser import parse_reqline_or_raise
from reqline.shared.logging import get_logger
from reqline.shared.models import ErrorEnvelope, ReqlineEnvelope

logger = get_logger(__name__)

EXECUTOR_KEY = web.AppKey("executor", RequestExecutor)


class ReqlineHandlers:
    """HTTP handlers exposing reqline parsing and execution."""

    def _get_executor(self, request: web.Request) -> RequestExecutor:
        """Get the request executor from the application state."""
        executor = request.app.get(EXECUTOR_KEY)
        if executor is None:
            raise RuntimeError("Request executor is not initialized")
        return executor

    async def handle_reqline(self, request: web.Request) -> web.Response:
        """Parse and execute the reqline found in the request body."""
        try:
            reqline = await self._extract_reqline(request)
            descriptor = parse_reqline_or_raise(reqline)
            result = await self._get_executor(request).execute(descriptor)
        except ReqlineError as exc:
            logger.info(f"Rejected reqline: {exc.message}")
            return self._error_response(exc.message, status=400)
        except Exception as exc:
            logger.exception(f"Reqline failed due to unexpected error: {exc}")
            return self._error_response("Internal server error", status=500)

        envelope = ReqlineEnvelope.build(descriptor, result)
        return web.json_response(envelope.model_dump(mode="json"))

    async def handle_status(self, request: web.Request) -> web.Response:
        """Return service liveness."""
        return web.json_response({"status": "ok"})

    async def _extract_reqline(self, request: web.Request) -> object:
        """Read the ``reqline`` field from a JSON body."""
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        reqline = payload.get("reqline") if isinstance(payload, dict) else None
        if not reqline:
            raise MissingFieldError("Missing reqline in request body")
        return reqline

    def _error_response(self, message: str, status: int) -> web.Response:
        envelope = ErrorEnvelope(message=message)
        return web.json_response(envelope.model_dump(), status=status)
