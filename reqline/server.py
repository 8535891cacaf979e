"""
Reqline Server - executes HTTP requests described by a one-line DSL.
"""

import asyncio
from collections.abc import AsyncIterator

import aiohttp_cors
import uvloop
from aiohttp import web

from reqline.executor import RequestExecutor
from reqline.handlers import EXECUTOR_KEY, ReqlineHandlers
from reqline.shared.config import Settings, get_settings
from reqline.shared.logging import get_logger, setup_logging
from reqline.transport.aiohttp import AiohttpTransport, cleanup_session, setup_session
from reqline.transport.base_transport import HttpTransport

logger = get_logger(__name__)


def _http_client_ctx(settings: Settings):
    """Build the cleanup context owning the outbound client session."""

    async def http_client(app: web.Application) -> AsyncIterator[None]:
        session = await setup_session(settings.request_timeout)
        app[EXECUTOR_KEY] = RequestExecutor(AiohttpTransport(session))

        yield

        await cleanup_session(session)

    return http_client


def setup_routes(app: web.Application, handlers: ReqlineHandlers) -> None:
    """Configure application routes."""
    app.router.add_post("/reqline", handlers.handle_reqline)
    app.router.add_get("/status", handlers.handle_status)


def create_app(settings: Settings | None = None, transport: HttpTransport | None = None) -> web.Application:
    """
    Create and configure the reqline application.

    Args:
        settings: Settings to use (default: loaded from the environment)
        transport: Transport for outbound calls. When omitted an aiohttp
            session is opened on startup and closed on cleanup.
    """
    settings = settings or get_settings()
    app = web.Application()

    if transport is None:
        app.cleanup_ctx.append(_http_client_ctx(settings))
    else:
        app[EXECUTOR_KEY] = RequestExecutor(transport)

    setup_routes(app, ReqlineHandlers())

    cors = aiohttp_cors.setup(
        app,
        defaults={
            settings.cors_allow_origin: aiohttp_cors.ResourceOptions(
                allow_credentials=True,
                expose_headers="*",
                allow_headers="*",
            )
        },
    )
    for route in list(app.router.routes()):
        cors.add(route)

    return app


class ReqlineServer:
    """Main server class serving the reqline endpoint."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    async def start(self) -> None:
        """Start the reqline server."""
        app = create_app(self.settings)

        runner = web.AppRunner(app)
        await runner.setup()

        site = web.TCPSite(runner, self.settings.host, self.settings.port)
        await site.start()

        logger.info(f"Reqline server started on http://{self.settings.host}:{self.settings.port}")

        # Keep running
        try:
            await asyncio.Event().wait()
        finally:
            logger.info("Shutting down...")
            await runner.cleanup()


def main() -> None:
    """Entry point for the server."""
    # Install uvloop as the default event loop
    uvloop.install()

    settings = get_settings()
    setup_logging(settings.log_level, access_level=settings.access_log_level)
    server = ReqlineServer(settings)

    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == "__main__":
    main()
