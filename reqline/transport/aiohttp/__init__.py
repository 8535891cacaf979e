from reqline.transport.aiohttp.client import cleanup_session, setup_session
from reqline.transport.aiohttp.transport import AiohttpTransport

__all__ = ["AiohttpTransport", "cleanup_session", "setup_session"]
