"""aiohttp client session lifecycle."""

import aiohttp

from reqline.shared.logging import get_logger

logger = get_logger(__name__)


async def setup_session(timeout: float) -> aiohttp.ClientSession:
    """Open the client session shared by outbound requests."""
    session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
    logger.info(f"Opened HTTP client session (timeout {timeout}s)")

    return session


async def cleanup_session(session: aiohttp.ClientSession | None):
    """Close the client session."""
    if session and not session.closed:
        await session.close()
        logger.info("Closed HTTP client session")
