import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from ..base import BrowserProvider
from ..options import LaunchOptions
from ..session import BrowserSession

logger = logging.getLogger(__name__)


class LocalBrowserProvider(BrowserProvider):
    """Launches a dedicated local Chromium process per session."""

    @asynccontextmanager
    async def open_session(self, options: LaunchOptions) -> AsyncGenerator[BrowserSession, None]:
        """Get a local browser session with automatic teardown."""
        session = await BrowserSession(options).start()
        session_id = str(id(session))
        logger.info(f"Local browser session {session_id} opened")
        try:
            yield session
        finally:
            await session.close()
            logger.info(f"Local browser session {session_id} closed")
