"""Browser manager for Playwright-based automation."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from .base import BrowserProvider
from .options import LaunchOptions
from .providers import LocalBrowserProvider
from .session import BrowserSession

logger = logging.getLogger(__name__)


class BrowserManager:
    """Hands out browser sessions and keeps open/close statistics."""

    def __init__(self, provider: Optional[BrowserProvider] = None):
        self.provider = provider or LocalBrowserProvider()
        self._session_stats = {
            "opened_sessions": 0,
            "closed_sessions": 0,
            "failed_launches": 0,
        }

    @asynccontextmanager
    async def session(self, options: LaunchOptions) -> AsyncGenerator[BrowserSession, None]:
        """Open a session for the duration of the ``async with`` block."""
        logger.info(f"Creating browser session with provider: {self.provider.__class__.__name__}")
        opened = False
        try:
            async with self.provider.open_session(options) as session:
                opened = True
                self._session_stats["opened_sessions"] += 1
                yield session
        finally:
            if opened:
                self._session_stats["closed_sessions"] += 1
            else:
                self._session_stats["failed_launches"] += 1
            logger.info(f"Session statistics: {self._session_stats}")

    def get_session_stats(self) -> Dict[str, int]:
        """Get current session statistics."""
        return self._session_stats.copy()
