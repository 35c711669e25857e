"""A single isolated browser process with one page."""

import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright_stealth import Stealth

from ..config import settings
from ..constants import DEFAULT_WAIT_UNTIL
from ..errors import LaunchError, NavigationTimeout
from .options import LaunchOptions

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns one Chromium process, its context and a single page."""

    def __init__(self, options: LaunchOptions):
        self.options = options
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self._playwright_cm = None
        self._closed = False

    def _playwright_context(self):
        if settings.stealth_enabled:
            return Stealth().use_async(async_playwright())
        return async_playwright()

    async def start(self) -> "BrowserSession":
        """Launch the browser and open the page."""
        try:
            playwright_cm = self._playwright_context()
            playwright = await playwright_cm.__aenter__()
            self._playwright_cm = playwright_cm
            logger.info("Launching local Chromium browser")
            self.browser = await playwright.chromium.launch(**self.options.launch_kwargs())
            self.context = await self.browser.new_context(**self.options.context_kwargs())
            self.page = await self.context.new_page()
        except Exception as e:
            logger.error(f"Browser launch failed: {e}")
            await self.close()
            raise LaunchError(f"Browser failed to start: {e}") from e

        logger.info("Browser page created successfully")
        return self

    async def navigate(
        self,
        url: str,
        wait_until: str = DEFAULT_WAIT_UNTIL,
        timeout_ms: Optional[float] = None,
    ) -> None:
        """Navigate the page, raising NavigationTimeout if the load condition is missed."""
        timeout_ms = timeout_ms if timeout_ms is not None else settings.navigation_timeout_ms
        logger.info(f"Navigating to {url} (wait_until={wait_until})")
        try:
            await self.page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeout(url, wait_until, timeout_ms) from e

    async def close(self) -> None:
        """Terminate the browser process; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True

        if self.context is not None:
            try:
                await self.context.close()
            except Exception as e:
                logger.warning(f"Error closing browser context: {e}")
        if self.browser is not None:
            try:
                await self.browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
        if self._playwright_cm is not None:
            try:
                await self._playwright_cm.__aexit__(None, None, None)
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
        logger.info("Browser session closed")

    @property
    def closed(self) -> bool:
        return self._closed
