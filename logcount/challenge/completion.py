"""Deliver a solved Turnstile token back into the page."""

import asyncio
import logging
from typing import Optional

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import settings
from ..constants import TURNSTILE_CALLBACK_NAME
from ..errors import ContentReadyTimeout

logger = logging.getLogger(__name__)

INVOKE_CALLBACK_JS = f"token => window.{TURNSTILE_CALLBACK_NAME}(token)"


class TurnstileTokenCompleter:
    """Invoke the stored widget callback and wait for protected content."""

    def __init__(
        self,
        settle_timeout_ms: Optional[float] = None,
        ready_timeout_ms: Optional[float] = None,
    ):
        self.settle_timeout_ms = (
            settle_timeout_ms
            if settle_timeout_ms is not None
            else settings.navigation_settle_timeout_ms
        )
        self.ready_timeout_ms = (
            ready_timeout_ms if ready_timeout_ms is not None else settings.content_ready_timeout_ms
        )

    async def complete(self, page: Page, token: str, ready_selector: str) -> None:
        """Hand ``token`` to the page callback, then wait for ``ready_selector``."""
        logger.info("Delivering solved token to Turnstile callback")
        navigated = asyncio.ensure_future(
            page.wait_for_event(
                "framenavigated",
                predicate=lambda frame: frame == page.main_frame,
                timeout=self.settle_timeout_ms,
            )
        )
        try:
            await page.evaluate(INVOKE_CALLBACK_JS, token)
            await self._settle(page, navigated)
        finally:
            if not navigated.done():
                navigated.cancel()
                await asyncio.gather(navigated, return_exceptions=True)

        try:
            await page.wait_for_selector(ready_selector, timeout=self.ready_timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ContentReadyTimeout(ready_selector, self.ready_timeout_ms) from e
        logger.info(f"Protected content ready ({ready_selector})")

    async def _settle(self, page: Page, navigated: "asyncio.Future") -> None:
        # Callbacks either navigate or redraw in place; take whichever lands first.
        idle = asyncio.ensure_future(
            page.wait_for_load_state("networkidle", timeout=self.settle_timeout_ms)
        )
        done, pending = await asyncio.wait(
            {navigated, idle}, return_when=asyncio.FIRST_COMPLETED
        )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, PlaywrightTimeoutError):
                raise error

        if navigated in done and navigated.exception() is None:
            logger.info("Page navigated after token callback, waiting for network idle")
            try:
                await page.wait_for_load_state("networkidle", timeout=self.settle_timeout_ms)
            except PlaywrightTimeoutError:
                logger.warning("Network never went idle, relying on content marker")
        elif all(task.exception() is not None for task in done):
            logger.warning("Page never settled after token callback, relying on content marker")
        else:
            logger.info("No navigation after token callback, network is idle")
