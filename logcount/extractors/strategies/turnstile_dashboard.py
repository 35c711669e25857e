"""Turnstile-protected dashboard (link type ``a``)."""

import logging
import re
from typing import Optional, Pattern, Union

from playwright.async_api import Page

from ...browser.options import TURNSTILE_LAUNCH_OPTIONS
from ...config import settings
from ...constants import TURNSTILE_READY_SELECTOR
from ...models import ExtractionResult, LinkType
from ..base import LogsExtractor

logger = logging.getLogger(__name__)


class TurnstileDashboardExtractor(LogsExtractor):
    """Reads "<N> логов" from the page once the challenge has been passed."""

    link_type = LinkType.A
    launch_options = TURNSTILE_LAUNCH_OPTIONS
    requires_challenge = True
    ready_selector = TURNSTILE_READY_SELECTOR

    def __init__(
        self,
        timeout_ms: Optional[float] = None,
        pattern: Union[str, Pattern, None] = None,
    ):
        super().__init__(timeout_ms)
        self.pattern = re.compile(pattern if pattern is not None else settings.logs_count_pattern)

    async def extract(self, page: Page) -> ExtractionResult:
        await self._wait_for_selector(page, self.ready_selector)

        content = await page.content()
        match = self.pattern.search(content)
        logs_count = int(match.group(1)) if match else None
        logger.info(f"Turnstile dashboard logs count: {logs_count}")
        return ExtractionResult(success=True, logs_count=logs_count)
