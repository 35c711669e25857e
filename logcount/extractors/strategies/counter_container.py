"""Dashboard with a plain counter container (link type ``b``)."""

import logging

from playwright.async_api import Page

from ...constants import COUNTER_CONTAINER_SELECTOR
from ...models import ExtractionResult, LinkType
from ..base import LogsExtractor, parse_count

logger = logging.getLogger(__name__)

NON_EMPTY_TEXT_JS = """
selector => {
    const el = document.querySelector(selector);
    return !!el && el.innerText.trim().length > 0;
}
"""


class CounterContainerExtractor(LogsExtractor):
    """Reads the integer rendered inside ``#all``."""

    link_type = LinkType.B
    selector = COUNTER_CONTAINER_SELECTOR

    async def extract(self, page: Page) -> ExtractionResult:
        await self._wait_for_selector(page, self.selector)
        await self._wait_for_function(
            page,
            NON_EMPTY_TEXT_JS,
            arg=self.selector,
            condition=f"{self.selector} has text",
        )

        raw_text = (await page.inner_text(self.selector)).strip()
        logger.debug(f"Raw text from {self.selector}: {raw_text!r}")
        return ExtractionResult(success=True, logs_count=parse_count(raw_text))
