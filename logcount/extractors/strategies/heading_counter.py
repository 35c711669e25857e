"""Dashboard with a heading counter that starts as "?" (link type ``d``)."""

import logging

from playwright.async_api import Page

from ...constants import LOGS_HEADING_PLACEHOLDER, LOGS_HEADING_SELECTOR
from ...models import ExtractionResult, LinkType
from ..base import LogsExtractor, parse_count

logger = logging.getLogger(__name__)

NUMERIC_HEADING_JS = """
([selector, placeholder]) => {
    const el = document.querySelector(selector);
    if (!el) {
        return false;
    }
    const text = el.innerText.trim();
    return text.length > 0 && text !== placeholder && !isNaN(text);
}
"""


class HeadingCounterExtractor(LogsExtractor):
    """Waits past the placeholder glyph and reads ``h6#logs_count``."""

    link_type = LinkType.D
    selector = LOGS_HEADING_SELECTOR

    async def extract(self, page: Page) -> ExtractionResult:
        await self._wait_for_function(
            page,
            NUMERIC_HEADING_JS,
            arg=[self.selector, LOGS_HEADING_PLACEHOLDER],
            condition=f"{self.selector} is numeric",
        )

        raw_text = (await page.inner_text(self.selector)).strip()
        logger.debug(f"Heading logs text: {raw_text!r}")
        return ExtractionResult(success=True, logs_count=parse_count(raw_text))
