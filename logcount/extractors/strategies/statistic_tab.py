"""Ant Design dashboard with a "Detail stats" tab (link type ``c``)."""

import logging
from typing import Dict, List, Optional

from playwright.async_api import Page

from ...browser.options import RELAXED_TLS_LAUNCH_OPTIONS
from ...config import settings
from ...constants import (
    ANT_ACTIVE_TAB_SELECTOR,
    ANT_STATISTIC_SELECTOR,
    ANT_STATISTIC_TITLE_SELECTOR,
    ANT_STATISTIC_VALUE_SELECTOR,
    ANT_TAB_SELECTOR,
)
from ...models import ExtractionResult, LinkType
from ..base import LogsExtractor, parse_count

logger = logging.getLogger(__name__)

CLICK_TAB_JS = """
([selector, label]) => {
    const tab = Array.from(document.querySelectorAll(selector))
        .find(el => el.textContent.trim() === label);
    if (!tab) {
        return false;
    }
    tab.click();
    return true;
}
"""

ACTIVE_TAB_JS = """
([selector, label]) => {
    const active = document.querySelector(selector);
    return !!active && active.textContent.trim() === label;
}
"""

READ_STATISTICS_JS = """
([titleSelector, containerSelector, valueSelector]) =>
    Array.from(document.querySelectorAll(titleSelector)).map(title => {
        const container = title.closest(containerSelector);
        const value = container ? container.querySelector(valueSelector) : null;
        return {
            title: title.textContent.trim(),
            value: value ? value.innerText.trim() : null,
        };
    })
"""


class StatisticTabExtractor(LogsExtractor):
    """Activates the detail tab and reads the statistic labelled "Total"."""

    link_type = LinkType.C
    launch_options = RELAXED_TLS_LAUNCH_OPTIONS

    def __init__(
        self,
        timeout_ms: Optional[float] = None,
        tab_timeout_ms: Optional[float] = None,
        settle_delay_ms: Optional[float] = None,
        tab_label: Optional[str] = None,
        target_label: Optional[str] = None,
    ):
        super().__init__(timeout_ms)
        self.tab_timeout_ms = (
            tab_timeout_ms if tab_timeout_ms is not None else settings.tab_activation_timeout_ms
        )
        self.settle_delay_ms = (
            settle_delay_ms if settle_delay_ms is not None else settings.tab_settle_delay_ms
        )
        self.tab_label = tab_label or settings.detail_tab_label
        self.target_label = target_label or settings.statistic_target_label

    async def extract(self, page: Page) -> ExtractionResult:
        await self._wait_for_selector(page, ANT_TAB_SELECTOR)

        clicked = await page.evaluate(CLICK_TAB_JS, [ANT_TAB_SELECTOR, self.tab_label])
        if clicked:
            logger.info(f"Clicked '{self.tab_label}' tab")
        else:
            logger.warning(f"Tab '{self.tab_label}' not found")

        await self._wait_for_function(
            page,
            ACTIVE_TAB_JS,
            arg=[ANT_ACTIVE_TAB_SELECTOR, self.tab_label],
            condition=f"'{self.tab_label}' tab active",
            timeout_ms=self.tab_timeout_ms,
        )
        logger.info(f"'{self.tab_label}' tab is now active")

        # Statistics re-render after the tab switch
        await page.wait_for_timeout(self.settle_delay_ms)
        await self._wait_for_selector(page, ANT_STATISTIC_TITLE_SELECTOR)

        statistics = await page.evaluate(
            READ_STATISTICS_JS,
            [ANT_STATISTIC_TITLE_SELECTOR, ANT_STATISTIC_SELECTOR, ANT_STATISTIC_VALUE_SELECTOR],
        )
        logs_count = self.pick_count(statistics)
        logger.info(f"'{self.target_label}' logs count: {logs_count}")
        return ExtractionResult(success=True, logs_count=logs_count)

    def pick_count(self, statistics: List[Dict[str, Optional[str]]]) -> Optional[int]:
        """Value of the last statistic titled ``target_label`` that has a value element."""
        logs_count = None
        for statistic in statistics:
            if statistic.get("title") == self.target_label and statistic.get("value") is not None:
                logs_count = parse_count(statistic["value"])
        return logs_count
