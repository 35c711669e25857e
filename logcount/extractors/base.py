"""Base class for dashboard log count extractors."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..browser.options import BASIC_LAUNCH_OPTIONS, LaunchOptions
from ..config import settings
from ..errors import ExtractionTimeout
from ..models import ExtractionResult, LinkType

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_count(text: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``text`` the way ``parseInt`` does.

    Returns None when there is no leading integer.
    """
    if text is None:
        return None
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


class LogsExtractor(ABC):
    """Wait for a dashboard layout to be ready and read its log count.

    Subclasses describe how their dashboard is launched and whether it sits
    behind a Turnstile challenge; the orchestrator reads these attributes
    rather than branching on the link type.
    """

    link_type: LinkType
    launch_options: LaunchOptions = BASIC_LAUNCH_OPTIONS
    requires_challenge: bool = False
    ready_selector: Optional[str] = None

    def __init__(self, timeout_ms: Optional[float] = None):
        self.timeout_ms = timeout_ms if timeout_ms is not None else settings.extraction_timeout_ms

    @abstractmethod
    async def extract(self, page: Page) -> ExtractionResult:
        """Extract the log count from an already loaded page."""
        pass

    async def _wait_for_selector(
        self, page: Page, selector: str, timeout_ms: Optional[float] = None
    ) -> None:
        timeout_ms = timeout_ms if timeout_ms is not None else self.timeout_ms
        try:
            await page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            logger.warning(f"[{self.link_type.value}] Timed out waiting for {selector}")
            raise ExtractionTimeout(selector, timeout_ms, self.link_type.value) from e

    async def _wait_for_function(
        self,
        page: Page,
        expression: str,
        arg=None,
        condition: str = "",
        timeout_ms: Optional[float] = None,
    ) -> None:
        timeout_ms = timeout_ms if timeout_ms is not None else self.timeout_ms
        try:
            await page.wait_for_function(expression, arg=arg, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            logger.warning(f"[{self.link_type.value}] Timed out waiting for {condition or 'condition'}")
            raise ExtractionTimeout(condition or expression, timeout_ms, self.link_type.value) from e
