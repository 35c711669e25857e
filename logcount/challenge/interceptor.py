"""Capture Cloudflare Turnstile parameters before the widget renders."""

import asyncio
import json
import logging
from typing import Optional

from playwright.async_api import ConsoleMessage, Page
from pydantic import ValidationError

from ..config import settings
from ..constants import (
    INTERCEPTED_PARAMS_PREFIX,
    TURNSTILE_CALLBACK_NAME,
    TURNSTILE_POLL_INTERVAL_MS,
)
from ..errors import ChallengeCaptureTimeout, UnexpectedFault
from ..models import ChallengeParameters

logger = logging.getLogger(__name__)

# Runs before any page script. Polls until window.turnstile exists, then swaps
# render() for a hook that reports the widget options once and keeps the
# callback for TurnstileTokenCompleter.
INTERCEPT_SCRIPT = """
(() => {
    console.clear = () => console.log('Console was cleared');
    let captured = false;
    const poll = setInterval(() => {
        if (!window.turnstile) {
            return;
        }
        clearInterval(poll);
        window.turnstile.render = (container, options) => {
            if (captured) {
                return;
            }
            const params = {
                sitekey: options.sitekey,
                pageurl: window.location.href,
                data: options.cData,
                pagedata: options.chlPageData,
                action: options.action,
                userAgent: navigator.userAgent,
            };
            window.%(callback)s = options.callback;
            captured = true;
            console.log('%(prefix)s' + JSON.stringify(params));
        };
    }, %(interval)d);
})();
""" % {
    "callback": TURNSTILE_CALLBACK_NAME,
    "prefix": INTERCEPTED_PARAMS_PREFIX,
    "interval": TURNSTILE_POLL_INTERVAL_MS,
}


class ChallengeInterceptor:
    """One-shot subscription to the intercepted Turnstile parameters.

    ``install`` must run before navigation so the hook is in place ahead of
    the widget script; ``wait_for_parameters`` then suspends until the hook
    reports through the console or the capture timeout expires.
    """

    def __init__(self, page: Page, timeout_ms: Optional[float] = None):
        self.page = page
        self.timeout_ms = (
            timeout_ms if timeout_ms is not None else settings.challenge_capture_timeout_ms
        )
        self._future: Optional[asyncio.Future] = None

    async def install(self) -> None:
        """Inject the hook script and start listening to the console."""
        self._future = asyncio.get_running_loop().create_future()
        self.page.on("console", self._on_console)
        await self.page.add_init_script(INTERCEPT_SCRIPT)
        logger.info("Turnstile interception hook installed")

    def _on_console(self, message: ConsoleMessage) -> None:
        text = message.text
        if not text.startswith(INTERCEPTED_PARAMS_PREFIX):
            return
        if self._future is None or self._future.done():
            logger.debug("Ignoring repeated Turnstile parameters")
            return

        try:
            payload = json.loads(text[len(INTERCEPTED_PARAMS_PREFIX):])
            params = ChallengeParameters.from_widget(payload)
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            self._future.set_exception(
                UnexpectedFault(f"Malformed Turnstile parameters: {e}")
            )
            return

        logger.info(
            f"Intercepted Turnstile parameters: sitekey={params.site_key} "
            f"action={params.action} pageurl={params.page_url}"
        )
        self._future.set_result(params)

    async def wait_for_parameters(self) -> ChallengeParameters:
        """Wait for the captured parameters, bounded by the capture timeout."""
        if self._future is None:
            raise RuntimeError("ChallengeInterceptor.install() must be called first")
        try:
            return await asyncio.wait_for(self._future, timeout=self.timeout_ms / 1000)
        except asyncio.TimeoutError as e:
            logger.warning(f"No Turnstile parameters after {self.timeout_ms:.0f}ms")
            raise ChallengeCaptureTimeout(self.timeout_ms) from e
        finally:
            self.page.remove_listener("console", self._on_console)
