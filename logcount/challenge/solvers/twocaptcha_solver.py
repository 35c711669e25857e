"""2Captcha Turnstile solver."""

import logging
from typing import Any, Dict, Optional

from twocaptcha import AsyncTwoCaptcha
from twocaptcha.exceptions.api import ApiException, NetworkException
from twocaptcha.solver import SolverExceptions

from ...config import settings
from ...errors import SolverError
from ...models import ChallengeParameters
from ..base import CaptchaSolver

logger = logging.getLogger(__name__)


class TwoCaptchaSolver(CaptchaSolver):
    """Solves Cloudflare Turnstile through the 2captcha.com API."""

    def __init__(
        self,
        api_key: str,
        timeout: Optional[int] = None,
        polling_interval: Optional[int] = None,
    ):
        super().__init__(api_key)
        self.timeout = timeout if timeout is not None else settings.captcha_solve_timeout
        self.polling_interval = (
            polling_interval
            if polling_interval is not None
            else settings.captcha_polling_interval
        )
        self._solver = AsyncTwoCaptcha(
            apiKey=api_key,
            defaultTimeout=self.timeout,
            pollingInterval=self.polling_interval,
        )

    @staticmethod
    def _turnstile_kwargs(params: ChallengeParameters) -> Dict[str, Any]:
        kwargs = {
            "sitekey": params.site_key,
            "url": params.page_url,
            "useragent": params.user_agent,
            "action": params.action,
            "data": params.data,
            "pagedata": params.page_data,
        }
        return {key: value for key, value in kwargs.items() if value is not None}

    async def solve(self, params: ChallengeParameters) -> str:
        """Submit the Turnstile challenge and wait for the token."""
        logger.info(f"Submitting Turnstile challenge to 2captcha for {params.page_url}")
        try:
            result = await self._solver.turnstile(**self._turnstile_kwargs(params))
        except (ApiException, NetworkException, SolverExceptions) as e:
            raise SolverError(f"2captcha failed to solve Turnstile: {e}") from e

        token = result.get("code") if isinstance(result, dict) else None
        if not token:
            raise SolverError(f"2captcha returned no token: {result!r}")

        logger.info(f"Turnstile solved by 2captcha (captcha id {result.get('captchaId')})")
        return token
