"""Base class for CAPTCHA solving services."""

from abc import ABC, abstractmethod

from ..models import ChallengeParameters


class CaptchaSolver(ABC):
    """Abstract CAPTCHA solving service bound to one caller's API key."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    @abstractmethod
    async def solve(self, params: ChallengeParameters) -> str:
        """Submit the challenge and return the solution token.

        Raises SolverError when the service does not produce a token. One
        attempt per call; callers do not retry.
        """
        pass
