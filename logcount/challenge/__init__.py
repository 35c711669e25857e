"""Turnstile challenge handling: interception, solving and token delivery."""

from .base import CaptchaSolver
from .completion import TurnstileTokenCompleter
from .factory import CaptchaSolverFactory, CaptchaSolverType
from .interceptor import ChallengeInterceptor
from .solvers import TwoCaptchaSolver

__all__ = [
    "CaptchaSolver",
    "CaptchaSolverFactory",
    "CaptchaSolverType",
    "ChallengeInterceptor",
    "TurnstileTokenCompleter",
    "TwoCaptchaSolver",
]
