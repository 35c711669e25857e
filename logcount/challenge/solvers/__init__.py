"""CAPTCHA solver implementations."""

from .twocaptcha_solver import TwoCaptchaSolver

__all__ = [
    "TwoCaptchaSolver",
]
