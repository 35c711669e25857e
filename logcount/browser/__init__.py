"""Browser management module."""

from .base import BrowserProvider
from .manager import BrowserManager
from .options import (
    BASIC_LAUNCH_OPTIONS,
    RELAXED_TLS_LAUNCH_OPTIONS,
    TURNSTILE_LAUNCH_OPTIONS,
    LaunchOptions,
)
from .providers import LocalBrowserProvider
from .session import BrowserSession

__all__ = [
    "BrowserProvider",
    "BrowserManager",
    "BrowserSession",
    "LaunchOptions",
    "LocalBrowserProvider",
    "BASIC_LAUNCH_OPTIONS",
    "RELAXED_TLS_LAUNCH_OPTIONS",
    "TURNSTILE_LAUNCH_OPTIONS",
]
