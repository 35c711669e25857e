"""Browser provider implementations."""

from .local_browser import LocalBrowserProvider

__all__ = [
    "LocalBrowserProvider",
]
