"""Abstract browser provider interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager

from .options import LaunchOptions
from .session import BrowserSession


class BrowserProvider(ABC):
    """Abstract browser provider interface."""

    @abstractmethod
    def open_session(self, options: LaunchOptions) -> AsyncContextManager[BrowserSession]:
        """Open an isolated browser session that is closed on exit."""
        pass
