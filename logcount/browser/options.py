"""Per-variant browser launch configuration."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..config import settings
from ..constants import BASIC_CHROMIUM_ARGS, HARDENED_CHROMIUM_ARGS


class LaunchOptions(BaseModel):
    """Launch and context flags for one browser session.

    ``ignore_https_errors`` relaxes certificate checking for the session's
    own browser context only; nothing here touches process-wide TLS state.
    """

    model_config = ConfigDict(frozen=True)

    args: Tuple[str, ...] = tuple(BASIC_CHROMIUM_ARGS)
    headless: Optional[bool] = None
    executable_path: Optional[str] = None
    ignore_https_errors: bool = False
    user_agent: Optional[str] = None

    def launch_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``chromium.launch``."""
        kwargs: Dict[str, Any] = {
            "headless": self.headless if self.headless is not None else settings.headless,
            "args": list(self.args),
        }
        executable_path = self.executable_path or settings.chrome_executable_path
        if executable_path:
            kwargs["executable_path"] = executable_path
        return kwargs

    def context_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``browser.new_context``."""
        kwargs: Dict[str, Any] = {"ignore_https_errors": self.ignore_https_errors}
        if self.user_agent:
            kwargs["user_agent"] = self.user_agent
        return kwargs


# Variant A: hardened low-memory flags, user agent reported to the solver
TURNSTILE_LAUNCH_OPTIONS = LaunchOptions(
    args=tuple(HARDENED_CHROMIUM_ARGS),
    user_agent=settings.turnstile_user_agent,
)

# Variants B and D: strict TLS
BASIC_LAUNCH_OPTIONS = LaunchOptions()

# Variant C: the dashboard is served with an untrusted certificate
RELAXED_TLS_LAUNCH_OPTIONS = LaunchOptions(
    args=("--ignore-certificate-errors", *BASIC_CHROMIUM_ARGS),
    ignore_https_errors=True,
)
