"""Typed exceptions for the log count pipeline."""

from typing import Optional


class LogsFetchError(Exception):
    """Base exception for all log count pipeline errors."""


class InvalidRequestError(LogsFetchError):
    """The inbound request is missing required fields."""


class UnsupportedVariantError(InvalidRequestError):
    """The requested link type has no extraction strategy."""

    def __init__(self, link_type: str):
        self.link_type = link_type
        super().__init__(f"Unsupported link_type: {link_type}")


class LaunchError(LogsFetchError):
    """The browser engine failed to start."""


class NavigationTimeout(LogsFetchError, TimeoutError):
    """The page did not reach its load condition in time."""

    def __init__(self, url: str, wait_until: str, timeout_ms: float):
        self.url = url
        self.wait_until = wait_until
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Navigation to {url} did not reach '{wait_until}' within {timeout_ms:.0f}ms"
        )


class ChallengeCaptureTimeout(LogsFetchError, TimeoutError):
    """The Turnstile widget never exposed its parameters."""

    def __init__(self, timeout_ms: float):
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timeout waiting for CAPTCHA parameters after {timeout_ms:.0f}ms"
        )


class SolverError(LogsFetchError):
    """The CAPTCHA solving service did not return a token."""


class ContentReadyTimeout(LogsFetchError, TimeoutError):
    """Protected content never rendered after the token was delivered."""

    def __init__(self, selector: str, timeout_ms: float):
        self.selector = selector
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Content marker '{selector}' did not appear within {timeout_ms:.0f}ms"
        )


class ExtractionTimeout(LogsFetchError, TimeoutError):
    """A strategy's ready condition was not met in time."""

    def __init__(self, condition: str, timeout_ms: float, link_type: Optional[str] = None):
        self.condition = condition
        self.timeout_ms = timeout_ms
        self.link_type = link_type
        prefix = f"[{link_type}] " if link_type else ""
        super().__init__(
            f"{prefix}Ready condition '{condition}' not met within {timeout_ms:.0f}ms"
        )


class UnexpectedFault(LogsFetchError):
    """Catch-all for failures outside the known error kinds."""
