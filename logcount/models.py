"""Data models for the log count service."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidRequestError, UnsupportedVariantError


class LinkType(str, Enum):
    """Supported dashboard layouts."""

    A = "a"  # Turnstile-protected dashboard
    B = "b"  # Counter container
    C = "c"  # Ant Design statistics tab
    D = "d"  # Heading counter


class FetchLogsRequest(BaseModel):
    """Inbound request body; fields are checked by the front door."""

    url: Optional[str] = None
    api_key: Optional[str] = None
    link_type: Optional[str] = None

    def to_extraction_request(self) -> "ExtractionRequest":
        """Validate the body and build the immutable pipeline request."""
        if not self.url or not self.api_key or not self.link_type:
            raise InvalidRequestError("URL, API key and link_type are required")
        try:
            link_type = LinkType(self.link_type.lower())
        except ValueError as e:
            raise UnsupportedVariantError(self.link_type) from e
        return ExtractionRequest(
            target_url=self.url,
            solver_api_key=self.api_key,
            link_type=link_type,
        )


class ExtractionRequest(BaseModel):
    """One extraction call, constructed once per incoming request."""

    model_config = ConfigDict(frozen=True)

    target_url: str
    solver_api_key: str = Field(repr=False)
    link_type: LinkType


class ChallengeParameters(BaseModel):
    """Turnstile initialisation data captured from the page."""

    model_config = ConfigDict(frozen=True)

    site_key: str
    page_url: str
    action: Optional[str] = None
    data: Optional[str] = None
    page_data: Optional[str] = None
    user_agent: str

    @classmethod
    def from_widget(cls, payload: Dict[str, Any]) -> "ChallengeParameters":
        """Build parameters from the intercepted console payload."""
        return cls(
            site_key=payload["sitekey"],
            page_url=payload["pageurl"],
            action=payload.get("action"),
            data=payload.get("data"),
            page_data=payload.get("pagedata"),
            user_agent=payload["userAgent"],
        )


class ExtractionResult(BaseModel):
    """Outcome of a successful pipeline run."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    logs_count: Optional[int] = Field(default=None, alias="logsCount")


class ErrorResponse(BaseModel):
    """Error payload returned by the front door."""

    error: str
