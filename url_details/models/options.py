from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from url_details.config import Settings


class FetchOptions(BaseModel):
    """Options for the single outbound GET made for a URL details request.

    Extra fields are allowed so an options hook can attach its own values;
    they travel with the options object and are visible on the outcome.
    """

    model_config = ConfigDict(extra="allow")

    timeout: float = Field(gt=0, description="Total request timeout in seconds.")
    limit_response_size: int = Field(
        gt=0, description="Maximum number of body bytes kept; the rest is discarded."
    )
    max_redirects: int = Field(default=5, ge=0)
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FetchOptions":
        return cls(
            timeout=settings.timeout,
            limit_response_size=settings.max_body_bytes,
            max_redirects=settings.max_redirects,
            headers={"User-Agent": settings.user_agent},
        )
