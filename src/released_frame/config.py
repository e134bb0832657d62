"""Frame server configuration."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from released_frame import __version__
from released_frame.paging import DEFAULT_PAGE_CAPACITY, ClampPolicy

DEFAULT_API_BASE_URL = "https://api.released.fyi"
DEFAULT_ORIGIN = "https://released.fyi"
DEFAULT_STATE_SECRET = "released-frame-development-state-secret"

ENV_VARS = {
    "api_base_url": "RELEASED_API_BASE_URL",
    "origin": "RELEASED_ORIGIN",
    "page_capacity": "RELEASED_PAGE_CAPACITY",
    "clamp_policy": "RELEASED_CLAMP_POLICY",
    "state_secret": "RELEASED_STATE_SECRET",
}


class FrameConfig(BaseModel):
    """Settings for fetching, paging and rendering release frames.

    Attributes:
        api_base_url: Base URL of the release API
        origin: Public origin the frame is served from, used for post URLs
        page_capacity: Maximum number of changelog elements per page
        clamp_policy: How stale page indices are brought back into range
        state_secret: Secret used to sign navigation state
        timeout: Release API timeout in seconds
        retry_attempts: Attempts per release API request
        image_size: Edge length of the square frame image in pixels
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    origin: str = DEFAULT_ORIGIN
    page_capacity: int = Field(default=DEFAULT_PAGE_CAPACITY, ge=1)
    clamp_policy: ClampPolicy = "nearest"
    state_secret: str = Field(default=DEFAULT_STATE_SECRET, min_length=1)
    timeout: float = Field(default=30, gt=0)
    retry_attempts: int = Field(default=1, ge=1)
    image_size: int = Field(default=512, ge=64)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> "FrameConfig":
        """Build a config from environment variables, then explicit overrides."""
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {
            field: environ[var] for field, var in ENV_VARS.items() if environ.get(var)
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)

    def client_config(self) -> dict:
        """Dict config for ReleasedClient."""
        return {
            "base_url": self.api_base_url,
            "timeout": self.timeout,
            "retry_attempts": self.retry_attempts,
            "headers": {
                "User-Agent": f"released-frame/{__version__} (+{self.origin})",
            },
        }
