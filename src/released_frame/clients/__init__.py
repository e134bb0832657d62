"""Network client for release data."""

from .exceptions import (
    InvalidReleaseError,
    RateLimitError,
    ReleaseAPIError,
    ReleaseClientError,
    ReleaseNotFoundError,
    ReleaseUnavailableError,
)
from .released_client import LATEST_TAG, ReleasedClient

__all__ = [
    "ReleasedClient",
    "LATEST_TAG",
    "ReleaseClientError",
    "ReleaseUnavailableError",
    "ReleaseAPIError",
    "RateLimitError",
    "ReleaseNotFoundError",
    "InvalidReleaseError",
]
