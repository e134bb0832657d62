"""Client for the released.fyi release API."""

import logging
from time import sleep
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from schemas.release import ReleaseData

from .exceptions import (
    InvalidReleaseError,
    RateLimitError,
    ReleaseAPIError,
    ReleaseNotFoundError,
    ReleaseUnavailableError,
)

logger = logging.getLogger(__name__)

LATEST_TAG = "latest"


class ReleasedClient:
    """Fetches release metadata for a GitHub repository.

    The API serves the latest release at /{owner}/{repo} and a specific one
    when a tag query parameter is given. Frames are interactive, so the
    client fails fast: one attempt unless configured otherwise.

    Config keys:
        base_url (required): Release API base URL
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Attempts for connection failures and timeouts (default: 1)
        retry_delay: Delay between attempts in seconds (default: 1)
        headers: Additional headers to include in requests

    Example:
        config = {"base_url": "https://api.released.fyi"}
        with ReleasedClient(config) as client:
            release = client.fetch("octocat", "hello-world")
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def retry_attempts(self) -> int:
        return max(1, int(self._config.get("retry_attempts", 1)))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch(
        self,
        owner: str,
        repo: str,
        tag: str = LATEST_TAG,
        validate: bool = True,
    ) -> ReleaseData | dict[str, Any]:
        """Fetch one release.

        Args:
            owner: Repository owner
            repo: Repository name
            tag: Release tag, or "latest"
            validate: If True, validate the payload against ReleaseData

        Returns:
            ReleaseData if validate=True, otherwise the raw payload

        Raises:
            ReleaseNotFoundError: If the repository or tag does not exist
            InvalidReleaseError: If validate=True and the payload is malformed
            ReleaseAPIError: For any other non-2xx response
            ReleaseUnavailableError: If the API cannot be reached
        """
        logger.debug(f"Fetching release {owner}/{repo}@{tag}")
        response = self._get_release(owner, repo, tag)
        data = response.json()

        if validate:
            return self._validate_release(data, owner, repo)
        return data

    @staticmethod
    def release_path(owner: str, repo: str) -> str:
        return f"/{owner}/{repo}"

    def _build_params(self, tag: str) -> dict[str, str]:
        """The API treats a missing tag as the latest release."""
        if tag == LATEST_TAG:
            return {}
        return {"tag": tag}

    def _get_release(self, owner: str, repo: str, tag: str) -> httpx.Response:
        """GET the release, retrying only connection failures and timeouts."""
        path = self.release_path(owner, repo)
        last_exception: Exception | None = None

        for attempt in range(self.retry_attempts):
            try:
                response = self.client.request("GET", path, params=self._build_params(tag))
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                logger.warning(
                    f"Release API unreachable for {owner}/{repo} "
                    f"(attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
                if attempt < self.retry_attempts - 1:
                    sleep(self.retry_delay)
                continue
            return self._check_status(response, owner, repo, tag)

        msg = f"Release API unreachable after {self.retry_attempts} attempts"
        raise ReleaseUnavailableError(msg) from last_exception

    def _check_status(
        self, response: httpx.Response, owner: str, repo: str, tag: str
    ) -> httpx.Response:
        """Map a failed release response onto the release errors.

        Raises:
            ReleaseNotFoundError: For 404 responses
            RateLimitError: For 429 responses
            ReleaseAPIError: For any other non-2xx response
        """
        if response.is_success:
            return response

        status_code = response.status_code
        if status_code == 404:
            raise ReleaseNotFoundError(owner, repo, tag)
        if status_code == 429:
            raise RateLimitError(f"Rate limit exceeded fetching {owner}/{repo}")
        raise ReleaseAPIError(
            f"Release API error {status_code} for {owner}/{repo}@{tag}",
            status_code=status_code,
        )

    def _validate_release(self, data: dict[str, Any], owner: str, repo: str) -> ReleaseData:
        try:
            return ReleaseData.model_validate(data)
        except PydanticValidationError as e:
            raise InvalidReleaseError(
                f"Release {owner}/{repo} failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e
