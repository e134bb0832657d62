"""Errors raised while fetching a release.

ReleaseNotFoundError is the only one the frame controller treats as a
normal outcome; everything else is an upstream failure and propagates.
"""


class ReleaseClientError(Exception):
    """Base exception for release API failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ReleaseUnavailableError(ReleaseClientError):
    """The release API could not be reached or did not answer in time."""


class ReleaseAPIError(ReleaseClientError):
    """The release API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(ReleaseAPIError):
    """The release API refused the request with a 429."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class ReleaseNotFoundError(ReleaseAPIError):
    """No such repository, or no release with the requested tag.

    Attributes:
        owner: Repository owner that was requested
        repo: Repository name that was requested
        tag: Release tag that was requested
    """

    def __init__(self, owner: str, repo: str, tag: str = "latest"):
        self.owner = owner
        self.repo = repo
        self.tag = tag
        super().__init__(f"No release {tag} for {owner}/{repo}", status_code=404)


class InvalidReleaseError(ReleaseClientError):
    """The release payload does not match the ReleaseData schema."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(message)
