"""Frame controller for paginated release notes.

One call to FrameController.handle covers a whole interaction:

1. Reject unbound route placeholders as not found
2. Fetch the release (a 404 is also not found)
3. Filter and paginate the changelog items
4. Apply the pressed button to the signed state and clamp it
5. Derive the buttons for the resulting page
"""

import logging

from schemas.frame import FrameRequest, FrameResult, NotFoundResult, ReleaseFrame
from schemas.release import ReleaseData
from schemas.state import NavState

from .clients import ReleaseNotFoundError, ReleasedClient
from .config import FrameConfig
from .paging import apply, available_controls, clamp, drop_leading_placeholder, paginate
from .state import StateCodec, StateError

logger = logging.getLogger(__name__)

OWNER_PLACEHOLDER = ":owner"
REPO_PLACEHOLDER = ":repo"


def is_unbound_route(owner: str, repo: str) -> bool:
    """True when the route was requested without concrete owner/repo values."""
    return owner == OWNER_PLACEHOLDER and repo == REPO_PLACEHOLDER


class FrameController:
    """Turns frame interactions into renderable results.

    Holds no per-session data: navigation state arrives and leaves as a
    signed token, so one controller can serve any number of sessions.

    Attributes:
        client: Data source used to fetch releases
        config: Paging and signing settings
        codec: Signs and verifies navigation state
    """

    def __init__(
        self,
        client: ReleasedClient,
        config: FrameConfig | None = None,
        codec: StateCodec | None = None,
    ):
        self.client = client
        self.config = config or FrameConfig()
        self.codec = codec or StateCodec(self.config.state_secret)

    def handle(self, request: FrameRequest) -> FrameResult:
        """Process one interaction.

        Args:
            request: Route values, pressed button and previous state

        Returns:
            NotFoundResult if there is no such release, otherwise a
            ReleaseFrame for the current page

        Raises:
            ReleaseClientError: For upstream failures other than not found
        """
        owner, repo, tag = request.owner, request.repo, request.tag or "latest"

        if is_unbound_route(owner, repo):
            logger.info("Route placeholders are unbound, rendering not found")
            return NotFoundResult(owner=owner, repo=repo, tag=tag)

        try:
            release = self.client.fetch(owner, repo, tag)
        except ReleaseNotFoundError:
            logger.info(f"No release for {owner}/{repo} @ {tag}")
            return NotFoundResult(owner=owner, repo=repo, tag=tag)

        return self.build_frame(release, request, tag)

    def build_frame(self, release: ReleaseData, request: FrameRequest, tag: str) -> ReleaseFrame:
        pages = paginate(drop_leading_placeholder(release.items), self.config.page_capacity)

        previous = self.load_state(request.state)
        raw_page = apply(previous.page, request.button)
        page_index = clamp(raw_page, len(pages), self.config.clamp_policy)
        if page_index != raw_page:
            logger.debug(f"Clamped page {raw_page} to {page_index} of {len(pages)}")

        state = NavState(page=page_index)
        logger.info(f"rendering page {page_index}")

        return ReleaseFrame(
            owner=request.owner,
            repo=request.repo,
            tag=tag,
            release=release,
            page=pages[page_index] if pages else [],
            page_index=page_index,
            page_count=len(pages),
            controls=available_controls(page_index, len(pages), release.url),
            state=self.codec.encode(state),
        )

    def load_state(self, token: str | None) -> NavState:
        """Verify the previous state, starting over if it cannot be trusted."""
        try:
            return self.codec.decode(token)
        except StateError as e:
            logger.warning(f"Discarding frame state: {e}")
            return NavState()
