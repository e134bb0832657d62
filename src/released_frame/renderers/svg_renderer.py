"""SVG card renderer for release frames."""

import logging
from pathlib import Path

from schemas.frame import FrameResult, NotFoundResult

from .renderer import Renderer

logger = logging.getLogger(__name__)


class SVGCardRenderer(Renderer):
    """Draw a release page or the not-found card as a square SVG image.

    Attributes:
        size: Edge length of the image in pixels
        release_template: Template for a release page
        not_found_template: Template for a missing release
    """

    def __init__(
        self,
        size: int = 512,
        templates_dir: Path | None = None,
        release_template: str = "release.svg.j2",
        not_found_template: str = "not_found.svg.j2",
    ):
        super().__init__(templates_dir)
        self.size = size
        self.release_template = release_template
        self.not_found_template = not_found_template

    def render(self, result: FrameResult) -> str:
        if isinstance(result, NotFoundResult):
            template = self._env.get_template(self.not_found_template)
            return template.render(size=self.size, owner=result.owner, repo=result.repo, tag=result.tag)

        template = self._env.get_template(self.release_template)
        logger.debug(
            f"Drawing page {result.page_index + 1}/{result.page_count} of {result.release.title}"
        )
        return template.render(
            size=self.size,
            release=result.release,
            elements=result.page,
            page_number=result.page_index + 1,
            page_count=result.page_count,
        )
