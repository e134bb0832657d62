"""HTML frame renderer.

Produces the document a frame client fetches: an HTML page whose fc:frame
meta tags carry the image, the buttons and the signed state.
"""

from pathlib import Path
from urllib.parse import quote, urlencode

from schemas.frame import FrameResult, NotFoundResult, RedirectControl

from .renderer import Renderer
from .svg_renderer import SVGCardRenderer


class FrameHTMLRenderer(Renderer):
    """Wrap the SVG card and the controls in frame meta tags.

    Attributes:
        origin: Public origin used to build post URLs
        card_renderer: Renderer for the frame image
        template_name: Name of the HTML template
    """

    def __init__(
        self,
        origin: str,
        card_renderer: SVGCardRenderer | None = None,
        templates_dir: Path | None = None,
        template_name: str = "frame.html.j2",
    ):
        super().__init__(templates_dir)
        self.origin = origin.rstrip("/")
        self.card_renderer = card_renderer or SVGCardRenderer(templates_dir=templates_dir)
        self.template_name = template_name

    def post_url(self, owner: str, repo: str, tag: str = "latest", button: str | None = None) -> str:
        """URL a frame client posts to, optionally tagged with a button value.

        Examples:
            >>> FrameHTMLRenderer("https://released.fyi").post_url("a", "b", "v1", "next")
            'https://released.fyi/gh/a/b?tag=v1&button=next'
        """
        url = f"{self.origin}/gh/{quote(owner, safe='')}/{quote(repo, safe='')}"
        params = {}
        if tag != "latest":
            params["tag"] = tag
        if button:
            params["button"] = button
        if params:
            url += f"?{urlencode(params)}"
        return url

    def render(self, result: FrameResult) -> str:
        image = self.card_renderer.render(result)
        template = self._env.get_template(self.template_name)

        if isinstance(result, NotFoundResult):
            return template.render(
                title="Released: release not found",
                image=image,
                size=self.card_renderer.size,
                buttons=[],
                state=None,
                post_url=None,
            )

        buttons = []
        for control in result.controls:
            if isinstance(control, RedirectControl):
                target = control.url
            else:
                target = self.post_url(result.owner, result.repo, result.tag, control.value)
            buttons.append({"label": control.label, "action": control.action, "target": target})

        return template.render(
            title=f"Released: {result.release.title}",
            image=image,
            size=self.card_renderer.size,
            buttons=buttons,
            state=result.state,
            post_url=self.post_url(result.owner, result.repo, result.tag),
        )
