"""Jinja2 filters for frame templates.

These filters are used in release.svg.j2, not_found.svg.j2 and
frame.html.j2.
"""

import base64
import textwrap

DEFAULT_AUTHOR_NAME = "someone"
DEFAULT_AUTHOR_IMAGE = "https://github.githubassets.com/assets/GitHub-Mark-ea2971cee799.png"


def wrap_text(text: str, width: int = 40) -> list[str]:
    """Break a line of text into lines of at most ``width`` characters.

    Examples:
        >>> wrap_text("Fixed the crash on startup", 12)
        ['Fixed the', 'crash on', 'startup']
    """
    if not text:
        return []
    return textwrap.wrap(text, width=width) or [text]


def author_name(author) -> str:
    """Display name of a release author, or a neutral fallback.

    Examples:
        >>> author_name(None)
        'someone'
    """
    name = getattr(author, "name", None)
    return name or DEFAULT_AUTHOR_NAME


def author_image(author) -> str:
    """Avatar URL of a release author, falling back to the GitHub mark."""
    image = getattr(author, "image", None)
    return image or DEFAULT_AUTHOR_IMAGE


def data_uri(svg: str) -> str:
    """Inline an SVG document as a base64 data URI.

    Examples:
        >>> data_uri("<svg/>")
        'data:image/svg+xml;base64,PHN2Zy8+'
    """
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


FILTERS = {
    "wrap_text": wrap_text,
    "author_name": author_name,
    "author_image": author_image,
    "data_uri": data_uri,
}
