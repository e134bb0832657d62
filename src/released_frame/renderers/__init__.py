"""Renderers turning frame results into images and documents."""

from .html_renderer import FrameHTMLRenderer
from .renderer import Renderer
from .svg_renderer import SVGCardRenderer

__all__ = [
    "Renderer",
    "SVGCardRenderer",
    "FrameHTMLRenderer",
]
