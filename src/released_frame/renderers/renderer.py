"""Base class for frame renderers.

Renderers take the controller's FrameResult and produce the response body.
They never influence paging or navigation.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from schemas.frame import FrameResult

from .filters import FILTERS

# Resolve the project root (4 levels up from this file):
#   renderer.py → renderers/ → released_frame/ → src/ → project root
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "resources" / "templates"


class Renderer(ABC):
    """Abstract base class for Jinja2-backed frame renderers.

    Attributes:
        templates_dir: Directory the templates are loaded from
    """

    def __init__(self, templates_dir: Path | None = None):
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    @abstractmethod
    def render(self, result: FrameResult) -> str:
        """Render a controller result.

        Args:
            result: NotFoundResult or ReleaseFrame

        Returns:
            The rendered document as text
        """
        pass
