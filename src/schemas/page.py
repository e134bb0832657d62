"""Page element domain objects.

Pages are plain lists of elements so that paging stays independent of any
rendering library.
"""

from dataclasses import dataclass
from typing import Literal, Union

Emphasis = Literal["emphasized", "plain"]


@dataclass(frozen=True)
class TextElement:
    """A changelog line to be rendered as text.

    Attributes:
        text: Literal line content
        emphasis: Whether the line is drawn heavier and larger
    """

    text: str
    emphasis: Emphasis = "plain"

    @property
    def emphasized(self) -> bool:
        return self.emphasis == "emphasized"


@dataclass(frozen=True)
class SpacerElement:
    """Content-free vertical gap."""


PageElement = Union[TextElement, SpacerElement]
Page = list[PageElement]
