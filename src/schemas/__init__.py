"""Schema definitions for released-frame."""

from .frame import (
    Control,
    FrameRequest,
    FrameResult,
    NextControl,
    NotFoundResult,
    PrevControl,
    RedirectControl,
    ReleaseFrame,
)
from .page import Page, PageElement, SpacerElement, TextElement
from .release import AuthorInfo, ReleaseData, ReleaseItem
from .state import NavState

__all__ = [
    "AuthorInfo",
    "Control",
    "FrameRequest",
    "FrameResult",
    "NavState",
    "NextControl",
    "NotFoundResult",
    "Page",
    "PageElement",
    "PrevControl",
    "RedirectControl",
    "ReleaseData",
    "ReleaseFrame",
    "ReleaseItem",
    "SpacerElement",
    "TextElement",
]
