"""Frame request, control and result schemas.

A frame interaction arrives as a FrameRequest and leaves as either a
NotFoundResult or a ReleaseFrame, which a renderer turns into a response.
"""

from dataclasses import dataclass, field
from typing import Literal, Union

from .page import Page
from .release import ReleaseData

ButtonValue = Literal["next", "prev"]


@dataclass(frozen=True)
class PrevControl:
    """Button that moves one page back."""

    label: str = "⇦"
    value: ButtonValue = "prev"
    action: str = "post"


@dataclass(frozen=True)
class NextControl:
    """Button that moves one page forward."""

    label: str = "⇨"
    value: ButtonValue = "next"
    action: str = "post"


@dataclass(frozen=True)
class RedirectControl:
    """Button that opens the release page in a browser."""

    url: str
    label: str = "Read in browser"
    action: str = "link"


Control = Union[PrevControl, NextControl, RedirectControl]


@dataclass
class FrameRequest:
    """One interaction with a frame.

    Attributes:
        owner: Repository owner from the route
        repo: Repository name from the route
        tag: Release tag, "latest" when not given
        button: Value of the button pressed to get here, if any
        state: Signed state token from the previous response, if any
    """

    owner: str
    repo: str
    tag: str = "latest"
    button: str | None = None
    state: str | None = None


@dataclass
class NotFoundResult:
    """The route did not resolve to a release."""

    owner: str
    repo: str
    tag: str


@dataclass
class ReleaseFrame:
    """Everything a renderer needs to draw one page of a release.

    Attributes:
        owner: Repository owner from the route
        repo: Repository name from the route
        tag: Requested release tag
        release: Overview data for the header
        page: Elements of the current page (empty when there are no items)
        page_index: Clamped zero-based page index
        page_count: Number of pages produced for the release
        controls: Buttons in display order, redirect last
        state: Signed state token to hand back with the next interaction
    """

    owner: str
    repo: str
    tag: str
    release: ReleaseData
    page: Page
    page_index: int
    page_count: int
    controls: list[Control] = field(default_factory=list)
    state: str = ""


FrameResult = Union[NotFoundResult, ReleaseFrame]
