"""released.fyi release schemas."""

from pydantic import BaseModel


class ReleaseItem(BaseModel):
    """A single changelog line from a release.

    An item with empty text is a blank line in the upstream notes and is
    rendered as vertical space.
    """

    category: str = ""
    text: str = ""

    model_config = {"frozen": True}


class AuthorInfo(BaseModel):
    """The account that published a release."""

    name: str
    image: str


class ReleaseData(BaseModel):
    """A release as returned by the released.fyi API."""

    title: str
    latest: bool = False
    author: AuthorInfo | None = None
    tag: str
    notes: str | None = None
    items: list[ReleaseItem] = []
    url: str

    model_config = {"extra": "allow"}
