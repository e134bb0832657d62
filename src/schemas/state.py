"""Navigation state carried by the client between interactions."""

from pydantic import BaseModel


class NavState(BaseModel):
    """Current page of a frame session.

    Attributes:
        page: Zero-based page index. Not validated against a page count;
            stale values are clamped by the controller.
    """

    page: int = 0
