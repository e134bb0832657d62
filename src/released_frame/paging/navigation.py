"""Page navigation transitions and bounds.

Transitions are pure and unbounded; the page count is only known once the
release has been fetched and paginated, so clamping happens afterwards.
"""

from typing import Literal

from schemas.frame import Control, NextControl, PrevControl, RedirectControl

ClampPolicy = Literal["nearest", "reset"]


def apply(prev_page: int, event: str | None) -> int:
    """Apply a button press to the previous page index."""
    if event == "next":
        return prev_page + 1
    if event == "prev":
        return prev_page - 1
    return prev_page


def clamp(page: int, page_count: int, policy: ClampPolicy = "nearest") -> int:
    """Force a page index into [0, max(0, page_count - 1)].

    In-range values are returned as is. Out-of-range values go to the
    closest bound with the "nearest" policy, or back to 0 with "reset".
    """
    last = max(0, page_count - 1)
    if 0 <= page <= last:
        return page
    if policy == "reset":
        return 0
    if policy != "nearest":
        raise ValueError(f"Unknown clamp policy: {policy}")
    return 0 if page < 0 else last


def available_controls(page: int, page_count: int, url: str) -> list[Control]:
    """Buttons offered on a page; the redirect is always last."""
    controls: list[Control] = []
    if page > 0:
        controls.append(PrevControl())
    if page < page_count - 1:
        controls.append(NextControl())
    controls.append(RedirectControl(url=url))
    return controls
