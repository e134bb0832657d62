"""Split release items into fixed-capacity pages."""

from collections.abc import Iterable

from schemas.page import Emphasis, Page, SpacerElement, TextElement
from schemas.release import ReleaseItem

DEFAULT_PAGE_CAPACITY = 6
EMPHASIZED_CATEGORIES = frozenset({"bold", "italic"})


def emphasis_for(
    category: str, emphasized_categories: Iterable[str] = EMPHASIZED_CATEGORIES
) -> Emphasis:
    """Map an item category onto a text emphasis."""
    return "emphasized" if category in emphasized_categories else "plain"


def _to_element(item: ReleaseItem) -> TextElement | SpacerElement:
    if item.text != "":
        return TextElement(text=item.text, emphasis=emphasis_for(item.category))
    return SpacerElement()


def paginate(
    items: Iterable[ReleaseItem], capacity: int = DEFAULT_PAGE_CAPACITY
) -> list[Page]:
    """Group items into pages of at most ``capacity`` elements.

    A full page is closed before the next item is placed, so the item that
    overflows a page opens the following one. Every item yields exactly one
    element and no empty page is ever produced.

    Args:
        items: Release items in display order
        capacity: Maximum number of elements per page

    Returns:
        List of pages, empty when there are no items

    Raises:
        ValueError: If capacity is less than 1
    """
    if capacity < 1:
        raise ValueError(f"page capacity must be at least 1, got {capacity}")

    pages: list[Page] = []
    building: Page = []

    for item in items:
        if len(building) >= capacity:
            pages.append(building)
            building = []
        building.append(_to_element(item))

    if building:
        pages.append(building)
    return pages
