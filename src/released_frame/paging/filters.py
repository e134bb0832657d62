"""Item filters applied before pagination."""

from collections.abc import Sequence

from schemas.release import ReleaseItem


def drop_leading_placeholder(items: Sequence[ReleaseItem]) -> Sequence[ReleaseItem]:
    """Drop the blank first line the release API puts before the notes.

    Examples:
        >>> drop_leading_placeholder([ReleaseItem(text=""), ReleaseItem(text="a")])
        [ReleaseItem(category='', text='a')]
    """
    if items and items[0].text == "":
        return items[1:]
    return items
