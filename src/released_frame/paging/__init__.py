"""Pagination and navigation for release changelogs."""

from .filters import drop_leading_placeholder
from .navigation import ClampPolicy, apply, available_controls, clamp
from .paginator import DEFAULT_PAGE_CAPACITY, EMPHASIZED_CATEGORIES, emphasis_for, paginate

__all__ = [
    "ClampPolicy",
    "DEFAULT_PAGE_CAPACITY",
    "EMPHASIZED_CATEGORIES",
    "apply",
    "available_controls",
    "clamp",
    "drop_leading_placeholder",
    "emphasis_for",
    "paginate",
]
