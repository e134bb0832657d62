"""Paginated release-notes frames for released.fyi."""

__version__ = "1.0.0"
