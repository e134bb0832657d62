"""Pytest fixtures for released-frame tests."""

from unittest.mock import MagicMock

import pytest

from released_frame.config import FrameConfig
from released_frame.state import StateCodec
from schemas.release import ReleaseData, ReleaseItem


@pytest.fixture
def sample_release_record():
    """Sample released.fyi API payload.

    The first item is the blank placeholder line the API puts before the
    notes.
    """
    return {
        "title": "v2.4.0",
        "latest": True,
        "author": {
            "name": "octocat",
            "image": "https://avatars.githubusercontent.com/u/583231",
        },
        "tag": "v2.4.0",
        "notes": "## Features\n- Dark mode",
        "items": [
            {"category": "", "text": ""},
            {"category": "bold", "text": "Features"},
            {"category": "note", "text": "Dark mode"},
            {"category": "note", "text": "Keyboard shortcuts"},
            {"category": "", "text": ""},
            {"category": "italic", "text": "Fixes"},
            {"category": "note", "text": "Crash when opening settings"},
            {"category": "note", "text": "Typo in onboarding"},
            {"category": "note", "text": "Slow startup on Windows"},
        ],
        "url": "https://github.com/octocat/hello-world/releases/tag/v2.4.0",
    }


@pytest.fixture
def sample_release(sample_release_record):
    return ReleaseData.model_validate(sample_release_record)


@pytest.fixture
def make_items():
    """Build a list of plain text items."""

    def _make(count, category="note"):
        return [ReleaseItem(category=category, text=f"item {i}") for i in range(count)]

    return _make


@pytest.fixture
def frame_config():
    return FrameConfig(state_secret="test-state-secret-for-released-frame")


@pytest.fixture
def codec(frame_config):
    return StateCodec(frame_config.state_secret)


@pytest.fixture
def mock_client(sample_release):
    """Data source returning the sample release."""
    client = MagicMock()
    client.fetch.return_value = sample_release
    return client
