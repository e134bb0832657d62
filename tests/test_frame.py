"""Tests for the FrameController."""

import pytest

from released_frame.clients import ReleaseAPIError, ReleaseNotFoundError, ReleaseUnavailableError
from released_frame.config import FrameConfig
from released_frame.frame import FrameController, is_unbound_route
from schemas.frame import (
    FrameRequest,
    NextControl,
    NotFoundResult,
    PrevControl,
    RedirectControl,
    ReleaseFrame,
)
from schemas.page import SpacerElement, TextElement
from schemas.release import ReleaseData, ReleaseItem
from schemas.state import NavState


def make_release(items):
    return ReleaseData(
        title="v1.0.0",
        tag="v1.0.0",
        items=items,
        url="https://github.com/octocat/hello-world/releases/tag/v1.0.0",
    )


@pytest.fixture
def controller(mock_client, frame_config, codec):
    return FrameController(mock_client, frame_config, codec)


class TestRouteResolution:
    """Tests for unbound route handling."""

    def test_placeholder_route_is_not_found(self, controller, mock_client):
        """Unbound placeholders short-circuit without fetching."""
        result = controller.handle(FrameRequest(owner=":owner", repo=":repo"))

        assert result == NotFoundResult(owner=":owner", repo=":repo", tag="latest")
        mock_client.fetch.assert_not_called()

    def test_is_unbound_route(self):
        assert is_unbound_route(":owner", ":repo")
        assert not is_unbound_route("octocat", ":repo")
        assert not is_unbound_route(":owner", "hello-world")

    def test_fetches_resolved_route(self, controller, mock_client):
        """Owner, repo and tag are passed to the data source."""
        controller.handle(FrameRequest(owner="octocat", repo="hello-world", tag="v2.4.0"))

        mock_client.fetch.assert_called_once_with("octocat", "hello-world", "v2.4.0")

    def test_missing_tag_defaults_to_latest(self, controller, mock_client):
        controller.handle(FrameRequest(owner="octocat", repo="hello-world", tag=None))

        mock_client.fetch.assert_called_once_with("octocat", "hello-world", "latest")


class TestUpstreamErrors:
    """Tests for data source failures."""

    def test_not_found_matches_placeholder_result(self, controller, mock_client):
        """A 404 yields the same result shape as an unbound route."""
        mock_client.fetch.side_effect = ReleaseNotFoundError("octocat", "missing", "v9")

        result = controller.handle(FrameRequest(owner="octocat", repo="missing", tag="v9"))

        assert result == NotFoundResult(owner="octocat", repo="missing", tag="v9")

    @pytest.mark.parametrize("error", [
        ReleaseAPIError("Release API error 500", status_code=500),
        ReleaseUnavailableError("Release API unreachable after 1 attempts"),
    ])
    def test_other_errors_propagate(self, controller, mock_client, error):
        """Failures other than not found are not handled."""
        mock_client.fetch.side_effect = error

        with pytest.raises(type(error)):
            controller.handle(FrameRequest(owner="octocat", repo="hello-world"))

        assert mock_client.fetch.call_count == 1


class TestFrameBuilding:
    """Tests for pages, navigation and controls in the built frame."""

    def test_first_render(self, controller, codec):
        """A fresh session shows page 0 of the filtered items."""
        result = controller.handle(FrameRequest(owner="octocat", repo="hello-world"))

        assert isinstance(result, ReleaseFrame)
        assert result.page_index == 0
        assert result.page_count == 2
        assert result.page == [
            TextElement(text="Features", emphasis="emphasized"),
            TextElement(text="Dark mode", emphasis="plain"),
            TextElement(text="Keyboard shortcuts", emphasis="plain"),
            SpacerElement(),
            TextElement(text="Fixes", emphasis="emphasized"),
            TextElement(text="Crash when opening settings", emphasis="plain"),
        ]
        assert codec.decode(result.state) == NavState(page=0)

    def test_route_is_carried(self, controller):
        result = controller.handle(FrameRequest(owner="octocat", repo="hello-world", tag="v2.4.0"))

        assert (result.owner, result.repo, result.tag) == ("octocat", "hello-world", "v2.4.0")

    def test_missing_tag_is_carried_as_latest(self, controller):
        """The frame records the tag that was actually fetched."""
        result = controller.handle(FrameRequest(owner="octocat", repo="hello-world", tag=None))

        assert result.tag == "latest"

    def test_build_frame_uses_given_tag(self, controller, sample_release):
        request = FrameRequest(owner="octocat", repo="hello-world", tag=None)

        assert controller.build_frame(sample_release, request, "v2.4.0").tag == "v2.4.0"

    def test_next_advances(self, controller, codec):
        """Pressing next moves to the following page."""
        state = codec.encode(NavState(page=0))

        result = controller.handle(
            FrameRequest(owner="octocat", repo="hello-world", button="next", state=state)
        )

        assert result.page_index == 1
        assert result.page == [
            TextElement(text="Typo in onboarding", emphasis="plain"),
            TextElement(text="Slow startup on Windows", emphasis="plain"),
        ]
        assert result.controls == [PrevControl(), RedirectControl(url=result.release.url)]
        assert codec.decode(result.state) == NavState(page=1)

    def test_prev_retreats(self, controller, codec):
        state = codec.encode(NavState(page=1))

        result = controller.handle(
            FrameRequest(owner="octocat", repo="hello-world", button="prev", state=state)
        )

        assert result.page_index == 0
        assert result.controls == [NextControl(), RedirectControl(url=result.release.url)]

    def test_prev_on_first_page_stays(self, controller, codec):
        """Going back from page 0 clamps to page 0."""
        result = controller.handle(
            FrameRequest(
                owner="octocat",
                repo="hello-world",
                button="prev",
                state=codec.encode(NavState(page=0)),
            )
        )

        assert result.page_index == 0

    def test_stale_state_is_clamped_to_last_page(self, mock_client, codec, make_items):
        """A page index beyond a shrunken release lands on the last page."""
        mock_client.fetch.return_value = make_release(make_items(8))
        controller = FrameController(mock_client, FrameConfig(state_secret="test-state-secret-for-released-frame"), codec)

        result = controller.handle(
            FrameRequest(owner="octocat", repo="hello-world", state=codec.encode(NavState(page=5)))
        )

        assert result.page_count == 2
        assert result.page_index == 1
        assert PrevControl() in result.controls
        assert NextControl() not in result.controls
        assert codec.decode(result.state) == NavState(page=1)

    def test_stale_state_with_reset_policy(self, mock_client, codec, make_items):
        """The reset policy sends stale indices back to the first page."""
        mock_client.fetch.return_value = make_release(make_items(8))
        config = FrameConfig(state_secret="test-state-secret-for-released-frame", clamp_policy="reset")
        controller = FrameController(mock_client, config, codec)

        result = controller.handle(
            FrameRequest(owner="octocat", repo="hello-world", state=codec.encode(NavState(page=5)))
        )

        assert result.page_index == 0

    def test_release_without_items(self, controller, mock_client):
        """A release with no notes renders an empty page with only the redirect."""
        mock_client.fetch.return_value = make_release([ReleaseItem(text="")])

        result = controller.handle(
            FrameRequest(owner="octocat", repo="hello-world", button="next")
        )

        assert result.page_count == 0
        assert result.page_index == 0
        assert result.page == []
        assert result.controls == [RedirectControl(url=result.release.url)]

    def test_page_capacity_from_config(self, mock_client, codec, make_items):
        mock_client.fetch.return_value = make_release(make_items(25))
        controller = FrameController(
            mock_client, FrameConfig(state_secret="test-state-secret-for-released-frame", page_capacity=10), codec
        )

        result = controller.handle(FrameRequest(owner="octocat", repo="hello-world"))

        assert result.page_count == 3
        assert len(result.page) == 10

    def test_redirect_is_always_last(self, controller, codec):
        state = codec.encode(NavState(page=0))

        for button in (None, "next", "prev"):
            result = controller.handle(
                FrameRequest(owner="octocat", repo="hello-world", button=button, state=state)
            )
            assert isinstance(result.controls[-1], RedirectControl)


class TestStateHandling:
    """Tests for untrusted state tokens."""

    def test_forged_state_starts_over(self, controller, caplog):
        """A token with a bad signature is discarded with a warning."""
        forged = "eyJwYWdlIjo1fQ.AAAA"

        result = controller.handle(
            FrameRequest(owner="octocat", repo="hello-world", button="next", state=forged)
        )

        assert result.page_index == 1
        assert "Discarding frame state" in caplog.text

    def test_default_codec_uses_config_secret(self, mock_client):
        config = FrameConfig(state_secret="configured-state-secret-for-released-frame")
        controller = FrameController(mock_client, config)

        token = controller.codec.encode(NavState(page=1))

        assert FrameController(mock_client, config).codec.decode(token).page == 1
