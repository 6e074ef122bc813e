"""Unit tests for UI state management."""

from unittest.mock import Mock, patch

from fluxworks.ui.models import UIState
from fluxworks.ui.state import cleanup_ui_state, initialize_ui_state


class TestInitializeUIState:
    """Tests for initialize_ui_state function."""

    def test_initialize_none_creates_new_state(self, test_config):
        with patch("fluxworks.ui.state.config", test_config):
            state = initialize_ui_state(None)

        assert isinstance(state, UIState)
        assert state.is_initialized()
        assert state.client.api_url == test_config.inference_url

    def test_applies_notice_timings(self, test_config):
        test_config.success_notice_seconds = 2.0
        test_config.notice_fade_seconds = 0.25
        with patch("fluxworks.ui.state.config", test_config):
            state = initialize_ui_state(UIState())

        assert state.notifications.success_seconds == 2.0
        assert state.notifications.fade_seconds == 0.25

    def test_already_initialized_is_returned_as_is(self):
        client = Mock()
        state = UIState(client=client)

        with patch("fluxworks.ui.state.InferenceClient") as MockClient:
            result = initialize_ui_state(state)

        assert result is state
        assert result.client is client
        MockClient.assert_not_called()

    def test_new_state_is_idle(self):
        state = UIState()
        assert state.busy is False
        assert state.last_image is None
        assert not state.is_initialized()


class TestCleanupUIState:
    def test_closes_client(self):
        client = Mock()
        state = UIState(client=client, busy=True)
        state.notifications.show_error("x")

        cleanup_ui_state(state)

        client.close.assert_called_once()
        assert state.client is None
        assert state.busy is False
        assert state.notifications.entries == []

    def test_uninitialized_state(self):
        cleanup_ui_state(UIState())
