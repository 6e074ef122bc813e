"""Unit tests for token, prompt and notification handlers."""

import random

from fluxworks.ui.handlers import (
    load_saved_token,
    pick_example_prompt,
    refresh_notifications,
    remember_token,
)
from fluxworks.ui.models import EXAMPLE_PROMPTS


class TestLoadSavedToken:
    def test_returns_stored_token(self):
        assert load_saved_token("hf_saved") == "hf_saved"

    def test_empty_when_nothing_stored(self):
        assert load_saved_token(None) == ""
        assert load_saved_token("") == ""


class TestRememberToken:
    def test_saves_when_confirmed(self):
        assert remember_token(" hf_new ", True, "hf_old") == "hf_new"

    def test_keeps_stored_when_declined(self):
        assert remember_token("hf_new", False, "hf_old") == "hf_old"

    def test_empty_token_never_saved(self):
        assert remember_token("", True, "hf_old") == "hf_old"

    def test_nothing_stored(self):
        assert remember_token("hf_new", False, None) == ""


class TestPickExamplePrompt:
    def test_five_examples(self):
        assert len(EXAMPLE_PROMPTS) == 5

    def test_returns_an_example(self):
        assert pick_example_prompt() in EXAMPLE_PROMPTS

    def test_uses_given_rng(self):
        rng = random.Random(3)
        expected = random.Random(3).choice(EXAMPLE_PROMPTS)
        assert pick_example_prompt(rng) == expected


class TestRefreshNotifications:
    def test_renders_state(self, ui_state, clock):
        ui_state.notifications.show_success("done")
        assert "done" in refresh_notifications(ui_state)

        clock.advance(6)
        assert refresh_notifications(ui_state) == ""

    def test_none_state(self):
        assert refresh_notifications(None) == ""
