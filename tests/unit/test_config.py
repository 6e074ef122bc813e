"""Tests for fluxworks.core.config: configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fluxworks.core.config import DEFAULT_INFERENCE_URL, FluxworksConfig


class TestConfigDefaults:
    """Verify that FluxworksConfig provides sensible defaults."""

    @pytest.fixture
    def defaults(self, monkeypatch, temp_dir: Path) -> FluxworksConfig:
        for name in (
            "FLUXWORKS_INFERENCE_URL",
            "FLUXWORKS_DEFAULT_STEPS",
            "FLUXWORKS_REQUEST_TIMEOUT",
            "FLUXWORKS_TOKEN_STORAGE_KEY",
            "FLUXWORKS_BROWSER_STATE_SECRET",
            "FLUXWORKS_GRADIO_SERVER_PORT",
        ):
            monkeypatch.delenv(name, raising=False)
        return FluxworksConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))

    def test_default_endpoint_is_flux_schnell(self, defaults: FluxworksConfig):
        assert defaults.inference_url == DEFAULT_INFERENCE_URL
        assert defaults.inference_url.endswith("black-forest-labs/FLUX.1-schnell")

    def test_default_steps(self, defaults: FluxworksConfig):
        """Four steps is the recommended value for schnell."""
        assert defaults.default_steps == 4

    def test_no_client_timeout_by_default(self, defaults: FluxworksConfig):
        assert defaults.request_timeout is None

    def test_default_token_storage_key(self, defaults: FluxworksConfig):
        assert defaults.token_storage_key == "hf_api_token"

    def test_browser_state_secret_is_stable(self, defaults: FluxworksConfig, temp_dir: Path):
        again = FluxworksConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))

        assert defaults.browser_state_secret
        assert defaults.browser_state_secret == again.browser_state_secret

    def test_default_notice_timings(self, defaults: FluxworksConfig):
        assert defaults.success_notice_seconds == 5.0
        assert defaults.notice_fade_seconds == 0.5

    def test_default_server_port(self, defaults: FluxworksConfig):
        assert defaults.gradio_server_port == 7860


class TestConfigEnvironment:
    """Environment variables override defaults."""

    def test_env_prefix(self, monkeypatch, temp_dir: Path):
        monkeypatch.setenv("FLUXWORKS_INFERENCE_URL", "https://example.test/models/x")
        monkeypatch.setenv("FLUXWORKS_REQUEST_TIMEOUT", "30")
        cfg = FluxworksConfig(_env_file=None, outputs_dir=str(temp_dir / "out"))

        assert cfg.inference_url == "https://example.test/models/x"
        assert cfg.request_timeout == 30.0


class TestConfigDirectoryCreation:
    """Verify that FluxworksConfig creates the outputs directory."""

    def test_outputs_dir_created(self, test_config: FluxworksConfig):
        assert test_config.outputs_dir.exists()
        assert test_config.outputs_dir.is_dir()

    def test_creates_nested_directories(self, temp_dir: Path):
        deep = temp_dir / "a" / "b" / "outputs"
        FluxworksConfig(_env_file=None, outputs_dir=str(deep))
        assert deep.is_dir()


class TestConfigValidation:
    """Pydantic constraints reject out-of-range values."""

    def test_port_below_range(self, temp_dir: Path):
        with pytest.raises(ValidationError):
            FluxworksConfig(_env_file=None, outputs_dir=str(temp_dir), gradio_server_port=80)

    def test_steps_above_range(self, temp_dir: Path):
        with pytest.raises(ValidationError):
            FluxworksConfig(_env_file=None, outputs_dir=str(temp_dir), default_steps=51)

    def test_timeout_must_be_positive(self, temp_dir: Path):
        with pytest.raises(ValidationError):
            FluxworksConfig(_env_file=None, outputs_dir=str(temp_dir), request_timeout=0)
