"""Shared pytest fixtures for Fluxworks tests."""

import io
import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import Mock

import pytest
from PIL import Image

from fluxworks.core.config import FluxworksConfig
from fluxworks.ui.models import UIState
from fluxworks.ui.notifications import NotificationArea


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> FluxworksConfig:
    """Create a test configuration writing into a temporary directory."""
    return FluxworksConfig(
        _env_file=None,
        inference_url="https://inference.test/models/flux",
        outputs_dir=str(temp_dir / "outputs"),
        default_width=512,
        default_height=512,
        default_steps=4,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """A small valid PNG image (64x48)."""
    buffer = io.BytesIO()
    Image.new("RGB", (64, 48), color=(200, 40, 90)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock for notification timing."""
    return FakeClock()


@pytest.fixture
def notifications(clock: FakeClock) -> NotificationArea:
    """Notification area with the default 5s + 0.5s success lifetime."""
    return NotificationArea(success_seconds=5.0, fade_seconds=0.5, clock=clock)


@pytest.fixture
def mock_client(png_bytes: bytes) -> Mock:
    """Inference client returning a valid PNG."""
    client = Mock()
    client.generate.return_value = png_bytes
    return client


@pytest.fixture
def ui_state(mock_client: Mock, notifications: NotificationArea) -> UIState:
    """UI state with a mocked client, ready to generate."""
    return UIState(client=mock_client, notifications=notifications)
