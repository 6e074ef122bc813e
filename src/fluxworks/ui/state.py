"""State management utilities for Fluxworks UI.

This module handles the initialization and cleanup of per-session UI state.
"""

import logging

from fluxworks.core.config import config
from fluxworks.core.inference_client import InferenceClient

from .models import UIState

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    Creates the inference client on first use and applies the configured
    notification timings.

    Args:
        state: Existing UIState or None

    Returns:
        Initialized UIState instance
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if state.is_initialized():
        return state

    logger.info(f"Initializing inference client for {config.inference_url}")
    state.client = InferenceClient(config.inference_url, timeout=config.request_timeout)
    state.notifications.success_seconds = config.success_notice_seconds
    state.notifications.fade_seconds = config.notice_fade_seconds
    return state


def cleanup_ui_state(state: UIState) -> None:
    """Release the session's HTTP resources.

    Args:
        state: UI state to clean up
    """
    logger.info("Cleaning up UIState resources")

    if state.client is not None:
        state.client.close()
        state.client = None

    state.busy = False
    state.notifications.clear()
