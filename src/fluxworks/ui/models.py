"""Data models for Fluxworks UI state and constants."""

import logging
from dataclasses import dataclass, field
from typing import Any

from fluxworks.core.images import GeneratedImage
from fluxworks.core.models import MAX_SEED

from .notifications import NotificationArea

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    One instance exists per page load (Gradio copies the initial value into
    every session). It is the generation controller's only mutable state.

    Attributes
    ----------
    busy : bool
        True while a generation is in flight; re-entrant calls are ignored
    last_image : GeneratedImage | None
        Image of the most recent successful generation
    notifications : NotificationArea
        Notices shown under the form
    client : Any | None
        InferenceClient instance, created on first generation
    """

    busy: bool = False
    last_image: GeneratedImage | None = None
    notifications: NotificationArea = field(default_factory=NotificationArea)
    client: Any | None = None  # InferenceClient instance

    def is_initialized(self) -> bool:
        """Check if the inference client has been created."""
        return self.client is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(initialized={self.is_initialized()}, busy={self.busy}, "
            f"last_image={self.last_image.filename if self.last_image else None})"
        )


@dataclass(frozen=True)
class GenerationForm:
    """Raw values of the generation form at the moment the trigger fires."""

    token: str | None
    prompt: str | None
    width: float | None
    height: float | None
    steps: float | None
    seed: str | None


# Trigger button labels
GENERATE_LABEL = "🚀 Generate Image"
GENERATING_LABEL = "Generating..."

# Image region texts
LOADING_PLACEHOLDER = "🎨 Creating your image... This can take a few seconds..."
ERROR_PLACEHOLDER = "❌ Error generating the image"
IDLE_PLACEHOLDER = "Your image will appear here"
DOWNLOAD_LABEL = "⬇️ Download Image"

SUCCESS_MESSAGE = "Image generated successfully!"

TOKEN_SAVE_PROMPT = (
    "Save the token for future sessions? (It will be stored locally in your browser)"
)

EXAMPLE_PROMPTS = [
    "A floating castle in the clouds at sunset, epic fantasy style, vibrant colors",
    "Portrait of a cyberpunk robot with glowing eyes, futuristic style, neon, 8k",
    "A magical forest with luminescent mushrooms, mysterious atmosphere, moonlight",
    "An underwater city with art nouveau architecture, sunbeams piercing the water",
    "A crystal dragon in a diamond cave, prismatic reflections, ultra detailed",
]

__all__ = [
    "DOWNLOAD_LABEL",
    "ERROR_PLACEHOLDER",
    "EXAMPLE_PROMPTS",
    "GENERATE_LABEL",
    "GENERATING_LABEL",
    "GenerationForm",
    "IDLE_PLACEHOLDER",
    "LOADING_PLACEHOLDER",
    "MAX_SEED",
    "SUCCESS_MESSAGE",
    "TOKEN_SAVE_PROMPT",
    "UIState",
]
