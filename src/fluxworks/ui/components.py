"""Reusable UI updates for the Fluxworks Gradio interface.

The image region is made of three components: a status line (placeholder
or error indicator), the image itself and the download button. The helpers
below return the updates for these three components, in that order, for each
phase of a generation.
"""

import gradio as gr

from fluxworks.core.images import GeneratedImage

from .models import (
    DOWNLOAD_LABEL,
    ERROR_PLACEHOLDER,
    GENERATE_LABEL,
    GENERATING_LABEL,
    LOADING_PLACEHOLDER,
)


def trigger_busy() -> dict:
    """Disable the generate button while a request is in flight."""
    return gr.update(value=GENERATING_LABEL, interactive=False, elem_classes=["loading"])


def trigger_ready() -> dict:
    """Restore the generate button to its default state."""
    return gr.update(value=GENERATE_LABEL, interactive=True, elem_classes=[])


def image_loading() -> tuple[dict, dict, dict]:
    """Show the loading placeholder in place of the previous result."""
    return (
        gr.update(value=LOADING_PLACEHOLDER, visible=True),
        gr.update(value=None, visible=False),
        gr.update(value=None, visible=False),
    )


def image_ready(image: GeneratedImage) -> tuple[dict, dict, dict]:
    """Show the generated image and its download button."""
    path = str(image.path)
    return (
        gr.update(value="", visible=False),
        gr.update(value=path, visible=True),
        gr.update(value=path, label=DOWNLOAD_LABEL, visible=True),
    )


def image_failed() -> tuple[dict, dict, dict]:
    """Show the error indicator in the image region."""
    return (
        gr.update(value=ERROR_PLACEHOLDER, visible=True),
        gr.update(value=None, visible=False),
        gr.update(value=None, visible=False),
    )


def unchanged(count: int) -> tuple[dict, ...]:
    """Return ``count`` no-op updates."""
    return tuple(gr.update() for _ in range(count))
