"""Image generation handler."""

import logging

from fluxworks.core.config import config
from fluxworks.core.errors import GenerationError, ValidationError, user_message
from fluxworks.core.images import save_generated_image

from ..components import (
    image_failed,
    image_loading,
    image_ready,
    trigger_busy,
    trigger_ready,
    unchanged,
)
from ..models import SUCCESS_MESSAGE, GenerationForm, UIState
from ..state import initialize_ui_state
from ..validation import build_generation_request

logger = logging.getLogger(__name__)


def generate_image(
    token: str,
    prompt: str,
    width: float,
    height: float,
    steps: float,
    seed: str,
    state: UIState,
):
    """Generate an image from the form values.

    This is a generator: it first yields the loading state of the page, then
    the final state once the request has settled. Outputs are, in order:
    generate button, image status line, image, download button, notification
    region and session state.

    A call made while another generation of the same session is in flight
    changes nothing. Validation failures are reported without touching the
    button or the image region. After a request was sent, the busy flag is
    cleared and the button restored on every exit path.

    Args:
        token: Hugging Face API token
        prompt: Text prompt
        width: Image width
        height: Image height
        steps: Number of inference steps
        seed: Raw seed text (blank for a random seed)
        state: UI state

    Yields:
        Tuple of (button_update, status_update, image_update, download_update,
        notifications_html, updated_state)
    """
    if state is None:
        state = UIState()

    if state.busy:
        logger.debug("Generation already in progress, ignoring trigger")
        yield (*unchanged(5), state)
        return

    form = GenerationForm(
        token=token, prompt=prompt, width=width, height=height, steps=steps, seed=seed
    )

    try:
        token, request = build_generation_request(form)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.notifications.show_error(e.message)
        yield (*unchanged(4), state.notifications.render(), state)
        return

    state.busy = True
    try:
        state.notifications.clear()
        yield (trigger_busy(), *image_loading(), state.notifications.render(), state)

        try:
            state = initialize_ui_state(state)
            data = state.client.generate(request, token)
            state.last_image = save_generated_image(data, config.outputs_dir)
            state.notifications.show_success(SUCCESS_MESSAGE)
            region = image_ready(state.last_image)
            logger.info(f"Image generated successfully: {state.last_image.filename}")

        except GenerationError as e:
            logger.error(f"Error generating image ({e.kind.value}): {e}")
            state.notifications.show_error(user_message(e))
            region = image_failed()

        except Exception as e:
            logger.error(f"Error generating image: {e}", exc_info=True)
            state.notifications.show_error(user_message(e))
            region = image_failed()

    finally:
        state.busy = False

    yield (trigger_ready(), *region, state.notifications.render(), state)
