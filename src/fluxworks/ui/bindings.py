"""Event handler registration table.

Every UI event the app listens to is one row of :func:`build_event_table`:
the component that fires it, the event kind, the handler and the names of
the input and output components. :func:`bind_events` attaches the table to
the components created by the layout, so the complete binding surface can
be read (and tested) in one place.

Browser-only behaviours (double-click and Ctrl+Enter on the prompt field)
are wired by the page script in :mod:`fluxworks.ui.app`; they click the
example and generate buttons, so they end up in the rows below.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .handlers import (
    generate_image,
    load_saved_token,
    pick_example_prompt,
    refresh_notifications,
    remember_token,
)
from .models import TOKEN_SAVE_PROMPT

logger = logging.getLogger(__name__)

GENERATION_INPUTS = ("token", "prompt", "width", "height", "steps", "seed", "state")
GENERATION_OUTPUTS = ("generate_btn", "image_status", "image", "download", "notices", "state")

# Asks for confirmation in the browser only when the token actually changed
CONFIRM_TOKEN_JS = (
    "(token, confirmed, stored) => "
    f"[token, Boolean(token) && token !== stored && confirm({json.dumps(TOKEN_SAVE_PROMPT)}), "
    "stored]"
)
PULSE_PROMPT_JS = "() => { if (window.fluxworksPulse) { window.fluxworksPulse(); } }"


@dataclass(frozen=True)
class EventBinding:
    """One (component, event) -> handler registration."""

    source: str
    event: str
    handler: Callable
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    js: str | None = None
    show_progress: str = "full"


def build_event_table() -> list[EventBinding]:
    """Return the app's event bindings."""
    return [
        # Generation
        EventBinding(
            "generate_btn",
            "click",
            generate_image,
            GENERATION_INPUTS,
            GENERATION_OUTPUTS,
            show_progress="minimal",
        ),
        # Token persistence
        EventBinding("app", "load", load_saved_token, ("token_store",), ("token",)),
        EventBinding(
            "token",
            "blur",
            remember_token,
            ("token", "token_confirmed", "token_store"),
            ("token_store",),
            js=CONFIRM_TOKEN_JS,
            show_progress="hidden",
        ),
        # Example prompts (button, or double-click on the prompt field)
        EventBinding(
            "example_btn",
            "click",
            pick_example_prompt,
            (),
            ("prompt",),
            js=PULSE_PROMPT_JS,
            show_progress="hidden",
        ),
        # Timed dismissal of success notices
        EventBinding(
            "timer",
            "tick",
            refresh_notifications,
            ("state",),
            ("notices",),
            show_progress="hidden",
        ),
    ]


def bind_events(components: dict[str, Any], table: list[EventBinding]) -> list[Any]:
    """Attach every binding of ``table`` to the named components.

    Args:
        components: Mapping of component name to Gradio component (or Blocks)
        table: Event bindings to register

    Returns:
        List of the event dependencies returned by Gradio

    Raises:
        KeyError: If a binding names an unknown component
    """
    dependencies = []
    for binding in table:
        listener = getattr(components[binding.source], binding.event)
        kwargs: dict[str, Any] = {
            "fn": binding.handler,
            "inputs": [components[name] for name in binding.inputs],
            "outputs": [components[name] for name in binding.outputs],
            "show_progress": binding.show_progress,
        }
        if binding.js:
            kwargs["js"] = binding.js
        logger.debug(f"Binding {binding.source}.{binding.event} -> {binding.handler.__name__}")
        dependencies.append(listener(**kwargs))
    return dependencies
