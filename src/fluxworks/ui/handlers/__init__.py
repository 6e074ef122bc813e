"""UI event handlers organized by feature area.

- generation: Image generation from the form
- token: Loading and saving the API token in browser storage
- prompt: Example prompts
- notifications: Timed refresh of the notification region
"""

from .generation import generate_image
from .notifications import refresh_notifications
from .prompt import pick_example_prompt
from .token import load_saved_token, remember_token

__all__ = [
    "generate_image",
    "load_saved_token",
    "pick_example_prompt",
    "refresh_notifications",
    "remember_token",
]
