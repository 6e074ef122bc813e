"""Example prompt handler."""

import random

from ..models import EXAMPLE_PROMPTS


def pick_example_prompt(rng: random.Random | None = None) -> str:
    """Return one of the built-in example prompts at random."""
    return (rng or random).choice(EXAMPLE_PROMPTS)
