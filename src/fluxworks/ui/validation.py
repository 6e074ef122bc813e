"""Validation utilities for Fluxworks UI inputs.

Every check here runs before any network call. Failures raise
:class:`~fluxworks.core.errors.ValidationError` whose message is displayed
directly to the user.
"""

import logging

import pydantic

from fluxworks.core.errors import ValidationError
from fluxworks.core.models import MAX_SEED, GenerationRequest

from .models import GenerationForm

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Please enter your Hugging Face API token"
MISSING_PROMPT_MESSAGE = "Please describe the image you want to generate"


def validate_token(token: str | None) -> str:
    """Return the trimmed API token.

    Raises:
        ValidationError: If the token is empty
    """
    token = (token or "").strip()
    if not token:
        raise ValidationError(MISSING_TOKEN_MESSAGE)
    return token


def validate_prompt(prompt: str | None) -> str:
    """Return the trimmed prompt.

    Raises:
        ValidationError: If the prompt is empty
    """
    prompt = (prompt or "").strip()
    if not prompt:
        raise ValidationError(MISSING_PROMPT_MESSAGE)
    return prompt


def parse_seed(raw: str | int | float | None) -> int | None:
    """Parse the seed field.

    A blank field means "no seed". Anything else must be a whole number in
    0..MAX_SEED; invalid input is rejected rather than sent to the API.

    Raises:
        ValidationError: If the seed is not a valid integer
    """
    if raw is None:
        return None
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValidationError(f"Seed must be a whole number, got {raw}")
        raw = int(raw)
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
        try:
            raw = int(raw)
        except ValueError as e:
            raise ValidationError(f"Seed must be a whole number, got '{raw}'") from e
    if raw < 0 or raw > MAX_SEED:
        raise ValidationError(f"Seed must be 0 to {MAX_SEED}, got {raw}")
    return raw


def _as_int(value: float | int | None, name: str) -> int:
    if value is None:
        raise ValidationError(f"{name} is required")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a number, got {value!r}") from e


def build_generation_request(form: GenerationForm) -> tuple[str, GenerationRequest]:
    """Validate the form and build the request.

    Checks run in order: token, prompt, seed, then dimensions and steps.

    Args:
        form: Raw form values

    Returns:
        Tuple of (token, request)

    Raises:
        ValidationError: If any value is missing or invalid
    """
    token = validate_token(form.token)
    prompt = validate_prompt(form.prompt)
    seed = parse_seed(form.seed)

    try:
        request = GenerationRequest(
            prompt=prompt,
            width=_as_int(form.width, "Width"),
            height=_as_int(form.height, "Height"),
            steps=_as_int(form.steps, "Steps"),
            seed=seed,
        )
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field_name = ".".join(str(loc) for loc in error["loc"]).capitalize()
        raise ValidationError(f"{field_name}: {error['msg']}") from e

    return token, request
