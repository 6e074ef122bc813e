"""Pydantic request model for the inference endpoint.

GenerationRequest
    Everything needed to build the JSON body of one text-to-image call.
    It is created fresh for every generation and discarded once the HTTP
    request has been built.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

MAX_SEED = 2**32 - 1


class GenerationRequest(BaseModel):
    """Parameters of a single text-to-image request.

    Attributes:
        prompt: Text description of the desired image (non-empty).
        width: Image width in pixels.
        height: Image height in pixels.
        steps: Number of inference steps.
        seed: Random seed. ``None`` leaves the seed out of the payload so the
            endpoint picks one.
    """

    prompt: str = Field(..., min_length=1, description="Text prompt.")
    width: int = Field(..., ge=256, le=2048, description="Image width in pixels.")
    height: int = Field(..., ge=256, le=2048, description="Image height in pixels.")
    steps: int = Field(..., ge=1, le=50, description="Number of inference steps.")
    seed: int | None = Field(
        default=None,
        ge=0,
        le=MAX_SEED,
        description="Random seed.  None = endpoint picks a random seed.",
    )

    @field_validator("prompt")
    @classmethod
    def _strip_prompt(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("prompt must not be blank")
        return value

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body expected by the inference endpoint."""
        parameters: dict[str, Any] = {
            "width": self.width,
            "height": self.height,
            "num_inference_steps": self.steps,
            # FLUX.1-schnell is guidance-distilled
            "guidance_scale": 0,
        }
        if self.seed is not None:
            parameters["seed"] = self.seed
        return {"inputs": self.prompt, "parameters": parameters}
