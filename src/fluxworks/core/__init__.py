"""Core functionality for remote image generation.

- **FluxworksConfig / config**: Configuration management using Pydantic Settings
- **GenerationRequest**: Request parameters and JSON payload
- **InferenceClient**: One-shot HTTP client for the inference endpoint
- **GeneratedImage**: Handle to a generated image written to the outputs directory
- **errors**: Closed error taxonomy (validation, auth, model loading, rate limit,
  server, network)

The core package has no UI dependencies and can be used on its own:

    from fluxworks.core import GenerationRequest, InferenceClient, config

    client = InferenceClient(config.inference_url, timeout=config.request_timeout)
    data = client.generate(
        GenerationRequest(prompt="a glass dragon", width=1024, height=1024, steps=4),
        token="hf_...",
    )
"""

from fluxworks.core.config import FluxworksConfig, config
from fluxworks.core.errors import (
    AuthError,
    ErrorKind,
    GenerationError,
    ModelLoadingError,
    NetworkError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from fluxworks.core.images import GeneratedImage, save_generated_image
from fluxworks.core.inference_client import InferenceClient
from fluxworks.core.models import GenerationRequest

__all__ = [
    "AuthError",
    "ErrorKind",
    "FluxworksConfig",
    "GeneratedImage",
    "GenerationError",
    "GenerationRequest",
    "InferenceClient",
    "ModelLoadingError",
    "NetworkError",
    "RateLimitError",
    "ServerError",
    "ValidationError",
    "config",
    "save_generated_image",
]
