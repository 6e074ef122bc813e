"""Fluxworks - FLUX.1-schnell image generation through the Hugging Face Inference API."""

__version__ = "0.1.0"

from fluxworks.core.config import FluxworksConfig, config
from fluxworks.core.inference_client import InferenceClient

__all__ = [
    "FluxworksConfig",
    "InferenceClient",
    "config",
]
