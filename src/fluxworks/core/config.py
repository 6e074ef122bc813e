"""Configuration management for Fluxworks.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the FLUXWORKS_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (FLUXWORKS_* prefix)
2. .env file in the project root
3. Default values defined in FluxworksConfig

Example .env file:
    FLUXWORKS_INFERENCE_URL=https://api-inference.huggingface.co/models/black-forest-labs/FLUX.1-schnell
    FLUXWORKS_DEFAULT_STEPS=4
    FLUXWORKS_OUTPUTS_DIR=outputs
    FLUXWORKS_REQUEST_TIMEOUT=120

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

    from fluxworks.core.config import config

    print(config.inference_url)
    print(config.outputs_dir)

FLUX.1-schnell Constraints
--------------------------
- guidance_scale is always sent as 0 (the model is guidance-distilled)
- 4 inference steps is the recommended default
- Width and height should be multiples of 64
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INFERENCE_URL = (
    "https://api-inference.huggingface.co/models/black-forest-labs/FLUX.1-schnell"
)


class FluxworksConfig(BaseSettings):
    """Main configuration for Fluxworks.

    Attributes
    ----------
    Inference Endpoint:
        inference_url : str
            Fixed inference endpoint that receives the prompt
        model_name : str
            Display name of the model behind the endpoint
        request_timeout : float | None
            Transport timeout in seconds (None waits indefinitely)

    Generation Defaults:
        default_width : int
            Initial width in pixels (256-2048)
        default_height : int
            Initial height in pixels (256-2048)
        default_steps : int
            Initial number of inference steps (1-50)

    Browser Storage:
        token_storage_key : str
            Local storage key holding the API token
        browser_state_secret : str
            Fixed key Gradio encrypts the stored token with; not a secret

    Notifications:
        success_notice_seconds : float
            Time a success notice stays fully visible
        notice_fade_seconds : float
            Duration of the fade before the notice is removed

    Paths:
        outputs_dir : Path
            Directory holding generated images served to the page

    UI Settings:
        gradio_server_name : str
            Server bind address
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FLUXWORKS_",
        case_sensitive=False,
    )

    # Inference endpoint
    inference_url: str = Field(
        default=DEFAULT_INFERENCE_URL,
        description="Inference endpoint for FLUX.1-schnell",
    )
    model_name: str = Field(
        default="FLUX.1-schnell",
        description="Model name shown in the UI",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (None = no client-side timeout)",
        gt=0,
    )

    # Generation defaults
    default_width: int = Field(default=1024, ge=256, le=2048)
    default_height: int = Field(default=1024, ge=256, le=2048)
    default_steps: int = Field(
        default=4,
        description="Number of inference steps (4 recommended for schnell)",
        ge=1,
        le=50,
    )

    # Browser storage
    token_storage_key: str = Field(
        default="hf_api_token",
        description="Browser local storage key for the API token",
    )

    browser_state_secret: str = Field(
        default="fluxworks-browser-storage",
        min_length=1,
        description="Fixed key for browser storage encryption (keeps the token across restarts)",
    )

    # Notifications
    success_notice_seconds: float = Field(default=5.0, ge=0)
    notice_fade_seconds: float = Field(default=0.5, ge=0)

    # Paths
    outputs_dir: Path = Field(
        default=Path("outputs"),
        description="Directory to save generated images",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the outputs directory."""
        super().__init__(**kwargs)
        self.outputs_dir.mkdir(parents=True, exist_ok=True)


# Global configuration instance
config = FluxworksConfig()
