"""HTTP client for the remote text-to-image inference endpoint.

The client issues exactly one POST per call and never retries. Status codes
are mapped to the error taxonomy in :mod:`fluxworks.core.errors`; a 503
("model loading") is reported to the user, who retries manually.

Usage Example
-------------
    from fluxworks.core.config import config
    from fluxworks.core.inference_client import InferenceClient
    from fluxworks.core.models import GenerationRequest

    client = InferenceClient(config.inference_url)
    image_bytes = client.generate(
        GenerationRequest(prompt="a castle in the clouds", width=1024, height=1024, steps=4),
        token="hf_...",
    )
"""

import logging

import requests

from .errors import NetworkError, error_for_status
from .models import GenerationRequest

logger = logging.getLogger(__name__)


class InferenceClient:
    """Client for one fixed inference endpoint."""

    def __init__(self, api_url: str, timeout: float | None = None):
        """Initialize the client.

        Args:
            api_url: Full URL of the model's inference endpoint
            timeout: Transport timeout in seconds, or None to wait indefinitely
        """
        if not api_url:
            raise ValueError("API URL is required")

        self.api_url = api_url
        self.timeout = timeout
        self._session = requests.Session()

    @staticmethod
    def build_headers(token: str) -> dict[str, str]:
        """Build request headers for the given bearer token."""
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def generate(self, request: GenerationRequest, token: str) -> bytes:
        """Send one generation request and return the raw image bytes.

        Args:
            request: Generation parameters
            token: API bearer token

        Returns:
            Binary image payload of a successful response

        Raises:
            AuthError: On HTTP 401
            ModelLoadingError: On HTTP 503
            RateLimitError: On HTTP 429
            ServerError: On any other non-2xx status
            NetworkError: If no HTTP response was received
        """
        payload = request.to_payload()

        logger.info("Sending request to inference API...")
        logger.info(f"Parameters: {payload}")

        try:
            response = self._session.post(
                self.api_url,
                headers=self.build_headers(token),
                json=payload,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise NetworkError(f"Network error: request timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise NetworkError(f"Network error: {e}") from e

        if not response.ok:
            body = response.text
            logger.error(f"API error ({response.status_code}): {body}")
            raise error_for_status(response.status_code, body)

        return response.content

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
