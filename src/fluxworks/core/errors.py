"""Error taxonomy for image generation.

Every failure of a generation attempt is one of a closed set of kinds,
listed in :class:`ErrorKind`. Each kind has its own exception class so that
callers can either catch the common base :class:`GenerationError` or match on
``error.kind``. The message of every exception is meant to be shown directly
to the user.

========================  ======================================
Kind                      Raised when
========================  ======================================
``VALIDATION``            input is missing or malformed (no request sent)
``AUTH``                  the endpoint answers 401
``MODEL_LOADING``         the endpoint answers 503
``RATE_LIMIT``            the endpoint answers 429
``SERVER``                any other non-2xx answer
``NETWORK``               the request never got an HTTP answer
========================  ======================================
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of generation failure kinds."""

    VALIDATION = "validation"
    AUTH = "auth"
    MODEL_LOADING = "model_loading"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    NETWORK = "network"


class GenerationError(Exception):
    """Base class for all generation failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(GenerationError):
    """User-friendly validation error.

    Raised before any network call when user input fails validation.
    """

    kind = ErrorKind.VALIDATION


class AuthError(GenerationError):
    """The API token was rejected (HTTP 401)."""

    kind = ErrorKind.AUTH

    def __init__(self, message: str = "Invalid API token. Please check your token."):
        super().__init__(message)


class ModelLoadingError(GenerationError):
    """The model is still loading on the inference side (HTTP 503)."""

    kind = ErrorKind.MODEL_LOADING

    def __init__(
        self,
        message: str = "The model is loading. Please try again in a few seconds.",
    ):
        super().__init__(message)


class RateLimitError(GenerationError):
    """Too many requests for this token (HTTP 429)."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please wait a moment before trying again.",
    ):
        super().__init__(message)


class ServerError(GenerationError):
    """Any other unsuccessful answer. Carries the status code and raw body."""

    kind = ErrorKind.SERVER

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Server error: {status_code} - {body}")


class NetworkError(GenerationError):
    """Transport-level failure (offline, DNS, refused connection, timeout)."""

    kind = ErrorKind.NETWORK


FALLBACK_MESSAGE = "An error occurred while generating the image. Please try again."


def user_message(error: Exception) -> str:
    """Return the message to display for a failed generation attempt.

    Generation errors carry their own message; anything else falls back to
    its own text, or a generic message when it has none.
    """
    if isinstance(error, GenerationError):
        return error.message
    return str(error) or FALLBACK_MESSAGE


def error_for_status(status_code: int, body: str) -> GenerationError:
    """Map an unsuccessful HTTP status to its generation error.

    Args:
        status_code: HTTP status of the response (never 2xx)
        body: Raw response body text

    Returns:
        The exception to raise for this response
    """
    match status_code:
        case 401:
            return AuthError()
        case 503:
            return ModelLoadingError()
        case 429:
            return RateLimitError()
        case _:
            return ServerError(status_code, body)
