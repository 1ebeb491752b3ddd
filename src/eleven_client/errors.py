"""Error taxonomy for the ElevenLabs client.

Every error raised by this package derives from :class:`ElevenError` and
carries the HTTP status, the parsed response body and the provider error
code when the failure came from an HTTP response.
"""

from typing import Any, Optional


class ElevenError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: Optional[str] = None,
        http_status: Optional[int] = None,
        response_body: Any = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.response_body = response_body
        self.error_code = error_code

    def __repr__(self):
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r}, error_code={self.error_code!r})"
        )


class ConfigurationError(ElevenError):
    """Raised when the client is missing required configuration."""


class ValidationError(ElevenError):
    """Raised for malformed caller input and HTTP 400 responses."""


class AuthenticationError(ElevenError):
    """HTTP 401."""


class ForbiddenError(ElevenError):
    """HTTP 403."""


class NotFoundError(ElevenError):
    """HTTP 404."""


class UnprocessableError(ElevenError):
    """HTTP 422."""


class RateLimitError(ElevenError):
    """HTTP 429. ``retry_after`` holds the server's hint in seconds, if any."""

    def __init__(self, message: Optional[str] = None, retry_after: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(ElevenError):
    """HTTP 5xx."""


class APIError(ElevenError):
    """Fallback for unclassified failures."""


class VoiceSlotLimitError(ElevenError):
    """Raised when no voice slot can be freed."""


class ConnectionError(ElevenError):  # pylint: disable=redefined-builtin
    """Transport-level failure: DNS, refused or reset connections."""


class TimeoutError(ConnectionError):  # pylint: disable=redefined-builtin
    """The request or connection timed out."""


_STATUS_ERRORS = {
    400: ValidationError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableError,
    429: RateLimitError,
}


def error_for_status(status: int) -> type:
    """Return the error class for an HTTP status code.

    Args:
        status: HTTP status code of a non-2xx response

    Returns:
        type: An :class:`ElevenError` subclass
    """
    if status in _STATUS_ERRORS:
        return _STATUS_ERRORS[status]
    if 500 <= status <= 599:
        return ServerError
    return APIError
