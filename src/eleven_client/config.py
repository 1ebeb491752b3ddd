"""Client configuration.

A :class:`Configuration` is built once, validated before the first network
call and read-only afterwards. Event handlers are bound at construction.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Optional

from eleven_client.errors import ConfigurationError
from eleven_client.events import EventType, dispatch
from eleven_client.logger import ConsoleLogger

API_KEY_ENV_VAR = "ELEVENLABS_API_KEY"

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
DEFAULT_TIMEOUT = 120
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_RETRY_STATUSES = frozenset({429, 500, 502, 503, 504})

Handler = Optional[Callable[..., Any]]


@dataclass(frozen=True)
class Configuration:
    """Settings shared by every request a client makes.

    Attributes:
        api_key: ElevenLabs API key, sent as ``xi-api-key``
        base_url: API root that request paths are appended to
        timeout: Read timeout in seconds
        connect_timeout: Connection timeout in seconds
        max_retries: Retries allowed after the first attempt for retryable errors
        retry_delay: Base backoff in seconds, multiplied by the attempt number
        retry_statuses: HTTP statuses eligible for retry
        logger: Object with debug/info/warning/error methods; console output if None
        on_*: Optional event handlers, see :class:`~eleven_client.events.EventType`
    """

    api_key: Optional[str] = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    retry_statuses: FrozenSet[int] = DEFAULT_RETRY_STATUSES
    logger: Any = None

    on_request: Handler = None
    on_response: Handler = None
    on_error: Handler = None
    on_audio_generated: Handler = None
    on_retry: Handler = None
    on_rate_limit: Handler = None
    on_voice_added: Handler = None
    on_voice_deleted: Handler = None

    _console: ConsoleLogger = field(default_factory=ConsoleLogger, init=False, repr=False, compare=False)

    def __post_init__(self):
        # Accept any iterable of statuses, store an immutable set.
        object.__setattr__(self, "retry_statuses", frozenset(self.retry_statuses))
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def log(self):
        """The logger to write to."""
        return self.logger if self.logger is not None else self._console

    @property
    def configured(self) -> bool:
        """Whether a non-empty API key is present."""
        return self.api_key is not None and str(self.api_key) != ""

    def validate(self) -> bool:
        """Validate the configuration.

        Raises:
            ConfigurationError: If the API key is missing or empty, or the
                retry settings are out of range

        Returns:
            bool: True
        """
        if not self.configured:
            raise ConfigurationError(
                f"API key is required. Set via api_key option or {API_KEY_ENV_VAR} environment variable."
            )
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ConfigurationError(f"max_retries must be a non-negative integer (got {self.max_retries!r})")
        if self.retry_delay < 0:
            raise ConfigurationError(f"retry_delay must not be negative (got {self.retry_delay!r})")
        return True

    def trigger(self, event_type: EventType, **fields) -> Any:
        """Emit ``event_type`` to its registered handler, if any."""
        return dispatch(event_type, getattr(self, event_type.handler_name), self.log, **fields)

    def to_dict(self) -> dict:
        """Return the settings with the API key redacted."""
        return {
            "api_key": "[REDACTED]" if self.api_key else None,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "connect_timeout": self.connect_timeout,
            "max_retries": self.max_retries,
            "retry_delay": self.retry_delay,
            "retry_statuses": sorted(self.retry_statuses),
        }


def api_key_from_env() -> Optional[str]:
    """Read the API key from the environment."""
    return os.getenv(API_KEY_ENV_VAR)
