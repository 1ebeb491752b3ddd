"""Lifecycle events emitted by the client.

Each :class:`EventType` maps to one optional handler slot on the
configuration (``on_request``, ``on_response`` ...). Dispatch is
synchronous and best-effort: a handler is called with keyword fields, its
return value is ignored, and anything it raises is logged and discarded so
monitoring code can never break a request.

Example:
    ```python
    client = Client(
        api_key="...",
        on_error=lambda error, **_: sentry_sdk.capture_exception(error),
        on_retry=lambda attempt, delay, **_: print(f"retry {attempt} in {delay}s"),
    )
    ```
"""

from enum import Enum
from typing import Any, Callable, Optional


class EventType(Enum):
    """Events a client emits, valued by their handler slot name."""

    # Transport
    REQUEST = "on_request"  # method, path, body
    RESPONSE = "on_response"  # method, path, response, duration
    ERROR = "on_error"  # error, method, path, context
    RETRY = "on_retry"  # error, attempt, max_attempts, delay
    RATE_LIMIT = "on_rate_limit"  # retry_after, error

    # Resources
    AUDIO_GENERATED = "on_audio_generated"  # audio, voice_id, text, cost_info
    VOICE_ADDED = "on_voice_added"  # voice_id, name
    VOICE_DELETED = "on_voice_deleted"  # voice_id

    @property
    def handler_name(self) -> str:
        return self.value


CALLBACK_NAMES = tuple(event.value for event in EventType)


def dispatch(
    event_type: EventType,
    handler: Optional[Callable[..., Any]],
    logger,
    **fields,
) -> Any:
    """Call ``handler`` for ``event_type`` and swallow anything it raises.

    Args:
        event_type: The event being emitted
        handler: Registered handler, or None
        logger: Object with a ``warning`` method used to report handler failures
        **fields: Keyword fields passed to the handler

    Returns:
        The handler's return value, or None if there is no handler or it failed
    """
    if not callable(handler):
        return None

    try:
        return handler(**fields)
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(f"[eleven_client] Callback error in {event_type.handler_name}: {e}")
        return None
