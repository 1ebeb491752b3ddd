"""Base class for API resources."""

from typing import Any, Callable, Dict, Optional

from eleven_client.errors import ValidationError
from eleven_client.events import EventType
from eleven_client.http import BINARY, HTTPClient


class Resource:
    """A group of related endpoints sharing one :class:`HTTPClient`."""

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    @property
    def config(self):
        return self.http_client.config

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None):
        return self.http_client.get(path, params)

    def _post(self, path: str, body: Optional[Dict[str, Any]] = None, params: Optional[Dict[str, Any]] = None):
        return self.http_client.post(path, body, params=params)

    def _post_binary(self, path: str, body: Optional[Dict[str, Any]] = None,
                     params: Optional[Dict[str, Any]] = None) -> bytes:
        return self.http_client.post(path, body, params=params, response_type=BINARY)

    def _post_stream(self, path: str, body: Dict[str, Any], on_chunk: Callable[[bytes], Any],
                     params: Optional[Dict[str, Any]] = None) -> None:
        self.http_client.post_stream(path, body, on_chunk=on_chunk, params=params)

    def _post_multipart(self, path: str, params: Dict[str, Any]):
        return self.http_client.post_multipart(path, params)

    def _delete(self, path: str):
        return self.http_client.delete(path)

    def _trigger(self, event_type: EventType, **fields):
        return self.config.trigger(event_type, **fields)


def validate_presence(value, name: str) -> None:
    """Raise ValidationError if ``value`` is None or empty."""
    if value is None or (hasattr(value, "__len__") and len(value) == 0):
        raise ValidationError(f"{name} cannot be blank")


def require_sink(on_chunk) -> None:
    if not callable(on_chunk):
        raise ValidationError("on_chunk callable is required for streaming")
