"""
eleven_client - ElevenLabs API client.

Typed resource accessors over a retrying HTTP transport, plus a voice slot
manager that keeps library voices available in a capacity-limited account.
"""

from .client import Client
from .config import Configuration
from .errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    ElevenError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    UnprocessableError,
    ValidationError,
    VoiceSlotLimitError,
)
from .events import EventType
from .slots import SlotStatus, VoiceSlotManager

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Configuration",
    "EventType",
    "SlotStatus",
    "VoiceSlotManager",
    "ElevenError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableError",
    "RateLimitError",
    "ServerError",
    "APIError",
    "VoiceSlotLimitError",
    "ConnectionError",
    "TimeoutError",
]
