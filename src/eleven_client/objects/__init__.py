"""Typed records parsed from API responses."""

from .account import Subscription, UserInfo
from .audio import Audio, CostInfo
from .model import Model
from .voice import LibraryVoice, Voice, VoiceSettings

__all__ = [
    "Audio",
    "CostInfo",
    "LibraryVoice",
    "Model",
    "Subscription",
    "UserInfo",
    "Voice",
    "VoiceSettings",
]
