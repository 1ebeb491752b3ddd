"""API resources, one class per endpoint group."""

from .base import Resource
from .models import Models
from .music import Music
from .sound_effects import SoundEffects
from .text_to_speech import TextToSpeech
from .user import User
from .voice_library import VoiceLibrary
from .voices import Voices

__all__ = [
    "Resource",
    "Models",
    "Music",
    "SoundEffects",
    "TextToSpeech",
    "User",
    "VoiceLibrary",
    "Voices",
]
