"""Main client for the ElevenLabs API.

Construct one client at your application's entry point and pass it to the
code that needs it; the package keeps no shared global client.

Example:
    ```python
    client = Client(api_key="...", on_error=lambda error, **_: report(error))
    audio = client.generate_speech("Hello world", voice_id="abc123")
    audio.save_to_file("output.mp3")
    ```
"""

from functools import cached_property
from typing import Any, Callable, Optional

import requests
from dotenv import load_dotenv

from eleven_client.adapter import ElevenLabsAdapter
from eleven_client.config import Configuration, api_key_from_env
from eleven_client.http import HTTPClient
from eleven_client.objects import Audio
from eleven_client.resources import (
    Models,
    Music,
    SoundEffects,
    TextToSpeech,
    User,
    VoiceLibrary,
    Voices,
)
from eleven_client.slots import VoiceSlotManager


class Client:
    """Entry point holding the configuration, transport and resources.

    Args:
        api_key: API key; defaults to the ELEVENLABS_API_KEY environment variable
        session: Optional ``requests.Session`` to send requests through
        **options: Any other :class:`Configuration` field, including ``on_*`` handlers

    A missing key is not an error until the first request, which raises
    :class:`~eleven_client.errors.ConfigurationError` without touching the network.
    """

    def __init__(self, api_key: Optional[str] = None, session: Optional[requests.Session] = None, **options):
        self.config = Configuration(api_key=api_key if api_key is not None else api_key_from_env(), **options)
        self.http_client = HTTPClient(self.config, session=session)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **options) -> "Client":
        """Build a client after loading a ``.env`` file into the environment."""
        load_dotenv(dotenv_path)
        return cls(**options)

    @property
    def configured(self) -> bool:
        return self.config.configured

    @cached_property
    def voices(self) -> Voices:
        return Voices(self.http_client)

    @cached_property
    def tts(self) -> TextToSpeech:
        return TextToSpeech(self.http_client)

    @cached_property
    def voice_library(self) -> VoiceLibrary:
        return VoiceLibrary(self.http_client)

    @cached_property
    def models(self) -> Models:
        return Models(self.http_client)

    @cached_property
    def user(self) -> User:
        return User(self.http_client)

    @cached_property
    def sound_effects(self) -> SoundEffects:
        return SoundEffects(self.http_client)

    @cached_property
    def music(self) -> Music:
        return Music(self.http_client)

    @cached_property
    def voice_slots(self) -> VoiceSlotManager:
        return VoiceSlotManager(self.voices, self.voice_library, self.user)

    @cached_property
    def adapter(self) -> ElevenLabsAdapter:
        return ElevenLabsAdapter(self)

    def generate_speech(self, text: str, voice_id: str, **options) -> Audio:
        return self.tts.generate(text, voice_id=voice_id, **options)

    def stream_speech(self, text: str, voice_id: str, on_chunk: Callable[[bytes], Any], **options) -> None:
        self.tts.stream(text, voice_id=voice_id, on_chunk=on_chunk, **options)

    def generate_sound_effect(self, text: str, **options) -> Audio:
        return self.sound_effects.generate(text, **options)

    def generate_music(self, prompt: Optional[str] = None, **options) -> Audio:
        return self.music.generate(prompt, **options)

    def __repr__(self):
        return f"Client(base_url={self.config.base_url!r}, configured={self.configured})"
