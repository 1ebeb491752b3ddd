"""Provider-neutral text-to-speech adapter.

:class:`TextToSpeechAdapter` defines the interface a multi-provider wrapper
can program against; :class:`ElevenLabsAdapter` implements it on top of a
:class:`~eleven_client.client.Client`, returning plain dictionaries tagged
with the provider name.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List


class TextToSpeechAdapter(ABC):
    """Abstract base class for text-to-speech providers."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier, e.g. ``"elevenlabs"``."""

    @abstractmethod
    def list_voices(self) -> List[Dict[str, Any]]:
        """List voices available to the account, normalized."""

    @abstractmethod
    def generate(self, text: str, voice_id: str, **options):
        """Generate audio for ``text`` with ``voice_id``."""

    @abstractmethod
    def stream(self, text: str, voice_id: str, on_chunk: Callable[[bytes], Any], **options) -> None:
        """Stream audio chunks for ``text`` into ``on_chunk``."""

    def supports_streaming(self) -> bool:
        return False

    def list_models(self) -> List[Dict[str, Any]]:
        return []

    def quota(self) -> Dict[str, Any]:
        return {"provider": self.provider_name}

    def search_voices(self, **options) -> List[Dict[str, Any]]:
        return []

    def ensure_voice_available(self, public_user_id: str, voice_id: str, name: str) -> Dict[str, Any]:
        raise NotImplementedError(f"{self.provider_name} does not manage voice slots")


class ElevenLabsAdapter(TextToSpeechAdapter):
    """Adapter over an ElevenLabs :class:`~eleven_client.client.Client`."""

    def __init__(self, client):
        self.client = client

    @property
    def provider_name(self) -> str:
        return "elevenlabs"

    def list_voices(self) -> List[Dict[str, Any]]:
        return [
            {
                "provider": self.provider_name,
                "voice_id": voice.voice_id,
                "name": voice.name,
                "gender": voice.gender,
                "language": voice.language,
                "accent": voice.accent,
                "category": voice.category,
                "preview_url": voice.preview_url,
                "metadata": voice.to_dict(),
            }
            for voice in self.client.voices.list()
        ]

    def generate(self, text: str, voice_id: str, **options):
        return self.client.tts.generate(text, voice_id=voice_id, **options)

    def stream(self, text: str, voice_id: str, on_chunk: Callable[[bytes], Any], **options) -> None:
        self.client.tts.stream(text, voice_id=voice_id, on_chunk=on_chunk, **options)

    def supports_streaming(self) -> bool:
        return True

    def list_models(self) -> List[Dict[str, Any]]:
        return [
            {
                "provider": self.provider_name,
                "model_id": model.model_id,
                "name": model.name,
                "multilingual": model.multilingual,
                "languages": model.supported_language_codes(),
                "metadata": model.to_dict(),
            }
            for model in self.client.models.list()
        ]

    def quota(self) -> Dict[str, Any]:
        sub = self.client.user.subscription()
        return {
            "provider": self.provider_name,
            "tier": sub.tier,
            "characters_used": sub.character_count,
            "characters_limit": sub.character_limit,
            "characters_remaining": sub.characters_remaining,
            "resets_at": sub.next_reset_at,
        }

    def search_voices(self, **options) -> List[Dict[str, Any]]:
        return [
            {
                "provider": self.provider_name,
                "voice_id": voice.voice_id,
                "public_owner_id": voice.public_owner_id,
                "name": voice.name,
                "gender": voice.gender,
                "language": voice.language,
                "accent": voice.accent,
                "metadata": voice.to_dict(),
            }
            for voice in self.client.voice_library.search(**options)
        ]

    def ensure_voice_available(self, public_user_id: str, voice_id: str, name: str) -> Dict[str, Any]:
        voice = self.client.voice_slots.ensure_available(
            public_user_id=public_user_id, voice_id=voice_id, name=name
        )
        return {
            "provider": self.provider_name,
            "voice_id": voice.voice_id,
            "name": voice.name,
            "metadata": voice.to_dict(),
        }
