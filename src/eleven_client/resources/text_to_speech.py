"""Text-to-speech generation."""

import base64
from typing import Any, Callable, Dict, Optional

from eleven_client.errors import ValidationError
from eleven_client.events import EventType
from eleven_client.objects import Audio, CostInfo, VoiceSettings
from eleven_client.resources.base import Resource, require_sink, validate_presence

DEFAULT_MODEL = "eleven_multilingual_v2"
DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"
MAX_TEXT_LENGTH = 5000

OUTPUT_FORMATS = (
    "mp3_44100_128",
    "mp3_44100_192",
    "pcm_16000",
    "pcm_22050",
    "pcm_24000",
    "pcm_44100",
    "ulaw_8000",
)


class TextToSpeech(Resource):
    """Convert text to speech.

    Example:
        ```python
        audio = client.tts.generate("Hello world", voice_id="abc123")
        audio.save_to_file("output.mp3")

        with open("output.mp3", "wb") as f:
            client.tts.stream("Hello world", voice_id="abc123", on_chunk=f.write)
        ```
    """

    def generate(self, text: str, voice_id: str, model_id: str = DEFAULT_MODEL,
                 voice_settings: Optional[Dict[str, Any]] = None,
                 output_format: str = DEFAULT_OUTPUT_FORMAT) -> Audio:
        """Generate audio for ``text``.

        Args:
            text: Text to convert, at most 5000 characters
            voice_id: Voice to speak with
            model_id: Model to use
            voice_settings: Overrides merged onto the default voice settings
            output_format: Audio output format

        Returns:
            Audio: The generated audio
        """
        body = self._build_body(text, voice_id, model_id, voice_settings)
        data = self._post_binary(f"/text-to-speech/{voice_id}", body, params={"output_format": output_format})

        audio = Audio(data=data, format=output_format, voice_id=voice_id, text=text, model_id=model_id)
        self._audio_generated(audio, voice_id, text, model_id)
        return audio

    def stream(self, text: str, voice_id: str, on_chunk: Callable[[bytes], Any],
               model_id: str = DEFAULT_MODEL, voice_settings: Optional[Dict[str, Any]] = None,
               output_format: str = DEFAULT_OUTPUT_FORMAT) -> None:
        """Stream audio for ``text``, passing each chunk to ``on_chunk``."""
        require_sink(on_chunk)
        body = self._build_body(text, voice_id, model_id, voice_settings)
        self._post_stream(f"/text-to-speech/{voice_id}/stream", body, on_chunk,
                          params={"output_format": output_format})
        self._audio_generated(None, voice_id, text, model_id)

    def generate_with_timestamps(self, text: str, voice_id: str, model_id: str = DEFAULT_MODEL,
                                 voice_settings: Optional[Dict[str, Any]] = None,
                                 output_format: str = DEFAULT_OUTPUT_FORMAT) -> Dict[str, Any]:
        """Generate audio plus character-level alignment.

        Returns:
            dict: ``{"audio": Audio or None, "alignment": dict or None}``
        """
        body = self._build_body(text, voice_id, model_id, voice_settings)
        response = self._post(f"/text-to-speech/{voice_id}/with-timestamps", body,
                              params={"output_format": output_format})

        audio = None
        if response.get("audio_base64"):
            audio = Audio(
                data=base64.b64decode(response["audio_base64"]),
                format=output_format,
                voice_id=voice_id,
                text=text,
                model_id=model_id,
            )

        return {"audio": audio, "alignment": response.get("alignment")}

    def _build_body(self, text, voice_id, model_id, voice_settings) -> Dict[str, Any]:
        validate_text(text)
        validate_presence(voice_id, "voice_id")
        return {
            "text": text,
            "model_id": model_id,
            "voice_settings": {**VoiceSettings.DEFAULTS, **(voice_settings or {})},
        }

    def _audio_generated(self, audio, voice_id, text, model_id):
        cost_info = CostInfo.for_text(text, voice_id, model_id)
        self._trigger(EventType.AUDIO_GENERATED, audio=audio, voice_id=voice_id,
                      text=text, cost_info=cost_info.to_dict())


def validate_text(text: str) -> None:
    validate_presence(text, "text")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(
            f"text exceeds maximum length of {MAX_TEXT_LENGTH} characters (got {len(text)})"
        )
