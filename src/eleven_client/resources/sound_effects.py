"""Sound effect generation."""

from typing import Optional

from eleven_client.events import EventType
from eleven_client.objects import Audio, CostInfo
from eleven_client.resources.base import Resource, validate_presence
from eleven_client.resources.text_to_speech import DEFAULT_OUTPUT_FORMAT

DEFAULT_MODEL = "eleven_text_to_sound_v2"


class SoundEffects(Resource):
    """Generate sound effects from a text description."""

    def generate(self, text: str, model_id: str = DEFAULT_MODEL, duration_seconds: Optional[float] = None,
                 prompt_influence: Optional[float] = None, loop: Optional[bool] = None,
                 output_format: str = DEFAULT_OUTPUT_FORMAT) -> Audio:
        """Generate a sound effect.

        Args:
            text: Description of the sound, e.g. "thunder rumbling in the distance"
            model_id: Model to use
            duration_seconds: Desired length; the API decides if omitted
            prompt_influence: 0.0-1.0, how closely to follow the prompt
            loop: Whether the effect should loop seamlessly
            output_format: Audio output format
        """
        validate_presence(text, "text")

        body = {
            "text": text,
            "model_id": model_id,
            "duration_seconds": duration_seconds,
            "prompt_influence": prompt_influence,
            "loop": loop,
        }
        data = self._post_binary("/sound-generation", body, params={"output_format": output_format})

        audio = Audio(data=data, format=output_format, voice_id=None, text=text, model_id=model_id)
        cost_info = CostInfo.for_text(text, "sound_effect", model_id)
        self._trigger(EventType.AUDIO_GENERATED, audio=audio, voice_id=None, text=text,
                      cost_info=cost_info.to_dict())
        return audio
