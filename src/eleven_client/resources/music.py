"""Music generation."""

from typing import Any, Callable, Dict, Optional

from eleven_client.errors import ValidationError
from eleven_client.events import EventType
from eleven_client.objects import Audio, CostInfo
from eleven_client.resources.base import Resource, require_sink, validate_presence
from eleven_client.resources.text_to_speech import DEFAULT_OUTPUT_FORMAT

DEFAULT_MODEL = "music_v1"


class Music(Resource):
    """Generate music from a prompt or a composition plan.

    Example:
        ```python
        plan = client.music.create_plan("epic orchestral battle theme", music_length_ms=30_000)
        audio = client.music.generate(composition_plan=plan)
        ```
    """

    def generate(self, prompt: Optional[str] = None, composition_plan: Optional[Dict[str, Any]] = None,
                 music_length_ms: Optional[int] = None, model_id: str = DEFAULT_MODEL,
                 force_instrumental: Optional[bool] = None, respect_sections_durations: Optional[bool] = None,
                 output_format: str = DEFAULT_OUTPUT_FORMAT) -> Audio:
        """Generate music. Exactly one of ``prompt`` and ``composition_plan`` is required."""
        body = build_body(prompt, composition_plan, music_length_ms, model_id,
                          force_instrumental, respect_sections_durations)
        data = self._post_binary("/music", body, params={"output_format": output_format})

        audio = Audio(data=data, format=output_format, voice_id=None, text=prompt, model_id=model_id)
        self._audio_generated(audio, prompt, model_id)
        return audio

    def stream(self, prompt: Optional[str] = None, on_chunk: Optional[Callable[[bytes], Any]] = None,
               composition_plan: Optional[Dict[str, Any]] = None, music_length_ms: Optional[int] = None,
               model_id: str = DEFAULT_MODEL, force_instrumental: Optional[bool] = None,
               output_format: str = DEFAULT_OUTPUT_FORMAT) -> None:
        """Stream music, passing each chunk to ``on_chunk``."""
        require_sink(on_chunk)
        body = build_body(prompt, composition_plan, music_length_ms, model_id, force_instrumental)
        self._post_stream("/music/stream", body, on_chunk, params={"output_format": output_format})
        self._audio_generated(None, prompt, model_id)

    def create_plan(self, prompt: str, music_length_ms: Optional[int] = None,
                    model_id: str = DEFAULT_MODEL) -> Dict[str, Any]:
        """Create a composition plan from a prompt. Plans cost no credits."""
        validate_presence(prompt, "prompt")
        body = {"prompt": prompt, "model_id": model_id, "music_length_ms": music_length_ms}
        return self._post("/music/plan", body)

    def _audio_generated(self, audio, prompt, model_id):
        cost_info = CostInfo.for_text(prompt, "music", model_id)
        self._trigger(EventType.AUDIO_GENERATED, audio=audio, voice_id=None, text=prompt,
                      cost_info=cost_info.to_dict())


def build_body(prompt, composition_plan, music_length_ms, model_id,
               force_instrumental=None, respect_sections_durations=None) -> Dict[str, Any]:
    if prompt is None and composition_plan is None:
        raise ValidationError("Either prompt or composition_plan must be provided")
    if prompt is not None and composition_plan is not None:
        raise ValidationError("prompt and composition_plan are mutually exclusive")

    body: Dict[str, Any] = {"model_id": model_id}
    if prompt is not None:
        body["prompt"] = prompt
        body["music_length_ms"] = music_length_ms
        body["force_instrumental"] = force_instrumental
    else:
        body["composition_plan"] = composition_plan
    body["respect_sections_durations"] = respect_sections_durations

    return {k: v for k, v in body.items() if v is not None}
