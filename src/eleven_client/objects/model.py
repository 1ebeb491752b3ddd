"""TTS model records."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Model:
    """An ElevenLabs model as listed by ``GET /models``."""

    model_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    can_be_finetuned: Optional[bool] = None
    can_do_text_to_speech: Optional[bool] = None
    can_do_voice_conversion: Optional[bool] = None
    can_use_style: Optional[bool] = None
    can_use_speaker_boost: Optional[bool] = None
    serves_pro_voices: Optional[bool] = None
    token_cost_factor: Optional[float] = None
    languages: Optional[List[Dict[str, str]]] = None
    max_characters_request_free_user: Optional[int] = None
    max_characters_request_subscribed_user: Optional[int] = None
    concurrency_group: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    _FLAGS = (
        "can_be_finetuned",
        "can_do_text_to_speech",
        "can_do_voice_conversion",
        "can_use_style",
        "can_use_speaker_boost",
        "serves_pro_voices",
    )

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Model":
        values = {}
        for name in cls.__dataclass_fields__:  # pylint: disable=no-member
            if name == "raw":
                continue
            value = data.get(name)
            if name in cls._FLAGS and value is not None:
                value = bool(value)
            values[name] = value
        return cls(raw=dict(data), **values)

    def supported_language_codes(self) -> List[str]:
        return [language.get("language_id") for language in self.languages or []]

    def supports_language(self, language_code: str) -> bool:
        return language_code in self.supported_language_codes()

    @property
    def multilingual(self) -> bool:
        return "multilingual" in (self.name or "").lower() or len(self.supported_language_codes()) > 1

    @property
    def turbo(self) -> bool:
        return "turbo" in (self.name or "").lower() or "turbo" in (self.model_id or "")

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.raw)
