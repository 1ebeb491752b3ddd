"""Voice records returned by the voices and voice library endpoints."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class VoiceSettings:
    """Generation settings for a voice.

    Attributes:
        stability: 0.0-1.0, lower is more expressive
        similarity_boost: 0.0-1.0, how closely to match the original voice
        style: 0.0-1.0 style exaggeration
        use_speaker_boost: Whether to boost similarity to the speaker
    """

    stability: Optional[float] = None
    similarity_boost: Optional[float] = None
    style: Optional[float] = None
    use_speaker_boost: Optional[bool] = None

    DEFAULTS = {
        "stability": 0.5,
        "similarity_boost": 0.75,
        "style": 0.0,
        "use_speaker_boost": True,
    }

    @classmethod
    def from_response(cls, data: Optional[Dict[str, Any]]) -> "VoiceSettings":
        data = data or {}
        boost = data.get("use_speaker_boost")
        return cls(
            stability=data.get("stability"),
            similarity_boost=data.get("similarity_boost"),
            style=data.get("style"),
            use_speaker_boost=None if boost is None else bool(boost),
        )

    @classmethod
    def with_defaults(cls, **overrides) -> "VoiceSettings":
        """Create settings with defaults merged in."""
        return cls.from_response({**cls.DEFAULTS, **overrides})

    def to_api_dict(self) -> Dict[str, Any]:
        """Settings suitable for a request body, unset values omitted."""
        values = {
            "stability": self.stability,
            "similarity_boost": self.similarity_boost,
            "style": self.style,
            "use_speaker_boost": self.use_speaker_boost,
        }
        return {k: v for k, v in values.items() if v is not None}


def _display_name(name, gender, accent, language) -> str:
    parts = [name or ""]
    if gender:
        parts.append(f"({gender})")
    if accent or language:
        parts.append(f"- {accent or language}")
    return " ".join(parts)


@dataclass
class Voice:
    """A voice in the account collection.

    A snapshot of server state at fetch time; changing it does not change
    the remote voice.
    """

    voice_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    preview_url: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict)
    settings: Optional[VoiceSettings] = None
    samples: Optional[List[Dict[str, Any]]] = None
    sharing: Optional[Dict[str, Any]] = None
    high_quality_base_model_ids: Optional[List[str]] = None
    safety_control: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Voice":
        settings = data.get("settings")
        return cls(
            voice_id=data.get("voice_id"),
            name=data.get("name"),
            description=data.get("description"),
            category=data.get("category"),
            preview_url=data.get("preview_url"),
            labels=data.get("labels") or {},
            settings=VoiceSettings.from_response(settings) if settings is not None else None,
            samples=data.get("samples"),
            sharing=data.get("sharing"),
            high_quality_base_model_ids=data.get("high_quality_base_model_ids"),
            safety_control=data.get("safety_control"),
            raw=dict(data),
        )

    @property
    def gender(self) -> Optional[str]:
        return self.labels.get("gender")

    @property
    def accent(self) -> Optional[str]:
        return self.labels.get("accent")

    @property
    def language(self) -> Optional[str]:
        return self.labels.get("language")

    @property
    def age(self) -> Optional[str]:
        return self.labels.get("age")

    @property
    def use_case(self) -> Optional[str]:
        return self.labels.get("use_case")

    @property
    def banned(self) -> bool:
        return self.safety_control == "BAN"

    @property
    def display_name(self) -> str:
        """e.g. ``"Rachel (female) - american"``."""
        return _display_name(self.name, self.gender, self.accent, self.language)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.raw)


@dataclass
class LibraryVoice:
    """A voice from the shared voice library."""

    voice_id: Optional[str] = None
    public_owner_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    preview_url: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[str] = None
    accent: Optional[str] = None
    language: Optional[str] = None
    locale: Optional[str] = None
    use_cases: Optional[List[str]] = None
    notice_period: Optional[int] = None
    rate: Optional[float] = None
    cloned_by_count: Optional[int] = None
    usage_character_count_1d: Optional[int] = None
    usage_character_count_7d: Optional[int] = None
    usage_character_count_30d: Optional[int] = None
    free_users_allowed: Optional[bool] = None
    live_moderation_enabled: Optional[bool] = None
    verified: Optional[bool] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    _FLAGS = ("free_users_allowed", "live_moderation_enabled", "verified")

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "LibraryVoice":
        values = {}
        for name in cls.__dataclass_fields__:  # pylint: disable=no-member
            if name == "raw":
                continue
            value = data.get(name)
            if name in cls._FLAGS and value is not None:
                value = bool(value)
            values[name] = value
        return cls(raw=dict(data), **values)

    def add_params(self) -> Dict[str, Optional[str]]:
        """Keyword arguments for ``VoiceLibrary.add`` / ``ensure_available``."""
        return {
            "public_user_id": self.public_owner_id,
            "voice_id": self.voice_id,
            "name": self.name,
        }

    @property
    def display_name(self) -> str:
        return _display_name(self.name, self.gender, self.accent, self.language)

    def is_popular(self, threshold: int = 10_000) -> bool:
        """Whether 30-day usage is at least ``threshold`` characters."""
        return (self.usage_character_count_30d or 0) >= threshold

    @property
    def available_for_free(self) -> bool:
        return self.free_users_allowed is not False

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.raw)
