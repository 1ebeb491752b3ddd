"""Generated audio and its estimated cost."""

import io
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from eleven_client.utils.file_utils import get_timestamped_audio_path, write_binary

# (format substring, content type, file extension), first match wins
_FORMATS = (
    ("mp3", "audio/mpeg", "mp3"),
    ("pcm", "audio/pcm", "pcm"),
    ("ogg", "audio/ogg", "ogg"),
    ("wav", "audio/wav", "wav"),
    ("flac", "audio/flac", "flac"),
)


@dataclass
class Audio:
    """Audio bytes returned by a generation endpoint.

    Attributes:
        data: Raw audio bytes
        format: Output format, e.g. ``mp3_44100_128``
        voice_id: Voice used, None for sound effects and music
        text: Source text or prompt
        model_id: Model used
    """

    data: bytes
    format: str
    voice_id: Optional[str] = None
    text: Optional[str] = None
    model_id: Optional[str] = None

    def _format_info(self):
        for marker, content_type, extension in _FORMATS:
            if marker in (self.format or ""):
                return content_type, extension
        return "application/octet-stream", "bin"

    @property
    def size(self) -> int:
        """Size in bytes."""
        return len(self.data or b"")

    @property
    def kilobytes(self) -> float:
        return self.size / 1024.0

    @property
    def content_type(self) -> str:
        return self._format_info()[0]

    @property
    def extension(self) -> str:
        return self._format_info()[1]

    @property
    def character_count(self) -> int:
        return len(self.text or "")

    @property
    def present(self) -> bool:
        return bool(self.data)

    def save_to_file(self, path: Optional[str] = None) -> str:
        """Write the audio to ``path`` (a temp file if omitted) and return the path."""
        if path is None:
            path = get_timestamped_audio_path("eleven", self.extension)
        return write_binary(path, self.data)

    def to_io(self) -> io.BytesIO:
        return io.BytesIO(self.data)

    def __repr__(self):
        return f"Audio(format={self.format!r}, bytes={self.size}, voice_id={self.voice_id!r})"


@dataclass
class CostInfo:
    """Estimated cost of a generation request."""

    # Approximate USD per 1000 characters; varies by subscription tier
    COST_PER_1K_CHARS = {
        "eleven_monolingual_v1": 0.30,
        "eleven_multilingual_v1": 0.30,
        "eleven_multilingual_v2": 0.30,
        "eleven_turbo_v2": 0.18,
        "eleven_turbo_v2_5": 0.18,
        "eleven_english_sts_v2": 0.30,
        "eleven_flash_v2": 0.10,
        "eleven_flash_v2_5": 0.10,
    }
    DEFAULT_COST_PER_1K = 0.30

    character_count: int = 0
    voice_id: Optional[str] = None
    model_id: Optional[str] = None
    _rate: float = field(init=False, repr=False)

    def __post_init__(self):
        self._rate = self.COST_PER_1K_CHARS.get(self.model_id, self.DEFAULT_COST_PER_1K)

    @classmethod
    def for_text(cls, text: Optional[str], voice_id: Optional[str], model_id: Optional[str]) -> "CostInfo":
        return cls(character_count=len(text or ""), voice_id=voice_id, model_id=model_id)

    @property
    def estimated_cost(self) -> float:
        """Estimated cost in USD."""
        return round(self.character_count / 1000.0 * self._rate, 4)

    @property
    def cost_per_character(self) -> float:
        return self._rate / 1000.0

    @property
    def turbo_model(self) -> bool:
        return any(marker in (self.model_id or "") for marker in ("turbo", "flash"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "character_count": self.character_count,
            "voice_id": self.voice_id,
            "model_id": self.model_id,
            "estimated_cost": self.estimated_cost,
            "cost_per_character": self.cost_per_character,
        }
