"""User account and subscription records."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass
class Subscription:
    """Subscription limits and usage from ``GET /user/subscription``.

    ``voice_slots_used`` is not part of the response; it is filled in by
    callers that have counted the account's voices.
    """

    tier: Optional[str] = None
    character_count: Optional[int] = None
    character_limit: Optional[int] = None
    voice_limit: Optional[int] = None
    professional_voice_limit: Optional[int] = None
    can_extend_character_limit: Optional[bool] = None
    allowed_to_extend_character_limit: Optional[bool] = None
    next_character_count_reset_unix: Optional[int] = None
    can_extend_voice_limit: Optional[bool] = None
    can_use_instant_voice_cloning: Optional[bool] = None
    can_use_professional_voice_cloning: Optional[bool] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    voice_slots_used: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Subscription":
        values = {
            name: data.get(name)
            for name in cls.__dataclass_fields__  # pylint: disable=no-member
            if name not in ("raw", "voice_slots_used")
        }
        return cls(raw=dict(data), **values)

    @property
    def voice_slots_available(self) -> Optional[int]:
        if self.voice_limit is None or self.voice_slots_used is None:
            return None
        return self.voice_limit - self.voice_slots_used

    @property
    def voice_slots_full(self) -> bool:
        available = self.voice_slots_available
        return available is not None and available <= 0

    @property
    def characters_remaining(self) -> int:
        if self.character_limit is None or self.character_count is None:
            return 0
        return self.character_limit - self.character_count

    @property
    def characters_used_percentage(self) -> float:
        if not self.character_limit or self.character_limit <= 0:
            return 0.0
        return round((self.character_count or 0) / self.character_limit * 100, 1)

    @property
    def next_reset_at(self) -> Optional[datetime]:
        if self.next_character_count_reset_unix is None:
            return None
        return datetime.fromtimestamp(self.next_character_count_reset_unix, tz=timezone.utc)

    @property
    def active(self) -> bool:
        return self.status == "active"

    @property
    def free(self) -> bool:
        return (self.tier or "").lower() == "free"


@dataclass
class UserInfo:
    """Account information from ``GET /user``."""

    user_id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    is_new_user: Optional[bool] = None
    xi_api_key: Optional[str] = field(default=None, repr=False)
    can_use_delayed_payment_methods: Optional[bool] = None
    is_onboarding_completed: Optional[bool] = None
    is_onboarding_checklist_completed: Optional[bool] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "UserInfo":
        values = {
            name: data.get(name)
            for name in cls.__dataclass_fields__  # pylint: disable=no-member
            if name != "raw"
        }
        return cls(raw=dict(data), **values)

    @property
    def display_name(self) -> str:
        if self.first_name:
            return self.first_name
        if self.email:
            return self.email.split("@")[0]
        return "User"
