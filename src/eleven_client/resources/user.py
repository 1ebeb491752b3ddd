"""User account and subscription."""

from typing import Any, Dict

from eleven_client.objects import Subscription, UserInfo
from eleven_client.resources.base import Resource


class User(Resource):
    """Account and subscription information."""

    def subscription(self) -> Subscription:
        return Subscription.from_response(self._get("/user/subscription"))

    def info(self) -> UserInfo:
        return UserInfo.from_response(self._get("/user"))

    def subscription_with_voice_count(self, voices_count: int) -> Subscription:
        """Subscription with ``voice_slots_used`` filled in."""
        sub = self.subscription()
        sub.voice_slots_used = voices_count
        return sub

    def can_add_voice(self, current_voice_count: int) -> bool:
        """True when there is no voice limit or the count is under it."""
        sub = self.subscription()
        if sub.voice_limit is None:
            return True
        return current_voice_count < sub.voice_limit

    def character_usage(self) -> Dict[str, Any]:
        sub = self.subscription()
        return {
            "used": sub.character_count,
            "limit": sub.character_limit,
            "remaining": sub.characters_remaining,
            "percentage": sub.characters_used_percentage,
            "resets_at": sub.next_reset_at,
        }
