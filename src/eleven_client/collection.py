"""Voice collections with lookup and filter helpers."""

from typing import Any, Dict, Iterator, List, Optional

from eleven_client.objects import LibraryVoice, Voice


class Collection:
    """Sequence of parsed items that keeps the raw response."""

    item_class: Any = None
    items_key = "voices"

    def __init__(self, response: Any):
        self.raw_response = response
        self.items: List[Any] = [self.item_class.from_response(item) for item in self._raw_items(response)]

    @classmethod
    def from_response(cls, response: Any):
        return cls(response)

    def _raw_items(self, response) -> List[Dict[str, Any]]:
        if isinstance(response, list):
            return response
        if isinstance(response, dict):
            return response.get(self.items_key) or []
        return []

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __bool__(self) -> bool:
        return bool(self.items)

    def first(self):
        return self.items[0] if self.items else None

    def last(self):
        return self.items[-1] if self.items else None

    def to_list(self) -> list:
        return list(self.items)

    def find_by_id(self, voice_id: str):
        return next((v for v in self.items if v.voice_id == voice_id), None)

    def find_by_name(self, name: str):
        """Case-insensitive name lookup."""
        wanted = name.lower()
        return next((v for v in self.items if (v.name or "").lower() == wanted), None)

    def by_gender(self, gender: str) -> list:
        return [v for v in self.items if (v.gender or "").lower() == gender.lower()]

    def by_language(self, language: str) -> list:
        return [v for v in self.items if (v.language or "").lower() == language.lower()]

    def by_accent(self, accent: str) -> list:
        """Substring match, so ``"british"`` finds ``"British (RP)"``."""
        return [v for v in self.items if accent.lower() in (v.accent or "").lower()]


class VoiceCollection(Collection):
    """Voices in the account collection, in listing order."""

    item_class = Voice

    def by_category(self, category: str) -> List[Voice]:
        return [v for v in self.items if (v.category or "").lower() == category.lower()]

    def voice_ids(self) -> List[str]:
        return [v.voice_id for v in self.items]

    def include_voice(self, voice_id: str) -> bool:
        return voice_id in self.voice_ids()


class LibraryVoiceCollection(Collection):
    """One page of shared library search results."""

    item_class = LibraryVoice

    @property
    def has_more(self) -> bool:
        return isinstance(self.raw_response, dict) and self.raw_response.get("has_more") is True

    @property
    def next_cursor(self) -> Optional[str]:
        if not isinstance(self.raw_response, dict):
            return None
        return self.raw_response.get("last_sort_id")

    def popular(self, threshold: int = 10_000) -> List[LibraryVoice]:
        return [v for v in self.items if v.is_popular(threshold)]

    def free_tier(self) -> List[LibraryVoice]:
        return [v for v in self.items if v.available_for_free]

    def verified(self) -> List[LibraryVoice]:
        return [v for v in self.items if v.verified]
