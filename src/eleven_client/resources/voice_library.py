"""Shared voice library: search and add-to-account."""

from typing import Iterator, List, Optional

from eleven_client.collection import LibraryVoiceCollection
from eleven_client.events import EventType
from eleven_client.objects import LibraryVoice, Voice
from eleven_client.resources.base import Resource, validate_presence

CATEGORIES = ("professional", "famous", "high_quality")
MAX_PAGE_SIZE = 100


class VoiceLibrary(Resource):
    """The shared, paginated voice library.

    Example:
        ```python
        page = client.voice_library.search(language="Spanish", gender="female")
        voice = client.voice_library.add(**page.first().add_params())
        ```
    """

    def search(self, page_size: int = 30, category: Optional[str] = None, gender: Optional[str] = None,
               age: Optional[str] = None, accent: Optional[str] = None, language: Optional[str] = None,
               locale: Optional[str] = None, search: Optional[str] = None,
               use_cases: Optional[List[str]] = None, featured: Optional[bool] = None,
               reader_app_enabled: Optional[bool] = None, owner_id: Optional[str] = None,
               sort: Optional[str] = None, page: Optional[str] = None) -> LibraryVoiceCollection:
        """Search the shared library.

        Args:
            page_size: Results per page, capped at 100
            page: Cursor from a previous page's ``next_cursor``
            (remaining arguments are optional filters)

        Returns:
            LibraryVoiceCollection: One page of results
        """
        params = {
            "page_size": min(int(page_size), MAX_PAGE_SIZE),
            "category": category,
            "gender": gender,
            "age": age,
            "accent": accent,
            "language": language,
            "locale": locale,
            "search": search,
            "use_cases": ",".join(use_cases) if use_cases else None,
            "featured": featured,
            "reader_app_enabled": reader_app_enabled,
            "owner_id": owner_id,
            "sort": sort,
            "cursor": page,
        }
        params = {k: v for k, v in params.items() if v is not None}
        return LibraryVoiceCollection.from_response(self._get("/shared-voices", params))

    def add(self, public_user_id: str, voice_id: str, name: str) -> Voice:
        """Add a shared voice to the account under ``name``.

        Returns:
            Voice: The account voice, carrying the id the API assigned
        """
        validate_presence(public_user_id, "public_user_id")
        validate_presence(voice_id, "voice_id")
        validate_presence(name, "name")

        response = self._post(f"/voices/add/{public_user_id}/{voice_id}", {"new_name": name})
        self._trigger(EventType.VOICE_ADDED, voice_id=response.get("voice_id"), name=name)

        return Voice.from_response({"voice_id": response.get("voice_id"), "name": name})

    def find(self, query: str, **options) -> LibraryVoiceCollection:
        return self.search(search=query, **options)

    def spanish(self, **options) -> LibraryVoiceCollection:
        return self.search(language="Spanish", **options)

    def professional(self, **options) -> LibraryVoiceCollection:
        return self.search(category="professional", **options)

    def each_page(self, **options) -> Iterator[LibraryVoiceCollection]:
        """Yield result pages until the API reports no more."""
        cursor = options.pop("page", None)
        while True:
            collection = self.search(**options, page=cursor)
            yield collection
            if not collection.has_more:
                return
            cursor = collection.next_cursor

    def all(self, max_pages: int = 10, **options) -> List[LibraryVoice]:
        """Collect voices across pages, fetching at most ``max_pages``."""
        voices: List[LibraryVoice] = []
        for pages, collection in enumerate(self.each_page(**options), start=1):
            voices.extend(collection)
            if pages >= max_pages:
                break
        return voices
