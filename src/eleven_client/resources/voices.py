"""Account voice management."""

import json
from typing import Any, Dict, List, Optional

from eleven_client.collection import VoiceCollection
from eleven_client.errors import ValidationError
from eleven_client.events import EventType
from eleven_client.objects import Voice, VoiceSettings
from eleven_client.resources.base import Resource, validate_presence


class Voices(Resource):
    """Voices in your account.

    Example:
        ```python
        for voice in client.voices.list():
            print(voice.display_name)
        client.voices.destroy("voice_id")
        ```
    """

    def list(self) -> VoiceCollection:
        """List all voices in the account."""
        return VoiceCollection.from_response(self._get("/voices"))

    def find(self, voice_id: str) -> Voice:
        """Get details for a specific voice."""
        validate_presence(voice_id, "voice_id")
        return Voice.from_response(self._get(f"/voices/{voice_id}"))

    def destroy(self, voice_id: str) -> bool:
        """Delete a voice from the account.

        Returns:
            bool: True if the API reported success
        """
        validate_presence(voice_id, "voice_id")
        response = self._delete(f"/voices/{voice_id}")
        self._trigger(EventType.VOICE_DELETED, voice_id=voice_id)
        return response.get("status") == "ok"

    def create(self, name: str, samples: List[Any], description: Optional[str] = None,
               labels: Optional[Dict[str, str]] = None) -> Voice:
        """Create a voice from audio samples (instant voice cloning).

        Args:
            name: Voice name
            samples: Open audio files
            description: Optional description
            labels: Optional labels, e.g. ``{"accent": "British"}``
        """
        validate_presence(name, "name")
        if not isinstance(samples, (list, tuple)) or not samples:
            raise ValidationError("samples must be a non-empty list of files")

        params: Dict[str, Any] = {"name": name, "files": list(samples)}
        if description:
            params["description"] = description
        if labels:
            params["labels"] = json.dumps(labels)

        response = self._post_multipart("/voices/add", params)
        self._trigger(EventType.VOICE_ADDED, voice_id=response.get("voice_id"), name=name)
        return Voice.from_response(response)

    def update(self, voice_id: str, name: Optional[str] = None, description: Optional[str] = None,
               samples: Optional[List[Any]] = None, labels: Optional[Dict[str, str]] = None) -> Voice:
        """Edit a voice. Uploads go multipart, plain edits go as JSON."""
        validate_presence(voice_id, "voice_id")

        params: Dict[str, Any] = {}
        if name:
            params["name"] = name
        if description:
            params["description"] = description
        if labels is not None:
            params["labels"] = json.dumps(labels)

        path = f"/voices/{voice_id}/edit"
        if samples:
            params["files"] = list(samples)
            response = self._post_multipart(path, params)
        else:
            response = self._post(path, params)
        return Voice.from_response(response)

    def default_settings(self) -> VoiceSettings:
        return VoiceSettings.from_response(self._get("/voices/settings/default"))

    def settings(self, voice_id: str) -> VoiceSettings:
        validate_presence(voice_id, "voice_id")
        return VoiceSettings.from_response(self._get(f"/voices/{voice_id}/settings"))

    def update_settings(self, voice_id: str, settings: Dict[str, Any]) -> bool:
        validate_presence(voice_id, "voice_id")
        if isinstance(settings, VoiceSettings):
            settings = settings.to_api_dict()
        response = self._post(f"/voices/{voice_id}/settings/edit", settings)
        return response.get("status") == "ok"
