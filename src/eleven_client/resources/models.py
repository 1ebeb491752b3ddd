"""Available TTS models."""

from typing import List, Optional

from eleven_client.objects import Model
from eleven_client.resources.base import Resource

RECOMMENDED_MODEL = "eleven_multilingual_v2"


class Models(Resource):
    """Model listing and simple filters over it. Each call fetches the list."""

    def list(self) -> List[Model]:
        response = self._get("/models")
        return [Model.from_response(m) for m in response or []]

    def get(self, model_id: str) -> Optional[Model]:
        return next((m for m in self.list() if m.model_id == model_id), None)

    def multilingual(self) -> List[Model]:
        return [m for m in self.list() if m.multilingual]

    def turbo(self) -> List[Model]:
        return [m for m in self.list() if m.turbo]

    def tts_capable(self) -> List[Model]:
        return [m for m in self.list() if m.can_do_text_to_speech]

    def default(self) -> Optional[Model]:
        """The recommended model, else the first TTS-capable one."""
        models = self.list()
        recommended = next((m for m in models if m.model_id == RECOMMENDED_MODEL), None)
        if recommended:
            return recommended
        return next((m for m in models if m.can_do_text_to_speech), None)
