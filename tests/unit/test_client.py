"""Unit tests for the Client facade and the provider adapter."""

import os
import unittest
from unittest.mock import MagicMock, patch

from eleven_client import Client, VoiceSlotManager
from eleven_client.adapter import ElevenLabsAdapter, TextToSpeechAdapter
from eleven_client.resources import TextToSpeech, Voices
from fakes import make_client, make_response


class TestClient(unittest.TestCase):
    """Construction, configuration and resource accessors."""

    def test_explicit_key(self):
        client = Client(api_key="explicit")
        self.assertEqual(client.config.api_key, "explicit")
        self.assertTrue(client.configured)

    @patch.dict(os.environ, {"ELEVENLABS_API_KEY": "from-env"}, clear=True)
    def test_key_defaults_to_environment(self):
        self.assertEqual(Client().config.api_key, "from-env")

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_key_is_not_configured(self):
        client = Client()
        self.assertFalse(client.configured)
        self.assertIn("configured=False", repr(client))

    @patch.dict(os.environ, {}, clear=True)
    @patch("eleven_client.client.load_dotenv")
    def test_from_env_loads_dotenv(self, mock_load_dotenv):
        def fake_load(path):
            os.environ["ELEVENLABS_API_KEY"] = "dotenv-key"
            return True

        mock_load_dotenv.side_effect = fake_load

        client = Client.from_env(".env.test", max_retries=5)

        mock_load_dotenv.assert_called_once_with(".env.test")
        self.assertEqual(client.config.api_key, "dotenv-key")
        self.assertEqual(client.config.max_retries, 5)

    def test_options_reach_configuration(self):
        handler = MagicMock()
        client = Client(api_key="k", base_url="https://example.test/v1/", timeout=30, on_error=handler)
        self.assertEqual(client.config.base_url, "https://example.test/v1")
        self.assertEqual(client.config.timeout, 30)
        self.assertIs(client.config.on_error, handler)

    def test_resources_are_cached(self):
        client = Client(api_key="k")
        self.assertIsInstance(client.voices, Voices)
        self.assertIs(client.voices, client.voices)
        self.assertIsInstance(client.tts, TextToSpeech)
        self.assertIs(client.tts.http_client, client.http_client)
        self.assertIsInstance(client.voice_slots, VoiceSlotManager)
        self.assertIs(client.voice_slots.voices, client.voices)
        self.assertIs(client.voice_slots, client.voice_slots)

    def test_clients_are_independent(self):
        first, second = Client(api_key="one"), Client(api_key="two")
        self.assertIsNot(first.http_client, second.http_client)
        self.assertIsNot(first.voices, second.voices)

    def test_generate_speech(self):
        client = make_client(make_response(content=b"audio data"))
        audio = client.generate_speech("Hello world", voice_id="voice123", model_id="eleven_turbo_v2_5")
        self.assertEqual(audio.size, 10)
        self.assertEqual(audio.model_id, "eleven_turbo_v2_5")

    def test_stream_speech(self):
        chunks = []
        client = make_client(make_response(content=b"abc"))
        client.stream_speech("Hello", voice_id="v", on_chunk=chunks.append)
        self.assertEqual(chunks, [b"abc"])


class TestAdapter(unittest.TestCase):
    """ElevenLabsAdapter normalizes client results."""

    def test_is_a_text_to_speech_adapter(self):
        adapter = Client(api_key="k").adapter
        self.assertIsInstance(adapter, TextToSpeechAdapter)
        self.assertEqual(adapter.provider_name, "elevenlabs")
        self.assertTrue(adapter.supports_streaming())

    def test_list_voices(self):
        client = make_client(make_response(body={"voices": [
            {"voice_id": "v1", "name": "Rachel", "labels": {"gender": "female"}},
        ]}))

        voices = client.adapter.list_voices()

        self.assertEqual(len(voices), 1)
        self.assertEqual(voices[0]["provider"], "elevenlabs")
        self.assertEqual(voices[0]["gender"], "female")
        self.assertEqual(voices[0]["metadata"]["name"], "Rachel")

    def test_quota(self):
        client = make_client(make_response(body={"tier": "free", "character_count": 100,
                                                 "character_limit": 1000}))
        quota = client.adapter.quota()
        self.assertEqual(quota["characters_remaining"], 900)
        self.assertIsNone(quota["resets_at"])

    def test_ensure_voice_available_delegates_to_slot_manager(self):
        adapter = ElevenLabsAdapter(MagicMock())
        adapter.client.voice_slots.ensure_available.return_value = MagicMock(
            voice_id="acct1", to_dict=MagicMock(return_value={}))
        adapter.client.voice_slots.ensure_available.return_value.name = "Spanish"

        result = adapter.ensure_voice_available("owner", "lib1", "Spanish")

        adapter.client.voice_slots.ensure_available.assert_called_once_with(
            public_user_id="owner", voice_id="lib1", name="Spanish")
        self.assertEqual(result["voice_id"], "acct1")
        self.assertEqual(result["name"], "Spanish")


if __name__ == "__main__":
    unittest.main()
