"""Unit tests for Configuration and the event dispatch helpers."""

import unittest
from unittest.mock import MagicMock

import pytest

from eleven_client.config import Configuration
from eleven_client.errors import ConfigurationError
from eleven_client.events import CALLBACK_NAMES, EventType, dispatch


class TestConfiguration:
    def test_defaults(self):
        config = Configuration(api_key="k")
        assert config.base_url == "https://api.elevenlabs.io/v1"
        assert config.timeout == 120
        assert config.connect_timeout == 10
        assert config.max_retries == 3
        assert config.retry_delay == 1.0
        assert config.retry_statuses == frozenset({429, 500, 502, 503, 504})

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_missing_key_fails_validation(self, api_key):
        config = Configuration(api_key=api_key)
        assert not config.configured
        with pytest.raises(ConfigurationError, match="API key is required"):
            config.validate()

    def test_valid_key_passes(self):
        assert Configuration(api_key="k").validate() is True

    @pytest.mark.parametrize("options", [
        {"max_retries": -1},
        {"max_retries": 1.5},
        {"max_retries": True},
        {"retry_delay": -0.1},
    ])
    def test_out_of_range_retry_settings(self, options):
        with pytest.raises(ConfigurationError):
            Configuration(api_key="k", **options).validate()

    def test_is_immutable(self):
        config = Configuration(api_key="k")
        with pytest.raises(AttributeError):
            config.max_retries = 10

    def test_retry_statuses_accept_any_iterable(self):
        assert Configuration(retry_statuses=[503, 503, 429]).retry_statuses == frozenset({429, 503})

    def test_repr_and_dict_hide_key(self):
        config = Configuration(api_key="super-secret")
        assert "super-secret" not in repr(config)
        assert config.to_dict()["api_key"] == "[REDACTED]"
        assert config.to_dict()["retry_statuses"] == [429, 500, 502, 503, 504]

    def test_log_prefers_injected_logger(self):
        logger = MagicMock()
        assert Configuration(logger=logger).log is logger
        assert Configuration().log is not None

    def test_trigger_calls_matching_handler(self):
        on_retry = MagicMock()
        config = Configuration(on_retry=on_retry)
        config.trigger(EventType.RETRY, attempt=1, delay=2.0)
        on_retry.assert_called_once_with(attempt=1, delay=2.0)

    def test_trigger_without_handler_is_a_no_op(self):
        assert Configuration().trigger(EventType.ERROR, error=Exception("x")) is None


class TestDispatch(unittest.TestCase):
    """Handlers are isolated from the caller."""

    def test_handler_names_match_configuration_fields(self):
        for name in CALLBACK_NAMES:
            self.assertTrue(hasattr(Configuration(), name), name)
        self.assertEqual(EventType.AUDIO_GENERATED.handler_name, "on_audio_generated")

    def test_returns_handler_result(self):
        handler = MagicMock(return_value="seen")
        self.assertEqual(dispatch(EventType.REQUEST, handler, MagicMock(), method="GET"), "seen")

    def test_raising_handler_is_logged_and_swallowed(self):
        logger = MagicMock()
        handler = MagicMock(side_effect=ValueError("handler broke"))

        result = dispatch(EventType.VOICE_DELETED, handler, logger, voice_id="v1")

        self.assertIsNone(result)
        handler.assert_called_once_with(voice_id="v1")
        logger.warning.assert_called_once_with(
            "[eleven_client] Callback error in on_voice_deleted: handler broke"
        )

    def test_non_callable_handler_is_ignored(self):
        logger = MagicMock()
        self.assertIsNone(dispatch(EventType.ERROR, None, logger))
        logger.warning.assert_not_called()
