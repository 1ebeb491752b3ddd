"""Unit tests for the retry, profiling and logging utilities."""

import unittest
from unittest.mock import MagicMock, patch

from eleven_client.logger import ConsoleLogger, Logger
from eleven_client.utils import (
    PerformanceStats,
    Timer,
    backoff_delay,
    disable_timing_analysis,
    enable_timing_analysis,
    get_global_stats,
    is_timing_enabled,
    should_retry,
    wait_before_retry,
)


class TestRetryUtils(unittest.TestCase):
    """Backoff and retry decisions."""

    def test_linear_backoff(self):
        self.assertEqual([backoff_delay(k, 1.5) for k in (1, 2, 3)], [1.5, 3.0, 4.5])

    def test_retry_after_wins(self):
        self.assertEqual(backoff_delay(3, 1.0, retry_after=7), 7)
        self.assertEqual(backoff_delay(1, 1.0, retry_after=0), 0)

    def test_should_retry(self):
        statuses = frozenset({429, 503})
        self.assertTrue(should_retry(1, 2, 503, statuses))
        self.assertTrue(should_retry(2, 2, 429, statuses))
        self.assertFalse(should_retry(3, 2, 503, statuses))
        self.assertFalse(should_retry(1, 2, 500, statuses))
        self.assertFalse(should_retry(1, 0, 503, statuses))

    @patch("eleven_client.utils.retry_utils.time.sleep")
    def test_wait_logs_then_sleeps(self, mock_sleep):
        logger = MagicMock()
        wait_before_retry(2.0, 1, 3, "ServerError", logger=logger)
        logger.warning.assert_called_once_with(
            "Attempt 1/4 failed: ServerError. Retrying in 2.0 seconds..."
        )
        mock_sleep.assert_called_once_with(2.0)


class TestPerformanceProfiler(unittest.TestCase):
    """Latency collection."""

    def tearDown(self):
        disable_timing_analysis()
        get_global_stats().reset()

    def test_stats(self):
        stats = PerformanceStats()
        for value in (10.0, 20.0, 30.0):
            stats.record("GET /voices", value)
        result = stats.get_stats("GET /voices")
        self.assertEqual(result["count"], 3)
        self.assertEqual(result["median"], 20.0)
        self.assertEqual(result["min"], 10.0)
        self.assertIsNone(stats.get_stats("missing"))

    @patch("eleven_client.utils.performance_profiler.Logger")
    def test_timer_records_only_when_enabled(self, _mock_logger):
        with Timer("disabled"):
            pass
        self.assertIsNone(get_global_stats().get_stats("disabled"))

        enable_timing_analysis()
        self.assertTrue(is_timing_enabled())
        with Timer("enabled"):
            pass
        self.assertEqual(get_global_stats().get_stats("enabled")["count"], 1)


class TestConsoleLogger(unittest.TestCase):
    """ConsoleLogger forwards to the colored Logger."""

    @patch.object(Logger, "print_warning")
    def test_warning_formats_args(self, mock_print):
        ConsoleLogger().warning("retry %d of %d", 1, 3)
        mock_print.assert_called_once_with("retry 1 of 3")

    @patch("builtins.print")
    def test_debug_is_silent_unless_enabled(self, mock_print):
        Logger.disable_debug()
        ConsoleLogger().debug("hidden")
        mock_print.assert_not_called()

        Logger.enable_debug()
        try:
            ConsoleLogger().debug("shown")
        finally:
            Logger.disable_debug()
        self.assertTrue(any("shown" in call.args for call in mock_print.call_args_list))
