"""Utilities package for eleven_client."""

from .file_utils import get_tempdir, get_timestamped_audio_path, write_binary
from .performance_profiler import (
    PerformanceStats,
    Stopwatch,
    Timer,
    disable_timing_analysis,
    enable_timing_analysis,
    get_global_stats,
    is_timing_enabled,
)
from .retry_utils import backoff_delay, should_retry, wait_before_retry

__all__ = [
    'get_tempdir',
    'get_timestamped_audio_path',
    'write_binary',
    'PerformanceStats',
    'Stopwatch',
    'Timer',
    'disable_timing_analysis',
    'enable_timing_analysis',
    'get_global_stats',
    'is_timing_enabled',
    'backoff_delay',
    'should_retry',
    'wait_before_retry',
]
