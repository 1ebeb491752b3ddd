"""Performance profiling utilities.

Collects per-endpoint request latency so slow endpoints and retry storms
are visible. Collection is off by default and enabled process-wide with
:func:`enable_timing_analysis`.
"""

import time
from contextlib import contextmanager
from typing import Dict, List, Optional

from eleven_client.logger import Logger


# Global flag to control timing analysis
_timing_enabled = False


def enable_timing_analysis():
    """Enable timing analysis globally."""
    global _timing_enabled  # pylint: disable=global-statement
    _timing_enabled = True


def disable_timing_analysis():
    """Disable timing analysis globally."""
    global _timing_enabled  # pylint: disable=global-statement
    _timing_enabled = False


def is_timing_enabled() -> bool:
    """Check if timing analysis is enabled."""
    return _timing_enabled


class PerformanceStats:
    """Collect and analyze performance statistics."""

    def __init__(self):
        self.timings: Dict[str, List[float]] = {}

    def record(self, name: str, duration: float):
        """Record a timing measurement.

        Args:
            name: Name of the measured operation
            duration: Duration in milliseconds
        """
        if name not in self.timings:
            self.timings[name] = []
        self.timings[name].append(duration)

    def get_stats(self, name: str) -> Optional[Dict[str, float]]:
        """Get statistics for a named operation.

        Args:
            name: Name of the operation

        Returns:
            Dictionary with count, mean, median, p95, p99, min, max stats
        """
        if name not in self.timings or not self.timings[name]:
            return None

        values = sorted(self.timings[name])
        n = len(values)

        if n % 2 == 0:
            median = (values[n // 2 - 1] + values[n // 2]) / 2
        else:
            median = values[n // 2]

        return {
            "count": n,
            "mean": sum(values) / n,
            "median": median,
            "p95": values[int(n * 0.95)] if n > 1 else values[0],
            "p99": values[int(n * 0.99)] if n > 1 else values[0],
            "min": values[0],
            "max": values[-1],
        }

    def print_summary(self):
        """Print a summary of all collected statistics."""
        Logger.print_perf("=" * 60)
        Logger.print_perf("REQUEST LATENCY SUMMARY (ms)")
        Logger.print_perf("=" * 60)

        for name in sorted(self.timings.keys()):
            stats = self.get_stats(name)
            if stats:
                Logger.print_perf(f"\n{name}:")
                Logger.print_perf(f"  Count:   {stats['count']}")
                Logger.print_perf(f"  Mean:    {stats['mean']:.2f}")
                Logger.print_perf(f"  Median:  {stats['median']:.2f}")
                Logger.print_perf(f"  P95:     {stats['p95']:.2f}")
                Logger.print_perf(f"  P99:     {stats['p99']:.2f}")
                Logger.print_perf(f"  Min:     {stats['min']:.2f}")
                Logger.print_perf(f"  Max:     {stats['max']:.2f}")

        Logger.print_perf("=" * 60)

    def reset(self):
        """Clear all collected statistics."""
        self.timings.clear()


# Global performance stats instance
_global_stats = PerformanceStats()


def get_global_stats() -> PerformanceStats:
    """Get the global performance statistics instance."""
    return _global_stats


class Stopwatch:
    """Wall-clock timer reporting elapsed milliseconds."""

    def __init__(self):
        self.started_at = time.monotonic()

    def elapsed_ms(self) -> float:
        return round((time.monotonic() - self.started_at) * 1000, 2)


def record_request(name: str, duration_ms: float):
    """Record and print one request's latency when timing is enabled."""
    if not _timing_enabled:
        return
    Logger.print_perf(f"⏱️  {name}: {duration_ms:.2f}ms")
    _global_stats.record(name, duration_ms)


@contextmanager
def Timer(name: str):  # pylint: disable=invalid-name
    """Context manager recording the duration of a block.

    Usage:
        with Timer("voice_slots.ensure_available"):
            manager.ensure_available(...)
    """
    if not _timing_enabled:
        yield
        return

    watch = Stopwatch()
    try:
        yield
    finally:
        record_request(name, watch.elapsed_ms())
