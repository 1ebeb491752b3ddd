"""Thread-safe console logging with colored terminal output.

This module provides the logging used throughout the client. Output is
color-coded per severity using the blessed library, and every write is
serialized through a single lock so concurrent request chains do not
interleave their lines.

Example:
    ```python
    from eleven_client.logger import Logger

    Logger.enable_debug()
    Logger.print_debug("POST /text-to-speech/abc123")
    Logger.print_warning("Attempt 1/3 failed, retrying in 2.0 seconds")
    ```

Color Scheme:
    - Error: Red
    - Warning: Yellow
    - Info: Salmon
    - Debug: Snow Gray
    - Perf: Cyan
"""

import threading
from datetime import datetime

import blessed

term = blessed.Terminal()


class Logger:
    """Thread-safe logging system with colored output.

    Attributes:
        _lock (threading.Lock): Lock serializing all writes.
        _timestamps_enabled (bool): Whether to prepend timestamps to log messages.
        _debug_enabled (bool): Whether debug messages are printed.
    """

    _lock = threading.Lock()
    _timestamps_enabled = False
    _debug_enabled = False

    @staticmethod
    def enable_timestamps():
        """Enable timestamp prefixes for all log messages."""
        Logger._timestamps_enabled = True

    @staticmethod
    def disable_timestamps():
        """Disable timestamp prefixes for all log messages."""
        Logger._timestamps_enabled = False

    @staticmethod
    def enable_debug():
        """Enable debug logging."""
        Logger._debug_enabled = True

    @staticmethod
    def disable_debug():
        """Disable debug logging."""
        Logger._debug_enabled = False

    @staticmethod
    def is_debug_enabled():
        return Logger._debug_enabled

    @staticmethod
    def _get_timestamp():
        """Get formatted timestamp if timestamps are enabled."""
        if Logger._timestamps_enabled:
            return f"[{datetime.now().strftime('%H:%M:%S.%f')[:-3]}] "
        return ""

    @staticmethod
    def _emit(color, *args, **kwargs):
        with Logger._lock:
            print(f"{color}{Logger._get_timestamp()}", end="")
            print(*args, **kwargs)
            print(f"{term.normal}", end="", flush=True)

    @staticmethod
    def print_error(*args, **kwargs):
        """Print error messages in red.

        Args:
            *args: Variable length argument list to be printed.
            **kwargs: Arbitrary keyword arguments passed to print function.
        """
        Logger._emit(term.red, *args, **kwargs)

    @staticmethod
    def print_warning(*args, **kwargs):
        """Print warning messages in yellow.

        Used for retries, swallowed callback failures and other conditions
        that do not stop the request.
        """
        Logger._emit(term.yellow, *args, **kwargs)

    @staticmethod
    def print_info(*args, **kwargs):
        """Print informational messages in salmon."""
        Logger._emit(term.salmon1, *args, **kwargs)

    @staticmethod
    def print_debug(*args, **kwargs):
        """Print debug messages in snow gray.

        Only prints if debug logging is enabled.
        """
        if not Logger._debug_enabled:
            return
        Logger._emit(term.snow4, *args, **kwargs)

    @staticmethod
    def print_perf(*args, **kwargs):
        """Print performance timing messages in cyan."""
        Logger._emit(term.cyan, *args, **kwargs)


class ConsoleLogger:
    """Structured-logger facade over :class:`Logger`.

    Offers the ``debug``/``info``/``warning``/``error`` surface of a
    ``logging.Logger`` so a :class:`~eleven_client.config.Configuration`
    can hold either one interchangeably.
    """

    def debug(self, message, *args):
        Logger.print_debug(message % args if args else message)

    def info(self, message, *args):
        Logger.print_info(message % args if args else message)

    def warning(self, message, *args):
        Logger.print_warning(message % args if args else message)

    def error(self, message, *args):
        Logger.print_error(message % args if args else message)
