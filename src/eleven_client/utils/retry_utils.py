"""Retry and backoff utilities."""

import time
from typing import Optional

from eleven_client.logger import Logger


def backoff_delay(attempt: int, base_delay: float, retry_after: Optional[float] = None) -> float:
    """Compute the delay before the next attempt.

    A server-provided ``retry_after`` always wins. Otherwise the delay grows
    linearly with the attempt number.

    Args:
        attempt: The attempt that just failed, starting at 1
        base_delay: Base delay in seconds
        retry_after: Optional server hint in seconds

    Returns:
        float: Delay in seconds
    """
    if retry_after is not None:
        return retry_after
    return base_delay * attempt


def should_retry(attempt: int, max_retries: int, status: Optional[int], retry_statuses) -> bool:
    """Whether a failed attempt may be retried.

    Args:
        attempt: The attempt that just failed, starting at 1
        max_retries: Retries allowed after the first attempt
        status: HTTP status of the failure
        retry_statuses: Statuses eligible for retry

    Returns:
        bool: True if another attempt should be made
    """
    return attempt <= max_retries and status in retry_statuses


def wait_before_retry(delay: float, attempt: int, max_retries: int, reason, logger=None) -> None:
    """Log the pending retry and sleep for ``delay`` seconds.

    Args:
        delay: Seconds to sleep
        attempt: The attempt that just failed
        max_retries: Retries allowed
        reason: The error that triggered the retry
        logger: Object with a ``warning`` method; console output if None
    """
    message = f"Attempt {attempt}/{max_retries + 1} failed: {reason}. Retrying in {delay:.1f} seconds..."
    if logger is not None:
        logger.warning(message)
    else:
        Logger.print_warning(message)
    time.sleep(delay)
