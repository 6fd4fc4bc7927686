"""Retry policy for Vietmap API calls, built on tenacity."""

from __future__ import annotations

import logging

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from vietmap.constants import (
    RETRY_BACKOFF_FACTOR,
    RETRY_INITIAL_DELAY,
    RETRY_MAX_RETRIES,
)
from vietmap.exceptions import NetworkError, ServerError

logger = logging.getLogger(__name__)

# Failures worth another attempt. Client-side errors (bad parameters, a
# rejected key, rate limiting, unparseable bodies) are raised immediately.
TRANSIENT_ERRORS: tuple[type[Exception], ...] = (NetworkError, ServerError)


def retry_async(
    max_retries: int = RETRY_MAX_RETRIES,
    retry_delay: float = RETRY_INITIAL_DELAY,
    backoff_factor: float = RETRY_BACKOFF_FACTOR,
    retry_exceptions: tuple[type[Exception], ...] = TRANSIENT_ERRORS,
):
    """Build a tenacity decorator for async API calls.

    Args:
        max_retries: Attempts after the first one.
        retry_delay: Multiplier for the exponential wait, in seconds.
        backoff_factor: Base of the exponential wait.
        retry_exceptions: Exception types that trigger another attempt.

    The last exception is re-raised once attempts run out.
    """
    return retry(
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_exponential(multiplier=retry_delay, exp_base=backoff_factor),
        retry=retry_if_exception_type(retry_exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
