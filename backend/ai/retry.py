"""Retry utilities for AI and catalog API calls with exponential backoff."""
import logging
from typing import Any, Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from application.exceptions import WorkoutGenerationError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 1
DEFAULT_MAX_WAIT_SECONDS = 10


def is_retryable_error(exception: BaseException) -> bool:
    """
    Determine if an exception is retryable.

    Errors from the generation taxonomy decide for themselves through their
    ``retryable`` flag:
    - UpstreamError: only rate limits (429) and server errors (5xx)
    - NetworkError: always
    - NotConfigured, MalformedGeneration, catalog errors: never

    Anything else is a programming error and is never retried.
    """
    if isinstance(exception, WorkoutGenerationError):
        return bool(exception.retryable)
    return False


def _validate_retry_params(
    max_attempts: int,
    min_wait_seconds: float,
    max_wait_seconds: float,
) -> None:
    """
    Validate retry parameters.

    Args:
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries

    Raises:
        ValueError: If any parameter is invalid
    """
    if max_attempts < 1:
        raise ValueError(
            f"max_attempts must be >= 1, got {max_attempts}. "
            "If max_attempts <= 0, the retry loop will never execute."
        )
    if min_wait_seconds <= 0:
        raise ValueError(
            f"min_wait_seconds must be positive, got {min_wait_seconds}"
        )
    if max_wait_seconds <= 0:
        raise ValueError(
            f"max_wait_seconds must be positive, got {max_wait_seconds}"
        )
    if min_wait_seconds > max_wait_seconds:
        raise ValueError(
            f"min_wait_seconds ({min_wait_seconds}) cannot exceed "
            f"max_wait_seconds ({max_wait_seconds})"
        )


async def retry_async_call(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    **kwargs: Any,
) -> T:
    """
    Execute an async function with retry logic.

    Only errors accepted by is_retryable_error are retried; everything else
    propagates on the first attempt. After the last attempt the original
    exception is re-raised unchanged.

    Args:
        func: Async function to execute
        *args: Positional arguments for the function
        max_attempts: Maximum number of attempts (1 disables retries)
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries
        **kwargs: Keyword arguments for the function

    Returns:
        Result of the function call

    Raises:
        ValueError: If parameters are invalid
    """
    _validate_retry_params(max_attempts, min_wait_seconds, max_wait_seconds)

    async for attempt in AsyncRetrying(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=min_wait_seconds,
            min=min_wait_seconds,
            max=max_wait_seconds,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            return await func(*args, **kwargs)

    raise RuntimeError("Unexpected state: no result and no exception")
