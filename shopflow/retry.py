"""Retry helper for flaky browser interactions."""

import asyncio
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from playwright.async_api import Error as PlaywrightError
from pydantic import BaseModel, ConfigDict, Field

from shopflow.logging_config import log_retry

T = TypeVar("T")


class BackoffPolicy(BaseModel):
    """Delay schedule between attempts.

    The wait after the n-th failed attempt is ``base_delay * n * multiplier ** (n - 1)``.
    With the default multiplier of 1.0 this is a linear 1s, 2s, 3s... schedule.
    """

    model_config = ConfigDict(frozen=True)

    base_delay: float = Field(default=1.0, gt=0)
    multiplier: float = Field(default=1.0, ge=1.0)

    def delay_for(self, attempt: int) -> float:
        return self.base_delay * attempt * self.multiplier ** (attempt - 1)


DEFAULT_BACKOFF = BackoffPolicy()


async def retry_operation(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    policy: BackoffPolicy = DEFAULT_BACKOFF,
    retry_on: Tuple[Type[BaseException], ...] = (PlaywrightError,),
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> T:
    """Run ``operation`` until it succeeds or ``max_retries`` attempts have failed.

    Args:
        operation: Zero-argument coroutine function to invoke
        max_retries: Total number of attempts, at least 1
        policy: Backoff schedule between attempts
        retry_on: Exception types that trigger another attempt; anything else propagates
        sleep: Coroutine used to wait between attempts (defaults to asyncio.sleep)

    Returns:
        The value returned by the first successful attempt

    Raises:
        The last error raised by ``operation`` once every attempt has failed
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    wait = sleep or asyncio.sleep
    last_error: Optional[BaseException] = None

    for attempt in range(1, max_retries + 1):
        try:
            return await operation()
        except retry_on as e:
            last_error = e
            if attempt < max_retries:
                delay = policy.delay_for(attempt)
                log_retry(attempt, max_retries, e, delay)
                await wait(delay)
            else:
                log_retry(attempt, max_retries, e, None)

    raise last_error
