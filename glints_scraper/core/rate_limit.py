import asyncio
import random
import logging
import functools
from typing import Callable, Any, Optional, Tuple, Type, TypeVar, Coroutine
from glints_scraper.config.settings import settings
from glints_scraper.core.errors import BrowserConnectionError, NavigationTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_ERRORS: Tuple[Type[BaseException], ...] = (
    BrowserConnectionError,
    NavigationTimeoutError,
)


class RateLimiter:
    """
    Manages concurrency using asyncio.Semaphore.
    """

    def __init__(self, max_concurrent: int):
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def acquire(self):
        await self._semaphore.acquire()

    def release(self):
        self._semaphore.release()

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.release()


# Caps how many browser sessions are open at once across concurrent scrapes
session_limiter = RateLimiter(settings.MAX_CONCURRENT_SESSIONS)


def with_retry(
    max_retries: Optional[int] = None,
    base_delay: Optional[float] = None,
    max_delay: Optional[float] = None,
    retry_on: Tuple[Type[BaseException], ...] = RETRYABLE_ERRORS,
):
    """
    Decorator for async functions to retry on failure with exponential backoff and jitter.

    Limits default to the current settings at call time, so ``MAX_RETRIES=0``
    (the default) runs the wrapped function exactly once.
    """

    def decorator(
        func: Callable[..., Coroutine[Any, Any, T]],
    ) -> Callable[..., Coroutine[Any, Any, T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            retries_allowed = (
                settings.MAX_RETRIES if max_retries is None else max_retries
            )
            base = settings.RETRY_BASE_DELAY if base_delay is None else base_delay
            ceiling = settings.RETRY_MAX_DELAY if max_delay is None else max_delay

            retries = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except retry_on as e:
                    if retries >= retries_allowed:
                        if retries_allowed:
                            logger.error(
                                f"Max retries reached for {func.__name__}. Error: {e}"
                            )
                        raise

                    delay = min(base * (2**retries), ceiling)
                    jitter = random.uniform(0, 0.5 * delay)
                    sleep_time = delay + jitter

                    logger.warning(
                        f"Attempt {retries + 1}/{retries_allowed} failed for {func.__name__}. "
                        f"Retrying in {sleep_time:.2f}s. Error: {e}"
                    )

                    await asyncio.sleep(sleep_time)
                    retries += 1

        return wrapper

    return decorator
