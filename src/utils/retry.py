"""
Retry with exponential backoff for provider HTTP calls.
Handles transient failures: rate limits, timeouts, connection errors, 5xx.
"""

import asyncio

import httpx

from src.config.logging_config import setup_logger
from src.config.settings import config

logger = setup_logger(__name__)

# Retry config
DEFAULT_RETRIES = config.HTTP_RETRIES
DEFAULT_INITIAL_DELAY = 1.0
DEFAULT_MAX_DELAY = 30.0
DEFAULT_BACKOFF = 2.0

RETRYABLE_STATUS = frozenset({429, 502, 503, 504})


def _is_retryable(exc: BaseException) -> bool:
    """Check if exception is retryable (rate limit, timeout, connection, gateway)."""
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRYABLE_STATUS
    return False


async def _async_retry_impl(
    fn,
    *args,
    retries: int = DEFAULT_RETRIES,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    backoff: float = DEFAULT_BACKOFF,
    **kwargs,
):
    """Async retry with exponential backoff."""
    last_exc = None
    delay = initial_delay
    for attempt in range(retries + 1):
        try:
            return await fn(*args, **kwargs)
        except Exception as e:
            last_exc = e
            if attempt < retries and _is_retryable(e):
                logger.warning("Retry %s/%s after %s: %s", attempt + 1, retries, type(e).__name__, e)
                await asyncio.sleep(delay)
                delay = min(delay * backoff, max_delay)
            else:
                raise
    raise last_exc


async def retry_async(coro_fn, retries: int = DEFAULT_RETRIES, initial_delay: float = DEFAULT_INITIAL_DELAY):
    """
    Retry an async call. Usage: await retry_async(lambda: client.get(url))
    """
    return await _async_retry_impl(coro_fn, retries=retries, initial_delay=initial_delay)
