"""Retry decorator for GitHub API rate limits.

Only rate limit responses are retried. Any other failure propagates to the
caller unchanged, so a retried call never has side effects on the dedup
window or the issue mapping: those are only touched once a call returns.
"""

import asyncio
import functools
import time
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _wait_time_from_headers(headers: Any, default: float) -> float:
    """Work out how long GitHub asked us to wait, falling back to ``default``."""
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
            return default

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
            return default
        now = int(time.time())
        if reset_timestamp > now:
            return float(reset_timestamp - now + 1)
    return default


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator retrying an async GitHub call when it hits a rate limit.

    Handles githubkit's primary and secondary rate limit exceptions (which
    carry ``retry_after``) as well as plain 403/429 responses, for which the
    ``retry-after`` and ``x-ratelimit-reset`` headers are honoured. Waits
    grow exponentially from ``initial_delay`` and are capped at ``max_delay``.

    Example:
        @retry_on_rate_limit()
        async def list_all_issues(self) -> list[SourceIssue]:
            ...
    """

    def decorator(func: F) -> F:
        if not asyncio.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as e:
                    if attempt == max_retries:
                        logger.error("Max retries reached for GitHub rate limit error", function=func.__name__, attempt=attempt + 1)
                        raise
                    retry_after = getattr(e, "retry_after", None)
                    wait_time = retry_after.total_seconds() if retry_after else delay
                except RequestFailed as e:
                    status_code = e.response.status_code
                    if status_code not in (403, 429):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=status_code,
                        )
                        raise
                    wait_time = _wait_time_from_headers(e.response.headers, delay)

                wait_time = min(wait_time, max_delay)
                logger.warning(
                    f"GitHub rate limit hit, retrying in {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
