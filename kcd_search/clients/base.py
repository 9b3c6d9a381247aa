"""Shared upstream client utilities — failure-to-empty decorator."""

import functools
import logging
from typing import Any, Callable

import httpx

logger = logging.getLogger(__name__)


def upstream_fallback(func: Callable) -> Callable:
    """Decorator that absorbs upstream failures and returns an empty row list.

    Caller cancellation (asyncio.CancelledError) is not an Exception and
    propagates unchanged.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> list[Any]:
        try:
            result: list[Any] = await func(*args, **kwargs)
            return result
        except TimeoutError:
            logger.warning("Upstream call %s timed out", func.__name__)
            return []
        except httpx.HTTPError as e:
            logger.warning(
                "Upstream call %s failed: %s: %s", func.__name__, type(e).__name__, e
            )
            return []
        except Exception as e:
            logger.exception("Upstream call %s failed: %s", func.__name__, e)
            return []

    return wrapper
