"""API infrastructure for Arctic Spa integration.

This module consolidates API-related functionality:
- Status caching with single-flight coalescing (StatusCache class)
- API decorators for unified endpoint patterns (api_get, api_put)
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from ..constants import API_DEFAULTS

_LOGGER = logging.getLogger(__name__)

# Default configuration values (using APIDefaults for consistency)
DEFAULT_MIN_STATUS_INTERVAL = API_DEFAULTS.MIN_STATUS_INTERVAL_MS / 1000
DEFAULT_REQUEST_TIMEOUT = API_DEFAULTS.REQUEST_TIMEOUT_MS / 1000

T = TypeVar("T")


class StatusCache(Generic[T]):
    """Caches the last status snapshot and coalesces concurrent fetches.

    The cache is in one of three states:
    - idle, stale: nothing in flight, no value or value older than min_interval
    - idle, fresh: nothing in flight, value younger than min_interval
    - fetching: one fetch in flight, shared by every caller that arrives

    A successful fetch stores the value and its timestamp together. A failed
    fetch leaves both untouched and the error is raised to every caller that
    was waiting on it. The in-flight task is cleared inside the task itself,
    so it is gone before any waiter resumes.

    Attributes:
        min_interval: Seconds a fetched value is served without refetching
            (0 = every call outside an in-flight fetch goes to the network)
    """

    def __init__(self, min_interval: float = DEFAULT_MIN_STATUS_INTERVAL):
        """Initialize the StatusCache.

        Args:
            min_interval: Freshness window in seconds
        """
        self.min_interval = min_interval

        self._last_value: T | None = None
        self._last_fetch_time: float | None = None
        self._in_flight: asyncio.Task | None = None

    # -------------------------------------------------------------------------
    # Time utilities
    # -------------------------------------------------------------------------

    def _get_current_time(self) -> float:
        """Get current monotonic time for freshness checks."""
        return time.monotonic()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def last_value(self) -> T | None:
        """Last successfully fetched value, or None."""
        return self._last_value

    @property
    def last_fetch_time(self) -> float | None:
        """Monotonic time of the last successful fetch, or None."""
        return self._last_fetch_time

    @property
    def is_fetching(self) -> bool:
        """True while a fetch is in flight."""
        return self._in_flight is not None

    def is_fresh(self) -> bool:
        """Check if the cached value can be served without a fetch."""
        if self._last_fetch_time is None:
            return False
        return (self._get_current_time() - self._last_fetch_time) < self.min_interval

    # -------------------------------------------------------------------------
    # Coalesced read
    # -------------------------------------------------------------------------

    async def async_get(self, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value, join the in-flight fetch or start one.

        Args:
            fetch: Callable returning the coroutine that performs the request.
                Only called when a new fetch has to be started.

        Returns:
            The cached or freshly fetched value.
        """
        if self._in_flight is None and self.is_fresh():
            _LOGGER.debug("Status cache hit (age %.2fs)", self._get_current_time() - self._last_fetch_time)
            return self._last_value

        if self._in_flight is None:
            _LOGGER.debug("Status cache stale, starting fetch")
            self._in_flight = asyncio.ensure_future(self._async_fetch(fetch))
        else:
            _LOGGER.debug("Joining in-flight status fetch")

        # Shielded so that a cancelled caller does not cancel the shared fetch
        return await asyncio.shield(self._in_flight)

    async def _async_fetch(self, fetch: Callable[[], Awaitable[T]]) -> T:
        try:
            value = await fetch()
            self._last_value = value
            self._last_fetch_time = self._get_current_time()
            return value
        finally:
            self._in_flight = None


# ============================================================================
# API Decorators
# ============================================================================
# The following section provides decorators for unified API method patterns.
# The owning class must provide ``_async_request(method, path, payload)``.
#
# Usage:
#     @api_get("/status")
#     async def _async_fetch_status(self, response_data):
#         return SpaStatus.from_api(response_data)
#
#     @api_put("/pumps/{pump}")
#     async def async_set_pump(self, pump: str, state: str) -> dict:
#         return {"state": state}
# ============================================================================


def _bind_url_kwargs(func: Callable, skip: int, args: tuple, kwargs: dict) -> dict[str, Any]:
    """Bind positional arguments to their parameter names for URL formatting."""
    params = list(inspect.signature(func).parameters.keys())
    url_kwargs = dict(kwargs)
    for i, arg in enumerate(args):
        if i + skip < len(params):
            url_kwargs[params[i + skip]] = arg
    return url_kwargs


def api_get(url_template: str):
    """Decorator for GET API endpoints.

    The wrapped method receives the decoded response body (parsed JSON, raw
    text or None for an empty body) as its first argument after ``self``.
    Transport errors propagate unchanged.

    Args:
        url_template: Path template appended to the base URL
            (e.g., "/status"). Placeholders are filled from the call's
            arguments.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            # Skip 'self' and 'response_data' (first two params)
            url_kwargs = _bind_url_kwargs(func, 2, args, kwargs)
            path = url_template.format(**url_kwargs)

            data = await self._async_request("GET", path)
            _LOGGER.debug("API GET %s returned data: %s", path, data)

            return await func(self, data, *args, **kwargs)

        return wrapper

    return decorator


def api_put(url_template: str):
    """Decorator for PUT API endpoints.

    The decorated function validates its arguments and returns the JSON
    payload (or None for a request without body). The wrapper then sends a
    single PUT; there is no retry and no interaction with the status cache.

    Args:
        url_template: Path template appended to the base URL
            (e.g., "/pumps/{pump}").

    Example:
        @api_put("/blowers/{blower}")
        async def async_set_blower(self, blower: str, state: str) -> dict:
            return {"state": state}
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            # Call the decorated function first so invalid input never builds a URL
            payload = await func(self, *args, **kwargs)

            # Skip 'self' (first param)
            url_kwargs = _bind_url_kwargs(func, 1, args, kwargs)
            path = url_template.format(**url_kwargs)

            _LOGGER.debug("API PUT %s payload=%s", path, payload)
            return await self._async_request("PUT", path, payload)

        return wrapper

    return decorator
