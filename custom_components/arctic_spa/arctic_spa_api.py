# arctic_spa_api.py
"""Client for the Arctic Spas cloud API.

One instance is shared by every coordinator of a config entry. Reads of
/status go through a StatusCache so that coordinators polling on their own
timers share a single request; writes are sent straight through.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from .constants import API_DEFAULTS
from .infrastructure import (
    ArcticSpaAPIError,
    ArcticSpaConnectionError,
    ArcticSpaMalformedResponseError,
    ArcticSpaTimeoutError,
    ArcticSpaValidationError,
    StatusCache,
    api_get,
    api_put,
)
from .models import (
    BlowerCommand,
    BoostCommand,
    LightsCommand,
    PumpCommand,
    SpaCommand,
    SpaStatus,
    TemperatureCommand,
    ToggleCommand,
)
from .validators import (
    validate_blower_selector,
    validate_on_flag,
    validate_on_off_state,
    validate_pump_selector,
    validate_pump_state,
    validate_temperature,
    validate_toggle,
)

_LOGGER = logging.getLogger(__name__)


def _raise_if_invalid(result: tuple[bool, str | None]) -> None:
    is_valid, error_message = result
    if not is_valid:
        raise ArcticSpaValidationError(error_message)


class ArcticSpaAPI:
    """Arctic Spas API client with a coalescing status cache.

    Args:
        api_key: Key sent in the X-API-KEY header of every request.
        min_status_interval_ms: Freshness window for /status in milliseconds.
        request_timeout_ms: Absolute timeout per request in milliseconds.
        base_url: API base URL.
        session: Optional aiohttp session. When omitted the client creates
            and owns one.
    """

    def __init__(
        self,
        api_key: str,
        min_status_interval_ms: int = API_DEFAULTS.MIN_STATUS_INTERVAL_MS,
        request_timeout_ms: int = API_DEFAULTS.REQUEST_TIMEOUT_MS,
        base_url: str = API_DEFAULTS.BASE_URL,
        session: aiohttp.ClientSession | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout_ms / 1000
        self._headers = {
            API_DEFAULTS.API_KEY_HEADER: api_key,
            "Content-Type": "application/json",
        }
        self._session = session
        self._owns_session = session is None
        self._status_cache: StatusCache[SpaStatus] = StatusCache(min_status_interval_ms / 1000)

    @property
    def status_cache(self) -> StatusCache[SpaStatus]:
        return self._status_cache

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session.

        Note: Timeouts are set per-request, not on the session level.
        """
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _async_request(self, method: str, path: str, payload: dict | None = None) -> Any:
        """Perform one request against the API.

        Returns:
            None for an empty body, the parsed JSON for a JSON body, or the
            raw text for any other body.

        Raises:
            ArcticSpaTimeoutError: No complete response within the timeout.
            ArcticSpaAPIError: Non-success status.
            ArcticSpaConnectionError: Any other transport failure.
        """
        url = self.base_url + path
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)
        session = await self._get_session()

        try:
            async with session.request(
                method, url, json=payload, headers=self._headers, timeout=timeout
            ) as response:
                status = response.status
                if not 200 <= status < 300:
                    body = await self._read_error_body(response)
                    error = ArcticSpaAPIError(status, response.reason, body)
                else:
                    return await self._read_body(response)
        except TimeoutError as err:
            raise ArcticSpaTimeoutError(
                f"{method} {path} timed out after {self.request_timeout:g}s"
            ) from err
        except aiohttp.ClientError as err:
            raise ArcticSpaConnectionError(f"{method} {path} failed: {err}") from err

        _LOGGER.debug("API %s %s failed: %s", method, path, error)
        raise error

    @staticmethod
    async def _read_error_body(response: aiohttp.ClientResponse) -> str | None:
        """Read the body of an error response, best-effort."""
        try:
            return await response.text()
        except (aiohttp.ClientError, UnicodeDecodeError, TimeoutError) as err:
            _LOGGER.debug("Could not read error body: %s", err)
            return None

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        if response.status == 204:
            return None

        text = await response.text()
        if not text or not text.strip():
            return None

        if "json" not in (response.content_type or ""):
            return text

        try:
            return json.loads(text)
        except ValueError:
            _LOGGER.debug("Response declared JSON but did not parse, returning text")
            return text

    # -------------------------------------------------------------------------
    # Status (cached, coalesced)
    # -------------------------------------------------------------------------

    async def async_get_status(self) -> SpaStatus:
        """Return the current spa status.

        Served from cache while fresh, otherwise fetched once no matter how
        many callers ask concurrently. Errors of the shared fetch are raised
        to every caller waiting on it.
        """
        return await self._status_cache.async_get(self._async_fetch_status)

    @api_get("/status")
    async def _async_fetch_status(self, response_data) -> SpaStatus:
        if response_data is not None and not isinstance(response_data, dict):
            raise ArcticSpaMalformedResponseError(
                f"Expected a JSON object from /status, got {type(response_data).__name__}"
            )
        return SpaStatus.from_api(response_data)

    # -------------------------------------------------------------------------
    # Writes (uncached, sent straight through)
    # -------------------------------------------------------------------------

    @api_put("/temperature")
    async def async_set_temperature(self, setpoint_f: float) -> dict:
        """Set the target temperature in °F (no range clamping)."""
        _raise_if_invalid(validate_temperature(setpoint_f))
        return TemperatureCommand(setpoint_f=setpoint_f).to_api_payload()

    @api_put("/lights")
    async def async_set_lights(self, on: bool) -> dict:
        _raise_if_invalid(validate_on_flag(on))
        return LightsCommand(on=on).to_api_payload()

    @api_put("/pumps/{pump}")
    async def async_set_pump(self, pump: str, state: str) -> dict:
        """Set pump ``1``-``5`` or ``all`` to ``off``, ``on``, ``low`` or ``high``."""
        _raise_if_invalid(validate_pump_selector(pump))
        _raise_if_invalid(validate_pump_state(state))
        return PumpCommand(pump=str(pump), state=state).to_api_payload()

    @api_put("/blowers/{blower}")
    async def async_set_blower(self, blower: str, state: str) -> dict:
        """Set blower ``1``, ``2`` or ``all`` to ``on`` or ``off``."""
        _raise_if_invalid(validate_blower_selector(blower))
        _raise_if_invalid(validate_on_off_state(state))
        return BlowerCommand(blower=str(blower), state=state).to_api_payload()

    @api_put("/{toggle}")
    async def async_set_toggle(self, toggle: str, on: bool) -> dict:
        """Switch easymode, sds, yess or fogger."""
        _raise_if_invalid(validate_toggle(toggle))
        _raise_if_invalid(validate_on_flag(on))
        return ToggleCommand(toggle=toggle, on=on).to_api_payload()

    @api_put("/boost")
    async def async_boost(self) -> None:
        """Trigger boost. The request carries no body."""
        return BoostCommand().to_api_payload()

    async def async_send_command(self, command: SpaCommand) -> Any:
        """Send a write command, dispatching on its kind."""
        match command:
            case TemperatureCommand(setpoint_f=setpoint_f):
                return await self.async_set_temperature(setpoint_f)
            case LightsCommand(on=on):
                return await self.async_set_lights(on)
            case PumpCommand(pump=pump, state=state):
                return await self.async_set_pump(pump.value, state.value)
            case BlowerCommand(blower=blower, state=state):
                return await self.async_set_blower(blower.value, state.value)
            case ToggleCommand(toggle=toggle, on=on):
                return await self.async_set_toggle(toggle.value, on)
            case BoostCommand():
                return await self.async_boost()
            case _:
                raise ArcticSpaValidationError(f"Unsupported command: {type(command).__name__}")
