import asyncio
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers import config_validation as cv

from .arctic_spa_api import ArcticSpaAPI
from .constants import (
    API_DEFAULTS,
    CONF_API_KEY,
    CONF_ENABLE_LIGHTS,
    CONF_ENABLE_ORP,
    CONF_ENABLE_PH,
    CONF_MIN_STATUS_INTERVAL,
    CONF_POLL_INTERVAL,
    CONF_REQUEST_TIMEOUT,
    DOMAIN,
    PLATFORMS,
)
from .coordinator import ArcticSpaStatusCoordinator
from .services import async_register_services, async_unregister_services
from .validators import validate_poll_interval

CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)

_LOGGER = logging.getLogger(__name__)


def get_poll_interval(options) -> int:
    """Configured polling interval, falling back to the default when too small."""
    value = options.get(CONF_POLL_INTERVAL)
    if isinstance(value, (int, float)) and validate_poll_interval(value)[0]:
        return int(value)
    return API_DEFAULTS.POLLING_INTERVAL


def get_coordinator_groups(options) -> list[str]:
    """Entity groups that get their own status coordinator."""
    groups = ["environment", "pumps"]
    if options.get(CONF_ENABLE_LIGHTS, True):
        groups.append("lights")
    if options.get(CONF_ENABLE_PH, True):
        groups.append("ph")
    if options.get(CONF_ENABLE_ORP, True):
        groups.append("orp")
    return groups


async def async_setup(hass: HomeAssistant, config: dict):
    return True  # configured through config entries only


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry):
    _LOGGER.info("Setting up Arctic Spa entry %s", entry.title)
    options = entry.options
    poll_interval = get_poll_interval(options)

    # The status cache window defaults to the poll interval, so coordinators
    # ticking around the same time share one /status request.
    api = ArcticSpaAPI(
        entry.data[CONF_API_KEY],
        min_status_interval_ms=options.get(CONF_MIN_STATUS_INTERVAL, poll_interval * 1000),
        request_timeout_ms=options.get(CONF_REQUEST_TIMEOUT, API_DEFAULTS.REQUEST_TIMEOUT_MS),
    )

    coordinators = {
        group: ArcticSpaStatusCoordinator(hass, api, entry, group, poll_interval)
        for group in get_coordinator_groups(options)
    }
    try:
        await asyncio.gather(
            *(coordinator.async_config_entry_first_refresh() for coordinator in coordinators.values())
        )
    except Exception:
        await api.close()
        raise

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = {
        "api": api,
        "coordinators": coordinators,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))

    if len(hass.data[DOMAIN]) == 1:
        await async_register_services(hass)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry):
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if not unloaded:
        return False

    data = hass.data[DOMAIN].pop(entry.entry_id)
    await data["api"].close()

    if not hass.data[DOMAIN]:
        async_unregister_services(hass)
    return True


async def async_reload_entry(hass, entry):
    await hass.config_entries.async_reload(entry.entry_id)
