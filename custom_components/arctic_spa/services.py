"""Service handlers for Arctic Spa integration.

This module contains all service call handlers:
- boost: Trigger a momentary boost
- set_pump: Set a pump (or all pumps) to an explicit state
"""

import logging

import voluptuous as vol
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import config_validation as cv

from .arctic_spa_api import ArcticSpaAPI
from .constants import DOMAIN, PumpSelector, PumpState
from .infrastructure import ArcticSpaError

_LOGGER = logging.getLogger(__name__)

SERVICE_BOOST = "boost"
SERVICE_SET_PUMP = "set_pump"

ATTR_CONFIG_ENTRY_ID = "config_entry_id"
ATTR_PUMP = "pump"
ATTR_STATE = "state"

BOOST_SCHEMA = vol.Schema({vol.Optional(ATTR_CONFIG_ENTRY_ID): cv.string})

SET_PUMP_SCHEMA = vol.Schema(
    {
        vol.Optional(ATTR_CONFIG_ENTRY_ID): cv.string,
        vol.Required(ATTR_PUMP): vol.In([p.value for p in PumpSelector]),
        vol.Required(ATTR_STATE): vol.In([s.value for s in PumpState]),
    }
)


def _get_api(hass: HomeAssistant, call: ServiceCall) -> ArcticSpaAPI:
    """Resolve the client for a call; the entry id is optional with a single spa."""
    entries = hass.data.get(DOMAIN, {})
    entry_id = call.data.get(ATTR_CONFIG_ENTRY_ID)
    if entry_id is None:
        if len(entries) != 1:
            raise HomeAssistantError("config_entry_id is required when more than one spa is configured")
        entry_id = next(iter(entries))
    if entry_id not in entries:
        raise HomeAssistantError(f"Unknown Arctic Spa config entry: {entry_id}")
    return entries[entry_id]["api"]


async def async_register_services(hass: HomeAssistant, domain: str = DOMAIN):
    """Register all Arctic Spa services.

    Args:
        hass: Home Assistant instance
        domain: Integration domain (default: arctic_spa)
    """

    async def handle_boost_service(call: ServiceCall):
        """Handle boost service call."""
        api = _get_api(hass, call)
        try:
            await api.async_boost()
            _LOGGER.info("Boost triggered")
        except ArcticSpaError as e:
            _LOGGER.error("Failed to trigger boost: %s", e)
            raise HomeAssistantError(f"Failed to trigger boost: {e}") from e

    async def handle_set_pump_service(call: ServiceCall):
        """Handle set_pump service call."""
        api = _get_api(hass, call)
        pump = call.data[ATTR_PUMP]
        state = call.data[ATTR_STATE]
        try:
            await api.async_set_pump(pump, state)
            _LOGGER.info("Pump %s set to %s", pump, state)
        except ArcticSpaError as e:
            _LOGGER.error("Failed to set pump %s to %s: %s", pump, state, e)
            raise HomeAssistantError(f"Failed to set pump {pump}: {e}") from e

    hass.services.async_register(domain, SERVICE_BOOST, handle_boost_service, schema=BOOST_SCHEMA)
    hass.services.async_register(domain, SERVICE_SET_PUMP, handle_set_pump_service, schema=SET_PUMP_SCHEMA)


def async_unregister_services(hass: HomeAssistant, domain: str = DOMAIN):
    """Remove the services once the last entry is unloaded."""
    hass.services.async_remove(domain, SERVICE_BOOST)
    hass.services.async_remove(domain, SERVICE_SET_PUMP)
