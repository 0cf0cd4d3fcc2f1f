"""Light platform for the Arctic Spa integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.light import ColorMode, LightEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import DOMAIN, OnOffState
from .coordinator import ArcticSpaStatusCoordinator
from .entity_base import ArcticSpaBaseEntity

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the spa lights if enabled."""
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator = data["coordinators"].get("lights")
    if coordinator is None:
        _LOGGER.debug("Spa lights disabled in options")
        return
    async_add_entities([ArcticSpaLight(coordinator, data["api"], entry)])


class ArcticSpaLight(ArcticSpaBaseEntity, CoordinatorEntity[ArcticSpaStatusCoordinator], LightEntity):
    """On/off spa lights."""

    _attr_color_mode = ColorMode.ONOFF
    _attr_supported_color_modes = {ColorMode.ONOFF}

    def __init__(self, coordinator, api, entry):
        super().__init__(coordinator)
        self._api = api
        self._entry = entry
        self._attr_unique_id = f"{entry.entry_id}_lights"
        self._attr_translation_key = "lights"
        self._attr_is_on = None
        self._update_from_status()

    def _update_from_status(self) -> None:
        # Keep the last known state when the field is missing
        if self._status and self._status.lights:
            self._attr_is_on = self._status.lights == OnOffState.ON

    @callback
    def _handle_coordinator_update(self) -> None:
        self._update_from_status()
        self.async_write_ha_state()

    async def async_turn_on(self, **kwargs: Any) -> None:
        await self._async_set(True)

    async def async_turn_off(self, **kwargs: Any) -> None:
        await self._async_set(False)

    async def _async_set(self, on: bool) -> None:
        _LOGGER.info("Setting spa lights: %s", "on" if on else "off")
        await self._async_write(self._api.async_set_lights(on), "spa lights")
        self._attr_is_on = on
        self.async_write_ha_state()
