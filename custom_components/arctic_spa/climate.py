"""Climate platform for Arctic Spa integration."""

import logging
from typing import Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import DOMAIN, MAX_TEMP_C, MIN_TEMP_C
from .coordinator import ArcticSpaStatusCoordinator
from .entity_base import ArcticSpaBaseEntity
from .models import celsius_to_fahrenheit, fahrenheit_to_celsius

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the spa thermostat."""
    data = hass.data[DOMAIN][config_entry.entry_id]
    coordinator = data["coordinators"]["environment"]
    async_add_entities([ArcticSpaClimate(coordinator, data["api"], config_entry)])


class ArcticSpaClimate(ArcticSpaBaseEntity, CoordinatorEntity[ArcticSpaStatusCoordinator], ClimateEntity):
    """Spa water thermostat.

    The API works in whole °F; the entity works in °C and converts on the
    way in and out. Heating is the only mode; the action is HEATING while the
    water is below the setpoint.
    """

    def __init__(self, coordinator, api, entry):
        """Initialize the climate entity."""
        super().__init__(coordinator)
        self._api = api
        self._entry = entry

        self._attr_unique_id = f"{entry.entry_id}_climate"
        self._attr_name = None  # Use device name
        self._attr_translation_key = "spa_temperature"

        # Temperature settings
        self._attr_temperature_unit = UnitOfTemperature.CELSIUS
        self._attr_min_temp = MIN_TEMP_C
        self._attr_max_temp = MAX_TEMP_C
        self._attr_target_temperature_step = 0.5

        self._attr_supported_features = ClimateEntityFeature.TARGET_TEMPERATURE
        self._attr_hvac_modes = [HVACMode.HEAT]
        self._attr_hvac_mode = HVACMode.HEAT

    @property
    def current_temperature(self) -> float | None:
        """Return current water temperature in °C."""
        if not self._status:
            return None
        return fahrenheit_to_celsius(self._status.temperature_f)

    @property
    def target_temperature(self) -> float | None:
        """Return target temperature in °C."""
        if not self._status:
            return None
        return fahrenheit_to_celsius(self._status.setpoint_f)

    @property
    def hvac_action(self) -> HVACAction:
        current = self.current_temperature
        target = self.target_temperature
        if current is not None and target is not None and current < target:
            return HVACAction.HEATING
        return HVACAction.IDLE

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set a new target temperature (°C, sent as whole °F)."""
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return

        setpoint_f = celsius_to_fahrenheit(temperature)
        _LOGGER.info("Setting spa temperature to %.1f°C (%d°F)", temperature, setpoint_f)
        await self._async_write(self._api.async_set_temperature(setpoint_f), "spa temperature")

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Heat is the only mode the spa supports."""
        if hvac_mode != HVACMode.HEAT:
            _LOGGER.warning("Unsupported HVAC mode for spa: %s", hvac_mode)
