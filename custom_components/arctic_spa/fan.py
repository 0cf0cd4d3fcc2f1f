"""Fan platform for the Arctic Spa integration: pumps with discrete speeds."""

import logging
from typing import Any

from homeassistant.components.fan import FanEntity, FanEntityFeature
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import (
    DEFAULT_PUMP_MODES,
    DOMAIN,
    PUMP_SPEED_FULL,
    PUMP_SPEED_LOW,
    SWITCH_ENABLE_DEFAULTS,
    PumpMode,
    enable_option_key,
    pump_mode_option_key,
)
from .coordinator import ArcticSpaStatusCoordinator
from .entities.base import PumpDefinition
from .entities.fan_definitions import PUMPS
from .entity_base import ArcticSpaBaseEntity
from .models import pump_is_active, pump_speed_from_state, pump_state_from_speed, snap_pump_speed

_LOGGER = logging.getLogger(__name__)


def get_pump_mode(options, pump_id: str) -> PumpMode:
    """Configured mode for a pump, falling back to the default."""
    value = options.get(pump_mode_option_key(pump_id))
    try:
        return PumpMode(value) if value is not None else DEFAULT_PUMP_MODES[pump_id]
    except ValueError:
        _LOGGER.warning("Invalid mode %r for %s, using default", value, pump_id)
        return DEFAULT_PUMP_MODES[pump_id]


class ArcticSpaPumpFan(ArcticSpaBaseEntity, CoordinatorEntity[ArcticSpaStatusCoordinator], FanEntity):
    """A spa pump presented as a fan.

    Two-state pumps expose 0/100 %, three-state pumps 0/50/100 %
    (off/low/high). Requested percentages are snapped to those steps.
    """

    def __init__(self, coordinator, api, definition: PumpDefinition, mode: PumpMode, entry):
        super().__init__(coordinator)
        self._api = api
        self._entry = entry
        self._definition = definition
        self._mode = mode
        self._current_speed = 0

        self._attr_unique_id = f"{entry.entry_id}_{definition.key}"
        self._attr_translation_key = definition.translation_key
        self._attr_supported_features = (
            FanEntityFeature.SET_SPEED | FanEntityFeature.TURN_ON | FanEntityFeature.TURN_OFF
        )
        self._attr_speed_count = 2 if mode == PumpMode.THREE_STATE else 1
        self._update_from_status()

    @property
    def mode(self) -> PumpMode:
        return self._mode

    @property
    def is_on(self) -> bool:
        return self._current_speed > 0

    @property
    def percentage(self) -> int | None:
        return self._current_speed

    def _update_from_status(self) -> None:
        if not self._status:
            return
        state = self._status.get_state(self._definition.key)
        self._current_speed = pump_speed_from_state(self._mode, state)
        _LOGGER.debug(
            "%s state=%s active=%s speed=%d",
            self._definition.key,
            state,
            pump_is_active(state),
            self._current_speed,
        )

    @callback
    def _handle_coordinator_update(self) -> None:
        self._update_from_status()
        self.async_write_ha_state()

    async def async_set_percentage(self, percentage: int) -> None:
        speed = snap_pump_speed(self._mode, percentage)
        await self._async_set_speed(speed)

    async def async_turn_on(
        self, percentage: int | None = None, preset_mode: str | None = None, **kwargs: Any
    ) -> None:
        if percentage is not None:
            await self.async_set_percentage(percentage)
            return
        # Turning on a three-state pump starts it on low
        speed = PUMP_SPEED_LOW if self._mode == PumpMode.THREE_STATE else PUMP_SPEED_FULL
        await self._async_set_speed(speed)

    async def async_turn_off(self, **kwargs: Any) -> None:
        await self._async_set_speed(0)

    async def _async_set_speed(self, speed: int) -> None:
        state = pump_state_from_speed(self._mode, speed)
        _LOGGER.info("Setting %s to %s", self._definition.name, state)
        await self._async_write(
            self._api.async_set_pump(self._definition.pump, state.value),
            self._definition.name,
        )
        self._current_speed = speed
        self.async_write_ha_state()


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
):
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator = data["coordinators"]["pumps"]
    options = entry.options

    pumps = [
        ArcticSpaPumpFan(
            coordinator,
            data["api"],
            definition,
            get_pump_mode(options, definition.key),
            entry,
        )
        for definition in PUMPS
        if options.get(enable_option_key(definition.key), SWITCH_ENABLE_DEFAULTS[definition.key])
    ]
    async_add_entities(pumps)
