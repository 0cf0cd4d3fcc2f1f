import logging

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import DOMAIN, SWITCH_ENABLE_DEFAULTS, OnOffState, enable_option_key
from .coordinator import ArcticSpaStatusCoordinator
from .entities.base import SwitchDefinition
from .entities.switch_definitions import SWITCHES
from .entity_base import ArcticSpaBaseEntity

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
):
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator = data["coordinators"]["pumps"]
    options = entry.options

    switches = [
        ArcticSpaSwitch(coordinator, data["api"], definition, entry)
        for definition in SWITCHES
        if options.get(enable_option_key(definition.key), SWITCH_ENABLE_DEFAULTS[definition.key])
    ]
    async_add_entities(switches)


class ArcticSpaSwitch(ArcticSpaBaseEntity, CoordinatorEntity[ArcticSpaStatusCoordinator], SwitchEntity):
    """Blower or simple feature toggle (easymode, sds, yess, fogger)."""

    def __init__(self, coordinator, api, definition: SwitchDefinition, entry):
        super().__init__(coordinator)
        self._api = api
        self._entry = entry
        self._definition = definition
        self._state: bool | None = None
        self._attr_unique_id = f"{entry.entry_id}_switch_{definition.key}"
        self._attr_translation_key = definition.translation_key
        self._update_from_status()

    @property
    def is_on(self) -> bool | None:
        return self._state

    def _update_from_status(self) -> None:
        if not self._status:
            return
        value = self._status.get_state(self._definition.key)
        if value is not None:
            self._state = value == OnOffState.ON

    @callback
    def _handle_coordinator_update(self) -> None:
        self._update_from_status()
        self.async_write_ha_state()

    async def async_turn_on(self, **kwargs) -> None:
        await self._async_set(True)

    async def async_turn_off(self, **kwargs) -> None:
        await self._async_set(False)

    async def _async_set(self, on: bool) -> None:
        _LOGGER.info("Setting %s: %s", self._definition.name, "on" if on else "off")
        if self._definition.kind == "blower":
            request = self._api.async_set_blower(
                self._definition.selector, OnOffState.from_bool(on).value
            )
        else:
            request = self._api.async_set_toggle(self._definition.selector, on)

        await self._async_write(request, self._definition.name)
        self._state = on
        self.async_write_ha_state()
