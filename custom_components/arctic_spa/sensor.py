import logging

from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import DOMAIN, Severity
from .coordinator import ArcticSpaStatusCoordinator
from .entities.base import ChemistrySensorDefinition
from .entities.sensor_definitions import CHEMISTRY_SENSORS
from .entity_base import ArcticSpaBaseEntity
from .models import chemistry_severity

_LOGGER = logging.getLogger(__name__)

SEVERITY_ICONS = {
    Severity.GREEN: "mdi:check-circle",
    Severity.YELLOW: "mdi:alert",
    Severity.RED: "mdi:alert-circle",
}


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
):
    data = hass.data[DOMAIN][entry.entry_id]
    coordinators = data["coordinators"]

    sensors = []
    for definition in CHEMISTRY_SENSORS:
        # Each chemistry reading has its own coordinator, absent when disabled
        coordinator = coordinators.get(definition.key)
        if coordinator is None:
            _LOGGER.debug("Sensor %s disabled in options", definition.key)
            continue
        sensors.append(ArcticSpaChemistrySensor(coordinator, data["api"], definition, entry))

    async_add_entities(sensors)


class ArcticSpaChemistrySensor(ArcticSpaBaseEntity, CoordinatorEntity[ArcticSpaStatusCoordinator], SensorEntity):
    """pH or ORP reading with its qualitative status.

    The value prefers the SpaBoy probe reading over the controller's. The
    textual status and its severity are exposed as attributes, and the icon
    follows the severity.
    """

    def __init__(self, coordinator, api, definition: ChemistrySensorDefinition, entry):
        super().__init__(coordinator)
        self._api = api
        self._entry = entry
        self._definition = definition
        self._value: float | None = None
        self._chem_status: str | None = None

        self._attr_unique_id = f"{entry.entry_id}_{definition.key}"
        self._attr_translation_key = definition.translation_key
        self._attr_native_unit_of_measurement = definition.unit
        self._attr_device_class = definition.device_class
        self._attr_state_class = definition.state_class
        self._update_from_status()

    @property
    def native_value(self) -> float | None:
        return self._value

    @property
    def severity(self) -> Severity:
        return chemistry_severity(self._chem_status)

    @property
    def icon(self) -> str:
        return SEVERITY_ICONS[self.severity]

    @property
    def extra_state_attributes(self):
        return {
            "status": self._chem_status,
            "severity": self.severity.value,
        }

    def _update_from_status(self) -> None:
        status = self._status
        if not status:
            return
        value = status.effective_ph if self._definition.key == "ph" else status.effective_orp
        if value is not None:
            self._value = value
        chem_status = status.get_state(self._definition.status_key)
        if chem_status is not None:
            self._chem_status = chem_status

    @callback
    def _handle_coordinator_update(self) -> None:
        self._update_from_status()
        self.async_write_ha_state()
