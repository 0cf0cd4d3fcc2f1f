"""Base entity mixin for all Arctic Spa entities.

Provides shared functionality for the climate, light, fan, switch and
sensor entity modules.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.device_registry import DeviceInfo

from .constants import DOMAIN, MANUFACTURER
from .infrastructure import ArcticSpaError

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry

    from .arctic_spa_api import ArcticSpaAPI
    from .models import SpaStatus

_LOGGER = logging.getLogger(__name__)


class ArcticSpaBaseEntity:
    """Mixin providing common functionality for all Arctic Spa entities.

    Subclasses must set ``_entry`` and ``_api`` in their constructor.
    Typical usage::

        class MyEntity(ArcticSpaBaseEntity, CoordinatorEntity, SwitchEntity):
            ...
    """

    _attr_has_entity_name = True

    _entry: ConfigEntry
    _api: ArcticSpaAPI

    # ------------------------------------------------------------------
    # Device info (shared across all entity types)
    # ------------------------------------------------------------------

    @property
    def device_info(self) -> DeviceInfo:
        """All entities of a config entry belong to one spa device."""
        return DeviceInfo(
            identifiers={(DOMAIN, self._entry.entry_id)},
            name="Arctic Spa",
            manufacturer=MANUFACTURER,
            model="Arctic Spa (API)",
        )

    # ------------------------------------------------------------------
    # Status access
    # ------------------------------------------------------------------

    @property
    def _status(self) -> SpaStatus | None:
        """Last status delivered by this entity's coordinator."""
        return self.coordinator.data

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def _async_write(self, request: Awaitable, description: str) -> None:
        """Await a write request, turning API failures into HomeAssistantError.

        The displayed state is not corrected on failure; the next poll
        brings it back in line with the spa.
        """
        try:
            await request
        except ArcticSpaError as err:
            _LOGGER.exception("Failed to set %s", description)
            raise HomeAssistantError(f"Failed to set {description}: {err}") from err
