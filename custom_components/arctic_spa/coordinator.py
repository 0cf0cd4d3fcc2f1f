import logging
from datetime import timedelta

from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .constants import API_DEFAULTS
from .infrastructure import ArcticSpaError
from .models import SpaStatus

_LOGGER = logging.getLogger(__name__)


class ArcticSpaStatusCoordinator(DataUpdateCoordinator[SpaStatus]):
    """Polls the spa status for one group of entities.

    Every entity group (environment, lights, pumps, pH, ORP) gets its own
    coordinator and timer. They all read through the same ArcticSpaAPI, whose
    status cache makes concurrent polls share one request.
    """

    def __init__(self, hass, api, config_entry, group: str, poll_interval: int = API_DEFAULTS.POLLING_INTERVAL):
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"Arctic Spa {group.capitalize()}",
            update_interval=timedelta(seconds=poll_interval),
        )
        self.api = api
        self.group = group

    async def _async_update_data(self) -> SpaStatus:
        try:
            return await self.api.async_get_status()
        except ArcticSpaError as e:
            _LOGGER.warning("Failed to poll %s status: %s", self.group, e)
            raise UpdateFailed(f"Failed to poll {self.group} status: {e}") from e
