import hashlib
import logging

import voluptuous as vol
from homeassistant.config_entries import ConfigEntry, ConfigFlow, OptionsFlow

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
    DEFAULT_PUMP_MODES,
    DOMAIN,
    SWITCH_ENABLE_DEFAULTS,
    PumpMode,
    enable_option_key,
    pump_mode_option_key,
)
from .infrastructure import (
    ArcticSpaAPIError,
    ArcticSpaConnectionError,
    ArcticSpaError,
    ArcticSpaTimeoutError,
)
from .validators import validate_api_key

_LOGGER = logging.getLogger(__name__)


def api_key_unique_id(api_key: str) -> str:
    """Stable unique id for a key without storing the key itself in it."""
    return hashlib.sha256(api_key.encode()).hexdigest()[:16]


async def async_validate_api_key(api_key: str) -> str | None:
    """Try a live /status request with the key.

    Returns:
        None when the key works, otherwise the form error key.
    """
    api = ArcticSpaAPI(api_key)
    try:
        await api.async_get_status()
    except ArcticSpaAPIError as e:
        if e.status in (401, 403):
            return "invalid_auth"
        _LOGGER.warning("Unexpected API error while validating key: %s", e)
        return "unknown"
    except (ArcticSpaTimeoutError, ArcticSpaConnectionError):
        return "cannot_connect"
    except ArcticSpaError:
        _LOGGER.exception("Unexpected error while validating key")
        return "unknown"
    finally:
        await api.close()
    return None


class ArcticSpaConfigFlow(ConfigFlow, domain=DOMAIN):
    VERSION = 1

    async def async_step_user(self, user_input=None):
        errors = {}

        if user_input is not None:
            api_key = user_input[CONF_API_KEY].strip()
            is_valid, error_message = validate_api_key(api_key)
            if not is_valid:
                _LOGGER.debug("Rejected API key: %s", error_message)
                errors[CONF_API_KEY] = "invalid_api_key"
            else:
                await self.async_set_unique_id(api_key_unique_id(api_key))
                self._abort_if_unique_id_configured()

                error = await async_validate_api_key(api_key)
                if error is None:
                    return self.async_create_entry(
                        title="Arctic Spa",
                        data={CONF_API_KEY: api_key},
                    )
                errors["base"] = error

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema({vol.Required(CONF_API_KEY): str}),
            errors=errors,
        )

    @classmethod
    def async_get_options_flow(cls, entry: ConfigEntry):
        return ArcticSpaOptionsFlow(entry)


class ArcticSpaOptionsFlow(OptionsFlow):
    def __init__(self, entry):
        self.entry = entry

    def _schema(self) -> vol.Schema:
        options = self.entry.options
        poll_interval = options.get(CONF_POLL_INTERVAL, API_DEFAULTS.POLLING_INTERVAL)

        fields = {
            vol.Optional(CONF_POLL_INTERVAL, default=poll_interval): vol.All(
                vol.Coerce(int), vol.Range(min=1)
            ),
            vol.Optional(
                CONF_MIN_STATUS_INTERVAL,
                default=options.get(CONF_MIN_STATUS_INTERVAL, poll_interval * 1000),
            ): vol.All(vol.Coerce(int), vol.Range(min=0)),
            vol.Optional(
                CONF_REQUEST_TIMEOUT,
                default=options.get(CONF_REQUEST_TIMEOUT, API_DEFAULTS.REQUEST_TIMEOUT_MS),
            ): vol.All(vol.Coerce(int), vol.Range(min=1)),
            vol.Optional(CONF_ENABLE_LIGHTS, default=options.get(CONF_ENABLE_LIGHTS, True)): bool,
        }
        for switch_id, enabled in SWITCH_ENABLE_DEFAULTS.items():
            key = enable_option_key(switch_id)
            fields[vol.Optional(key, default=options.get(key, enabled))] = bool
        for pump_id, mode in DEFAULT_PUMP_MODES.items():
            key = pump_mode_option_key(pump_id)
            fields[vol.Optional(key, default=options.get(key, mode.value))] = vol.In(
                [m.value for m in PumpMode]
            )
        fields[vol.Optional(CONF_ENABLE_PH, default=options.get(CONF_ENABLE_PH, True))] = bool
        fields[vol.Optional(CONF_ENABLE_ORP, default=options.get(CONF_ENABLE_ORP, True))] = bool
        return vol.Schema(fields)

    async def async_step_init(self, user_input=None):
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        return self.async_show_form(step_id="init", data_schema=self._schema())
