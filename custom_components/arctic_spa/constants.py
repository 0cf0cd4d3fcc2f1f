"""Constants and Enums for Arctic Spa integration."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# Integration Domain
DOMAIN = "arctic_spa"

MANUFACTURER = "Arctic Spas"

# Supported Platforms
PLATFORMS = ["climate", "light", "fan", "switch", "sensor"]

# Config entry keys
CONF_API_KEY = "api_key"
CONF_POLL_INTERVAL = "poll_interval"
CONF_MIN_STATUS_INTERVAL = "min_status_interval"
CONF_REQUEST_TIMEOUT = "request_timeout"


class OnOffState(StrEnum):
    """Binary state strings used by the remote API."""

    ON = "on"
    OFF = "off"

    @classmethod
    def from_bool(cls, on: bool) -> OnOffState:
        """Map a boolean to the API's on/off string."""
        return cls.ON if on else cls.OFF


class PumpState(StrEnum):
    """Pump states accepted by /pumps/{pump}."""

    OFF = "off"
    ON = "on"
    LOW = "low"
    HIGH = "high"


class PumpSelector(StrEnum):
    """Pump selectors for /pumps/{pump}."""

    PUMP_1 = "1"
    PUMP_2 = "2"
    PUMP_3 = "3"
    PUMP_4 = "4"
    PUMP_5 = "5"
    ALL = "all"


class BlowerSelector(StrEnum):
    """Blower selectors for /blowers/{blower}."""

    BLOWER_1 = "1"
    BLOWER_2 = "2"
    ALL = "all"


class Toggle(StrEnum):
    """Simple on/off features, each with its own top-level endpoint."""

    EASYMODE = "easymode"
    SDS = "sds"
    YESS = "yess"
    FOGGER = "fogger"


class PumpMode(StrEnum):
    """How a pump is presented as a fan.

    - TWO_STATE: off/on, speed 0 or 100
    - THREE_STATE: off/low/high, speed 0, 50 or 100
    """

    TWO_STATE = "two_state"
    THREE_STATE = "three_state"


class Severity(StrEnum):
    """Qualitative severity of a water chemistry reading."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class APIDefaults(BaseModel):
    """Default values for API configuration.

    Immutable configuration values for the cloud endpoint, timeouts and
    status caching. These values can be overridden when instantiating
    ArcticSpaAPI or through the options flow.
    """

    model_config = {"frozen": True}

    BASE_URL: str = Field(
        default="https://api.myarcticspa.com/v2/spa",
        description="Base URL of the Arctic Spas cloud API",
    )
    API_KEY_HEADER: str = Field(default="X-API-KEY", description="Header carrying the API key")
    REQUEST_TIMEOUT_MS: int = Field(default=5000, description="Absolute timeout per request in milliseconds")
    MIN_STATUS_INTERVAL_MS: int = Field(
        default=0,
        description="Minimum age in milliseconds before /status is fetched again (0 = always live)",
    )
    POLLING_INTERVAL: int = Field(default=60, description="Default polling interval for coordinators in seconds")
    MIN_POLLING_INTERVAL: int = Field(default=15, description="Smallest accepted polling interval in seconds")


# Create a default instance for easy access
API_DEFAULTS = APIDefaults()

# --- Entity enable flags (options flow) ---

CONF_ENABLE_LIGHTS = "enable_lights"
CONF_ENABLE_PH = "enable_ph"
CONF_ENABLE_ORP = "enable_orp"

# Per-switch enable flags and their defaults
SWITCH_ENABLE_DEFAULTS: dict[str, bool] = {
    "pump1": True,
    "pump2": True,
    "pump3": True,
    "pump4": False,
    "pump5": False,
    "blower1": True,
    "blower2": True,
    "easymode": True,
    "sds": True,
    "yess": True,
    "fogger": True,
}

DEFAULT_PUMP_MODES: dict[str, PumpMode] = {
    "pump1": PumpMode.THREE_STATE,
    "pump2": PumpMode.TWO_STATE,
    "pump3": PumpMode.TWO_STATE,
    "pump4": PumpMode.TWO_STATE,
    "pump5": PumpMode.TWO_STATE,
}


def enable_option_key(switch_id: str) -> str:
    """Option key for a switch/pump enable flag, e.g. ``enable_pump1``."""
    return f"enable_{switch_id}"


def pump_mode_option_key(pump_id: str) -> str:
    """Option key for a pump's mode, e.g. ``pump1_mode``."""
    return f"{pump_id}_mode"


# --- Pump speed quantization ---
# A requested percentage is snapped to a discrete speed:
#   three-state: <= OFF_MAX -> 0, <= LOW_MAX -> 50, else 100
#   two-state:   <= OFF_MAX -> 0, else 100
PUMP_SPEED_OFF_MAX = 0
PUMP_SPEED_LOW_MAX = 75

PUMP_SPEED_LOW = 50
PUMP_SPEED_FULL = 100

# --- Thermostat ---
MIN_TEMP_C = 10.0
MAX_TEMP_C = 40.0
