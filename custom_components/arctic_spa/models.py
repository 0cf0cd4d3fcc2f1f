"""Data models for Arctic Spa integration.

This module provides Pydantic models for the /status snapshot and for the
write commands accepted by the API. Also includes utility functions for
temperature conversion, chemistry severity and pump speed quantization.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, Field

from .constants import (
    PUMP_SPEED_FULL,
    PUMP_SPEED_LOW,
    PUMP_SPEED_LOW_MAX,
    PUMP_SPEED_OFF_MAX,
    BlowerSelector,
    OnOffState,
    PumpMode,
    PumpSelector,
    PumpState,
    Severity,
    Toggle,
)


# Base model for all Arctic Spa data models
class ArcticSpaModel(BaseModel):
    """Base model for all Arctic Spa data structures."""

    model_config = {"validate_assignment": True, "populate_by_name": True}


# Utility functions for temperature conversion
def fahrenheit_to_celsius(value: float | None) -> float | None:
    """Convert °F to °C, passing None through.

    Example:
        >>> fahrenheit_to_celsius(104)
        40.0
    """
    if value is None:
        return None
    return (value - 32) * 5 / 9


def celsius_to_fahrenheit(value: float) -> int:
    """Convert °C to whole °F as expected by /temperature.

    Example:
        >>> celsius_to_fahrenheit(38.5)
        101
    """
    return round(value * 9 / 5 + 32)


def chemistry_severity(status: str | None) -> Severity:
    """Map a qualitative chemistry status to a severity.

    The API reports pH and chlorine levels as ``Low``, ``Low-OK``, ``OK``,
    ``OK-High`` or ``High`` prefixed with the reading name (``pH OK``,
    ``CL Low-OK``).

    Example:
        >>> chemistry_severity("pH OK")
        <Severity.GREEN: 'green'>
        >>> chemistry_severity("CL OK-High")
        <Severity.YELLOW: 'yellow'>
        >>> chemistry_severity(None)
        <Severity.RED: 'red'>
    """
    if not status:
        return Severity.RED

    normalized = status.strip().lower()
    if "low-ok" in normalized or "ok-high" in normalized:
        return Severity.YELLOW
    if normalized.endswith("ok"):
        return Severity.GREEN
    return Severity.RED


# Utility functions for pump speed handling
def snap_pump_speed(mode: PumpMode, percentage: float) -> int:
    """Snap a requested fan percentage to a discrete pump speed."""
    if percentage <= PUMP_SPEED_OFF_MAX:
        return 0
    if mode == PumpMode.TWO_STATE:
        return PUMP_SPEED_FULL
    if percentage <= PUMP_SPEED_LOW_MAX:
        return PUMP_SPEED_LOW
    return PUMP_SPEED_FULL


def pump_state_from_speed(mode: PumpMode, speed: int) -> PumpState:
    """Pump state to send for a snapped speed."""
    if speed == 0:
        return PumpState.OFF
    if mode == PumpMode.TWO_STATE:
        return PumpState.ON
    if speed == PUMP_SPEED_LOW:
        return PumpState.LOW
    return PumpState.HIGH


def pump_speed_from_state(mode: PumpMode, state: str | None) -> int:
    """Displayed speed for a raw pump state reported by /status."""
    if mode == PumpMode.THREE_STATE:
        if state == PumpState.HIGH:
            return PUMP_SPEED_FULL
        if state == PumpState.LOW:
            return PUMP_SPEED_LOW
        return 0
    return PUMP_SPEED_FULL if pump_is_active(state) else 0


def pump_is_active(state: str | None) -> bool:
    """A pump is active in any reported state other than off."""
    return bool(state) and state != PumpState.OFF


# Lenient readers for /status fields. The remote schema is trusted: a value
# of an unexpected type never fails the snapshot, it is coerced or dropped.
def _lenient_state(value: Any) -> str | None:
    """Read a state as text; non-scalar values read as missing."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return OnOffState.from_bool(value).value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _lenient_number(value: Any) -> float | None:
    """Read a number, accepting numeric strings; anything else reads as missing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _lenient_flag(value: Any) -> bool | None:
    """Read a boolean flag; null stays None."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "on", "yes", "1")
    if isinstance(value, (int, float)):
        return bool(value)
    return None


LenientState = Annotated[str | None, BeforeValidator(_lenient_state)]
LenientNumber = Annotated[float | None, BeforeValidator(_lenient_number)]
LenientFlag = Annotated[bool | None, BeforeValidator(_lenient_flag)]


class SpaStatus(ArcticSpaModel):
    """Snapshot of the spa as returned by GET /status.

    Immutable; a new instance is created for every successful fetch and
    handed out to every caller that shares it. All fields are optional
    because installed equipment varies between spas; a missing field means
    "not applicable", not an error. Field values are read leniently: numbers
    reported as states become text, unreadable numbers become None. Unknown
    fields are kept as extras.

    Example:
        >>> status = SpaStatus.model_validate({"connected": True, "temperatureF": 101})
        >>> status.temperature_f
        101.0
        >>> SpaStatus.model_validate({"connected": None, "pump1": 2}).pump1
        '2'
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    connected: LenientFlag = Field(default=False, description="Spa is connected to the cloud")

    temperature_f: LenientNumber = Field(default=None, alias="temperatureF", description="Water temperature in °F")
    setpoint_f: LenientNumber = Field(default=None, alias="setpointF", description="Target temperature in °F")

    lights: LenientState = Field(default=None, description="Lights on/off")

    pump1: LenientState = Field(default=None)
    pump2: LenientState = Field(default=None)
    pump3: LenientState = Field(default=None)
    pump4: LenientState = Field(default=None)
    pump5: LenientState = Field(default=None)

    blower1: LenientState = Field(default=None)
    blower2: LenientState = Field(default=None)

    easymode: LenientState = Field(default=None)
    sds: LenientState = Field(default=None)
    yess: LenientState = Field(default=None)
    fogger: LenientState = Field(default=None)

    ph: LenientNumber = Field(default=None, description="pH reported by the controller")
    ph_status: LenientState = Field(default=None, description="Qualitative pH status")
    orp: LenientNumber = Field(default=None, description="ORP reported by the controller")
    orp_status: LenientState = Field(default=None, description="Qualitative ORP/chlorine status")
    spaboy_ph: LenientNumber = Field(default=None, alias="spaboyPh", description="pH from the SpaBoy probe")
    spaboy_orp: LenientNumber = Field(default=None, alias="spaboyOrp", description="ORP from the SpaBoy probe")

    @property
    def effective_ph(self) -> float | None:
        """Probe pH if present, otherwise the controller reading."""
        return self.spaboy_ph if self.spaboy_ph is not None else self.ph

    @property
    def effective_orp(self) -> float | None:
        """Probe ORP if present, otherwise the controller reading."""
        return self.spaboy_orp if self.spaboy_orp is not None else self.orp

    def get_state(self, key: str) -> str | None:
        """Return a string field by its wire name, e.g. ``pump1`` or ``fogger``."""
        value = getattr(self, key, None)
        if value is None and self.model_extra:
            value = self.model_extra.get(key)
        return value if isinstance(value, str) else None

    @classmethod
    def from_api(cls, response_data: Any) -> SpaStatus:
        """Build a snapshot from the raw /status payload (None = empty body)."""
        if response_data is None:
            return cls()
        return cls.model_validate(response_data)


# ---------------------------------------------------------------------------
# Write commands
# ---------------------------------------------------------------------------


class SpaCommandBase(ArcticSpaModel):
    """Common base for all write commands.

    Commands carry the validated arguments and the JSON body; the endpoint
    each one is sent to is declared on the matching ArcticSpaAPI method.
    """

    model_config = {"frozen": True}

    def to_api_payload(self) -> dict[str, Any] | None:
        return None


class TemperatureCommand(SpaCommandBase):
    """Set the target water temperature in °F."""

    kind: Literal["temperature"] = "temperature"
    setpoint_f: float

    def to_api_payload(self) -> dict[str, Any]:
        return {"setpointF": self.setpoint_f}


class LightsCommand(SpaCommandBase):
    """Switch the spa lights."""

    kind: Literal["lights"] = "lights"
    on: bool

    def to_api_payload(self) -> dict[str, Any]:
        return {"state": OnOffState.from_bool(self.on).value}


class PumpCommand(SpaCommandBase):
    """Set one pump (or all pumps) to a state."""

    kind: Literal["pump"] = "pump"
    pump: PumpSelector
    state: PumpState

    def to_api_payload(self) -> dict[str, Any]:
        return {"state": self.state.value}


class BlowerCommand(SpaCommandBase):
    """Switch one blower (or all blowers)."""

    kind: Literal["blower"] = "blower"
    blower: BlowerSelector
    state: OnOffState

    def to_api_payload(self) -> dict[str, Any]:
        return {"state": self.state.value}


class ToggleCommand(SpaCommandBase):
    """Switch a simple feature such as easymode or the fogger."""

    kind: Literal["toggle"] = "toggle"
    toggle: Toggle
    on: bool

    def to_api_payload(self) -> dict[str, Any]:
        return {"state": OnOffState.from_bool(self.on).value}


class BoostCommand(SpaCommandBase):
    """Trigger a momentary boost. Sent without a body."""

    kind: Literal["boost"] = "boost"


SpaCommand = Annotated[
    TemperatureCommand | LightsCommand | PumpCommand | BlowerCommand | ToggleCommand | BoostCommand,
    Field(discriminator="kind"),
]
