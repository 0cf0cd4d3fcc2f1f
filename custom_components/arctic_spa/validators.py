"""Input validation for Arctic Spa integration.

This module provides validation functions for values that flow into the
Arctic Spas API or the config flow:
- API keys (header injection prevention)
- Pump, blower and toggle selectors
- Pump and on/off states
- Temperature setpoints (numeric only, no range clamping)
- Polling intervals

These validators are used in config_flow, services and API calls so that
out-of-domain values are rejected before any request is sent.
"""

from __future__ import annotations

import math
import re

from .constants import API_DEFAULTS, BlowerSelector, OnOffState, PumpSelector, PumpState, Toggle


def _one_of(value, allowed: type, label: str) -> tuple[bool, str | None]:
    choices = [member.value for member in allowed]
    if str(value) not in choices:
        return False, f"{label} must be one of {', '.join(choices)}"
    return True, None


def validate_api_key(api_key: str) -> tuple[bool, str | None]:
    """Validate an API key before it is attached as a request header.

    Args:
        api_key: API key as entered by the user.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid, otherwise contains description of the error.

    Example:
        >>> validate_api_key("abc-123")
        (True, None)
        >>> validate_api_key("")
        (False, "API key cannot be empty")
        >>> validate_api_key("abc\\r\\nX-Evil: 1")
        (False, "API key contains invalid characters")
    """
    if not api_key or not api_key.strip():
        return False, "API key cannot be empty"

    # Header values must not contain control characters or whitespace
    if re.search(r"[\s\x00-\x1f\x7f]", api_key.strip()):
        return False, "API key contains invalid characters"

    return True, None


def validate_pump_selector(pump: str) -> tuple[bool, str | None]:
    """Validate a pump selector (``1``-``5`` or ``all``).

    Example:
        >>> validate_pump_selector("3")
        (True, None)
        >>> validate_pump_selector("6")
        (False, "Pump must be one of 1, 2, 3, 4, 5, all")
    """
    return _one_of(pump, PumpSelector, "Pump")


def validate_pump_state(state: str) -> tuple[bool, str | None]:
    """Validate a pump state (``off``, ``on``, ``low`` or ``high``)."""
    return _one_of(state, PumpState, "Pump state")


def validate_blower_selector(blower: str) -> tuple[bool, str | None]:
    """Validate a blower selector (``1``, ``2`` or ``all``)."""
    return _one_of(blower, BlowerSelector, "Blower")


def validate_on_off_state(state: str) -> tuple[bool, str | None]:
    """Validate an on/off state string."""
    return _one_of(state, OnOffState, "State")


def validate_on_flag(on: bool) -> tuple[bool, str | None]:
    """Validate an on/off flag; only real booleans are accepted."""
    if not isinstance(on, bool):
        return False, "State must be a boolean"
    return True, None


def validate_toggle(toggle: str) -> tuple[bool, str | None]:
    """Validate a toggle name (``easymode``, ``sds``, ``yess`` or ``fogger``)."""
    return _one_of(toggle, Toggle, "Toggle")


def validate_temperature(setpoint_f: int | float) -> tuple[bool, str | None]:
    """Validate a temperature setpoint in °F.

    Only checks that the value is a finite number. Range checks are left to
    the remote API, which rejects out-of-range setpoints with an error status.

    Example:
        >>> validate_temperature(102)
        (True, None)
        >>> validate_temperature(float("nan"))
        (False, "Temperature must be a finite number")
    """
    if isinstance(setpoint_f, bool) or not isinstance(setpoint_f, (int, float)):
        return False, "Temperature must be a number"
    if not math.isfinite(setpoint_f):
        return False, "Temperature must be a finite number"
    return True, None


def validate_poll_interval(seconds: int | float) -> tuple[bool, str | None]:
    """Validate a coordinator polling interval in seconds."""
    if seconds < API_DEFAULTS.MIN_POLLING_INTERVAL:
        return False, f"Polling interval must be at least {API_DEFAULTS.MIN_POLLING_INTERVAL} seconds"
    return True, None
