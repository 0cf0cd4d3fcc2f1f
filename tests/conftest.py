"""Common fixtures for Arctic Spa tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock
from homeassistant.core import HomeAssistant
from homeassistant.config_entries import ConfigEntry

from custom_components.arctic_spa.models import SpaStatus


STATUS_PAYLOAD = {
    "connected": True,
    "temperatureF": 100,
    "setpointF": 104,
    "lights": "on",
    "pump1": "low",
    "pump2": "off",
    "pump3": "on",
    "blower1": "on",
    "blower2": "off",
    "easymode": "off",
    "sds": "on",
    "yess": "off",
    "fogger": "on",
    "ph": 7.4,
    "ph_status": "pH OK",
    "orp": 650,
    "orp_status": "CL Low-OK",
}


@pytest.fixture
def status_payload():
    """Raw /status body as returned by the cloud API."""
    return dict(STATUS_PAYLOAD)


@pytest.fixture
def spa_status(status_payload):
    """Parsed status snapshot."""
    return SpaStatus.model_validate(status_payload)


@pytest.fixture
def mock_hass():
    """Create a mock Home Assistant instance."""
    hass = MagicMock(spec=HomeAssistant)
    hass.data = {}
    hass.loop = None
    hass.async_create_task = MagicMock()
    hass.add_job = MagicMock()
    return hass


@pytest.fixture
def mock_config_entry():
    """Create a mock config entry."""
    entry = MagicMock(spec=ConfigEntry)
    entry.entry_id = "test_entry_id"
    entry.title = "Arctic Spa"
    entry.data = {"api_key": "test-api-key"}
    entry.options = {}
    return entry


@pytest.fixture
def mock_api(spa_status):
    """Create a mock ArcticSpaAPI instance."""
    api = MagicMock()
    api.async_get_status = AsyncMock(return_value=spa_status)
    api.async_set_temperature = AsyncMock()
    api.async_set_lights = AsyncMock()
    api.async_set_pump = AsyncMock()
    api.async_set_blower = AsyncMock()
    api.async_set_toggle = AsyncMock()
    api.async_boost = AsyncMock()
    api.close = AsyncMock()
    return api


@pytest.fixture
def mock_coordinator(spa_status):
    """Create a mock status coordinator."""
    coordinator = MagicMock()
    coordinator.data = spa_status
    coordinator.async_request_refresh = AsyncMock()
    coordinator.async_add_listener = MagicMock(return_value=lambda: None)
    coordinator.last_update_success = True
    return coordinator


def _make_response(status=200, body="", content_type="application/json", reason="OK"):
    """Build a mocked aiohttp response."""
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.content_type = content_type
    response.text = AsyncMock(return_value=body)
    return response


def _make_session(*responses, side_effect=None):
    """Build a mocked aiohttp session whose request() yields the given responses."""
    session = MagicMock()
    session.closed = False
    if side_effect is not None:
        session.request = MagicMock(side_effect=side_effect)
        return session

    contexts = [
        AsyncMock(
            __aenter__=AsyncMock(return_value=response),
            __aexit__=AsyncMock(return_value=False),
        )
        for response in responses
    ]
    session.request = MagicMock(side_effect=contexts)
    return session


@pytest.fixture
def make_response():
    """Factory for mocked aiohttp responses."""
    return _make_response


@pytest.fixture
def make_session():
    """Factory for mocked aiohttp sessions."""
    return _make_session
