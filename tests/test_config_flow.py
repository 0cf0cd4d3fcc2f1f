"""Tests for Arctic Spa config_flow."""

import pytest
import voluptuous as vol
from unittest.mock import AsyncMock, MagicMock, patch
from homeassistant.data_entry_flow import FlowResultType

from custom_components.arctic_spa.config_flow import (
    ArcticSpaConfigFlow,
    ArcticSpaOptionsFlow,
    api_key_unique_id,
    async_validate_api_key,
)
from custom_components.arctic_spa.infrastructure import (
    ArcticSpaAPIError,
    ArcticSpaConnectionError,
    ArcticSpaMalformedResponseError,
    ArcticSpaTimeoutError,
)
from custom_components.arctic_spa.models import SpaStatus

API_PATH = "custom_components.arctic_spa.config_flow.ArcticSpaAPI"


def make_flow():
    flow = ArcticSpaConfigFlow()
    flow.hass = MagicMock()
    flow.context = {"source": "user"}
    flow.async_set_unique_id = AsyncMock()
    flow._abort_if_unique_id_configured = MagicMock()
    return flow


def make_api(side_effect=None):
    api = MagicMock()
    api.async_get_status = AsyncMock(return_value=SpaStatus(connected=True), side_effect=side_effect)
    api.close = AsyncMock()
    return api


@pytest.mark.asyncio
async def test_user_flow_shows_form():
    flow = make_flow()

    result = await flow.async_step_user()

    assert result["type"] == FlowResultType.FORM
    assert result["step_id"] == "user"
    assert result["errors"] == {}


@pytest.mark.asyncio
async def test_user_flow_success():
    """Test successful user configuration flow."""
    flow = make_flow()
    api = make_api()

    with patch(API_PATH, return_value=api) as mock_api_class:
        result = await flow.async_step_user(user_input={"api_key": " key-123 "})

    assert result["type"] == FlowResultType.CREATE_ENTRY
    assert result["title"] == "Arctic Spa"
    assert result["data"] == {"api_key": "key-123"}
    mock_api_class.assert_called_once_with("key-123")
    flow.async_set_unique_id.assert_awaited_once_with(api_key_unique_id("key-123"))
    api.close.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ArcticSpaAPIError(401, "Unauthorized"), "invalid_auth"),
        (ArcticSpaAPIError(403, "Forbidden"), "invalid_auth"),
        (ArcticSpaAPIError(500, "Internal Server Error"), "unknown"),
        (ArcticSpaTimeoutError("slow"), "cannot_connect"),
        (ArcticSpaConnectionError("refused"), "cannot_connect"),
        (ArcticSpaMalformedResponseError("bad body"), "unknown"),
    ],
)
async def test_user_flow_errors(error, expected):
    flow = make_flow()
    api = make_api(side_effect=error)

    with patch(API_PATH, return_value=api):
        result = await flow.async_step_user(user_input={"api_key": "key-123"})

    assert result["type"] == FlowResultType.FORM
    assert result["errors"] == {"base": expected}
    api.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_user_flow_rejects_malformed_key():
    flow = make_flow()

    with patch(API_PATH) as mock_api_class:
        result = await flow.async_step_user(user_input={"api_key": "bad key\r\n"})

    assert result["type"] == FlowResultType.FORM
    assert result["errors"] == {"api_key": "invalid_api_key"}
    mock_api_class.assert_not_called()


@pytest.mark.asyncio
async def test_validate_api_key_success():
    api = make_api()

    with patch(API_PATH, return_value=api):
        assert await async_validate_api_key("key") is None


def test_unique_id_is_stable_and_hides_key():
    unique_id = api_key_unique_id("secret-key")

    assert unique_id == api_key_unique_id("secret-key")
    assert unique_id != api_key_unique_id("other-key")
    assert "secret" not in unique_id


def test_get_options_flow():
    entry = MagicMock()
    entry.options = {}

    assert isinstance(ArcticSpaConfigFlow.async_get_options_flow(entry), ArcticSpaOptionsFlow)


@pytest.mark.asyncio
async def test_options_flow_defaults():
    entry = MagicMock()
    entry.options = {}
    flow = ArcticSpaOptionsFlow(entry)

    result = await flow.async_step_init()

    assert result["type"] == FlowResultType.FORM
    assert result["step_id"] == "init"
    defaults = result["data_schema"]({})
    assert defaults["poll_interval"] == 60
    assert defaults["min_status_interval"] == 60000
    assert defaults["request_timeout"] == 5000
    assert defaults["enable_lights"] is True
    assert defaults["enable_pump3"] is True
    assert defaults["enable_pump4"] is False
    assert defaults["enable_fogger"] is True
    assert defaults["pump1_mode"] == "three_state"
    assert defaults["pump2_mode"] == "two_state"
    assert defaults["enable_ph"] is True
    assert defaults["enable_orp"] is True


@pytest.mark.asyncio
async def test_options_flow_uses_existing_options():
    entry = MagicMock()
    entry.options = {"poll_interval": 30, "enable_pump4": True, "pump2_mode": "three_state"}
    flow = ArcticSpaOptionsFlow(entry)

    result = await flow.async_step_init()

    defaults = result["data_schema"]({})
    assert defaults["poll_interval"] == 30
    assert defaults["min_status_interval"] == 30000
    assert defaults["enable_pump4"] is True
    assert defaults["pump2_mode"] == "three_state"


@pytest.mark.asyncio
async def test_options_flow_rejects_unknown_pump_mode():
    entry = MagicMock()
    entry.options = {}
    flow = ArcticSpaOptionsFlow(entry)

    result = await flow.async_step_init()

    with pytest.raises(vol.Invalid):
        result["data_schema"]({"pump1_mode": "turbo"})


@pytest.mark.asyncio
async def test_options_flow_saves():
    entry = MagicMock()
    entry.options = {}
    flow = ArcticSpaOptionsFlow(entry)
    user_input = {"poll_interval": 120, "enable_lights": False}

    result = await flow.async_step_init(user_input=user_input)

    assert result["type"] == FlowResultType.CREATE_ENTRY
    assert result["data"] == user_input
