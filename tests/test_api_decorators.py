"""Tests for API decorators."""

from unittest.mock import AsyncMock

import pytest

from custom_components.arctic_spa.infrastructure import (
    ArcticSpaTimeoutError,
    ArcticSpaValidationError,
    api_get,
    api_put,
)


class MockAPI:
    """Mock API class for testing decorators."""

    def __init__(self, response=None):
        self._async_request = AsyncMock(return_value=response)


@pytest.mark.asyncio
async def test_api_get_simple():
    """Test api_get decorator with simple endpoint."""

    @api_get("/status")
    async def fetch(self, response_data):
        return response_data

    api = MockAPI({"connected": True})

    result = await fetch(api)

    assert result == {"connected": True}
    api._async_request.assert_awaited_once_with("GET", "/status")


@pytest.mark.asyncio
async def test_api_get_formats_path_from_arguments():
    @api_get("/pumps/{pump}")
    async def fetch(self, response_data, pump):
        return (pump, response_data)

    api = MockAPI("raw text")

    assert await fetch(api, "3") == ("3", "raw text")
    api._async_request.assert_awaited_once_with("GET", "/pumps/3")


@pytest.mark.asyncio
async def test_api_get_passes_empty_body():
    @api_get("/status")
    async def fetch(self, response_data):
        return response_data

    assert await fetch(MockAPI(None)) is None


@pytest.mark.asyncio
async def test_api_get_propagates_transport_errors():
    @api_get("/status")
    async def fetch(self, response_data):
        return response_data

    api = MockAPI()
    api._async_request.side_effect = ArcticSpaTimeoutError("slow")

    with pytest.raises(ArcticSpaTimeoutError):
        await fetch(api)


@pytest.mark.asyncio
async def test_api_put_positional_and_keyword():
    @api_put("/pumps/{pump}")
    async def set_pump(self, pump, state):
        return {"state": state}

    api = MockAPI({"ok": True})

    assert await set_pump(api, "2", "high") == {"ok": True}
    await set_pump(api, pump="all", state="off")

    assert [call.args for call in api._async_request.await_args_list] == [
        ("PUT", "/pumps/2", {"state": "high"}),
        ("PUT", "/pumps/all", {"state": "off"}),
    ]


@pytest.mark.asyncio
async def test_api_put_without_body():
    @api_put("/boost")
    async def boost(self):
        return None

    api = MockAPI()

    await boost(api)

    api._async_request.assert_awaited_once_with("PUT", "/boost", None)


@pytest.mark.asyncio
async def test_api_put_validation_runs_before_request():
    @api_put("/{toggle}")
    async def set_toggle(self, toggle, on):
        raise ArcticSpaValidationError("Toggle must be one of easymode, sds, yess, fogger")

    api = MockAPI()

    with pytest.raises(ArcticSpaValidationError):
        await set_toggle(api, "sauna", True)

    api._async_request.assert_not_called()
