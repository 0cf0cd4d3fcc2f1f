"""Tests for Arctic Spa integration setup."""
import pytest
from unittest.mock import MagicMock, AsyncMock, patch

from homeassistant.helpers.update_coordinator import UpdateFailed

from custom_components.arctic_spa import (
    async_setup,
    async_setup_entry,
    async_unload_entry,
    get_coordinator_groups,
    get_poll_interval,
)


def make_coordinator_class(first_refresh=None):
    def factory(hass, api, entry, group, poll_interval):
        coordinator = MagicMock()
        coordinator.group = group
        coordinator.poll_interval = poll_interval
        coordinator.async_config_entry_first_refresh = AsyncMock(side_effect=first_refresh)
        return coordinator

    return MagicMock(side_effect=factory)


@pytest.mark.asyncio
async def test_async_setup():
    """Test async_setup returns True."""
    result = await async_setup(MagicMock(), {})

    assert result is True


class TestOptionsHelpers:
    def test_poll_interval_default(self):
        assert get_poll_interval({}) == 60

    def test_poll_interval_configured(self):
        assert get_poll_interval({"poll_interval": 30}) == 30

    def test_poll_interval_below_minimum_falls_back(self):
        assert get_poll_interval({"poll_interval": 5}) == 60

    def test_default_groups(self):
        assert get_coordinator_groups({}) == ["environment", "pumps", "lights", "ph", "orp"]

    def test_disabled_groups(self):
        options = {"enable_lights": False, "enable_orp": False}
        assert get_coordinator_groups(options) == ["environment", "pumps", "ph"]


@pytest.mark.asyncio
async def test_async_setup_entry(mock_hass, mock_config_entry):
    """Test async_setup_entry."""
    mock_hass.config_entries = MagicMock()
    mock_hass.config_entries.async_forward_entry_setups = AsyncMock()
    mock_hass.services = MagicMock()

    with patch("custom_components.arctic_spa.ArcticSpaAPI") as mock_api_class:
        with patch(
            "custom_components.arctic_spa.ArcticSpaStatusCoordinator", make_coordinator_class()
        ):
            result = await async_setup_entry(mock_hass, mock_config_entry)

    assert result is True
    mock_api_class.assert_called_once_with(
        "test-api-key", min_status_interval_ms=60000, request_timeout_ms=5000
    )

    data = mock_hass.data["arctic_spa"]["test_entry_id"]
    assert data["api"] is mock_api_class.return_value
    assert set(data["coordinators"]) == {"environment", "pumps", "lights", "ph", "orp"}
    for coordinator in data["coordinators"].values():
        coordinator.async_config_entry_first_refresh.assert_awaited_once()
        assert coordinator.poll_interval == 60

    platforms = mock_hass.config_entries.async_forward_entry_setups.call_args[0][1]
    assert platforms == ["climate", "light", "fan", "switch", "sensor"]

    # Services are registered with the first entry
    assert mock_hass.services.async_register.call_count == 2


@pytest.mark.asyncio
async def test_async_setup_entry_uses_options(mock_hass, mock_config_entry):
    mock_config_entry.options = {"poll_interval": 30, "request_timeout": 2000, "enable_lights": False}
    mock_hass.config_entries = MagicMock()
    mock_hass.config_entries.async_forward_entry_setups = AsyncMock()
    mock_hass.services = MagicMock()

    with patch("custom_components.arctic_spa.ArcticSpaAPI") as mock_api_class:
        with patch(
            "custom_components.arctic_spa.ArcticSpaStatusCoordinator", make_coordinator_class()
        ):
            await async_setup_entry(mock_hass, mock_config_entry)

    mock_api_class.assert_called_once_with(
        "test-api-key", min_status_interval_ms=30000, request_timeout_ms=2000
    )
    assert "lights" not in mock_hass.data["arctic_spa"]["test_entry_id"]["coordinators"]


@pytest.mark.asyncio
async def test_async_setup_entry_first_refresh_failure_closes_api(mock_hass, mock_config_entry):
    mock_hass.config_entries = MagicMock()
    mock_hass.config_entries.async_forward_entry_setups = AsyncMock()

    with patch("custom_components.arctic_spa.ArcticSpaAPI") as mock_api_class:
        mock_api_class.return_value.close = AsyncMock()
        with patch(
            "custom_components.arctic_spa.ArcticSpaStatusCoordinator",
            make_coordinator_class(first_refresh=UpdateFailed("down")),
        ):
            with pytest.raises(UpdateFailed):
                await async_setup_entry(mock_hass, mock_config_entry)

    mock_api_class.return_value.close.assert_awaited_once()
    mock_hass.config_entries.async_forward_entry_setups.assert_not_called()


@pytest.mark.asyncio
async def test_async_unload_entry(mock_hass, mock_config_entry, mock_api):
    """Test async_unload_entry."""
    mock_hass.config_entries = MagicMock()
    mock_hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    mock_hass.services = MagicMock()
    mock_hass.data = {"arctic_spa": {"test_entry_id": {"api": mock_api, "coordinators": {}}}}

    result = await async_unload_entry(mock_hass, mock_config_entry)

    assert result is True
    mock_api.close.assert_awaited_once()
    assert mock_hass.data["arctic_spa"] == {}
    assert mock_hass.services.async_remove.call_count == 2


@pytest.mark.asyncio
async def test_async_unload_entry_keeps_services_for_other_spas(mock_hass, mock_config_entry, mock_api):
    mock_hass.config_entries = MagicMock()
    mock_hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    mock_hass.services = MagicMock()
    mock_hass.data = {
        "arctic_spa": {
            "test_entry_id": {"api": mock_api, "coordinators": {}},
            "other_entry": {"api": MagicMock(), "coordinators": {}},
        }
    }

    await async_unload_entry(mock_hass, mock_config_entry)

    mock_hass.services.async_remove.assert_not_called()


@pytest.mark.asyncio
async def test_async_unload_entry_failure(mock_hass, mock_config_entry, mock_api):
    mock_hass.config_entries = MagicMock()
    mock_hass.config_entries.async_unload_platforms = AsyncMock(return_value=False)
    mock_hass.data = {"arctic_spa": {"test_entry_id": {"api": mock_api, "coordinators": {}}}}

    result = await async_unload_entry(mock_hass, mock_config_entry)

    assert result is False
    mock_api.close.assert_not_called()
