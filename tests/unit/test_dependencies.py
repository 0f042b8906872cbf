"""Unit tests for the composition root."""

import pytest

from ibms.config import Settings
from ibms.infrastructure.dependencies import build_app_context, build_gateway
from ibms.infrastructure.gateways import HttpGateway, MockGateway
from ibms.infrastructure.storage import InMemoryStorage


def test_build_gateway_picks_mock_without_backend():
    gateway = build_gateway(Settings(_env_file=None, api_base_url=""), InMemoryStorage())
    assert isinstance(gateway, MockGateway)


def test_build_gateway_picks_http_for_configured_backend():
    settings = Settings(_env_file=None, api_base_url="https://api.example.com", app_env="production")
    gateway = build_gateway(settings, InMemoryStorage())
    assert isinstance(gateway, HttpGateway)


@pytest.mark.asyncio
async def test_app_context_hooks_share_one_cache():
    settings = Settings(_env_file=None, mock_delay_min_ms=0, mock_delay_max_ms=0)
    app = build_app_context(settings, storage=InMemoryStorage())

    await app.clients.use_list()
    await app.orders.use_list()

    assert app.api.mock_mode
    assert len(app.query_client) == 2
    assert app.clients.query_client is app.orders.query_client
    assert app.settings_manager.get_setting("general")["currency"] == "INR"
    await app.aclose()
