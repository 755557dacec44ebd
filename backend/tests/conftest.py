"""Pytest configuration and fixtures."""

import asyncio

import pytest

from pricefetch.relay.config import Settings


@pytest.fixture
def event_loop_policy():
    """Use the default event loop policy for all async tests."""
    return asyncio.DefaultEventLoopPolicy()


@pytest.fixture
def settings() -> Settings:
    """Settings with dummy secrets. The token only has to look like one."""
    return Settings(
        telegram_token="123456:TEST-TOKEN",
        coinmarketcap_api_key="test-key",
        broadcast_timezone="UTC",
    )
