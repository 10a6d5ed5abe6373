"""Fixtures for API integration tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from shift_pay.api.app import create_app
from shift_pay.api.dependencies import get_app_settings
from shift_pay.config import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "engine_version": "test",
        "host": "127.0.0.1",
        "port": 8000,
        "debug": False,
        "default_tax_percentage": 35.0,
        "strict_validation": False,
        "log_level": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
async def client(settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to a fresh app instance."""
    app = create_app()
    app.dependency_overrides[get_app_settings] = lambda: settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
