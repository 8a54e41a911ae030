"""Shared pytest fixtures for mojicount tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from mojicount.db.connection import Database
from mojicount.export.router import get_export_service
from mojicount.export.service import ExportService
from mojicount.main import app
from mojicount.settings.router import get_settings_service
from mojicount.settings.service import SettingsService


@pytest.fixture
async def db():
    """In-memory database for tests."""
    database = await Database.connect(":memory:")
    yield database
    await database.close()


@pytest.fixture
async def settings_service(db):
    """SettingsService backed by in-memory database."""
    return SettingsService(db)


@pytest.fixture
async def client(settings_service):
    """Async test client with in-memory DB wired into the app."""
    export_service = ExportService(settings_service)
    app.dependency_overrides[get_settings_service] = lambda: settings_service
    app.dependency_overrides[get_export_service] = lambda: export_service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
