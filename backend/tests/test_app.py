"""
NoteDesk Backend — Application Wiring Tests
=============================================

What:  Health endpoint, request ID propagation, error format, configuration.
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from notedesk import database
from notedesk.config import Settings
from notedesk.middleware.logging import level_for_status


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_connected_database(self, test_client, db_engine, monkeypatch):
        monkeypatch.setattr(database, "engine", db_engine)

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_health_reports_unreachable_database(self, test_client, monkeypatch):
        class BrokenEngine:
            def connect(self):
                raise ConnectionRefusedError("database is down")

        monkeypatch.setattr(database, "engine", BrokenEngine())

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_request_id_in_header_and_error_body(self, test_client):
        response = await test_client.get("/notes")

        rid = response.headers["X-Request-ID"]
        assert rid
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_split(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_async_database_url_passes(self):
        Settings(database_url="postgresql+asyncpg://u:p@db/notes").validate_required_for_production()

    def test_sync_database_url_fails(self):
        with pytest.raises(ValueError, match="async driver"):
            Settings(database_url="postgresql://u:p@db/notes").validate_required_for_production()


@pytest.mark.parametrize(
    "status, level",
    [(200, logging.INFO), (201, logging.INFO), (409, logging.WARNING), (500, logging.ERROR)],
)
def test_access_log_level_follows_status(status, level):
    assert level_for_status(status) == level
