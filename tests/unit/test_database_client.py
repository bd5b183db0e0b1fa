"""Unit tests for the database client startup retry."""

import pytest
from sqlalchemy.exc import OperationalError

from process_service.infrastructure.database import client as client_module
from process_service.infrastructure.database.client import DatabaseClient, startup_retry


@pytest.fixture
def no_sleep(monkeypatch):
    waits = []

    async def fake_sleep(seconds):
        waits.append(seconds)

    monkeypatch.setattr(client_module.asyncio, "sleep", fake_sleep)
    return waits


@pytest.mark.unit
class TestStartupRetry:

    @pytest.mark.asyncio
    async def test_retries_with_backoff(self, no_sleep):
        attempts = []

        @startup_retry(max_retries=3, delay=0.5)
        async def connect():
            attempts.append(1)
            if len(attempts) < 3:
                raise OperationalError("SELECT 1", {}, Exception("refused"))
            return "ok"

        assert await connect() == "ok"
        assert no_sleep == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self, no_sleep):
        @startup_retry(max_retries=2, delay=1.0)
        async def connect():
            raise OSError("unreachable")

        with pytest.raises(OSError):
            await connect()
        assert no_sleep == [1.0]

    @pytest.mark.asyncio
    async def test_other_errors_not_retried(self, no_sleep):
        @startup_retry()
        async def connect():
            raise ValueError("bad url")

        with pytest.raises(ValueError):
            await connect()
        assert no_sleep == []


@pytest.mark.unit
class TestDatabaseClient:

    @pytest.mark.asyncio
    async def test_sqlite_file_lifecycle(self, tmp_path):
        db_client = DatabaseClient(f"sqlite+aiosqlite:///{tmp_path / 'health.db'}")
        await db_client.verify_connection()
        await db_client.create_tables()

        sessions = db_client.get_session()
        session = await sessions.__anext__()
        assert session.is_active
        await sessions.aclose()

        await db_client.close()
        assert (tmp_path / "health.db").exists()
