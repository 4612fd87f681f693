# backend/tests/conftest.py
import socket
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from netremote.database import get_db
from netremote.main import app as fastapi_app
from netremote.models import Base
from netremote.routers.remote_settings import get_remote_control, get_scanner
from netremote.services.network import NetworkInterfaceScanner
from netremote.services.presets import PresetCatalog
from netremote.services.remote_control import RemoteControlService

TEST_DATABASE_URL = "sqlite+aiosqlite://"

HOST_ADDRESSES = [
    ("127.0.0.1", socket.AF_INET),
    ("192.168.1.5", socket.AF_INET),
    ("::1", socket.AF_INET6),
    ("10.0.0.2", socket.AF_INET),
]


class MemoryStore:
    """In-memory KeyValueStore that records every write."""

    def __init__(self, data: dict[tuple[str, str], Any] | None = None):
        self.data = dict(data or {})
        self.writes: list[tuple[str, str, Any]] = []

    async def get(self, namespace: str, key: str, default: Any = None) -> Any:
        return self.data.get((namespace, key), default)

    async def set(self, namespace: str, key: str, value: Any) -> None:
        self.writes.append((namespace, key, value))
        self.data[(namespace, key)] = value


class RecordingRemote:
    def __init__(self, error: Exception | None = None):
        self.reloads = 0
        self._error = error

    async def notify_reload(self) -> None:
        self.reloads += 1
        if self._error:
            raise self._error


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def recording_remote() -> RecordingRemote:
    return RecordingRemote()


@pytest.fixture
def failing_remote() -> RecordingRemote:
    return RecordingRemote(error=RuntimeError("remote is gone"))


@pytest.fixture
def catalog() -> PresetCatalog:
    return PresetCatalog()


@pytest.fixture
def scanner() -> NetworkInterfaceScanner:
    return NetworkInterfaceScanner(lambda: HOST_ADDRESSES)


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Creates/Disposes an in-memory engine FOR EACH TEST FUNCTION."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def remote_service(session_factory) -> RemoteControlService:
    return RemoteControlService(session_factory=session_factory)


@pytest_asyncio.fixture(scope="function")
async def test_client(session_factory, scanner, remote_service) -> AsyncGenerator[AsyncClient, None]:
    """httpx client against the app, wired to the per-test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_scanner] = lambda: scanner
    fastapi_app.dependency_overrides[get_remote_control] = lambda: remote_service

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    fastapi_app.dependency_overrides.clear()
