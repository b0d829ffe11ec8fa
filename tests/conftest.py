"""Pytest configuration and fixtures for wine cellar tests.

The store under test is a real MongoWineStore running against
mongomock-motor, so no MongoDB server is needed.
"""

import uuid
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from winecellar.config import ServerConfig, WineCellarConfig
from winecellar.exceptions import StoreError
from winecellar.main import create_app
from winecellar.seed import setup
from winecellar.store import MongoWineStore, StoreResult, WineStore, WriteSummary


class FailingStore(WineStore):
    """Store whose every operation fails with the same message."""

    def __init__(self, message: str = "boom"):
        self.message = message
        self.calls: list[str] = []

    def _fail(self, name: str) -> StoreResult:
        self.calls.append(name)
        return StoreResult.failure(StoreError(self.message))

    async def list_wines(self) -> StoreResult[list[dict[str, Any]]]:
        return self._fail("list_wines")

    async def get_wine(self, wine_id: str) -> StoreResult[dict[str, Any]]:
        return self._fail("get_wine")

    async def insert_wine(self, wine: dict[str, Any]) -> StoreResult[WriteSummary]:
        return self._fail("insert_wine")

    async def update_wine(self, wine_id: str, changes: dict[str, Any]) -> StoreResult[WriteSummary]:
        return self._fail("update_wine")

    async def delete_wine(self, wine_id: str) -> StoreResult[WriteSummary]:
        return self._fail("delete_wine")

    async def create_database(self) -> StoreResult[None]:
        return self._fail("create_database")

    async def create_collection(self) -> StoreResult[bool]:
        return self._fail("create_collection")

    async def insert_many(self, wines: list[dict[str, Any]]) -> StoreResult[WriteSummary]:
        return self._fail("insert_many")


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Create a public directory with an index page."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html><body>Wine Cellar</body></html>")
    (public / "style.css").write_text("body { color: #722f37; }")
    return public


@pytest.fixture
def config(static_dir: Path) -> WineCellarConfig:
    """Configuration for tests, serving the temporary public directory."""
    return WineCellarConfig(server=ServerConfig(static_dir=static_dir))


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """Create an in-memory motor-compatible client."""
    return AsyncMongoMockClient()


@pytest.fixture
def store(mongo_client: AsyncMongoMockClient) -> MongoWineStore:
    """Create a store bound to a unique test database."""
    return MongoWineStore(mongo_client, f"test_winecellar_{uuid.uuid4().hex[:8]}")


@pytest_asyncio.fixture
async def seeded_store(config: WineCellarConfig, store: MongoWineStore) -> MongoWineStore:
    """Store after the seed loader has run on a fresh database."""
    await setup(config, store)
    return store


async def _client_for(config: WineCellarConfig, store: WineStore) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(config=config, store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client(config: WineCellarConfig, store: MongoWineStore) -> AsyncGenerator[AsyncClient, None]:
    """Async test client over an empty collection."""
    async for ac in _client_for(config, store):
        yield ac


@pytest_asyncio.fixture
async def seeded_client(
    config: WineCellarConfig, seeded_store: MongoWineStore
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client over the seeded sample catalog."""
    async for ac in _client_for(config, seeded_store):
        yield ac


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest_asyncio.fixture
async def failing_client(
    config: WineCellarConfig, failing_store: FailingStore
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client whose store fails every operation."""
    async for ac in _client_for(config, failing_store):
        yield ac


@pytest.fixture
def sample_wine() -> dict[str, str]:
    return {
        "name": "TEST",
        "year": "2020",
        "grapes": "X",
        "country": "Y",
        "region": "Z",
        "description": "D",
        "picture": "p.jpg",
    }
