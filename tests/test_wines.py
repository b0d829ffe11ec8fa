"""Tests for the wine CRUD endpoints."""

import pytest
from httpx import AsyncClient

from winecellar.seed_data import SAMPLE_WINES
from winecellar.store import MongoWineStore


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test the health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


@pytest.mark.asyncio
async def test_list_wines_empty(client: AsyncClient) -> None:
    """Test listing wines when the collection is empty."""
    response = await client.get("/wines")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_wines_seeded(seeded_client: AsyncClient) -> None:
    """Test listing returns the whole sample catalog, each with an id."""
    response = await seeded_client.get("/wines")
    assert response.status_code == 200

    wines = response.json()
    assert len(wines) == len(SAMPLE_WINES)
    assert sorted(w["name"] for w in wines) == sorted(w["name"] for w in SAMPLE_WINES)
    assert all(w["id"] for w in wines)
    assert len({w["id"] for w in wines}) == len(wines)


@pytest.mark.asyncio
async def test_create_and_get_wine(client: AsyncClient, sample_wine: dict) -> None:
    """Test a created wine can be fetched back unchanged by its new id."""
    response = await client.post("/wines", json=sample_wine)
    assert response.status_code == 200

    created = response.json()
    assert created["id"]
    for field, value in sample_wine.items():
        assert created[field] == value

    response = await client.get(f"/wines/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_create_wine_partial(client: AsyncClient) -> None:
    """Test that no field is required."""
    response = await client.post("/wines", json={"name": "ONLY A NAME"})
    created = response.json()
    assert set(created) == {"name", "id"}

    response = await client.get(f"/wines/{created['id']}")
    assert response.json() == created


@pytest.mark.asyncio
async def test_create_wine_keeps_extra_fields(client: AsyncClient) -> None:
    """Test that fields outside the wine shape are stored as-is."""
    response = await client.post("/wines", json={"name": "EXTRA", "stock": 12})
    created = response.json()
    assert created["stock"] == 12

    response = await client.get(f"/wines/{created['id']}")
    assert response.json()["stock"] == 12


@pytest.mark.asyncio
async def test_create_wine_with_client_id(client: AsyncClient, sample_wine: dict) -> None:
    """Test a client-supplied id is used as the primary key."""
    response = await client.post("/wines", json={**sample_wine, "id": "my-wine"})
    assert response.json()["id"] == "my-wine"

    response = await client.get("/wines/my-wine")
    assert response.json()["name"] == "TEST"


@pytest.mark.asyncio
async def test_create_wine_duplicate_id(client: AsyncClient, sample_wine: dict) -> None:
    """Test inserting a duplicate id returns an error body."""
    await client.post("/wines", json={**sample_wine, "id": "dup"})

    response = await client.post("/wines", json={"name": "OTHER", "id": "dup"})
    assert response.status_code == 200
    error = response.json()["error"]
    assert error.startswith("An error occurred when adding the new wine (")
    assert error.endswith(")")

    response = await client.get("/wines/dup")
    assert response.json()["name"] == "TEST"


@pytest.mark.asyncio
async def test_create_wine_unencodable_value(client: AsyncClient) -> None:
    """Test a value MongoDB cannot store yields the create error body."""
    response = await client.post("/wines", json={"name": "BIG", "stock": 2**70})
    assert response.status_code == 200
    assert response.json()["error"].startswith("An error occurred when adding the new wine (")

    response = await client.get("/wines")
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_wine_ignores_mongo_id(client: AsyncClient) -> None:
    """Test an _id in the body is dropped so create and get agree."""
    response = await client.post("/wines", json={"name": "A", "_id": "x"})
    created = response.json()
    assert "_id" not in created
    assert created["id"] != "x"

    response = await client.get(f"/wines/{created['id']}")
    assert response.json() == created


@pytest.mark.asyncio
async def test_create_wine_invalid_json(client: AsyncClient) -> None:
    """Test a malformed body is rejected before reaching the store."""
    response = await client.post(
        "/wines",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400

    response = await client.get("/wines")
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_wine_non_object_body(client: AsyncClient) -> None:
    """Test a JSON array body is rejected."""
    response = await client.post("/wines", json=[{"name": "A"}])
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_wine_not_found(client: AsyncClient) -> None:
    """Test getting a wine that doesn't exist returns an error body."""
    response = await client.get("/wines/nonexistent-id")
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"error"}
    assert "nonexistent-id" in data["error"]


@pytest.mark.asyncio
async def test_update_wine_merges(client: AsyncClient, sample_wine: dict) -> None:
    """Test update overwrites given fields and keeps the others."""
    created = (await client.post("/wines", json=sample_wine)).json()
    wine_id = created["id"]

    response = await client.put(f"/wines/{wine_id}", json={"year": "2021", "region": "Napa"})
    assert response.status_code == 200
    assert response.json() == {"year": "2021", "region": "Napa", "id": wine_id}

    stored = (await client.get(f"/wines/{wine_id}")).json()
    assert stored == {**created, "year": "2021", "region": "Napa"}


@pytest.mark.asyncio
async def test_update_wine_id_comes_from_path(client: AsyncClient, sample_wine: dict) -> None:
    """Test an id in the body is replaced by the path id."""
    created = (await client.post("/wines", json=sample_wine)).json()
    wine_id = created["id"]

    response = await client.put(f"/wines/{wine_id}", json={"id": "other", "name": "RENAMED"})
    assert response.json() == {"id": wine_id, "name": "RENAMED"}

    response = await client.get("/wines/other")
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_update_wine_unchanged_values(client: AsyncClient, sample_wine: dict) -> None:
    """Test an update that changes nothing still succeeds."""
    created = (await client.post("/wines", json=sample_wine)).json()

    response = await client.put(f"/wines/{created['id']}", json={"name": "TEST"})
    assert response.json() == {"name": "TEST", "id": created["id"]}


@pytest.mark.asyncio
async def test_update_wine_unencodable_value(client: AsyncClient, sample_wine: dict) -> None:
    """Test a value MongoDB cannot store yields the update error body."""
    created = (await client.post("/wines", json=sample_wine)).json()
    wine_id = created["id"]

    response = await client.put(f"/wines/{wine_id}", json={"stock": 2**70})
    assert response.status_code == 200
    assert response.json() == {"error": f"An error occurred when updating the wine with id: {wine_id}"}

    response = await client.get(f"/wines/{wine_id}")
    assert response.json() == created


@pytest.mark.asyncio
async def test_update_wine_ignores_mongo_id(client: AsyncClient, sample_wine: dict) -> None:
    """Test an _id in the body is neither stored nor echoed."""
    created = (await client.post("/wines", json=sample_wine)).json()
    wine_id = created["id"]

    response = await client.put(f"/wines/{wine_id}", json={"_id": "x", "year": "2020"})
    assert response.json() == {"year": "2020", "id": wine_id}

    response = await client.get(f"/wines/{wine_id}")
    assert response.json() == {**created, "year": "2020"}


@pytest.mark.asyncio
async def test_update_wine_not_found(client: AsyncClient, store: MongoWineStore) -> None:
    """Test updating a missing wine returns an error and changes nothing."""
    response = await client.put("/wines/missing", json={"name": "GHOST"})
    assert response.status_code == 200
    assert response.json() == {"error": "An error occurred when updating the wine with id: missing"}

    assert await store.collection.count_documents({}) == 0


@pytest.mark.asyncio
async def test_delete_wine(client: AsyncClient, sample_wine: dict) -> None:
    """Test deleting a wine removes it from get and list."""
    created = (await client.post("/wines", json=sample_wine)).json()
    wine_id = created["id"]

    response = await client.delete(f"/wines/{wine_id}")
    assert response.status_code == 200
    assert response.json() == {}

    response = await client.get(f"/wines/{wine_id}")
    assert "error" in response.json()

    response = await client.get("/wines")
    assert response.json() == []


@pytest.mark.asyncio
async def test_delete_wine_echoes_request_body(client: AsyncClient, sample_wine: dict) -> None:
    """Test delete answers with the request body, not the deleted record."""
    created = (await client.post("/wines", json=sample_wine)).json()

    response = await client.request("DELETE", f"/wines/{created['id']}", json={"reason": "empty"})
    assert response.json() == {"reason": "empty"}


@pytest.mark.asyncio
async def test_delete_wine_not_found(seeded_client: AsyncClient, seeded_store: MongoWineStore) -> None:
    """Test deleting a missing wine returns an error and changes nothing."""
    response = await seeded_client.delete("/wines/missing")
    assert response.status_code == 200
    assert response.json() == {"error": "An error occurred when deleting the wine with id: missing"}

    assert await seeded_store.collection.count_documents({}) == len(SAMPLE_WINES)


@pytest.mark.asyncio
async def test_list_wines_store_failure(failing_client: AsyncClient) -> None:
    """Test a failed list is answered with an empty array."""
    response = await failing_client.get("/wines")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_wine_store_failure(failing_client: AsyncClient) -> None:
    """Test a failed get reports the store message."""
    response = await failing_client.get("/wines/abc")
    assert response.json() == {"error": "boom"}


@pytest.mark.asyncio
async def test_add_wine_store_failure(failing_client: AsyncClient, sample_wine: dict) -> None:
    """Test a failed insert reports the store message in parentheses."""
    response = await failing_client.post("/wines", json=sample_wine)
    assert response.json() == {"error": "An error occurred when adding the new wine (boom)"}


@pytest.mark.asyncio
async def test_write_store_failures(failing_client: AsyncClient, failing_store) -> None:
    """Test failed update and delete report the id, one store call each."""
    response = await failing_client.put("/wines/abc", json={"name": "X"})
    assert response.json() == {"error": "An error occurred when updating the wine with id: abc"}

    response = await failing_client.delete("/wines/abc")
    assert response.json() == {"error": "An error occurred when deleting the wine with id: abc"}

    assert failing_store.calls == ["update_wine", "delete_wine"]


@pytest.mark.asyncio
async def test_root_serves_index(client: AsyncClient) -> None:
    """Test the public directory is served at the root."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "Wine Cellar" in response.text

    response = await client.get("/style.css")
    assert response.status_code == 200
    assert "color" in response.text


@pytest.mark.asyncio
async def test_missing_static_file(client: AsyncClient) -> None:
    response = await client.get("/pics/nothing.jpg")
    assert response.status_code == 404
