import pytest
from httpx import AsyncClient

from src.domain.base import MAX_ID


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_list_hives(client: AsyncClient, seeded):
    response = await client.get("/api/hives")

    assert response.status_code == 200
    hives = response.json()
    assert len(hives) == 13
    assert hives[0]["code"] == "H01"
    assert hives[0]["is_deleted"] is False


@pytest.mark.asyncio
async def test_get_hive(client: AsyncClient, seeded):
    response = await client.get("/api/hives/2")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 2
    assert data["address"] == "2 Orchard Road"


@pytest.mark.asyncio
async def test_get_missing_hive(client: AsyncClient, seeded):
    response = await client.get("/api/hives/999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize("hive_id", [0, -3])
async def test_ids_below_one_are_bad_requests(client: AsyncClient, seeded, hive_id):
    get_response = await client.get(f"/api/hives/{hive_id}")
    put_response = await client.put(
        f"/api/hives/{hive_id}", json={"code": "H99", "name": "Nope"}
    )
    status_response = await client.put(f"/api/hives/{hive_id}/status/true")
    delete_response = await client.delete(f"/api/hives/{hive_id}")

    for response in (get_response, put_response, status_response, delete_response):
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"


@pytest.mark.asyncio
async def test_ids_beyond_integer_range_are_bad_requests(client: AsyncClient, seeded):
    hive_id = MAX_ID + 1

    get_response = await client.get(f"/api/hives/{hive_id}")
    sections_response = await client.get(f"/api/hives/{hive_id}/sections")
    status_response = await client.put(f"/api/hives/{hive_id}/status/true")
    delete_response = await client.delete(f"/api/hives/{hive_id}")

    for response in (get_response, sections_response, status_response, delete_response):
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"

    largest = await client.get(f"/api/hives/{MAX_ID}")
    assert largest.status_code == 404


@pytest.mark.asyncio
async def test_non_numeric_id_is_bad_request(client: AsyncClient, seeded):
    response = await client.get("/api/hives/abc")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REQUEST"


@pytest.mark.asyncio
async def test_create_hive(client: AsyncClient, seeded):
    response = await client.post(
        "/api/hives", json={"code": "NEW", "name": "New hive", "address": "Quay 1"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 14
    assert data["code"] == "NEW"
    assert response.headers["location"] == "/api/hives/14"

    fetched = await client.get(response.headers["location"])
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "New hive"


@pytest.mark.asyncio
async def test_create_hive_with_live_code(client: AsyncClient, seeded):
    response = await client.post("/api/hives", json={"code": "H01", "name": "Again"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CODE_CONFLICT"


@pytest.mark.asyncio
async def test_create_hive_without_body(client: AsyncClient, seeded):
    response = await client.post("/api/hives")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REQUEST"


@pytest.mark.asyncio
async def test_create_hive_with_too_long_code(client: AsyncClient, seeded):
    response = await client.post("/api/hives", json={"code": "TOOLONG", "name": "Hive"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_hive(client: AsyncClient, seeded):
    response = await client.put(
        "/api/hives/1", json={"code": "H01", "name": "Renamed", "address": "Dock 9"}
    )

    assert response.status_code == 204
    fetched = (await client.get("/api/hives/1")).json()
    assert fetched["name"] == "Renamed"
    assert fetched["address"] == "Dock 9"


@pytest.mark.asyncio
async def test_update_hive_conflict(client: AsyncClient, seeded):
    response = await client.put("/api/hives/1", json={"code": "H02", "name": "Hive 1"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_missing_hive(client: AsyncClient, seeded):
    response = await client.put("/api/hives/999", json={"code": "H01", "name": "Ghost"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_soft_delete_and_restore(client: AsyncClient, seeded):
    deleted = await client.put("/api/hives/5/status/true")
    repeated = await client.put("/api/hives/5/status/true")

    assert deleted.status_code == 204
    assert repeated.status_code == 204
    assert (await client.get("/api/hives/5")).json()["is_deleted"] is True

    restored = await client.put("/api/hives/5/status/false")

    assert restored.status_code == 204
    assert (await client.get("/api/hives/5")).json()["is_deleted"] is False


@pytest.mark.asyncio
async def test_set_status_missing_hive(client: AsyncClient, seeded):
    response = await client.put("/api/hives/999/status/true")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_purge_live_hive_conflicts(client: AsyncClient, seeded):
    response = await client.delete("/api/hives/1")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "NOT_SOFT_DELETED"


@pytest.mark.asyncio
async def test_purge_hive(client: AsyncClient, seeded):
    await client.put("/api/hives/1/status/true")

    response = await client.delete("/api/hives/1")

    assert response.status_code == 204
    assert (await client.get("/api/hives/1")).status_code == 404
    assert len((await client.get("/api/hives")).json()) == 12


@pytest.mark.asyncio
async def test_purge_hive_with_live_sections(client: AsyncClient, seeded):
    await client.put("/api/hives/2/status/true")

    response = await client.delete("/api/hives/2")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "HAS_LIVE_CHILDREN"


@pytest.mark.asyncio
async def test_purge_missing_hive(client: AsyncClient, seeded):
    response = await client.delete("/api/hives/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_sections_of_hive(client: AsyncClient, seeded):
    response = await client.get("/api/hives/3/sections")

    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == [2, 5]

    unknown = await client.get("/api/hives/999/sections")
    assert unknown.status_code == 200
    assert unknown.json() == []
