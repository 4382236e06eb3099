"""
tests.test_provinces_api

HTTP round trips through the provinces router.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from province_registry.api.app import create_app


@pytest_asyncio.fixture
async def client(settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


async def _create(client: httpx.AsyncClient, name: str, code: str) -> int:
    r = await client.post("/v1/provinces", json={"province_name": name, "province_code": code})
    assert r.status_code == 200
    return r.json()["id"]


@pytest.mark.asyncio
async def test_save_get_update_delete(client) -> None:
    pid = await _create(client, "山东", "SD")

    r = await client.get(f"/v1/provinces/{pid}")
    assert r.status_code == 200
    assert r.json() == {"id": pid, "province_name": "山东", "province_code": "SD"}

    r = await client.post("/v1/provinces", json={"id": pid, "province_name": "山东省"})
    assert r.status_code == 200
    assert r.json() == {"id": pid, "province_name": "山东省", "province_code": "SD"}

    r = await client.delete(f"/v1/provinces/{pid}")
    assert r.status_code == 204
    r = await client.delete(f"/v1/provinces/{pid}")
    assert r.status_code == 204

    r = await client.get(f"/v1/provinces/{pid}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_list_and_conditional(client) -> None:
    for name, code in [("江西", "JX"), ("浙江", "ZJ"), ("新疆", "XJ"), ("山东", "SD")]:
        await _create(client, name, code)

    r = await client.get("/v1/provinces")
    body = r.json()
    assert body["total"] == 4
    assert body["page"] is None
    assert len(body["items"]) == 4

    r = await client.get("/v1/provinces", params={"page": 2, "rows": 3})
    body = r.json()
    assert [p["province_code"] for p in body["items"]] == ["SD"]
    assert body["pages"] == 2

    r = await client.get("/v1/provinces/conditional")
    assert [p["province_code"] for p in r.json()] == ["XJ", "SD", "JX"]


@pytest.mark.asyncio
async def test_invalid_rows_is_rejected(client) -> None:
    r = await client.get("/v1/provinces", params={"page": 1, "rows": 0})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_save_with_cities(client) -> None:
    payload = {
        "province": {"province_name": "山东", "province_code": "SD"},
        "cities": [{"city_name": "济南"}, {"city_name": "青岛"}],
    }

    r = await client.post("/v1/provinces/with-cities", json=payload)
    body = r.json()
    assert body["committed"] is True
    assert [c["city_name"] for c in body["cities"]] == ["济南", "青岛"]
    assert all(c["p_id"] == body["province_id"] for c in body["cities"])
    assert all(isinstance(c["id"], int) for c in body["cities"])
    r = await client.get(f"/v1/provinces/{body['province_id']}")
    assert r.status_code == 200

    r = await client.post("/v1/provinces/with-cities", json={**payload, "rollback_only": True})
    assert r.json() == {"committed": False, "province_id": None, "cities": []}
    r = await client.get("/v1/provinces")
    assert r.json()["total"] == 1
