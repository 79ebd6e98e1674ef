"""
tests.test_api

HTTP surface: status codes, bodies and error payloads per route.
"""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI
from sqlalchemy import text


async def _seed_aceh(client: httpx.AsyncClient) -> None:
    r = await client.post("/provinces", json={"code": "11", "name": "ACEH"})
    assert r.status_code == 201
    r = await client.post(
        "/regencies", json={"code": "1101", "name": "ACEH SELATAN", "province_id": 1}
    )
    assert r.status_code == 201
    r = await client.post(
        "/districts", json={"code": "110101", "name": "BAKONGAN", "regency_id": 1}
    )
    assert r.status_code == 201
    r = await client.post(
        "/villages", json={"code": "1101012001", "name": "KEUDE BAKONGAN", "district_id": 1}
    )
    assert r.status_code == 201


@pytest.mark.asyncio
async def test_province_lifecycle(client: httpx.AsyncClient) -> None:
    r = await client.post("/provinces", json={"id": None, "code": "11", "name": "ACEH"})
    assert r.status_code == 201
    assert r.json() == {"id": 1}

    r = await client.get("/provinces")
    assert r.status_code == 200
    assert r.json() == [{"id": 1, "code": "11", "name": "ACEH"}]

    r = await client.put("/provinces/1", json={"code": "11", "name": "NANGGROE ACEH"})
    assert r.status_code == 204
    assert r.content == b""

    r = await client.get("/provinces/1")
    assert r.status_code == 200
    assert r.json() == {"id": 1, "code": "11", "name": "NANGGROE ACEH"}

    r = await client.delete("/provinces/1")
    assert r.status_code == 204

    r = await client.get("/provinces/1")
    assert r.status_code == 404
    assert r.json() == {"error": "Province not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "label"),
    [
        ("/provinces/9", "Province"),
        ("/regencies/9", "Regency"),
        ("/districts/9", "District"),
        ("/villages/9", "Village"),
    ],
)
async def test_missing_rows_are_404_for_reads_and_writes(
    client: httpx.AsyncClient, path: str, label: str
) -> None:
    expected = {"error": f"{label} not found"}

    r = await client.get(path)
    assert (r.status_code, r.json()) == (404, expected)

    r = await client.put(path, json={"code": "x", "name": "y"})
    assert (r.status_code, r.json()) == (404, expected)

    r = await client.delete(path)
    assert (r.status_code, r.json()) == (404, expected)


@pytest.mark.asyncio
async def test_children_listings(client: httpx.AsyncClient) -> None:
    await _seed_aceh(client)

    r = await client.get("/provinces/1/regencies")
    assert r.status_code == 200
    assert r.json() == [{"id": 1, "code": "1101", "name": "ACEH SELATAN", "province_id": 1}]

    r = await client.get("/regencies/1/districts")
    assert r.json() == [{"id": 1, "code": "110101", "name": "BAKONGAN", "regency_id": 1}]

    r = await client.get("/districts/1/villages")
    assert r.json() == [
        {"id": 1, "code": "1101012001", "name": "KEUDE BAKONGAN", "district_id": 1}
    ]

    r = await client.get("/provinces/2/regencies")
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
async def test_village_details(client: httpx.AsyncClient) -> None:
    await _seed_aceh(client)

    r = await client.get("/villages/1/details")

    assert r.status_code == 200
    body = r.json()
    assert list(body) == [
        "province_code",
        "province_name",
        "city_code",
        "city_name",
        "region_code",
        "region_name",
        "village_code",
        "village_name",
    ]
    assert list(body.values()) == [
        "11",
        "ACEH",
        "1101",
        "ACEH SELATAN",
        "110101",
        "BAKONGAN",
        "1101012001",
        "KEUDE BAKONGAN",
    ]


@pytest.mark.asyncio
async def test_village_details_missing_link(client: httpx.AsyncClient) -> None:
    await _seed_aceh(client)

    r = await client.delete("/districts/1")
    assert r.status_code == 204

    r = await client.get("/villages/1/details")
    assert r.status_code == 404
    assert r.json() == {"error": "Village not found"}

    # The village row itself is still there.
    r = await client.get("/villages/1")
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_regency_write_routes(client: httpx.AsyncClient) -> None:
    r = await client.post("/regencies", json={"code": "1101", "name": "A", "province_id": 5})
    assert r.json() == {"id": 1}

    r = await client.put("/regencies/1", json={"code": "1102", "name": "B", "province_id": 6})
    assert r.status_code == 204

    r = await client.get("/regencies/1")
    assert r.json() == {"id": 1, "code": "1102", "name": "B", "province_id": 6}

    r = await client.delete("/regencies/1")
    assert r.status_code == 204


@pytest.mark.asyncio
async def test_invalid_body_is_rejected(client: httpx.AsyncClient) -> None:
    r = await client.post("/provinces", json={"code": "11"})
    assert r.status_code == 422

    r = await client.get("/provinces")
    assert r.json() == []


@pytest.mark.asyncio
async def test_storage_failure_is_500_with_cause(app: FastAPI, client: httpx.AsyncClient) -> None:
    async with app.state.store.exclusive() as session:
        await session.execute(text("DROP TABLE provinces"))
        await session.commit()

    r = await client.get("/provinces")
    assert r.status_code == 500
    error = r.json()["error"]
    assert error.startswith("Failed to fetch provinces: ")
    assert "provinces" in error[len("Failed to fetch provinces: ") :]

    r = await client.post("/provinces", json={"code": "11", "name": "ACEH"})
    assert r.status_code == 500
    assert r.json()["error"].startswith("Failed to create province: ")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", f"/provinces/{2**63}"),
        ("DELETE", f"/provinces/{2**63}"),
        ("GET", f"/provinces/{-(2**63) - 1}/regencies"),
        ("GET", f"/villages/{2**63}/details"),
    ],
)
async def test_ids_wider_than_sqlite_integer_are_rejected(
    client: httpx.AsyncClient, method: str, path: str
) -> None:
    r = await client.request(method, path)
    assert r.status_code == 422
    assert r.headers["content-type"].startswith("application/json")


@pytest.mark.asyncio
async def test_largest_sqlite_id_is_a_plain_miss(client: httpx.AsyncClient) -> None:
    r = await client.get(f"/provinces/{2**63 - 1}")
    assert (r.status_code, r.json()) == (404, {"error": "Province not found"})


@pytest.mark.asyncio
async def test_parent_id_wider_than_sqlite_integer_is_rejected(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/regencies", json={"code": "1101", "name": "ACEH SELATAN", "province_id": 2**63}
    )
    assert r.status_code == 422

    r = await client.get("/provinces/1/regencies")
    assert r.json() == []
