"""Integration tests for /trips endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration

OWNER = {"Authorization": "Bearer 1"}
OTHER_USER = {"Authorization": "Bearer 2"}

TRIP_BODY = {
    "destination_id": 1,
    "name": "5-Day Goa Beach Vacation",
    "destination_label": "Goa",
    "start_date": "2024-12-15",
    "day_count": 5,
    "budget": {
        "flights": 8000,
        "hotel": 10000,
        "food": 5000,
        "activities": 7000,
        "transport": 3000,
        "misc": 2000,
    },
    "itinerary": {
        "day1": [
            {"name": "Arrive in Goa", "time": "10:00", "estimated_cost": 8000},
            {"name": "Check-in at Hotel", "time": "14:00"},
        ],
        "day2": [{"name": "Water Sports", "time": "09:00", "estimated_cost": 1500}],
    },
    "notes": "Beach-side resort",
}


async def create_trip(client: AsyncClient, body: dict | None = None) -> int:
    """Helper to create a trip as the owner and return its id."""
    response = await client.post("/trips", json=body or TRIP_BODY, headers=OWNER)
    assert response.status_code == 201
    return response.json()["trip_id"]


@pytest.mark.asyncio
async def test_create_and_get_trip(api_client: AsyncClient) -> None:
    trip_id = await create_trip(api_client)

    response = await api_client.get(f"/trips/{trip_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == trip_id
    assert data["user_id"] == 1
    assert data["end_date"] == "2024-12-19"
    assert data["status"] == "planning"
    assert data["budget"]["total"] == 35000.0
    assert data["destination"]["name"] == "Goa"
    assert [(e["name"], e["day_number"], e["order_index"]) for e in data["itinerary"]] == [
        ("Arrive in Goa", 1, 0),
        ("Check-in at Hotel", 1, 1),
        ("Water Sports", 2, 0),
    ]
    assert data["itinerary"][0]["time"] == "10:00:00"
    assert data["itinerary"][1]["estimated_cost"] == 0.0


@pytest.mark.asyncio
async def test_get_is_idempotent(api_client: AsyncClient) -> None:
    trip_id = await create_trip(api_client)

    first = await api_client.get(f"/trips/{trip_id}")
    second = await api_client.get(f"/trips/{trip_id}")

    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_create_requires_auth(api_client: AsyncClient) -> None:
    response = await api_client.post("/trips", json=TRIP_BODY)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_validation_error(api_client: AsyncClient) -> None:
    body = {**TRIP_BODY, "budget": {"hotel": -100}}

    response = await api_client.post("/trips", json=body, headers=OWNER)

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"

    listing = await api_client.get("/trips/user/1")
    assert listing.json() == []


@pytest.mark.asyncio
async def test_create_missing_name(api_client: AsyncClient) -> None:
    body = {key: value for key, value in TRIP_BODY.items() if key != "name"}

    response = await api_client.post("/trips", json=body, headers=OWNER)

    assert response.status_code == 400
    assert response.json() == {"error": "validation_error", "detail": "name is required"}


@pytest.mark.asyncio
async def test_create_bad_day_key(api_client: AsyncClient) -> None:
    body = {**TRIP_BODY, "itinerary": {"someday": [{"name": "A"}]}}

    response = await api_client.post("/trips", json=body, headers=OWNER)

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"day_count": 3_000_000},
        {"destination_label": "x" * 150},
        {"budget": {"flights": 1_000_000_000}},
        {"itinerary": {"day1_0": [{"name": "A"}]}},
    ],
)
async def test_create_out_of_range_input(api_client: AsyncClient, overrides: dict) -> None:
    """Values the schema cannot hold are a 400 and nothing is stored."""
    response = await api_client.post("/trips", json={**TRIP_BODY, **overrides}, headers=OWNER)

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
    assert (await api_client.get("/trips/user/1")).json() == []


@pytest.mark.asyncio
async def test_get_missing_trip(api_client: AsyncClient) -> None:
    response = await api_client.get("/trips/999")

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_list_trips_newest_first(api_client: AsyncClient) -> None:
    first_id = await create_trip(api_client, {**TRIP_BODY, "name": "First"})
    second_id = await create_trip(api_client, {**TRIP_BODY, "name": "Second"})

    response = await api_client.get("/trips/user/1")

    assert response.status_code == 200
    trips = response.json()
    assert [trip["id"] for trip in trips] == [second_id, first_id]
    assert all(len(trip["itinerary"]) == 3 for trip in trips)


@pytest.mark.asyncio
async def test_list_trips_unknown_user_empty(api_client: AsyncClient) -> None:
    response = await api_client.get("/trips/user/4242")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_replace_trip(api_client: AsyncClient) -> None:
    trip_id = await create_trip(api_client)
    body = {
        **TRIP_BODY,
        "name": "Goa, revised",
        "status": "confirmed",
        "itinerary": {"day1": [{"name": "Only activity"}]},
    }

    response = await api_client.put(f"/trips/{trip_id}", json=body, headers=OWNER)

    assert response.status_code == 200
    assert response.json() == {"ok": True}

    data = (await api_client.get(f"/trips/{trip_id}")).json()
    assert data["name"] == "Goa, revised"
    assert data["status"] == "confirmed"
    assert [e["name"] for e in data["itinerary"]] == ["Only activity"]


@pytest.mark.asyncio
async def test_replace_missing_trip(api_client: AsyncClient) -> None:
    response = await api_client.put("/trips/999", json=TRIP_BODY, headers=OWNER)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_replace_other_users_trip(api_client: AsyncClient) -> None:
    trip_id = await create_trip(api_client)

    response = await api_client.put(f"/trips/{trip_id}", json=TRIP_BODY, headers=OTHER_USER)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_trip(api_client: AsyncClient) -> None:
    trip_id = await create_trip(api_client)

    response = await api_client.delete(f"/trips/{trip_id}", headers=OWNER)

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert (await api_client.get(f"/trips/{trip_id}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_other_users_trip(api_client: AsyncClient) -> None:
    trip_id = await create_trip(api_client)

    response = await api_client.delete(f"/trips/{trip_id}", headers=OTHER_USER)

    assert response.status_code == 404
    assert (await api_client.get(f"/trips/{trip_id}")).status_code == 200


@pytest.mark.asyncio
async def test_malformed_body_rejected_by_schema(api_client: AsyncClient) -> None:
    body = {**TRIP_BODY, "day_count": "five"}

    response = await api_client.post("/trips", json=body, headers=OWNER)

    assert response.status_code == 422
