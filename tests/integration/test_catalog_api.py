"""Integration tests for destination, saved, review and stats endpoints."""

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.app.db.models import Destination, DestinationActivity

pytestmark = pytest.mark.integration

OWNER = {"Authorization": "Bearer 1"}
OTHER_USER = {"Authorization": "Bearer 2"}


@pytest_asyncio.fixture
async def catalog(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Add a few more destinations and Goa activities next to the seeded Goa."""
    async with session_factory() as session:
        session.add_all(
            [
                Destination(
                    id=2,
                    name="Manali",
                    category="mountain",
                    description="Himalayan views",
                    rating=Decimal("4.7"),
                    avg_cost=Decimal("18000"),
                    popular=True,
                ),
                Destination(
                    id=3,
                    name="Kerala",
                    category="beach",
                    description="Backwaters and beaches",
                    rating=Decimal("4.9"),
                    avg_cost=Decimal("20000"),
                    popular=False,
                ),
                DestinationActivity(
                    destination_id=1,
                    activity_name="Water Sports",
                    activity_type="adventure",
                    estimated_cost=Decimal("1500"),
                    duration_hours=2,
                ),
                DestinationActivity(
                    destination_id=1,
                    activity_name="Fort Exploration",
                    activity_type="cultural",
                    estimated_cost=Decimal("300"),
                    duration_hours=3,
                ),
            ]
        )
        await session.commit()


class TestDestinations:
    """Test /destinations endpoints."""

    @pytest.mark.asyncio
    async def test_list_orders_popular_then_rating(
        self, api_client: AsyncClient, catalog: None
    ) -> None:
        response = await api_client.get("/destinations")

        assert response.status_code == 200
        data = response.json()
        assert [d["name"] for d in data] == ["Goa", "Manali", "Kerala"]
        assert data[0]["activity_count"] == 2
        assert data[0]["review_count"] == 0

    @pytest.mark.asyncio
    async def test_list_filters(self, api_client: AsyncClient, catalog: None) -> None:
        beach = (await api_client.get("/destinations", params={"category": "beach"})).json()
        assert [d["name"] for d in beach] == ["Goa", "Kerala"]

        everything = (await api_client.get("/destinations", params={"category": "all"})).json()
        assert len(everything) == 3

        search = (await api_client.get("/destinations", params={"search": "backwater"})).json()
        assert [d["name"] for d in search] == ["Kerala"]

        cheap = (await api_client.get("/destinations", params={"max_cost": 16000})).json()
        assert [d["name"] for d in cheap] == ["Goa"]

        pricey = (await api_client.get("/destinations", params={"min_cost": 18000})).json()
        assert [d["name"] for d in pricey] == ["Manali", "Kerala"]

    @pytest.mark.asyncio
    async def test_popular_only_flagged(self, api_client: AsyncClient, catalog: None) -> None:
        response = await api_client.get("/destinations/popular")

        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Goa", "Manali"]

    @pytest.mark.asyncio
    async def test_detail_with_activities_and_reviews(
        self, api_client: AsyncClient, catalog: None
    ) -> None:
        await api_client.post(
            "/reviews",
            json={"destination_id": 1, "rating": 4.5, "review_title": "Amazing"},
            headers=OWNER,
        )

        response = await api_client.get("/destinations/1")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Goa"
        assert {a["activity_name"] for a in data["activities"]} == {
            "Water Sports",
            "Fort Exploration",
        }
        assert data["reviews"][0]["user_name"] == "Ananya Sharma"
        assert data["reviews"][0]["rating"] == 4.5

    @pytest.mark.asyncio
    async def test_detail_missing(self, api_client: AsyncClient) -> None:
        response = await api_client.get("/destinations/404")

        assert response.status_code == 404


class TestSaved:
    """Test /saved endpoints."""

    @pytest.mark.asyncio
    async def test_save_list_remove(self, api_client: AsyncClient, catalog: None) -> None:
        for destination_id in (2, 1):
            response = await api_client.post(
                "/saved", json={"destination_id": destination_id}, headers=OWNER
            )
            assert response.status_code == 201

        saved = (await api_client.get("/saved", headers=OWNER)).json()
        assert [d["name"] for d in saved] == ["Goa", "Manali"]
        assert saved[0]["saved_at"] is not None

        assert (await api_client.get("/saved", headers=OTHER_USER)).json() == []

        response = await api_client.delete("/saved/1", headers=OWNER)
        assert response.status_code == 200

        saved = (await api_client.get("/saved", headers=OWNER)).json()
        assert [d["name"] for d in saved] == ["Manali"]

    @pytest.mark.asyncio
    async def test_duplicate_save_conflict(self, api_client: AsyncClient) -> None:
        await api_client.post("/saved", json={"destination_id": 1}, headers=OWNER)

        response = await api_client.post("/saved", json={"destination_id": 1}, headers=OWNER)

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    @pytest.mark.asyncio
    async def test_save_unknown_destination(self, api_client: AsyncClient) -> None:
        response = await api_client.post("/saved", json={"destination_id": 77}, headers=OWNER)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self, api_client: AsyncClient) -> None:
        response = await api_client.delete("/saved/1", headers=OWNER)

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_requires_auth(self, api_client: AsyncClient) -> None:
        assert (await api_client.get("/saved")).status_code == 401


class TestReviews:
    """Test /reviews endpoints."""

    @pytest.mark.asyncio
    async def test_add_and_list(self, api_client: AsyncClient) -> None:
        first = await api_client.post(
            "/reviews", json={"destination_id": 1, "rating": 4}, headers=OWNER
        )
        second = await api_client.post(
            "/reviews",
            json={"destination_id": 1, "rating": 5, "review_text": "Loved it"},
            headers=OTHER_USER,
        )

        assert first.status_code == 201
        assert second.status_code == 201

        reviews = (await api_client.get("/reviews/destination/1")).json()
        assert [r["id"] for r in reviews] == [
            second.json()["review_id"],
            first.json()["review_id"],
        ]
        assert reviews[0]["user_name"] == "Rahul Kumar"

    @pytest.mark.asyncio
    async def test_destination_rating_follows_reviews(self, api_client: AsyncClient) -> None:
        """Each new review resets the rating to the rounded average of all reviews."""
        assert (await api_client.get("/destinations/1")).json()["rating"] == 4.8

        await api_client.post("/reviews", json={"destination_id": 1, "rating": 2}, headers=OWNER)
        assert (await api_client.get("/destinations/1")).json()["rating"] == 2.0

        for rating in (4, 4):
            await api_client.post(
                "/reviews", json={"destination_id": 1, "rating": rating}, headers=OTHER_USER
            )

        assert (await api_client.get("/destinations/1")).json()["rating"] == 3.3

    @pytest.mark.asyncio
    async def test_rating_out_of_range(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            "/reviews", json={"destination_id": 1, "rating": 6}, headers=OWNER
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_destination(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            "/reviews", json={"destination_id": 55, "rating": 3}, headers=OWNER
        )

        assert response.status_code == 404


class TestUsers:
    """Test /users endpoints."""

    @pytest.mark.asyncio
    async def test_profile(self, api_client: AsyncClient) -> None:
        response = await api_client.get("/users/2", headers=OWNER)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 2
        assert data["name"] == "Rahul Kumar"
        assert data["email"] == "rahul@example.com"
        assert data["phone"] is None
        assert data["created_at"] is not None
        assert "password_hash" not in data

    @pytest.mark.asyncio
    async def test_unknown_user(self, api_client: AsyncClient) -> None:
        response = await api_client.get("/users/999", headers=OWNER)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_requires_auth(self, api_client: AsyncClient) -> None:
        assert (await api_client.get("/users/1")).status_code == 401


class TestStats:
    """Test /stats endpoints."""

    @pytest.mark.asyncio
    async def test_user_statistics(self, api_client: AsyncClient) -> None:
        trip = {
            "name": "Goa",
            "destination_label": "Goa",
            "start_date": "2024-12-15",
            "budget": {"hotel": 1000},
        }
        await api_client.post("/trips", json={**trip, "day_count": 2}, headers=OWNER)
        await api_client.post("/trips", json={**trip, "day_count": 4}, headers=OWNER)
        await api_client.post(
            "/reviews", json={"destination_id": 1, "rating": 4}, headers=OWNER
        )

        response = await api_client.get("/stats/user/1")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ananya Sharma"
        assert data["total_trips"] == 2
        assert data["total_budget"] == 2000.0
        assert data["avg_trip_duration"] == 3.0
        assert data["total_reviews"] == 1
        assert data["avg_rating_given"] == 4.0

    @pytest.mark.asyncio
    async def test_user_without_activity(self, api_client: AsyncClient) -> None:
        data = (await api_client.get("/stats/user/2")).json()

        assert data["total_trips"] == 0
        assert data["total_budget"] == 0.0
        assert data["avg_trip_duration"] is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, api_client: AsyncClient) -> None:
        assert (await api_client.get("/stats/user/999")).status_code == 404

    @pytest.mark.asyncio
    async def test_dashboard(self, api_client: AsyncClient, catalog: None) -> None:
        response = await api_client.get("/stats/dashboard")

        assert response.status_code == 200
        assert response.json() == {
            "total_users": 2,
            "total_trips": 0,
            "total_destinations": 3,
            "total_reviews": 0,
        }
