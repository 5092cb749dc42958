"""Dev seeding - demo users, sample destinations and a sample Goa trip.

Run with ``python -m backend.app.db.seed_dev`` after ``alembic upgrade head``.
"""

import asyncio
from datetime import date, time
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.config import get_settings
from backend.app.db.engine import create_async_engine_from_settings
from backend.app.db.models import Destination, DestinationActivity, Trip, User
from backend.app.models.budget import BudgetInputs
from backend.app.models.itinerary import ActivityDescriptor
from backend.app.models.trip import TripRequest
from backend.app.trips.coordinator import create_trip

DEV_USERS = [
    {"name": "Ananya Sharma", "email": "ananya@travelmate.com", "phone": "9876543210"},
    {"name": "Demo User", "email": "demo@travelmate.com", "phone": "9876543211"},
]

DEV_DESTINATIONS = [
    {
        "name": "Goa",
        "category": "beach",
        "state": "Goa",
        "description": "Sun, sand, and sea - the perfect beach paradise with vibrant nightlife",
        "rating": Decimal("4.8"),
        "duration": "3-5 days",
        "best_time": "November to February",
        "avg_cost": Decimal("15000"),
        "popular": True,
        "activities": [
            ("Beach Hopping", "relaxation", 500, 4),
            ("Water Sports", "adventure", 1500, 2),
            ("Fort Exploration", "cultural", 300, 3),
            ("Night Markets", "shopping", 1000, 3),
        ],
    },
    {
        "name": "Manali",
        "category": "mountain",
        "state": "Himachal Pradesh",
        "description": "Breathtaking Himalayan views, adventure activities, and serene landscapes",
        "rating": Decimal("4.7"),
        "duration": "4-6 days",
        "best_time": "March to June",
        "avg_cost": Decimal("18000"),
        "popular": True,
        "activities": [
            ("Rohtang Pass", "sightseeing", 2000, 8),
            ("Solang Valley", "adventure", 1500, 5),
            ("River Rafting", "adventure", 1200, 3),
        ],
    },
    {
        "name": "Jaipur",
        "category": "cultural",
        "state": "Rajasthan",
        "description": "The Pink City - Rich heritage, majestic forts, and royal palaces",
        "rating": Decimal("4.6"),
        "duration": "2-3 days",
        "best_time": "October to March",
        "avg_cost": Decimal("12000"),
        "popular": True,
        "activities": [
            ("Amber Fort", "cultural", 500, 3),
            ("Hawa Mahal", "cultural", 200, 1),
            ("Local Markets", "shopping", 1500, 4),
        ],
    },
    {
        "name": "Ladakh",
        "category": "adventure",
        "state": "Ladakh",
        "description": "Land of high passes - Adventure, monasteries, and stunning landscapes",
        "rating": Decimal("4.9"),
        "duration": "7-10 days",
        "best_time": "May to September",
        "avg_cost": Decimal("35000"),
        "popular": True,
        "activities": [
            ("Pangong Lake", "sightseeing", 3000, 10),
            ("Bike Trip", "adventure", 5000, 10),
            ("Monastery Tour", "cultural", 500, 4),
        ],
    },
    {
        "name": "Kerala",
        "category": "beach",
        "state": "Kerala",
        "description": "Gods Own Country - Backwaters, beaches, and lush greenery",
        "rating": Decimal("4.7"),
        "duration": "5-7 days",
        "best_time": "September to March",
        "avg_cost": Decimal("20000"),
        "popular": False,
        "activities": [],
    },
]


def sample_trip_request(destination_id: int | None) -> TripRequest:
    """The 5-day Goa vacation used to populate a fresh dev database."""
    return TripRequest(
        destination_id=destination_id,
        name="5-Day Goa Beach Vacation",
        destination_label="Goa",
        start_date=date(2024, 12, 15),
        day_count=5,
        budget=BudgetInputs(
            flights=Decimal("8000"),
            hotel=Decimal("10000"),
            food=Decimal("5000"),
            activities=Decimal("7000"),
            transport=Decimal("3000"),
            misc=Decimal("2000"),
        ),
        itinerary={
            "day1": [
                ActivityDescriptor(
                    name="Arrive in Goa",
                    time=time(10, 0),
                    notes="Flight from Delhi",
                    estimated_cost=Decimal("8000"),
                ),
                ActivityDescriptor(
                    name="Check-in at Hotel", time=time(14, 0), notes="Beach-side resort"
                ),
                ActivityDescriptor(
                    name="Beach Walk and Dinner",
                    time=time(18, 0),
                    notes="Baga Beach area",
                    estimated_cost=Decimal("1500"),
                ),
            ],
            "day2": [
                ActivityDescriptor(
                    name="Water Sports",
                    time=time(9, 0),
                    notes="Pre-booked package",
                    estimated_cost=Decimal("1500"),
                ),
                ActivityDescriptor(
                    name="Sunset at Chapora Fort", time=time(17, 0), notes="Photography spot"
                ),
            ],
            "day3": [
                ActivityDescriptor(
                    name="Fort Exploration",
                    time=time(9, 0),
                    notes="Aguada Fort",
                    estimated_cost=Decimal("300"),
                ),
            ],
        },
    )


async def seed_dev_data(session: AsyncSession) -> None:
    """Seed demo users, destinations and one sample trip.

    This function is idempotent - safe to run multiple times. Users are
    matched by email, destinations by name, and the sample trip is only
    created when the first demo user has no trips yet.
    """
    async with session.begin():
        for user_data in DEV_USERS:
            existing = await session.scalar(select(User).where(User.email == user_data["email"]))
            if existing:
                print(f"Dev user already exists: {existing.email}")
                continue

            print(f"Creating dev user {user_data['email']}...")
            session.add(User(password_hash="stub", **user_data))  # Not used in stub auth

        for destination_data in DEV_DESTINATIONS:
            fields = dict(destination_data)
            activities = fields.pop("activities")

            existing_destination = await session.scalar(
                select(Destination).where(Destination.name == fields["name"])
            )
            if existing_destination:
                print(f"Destination already exists: {existing_destination.name}")
                continue

            print(f"Creating destination {fields['name']}...")
            session.add(
                Destination(
                    **fields,
                    activities=[
                        DestinationActivity(
                            activity_name=name,
                            activity_type=activity_type,
                            estimated_cost=Decimal(cost),
                            duration_hours=hours,
                        )
                        for name, activity_type, cost, hours in activities
                    ],
                )
            )

        await session.flush()

        owner = await session.scalar(select(User).where(User.email == DEV_USERS[0]["email"]))
        goa_id = await session.scalar(select(Destination.id).where(Destination.name == "Goa"))
        trip_count = await session.scalar(
            select(func.count(Trip.id)).where(Trip.user_id == owner.id)
        )
        owner_id = owner.id

    if trip_count:
        print(f"Sample trip already exists for user {owner_id}")
    else:
        trip_id = await create_trip(session, owner_id, sample_trip_request(goa_id))
        print(f"Created sample trip {trip_id} for user {owner_id}")

    print("✅ Dev seeding complete")


async def main() -> None:
    engine = create_async_engine_from_settings(get_settings())
    try:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            await seed_dev_data(session)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
