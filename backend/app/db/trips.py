"""Storage operations for trips and their itinerary rows.

These helpers issue statements on the caller's session and never commit;
transaction boundaries belong to the trip coordinator.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import Destination, Trip
from backend.app.db.models import ItineraryEntry as ItineraryEntryDB
from backend.app.models.itinerary import ItineraryEntry
from backend.app.models.trip import TripDraft


def _trip_columns(draft: TripDraft) -> dict[str, Any]:
    """Column values shared by insert and full-replace update."""
    return {
        "trip_name": draft.name,
        "destination_name": draft.destination_label,
        "start_date": draft.start_date,
        "end_date": draft.end_date,
        "num_days": draft.day_count,
        "status": draft.status.value,
        "budget_flights": draft.budget.flights,
        "budget_hotel": draft.budget.hotel,
        "budget_food": draft.budget.food,
        "budget_activities": draft.budget.activities,
        "budget_transport": draft.budget.transport,
        "budget_misc": draft.budget.misc,
        "budget_total": draft.budget.total,
        "notes": draft.notes,
    }


async def insert_trip(session: AsyncSession, *, owner_id: int, draft: TripDraft) -> int:
    """Insert a trip row and return its storage-assigned id."""
    trip = Trip(user_id=owner_id, destination_id=draft.destination_id, **_trip_columns(draft))
    session.add(trip)
    await session.flush()
    return trip.id


async def update_trip(
    session: AsyncSession, trip_id: int, draft: TripDraft, *, owner_id: int | None = None
) -> int:
    """Overwrite the mutable columns of a trip.

    Returns:
        Number of rows affected (0 when the trip does not exist or belongs
        to another owner)
    """
    stmt = (
        update(Trip)
        .where(Trip.id == trip_id)
        .values(**_trip_columns(draft), updated_at=datetime.now(timezone.utc))
        .execution_options(synchronize_session=False)
    )
    if owner_id is not None:
        stmt = stmt.where(Trip.user_id == owner_id)

    result = await session.execute(stmt)
    return result.rowcount


async def delete_itinerary(session: AsyncSession, trip_id: int) -> int:
    """Delete every itinerary row of a trip."""
    result = await session.execute(
        delete(ItineraryEntryDB)
        .where(ItineraryEntryDB.trip_id == trip_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def insert_itinerary_entries(
    session: AsyncSession, trip_id: int, entries: list[ItineraryEntry]
) -> None:
    """Insert itinerary rows for a trip, keeping (day_number, order_index) as given."""
    if not entries:
        return

    session.add_all(
        [
            ItineraryEntryDB(
                trip_id=trip_id,
                day_number=entry.day_number,
                order_index=entry.order_index,
                activity_name=entry.name,
                activity_time=entry.time,
                activity_notes=entry.notes,
                estimated_cost=entry.estimated_cost,
                location=entry.location,
            )
            for entry in entries
        ]
    )
    await session.flush()


async def delete_trip(session: AsyncSession, trip_id: int, *, owner_id: int | None = None) -> int:
    """Delete a trip row; its itinerary goes with it through ON DELETE CASCADE."""
    stmt = delete(Trip).where(Trip.id == trip_id).execution_options(synchronize_session=False)
    if owner_id is not None:
        stmt = stmt.where(Trip.user_id == owner_id)

    result = await session.execute(stmt)
    return result.rowcount


async def fetch_trip(
    session: AsyncSession, trip_id: int
) -> tuple[Trip, Destination | None] | None:
    """Fetch a trip with its (possibly missing) destination."""
    result = await session.execute(
        select(Trip, Destination)
        .outerjoin(Destination, Destination.id == Trip.destination_id)
        .where(Trip.id == trip_id)
    )
    row = result.first()
    if row is None:
        return None
    return row[0], row[1]


async def fetch_trips_for_user(
    session: AsyncSession, user_id: int
) -> list[tuple[Trip, Destination | None]]:
    """Fetch a user's trips, most recently created first."""
    result = await session.execute(
        select(Trip, Destination)
        .outerjoin(Destination, Destination.id == Trip.destination_id)
        .where(Trip.user_id == user_id)
        .order_by(Trip.created_at.desc(), Trip.id.desc())
    )
    return [(row[0], row[1]) for row in result.all()]


async def fetch_itinerary(session: AsyncSession, trip_id: int) -> list[ItineraryEntryDB]:
    """Fetch the itinerary rows of a trip ordered by day, then order index."""
    result = await session.execute(
        select(ItineraryEntryDB)
        .where(ItineraryEntryDB.trip_id == trip_id)
        .order_by(
            ItineraryEntryDB.day_number,
            ItineraryEntryDB.order_index,
            ItineraryEntryDB.id,
        )
    )
    return list(result.scalars().all())
