"""Trip read assembler - a trip plus its ordered itinerary as one value."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db import trips as trip_store
from backend.app.db.models import Destination as DestinationDB
from backend.app.db.models import ItineraryEntry as ItineraryEntryDB
from backend.app.db.models import Trip as TripDB
from backend.app.db.transaction import storage_errors
from backend.app.errors import NotFoundError
from backend.app.models.budget import BudgetInputs, aggregate_budget
from backend.app.models.itinerary import StoredItineraryEntry, order_entries
from backend.app.models.trip import DestinationSummary, TripStatus, TripWithItinerary

logger = logging.getLogger(__name__)


def _to_entry(row: ItineraryEntryDB) -> StoredItineraryEntry:
    return StoredItineraryEntry(
        id=row.id,
        trip_id=row.trip_id,
        day_number=row.day_number,
        order_index=row.order_index,
        name=row.activity_name,
        time=row.activity_time,
        notes=row.activity_notes,
        estimated_cost=row.estimated_cost,
        location=row.location,
        created_at=row.created_at,
    )


def _to_trip(
    trip: TripDB,
    destination: DestinationDB | None,
    entries: list[ItineraryEntryDB],
) -> TripWithItinerary:
    # Total is recomputed from the stored categories, not read back.
    budget = aggregate_budget(
        BudgetInputs(
            flights=trip.budget_flights,
            hotel=trip.budget_hotel,
            food=trip.budget_food,
            activities=trip.budget_activities,
            transport=trip.budget_transport,
            misc=trip.budget_misc,
        )
    )
    if trip.budget_total is not None and trip.budget_total != budget.total:
        logger.warning(
            f"[get_trip] trip_id={trip.id} stored total {trip.budget_total} "
            f"differs from category sum {budget.total}"
        )

    summary = None
    if destination is not None:
        summary = DestinationSummary(
            id=destination.id, name=destination.name, image_url=destination.image_url
        )

    return TripWithItinerary(
        id=trip.id,
        user_id=trip.user_id,
        destination_id=trip.destination_id,
        destination=summary,
        name=trip.trip_name,
        destination_label=trip.destination_name,
        start_date=trip.start_date,
        end_date=trip.end_date,
        day_count=trip.num_days,
        status=TripStatus(trip.status),
        budget=budget,
        notes=trip.notes,
        created_at=trip.created_at,
        updated_at=trip.updated_at,
        itinerary=order_entries(_to_entry(row) for row in entries),
    )


async def get_trip(session: AsyncSession, trip_id: int) -> TripWithItinerary:
    """Fetch a trip with its itinerary ordered by (day_number, order_index).

    A trip whose destination no longer exists is still returned, with
    ``destination`` set to None.

    Raises:
        NotFoundError: If the trip does not exist
        PersistenceError: On storage failure
    """
    with storage_errors("get_trip"):
        found = await trip_store.fetch_trip(session, trip_id)
        if found is None:
            raise NotFoundError(f"Trip {trip_id} not found")

        trip, destination = found
        entries = await trip_store.fetch_itinerary(session, trip_id)

    return _to_trip(trip, destination, entries)


async def list_trips_by_user(session: AsyncSession, user_id: int) -> list[TripWithItinerary]:
    """All trips of a user, most recently created first, each with its itinerary.

    An unknown user simply has no trips.
    """
    with storage_errors("list_trips_by_user"):
        rows = await trip_store.fetch_trips_for_user(session, user_id)
        trips = []
        for trip, destination in rows:
            entries = await trip_store.fetch_itinerary(session, trip.id)
            trips.append(_to_trip(trip, destination, entries))

    return trips
