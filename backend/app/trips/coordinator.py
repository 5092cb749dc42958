"""Trip write coordinator - atomic create, full replace and delete of trips.

A trip and its itinerary rows are always written in one transaction:
readers never see a trip without its intended entries, nor a replaced trip
mixing old and new entries. Validation happens before any storage access.
"""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db import trips as trip_store
from backend.app.db.transaction import write_transaction
from backend.app.errors import NotFoundError, TravelMateError, ValidationError
from backend.app.models.budget import aggregate_budget
from backend.app.models.itinerary import MAX_DAY_NUMBER, build_itinerary_entries
from backend.app.models.trip import (
    MAX_DESTINATION_LABEL_LENGTH,
    MAX_TRIP_NAME_LENGTH,
    TripDraft,
    TripRequest,
    TripStatus,
)
from backend.app.utils.logging import StructuredTripLogger
from backend.app.utils.metrics import PrometheusTripMetrics

logger = logging.getLogger(__name__)

_metrics = PrometheusTripMetrics()
_write_log = StructuredTripLogger()


def _require_text(value: str | None, field_name: str, max_length: int) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required")
    text = value.strip()
    if len(text) > max_length:
        raise ValidationError(f"{field_name} exceeds {max_length} characters")
    return text


def prepare_trip(request: TripRequest) -> TripDraft:
    """Validate a trip request and resolve every derived field.

    - total budget is the sum of the six categories
    - name and destination label must fit their columns
    - end date defaults to start_date + (day_count - 1) days
    - status defaults to planning
    - itinerary entries get their (day_number, order_index) pairs

    Raises:
        ValidationError: If a required field is missing or any value is invalid
    """
    name = _require_text(request.name, "name", MAX_TRIP_NAME_LENGTH)
    destination_label = _require_text(
        request.destination_label, "destination_label", MAX_DESTINATION_LABEL_LENGTH
    )

    if request.start_date is None:
        raise ValidationError("start_date is required")
    if request.day_count is None or request.day_count < 1:
        raise ValidationError("day_count must be >= 1")
    if request.day_count > MAX_DAY_NUMBER:
        raise ValidationError(f"day_count must be <= {MAX_DAY_NUMBER}")

    end_date = request.end_date
    if end_date is None:
        try:
            end_date = request.start_date + timedelta(days=request.day_count - 1)
        except OverflowError as e:
            raise ValidationError("day_count runs past the last representable date") from e
    elif end_date < request.start_date:
        raise ValidationError("end_date must not be before start_date")

    return TripDraft(
        name=name,
        destination_label=destination_label,
        start_date=request.start_date,
        end_date=end_date,
        day_count=request.day_count,
        status=request.status or TripStatus.planning,
        budget=aggregate_budget(request.budget),
        notes=request.notes,
        destination_id=request.destination_id,
        entries=build_itinerary_entries(request.itinerary),
    )


class _WriteObservation:
    """Mutable result slots filled in by the operation being observed."""

    def __init__(self) -> None:
        self.trip_id: int | None = None
        self.entry_count = 0


@asynccontextmanager
async def _observe(operation: str) -> AsyncIterator[_WriteObservation]:
    """Record latency, outcome and a structured log line for one write."""
    observation = _WriteObservation()
    started = time.monotonic()
    outcome = "success"
    reason: str | None = None

    try:
        yield observation
    except TravelMateError as e:
        outcome = e.kind
        reason = e.message
        raise
    except BaseException as e:
        outcome = "aborted"
        reason = type(e).__name__
        raise
    finally:
        elapsed_ms = (time.monotonic() - started) * 1000
        _metrics.record_latency(operation, outcome, elapsed_ms)
        if outcome != "success":
            _metrics.inc_error(operation, outcome)
        _write_log.log_write(
            operation,
            outcome,
            elapsed_ms,
            trip_id=observation.trip_id,
            entry_count=observation.entry_count,
            error_reason=reason,
        )


async def create_trip(session: AsyncSession, owner_id: int, request: TripRequest) -> int:
    """Create a trip and its itinerary as one atomic unit.

    Args:
        session: Request-scoped session with no transaction in progress
        owner_id: Authenticated user who owns the trip
        request: Trip payload

    Returns:
        Storage-assigned trip id

    Raises:
        ValidationError: Invalid request; storage was not touched
        PersistenceError: Storage failure; nothing was persisted
    """
    async with _observe("create_trip") as observation:
        draft = prepare_trip(request)
        observation.entry_count = len(draft.entries)

        async with write_transaction(session, "create_trip"):
            trip_id = await trip_store.insert_trip(session, owner_id=owner_id, draft=draft)
            observation.trip_id = trip_id
            await trip_store.insert_itinerary_entries(session, trip_id, draft.entries)

        return trip_id


async def replace_trip(
    session: AsyncSession,
    trip_id: int,
    request: TripRequest,
    *,
    owner_id: int | None = None,
) -> None:
    """Fully replace a trip's fields and itinerary in one transaction.

    Existing itinerary rows are deleted and the new set inserted, so entry
    ids are not preserved across a replace. ``destination_id`` keeps its
    original value.

    Args:
        session: Request-scoped session with no transaction in progress
        trip_id: Trip to replace
        request: New trip payload
        owner_id: When given, only a trip owned by this user is replaced

    Raises:
        ValidationError: Invalid request; storage was not touched
        NotFoundError: No such trip (for this owner)
        PersistenceError: Storage failure; the previous state is intact
    """
    async with _observe("replace_trip") as observation:
        observation.trip_id = trip_id
        draft = prepare_trip(request)
        observation.entry_count = len(draft.entries)

        async with write_transaction(session, "replace_trip"):
            updated = await trip_store.update_trip(session, trip_id, draft, owner_id=owner_id)
            if updated == 0:
                raise NotFoundError(f"Trip {trip_id} not found")

            await trip_store.delete_itinerary(session, trip_id)
            await trip_store.insert_itinerary_entries(session, trip_id, draft.entries)


async def delete_trip(
    session: AsyncSession, trip_id: int, *, owner_id: int | None = None
) -> None:
    """Delete a trip; its itinerary rows are removed by the cascade.

    Raises:
        NotFoundError: No such trip (for this owner)
        PersistenceError: Storage failure
    """
    async with _observe("delete_trip") as observation:
        observation.trip_id = trip_id

        async with write_transaction(session, "delete_trip"):
            deleted = await trip_store.delete_trip(session, trip_id, owner_id=owner_id)
            if deleted == 0:
                raise NotFoundError(f"Trip {trip_id} not found")

        logger.info(f"[delete_trip] trip_id={trip_id} deleted")
