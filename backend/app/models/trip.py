"""Trip domain models - write requests, validated drafts and assembled reads."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field

from backend.app.models.budget import BudgetBreakdown, BudgetInputs
from backend.app.models.itinerary import ActivityDescriptor, ItineraryEntry, StoredItineraryEntry


class TripStatus(str, Enum):
    """Trip lifecycle status."""

    planning = "planning"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


# Column limits of trips.
MAX_TRIP_NAME_LENGTH = 200
MAX_DESTINATION_LABEL_LENGTH = 100


class TripRequest(BaseModel):
    """Create or full-replace payload for a trip.

    Required fields are checked by the write coordinator rather than here so
    that a missing field is reported as a validation error of the trip itself.
    ``destination_id`` is only honoured on create.
    """

    destination_id: int | None = None
    name: str | None = None
    destination_label: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    day_count: int | None = None
    budget: BudgetInputs = Field(default_factory=BudgetInputs)
    itinerary: dict[str, list[ActivityDescriptor]] | None = None
    status: TripStatus | None = None
    notes: str | None = None


@dataclass(frozen=True)
class TripDraft:
    """Validated trip with every derived field resolved, ready to persist."""

    name: str
    destination_label: str
    start_date: date
    end_date: date
    day_count: int
    status: TripStatus
    budget: BudgetBreakdown
    notes: str | None = None
    destination_id: int | None = None
    entries: list[ItineraryEntry] = field(default_factory=list)


class DestinationSummary(BaseModel):
    """Destination metadata attached to a trip on read."""

    id: int
    name: str
    image_url: str | None = None


class TripWithItinerary(BaseModel):
    """Trip with its ordered itinerary and re-derived budget."""

    id: int
    user_id: int
    destination_id: int | None
    destination: DestinationSummary | None = None
    name: str
    destination_label: str
    start_date: date
    end_date: date | None
    day_count: int
    status: TripStatus
    budget: BudgetBreakdown
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    itinerary: list[StoredItineraryEntry]
