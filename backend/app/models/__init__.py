"""Models package - re-exports for convenience."""

from backend.app.models.budget import (
    BUDGET_CATEGORIES,
    Amount,
    BudgetBreakdown,
    BudgetInputs,
    aggregate_budget,
)
from backend.app.models.catalog import (
    DashboardStatistics,
    Destination,
    DestinationActivity,
    DestinationCategory,
    DestinationDetail,
    DestinationListing,
    Review,
    ReviewRequest,
    SavedDestination,
    UserStatistics,
)
from backend.app.models.itinerary import (
    ActivityDescriptor,
    ItineraryEntry,
    StoredItineraryEntry,
    build_itinerary_entries,
    order_entries,
    parse_day_number,
)
from backend.app.models.trip import (
    DestinationSummary,
    TripDraft,
    TripRequest,
    TripStatus,
    TripWithItinerary,
)

__all__ = [
    "BUDGET_CATEGORIES",
    "ActivityDescriptor",
    "Amount",
    "BudgetBreakdown",
    "BudgetInputs",
    "DashboardStatistics",
    "Destination",
    "DestinationActivity",
    "DestinationCategory",
    "DestinationDetail",
    "DestinationListing",
    "DestinationSummary",
    "ItineraryEntry",
    "Review",
    "ReviewRequest",
    "SavedDestination",
    "StoredItineraryEntry",
    "TripDraft",
    "TripRequest",
    "TripStatus",
    "TripWithItinerary",
    "UserStatistics",
    "aggregate_budget",
    "build_itinerary_entries",
    "order_entries",
    "parse_day_number",
]
