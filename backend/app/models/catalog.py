"""Catalog models - destinations, activities, reviews, saved destinations, users, stats."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from backend.app.models.budget import Amount


class DestinationCategory(str, Enum):
    """Destination category."""

    beach = "beach"
    mountain = "mountain"
    cultural = "cultural"
    adventure = "adventure"
    urban = "urban"
    wildlife = "wildlife"


class DestinationActivity(BaseModel):
    """Popular activity offered at a destination."""

    id: int
    activity_name: str
    activity_type: str
    estimated_cost: Amount
    duration_hours: int
    description: str | None = None


class Destination(BaseModel):
    """Destination catalog entry."""

    id: int
    name: str
    category: DestinationCategory
    country: str
    state: str | None = None
    description: str | None = None
    image_url: str | None = None
    rating: Amount
    duration: str | None = None
    best_time: str | None = None
    avg_cost: Amount
    popular: bool
    latitude: Amount | None = None
    longitude: Amount | None = None


class DestinationListing(Destination):
    """Destination row in a listing, with aggregate counts."""

    activity_count: int = 0
    review_count: int = 0


class Review(BaseModel):
    """User review of a destination."""

    id: int
    user_id: int
    user_name: str
    destination_id: int
    trip_id: int | None = None
    rating: Amount
    review_title: str | None = None
    review_text: str | None = None
    visit_date: date | None = None
    helpful_count: int = 0
    created_at: datetime | None = None


class DestinationDetail(Destination):
    """Destination with its activities and latest reviews."""

    activities: list[DestinationActivity]
    reviews: list[Review]


class ReviewRequest(BaseModel):
    """Payload for adding a review."""

    destination_id: int
    trip_id: int | None = None
    rating: Decimal = Field(..., ge=0, le=5, decimal_places=1)
    review_title: str | None = Field(None, max_length=200)
    review_text: str | None = None
    visit_date: date | None = None


class SavedDestination(Destination):
    """Destination saved by a user."""

    saved_at: datetime | None = None


class UserProfile(BaseModel):
    """Public profile of a user; the password hash is never exposed."""

    id: int
    name: str
    email: str
    phone: str | None = None
    created_at: datetime | None = None


class UserStatistics(BaseModel):
    """Per-user trip and review statistics."""

    user_id: int
    name: str
    email: str
    total_trips: int
    total_budget: Amount
    avg_trip_duration: float | None
    total_reviews: int
    avg_rating_given: float | None


class DashboardStatistics(BaseModel):
    """Global row counts."""

    total_users: int
    total_trips: int
    total_destinations: int
    total_reviews: int
