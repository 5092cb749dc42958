"""SQLAlchemy ORM models for the TravelMate schema."""

from datetime import date, datetime, time, timezone
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class User(Base):
    """User account."""

    __tablename__ = "users"
    __table_args__ = (Index("idx_users_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(15), nullable=True)
    profile_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_login: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    trips: Mapped[list["Trip"]] = relationship(
        "Trip", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="user")


class Destination(Base):
    """Destination catalog entry."""

    __tablename__ = "destinations"
    __table_args__ = (
        CheckConstraint(
            "category IN ('beach', 'mountain', 'cultural', 'adventure', 'urban', 'wildlife')",
            name="ck_destinations_category",
        ),
        Index("idx_destinations_category", "category"),
        Index("idx_destinations_popular", "popular"),
        Index("idx_destinations_name", "name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), default="India", nullable=False)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    rating: Mapped[Decimal] = mapped_column(Numeric(2, 1), default=Decimal("0.0"), nullable=False)
    duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    best_time: Mapped[str | None] = mapped_column(String(100), nullable=True)
    avg_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    popular: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 8), nullable=True)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(11, 8), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    activities: Mapped[list["DestinationActivity"]] = relationship(
        "DestinationActivity",
        back_populates="destination",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class DestinationActivity(Base):
    """Popular activity offered at a destination."""

    __tablename__ = "destination_activities"
    __table_args__ = (Index("idx_destination_activities_destination", "destination_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    destination_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False
    )
    activity_name: Mapped[str] = mapped_column(String(200), nullable=False)
    activity_type: Mapped[str] = mapped_column(String(20), default="sightseeing", nullable=False)
    estimated_cost: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), default=Decimal("0"), nullable=False
    )
    duration_hours: Mapped[int] = mapped_column(Integer, default=2, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    destination: Mapped["Destination"] = relationship("Destination", back_populates="activities")


class Trip(Base):
    """Trip table - a user's planned travel with its budget breakdown.

    ``destination_id`` has no foreign key: a trip may reference a
    destination that does not exist (reads outer-join it).
    """

    __tablename__ = "trips"
    __table_args__ = (
        CheckConstraint(
            "status IN ('planning', 'confirmed', 'completed', 'cancelled')",
            name="ck_trips_status",
        ),
        CheckConstraint("num_days >= 1", name="ck_trips_num_days"),
        Index("idx_trips_user_created", "user_id", "created_at"),
        Index("idx_trips_destination", "destination_id"),
        Index("idx_trips_status", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    destination_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    trip_name: Mapped[str] = mapped_column(String(200), nullable=False)
    destination_name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    num_days: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="planning", nullable=False)

    # Budget breakdown
    budget_flights: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    budget_hotel: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    budget_food: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    budget_activities: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    budget_transport: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    budget_misc: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    # Written by the trip coordinator; never accepted from callers
    budget_total: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0, nullable=False)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="trips")
    itinerary: Mapped[list["ItineraryEntry"]] = relationship(
        "ItineraryEntry",
        back_populates="trip",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ItineraryEntry(Base):
    """Trip itinerary row - one activity on one day of a trip."""

    __tablename__ = "trip_itinerary"
    __table_args__ = (
        CheckConstraint("day_number >= 1", name="ck_trip_itinerary_day_number"),
        CheckConstraint("estimated_cost >= 0", name="ck_trip_itinerary_cost"),
        Index("idx_trip_itinerary_trip_order", "trip_id", "day_number", "order_index"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False
    )
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    activity_name: Mapped[str] = mapped_column(String(200), nullable=False)
    activity_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    activity_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimated_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    trip: Mapped["Trip"] = relationship("Trip", back_populates="itinerary")


class Review(Base):
    """User review of a destination."""

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_reviews_rating"),
        Index("idx_reviews_destination", "destination_id"),
        Index("idx_reviews_user", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    destination_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False
    )
    trip_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("trips.id", ondelete="SET NULL"), nullable=True
    )
    rating: Mapped[Decimal] = mapped_column(Numeric(2, 1), nullable=False)
    review_title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    review_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    visit_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    helpful_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="reviews")


class SavedDestination(Base):
    """Destination bookmarked by a user."""

    __tablename__ = "saved_destinations"
    __table_args__ = (
        UniqueConstraint("user_id", "destination_id", name="uq_saved_user_destination"),
        Index("idx_saved_destinations_user", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    destination_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
