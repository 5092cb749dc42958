"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates all tables:
- users
- destinations, destination_activities
- trips, trip_itinerary
- reviews, saved_destinations
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
    )


def upgrade() -> None:
    """Create all tables."""
    # users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(150), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(15), nullable=True),
        sa.Column("profile_image", sa.String(500), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    # destinations table
    op.create_table(
        "destinations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("country", sa.String(100), server_default="India", nullable=False),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("rating", sa.Numeric(2, 1), server_default="0.0", nullable=False),
        sa.Column("duration", sa.String(50), nullable=True),
        sa.Column("best_time", sa.String(100), nullable=True),
        sa.Column("avg_cost", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("popular", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=True),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=True),
        _created_at(),
        sa.CheckConstraint(
            "category IN ('beach', 'mountain', 'cultural', 'adventure', 'urban', 'wildlife')",
            name="ck_destinations_category",
        ),
    )
    op.create_index("idx_destinations_category", "destinations", ["category"])
    op.create_index("idx_destinations_popular", "destinations", ["popular"])
    op.create_index("idx_destinations_name", "destinations", ["name"])

    # destination_activities table
    op.create_table(
        "destination_activities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("destination_id", sa.Integer(), nullable=False),
        sa.Column("activity_name", sa.String(200), nullable=False),
        sa.Column("activity_type", sa.String(20), server_default="sightseeing", nullable=False),
        sa.Column("estimated_cost", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("duration_hours", sa.Integer(), server_default="2", nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["destination_id"], ["destinations.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_destination_activities_destination", "destination_activities", ["destination_id"]
    )

    # trips table (destination_id has no FK)
    op.create_table(
        "trips",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("destination_id", sa.Integer(), nullable=True),
        sa.Column("trip_name", sa.String(200), nullable=False),
        sa.Column("destination_name", sa.String(100), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("num_days", sa.Integer(), server_default="1", nullable=False),
        sa.Column("status", sa.String(20), server_default="planning", nullable=False),
        sa.Column("budget_flights", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("budget_hotel", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("budget_food", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("budget_activities", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("budget_transport", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("budget_misc", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("budget_total", sa.Numeric(12, 2), server_default="0", nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "status IN ('planning', 'confirmed', 'completed', 'cancelled')",
            name="ck_trips_status",
        ),
        sa.CheckConstraint("num_days >= 1", name="ck_trips_num_days"),
    )
    op.create_index("idx_trips_user_created", "trips", ["user_id", "created_at"])
    op.create_index("idx_trips_destination", "trips", ["destination_id"])
    op.create_index("idx_trips_status", "trips", ["status"])

    # trip_itinerary table
    op.create_table(
        "trip_itinerary",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("trip_id", sa.Integer(), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("activity_name", sa.String(200), nullable=False),
        sa.Column("activity_time", sa.Time(), nullable=True),
        sa.Column("activity_notes", sa.Text(), nullable=True),
        sa.Column("estimated_cost", sa.Numeric(10, 2), server_default="0", nullable=False),
        sa.Column("location", sa.String(200), nullable=True),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
        sa.CheckConstraint("day_number >= 1", name="ck_trip_itinerary_day_number"),
        sa.CheckConstraint("estimated_cost >= 0", name="ck_trip_itinerary_cost"),
    )
    op.create_index(
        "idx_trip_itinerary_trip_order", "trip_itinerary", ["trip_id", "day_number", "order_index"]
    )

    # reviews table
    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("destination_id", sa.Integer(), nullable=False),
        sa.Column("trip_id", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Numeric(2, 1), nullable=False),
        sa.Column("review_title", sa.String(200), nullable=True),
        sa.Column("review_text", sa.Text(), nullable=True),
        sa.Column("visit_date", sa.Date(), nullable=True),
        sa.Column("helpful_count", sa.Integer(), server_default="0", nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["destination_id"], ["destinations.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="SET NULL"),
        sa.CheckConstraint("rating >= 0 AND rating <= 5", name="ck_reviews_rating"),
    )
    op.create_index("idx_reviews_destination", "reviews", ["destination_id"])
    op.create_index("idx_reviews_user", "reviews", ["user_id"])

    # saved_destinations table
    op.create_table(
        "saved_destinations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("destination_id", sa.Integer(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["destination_id"], ["destinations.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "destination_id", name="uq_saved_user_destination"),
    )
    op.create_index("idx_saved_destinations_user", "saved_destinations", ["user_id"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("saved_destinations")
    op.drop_table("reviews")
    op.drop_table("trip_itinerary")
    op.drop_table("trips")
    op.drop_table("destination_activities")
    op.drop_table("destinations")
    op.drop_table("users")
