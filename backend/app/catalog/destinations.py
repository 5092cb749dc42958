"""Destination catalog reads - listing, popular picks and detail."""

from decimal import Decimal

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import Destination as DestinationDB
from backend.app.db.models import DestinationActivity as DestinationActivityDB
from backend.app.db.models import Review as ReviewDB
from backend.app.db.models import User as UserDB
from backend.app.db.transaction import storage_errors
from backend.app.errors import NotFoundError
from backend.app.models.catalog import (
    Destination,
    DestinationActivity,
    DestinationDetail,
    DestinationListing,
    Review,
)

POPULAR_LIMIT = 8
DETAIL_REVIEW_LIMIT = 10


def to_destination(row: DestinationDB) -> Destination:
    """Map a destination row to its API model."""
    return Destination.model_validate(row, from_attributes=True)


def to_review(row: ReviewDB, user_name: str) -> Review:
    """Map a review row and its author's name to the API model."""
    return Review(
        id=row.id,
        user_id=row.user_id,
        user_name=user_name,
        destination_id=row.destination_id,
        trip_id=row.trip_id,
        rating=row.rating,
        review_title=row.review_title,
        review_text=row.review_text,
        visit_date=row.visit_date,
        helpful_count=row.helpful_count,
        created_at=row.created_at,
    )


async def list_destinations(
    session: AsyncSession,
    *,
    category: str | None = None,
    search: str | None = None,
    min_cost: Decimal | None = None,
    max_cost: Decimal | None = None,
) -> list[DestinationListing]:
    """List destinations with activity and review counts.

    Args:
        session: Database session
        category: Exact category filter; "all" or None disables it
        search: Substring matched against name and description
        min_cost: Lower bound on average cost (inclusive)
        max_cost: Upper bound on average cost (inclusive)

    Returns:
        Popular destinations first, then by rating
    """
    activity_count = (
        select(func.count(DestinationActivityDB.id))
        .where(DestinationActivityDB.destination_id == DestinationDB.id)
        .correlate(DestinationDB)
        .scalar_subquery()
    )
    review_count = (
        select(func.count(ReviewDB.id))
        .where(ReviewDB.destination_id == DestinationDB.id)
        .correlate(DestinationDB)
        .scalar_subquery()
    )

    stmt = select(DestinationDB, activity_count, review_count)
    if category and category != "all":
        stmt = stmt.where(DestinationDB.category == category)
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(DestinationDB.name.ilike(pattern), DestinationDB.description.ilike(pattern))
        )
    if min_cost is not None:
        stmt = stmt.where(DestinationDB.avg_cost >= min_cost)
    if max_cost is not None:
        stmt = stmt.where(DestinationDB.avg_cost <= max_cost)

    stmt = stmt.order_by(
        DestinationDB.popular.desc(), DestinationDB.rating.desc(), DestinationDB.id
    )

    with storage_errors("list_destinations"):
        result = await session.execute(stmt)
        rows = result.all()

    return [
        DestinationListing(
            **to_destination(row[0]).model_dump(),
            activity_count=row[1] or 0,
            review_count=row[2] or 0,
        )
        for row in rows
    ]


async def list_popular_destinations(session: AsyncSession) -> list[Destination]:
    """Top-rated destinations flagged as popular."""
    with storage_errors("list_popular_destinations"):
        result = await session.execute(
            select(DestinationDB)
            .where(DestinationDB.popular.is_(True))
            .order_by(DestinationDB.rating.desc(), DestinationDB.id)
            .limit(POPULAR_LIMIT)
        )
        rows = result.scalars().all()

    return [to_destination(row) for row in rows]


async def get_destination(session: AsyncSession, destination_id: int) -> DestinationDetail:
    """Destination with its activities and latest reviews.

    Raises:
        NotFoundError: If the destination does not exist
    """
    with storage_errors("get_destination"):
        destination = await session.get(DestinationDB, destination_id)
        if destination is None:
            raise NotFoundError(f"Destination {destination_id} not found")

        activities = await session.execute(
            select(DestinationActivityDB)
            .where(DestinationActivityDB.destination_id == destination_id)
            .order_by(DestinationActivityDB.activity_type, DestinationActivityDB.id)
        )
        reviews = await session.execute(
            select(ReviewDB, UserDB.name)
            .join(UserDB, UserDB.id == ReviewDB.user_id)
            .where(ReviewDB.destination_id == destination_id)
            .order_by(ReviewDB.created_at.desc(), ReviewDB.id.desc())
            .limit(DETAIL_REVIEW_LIMIT)
        )
        activity_rows = activities.scalars().all()
        review_rows = reviews.all()

    return DestinationDetail(
        **to_destination(destination).model_dump(),
        activities=[
            DestinationActivity.model_validate(row, from_attributes=True)
            for row in activity_rows
        ],
        reviews=[to_review(row[0], row[1]) for row in review_rows],
    )
