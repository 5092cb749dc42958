"""Destination reviews."""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.catalog.destinations import to_review
from backend.app.db.models import Destination as DestinationDB
from backend.app.db.models import Review as ReviewDB
from backend.app.db.models import Trip as TripDB
from backend.app.db.models import User as UserDB
from backend.app.db.transaction import storage_errors, write_transaction
from backend.app.errors import NotFoundError
from backend.app.models.catalog import Review, ReviewRequest

logger = logging.getLogger(__name__)


async def list_reviews(session: AsyncSession, destination_id: int) -> list[Review]:
    """All reviews of a destination, newest first, with the reviewer's name."""
    with storage_errors("list_reviews"):
        result = await session.execute(
            select(ReviewDB, UserDB.name)
            .join(UserDB, UserDB.id == ReviewDB.user_id)
            .where(ReviewDB.destination_id == destination_id)
            .order_by(ReviewDB.created_at.desc(), ReviewDB.id.desc())
        )
        rows = result.all()

    return [to_review(row[0], row[1]) for row in rows]


async def add_review(session: AsyncSession, user_id: int, request: ReviewRequest) -> int:
    """Add a review written by ``user_id``.

    The destination's rating is reset to the average of all its reviews,
    rounded to one decimal, in the same transaction as the insert.

    Args:
        session: Database session
        user_id: Authenticated reviewer
        request: Review payload

    Returns:
        Id of the new review

    Raises:
        NotFoundError: If the user, destination or referenced trip does not exist
    """
    async with write_transaction(session, "add_review"):
        if await session.get(UserDB, user_id) is None:
            raise NotFoundError(f"User {user_id} not found")
        if await session.get(DestinationDB, request.destination_id) is None:
            raise NotFoundError(f"Destination {request.destination_id} not found")
        if request.trip_id is not None and await session.get(TripDB, request.trip_id) is None:
            raise NotFoundError(f"Trip {request.trip_id} not found")

        review = ReviewDB(
            user_id=user_id,
            destination_id=request.destination_id,
            trip_id=request.trip_id,
            rating=request.rating,
            review_title=request.review_title,
            review_text=request.review_text,
            visit_date=request.visit_date,
        )
        session.add(review)
        await session.flush()
        review_id = review.id

        average = (
            select(func.round(func.avg(ReviewDB.rating), 1))
            .where(ReviewDB.destination_id == request.destination_id)
            .scalar_subquery()
        )
        await session.execute(
            update(DestinationDB)
            .where(DestinationDB.id == request.destination_id)
            .values(rating=average)
        )

    logger.info(f"[add_review] review_id={review_id} destination_id={request.destination_id}")
    return review_id
