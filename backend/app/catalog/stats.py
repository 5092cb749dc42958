"""User and dashboard statistics."""

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import Destination as DestinationDB
from backend.app.db.models import Review as ReviewDB
from backend.app.db.models import Trip as TripDB
from backend.app.db.models import User as UserDB
from backend.app.db.transaction import storage_errors
from backend.app.errors import NotFoundError
from backend.app.models.catalog import DashboardStatistics, UserStatistics


def _as_float(value: Decimal | float | None) -> float | None:
    return None if value is None else float(value)


async def get_user_statistics(session: AsyncSession, user_id: int) -> UserStatistics:
    """Trip and review aggregates for one user.

    Trip and review aggregates are computed separately so neither is
    multiplied by the other's row count.

    Raises:
        NotFoundError: If the user does not exist
    """
    with storage_errors("get_user_statistics"):
        user = await session.get(UserDB, user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")

        trips = (
            await session.execute(
                select(
                    func.count(TripDB.id),
                    func.sum(TripDB.budget_total),
                    func.avg(TripDB.num_days),
                ).where(TripDB.user_id == user_id)
            )
        ).one()
        reviews = (
            await session.execute(
                select(func.count(ReviewDB.id), func.avg(ReviewDB.rating)).where(
                    ReviewDB.user_id == user_id
                )
            )
        ).one()

    return UserStatistics(
        user_id=user.id,
        name=user.name,
        email=user.email,
        total_trips=trips[0],
        total_budget=Decimal(str(trips[1])) if trips[1] is not None else Decimal("0"),
        avg_trip_duration=_as_float(trips[2]),
        total_reviews=reviews[0],
        avg_rating_given=_as_float(reviews[1]),
    )


async def get_dashboard_statistics(session: AsyncSession) -> DashboardStatistics:
    """Row counts across the main tables."""
    with storage_errors("get_dashboard_statistics"):
        counts = {}
        for key, column in (
            ("total_users", UserDB.id),
            ("total_trips", TripDB.id),
            ("total_destinations", DestinationDB.id),
            ("total_reviews", ReviewDB.id),
        ):
            counts[key] = await session.scalar(select(func.count(column)))

    return DashboardStatistics(**counts)
