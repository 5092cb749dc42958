"""Statistics endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.catalog import stats
from backend.app.db.engine import get_session
from backend.app.models.catalog import DashboardStatistics, UserStatistics

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/user/{user_id}", response_model=UserStatistics)
async def user_statistics(
    user_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserStatistics:
    """Trip and review statistics for a user."""
    return await stats.get_user_statistics(session, user_id)


@router.get("/dashboard", response_model=DashboardStatistics)
async def dashboard_statistics(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DashboardStatistics:
    """Global counts of users, trips, destinations and reviews."""
    return await stats.get_dashboard_statistics(session)
