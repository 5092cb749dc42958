"""Destination catalog endpoints."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.catalog import destinations
from backend.app.db.engine import get_session
from backend.app.models.catalog import Destination, DestinationDetail, DestinationListing

router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.get("", response_model=list[DestinationListing])
async def list_destinations(
    session: Annotated[AsyncSession, Depends(get_session)],
    category: Annotated[str | None, Query()] = None,
    search: Annotated[str | None, Query()] = None,
    min_cost: Annotated[Decimal | None, Query(ge=0)] = None,
    max_cost: Annotated[Decimal | None, Query(ge=0)] = None,
) -> list[DestinationListing]:
    """List destinations, optionally filtered.

    Args:
        session: Database session
        category: Category name, or "all"
        search: Substring of name or description
        min_cost: Minimum average cost
        max_cost: Maximum average cost
    """
    return await destinations.list_destinations(
        session, category=category, search=search, min_cost=min_cost, max_cost=max_cost
    )


@router.get("/popular", response_model=list[Destination])
async def list_popular_destinations(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[Destination]:
    """Top popular destinations by rating."""
    return await destinations.list_popular_destinations(session)


@router.get("/{destination_id}", response_model=DestinationDetail)
async def get_destination(
    destination_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DestinationDetail:
    """Destination with activities and its latest reviews."""
    return await destinations.get_destination(session, destination_id)
