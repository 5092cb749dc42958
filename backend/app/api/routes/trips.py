"""Trip endpoints - atomic create/replace/delete and assembled reads."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.auth import get_current_context
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.models.trip import TripRequest, TripWithItinerary
from backend.app.trips import assembler, coordinator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


class CreateTripResponse(BaseModel):
    """Response for POST /trips."""

    trip_id: int


class OkResponse(BaseModel):
    """Acknowledgement for PUT/DELETE /trips/{trip_id}."""

    ok: bool = True


@router.post("", response_model=CreateTripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    request: TripRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CreateTripResponse:
    """Create a trip with its itinerary for the authenticated user.

    Args:
        request: Trip payload
        ctx: Request context (user_id)
        session: Database session

    Returns:
        Id of the new trip
    """
    trip_id = await coordinator.create_trip(session, ctx.user_id, request)
    logger.info(f"[POST /trips] trip_id={trip_id} user_id={ctx.user_id}")
    return CreateTripResponse(trip_id=trip_id)


@router.get("/user/{user_id}", response_model=list[TripWithItinerary])
async def list_user_trips(
    user_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[TripWithItinerary]:
    """List a user's trips, newest first, each with its itinerary."""
    return await assembler.list_trips_by_user(session, user_id)


@router.get("/{trip_id}", response_model=TripWithItinerary)
async def get_trip(
    trip_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TripWithItinerary:
    """Get a trip with its itinerary ordered by day and position."""
    return await assembler.get_trip(session, trip_id)


@router.put("/{trip_id}", response_model=OkResponse)
async def replace_trip(
    trip_id: int,
    request: TripRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OkResponse:
    """Fully replace one of the authenticated user's trips."""
    await coordinator.replace_trip(session, trip_id, request, owner_id=ctx.user_id)
    logger.info(f"[PUT /trips/{trip_id}] replaced by user_id={ctx.user_id}")
    return OkResponse()


@router.delete("/{trip_id}", response_model=OkResponse)
async def delete_trip(
    trip_id: int,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OkResponse:
    """Delete one of the authenticated user's trips together with its itinerary."""
    await coordinator.delete_trip(session, trip_id, owner_id=ctx.user_id)
    return OkResponse()
