"""Saved destination endpoints for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.auth import get_current_context
from backend.app.catalog import saved
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.models.catalog import SavedDestination

router = APIRouter(prefix="/saved", tags=["saved"])


class SaveDestinationRequest(BaseModel):
    """Request body for POST /saved."""

    destination_id: int


class OkResponse(BaseModel):
    """Acknowledgement."""

    ok: bool = True


@router.get("", response_model=list[SavedDestination])
async def list_saved(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[SavedDestination]:
    """List the caller's saved destinations, most recent first."""
    return await saved.list_saved(session, ctx.user_id)


@router.post("", response_model=OkResponse, status_code=status.HTTP_201_CREATED)
async def save_destination(
    request: SaveDestinationRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OkResponse:
    """Save a destination.

    Returns 404 for an unknown destination and 409 if it is already saved.
    """
    await saved.save_destination(session, ctx.user_id, request.destination_id)
    return OkResponse()


@router.delete("/{destination_id}", response_model=OkResponse)
async def remove_saved(
    destination_id: int,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OkResponse:
    """Remove a destination from the caller's saved list."""
    await saved.remove_saved(session, ctx.user_id, destination_id)
    return OkResponse()
