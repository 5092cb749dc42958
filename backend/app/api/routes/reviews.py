"""Review endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.auth import get_current_context
from backend.app.catalog import reviews
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.models.catalog import Review, ReviewRequest

router = APIRouter(prefix="/reviews", tags=["reviews"])


class CreateReviewResponse(BaseModel):
    """Response for POST /reviews."""

    review_id: int


@router.get("/destination/{destination_id}", response_model=list[Review])
async def list_destination_reviews(
    destination_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[Review]:
    """Reviews of a destination, newest first."""
    return await reviews.list_reviews(session, destination_id)


@router.post("", response_model=CreateReviewResponse, status_code=status.HTTP_201_CREATED)
async def add_review(
    request: ReviewRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CreateReviewResponse:
    """Add a review by the authenticated user."""
    review_id = await reviews.add_review(session, ctx.user_id, request)
    return CreateReviewResponse(review_id=review_id)
