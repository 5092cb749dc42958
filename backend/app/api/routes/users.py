"""User profile endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.auth import get_current_context
from backend.app.catalog import users
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.models.catalog import UserProfile

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: int,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserProfile:
    """Profile of any user; requires an authenticated caller."""
    return await users.get_user_profile(session, user_id)
