"""User profile lookup."""

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import User as UserDB
from backend.app.db.transaction import storage_errors
from backend.app.errors import NotFoundError
from backend.app.models.catalog import UserProfile


async def get_user_profile(session: AsyncSession, user_id: int) -> UserProfile:
    """Fetch a user's public profile.

    Raises:
        NotFoundError: If the user does not exist
    """
    with storage_errors("get_user_profile"):
        user = await session.get(UserDB, user_id)

    if user is None:
        raise NotFoundError(f"User {user_id} not found")

    return UserProfile(
        id=user.id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        created_at=user.created_at,
    )
