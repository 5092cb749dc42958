"""Saved destinations - a user's bookmarked catalog entries."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.catalog.destinations import to_destination
from backend.app.db.models import Destination as DestinationDB
from backend.app.db.models import SavedDestination as SavedDestinationDB
from backend.app.db.models import User as UserDB
from backend.app.db.transaction import storage_errors, write_transaction
from backend.app.errors import ConflictError, NotFoundError
from backend.app.models.catalog import SavedDestination

logger = logging.getLogger(__name__)


async def list_saved(session: AsyncSession, user_id: int) -> list[SavedDestination]:
    """Destinations saved by a user, most recently saved first."""
    with storage_errors("list_saved"):
        result = await session.execute(
            select(DestinationDB, SavedDestinationDB.created_at)
            .join(SavedDestinationDB, SavedDestinationDB.destination_id == DestinationDB.id)
            .where(SavedDestinationDB.user_id == user_id)
            .order_by(SavedDestinationDB.created_at.desc(), SavedDestinationDB.id.desc())
        )
        rows = result.all()

    return [
        SavedDestination(**to_destination(row[0]).model_dump(), saved_at=row[1])
        for row in rows
    ]


async def save_destination(session: AsyncSession, user_id: int, destination_id: int) -> None:
    """Save a destination for a user.

    Raises:
        NotFoundError: If the user or the destination does not exist
        ConflictError: If the destination is already saved by this user
    """
    async with write_transaction(session, "save_destination"):
        if await session.get(UserDB, user_id) is None:
            raise NotFoundError(f"User {user_id} not found")
        if await session.get(DestinationDB, destination_id) is None:
            raise NotFoundError(f"Destination {destination_id} not found")

        session.add(SavedDestinationDB(user_id=user_id, destination_id=destination_id))
        try:
            await session.flush()
        except IntegrityError as e:
            raise ConflictError("Destination already saved") from e

    logger.info(f"[save_destination] user_id={user_id} destination_id={destination_id}")


async def remove_saved(session: AsyncSession, user_id: int, destination_id: int) -> None:
    """Remove a saved destination; removing one that is not saved is a no-op."""
    async with write_transaction(session, "remove_saved"):
        await session.execute(
            delete(SavedDestinationDB)
            .where(SavedDestinationDB.user_id == user_id)
            .where(SavedDestinationDB.destination_id == destination_id)
            .execution_options(synchronize_session=False)
        )
