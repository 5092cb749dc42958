"""Transaction scoping and storage error translation."""

import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.errors import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into PersistenceError.

    Driver diagnostics are logged, never surfaced to the caller.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"[{operation}] storage failure: {type(e).__name__}", exc_info=True)
        raise PersistenceError(f"{operation} failed") from e


@asynccontextmanager
async def write_transaction(session: AsyncSession, operation: str) -> AsyncIterator[AsyncSession]:
    """Run one unit of work in a single transaction.

    Commits when the block exits normally. Any exception, including
    cancellation of the awaiting task, rolls the whole transaction back
    before it propagates.

    Args:
        session: Request-scoped session with no transaction in progress
        operation: Name used in logs and in the PersistenceError message

    Yields:
        The same session, inside the open transaction
    """
    with storage_errors(operation):
        async with session.begin():
            yield session
