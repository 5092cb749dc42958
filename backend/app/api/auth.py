"""Minimal auth dependency.

Stub implementation that reads the user id from a bearer token. Token
issuance and verification are handled outside this service.
"""

from typing import Annotated

from fastapi import Header, HTTPException, status

from backend.app.db.context import RequestContext


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_context(
    authorization: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Extract request context from authorization header.

    Accepts ``Bearer <user_id>`` where user_id is a positive integer.

    Args:
        authorization: Authorization header (e.g., "Bearer 42")

    Returns:
        RequestContext for the authenticated user

    Raises:
        HTTPException: 401 if the header is missing or malformed
    """
    if not authorization:
        raise _unauthorized("Missing authorization header")

    if not authorization.startswith("Bearer "):
        raise _unauthorized("Invalid authorization header format")

    token = authorization[7:].strip()  # Strip "Bearer "

    try:
        user_id = int(token)
    except ValueError as e:
        raise _unauthorized("Invalid bearer token (expected user id)") from e

    if user_id < 1:
        raise _unauthorized("Invalid bearer token (expected user id)")

    return RequestContext(user_id=user_id)
