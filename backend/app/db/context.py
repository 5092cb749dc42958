"""Request context carrying the authenticated identity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Request context containing the authenticated user.

    Supplied by the auth dependency and trusted as given; used to scope
    writes to the caller's own rows.
    """

    user_id: int
