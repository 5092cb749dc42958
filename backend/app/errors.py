"""Error taxonomy shared by the trip write path and the catalog collaborators.

Every error carries a stable ``kind`` and an HTTP status so the API layer can
render it without inspecting storage diagnostics.
"""


class TravelMateError(Exception):
    """Base class for errors surfaced to API callers."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TravelMateError):
    """Malformed or missing input, detected before any storage access."""

    kind = "validation_error"
    status_code = 400


class NotFoundError(TravelMateError):
    """Referenced entity does not exist."""

    kind = "not_found"
    status_code = 404


class ConflictError(TravelMateError):
    """Uniqueness violation (e.g. destination already saved)."""

    kind = "conflict"
    status_code = 409


class PersistenceError(TravelMateError):
    """Storage-layer failure; the enclosing transaction has been rolled back."""

    kind = "persistence_error"
    status_code = 500
