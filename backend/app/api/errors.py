"""Exception handlers rendering TravelMate errors as JSON."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.app.errors import TravelMateError

logger = logging.getLogger(__name__)


async def travelmate_error_handler(request: Request, exc: TravelMateError) -> JSONResponse:
    """Render a TravelMateError as ``{"error": kind, "detail": message}``."""
    if exc.status_code >= 500:
        logger.error(f"[{request.method} {request.url.path}] {exc.kind}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.kind, "detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the TravelMateError handler on the app."""
    app.add_exception_handler(TravelMateError, travelmate_error_handler)
