"""Structured logging for trip writes."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredTripLogger:
    """Structured logger for trip write operations."""

    def log_write(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        trip_id: int | None = None,
        entry_count: int = 0,
        error_reason: str | None = None,
    ) -> None:
        """Log one trip write with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "trip_id": trip_id,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "entry_count": entry_count,
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Trip write: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
