"""Itinerary models - day-grouped activities and their flat, ordered entries.

The caller sends an itinerary as ``{"day1": [...], "day2": [...]}``. Each
activity's position inside its day becomes its ``order_index``, so display
order is a pure function of input order.
"""

import datetime as dt
import re
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from backend.app.errors import ValidationError
from backend.app.models.budget import MAX_AMOUNT, ZERO, Amount, exceeds_max_amount

_DAY_KEY_PREFIX = re.compile(r"^[^\d-]*")
_DAY_NUMBER = re.compile(r"[0-9]+")

# Column limits of trip_itinerary.
MAX_DAY_NUMBER = 2_147_483_647
MAX_ACTIVITY_TEXT_LENGTH = 200


class ActivityDescriptor(BaseModel):
    """One activity as supplied by the caller."""

    name: str | None = None
    time: dt.time | None = None
    notes: str | None = None
    estimated_cost: Decimal | None = None
    location: str | None = None


class ItineraryEntry(BaseModel):
    """Single itinerary row ready for persistence."""

    day_number: int
    order_index: int  # 0-based within the day
    name: str
    time: dt.time | None = None
    notes: str | None = None
    estimated_cost: Amount = ZERO
    location: str | None = None


class StoredItineraryEntry(ItineraryEntry):
    """Itinerary row as read back from storage."""

    id: int
    trip_id: int
    created_at: dt.datetime | None = None


ItineraryPayload = Mapping[str, Sequence[ActivityDescriptor | Mapping[str, Any]]]

E = TypeVar("E", bound=ItineraryEntry)


def parse_day_number(day_key: str) -> int:
    """Extract the day number from a key such as ``day3``.

    The non-numeric prefix is stripped and the remainder must be plain
    ASCII digits naming a day between 1 and ``MAX_DAY_NUMBER``.

    Raises:
        ValidationError: If the remainder is not a day number in range
    """
    remainder = _DAY_KEY_PREFIX.sub("", day_key.strip(), count=1)
    if not _DAY_NUMBER.fullmatch(remainder):
        raise ValidationError(f"invalid itinerary day key: {day_key!r}")

    # Bounds are checked on the digit string so huge keys never reach int().
    digits = remainder.lstrip("0")
    if not digits:
        raise ValidationError(f"itinerary day must be >= 1: {day_key!r}")
    if len(digits) > len(str(MAX_DAY_NUMBER)) or int(digits) > MAX_DAY_NUMBER:
        raise ValidationError(f"itinerary day must be <= {MAX_DAY_NUMBER}: {day_key!r}")

    return int(digits)


def _to_descriptor(
    raw: ActivityDescriptor | Mapping[str, Any], day_key: str, position: int
) -> ActivityDescriptor:
    if isinstance(raw, ActivityDescriptor):
        return raw
    try:
        return ActivityDescriptor.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"invalid activity {day_key}[{position}]") from e


def _check_length(value: str | None, label: str) -> None:
    if value is not None and len(value) > MAX_ACTIVITY_TEXT_LENGTH:
        raise ValidationError(f"{label} exceeds {MAX_ACTIVITY_TEXT_LENGTH} characters")


def build_itinerary_entries(payload: ItineraryPayload | None) -> list[ItineraryEntry]:
    """Flatten an itinerary payload into ordered entries.

    Args:
        payload: Mapping of day key to the activities of that day

    Returns:
        Entries ordered by (day_number, order_index)

    Raises:
        ValidationError: On a bad day key, two keys naming the same day,
            a missing or over-long activity name, an over-long location or an
            estimated cost outside 0..MAX_AMOUNT
    """
    if not payload:
        return []

    seen_days: dict[int, str] = {}
    entries: list[ItineraryEntry] = []

    for day_key, activities in payload.items():
        day_number = parse_day_number(day_key)
        if day_number in seen_days:
            raise ValidationError(
                f"itinerary keys {seen_days[day_number]!r} and {day_key!r} name the same day"
            )
        seen_days[day_number] = day_key

        for position, raw in enumerate(activities):
            activity = _to_descriptor(raw, day_key, position)
            where = f"activity {day_key}[{position}]"

            if not activity.name or not activity.name.strip():
                raise ValidationError(f"{where} requires a name")
            name = activity.name.strip()
            _check_length(name, f"{where} name")
            _check_length(activity.location, f"{where} location")

            cost = activity.estimated_cost if activity.estimated_cost is not None else ZERO
            if cost < 0:
                raise ValidationError(f"{where} cost must be >= 0")
            if exceeds_max_amount(cost):
                raise ValidationError(f"{where} cost must be <= {MAX_AMOUNT}")

            entries.append(
                ItineraryEntry(
                    day_number=day_number,
                    order_index=position,
                    name=name,
                    time=activity.time,
                    notes=activity.notes,
                    estimated_cost=cost,
                    location=activity.location,
                )
            )

    return order_entries(entries)


def order_entries(entries: Iterable[E]) -> list[E]:
    """Sort entries by day number, then order index.

    Stored entries additionally fall back to their id so the result never
    depends on storage iteration order.
    """
    return sorted(
        entries,
        key=lambda entry: (entry.day_number, entry.order_index, getattr(entry, "id", 0)),
    )
