"""Turning raw form fields into domain values for record updates."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from marketplace.domain import BookingType, Capacity, EntityKind, Money, Status
from marketplace.domain.errors import InvalidFieldError
from marketplace.domain.models import ALLOWED_STATUSES, ordered_unique
from marketplace.domain.value_objects import coerce_decimal, coerce_int

PROVIDER_FIELDS = ("name", "email", "phone", "address", "services")
HALL_FIELDS = ("hall_name", "hall_address", "hall_description", "hall_capacity", "hall_price", "hall_phone")
BOOKING_FIELDS = ("customer_name", "email", "phone", "date", "tracking_id")


def pick(fields: Mapping[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    """Keep only the allowed keys that were actually submitted."""
    return {name: fields[name] for name in allowed if name in fields}


def capacity(raw: Any) -> Capacity:
    try:
        return Capacity(coerce_int(raw))
    except ValueError as exc:
        raise InvalidFieldError("hallCapacity", str(exc)) from exc


def price(raw: Any) -> Money:
    try:
        return Money(coerce_decimal(raw))
    except ValueError as exc:
        raise InvalidFieldError("hallPrice", str(exc)) from exc


def services(raw: Any) -> tuple[str, ...]:
    """Accept a list of service names or a comma-separated string."""
    if isinstance(raw, str):
        raw = raw.split(",")
    return ordered_unique(name.strip() for name in raw if name and name.strip())


def booking_date(raw: Any) -> str:
    """Require the canonical ``YYYY-MM-DD`` form used for date comparison."""
    value = str(raw or "").strip()
    # fromisoformat also takes week dates and the compact 20240601 form
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidFieldError("date", f"{value!r} is not a YYYY-MM-DD date") from None
    return parsed.isoformat()


def status(kind: EntityKind, raw: Any, booking_type: BookingType | None = None) -> Status:
    """Validate a status written directly from an edit form."""
    try:
        value = Status(raw)
    except ValueError:
        raise InvalidFieldError("status", f"unknown status {raw!r}") from None
    if value not in ALLOWED_STATUSES[kind]:
        raise InvalidFieldError("status", f"{value} is not allowed here")
    if value == Status.COMPLETED and booking_type != BookingType.SERVICE:
        raise InvalidFieldError("status", "only service bookings can be completed")
    return value


def hall_changes(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Hall listing fields with capacity and price coerced like the forms did."""
    changes = pick(fields, HALL_FIELDS)
    if "hall_capacity" in changes:
        changes["hall_capacity"] = capacity(changes["hall_capacity"])
    if "hall_price" in changes:
        changes["hall_price"] = price(changes["hall_price"])
    return changes
