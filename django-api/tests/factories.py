"""Builders for domain records used across tests."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from itertools import count

from marketplace.domain import (
    Booking,
    BookingType,
    Capacity,
    HallManager,
    Money,
    ServiceProvider,
    Status,
)

_clock = count()


def _created_at() -> datetime:
    # Strictly increasing, so newest-first ordering is deterministic.
    return datetime(2024, 1, 1, tzinfo=UTC) + timedelta(seconds=next(_clock))


def make_provider(**overrides) -> ServiceProvider:
    values = {
        "id": "",
        "name": "Rose Decor",
        "email": "rose@example.com",
        "phone": "555-0100",
        "address": "12 Garden Lane",
        "services": ("Decoration", "Flowers"),
        "status": Status.PENDING,
        "created_at": _created_at(),
    }
    values.update(overrides)
    return ServiceProvider(**values)


def make_hall_manager(**overrides) -> HallManager:
    values = {
        "id": "",
        "name": "Asha Menon",
        "email": "asha@example.com",
        "hall_name": "Grand Palace",
        "hall_address": "1 Lake Road",
        "hall_description": "Banquet hall with garden",
        "hall_capacity": Capacity(500),
        "hall_price": Money(Decimal("2500.00")),
        "hall_phone": "555-0199",
        "images": (),
        "status": Status.APPROVED,
        "created_at": _created_at(),
    }
    values.update(overrides)
    return HallManager(**values)


def make_booking(**overrides) -> Booking:
    values = {
        "id": "",
        "booking_type": BookingType.HALL,
        "customer_name": "Priya",
        "email": "priya@example.com",
        "phone": "555-0123",
        "date": "2024-06-01",
        "event_type": "Wedding",
        "guest_count": 200,
        "status": Status.PENDING,
        "created_at": _created_at(),
    }
    values.update(overrides)
    return Booking(**values)
