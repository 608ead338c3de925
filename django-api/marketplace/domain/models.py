"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in marketplace/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from marketplace.domain.value_objects import (
    BookingType,
    Capacity,
    EntityKind,
    Money,
    Status,
)

# Statuses a record of each kind may hold.
ALLOWED_STATUSES: dict[EntityKind, frozenset[Status]] = {
    EntityKind.SERVICE_PROVIDER: frozenset(
        {Status.PENDING, Status.APPROVED, Status.REJECTED}
    ),
    EntityKind.HALL_MANAGER: frozenset(
        {Status.PENDING, Status.APPROVED, Status.REJECTED}
    ),
    EntityKind.BOOKING: frozenset(Status),
}


def ordered_unique(values) -> tuple[str, ...]:
    """Drop repeated entries, keeping the first occurrence."""
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class ServiceProvider:
    """Domain representation of a ServiceProvider."""

    id: str
    name: str
    email: str
    phone: str = ""
    address: str = ""
    services: tuple[str, ...] = ()
    status: Status = Status.PENDING
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "services", ordered_unique(self.services))


@dataclass(frozen=True)
class HallManager:
    """Domain representation of a HallManager and the hall it lists."""

    id: str
    name: str
    email: str
    hall_name: str = ""
    hall_address: str = ""
    hall_description: str = ""
    hall_capacity: Capacity = field(default_factory=lambda: Capacity(0))
    hall_price: Money = field(default_factory=lambda: Money(Decimal(0)))
    hall_phone: str = ""
    images: tuple[str, ...] = ()
    status: Status = Status.PENDING
    created_at: datetime | None = None


@dataclass(frozen=True)
class Booking:
    """Domain representation of a hall or service Booking."""

    id: str
    customer_name: str
    date: str
    booking_type: BookingType = BookingType.HALL
    hall_id: str | None = None
    hall_manager_id: str | None = None
    service_provider_id: str | None = None
    tracking_id: str = ""
    hall_name: str = ""
    email: str = ""
    phone: str = ""
    event_type: str = ""
    guest_count: int = 0
    additional_requirements: str = ""
    status: Status = Status.PENDING
    price: Money | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.hall_id and self.hall_manager_id:
            raise ValueError("A booking names either a hall or a hall manager, not both")
        if self.status == Status.COMPLETED and self.booking_type != BookingType.SERVICE:
            raise ValueError("Only service bookings can be completed")

    @property
    def venue_id(self) -> str | None:
        return self.hall_manager_id or self.hall_id


Record = ServiceProvider | HallManager | Booking
