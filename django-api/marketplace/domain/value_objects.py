"""Domain primitives that enforce validity at creation time."""

import re
import secrets
import string
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Self

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_DECIMAL_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

TRACKING_ALPHABET = string.ascii_uppercase + string.digits


class Status(StrEnum):
    """Lifecycle status shared by every approvable record."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class EntityKind(StrEnum):
    """Approvable record kinds, valued by their collection name."""

    SERVICE_PROVIDER = "serviceProviders"
    HALL_MANAGER = "hallManagers"
    BOOKING = "bookings"

    @classmethod
    def _missing_(cls, value):
        # Accept the singular record name, e.g. "hallManager".
        for member in cls:
            if member.value == f"{value}s":
                return member
        return None

    @property
    def label(self) -> str:
        return {
            EntityKind.SERVICE_PROVIDER: "Service provider",
            EntityKind.HALL_MANAGER: "Wedding hall manager",
            EntityKind.BOOKING: "Booking",
        }[self]


class Action(StrEnum):
    APPROVE = "approve"
    REJECT = "reject"
    COMPLETE_TOGGLE = "completeToggle"


class BookingType(StrEnum):
    HALL = "hall"
    SERVICE = "service"


class EventType(StrEnum):
    WEDDING = "Wedding"
    RECEPTION = "Reception"
    ENGAGEMENT = "Engagement"
    BIRTHDAY = "Birthday"
    CORPORATE = "Corporate"
    OTHER = "Other"


class VenueField(StrEnum):
    """Booking field that names the venue a hall booking is made against."""

    HALL_ID = "hall_id"
    HALL_MANAGER_ID = "hall_manager_id"


@dataclass(frozen=True)
class VenueKey:
    """Venue a hall booking is made against."""

    field: VenueField
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Venue id cannot be empty")

    @classmethod
    def for_hall_manager(cls, hall_manager_id: str) -> Self:
        return cls(field=VenueField.HALL_MANAGER_ID, value=hall_manager_id)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


def coerce_int(raw: object) -> int:
    """Read a form value as an integer, defaulting to 0 when it is not one.

    Only the leading integer is read, so ``"12 guests"`` gives 12 and
    ``"3.7"`` gives 3.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, (float, Decimal)):
        try:
            return int(raw)
        except (ValueError, OverflowError, InvalidOperation):
            return 0
    match = _INT_PREFIX.match(str(raw if raw is not None else ""))
    return int(match.group(1)) if match else 0


def coerce_decimal(raw: object) -> Decimal:
    """Read a form value as a decimal, defaulting to 0 when it is not one."""
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else Decimal(0)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return Decimal(raw)
    match = _DECIMAL_PREFIX.match(str(raw if raw is not None else ""))
    if not match:
        return Decimal(0)
    try:
        value = Decimal(match.group(1))
    except InvalidOperation:
        return Decimal(0)
    return value if value.is_finite() else Decimal(0)


def generate_tracking_id(prefix: str = "WB") -> str:
    """Return a booking tracking id like ``WB-7K2M9QXA``."""
    suffix = "".join(secrets.choice(TRACKING_ALPHABET) for _ in range(8))
    return f"{prefix}-{suffix}"
