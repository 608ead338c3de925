from marketplace.domain.models import Booking, HallManager, Record, ServiceProvider
from marketplace.domain.value_objects import (
    Action,
    BookingType,
    Capacity,
    EntityKind,
    EventType,
    Money,
    Status,
    VenueField,
    VenueKey,
)
from marketplace.domain.workflow import (
    BookingWorkflow,
    ValidBooking,
    is_date_available,
    merge_image_edits,
    validate_booking_submission,
)

__all__ = [
    "Booking",
    "HallManager",
    "ServiceProvider",
    "Record",
    "Action",
    "BookingType",
    "EntityKind",
    "EventType",
    "Status",
    "VenueField",
    "VenueKey",
    "Money",
    "Capacity",
    "BookingWorkflow",
    "ValidBooking",
    "is_date_available",
    "merge_image_edits",
    "validate_booking_submission",
]
