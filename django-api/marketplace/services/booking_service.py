"""Booking service - customer hall booking submissions.

The availability check reads a snapshot of the venue's bookings and the new
booking is written afterwards. Nothing locks the venue between the two, so
two customers submitting the same date at the same moment can both succeed.
"""

import logging
from dataclasses import dataclass, replace

from marketplace.domain import (
    Booking,
    BookingType,
    BookingWorkflow,
    EntityKind,
    HallManager,
    VenueField,
    VenueKey,
)
from marketplace.domain.errors import InvalidFieldError
from marketplace.domain.value_objects import generate_tracking_id
from marketplace.services import fields
from marketplace.services.dashboards import BookingPage
from marketplace.services.lookup import require, venue_bookings
from marketplace.stores.interfaces import Repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingForm:
    """Customer input for a hall booking, as submitted."""

    customer_name: str
    email: str
    phone: str
    date: str
    guest_count: object
    event_type: str
    additional_requirements: str = ""


class BookingService:
    """Service for the customer booking form."""

    def __init__(
        self,
        repository: Repository,
        workflow: BookingWorkflow,
        tracking_prefix: str = "WB",
    ) -> None:
        self._repository = repository
        self._workflow = workflow
        self._tracking_prefix = tracking_prefix

    def hall_details(self, venue: VenueKey) -> HallManager:
        """Return the hall listing a venue key points at.

        Raises:
            RecordNotFoundError: If there is no such hall.
        """
        return require(self._repository, EntityKind.HALL_MANAGER, venue.value)

    def existing_bookings(self, venue: VenueKey) -> list[Booking]:
        return venue_bookings(self._repository, venue.value)

    def booking_page(self, venue: VenueKey) -> BookingPage:
        hall = self.hall_details(venue)
        return BookingPage(hall=hall, existing_bookings=tuple(self.existing_bookings(venue)))

    def check_date(self, venue: VenueKey, candidate_date: str) -> bool:
        """Return True if the venue is free on the date."""
        return self._workflow.is_date_available(self.existing_bookings(venue), candidate_date)

    def submit(self, venue: VenueKey, form: BookingForm) -> Booking:
        """Validate and store a new pending booking.

        Raises:
            RecordNotFoundError: If the hall does not exist.
            MissingDateError: If no date was chosen.
            InvalidFieldError: If the date or guest count is malformed.
            DateConflictError: If the date is already booked.
        """
        hall = self.hall_details(venue)
        candidate_date = fields.booking_date(form.date) if form.date else form.date
        valid = self._workflow.validate_booking_submission(
            self.existing_bookings(venue), candidate_date, form.guest_count
        )
        if valid.guest_count < 0:
            raise InvalidFieldError("guestCount", "cannot be negative")

        booking = Booking(
            id="",
            booking_type=BookingType.HALL,
            hall_id=venue.value if venue.field == VenueField.HALL_ID else None,
            hall_manager_id=venue.value if venue.field == VenueField.HALL_MANAGER_ID else None,
            tracking_id=generate_tracking_id(self._tracking_prefix),
            hall_name=hall.hall_name or hall.name,
            customer_name=form.customer_name,
            email=form.email,
            phone=form.phone,
            date=valid.date,
            event_type=form.event_type,
            guest_count=valid.guest_count,
            additional_requirements=form.additional_requirements,
            status=valid.status,
            price=hall.hall_price,
            created_at=valid.created_at,
        )
        booking_id = self._repository.create(EntityKind.BOOKING, booking)
        logger.info(
            "Booking %s (%s) requested for %s on %s",
            booking_id,
            booking.tracking_id,
            venue.value,
            booking.date,
        )
        return replace(booking, id=booking_id)
