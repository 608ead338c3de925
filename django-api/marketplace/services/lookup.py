from marketplace.domain import Booking, EntityKind, Record, Status, VenueField, is_date_available
from marketplace.domain.errors import DateConflictError, RecordNotFoundError
from marketplace.stores.interfaces import Repository


def require(repository: Repository, kind: EntityKind, record_id: str) -> Record:
    """Return the record or raise RecordNotFoundError."""
    record = repository.get(kind, record_id)
    if record is None:
        raise RecordNotFoundError(str(kind), record_id)
    return record


def venue_bookings(repository: Repository, venue_id: str) -> list[Booking]:
    """Return every booking held against a hall, under either venue field.

    A hall listing is one hallManagers record, and bookings name it by
    ``hall_id`` or by ``hall_manager_id`` depending on the link used.
    """
    bookings: dict[str, Booking] = {}
    for field in VenueField:
        for booking in repository.list(EntityKind.BOOKING, **{field.value: venue_id}):
            bookings[booking.id] = booking
    return sorted(bookings.values(), key=lambda booking: booking.created_at, reverse=True)


def check_venue_date(
    repository: Repository, booking: Booking, new_date: str, new_status: Status
) -> None:
    """Refuse a booking change that would double-book its venue.

    Only moves that put the booking onto a date it did not already hold
    while live are checked: a date change, or leaving ``rejected``.

    Raises:
        DateConflictError: If another live booking holds the date.
    """
    if booking.venue_id is None or new_status == Status.REJECTED:
        return
    if new_date == booking.date and booking.status != Status.REJECTED:
        return
    others = [other for other in venue_bookings(repository, booking.venue_id) if other.id != booking.id]
    if not is_date_available(others, new_date):
        raise DateConflictError(new_date)
