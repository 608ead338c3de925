"""Booking availability and approval workflow.

Pure functions over data the caller has already fetched. Nothing here reads
or writes storage; callers pass in a snapshot of existing bookings.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from marketplace.domain.errors import (
    AlreadyDecidedError,
    DateConflictError,
    InvalidTransitionError,
    MissingDateError,
    UnsupportedActionError,
)
from marketplace.domain.models import Booking
from marketplace.domain.value_objects import Action, EntityKind, Status, coerce_int

DECISIONS = {Action.APPROVE: Status.APPROVED, Action.REJECT: Status.REJECTED}
DECIDED = frozenset({Status.APPROVED, Status.REJECTED})
COMPLETION_TOGGLE = {Status.PENDING: Status.COMPLETED, Status.COMPLETED: Status.PENDING}


@dataclass(frozen=True)
class ValidBooking:
    """Accepted submission, ready to be stored as a new booking."""

    date: str
    guest_count: int
    status: Status
    created_at: datetime


def is_date_available(existing_bookings: Iterable[Booking], candidate_date: str | None) -> bool:
    """Return False if a booking that is not rejected already holds the date.

    Dates are compared as plain strings, so callers must use one form
    (``YYYY-MM-DD``). An empty date never conflicts.
    """
    if not candidate_date:
        return True
    return not any(
        booking.date == candidate_date and booking.status != Status.REJECTED
        for booking in existing_bookings
    )


def validate_booking_submission(
    existing_bookings: Iterable[Booking],
    candidate_date: str | None,
    guest_count: object,
    now: datetime | None = None,
) -> ValidBooking:
    """Check a new booking against the venue's existing bookings.

    Raises:
        MissingDateError: If no date was given.
        DateConflictError: If the date is already taken.
    """
    if not candidate_date:
        raise MissingDateError()
    if not is_date_available(existing_bookings, candidate_date):
        raise DateConflictError(candidate_date)
    return ValidBooking(
        date=candidate_date,
        guest_count=coerce_int(guest_count),
        status=Status.PENDING,
        created_at=now or datetime.now(UTC),
    )


def merge_image_edits(
    current_images: Sequence[str],
    newly_uploaded: Sequence[str],
    deletion_indices: Iterable[int],
) -> tuple[str, ...]:
    """Drop images by original position, then append uploads in order."""
    removed = set(deletion_indices)
    kept = [url for index, url in enumerate(current_images) if index not in removed]
    return tuple(kept) + tuple(newly_uploaded)


class BookingWorkflow:
    """Status transition rules for providers, hall managers and bookings.

    With ``strict_redecision`` off, approving or rejecting a record that was
    already decided overwrites its status. With it on, that raises
    AlreadyDecidedError instead.
    """

    def __init__(self, strict_redecision: bool = False) -> None:
        self.strict_redecision = strict_redecision

    is_date_available = staticmethod(is_date_available)
    validate_booking_submission = staticmethod(validate_booking_submission)
    merge_image_edits = staticmethod(merge_image_edits)

    def transition(self, kind: EntityKind, current: Status | str, action: Action | str) -> Status:
        """Return the status that ``action`` moves ``current`` to.

        Raises:
            UnsupportedActionError: If the kind is unknown or the action does
                not apply to it.
            InvalidTransitionError: If the action is not allowed from ``current``.
            AlreadyDecidedError: In strict mode, when re-deciding a record.
        """
        try:
            kind = EntityKind(kind)
        except ValueError:
            raise UnsupportedActionError(str(kind), str(action)) from None
        try:
            action = Action(action)
        except ValueError:
            raise UnsupportedActionError(kind.value, str(action)) from None
        try:
            current = Status(current)
        except ValueError:
            raise InvalidTransitionError(str(current), action.value) from None

        if action in DECISIONS:
            if current == Status.PENDING:
                return DECISIONS[action]
            if current in DECIDED:
                if self.strict_redecision:
                    raise AlreadyDecidedError(current.value)
                return DECISIONS[action]
            raise InvalidTransitionError(current.value, action.value)

        if kind != EntityKind.BOOKING:
            raise UnsupportedActionError(kind.value, action.value)
        if current not in COMPLETION_TOGGLE:
            raise InvalidTransitionError(current.value, action.value)
        return COMPLETION_TOGGLE[current]
