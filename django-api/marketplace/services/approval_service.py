"""Approval service - admin review of providers, hall managers and bookings.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import dataclasses
import logging
from datetime import UTC, datetime
from typing import Any

from marketplace.domain import (
    Action,
    Booking,
    BookingType,
    BookingWorkflow,
    EntityKind,
    Record,
    Status,
)
from marketplace.domain.errors import UnsupportedActionError
from marketplace.services import fields
from marketplace.services.dashboards import AdminDashboard
from marketplace.services.lookup import check_venue_date, require
from marketplace.stores.interfaces import Repository

logger = logging.getLogger(__name__)


class ApprovalService:
    """Service for the admin dashboard."""

    def __init__(self, repository: Repository, workflow: BookingWorkflow) -> None:
        self._repository = repository
        self._workflow = workflow

    def list_pending(self, kind: EntityKind) -> list[Record]:
        """Return records of a kind still waiting for a decision."""
        return self._repository.list(kind, status=Status.PENDING)

    def list_all(self, kind: EntityKind) -> list[Record]:
        return self._repository.list(kind)

    def dashboard(self) -> AdminDashboard:
        return AdminDashboard(
            pending_service_providers=tuple(self.list_pending(EntityKind.SERVICE_PROVIDER)),
            service_providers=tuple(self.list_all(EntityKind.SERVICE_PROVIDER)),
            pending_hall_managers=tuple(self.list_pending(EntityKind.HALL_MANAGER)),
            hall_managers=tuple(self.list_all(EntityKind.HALL_MANAGER)),
            pending_bookings=tuple(self.list_pending(EntityKind.BOOKING)),
            bookings=tuple(self.list_all(EntityKind.BOOKING)),
        )

    def decide(self, kind: EntityKind, record_id: str, action: Action) -> Record:
        """Apply a status action to a record.

        Raises:
            RecordNotFoundError: If the record does not exist.
            InvalidTransitionError: If the action is not allowed from its status.
            UnsupportedActionError: If the action does not apply to the record.
            AlreadyDecidedError: In strict mode, for a record already decided.
            DateConflictError: If reviving a rejected booking would double-book its venue.
        """
        kind = EntityKind(kind)
        record = require(self._repository, kind, record_id)
        if (
            action == Action.COMPLETE_TOGGLE
            and isinstance(record, Booking)
            and record.booking_type != BookingType.SERVICE
        ):
            raise UnsupportedActionError("hall booking", Action.COMPLETE_TOGGLE.value)

        new_status = self._workflow.transition(kind, record.status, action)
        changes: dict[str, Any] = {"status": new_status}
        if isinstance(record, Booking):
            check_venue_date(self._repository, record, record.date, new_status)
            changes["updated_at"] = datetime.now(UTC)
        self._repository.update(kind, record_id, changes)
        logger.info(
            "%s %s moved from %s to %s", kind.label, record_id, record.status, new_status
        )
        return dataclasses.replace(record, **changes)

    def edit(self, kind: EntityKind, record_id: str, submitted: dict[str, Any]) -> Record:
        """Overwrite editable fields of a record from the admin edit form.

        The status field is written directly, as long as it is a status the
        record kind can hold. Moving a booking onto a date, or back out of
        rejected, still has to respect the venue's existing bookings.

        Raises:
            RecordNotFoundError: If the record does not exist.
            InvalidFieldError: If a field value is not acceptable.
            DateConflictError: If an edited booking would double-book its venue.
        """
        kind = EntityKind(kind)
        record = require(self._repository, kind, record_id)

        if kind == EntityKind.SERVICE_PROVIDER:
            changes = fields.pick(submitted, fields.PROVIDER_FIELDS)
            if "services" in changes:
                changes["services"] = fields.services(changes["services"])
        elif kind == EntityKind.HALL_MANAGER:
            changes = fields.hall_changes(submitted)
            changes.update(fields.pick(submitted, ("name", "email")))
        else:
            changes = fields.pick(submitted, fields.BOOKING_FIELDS)
            if "date" in changes:
                changes["date"] = fields.booking_date(changes["date"])

        if "status" in submitted:
            booking_type = record.booking_type if isinstance(record, Booking) else None
            changes["status"] = fields.status(kind, submitted["status"], booking_type)

        if isinstance(record, Booking):
            check_venue_date(
                self._repository,
                record,
                changes.get("date", record.date),
                changes.get("status", record.status),
            )
            changes["updated_at"] = datetime.now(UTC)

        if changes:
            self._repository.update(kind, record_id, changes)
            logger.info("%s %s edited: %s", kind.label, record_id, sorted(changes))
        return dataclasses.replace(record, **changes)

    def delete(self, kind: EntityKind, record_id: str) -> None:
        """Remove a record.

        Raises:
            RecordNotFoundError: If the record does not exist.
        """
        kind = EntityKind(kind)
        require(self._repository, kind, record_id)
        self._repository.delete(kind, record_id)
        logger.info("%s %s deleted", kind.label, record_id)

