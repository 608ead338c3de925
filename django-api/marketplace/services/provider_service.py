"""Provider service - the service provider's profile and bookings."""

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
    ServiceProvider,
)
from marketplace.domain.errors import RecordNotFoundError, UnsupportedActionError
from marketplace.services import fields
from marketplace.services.dashboards import ProviderDashboard
from marketplace.services.lookup import require
from marketplace.stores.interfaces import Repository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "phone", "address", "services")


class ProviderService:
    """Service for the service provider dashboard."""

    def __init__(self, repository: Repository, workflow: BookingWorkflow) -> None:
        self._repository = repository
        self._workflow = workflow

    def get_profile(self, provider_id: str) -> ServiceProvider:
        return require(self._repository, EntityKind.SERVICE_PROVIDER, provider_id)

    def list_bookings(self, provider_id: str) -> list[Booking]:
        return self._repository.list(EntityKind.BOOKING, service_provider_id=provider_id)

    def dashboard(self, provider_id: str) -> ProviderDashboard:
        return ProviderDashboard(
            profile=self.get_profile(provider_id),
            bookings=tuple(self.list_bookings(provider_id)),
        )

    def update_profile(self, provider_id: str, submitted: dict[str, Any]) -> ServiceProvider:
        """Update name, phone, address and offered services.

        Raises:
            RecordNotFoundError: If the provider does not exist.
        """
        profile = self.get_profile(provider_id)
        changes = fields.pick(submitted, PROFILE_FIELDS)
        if "services" in changes:
            changes["services"] = fields.services(changes["services"])
        if changes:
            self._repository.update(EntityKind.SERVICE_PROVIDER, provider_id, changes)
            logger.info("Service provider %s updated profile", provider_id)
        return dataclasses.replace(profile, **changes)

    def toggle_booking(self, provider_id: str, booking_id: str) -> Booking:
        """Flip one of the provider's bookings between pending and completed.

        Raises:
            RecordNotFoundError: If the booking does not exist or is not theirs.
            UnsupportedActionError: If it is not a service booking.
            InvalidTransitionError: If the booking was approved or rejected.
        """
        booking = require(self._repository, EntityKind.BOOKING, booking_id)
        if booking.service_provider_id != provider_id:
            raise RecordNotFoundError(str(EntityKind.BOOKING), booking_id)
        if booking.booking_type != BookingType.SERVICE:
            raise UnsupportedActionError("hall booking", Action.COMPLETE_TOGGLE.value)

        new_status = self._workflow.transition(
            EntityKind.BOOKING, booking.status, Action.COMPLETE_TOGGLE
        )
        changes = {"status": new_status, "updated_at": datetime.now(UTC)}
        self._repository.update(EntityKind.BOOKING, booking_id, changes)
        logger.info("Booking %s status updated to %s", booking_id, new_status)
        return dataclasses.replace(booking, **changes)
