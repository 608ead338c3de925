"""Hall service - the hall manager's listing, images and bookings."""

import dataclasses
import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from marketplace.domain import (
    Action,
    Booking,
    BookingType,
    BookingWorkflow,
    EntityKind,
    HallManager,
    Status,
)
from marketplace.domain.errors import (
    CollaboratorError,
    RecordNotFoundError,
    UnsupportedActionError,
)
from marketplace.services import fields
from marketplace.services.dashboards import HallDashboard
from marketplace.services.lookup import check_venue_date, require, venue_bookings
from marketplace.stores.interfaces import BlobStore, Repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content: bytes


class HallService:
    """Service for the hall manager dashboard."""

    def __init__(
        self,
        repository: Repository,
        blob_store: BlobStore,
        workflow: BookingWorkflow,
        image_prefix: str = "hallImages",
    ) -> None:
        self._repository = repository
        self._blob_store = blob_store
        self._workflow = workflow
        self._image_prefix = image_prefix

    def get_hall(self, manager_id: str) -> HallManager:
        """Return the manager's hall listing.

        Raises:
            RecordNotFoundError: If the hall manager does not exist.
        """
        return require(self._repository, EntityKind.HALL_MANAGER, manager_id)

    def dashboard(self, manager_id: str) -> HallDashboard:
        hall = self.get_hall(manager_id)
        bookings = tuple(
            booking
            for booking in venue_bookings(self._repository, manager_id)
            if booking.booking_type != BookingType.SERVICE
        )
        service_bookings = self._repository.list(
            EntityKind.BOOKING, booking_type=BookingType.SERVICE
        )
        return HallDashboard(
            hall=hall,
            bookings=bookings,
            pending_bookings=tuple(b for b in bookings if b.status == Status.PENDING),
            service_bookings=tuple(service_bookings),
        )

    def update_hall(
        self,
        manager_id: str,
        submitted: dict[str, Any],
        uploads: Sequence[ImageUpload] = (),
        deletion_indices: Iterable[int] = (),
    ) -> HallManager:
        """Update the hall listing and its images.

        Raises:
            RecordNotFoundError: If the hall manager does not exist.
            InvalidFieldError: If capacity or price is negative.
            CollaboratorError: If an upload or the record update fails.
        """
        return self._save_listing(manager_id, fields.hall_changes(submitted), uploads, deletion_indices)

    def update_profile(
        self,
        manager_id: str,
        submitted: dict[str, Any],
        uploads: Sequence[ImageUpload] = (),
        deletion_indices: Iterable[int] = (),
    ) -> HallManager:
        """Same as update_hall, and the manager's own name may change too."""
        changes = fields.hall_changes(submitted)
        changes.update(fields.pick(submitted, ("name",)))
        return self._save_listing(manager_id, changes, uploads, deletion_indices)

    def decide_booking(self, manager_id: str, booking_id: str, action: Action) -> Booking:
        """Approve or reject a booking made for this manager's hall.

        Raises:
            RecordNotFoundError: If the booking does not exist or is for another hall.
            UnsupportedActionError: For anything other than approve or reject.
            DateConflictError: If approving a rejected booking would double-book the hall.
        """
        if action not in (Action.APPROVE, Action.REJECT):
            raise UnsupportedActionError("hall booking", str(action))
        booking = require(self._repository, EntityKind.BOOKING, booking_id)
        if booking.venue_id != manager_id:
            raise RecordNotFoundError(str(EntityKind.BOOKING), booking_id)

        new_status = self._workflow.transition(EntityKind.BOOKING, booking.status, action)
        check_venue_date(self._repository, booking, booking.date, new_status)
        changes = {"status": new_status, "updated_at": datetime.now(UTC)}
        self._repository.update(EntityKind.BOOKING, booking_id, changes)
        logger.info("Hall manager %s set booking %s to %s", manager_id, booking_id, new_status)
        return dataclasses.replace(booking, **changes)

    def _save_listing(
        self,
        manager_id: str,
        changes: dict[str, Any],
        uploads: Sequence[ImageUpload],
        deletion_indices: Iterable[int],
    ) -> HallManager:
        hall = self.get_hall(manager_id)
        deletion_indices = {i for i in deletion_indices if 0 <= i < len(hall.images)}

        uploaded = self._upload_all(manager_id, uploads)
        changes["images"] = self._workflow.merge_image_edits(hall.images, uploaded, deletion_indices)
        try:
            self._repository.update(EntityKind.HALL_MANAGER, manager_id, changes)
        except CollaboratorError:
            self._discard(uploaded)
            raise
        logger.info(
            "Hall %s updated: %d images added, %d removed",
            manager_id,
            len(uploaded),
            len(deletion_indices),
        )

        # URLs may repeat; keep a blob that is still listed at another position.
        kept = set(changes["images"])
        self._discard(
            hall.images[i] for i in sorted(deletion_indices) if hall.images[i] not in kept
        )
        return dataclasses.replace(hall, **changes)

    def _upload_all(self, manager_id: str, uploads: Sequence[ImageUpload]) -> list[str]:
        urls: list[str] = []
        try:
            for upload in uploads:
                path = f"{self._image_prefix}/{manager_id}/{time.time_ns() // 1_000_000}_{upload.filename}"
                urls.append(self._blob_store.upload(path, upload.content))
        except CollaboratorError:
            self._discard(urls)
            raise
        return urls

    def _discard(self, urls: Iterable[str]) -> None:
        # A failed delete leaves an orphaned blob and never fails the caller.
        for url in urls:
            if not self._blob_store.owns(url):
                continue
            try:
                self._blob_store.delete(url)
            except CollaboratorError:
                logger.warning("Could not delete image %s", url, exc_info=True)
