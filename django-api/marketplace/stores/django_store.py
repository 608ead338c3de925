"""Django ORM implementation of the Repository."""

import dataclasses
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from django.db import DatabaseError, models, transaction

from marketplace import models as orm
from marketplace.domain import (
    Booking,
    BookingType,
    Capacity,
    EntityKind,
    HallManager,
    Money,
    Record,
    ServiceProvider,
    Status,
)
from marketplace.domain.errors import CollaboratorError, RecordNotFoundError
from marketplace.stores.interfaces import Repository

logger = logging.getLogger(__name__)


def _provider_from_row(row: orm.ServiceProvider) -> ServiceProvider:
    return ServiceProvider(
        id=row.id,
        name=row.name,
        email=row.email,
        phone=row.phone,
        address=row.address,
        services=tuple(row.services or ()),
        status=Status(row.status),
        created_at=row.created_at,
    )


def _hall_manager_from_row(row: orm.HallManager) -> HallManager:
    return HallManager(
        id=row.id,
        name=row.name,
        email=row.email,
        hall_name=row.hall_name,
        hall_address=row.hall_address,
        hall_description=row.hall_description,
        hall_capacity=Capacity(row.hall_capacity),
        hall_price=Money(row.hall_price),
        hall_phone=row.hall_phone,
        images=tuple(row.images or ()),
        status=Status(row.status),
        created_at=row.created_at,
    )


def _booking_from_row(row: orm.Booking) -> Booking:
    return Booking(
        id=row.id,
        booking_type=BookingType(row.booking_type),
        hall_id=row.hall_id,
        hall_manager_id=row.hall_manager_id,
        service_provider_id=row.service_provider_id,
        tracking_id=row.tracking_id,
        hall_name=row.hall_name,
        customer_name=row.customer_name,
        email=row.email,
        phone=row.phone,
        date=row.date.isoformat(),
        event_type=row.event_type,
        guest_count=row.guest_count,
        additional_requirements=row.additional_requirements,
        status=Status(row.status),
        price=Money(row.price) if row.price is not None else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


COLLECTIONS: dict[EntityKind, tuple[type[models.Model], Callable[[Any], Record]]] = {
    EntityKind.SERVICE_PROVIDER: (orm.ServiceProvider, _provider_from_row),
    EntityKind.HALL_MANAGER: (orm.HallManager, _hall_manager_from_row),
    EntityKind.BOOKING: (orm.Booking, _booking_from_row),
}


def _column_value(value: Any) -> Any:
    """Unwrap domain values into what the ORM columns store."""
    if isinstance(value, Money):
        return value.amount
    if isinstance(value, Capacity):
        return value.value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


class DjangoRepository(Repository):
    """Relational-database-backed repository using Django ORM."""

    def _model(self, collection: EntityKind) -> tuple[type[models.Model], Callable[[Any], Record]]:
        return COLLECTIONS[EntityKind(collection)]

    def get(self, collection: EntityKind, record_id: str) -> Record | None:
        model, to_domain = self._model(collection)
        try:
            row = model.objects.filter(pk=record_id).first()
        except DatabaseError as exc:
            raise CollaboratorError("repository", f"get {collection}") from exc
        return to_domain(row) if row is not None else None

    def create(self, collection: EntityKind, record: Record) -> str:
        model, _ = self._model(collection)
        values = {
            field.name: _column_value(getattr(record, field.name))
            for field in dataclasses.fields(record)
        }
        if not values["id"]:
            del values["id"]
        if values.get("created_at") is None:
            values.pop("created_at", None)
        try:
            with transaction.atomic():
                row = model.objects.create(**values)
        except DatabaseError as exc:
            raise CollaboratorError("repository", f"create {collection}") from exc
        logger.debug("Created %s record %s", collection, row.pk)
        return row.pk

    def update(self, collection: EntityKind, record_id: str, changes: dict[str, Any]) -> None:
        model, _ = self._model(collection)
        values = {name: _column_value(value) for name, value in changes.items()}
        try:
            updated = model.objects.filter(pk=record_id).update(**values)
        except DatabaseError as exc:
            raise CollaboratorError("repository", f"update {collection}") from exc
        if not updated:
            raise RecordNotFoundError(str(collection), record_id)

    def delete(self, collection: EntityKind, record_id: str) -> None:
        model, _ = self._model(collection)
        try:
            model.objects.filter(pk=record_id).delete()
        except DatabaseError as exc:
            raise CollaboratorError("repository", f"delete {collection}") from exc

    def list(self, collection: EntityKind, **filters: Any) -> list[Record]:
        model, to_domain = self._model(collection)
        lookups = {name: _column_value(value) for name, value in filters.items()}
        try:
            rows = list(model.objects.filter(**lookups).order_by("-created_at"))
        except DatabaseError as exc:
            raise CollaboratorError("repository", f"list {collection}") from exc
        return [to_domain(row) for row in rows]
