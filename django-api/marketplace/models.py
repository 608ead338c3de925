"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Ids are opaque document ids rather than integer keys, and the links between
bookings and the records they name are plain id columns.
"""

import uuid

from django.db import models
from django.utils import timezone


def new_document_id() -> str:
    return uuid.uuid4().hex


class RecordStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    APPROVED = "approved", "Approved"
    REJECTED = "rejected", "Rejected"
    COMPLETED = "completed", "Completed"


class ServiceProvider(models.Model):
    """Persistence model for service providers."""

    id = models.CharField(primary_key=True, max_length=64, default=new_document_id, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=32, blank=True)
    address = models.CharField(max_length=500, blank=True)
    services = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=16, choices=RecordStatus.choices, default=RecordStatus.PENDING
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="marketplace_status_sp_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class HallManager(models.Model):
    """Persistence model for hall managers and the hall they list."""

    id = models.CharField(primary_key=True, max_length=64, default=new_document_id, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    hall_name = models.CharField(max_length=255, blank=True)
    hall_address = models.CharField(max_length=500, blank=True)
    hall_description = models.TextField(blank=True)
    hall_capacity = models.PositiveIntegerField(default=0)
    hall_price = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    hall_phone = models.CharField(max_length=32, blank=True)
    images = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=16, choices=RecordStatus.choices, default=RecordStatus.PENDING
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="marketplace_status_hm_idx"),
        ]

    def __str__(self) -> str:
        return self.hall_name or self.name


class Booking(models.Model):
    """Persistence model for hall and service bookings."""

    class BookingType(models.TextChoices):
        HALL = "hall", "Hall"
        SERVICE = "service", "Service"

    id = models.CharField(primary_key=True, max_length=64, default=new_document_id, editable=False)
    booking_type = models.CharField(
        max_length=16, choices=BookingType.choices, default=BookingType.HALL
    )
    hall_id = models.CharField(max_length=64, null=True, blank=True)
    hall_manager_id = models.CharField(max_length=64, null=True, blank=True)
    service_provider_id = models.CharField(max_length=64, null=True, blank=True)
    tracking_id = models.CharField(max_length=32, blank=True)
    hall_name = models.CharField(max_length=255, blank=True)
    customer_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    date = models.DateField()
    event_type = models.CharField(max_length=64, blank=True)
    guest_count = models.PositiveIntegerField(default=0)
    additional_requirements = models.TextField(blank=True)
    status = models.CharField(
        max_length=16, choices=RecordStatus.choices, default=RecordStatus.PENDING
    )
    price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["hall_id", "date"], name="marketplace_hall_date_idx"),
            models.Index(fields=["hall_manager_id", "date"], name="marketplace_manager_date_idx"),
            models.Index(fields=["service_provider_id"], name="marketplace_provider_idx"),
            models.Index(fields=["status"], name="marketplace_status_bk_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.customer_name} - {self.date}"
