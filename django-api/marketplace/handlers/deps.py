"""Builds services from Django settings for the handlers."""

from typing import Any

from django.conf import settings

from marketplace.domain import BookingWorkflow
from marketplace.services.approval_service import ApprovalService
from marketplace.services.booking_service import BookingService
from marketplace.services.hall_service import HallService
from marketplace.services.provider_service import ProviderService
from marketplace.stores.blob_store import DjangoBlobStore
from marketplace.stores.django_store import DjangoRepository

DEFAULTS = {
    "STRICT_REDECISION": False,
    "HALL_IMAGE_PREFIX": "hallImages",
    "TRACKING_ID_PREFIX": "WB",
}


def marketplace_setting(name: str) -> Any:
    return getattr(settings, "MARKETPLACE", {}).get(name, DEFAULTS[name])


def get_workflow() -> BookingWorkflow:
    return BookingWorkflow(strict_redecision=marketplace_setting("STRICT_REDECISION"))


def approval_service() -> ApprovalService:
    return ApprovalService(DjangoRepository(), get_workflow())


def booking_service() -> BookingService:
    return BookingService(
        DjangoRepository(),
        get_workflow(),
        tracking_prefix=marketplace_setting("TRACKING_ID_PREFIX"),
    )


def hall_service() -> HallService:
    return HallService(
        DjangoRepository(),
        DjangoBlobStore(),
        get_workflow(),
        image_prefix=marketplace_setting("HALL_IMAGE_PREFIX"),
    )


def provider_service() -> ProviderService:
    return ProviderService(DjangoRepository(), get_workflow())
