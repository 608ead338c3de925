"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from marketplace.domain import EntityKind, Status, VenueField, VenueKey
from marketplace.domain.errors import DomainError, ErrorCode
from marketplace.handlers import deps
from marketplace.handlers.serializers import (
    AdminDashboardSerializer,
    BookingEditSerializer,
    BookingPageSerializer,
    BookingSerializer,
    BookingSubmissionSerializer,
    HallDashboardSerializer,
    HallManagerEditSerializer,
    HallManagerSerializer,
    HallProfileSerializer,
    HallUpdateSerializer,
    ProviderDashboardSerializer,
    ProviderProfileSerializer,
    ServiceProviderEditSerializer,
    ServiceProviderSerializer,
)
from marketplace.services.booking_service import BookingForm
from marketplace.services.hall_service import ImageUpload

logger = logging.getLogger(__name__)

HTTP_STATUS_BY_CODE = {
    ErrorCode.MISSING_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRANSITION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNSUPPORTED_ACTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RECORD_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DATE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_DECIDED: status.HTTP_409_CONFLICT,
    ErrorCode.COLLABORATOR_ERROR: status.HTTP_502_BAD_GATEWAY,
}

RECORD_SERIALIZERS = {
    EntityKind.SERVICE_PROVIDER: ServiceProviderSerializer,
    EntityKind.HALL_MANAGER: HallManagerSerializer,
    EntityKind.BOOKING: BookingSerializer,
}

EDIT_SERIALIZERS = {
    EntityKind.SERVICE_PROVIDER: ServiceProviderEditSerializer,
    EntityKind.HALL_MANAGER: HallManagerEditSerializer,
    EntityKind.BOOKING: BookingEditSerializer,
}


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=HTTP_STATUS_BY_CODE[error.code],
    )


def parse_kind(kind: str) -> EntityKind:
    try:
        return EntityKind(kind)
    except ValueError:
        raise NotFound() from None


def venue_from_request(request: Request, hall_id: str) -> VenueKey:
    """Resolve the venue the same way the booking page link does (?isManager=true)."""
    is_manager = request.query_params.get("isManager") == "true"
    field = VenueField.HALL_MANAGER_ID if is_manager else VenueField.HALL_ID
    return VenueKey(field=field, value=hall_id)


def uploads_from(files) -> list[ImageUpload]:
    return [ImageUpload(filename=f.name, content=f.read()) for f in files]


class MarketplaceView(APIView):
    """Base view that turns domain errors into JSON error responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            if exc.code == ErrorCode.COLLABORATOR_ERROR:
                logger.error("Collaborator failure: %s", exc, exc_info=exc)
            else:
                logger.info("Request rejected: %s", exc)
            return domain_error_response(exc)
        return super().handle_exception(exc)


# Admin dashboard


class AdminDashboardView(MarketplaceView):
    """Handler for GET /api/admin/dashboard"""

    def get(self, request: Request) -> Response:
        dashboard = deps.approval_service().dashboard()
        return Response(AdminDashboardSerializer(dashboard).data)


class AdminRecordListView(MarketplaceView):
    """Handler for GET /api/admin/{kind}"""

    def get(self, request: Request, kind: str) -> Response:
        kind = parse_kind(kind)
        service = deps.approval_service()
        if request.query_params.get("status") == Status.PENDING:
            records = service.list_pending(kind)
        else:
            records = service.list_all(kind)
        return Response(RECORD_SERIALIZERS[kind](records, many=True).data)


class AdminRecordDetailView(MarketplaceView):
    """Handler for PATCH/DELETE /api/admin/{kind}/{record_id}"""

    def patch(self, request: Request, kind: str, record_id: str) -> Response:
        kind = parse_kind(kind)
        form = EDIT_SERIALIZERS[kind](data=request.data)
        form.is_valid(raise_exception=True)
        record = deps.approval_service().edit(kind, record_id, form.validated_data)
        return Response(RECORD_SERIALIZERS[kind](record).data)

    def delete(self, request: Request, kind: str, record_id: str) -> Response:
        kind = parse_kind(kind)
        deps.approval_service().delete(kind, record_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminDecisionView(MarketplaceView):
    """Handler for POST /api/admin/{kind}/{record_id}/{action}"""

    def post(self, request: Request, kind: str, record_id: str, action: str) -> Response:
        kind = parse_kind(kind)
        record = deps.approval_service().decide(kind, record_id, action)
        return Response(RECORD_SERIALIZERS[kind](record).data)


# Customer booking form


class BookingPageView(MarketplaceView):
    """Handler for GET /api/halls/{hall_id}"""

    def get(self, request: Request, hall_id: str) -> Response:
        page = deps.booking_service().booking_page(venue_from_request(request, hall_id))
        return Response(BookingPageSerializer(page).data)


class AvailabilityView(MarketplaceView):
    """Handler for GET /api/halls/{hall_id}/availability?date=YYYY-MM-DD"""

    def get(self, request: Request, hall_id: str) -> Response:
        candidate_date = request.query_params.get("date", "")
        available = deps.booking_service().check_date(
            venue_from_request(request, hall_id), candidate_date
        )
        return Response({"date": candidate_date, "available": available})


class BookingSubmitView(MarketplaceView):
    """Handler for POST /api/halls/{hall_id}/bookings"""

    def post(self, request: Request, hall_id: str) -> Response:
        form = BookingSubmissionSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        booking = deps.booking_service().submit(
            venue_from_request(request, hall_id), BookingForm(**form.validated_data)
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


# Hall manager dashboard


class HallDashboardView(MarketplaceView):
    """Handler for GET/PATCH /api/hall-managers/{manager_id}"""

    serializer_class = HallUpdateSerializer

    def get(self, request: Request, manager_id: str) -> Response:
        dashboard = deps.hall_service().dashboard(manager_id)
        return Response(HallDashboardSerializer(dashboard).data)

    def patch(self, request: Request, manager_id: str) -> Response:
        form = self.serializer_class(data=request.data)
        form.is_valid(raise_exception=True)
        submitted = dict(form.validated_data)
        uploads = uploads_from(submitted.pop("images"))
        deletion_indices = submitted.pop("deletion_indices")
        hall = self.save(manager_id, submitted, uploads, deletion_indices)
        return Response(HallManagerSerializer(hall).data)

    def save(self, manager_id, submitted, uploads, deletion_indices):
        return deps.hall_service().update_hall(manager_id, submitted, uploads, deletion_indices)


class HallProfileView(HallDashboardView):
    """Handler for PATCH /api/hall-managers/{manager_id}/profile"""

    serializer_class = HallProfileSerializer
    http_method_names = ["patch", "options"]

    def save(self, manager_id, submitted, uploads, deletion_indices):
        return deps.hall_service().update_profile(manager_id, submitted, uploads, deletion_indices)


class HallBookingDecisionView(MarketplaceView):
    """Handler for POST /api/hall-managers/{manager_id}/bookings/{booking_id}/{action}"""

    def post(self, request: Request, manager_id: str, booking_id: str, action: str) -> Response:
        booking = deps.hall_service().decide_booking(manager_id, booking_id, action)
        return Response(BookingSerializer(booking).data)


# Service provider dashboard


class ProviderDashboardView(MarketplaceView):
    """Handler for GET/PATCH /api/service-providers/{provider_id}"""

    def get(self, request: Request, provider_id: str) -> Response:
        dashboard = deps.provider_service().dashboard(provider_id)
        return Response(ProviderDashboardSerializer(dashboard).data)

    def patch(self, request: Request, provider_id: str) -> Response:
        form = ProviderProfileSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        profile = deps.provider_service().update_profile(provider_id, form.validated_data)
        return Response(ServiceProviderSerializer(profile).data)


class ProviderBookingToggleView(MarketplaceView):
    """Handler for POST /api/service-providers/{provider_id}/bookings/{booking_id}/toggle"""

    def post(self, request: Request, provider_id: str, booking_id: str) -> Response:
        booking = deps.provider_service().toggle_booking(provider_id, booking_id)
        return Response(BookingSerializer(booking).data)
