from django.urls import path

from marketplace.handlers import (
    AdminDashboardView,
    AdminDecisionView,
    AdminRecordDetailView,
    AdminRecordListView,
    AvailabilityView,
    BookingPageView,
    BookingSubmitView,
    HallBookingDecisionView,
    HallDashboardView,
    HallProfileView,
    ProviderBookingToggleView,
    ProviderDashboardView,
)

urlpatterns = [
    path("admin/dashboard", AdminDashboardView.as_view(), name="admin-dashboard"),
    path("admin/<str:kind>", AdminRecordListView.as_view(), name="admin-record-list"),
    path(
        "admin/<str:kind>/<str:record_id>",
        AdminRecordDetailView.as_view(),
        name="admin-record-detail",
    ),
    path(
        "admin/<str:kind>/<str:record_id>/<str:action>",
        AdminDecisionView.as_view(),
        name="admin-decision",
    ),
    path("halls/<str:hall_id>", BookingPageView.as_view(), name="booking-page"),
    path(
        "halls/<str:hall_id>/availability",
        AvailabilityView.as_view(),
        name="hall-availability",
    ),
    path("halls/<str:hall_id>/bookings", BookingSubmitView.as_view(), name="booking-submit"),
    path("hall-managers/<str:manager_id>", HallDashboardView.as_view(), name="hall-dashboard"),
    path(
        "hall-managers/<str:manager_id>/profile",
        HallProfileView.as_view(),
        name="hall-profile",
    ),
    path(
        "hall-managers/<str:manager_id>/bookings/<str:booking_id>/<str:action>",
        HallBookingDecisionView.as_view(),
        name="hall-booking-decision",
    ),
    path(
        "service-providers/<str:provider_id>",
        ProviderDashboardView.as_view(),
        name="provider-dashboard",
    ),
    path(
        "service-providers/<str:provider_id>/bookings/<str:booking_id>/toggle",
        ProviderBookingToggleView.as_view(),
        name="provider-booking-toggle",
    ),
]
