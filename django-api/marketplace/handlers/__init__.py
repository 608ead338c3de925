from marketplace.handlers.views import (
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

__all__ = [
    "AdminDashboardView",
    "AdminDecisionView",
    "AdminRecordDetailView",
    "AdminRecordListView",
    "AvailabilityView",
    "BookingPageView",
    "BookingSubmitView",
    "HallBookingDecisionView",
    "HallDashboardView",
    "HallProfileView",
    "ProviderBookingToggleView",
    "ProviderDashboardView",
]
