"""Page view-models assembled by the services and rendered by the handlers."""

from dataclasses import dataclass

from marketplace.domain import Booking, HallManager, ServiceProvider


@dataclass(frozen=True)
class AdminDashboard:
    pending_service_providers: tuple[ServiceProvider, ...]
    service_providers: tuple[ServiceProvider, ...]
    pending_hall_managers: tuple[HallManager, ...]
    hall_managers: tuple[HallManager, ...]
    pending_bookings: tuple[Booking, ...]
    bookings: tuple[Booking, ...]


@dataclass(frozen=True)
class HallDashboard:
    """Hall-manager page: the listing, its bookings, and open service bookings."""

    hall: HallManager
    bookings: tuple[Booking, ...]
    pending_bookings: tuple[Booking, ...]
    service_bookings: tuple[Booking, ...]


@dataclass(frozen=True)
class ProviderDashboard:
    profile: ServiceProvider
    bookings: tuple[Booking, ...]


@dataclass(frozen=True)
class BookingPage:
    """Customer booking form: the hall and the dates already taken."""

    hall: HallManager
    existing_bookings: tuple[Booking, ...]
