"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal

import pytest

from marketplace.domain import (
    Booking,
    BookingType,
    Capacity,
    EntityKind,
    Money,
    ServiceProvider,
    Status,
    VenueField,
    VenueKey,
)
from marketplace.domain.value_objects import coerce_decimal, coerce_int, generate_tracking_id


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == Decimal("0")

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("1500"))) == "1500.00"
        assert str(Money(Decimal("99.5"))) == "99.50"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestCoercion:
    """Form values that are not numbers become zero."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("250", 250), (" 12 guests", 12), ("3.7", 3), ("", 0), ("abc", 0), (None, 0), (42, 42), ("-5", -5)],
    )
    def test_coerce_int(self, raw, expected):
        assert coerce_int(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("1999.99", Decimal("1999.99")), ("12.5abc", Decimal("12.5")), (".5", Decimal(".5")), ("", Decimal(0)), ("price", Decimal(0)), (7, Decimal(7))],
    )
    def test_coerce_decimal(self, raw, expected):
        assert coerce_decimal(raw) == expected

    def test_coerce_decimal_drops_non_finite_values(self):
        assert coerce_decimal(Decimal("NaN")) == Decimal(0)


class TestEntityKind:
    def test_accepts_collection_names(self):
        assert EntityKind("hallManagers") is EntityKind.HALL_MANAGER

    def test_accepts_singular_record_names(self):
        assert EntityKind("serviceProvider") is EntityKind.SERVICE_PROVIDER
        assert EntityKind("booking") is EntityKind.BOOKING

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValueError):
            EntityKind("weddingHalls")


class TestVenueKey:
    def test_for_hall_manager_keys_by_manager_id(self):
        venue = VenueKey.for_hall_manager("hm-1")
        assert venue.field is VenueField.HALL_MANAGER_ID
        assert venue.value == "hm-1"

    def test_rejects_empty_id(self):
        with pytest.raises(ValueError):
            VenueKey(field=VenueField.HALL_ID, value="")


class TestRecords:
    def test_services_keep_first_occurrence_order(self):
        provider = ServiceProvider(
            id="sp", name="n", email="e", services=("Catering", "DJ", "Catering", "Flowers")
        )
        assert provider.services == ("Catering", "DJ", "Flowers")

    def test_booking_cannot_name_hall_and_hall_manager(self):
        with pytest.raises(ValueError):
            Booking(id="b", customer_name="c", date="2024-06-01", hall_id="h", hall_manager_id="m")

    def test_only_service_bookings_can_be_completed(self):
        with pytest.raises(ValueError):
            Booking(id="b", customer_name="c", date="2024-06-01", status=Status.COMPLETED)
        booking = Booking(
            id="b",
            customer_name="c",
            date="2024-06-01",
            booking_type=BookingType.SERVICE,
            status=Status.COMPLETED,
        )
        assert booking.status == Status.COMPLETED


class TestTrackingId:
    def test_format(self):
        tracking_id = generate_tracking_id("WB")
        prefix, suffix = tracking_id.split("-")
        assert prefix == "WB"
        assert len(suffix) == 8
        assert suffix.isalnum() and suffix.upper() == suffix
