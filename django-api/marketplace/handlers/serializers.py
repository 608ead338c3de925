"""Serializers for transforming domain models to API responses.

Output serializers render the page view-models with the camelCase field
names the dashboards use. Input serializers only check the shape of form
data; coercion and domain rules stay in the services.
"""

from rest_framework import serializers

from marketplace.domain import EventType


class MoneyField(serializers.Field):
    """Renders Money as a two-decimal string."""

    def to_representation(self, value):
        return str(value)


class ServiceProviderSerializer(serializers.Serializer):
    """Serializer for ServiceProvider domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    address = serializers.CharField()
    services = serializers.ListField(child=serializers.CharField())
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")


class HallManagerSerializer(serializers.Serializer):
    """Serializer for HallManager domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.CharField()
    hallName = serializers.CharField(source="hall_name")
    hallAddress = serializers.CharField(source="hall_address")
    hallDescription = serializers.CharField(source="hall_description")
    hallCapacity = serializers.IntegerField(source="hall_capacity.value")
    hallPrice = MoneyField(source="hall_price")
    hallPhone = serializers.CharField(source="hall_phone")
    images = serializers.ListField(child=serializers.CharField())
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField()
    type = serializers.CharField(source="booking_type")
    hallId = serializers.CharField(source="hall_id")
    hallManagerId = serializers.CharField(source="hall_manager_id")
    serviceProviderId = serializers.CharField(source="service_provider_id")
    trackingId = serializers.CharField(source="tracking_id")
    hallName = serializers.CharField(source="hall_name")
    customerName = serializers.CharField(source="customer_name")
    email = serializers.CharField()
    phone = serializers.CharField()
    date = serializers.CharField()
    eventType = serializers.CharField(source="event_type")
    guestCount = serializers.IntegerField(source="guest_count")
    additionalRequirements = serializers.CharField(source="additional_requirements")
    status = serializers.CharField()
    price = MoneyField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class AdminDashboardSerializer(serializers.Serializer):
    pendingServiceProviders = ServiceProviderSerializer(many=True, source="pending_service_providers")
    serviceProviders = ServiceProviderSerializer(many=True, source="service_providers")
    pendingHallManagers = HallManagerSerializer(many=True, source="pending_hall_managers")
    hallManagers = HallManagerSerializer(many=True, source="hall_managers")
    pendingBookings = BookingSerializer(many=True, source="pending_bookings")
    bookings = BookingSerializer(many=True)


class HallDashboardSerializer(serializers.Serializer):
    hall = HallManagerSerializer()
    bookings = BookingSerializer(many=True)
    pendingBookings = BookingSerializer(many=True, source="pending_bookings")
    serviceBookings = BookingSerializer(many=True, source="service_bookings")


class ProviderDashboardSerializer(serializers.Serializer):
    profile = ServiceProviderSerializer()
    bookings = BookingSerializer(many=True)


class BookingPageSerializer(serializers.Serializer):
    hall = HallManagerSerializer()
    existingBookings = BookingSerializer(many=True, source="existing_bookings")


# Input


class BookingSubmissionSerializer(serializers.Serializer):
    """Customer booking form. Date and guest count arrive as raw text."""

    customerName = serializers.CharField(source="customer_name", max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=32)
    date = serializers.CharField(allow_blank=True, default="")
    guestCount = serializers.CharField(source="guest_count", allow_blank=True, default="")
    eventType = serializers.ChoiceField(source="event_type", choices=[e.value for e in EventType])
    additionalRequirements = serializers.CharField(
        source="additional_requirements", allow_blank=True, default=""
    )


class HallUpdateSerializer(serializers.Serializer):
    """Hall listing edit form, with new images and positions to remove."""

    hallName = serializers.CharField(source="hall_name", required=False, allow_blank=True)
    hallAddress = serializers.CharField(source="hall_address", required=False, allow_blank=True)
    hallDescription = serializers.CharField(source="hall_description", required=False, allow_blank=True)
    hallCapacity = serializers.CharField(source="hall_capacity", required=False, allow_blank=True)
    hallPrice = serializers.CharField(source="hall_price", required=False, allow_blank=True)
    hallPhone = serializers.CharField(source="hall_phone", required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.FileField(), default=list)
    deleteIndices = serializers.ListField(
        source="deletion_indices",
        child=serializers.IntegerField(min_value=0),
        default=list,
    )


class HallProfileSerializer(HallUpdateSerializer):
    fullName = serializers.CharField(source="name", required=False)


class ProviderProfileSerializer(serializers.Serializer):
    name = serializers.CharField(required=False)
    phone = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    services = serializers.ListField(child=serializers.CharField(), required=False)


class ServiceProviderEditSerializer(ProviderProfileSerializer):
    email = serializers.EmailField(required=False)
    status = serializers.CharField(required=False)


class HallManagerEditSerializer(serializers.Serializer):
    name = serializers.CharField(required=False)
    email = serializers.EmailField(required=False)
    hallName = serializers.CharField(source="hall_name", required=False, allow_blank=True)
    hallAddress = serializers.CharField(source="hall_address", required=False, allow_blank=True)
    hallDescription = serializers.CharField(source="hall_description", required=False, allow_blank=True)
    hallCapacity = serializers.CharField(source="hall_capacity", required=False, allow_blank=True)
    hallPrice = serializers.CharField(source="hall_price", required=False, allow_blank=True)
    hallPhone = serializers.CharField(source="hall_phone", required=False, allow_blank=True)
    status = serializers.CharField(required=False)


class BookingEditSerializer(serializers.Serializer):
    customerName = serializers.CharField(source="customer_name", required=False)
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    date = serializers.CharField(required=False)
    trackingId = serializers.CharField(source="tracking_id", required=False, allow_blank=True)
    status = serializers.CharField(required=False)
