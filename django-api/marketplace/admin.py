from django.contrib import admin

from marketplace.models import Booking, HallManager, ServiceProvider


@admin.register(ServiceProvider)
class ServiceProviderAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "phone", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["name", "email"]


@admin.register(HallManager)
class HallManagerAdmin(admin.ModelAdmin):
    list_display = ["hall_name", "name", "hall_capacity", "hall_price", "status"]
    list_filter = ["status"]
    search_fields = ["name", "email", "hall_name", "hall_address"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["tracking_id", "customer_name", "hall_name", "date", "booking_type", "status"]
    list_filter = ["status", "booking_type", "event_type"]
    search_fields = ["tracking_id", "customer_name", "email"]
    date_hierarchy = "date"
