import django.utils.timezone
from django.db import migrations, models

import marketplace.models


STATUS_CHOICES = [
    ("pending", "Pending"),
    ("approved", "Approved"),
    ("rejected", "Rejected"),
    ("completed", "Completed"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ServiceProvider",
            fields=[
                ("id", models.CharField(default=marketplace.models.new_document_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=255)),
                ("phone", models.CharField(blank=True, max_length=32)),
                ("address", models.CharField(blank=True, max_length=500)),
                ("services", models.JSONField(blank=True, default=list)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="pending", max_length=16)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status"], name="marketplace_status_sp_idx")],
            },
        ),
        migrations.CreateModel(
            name="HallManager",
            fields=[
                ("id", models.CharField(default=marketplace.models.new_document_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=255)),
                ("hall_name", models.CharField(blank=True, max_length=255)),
                ("hall_address", models.CharField(blank=True, max_length=500)),
                ("hall_description", models.TextField(blank=True)),
                ("hall_capacity", models.PositiveIntegerField(default=0)),
                ("hall_price", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("hall_phone", models.CharField(blank=True, max_length=32)),
                ("images", models.JSONField(blank=True, default=list)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="pending", max_length=16)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status"], name="marketplace_status_hm_idx")],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.CharField(default=marketplace.models.new_document_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("booking_type", models.CharField(choices=[("hall", "Hall"), ("service", "Service")], default="hall", max_length=16)),
                ("hall_id", models.CharField(blank=True, max_length=64, null=True)),
                ("hall_manager_id", models.CharField(blank=True, max_length=64, null=True)),
                ("service_provider_id", models.CharField(blank=True, max_length=64, null=True)),
                ("tracking_id", models.CharField(blank=True, max_length=32)),
                ("hall_name", models.CharField(blank=True, max_length=255)),
                ("customer_name", models.CharField(max_length=255)),
                ("email", models.EmailField(blank=True, max_length=255)),
                ("phone", models.CharField(blank=True, max_length=32)),
                ("date", models.DateField()),
                ("event_type", models.CharField(blank=True, max_length=64)),
                ("guest_count", models.PositiveIntegerField(default=0)),
                ("additional_requirements", models.TextField(blank=True)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="pending", max_length=16)),
                ("price", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["hall_id", "date"], name="marketplace_hall_date_idx"),
                    models.Index(fields=["hall_manager_id", "date"], name="marketplace_manager_date_idx"),
                    models.Index(fields=["service_provider_id"], name="marketplace_provider_idx"),
                    models.Index(fields=["status"], name="marketplace_status_bk_idx"),
                ],
            },
        ),
    ]
