"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from marketplace.domain import BookingWorkflow, EntityKind, HallManager, ServiceProvider
from marketplace.stores import InMemoryBlobStore, InMemoryRepository

from tests.factories import make_hall_manager, make_provider


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def in_memory_media(settings):
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }
    settings.MEDIA_URL = "/media/"


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def workflow() -> BookingWorkflow:
    return BookingWorkflow()


@pytest.fixture
def hall_manager(repository) -> HallManager:
    manager_id = repository.create(EntityKind.HALL_MANAGER, make_hall_manager(id="hm-1"))
    return repository.get(EntityKind.HALL_MANAGER, manager_id)


@pytest.fixture
def provider(repository) -> ServiceProvider:
    provider_id = repository.create(EntityKind.SERVICE_PROVIDER, make_provider(id="sp-1"))
    return repository.get(EntityKind.SERVICE_PROVIDER, provider_id)
