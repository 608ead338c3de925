"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Any

from marketplace.domain import EntityKind, Record


class Repository(ABC):
    """CRUD over the serviceProviders, hallManagers and bookings collections."""

    @abstractmethod
    def list(self, collection: EntityKind, **filters: Any) -> list[Record]:
        """Return records matching every equality filter, newest first."""
        ...

    @abstractmethod
    def get(self, collection: EntityKind, record_id: str) -> Record | None:
        """Return a record by ID, or None if not found."""
        ...

    @abstractmethod
    def create(self, collection: EntityKind, record: Record) -> str:
        """Store a new record and return its ID.

        An empty ``record.id`` asks the store to assign one.
        """
        ...

    @abstractmethod
    def update(self, collection: EntityKind, record_id: str, changes: dict[str, Any]) -> None:
        """Apply a partial update to an existing record."""
        ...

    @abstractmethod
    def delete(self, collection: EntityKind, record_id: str) -> None:
        """Remove a record."""
        ...


class BlobStore(ABC):
    """Interface for image upload and removal."""

    @abstractmethod
    def upload(self, path: str, data: bytes) -> str:
        """Store ``data`` under ``path`` and return its public URL."""
        ...

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove the blob behind a URL this store produced."""
        ...

    @abstractmethod
    def owns(self, url: str) -> bool:
        """Check if a URL points into this store."""
        ...
