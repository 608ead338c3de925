"""In-memory stores for tests and local development."""

import dataclasses
import uuid
from datetime import UTC, datetime
from typing import Any

from marketplace.domain import EntityKind, Record
from marketplace.domain.errors import RecordNotFoundError
from marketplace.stores.interfaces import BlobStore, Repository


class InMemoryRepository(Repository):
    """Dict-backed repository holding domain records as-is."""

    def __init__(self) -> None:
        self._collections: dict[EntityKind, dict[str, Record]] = {
            kind: {} for kind in EntityKind
        }

    def get(self, collection: EntityKind, record_id: str) -> Record | None:
        return self._collections[EntityKind(collection)].get(record_id)

    def create(self, collection: EntityKind, record: Record) -> str:
        record_id = record.id or uuid.uuid4().hex
        changes: dict[str, Any] = {"id": record_id}
        if record.created_at is None:
            changes["created_at"] = datetime.now(UTC)
        self._collections[EntityKind(collection)][record_id] = dataclasses.replace(
            record, **changes
        )
        return record_id

    def update(self, collection: EntityKind, record_id: str, changes: dict[str, Any]) -> None:
        records = self._collections[EntityKind(collection)]
        if record_id not in records:
            raise RecordNotFoundError(str(collection), record_id)
        records[record_id] = dataclasses.replace(records[record_id], **changes)

    def delete(self, collection: EntityKind, record_id: str) -> None:
        self._collections[EntityKind(collection)].pop(record_id, None)

    def list(self, collection: EntityKind, **filters: Any) -> list[Record]:
        records = [
            record
            for record in self._collections[EntityKind(collection)].values()
            if all(getattr(record, name) == value for name, value in filters.items())
        ]
        records.sort(key=lambda record: record.created_at, reverse=True)
        return records


class InMemoryBlobStore(BlobStore):
    """Keeps uploaded bytes in a dict keyed by path."""

    scheme = "memory://"

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}

    def upload(self, path: str, data: bytes) -> str:
        self.blobs[path] = data
        return f"{self.scheme}{path}"

    def delete(self, url: str) -> None:
        self.blobs.pop(url.removeprefix(self.scheme), None)

    def owns(self, url: str) -> bool:
        return url.startswith(self.scheme)
