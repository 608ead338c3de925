from marketplace.stores.interfaces import BlobStore, Repository
from marketplace.stores.memory_store import InMemoryBlobStore, InMemoryRepository

__all__ = [
    "BlobStore",
    "Repository",
    "InMemoryBlobStore",
    "InMemoryRepository",
]
