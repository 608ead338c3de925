"""BlobStore backed by Django's configured file storage."""

import logging
from urllib.parse import unquote, urlparse

from django.core.files.base import ContentFile
from django.core.files.storage import Storage, default_storage

from marketplace.domain.errors import CollaboratorError
from marketplace.stores.interfaces import BlobStore

logger = logging.getLogger(__name__)


class DjangoBlobStore(BlobStore):
    """Stores hall images through a Django ``Storage`` backend."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or default_storage

    def upload(self, path: str, data: bytes) -> str:
        try:
            name = self._storage.save(path, ContentFile(data))
            url = self._storage.url(name)
        except OSError as exc:
            raise CollaboratorError("blob store", "upload") from exc
        logger.info("Uploaded %s (%d bytes)", name, len(data))
        return url

    def delete(self, url: str) -> None:
        name = self._name_for(url)
        if name is None:
            return
        try:
            self._storage.delete(name)
        except OSError as exc:
            raise CollaboratorError("blob store", "delete") from exc

    def owns(self, url: str) -> bool:
        return self._name_for(url) is not None

    def _name_for(self, url: str) -> str | None:
        base_url = getattr(self._storage, "base_url", None)
        if not base_url:
            return None
        for candidate in (url, urlparse(url).path):
            if candidate.startswith(base_url):
                return unquote(candidate[len(base_url):]) or None
        return None
