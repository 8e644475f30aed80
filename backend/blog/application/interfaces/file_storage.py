"""Port for public object storage of uploaded images."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredObject:
    """Result of storing one uploaded file."""

    key: str
    filename: str
    url: str
    size: int
    content_type: str


class FileStorage(ABC):
    """Stores bytes under a key and hands back a publicly reachable URL."""

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Short name used in logs and errors (``local``, ``s3``)."""
        ...

    @abstractmethod
    async def store(self, key: str, content: bytes, content_type: str) -> StoredObject:
        """Store ``content`` under ``key``. Raises StorageError on failure."""
        ...

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public URL of the object stored under ``key``."""
        ...
