"""
Abstract Storage Interface

DESIGN DECISION: Persistence is a keyed-blob store. A key holds one
whole serialized value (a JSON array for a collection, a JSON object
for the session). This allows us to:
1. Swap the browser-style in-memory store for files (or anything else)
2. Use in-memory storage for testing
3. Keep record semantics (ids, merging, filtering) out of the backend

The interface is intentionally tiny - read, replace, remove.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BlobStorageInterface(ABC):
    """
    Abstract interface for keyed-blob storage.

    Any backend (memory, files, an embedded database) must implement
    these methods. Values are always replaced whole.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the blob stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored text, or None if the key is absent

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Replace the blob stored under a key.

        Args:
            key: Storage key
            value: Serialized text

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is a no-op.

        Args:
            key: Storage key
        """
        pass

    @abstractmethod
    async def keys(self) -> list[str]:
        """List every stored key."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class SerializationError(StorageError):
    """A persisted blob or record could not be parsed."""
    pass


class NotSignedInError(StorageError):
    """An operation needed a signed-in user and there was none."""
    pass
