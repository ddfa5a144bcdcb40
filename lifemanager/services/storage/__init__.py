"""
Storage Services Package

Provides the abstract blob storage interface and local implementations.
In-memory storage stands in for browser local storage; file storage
gives restart continuity.
"""

from lifemanager.services.storage.interface import (
    BlobStorageInterface,
    NotFoundError,
    NotSignedInError,
    SerializationError,
    StorageError,
)
from lifemanager.services.storage.local import (
    FileBlobStorage,
    InMemoryBlobStorage,
)

__all__ = [
    # Interfaces
    "BlobStorageInterface",
    # Exceptions
    "NotFoundError",
    "NotSignedInError",
    "SerializationError",
    "StorageError",
    # Implementations
    "FileBlobStorage",
    "InMemoryBlobStorage",
]
