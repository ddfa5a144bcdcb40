"""Services package."""

from lifemanager.services.auth import SessionProvider, fabricate_identity
from lifemanager.services.domain import (
    Collection,
    ExpenseService,
    InvestmentService,
    TaskService,
    UserService,
    WorkoutService,
)
from lifemanager.services.record_store import RecordStore
from lifemanager.services.storage import (
    BlobStorageInterface,
    FileBlobStorage,
    InMemoryBlobStorage,
    NotFoundError,
    NotSignedInError,
    SerializationError,
    StorageError,
)

__all__ = [
    # Session
    "SessionProvider",
    "fabricate_identity",
    # Record stores
    "Collection",
    "ExpenseService",
    "InvestmentService",
    "RecordStore",
    "TaskService",
    "UserService",
    "WorkoutService",
    # Storage services
    "BlobStorageInterface",
    "FileBlobStorage",
    "InMemoryBlobStorage",
    "NotFoundError",
    "NotSignedInError",
    "SerializationError",
    "StorageError",
]
