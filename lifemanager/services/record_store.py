"""
Record Store

A generic keyed collection persisted as ONE serialized blob.

Every mutating operation is a full read-modify-write of the whole
collection. There is no partial write and no index; collections are
small and bounded by manual data entry.

CONCURRENCY: each store owns one asyncio.Lock and holds it for the
whole read-modify-write, so concurrent callers awaiting the same store
cannot lose each other's updates. Two stores bound to the same key (or
two processes sharing a data directory) are NOT coordinated.
"""

import asyncio
import json
from collections.abc import Mapping
from typing import Any, Generic, Optional, TypeVar, Union
from uuid import UUID, uuid4

import structlog
from pydantic import ValidationError

from lifemanager.config import StorageSettings, get_settings
from lifemanager.models.records import Record, utc_now
from lifemanager.services.storage.interface import (
    BlobStorageInterface,
    NotFoundError,
    SerializationError,
)


RecordT = TypeVar("RecordT", bound=Record)

# Fields the store owns; callers cannot overwrite them through update()
PROTECTED_FIELDS = frozenset({"id", "created_at"})


class RecordStore(Generic[RecordT]):
    """
    Async CRUD over one collection.

    Subclasses pin `collection` and `model`; the base class can also be
    bound directly by passing both to the constructor.
    """

    collection: str = ""
    model: type[Record] = Record

    def __init__(
        self,
        storage: BlobStorageInterface,
        settings: Optional[StorageSettings] = None,
        collection: Optional[str] = None,
        model: Optional[type[Record]] = None,
    ):
        """
        Args:
            storage: Blob backend holding the collection
            settings: Storage settings (defaults to get_settings().storage)
            collection: Collection name, overriding the class attribute
            model: Record model, overriding the class attribute
        """
        if collection is not None:
            self.collection = collection
        if model is not None:
            self.model = model
        if not self.collection:
            raise ValueError("RecordStore needs a collection name")

        self._storage = storage
        self._settings = settings or get_settings().storage
        self._key = f"{self._settings.key_prefix}{self.collection}"
        self._lock = asyncio.Lock()
        self._logger = structlog.get_logger(__name__)

    @property
    def key(self) -> str:
        """Storage key of the collection blob."""
        return self._key

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------

    async def _delay(self) -> None:
        if self._settings.simulate_latency:
            await asyncio.sleep(self._settings.default_latency_ms / 1000)

    def _corrupt(self, reason: str) -> list[RecordT]:
        if self._settings.corrupt_blob_policy == "empty":
            self._logger.warning("collection_unreadable", collection=self._key, reason=reason)
            return []
        raise SerializationError(f"Collection {self._key} is unreadable: {reason}")

    async def _load(self) -> list[RecordT]:
        raw = await self._storage.get(self._key)
        if raw is None:
            return []

        try:
            documents = json.loads(raw)
        except json.JSONDecodeError as e:
            return self._corrupt(f"invalid JSON: {e}")

        if not isinstance(documents, list):
            return self._corrupt(f"expected a list, got {type(documents).__name__}")

        try:
            return [self.model.model_validate(doc) for doc in documents]
        except ValidationError as e:
            return self._corrupt(f"invalid record: {e.error_count()} error(s)")

    async def _save(self, records: list[RecordT]) -> None:
        payload = json.dumps([record.to_document() for record in records])
        await self._storage.set(self._key, payload)

    def _normalize(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Accept both persisted (camelCase) and attribute keys."""
        return {self.model.field_name_for(k): v for k, v in fields.items()}

    def _fields_of(self, record: Union[RecordT, Mapping[str, Any]]) -> dict[str, Any]:
        if isinstance(record, Record):
            if not isinstance(record, self.model):
                raise TypeError(
                    f"{self._key} stores {self.model.__name__}, "
                    f"got {type(record).__name__}"
                )
            return record.model_dump()
        if isinstance(record, Mapping):
            return self._normalize(record)
        raise TypeError(f"Cannot store {type(record).__name__} in {self._key}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_all(self, owner_id: Optional[str] = None) -> list[RecordT]:
        """
        All records in insertion order.

        Args:
            owner_id: If given, only records whose user_id equals it

        Returns:
            List of records (possibly empty)
        """
        await self._delay()
        records = await self._load()
        if not owner_id:
            return records
        return [r for r in records if r.user_id == owner_id]

    async def get_by_id(self, record_id: Union[UUID, str]) -> Optional[RecordT]:
        """
        Retrieve a record by its ID.

        Returns:
            The record if found, None otherwise
        """
        await self._delay()
        wanted = str(record_id)
        for record in await self._load():
            if str(record.id) == wanted:
                return record
        return None

    async def count(self, owner_id: Optional[str] = None) -> int:
        """Number of records, optionally for one owner."""
        return len(await self.get_all(owner_id))

    async def create(self, record: Union[RecordT, Mapping[str, Any]]) -> RecordT:
        """
        Store a new record.

        A fresh id and created_at are assigned, replacing any the caller
        supplied. No value validation happens beyond the model's types.

        Returns:
            The stored record

        Raises:
            pydantic.ValidationError: If a field has the wrong type
        """
        await self._delay()
        fields = self._fields_of(record)
        fields["id"] = uuid4()
        fields["created_at"] = utc_now()
        stored = self.model.model_validate(fields)

        async with self._lock:
            records = await self._load()
            records.append(stored)
            await self._save(records)

        self._logger.info("record_created", collection=self._key, record_id=str(stored.id))
        return stored

    async def update(
        self,
        record_id: Union[UUID, str],
        fields: Mapping[str, Any],
    ) -> RecordT:
        """
        Merge fields over an existing record and stamp updated_at.

        id and created_at cannot be changed through update.

        Returns:
            The updated record

        Raises:
            NotFoundError: If no record has this ID
            pydantic.ValidationError: If a merged field has the wrong type
        """
        await self._delay()
        changes = {
            k: v for k, v in self._normalize(fields).items()
            if k not in PROTECTED_FIELDS
        }
        wanted = str(record_id)

        async with self._lock:
            records = await self._load()
            for index, existing in enumerate(records):
                if str(existing.id) == wanted:
                    merged = {**existing.model_dump(), **changes, "updated_at": utc_now()}
                    updated = self.model.model_validate(merged)
                    records[index] = updated
                    await self._save(records)
                    break
            else:
                raise NotFoundError(f"{self.model.__name__} not found: {record_id}")

        self._logger.info(
            "record_updated",
            collection=self._key,
            record_id=wanted,
            fields=sorted(changes),
        )
        return updated

    async def delete(self, record_id: Union[UUID, str]) -> bool:
        """
        Delete a record by ID.

        Deleting a missing ID is a no-op, not an error.

        Returns:
            True once the collection has been persisted
        """
        await self._delay()
        wanted = str(record_id)

        async with self._lock:
            records = await self._load()
            remaining = [r for r in records if str(r.id) != wanted]
            await self._save(remaining)

        if len(remaining) != len(records):
            self._logger.info("record_deleted", collection=self._key, record_id=wanted)
        return True
