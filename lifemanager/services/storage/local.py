"""
Local Blob Storage Implementations

InMemoryBlobStorage is the stand-in for browser local storage: a plain
dict that lives as long as the process. Tests use it.

FileBlobStorage keeps one JSON file per key in a data directory, which
gives restart continuity for a single local user.

TRADEOFFS:
- Whole-blob replacement only (no partial writes, no append log)
- No cross-process locking (single user, single process)
- Writes go to a temp file first and are moved into place, so a crash
  never leaves a half-written blob behind
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from lifemanager.services.storage.interface import (
    BlobStorageInterface,
    StorageError,
)


logger = structlog.get_logger(__name__)

BLOB_SUFFIX = ".json"


class InMemoryBlobStorage(BlobStorageInterface):
    """
    Dict-backed blob storage.

    Pass initial contents to simulate data left behind by a previous run.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._blobs: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    async def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    async def remove(self, key: str) -> None:
        self._blobs.pop(key, None)

    async def keys(self) -> list[str]:
        return list(self._blobs)


class FileBlobStorage(BlobStorageInterface):
    """
    File-per-key blob storage.

    Keys map to <data_dir>/<key>.json. The directory is created on the
    first write. Transient OS errors are retried before surfacing as
    StorageError.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._data_dir / f"{key}{BLOB_SUFFIX}"

    @retry(
        retry=retry_if_exception_type(OSError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        reraise=True,
    )
    def _read(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    @retry(
        retry=retry_if_exception_type(OSError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        reraise=True,
    )
    def _write(self, path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.stem}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return self._read(path)
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    async def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._write(path, value)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug("blob_written", key=key, path=str(path), size=len(value))

    async def remove(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e

    async def keys(self) -> list[str]:
        if not self._data_dir.is_dir():
            return []
        return sorted(
            p.name[: -len(BLOB_SUFFIX)]
            for p in self._data_dir.iterdir()
            if p.is_file() and p.name.endswith(BLOB_SUFFIX)
        )
