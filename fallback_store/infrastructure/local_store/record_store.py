"""JSON-file record store with atomic writes and per-collection locks."""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from fallback_store.infrastructure.exceptions import (
    StorageReadError,
    StorageWriteError,
    UnknownCollectionError,
)
from fallback_store.infrastructure.local_store.collections import COLLECTION_FILES

Record = dict[str, Any]


def _json_default(value: Any) -> Any:
    """Serialize datetimes as ISO strings; everything else must be JSON-native."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonRecordStore:
    """One pretty-printed JSON array per collection under data_dir.

    Reads of a missing file return an empty list. Writes replace the whole
    file via temp file + rename. Read-modify-write callers must hold
    lock(collection) for the full read -> write span; read() and write()
    do not take it themselves.
    """

    def __init__(
        self,
        data_dir: str | Path,
        collection_files: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the store (no I/O; bootstrap creates the directory).

        Args:
            data_dir: Directory holding one file per collection.
            collection_files: collection name -> file name. Defaults to COLLECTION_FILES.
        """
        self.data_dir = Path(data_dir).resolve()
        self._files = dict(collection_files if collection_files is not None else COLLECTION_FILES)
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def collections(self) -> tuple[str, ...]:
        """Configured collection names, in configuration order."""
        return tuple(self._files)

    def path_for(self, collection: str) -> Path:
        """Return the backing file path. Raises UnknownCollectionError."""
        filename = self._files.get(collection)
        if filename is None:
            raise UnknownCollectionError(collection)
        return self.data_dir / filename

    def lock(self, collection: str) -> asyncio.Lock:
        """Return the in-process lock guarding read-modify-write on a collection."""
        self.path_for(collection)
        lock = self._locks.get(collection)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[collection] = lock
        return lock

    async def exists(self, collection: str) -> bool:
        """Return True if the collection's backing file exists."""
        return await aiofiles.os.path.exists(self.path_for(collection))

    async def read(self, collection: str) -> list[Record]:
        """Return all records in insertion order; [] if the file does not exist."""
        path = self.path_for(collection)
        if not await aiofiles.os.path.exists(path):
            return []
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content)
        except (OSError, ValueError) as e:
            raise StorageReadError(collection, str(e)) from e
        if not isinstance(data, list):
            raise StorageReadError(
                collection, f"expected a JSON array, got {type(data).__name__}"
            )
        return data

    async def write(self, collection: str, records: Sequence[Record]) -> None:
        """Replace the collection's file with the given records (atomic rename)."""
        path = self.path_for(collection)
        try:
            content = json.dumps(list(records), indent=2, default=_json_default)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(collection, str(e)) from e

        temp_path: str | None = None
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=path.parent, prefix=".tmp_", suffix=path.suffix
            )
            os.close(temp_fd)
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(content)
            await aiofiles.os.replace(temp_path, path)
            temp_path = None
        except OSError as e:
            raise StorageWriteError(collection, str(e)) from e
        finally:
            if temp_path is not None and Path(temp_path).exists():
                os.unlink(temp_path)
