"""Idempotent first-run initialization of the local fallback store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import aiofiles.os

from fallback_store.core.config import Settings, get_settings
from fallback_store.domain.exceptions import BootstrapFailureException
from fallback_store.infrastructure.exceptions import StorageException
from fallback_store.infrastructure.local_store.client import FallbackClient
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore
from fallback_store.infrastructure.local_store.seed_data import build_seed_data

logger = logging.getLogger(__name__)


async def bootstrap_fallback_store(
    data_dir: str | Path | None = None,
    *,
    settings: Settings | None = None,
    seed: dict[str, list[dict[str, Any]]] | None = None,
) -> FallbackClient:
    """Create the data directory and any missing collection files, then return a client.

    Collections whose file already exists are left untouched (no merge, no
    upgrade), so running this twice is a no-op for initialized collections.

    Args:
        data_dir: Store directory; defaults to settings.fallback_data_dir.
        settings: Settings to use; defaults to get_settings().
        seed: Seed records per collection; defaults to build_seed_data().

    Returns:
        FallbackClient bound to the initialized store.

    Raises:
        BootstrapFailureException: The directory or a seed file cannot be created.
    """
    settings = settings or get_settings()
    root = Path(data_dir if data_dir is not None else settings.fallback_data_dir)
    store = JsonRecordStore(root)
    seed = seed if seed is not None else build_seed_data()

    logger.info("Initializing fallback store at %s", store.data_dir)
    try:
        await aiofiles.os.makedirs(store.data_dir, exist_ok=True)
    except OSError as e:
        raise BootstrapFailureException(str(store.data_dir), str(e)) from e

    for collection in store.collections:
        async with store.lock(collection):
            try:
                if await store.exists(collection):
                    logger.debug("Collection %s already initialized", collection)
                    continue
                records = seed.get(collection, [])
                await store.write(collection, records)
            except (OSError, StorageException) as e:
                raise BootstrapFailureException(str(store.data_dir), str(e)) from e
        logger.info("Initialized collection %s with %d record(s)", collection, len(records))

    logger.info("Fallback store ready")
    return FallbackClient(store, token_prefix=settings.fallback_token_prefix)
