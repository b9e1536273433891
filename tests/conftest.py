"""Pytest configuration and fixtures for the fallback store.

Every test gets its own data directory under tmp_path, so stores never share
state. Async tests run under pytest-asyncio (asyncio_mode = "auto").
"""

from pathlib import Path

import pytest

from fallback_store.core.config import Settings
from fallback_store.infrastructure.local_store.bootstrap import bootstrap_fallback_store
from fallback_store.infrastructure.local_store.client import FallbackClient
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty, not-yet-created store directory."""
    return tmp_path / "fallback-data"


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Settings pointed at the per-test data directory."""
    return Settings(_env_file=None, fallback_data_dir=str(data_dir), remote_url=None)


@pytest.fixture
def store(data_dir: Path) -> JsonRecordStore:
    """Record store whose directory exists but holds no collection files."""
    data_dir.mkdir(parents=True)
    return JsonRecordStore(data_dir)


@pytest.fixture
async def client(data_dir: Path, settings: Settings) -> FallbackClient:
    """Client over a freshly bootstrapped (seeded) store."""
    return await bootstrap_fallback_store(data_dir, settings=settings)
