"""Local JSON-file fallback store: record store, query builder, auth adapter, bootstrap."""

from fallback_store.infrastructure.local_store.auth import FallbackAuthClient
from fallback_store.infrastructure.local_store.bootstrap import bootstrap_fallback_store
from fallback_store.infrastructure.local_store.client import FallbackClient
from fallback_store.infrastructure.local_store.query_builder import QueryBuilder
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore

__all__ = [
    "FallbackAuthClient",
    "FallbackClient",
    "JsonRecordStore",
    "QueryBuilder",
    "bootstrap_fallback_store",
]
