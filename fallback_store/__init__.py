"""Local fallback data store for ResearchHub offline development.

Typical use:

    client = await bootstrap_fallback_store()
    response = await client.from_("studies").eq("status", "active").execute()
    auth = await client.auth.sign_in_with_password({"email": ..., "password": ...})
"""

from fallback_store.application.dtos import AuthResponse, AuthUser, QueryResponse, Session
from fallback_store.infrastructure.local_store import (
    FallbackAuthClient,
    FallbackClient,
    JsonRecordStore,
    QueryBuilder,
    bootstrap_fallback_store,
)

__all__ = [
    "AuthResponse",
    "AuthUser",
    "FallbackAuthClient",
    "FallbackClient",
    "JsonRecordStore",
    "QueryBuilder",
    "QueryResponse",
    "Session",
    "bootstrap_fallback_store",
]
