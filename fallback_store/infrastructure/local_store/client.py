"""Client facade: the object calling code holds in fallback mode.

Mirrors the hosted client's entry points (from_/table for data, auth for
identity) so code written against it can be redirected here. Construct one
per application (see bootstrap_fallback_store) and pass it to consumers.
"""

from __future__ import annotations

from fallback_store.infrastructure.local_store.auth import FallbackAuthClient
from fallback_store.infrastructure.local_store.query_builder import QueryBuilder
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore
from fallback_store.infrastructure.security.tokens import is_fallback_token


class FallbackClient:
    """Local data + auth client over a JsonRecordStore."""

    def __init__(self, store: JsonRecordStore, *, token_prefix: str = "fallback") -> None:
        self.store = store
        self.token_prefix = token_prefix
        self.auth = FallbackAuthClient(store, token_prefix=token_prefix)

    def from_(self, collection: str) -> QueryBuilder:
        """Start a query on a collection. Unknown names surface as an error on execute()."""
        return QueryBuilder(self.store, collection)

    def table(self, collection: str) -> QueryBuilder:
        """Alias of from_()."""
        return self.from_(collection)

    def is_fallback_token(self, token: str) -> bool:
        """Return True if token was issued by this client's auth adapter scheme."""
        return is_fallback_token(token, self.token_prefix)
