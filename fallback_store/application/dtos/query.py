"""DTOs for query execution results."""

from dataclasses import dataclass
from typing import Any

from fallback_store.domain.exceptions import FallbackStoreException


@dataclass(frozen=True)
class QueryResponse:
    """Result of QueryBuilder.execute(): data on success, error otherwise.

    data is a list of records, a single record (single() mode), or None
    when error is set. Exactly one of data/error is meaningful.
    """

    data: Any
    error: FallbackStoreException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def count(self) -> int | None:
        """Number of returned rows for list data, 1 for a bare record, None on error."""
        if self.error is not None:
            return None
        if isinstance(self.data, list):
            return len(self.data)
        return 0 if self.data is None else 1
