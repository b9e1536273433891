"""Infrastructure exceptions for the local record store and query execution.

Storage errors extend FallbackStoreException so callers can handle domain
and storage failures uniformly. The query builder returns these as the
`error` of a QueryResponse rather than raising them.
"""

from fallback_store.domain.exceptions import FallbackStoreException


class StorageException(FallbackStoreException):
    """Base exception for record store and query operations."""


class UnknownCollectionError(StorageException):
    """Collection name is not one of the configured collections."""

    def __init__(self, collection: str) -> None:
        super().__init__(
            f"Unknown collection: {collection}",
            "UNKNOWN_COLLECTION",
            {"collection": collection},
        )


class StorageReadError(StorageException):
    """Reading or parsing a collection file failed."""

    def __init__(self, collection: str, reason: str) -> None:
        super().__init__(
            f"Failed to read collection: {collection}",
            "STORAGE_READ_ERROR",
            {"collection": collection, "reason": reason},
        )


class StorageWriteError(StorageException):
    """Writing a collection file failed."""

    def __init__(self, collection: str, reason: str) -> None:
        super().__init__(
            f"Failed to write collection: {collection}",
            "STORAGE_WRITE_ERROR",
            {"collection": collection, "reason": reason},
        )


class NoRowsFoundError(StorageException):
    """single() query matched zero records."""

    def __init__(self, collection: str) -> None:
        super().__init__(
            "No data found",
            "NOT_FOUND",
            {"collection": collection},
        )


class QueryValidationError(StorageException):
    """Query was configured with invalid arguments (e.g. negative limit)."""

    def __init__(self, collection: str, reason: str) -> None:
        super().__init__(
            f"Invalid query on {collection}: {reason}",
            "QUERY_VALIDATION_ERROR",
            {"collection": collection, "reason": reason},
        )


class QueryExecutionError(StorageException):
    """Unexpected failure while evaluating a query (e.g. incomparable sort values)."""

    def __init__(self, collection: str, reason: str) -> None:
        super().__init__(
            f"Query on {collection} failed",
            "QUERY_EXECUTION_ERROR",
            {"collection": collection, "reason": reason},
        )
