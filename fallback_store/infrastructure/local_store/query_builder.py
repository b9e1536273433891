"""Fluent query builder over one collection of the local record store."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from fallback_store.application.dtos.query import QueryResponse
from fallback_store.domain.exceptions import FallbackStoreException
from fallback_store.infrastructure.exceptions import (
    NoRowsFoundError,
    QueryExecutionError,
    QueryValidationError,
)
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore, Record

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class _EqFilter:
    column: str
    value: Any

    def matches(self, record: Mapping[str, Any]) -> bool:
        value = record.get(self.column, _MISSING)
        # JSON true/false never equal the numbers 1/0.
        return value == self.value and isinstance(value, bool) == isinstance(self.value, bool)


@dataclass(frozen=True)
class _OrderBy:
    column: str
    ascending: bool = True


def _sort_key(column: str):
    # None and missing values sort after everything else (before, when descending).
    def key(record: Mapping[str, Any]) -> tuple[bool, Any]:
        value = record.get(column)
        return (value is None, value)

    return key


class QueryBuilder:
    """Describe a read or insert, then run it with execute().

    Configuration methods return self and never touch storage. execute()
    never raises: failures come back as QueryResponse(data=None, error=...).

    Example:
        response = await (
            client.from_("studies")
            .select("id, title")
            .eq("status", "active")
            .order("created_at", ascending=False)
            .limit(5)
            .execute()
        )
    """

    def __init__(self, store: JsonRecordStore, collection: str) -> None:
        self._store = store
        self.collection = collection
        self._columns: str = "*"
        self._filters: list[_EqFilter] = []
        self._order_by: _OrderBy | None = None
        self._limit: int | None = None
        self._single = False
        self._insert_data: Record | list[Record] | None = None

    def select(self, columns: str = "*") -> QueryBuilder:
        """Set the projection: "*" or a comma-separated column list."""
        self._columns = columns
        return self

    def eq(self, column: str, value: Any) -> QueryBuilder:
        """Keep only records whose column equals value. Multiple calls AND together."""
        self._filters.append(_EqFilter(column, value))
        return self

    def order(self, column: str, *, ascending: bool = True) -> QueryBuilder:
        """Sort by one column. A later call replaces the previous order."""
        self._order_by = _OrderBy(column, ascending)
        return self

    def limit(self, count: int) -> QueryBuilder:
        """Return at most count records (applied after filter and order)."""
        self._limit = count
        return self

    def single(self) -> QueryBuilder:
        """Return one bare record, or a NoRowsFoundError when nothing matches."""
        self._limit = 1
        self._single = True
        return self

    def insert(self, data: Record | Sequence[Record]) -> QueryBuilder:
        """Switch to insert mode: append record(s) on execute. Caller supplies ids."""
        if isinstance(data, Mapping):
            self._insert_data = dict(data)
        else:
            self._insert_data = list(data)
        return self

    async def execute(self) -> QueryResponse:
        """Run the query against the store."""
        try:
            if self._insert_data is not None:
                data = await self._execute_insert()
            else:
                data = await self._execute_select()
        except FallbackStoreException as e:
            logger.debug("Query on %s failed: %s", self.collection, e.message)
            return QueryResponse(data=None, error=e)
        except Exception as e:
            logger.warning("Unexpected error querying %s: %s", self.collection, e)
            return QueryResponse(
                data=None, error=QueryExecutionError(self.collection, str(e))
            )
        return QueryResponse(data=data)

    async def _execute_insert(self) -> Any:
        new_records = (
            [self._insert_data]
            if isinstance(self._insert_data, dict)
            else self._insert_data
        )
        for record in new_records:
            if not isinstance(record, Mapping):
                raise QueryValidationError(
                    self.collection,
                    f"insert expects mappings, got {type(record).__name__}",
                )
        async with self._store.lock(self.collection):
            records = await self._store.read(self.collection)
            records.extend(copy.deepcopy(dict(r)) for r in new_records)
            await self._store.write(self.collection, records)
        logger.debug("Inserted %d record(s) into %s", len(new_records), self.collection)

        inserted = copy.deepcopy(self._insert_data)
        if self._single and isinstance(inserted, list):
            return inserted[0] if inserted else None
        return inserted

    async def _execute_select(self) -> Any:
        if self._limit is not None and self._limit < 0:
            raise QueryValidationError(
                self.collection, f"limit must be >= 0, got {self._limit}"
            )
        rows = await self._store.read(self.collection)

        for flt in self._filters:
            rows = [row for row in rows if flt.matches(row)]

        if self._order_by is not None:
            rows = sorted(
                rows,
                key=_sort_key(self._order_by.column),
                reverse=not self._order_by.ascending,
            )

        if self._limit is not None:
            rows = rows[: self._limit]

        rows = [self._project(row) for row in rows]

        if self._single:
            if not rows:
                raise NoRowsFoundError(self.collection)
            return rows[0]
        return rows

    def _project(self, row: Record) -> Record:
        columns = [c.strip() for c in self._columns.split(",") if c.strip()]
        if not columns or columns == ["*"]:
            return copy.deepcopy(row)
        return {c: copy.deepcopy(row[c]) for c in columns if c in row}
