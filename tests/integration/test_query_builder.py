"""QueryBuilder tests: filter, order, limit, projection, single and insert semantics."""

import asyncio
from pathlib import Path

import pytest

from fallback_store.infrastructure.exceptions import (
    NoRowsFoundError,
    QueryExecutionError,
    QueryValidationError,
    StorageReadError,
    UnknownCollectionError,
)
from fallback_store.infrastructure.local_store.client import FallbackClient
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore

STUDIES = [
    {"id": "s1", "status": "active", "type": "moderated", "created_at": "2025-01-01", "score": 3},
    {"id": "s2", "status": "draft", "type": "moderated", "created_at": "2025-01-03", "score": 1},
    {"id": "s3", "status": "active", "type": "unmoderated", "created_at": "2025-01-02", "score": 3},
    {"id": "s4", "status": "active", "type": "moderated", "created_at": "2025-01-04", "score": 2},
    {"id": "s5", "status": "active", "type": "moderated", "created_at": "2025-01-05", "score": 3},
]


@pytest.fixture
async def db(store: JsonRecordStore) -> FallbackClient:
    await store.write("studies", STUDIES)
    return FallbackClient(store)


class TestBuilderState:
    async def test_configuration_methods_chain(self, db: FallbackClient) -> None:
        q = db.from_("studies")
        assert q.select("id") is q
        assert q.eq("status", "active") is q
        assert q.order("created_at") is q
        assert q.limit(2) is q
        assert q.single() is q
        assert q.insert({"id": "x"}) is q

    async def test_configuration_does_not_touch_storage(self, store: JsonRecordStore) -> None:
        db = FallbackClient(store)
        db.from_("studies").insert({"id": "x"}).eq("id", "x").limit(1)
        assert await store.exists("studies") is False

    async def test_table_alias(self, db: FallbackClient) -> None:
        assert db.table("studies").collection == "studies"


class TestSelect:
    async def test_default_returns_all_in_insertion_order(self, db: FallbackClient) -> None:
        response = await db.from_("studies").execute()
        assert response.error is None
        assert response.data == STUDIES
        assert response.count == 5

    async def test_projection(self, db: FallbackClient) -> None:
        response = await db.from_("studies").select("id, status").eq("id", "s1").execute()
        assert response.data == [{"id": "s1", "status": "active"}]

    async def test_projection_skips_missing_fields(self, db: FallbackClient) -> None:
        response = await db.from_("studies").select("id,nope").limit(1).execute()
        assert response.data == [{"id": "s1"}]

    async def test_projection_does_not_affect_matching(self, db: FallbackClient) -> None:
        """Filtering on a column that is not selected still works."""
        response = await db.from_("studies").select("id").eq("status", "draft").execute()
        assert response.data == [{"id": "s2"}]

    async def test_returned_records_are_copies(self, db: FallbackClient) -> None:
        first = await db.from_("studies").eq("id", "s1").execute()
        first.data[0]["status"] = "mutated"
        again = await db.from_("studies").eq("id", "s1").execute()
        assert again.data[0]["status"] == "active"


class TestFilter:
    async def test_conjunction(self, db: FallbackClient) -> None:
        response = await (
            db.from_("studies").eq("status", "active").eq("type", "moderated").execute()
        )
        assert [r["id"] for r in response.data] == ["s1", "s4", "s5"]

    async def test_record_matching_one_predicate_excluded(self, db: FallbackClient) -> None:
        await db.from_("studies").insert({"id": "s6", "status": "active", "type": "hybrid"}).execute()
        response = await (
            db.from_("studies").eq("status", "active").eq("type", "moderated").execute()
        )
        assert "s6" not in [r["id"] for r in response.data]

    async def test_missing_field_never_matches(self, db: FallbackClient) -> None:
        response = await db.from_("studies").eq("owner", None).execute()
        assert response.data == []

    async def test_booleans_do_not_match_numbers(self, store: JsonRecordStore) -> None:
        await store.write(
            "studies",
            [{"id": "a", "flag": True}, {"id": "b", "flag": 1}, {"id": "c", "flag": 1.0}],
        )
        db = FallbackClient(store)
        by_bool = await db.from_("studies").eq("flag", True).execute()
        assert [r["id"] for r in by_bool.data] == ["a"]
        by_number = await db.from_("studies").eq("flag", 1).execute()
        assert [r["id"] for r in by_number.data] == ["b", "c"]

    async def test_no_match_returns_empty_list(self, db: FallbackClient) -> None:
        response = await db.from_("studies").eq("status", "archived").execute()
        assert response.error is None
        assert response.data == []


class TestOrder:
    async def test_ascending(self, db: FallbackClient) -> None:
        response = await db.from_("studies").order("created_at").execute()
        assert [r["id"] for r in response.data] == ["s1", "s3", "s2", "s4", "s5"]

    async def test_descending(self, db: FallbackClient) -> None:
        response = await db.from_("studies").order("created_at", ascending=False).execute()
        assert [r["id"] for r in response.data] == ["s5", "s4", "s2", "s3", "s1"]

    async def test_ties_keep_insertion_order(self, db: FallbackClient) -> None:
        asc = await db.from_("studies").order("score").execute()
        assert [r["id"] for r in asc.data] == ["s2", "s4", "s1", "s3", "s5"]
        desc = await db.from_("studies").order("score", ascending=False).execute()
        assert [r["id"] for r in desc.data] == ["s1", "s3", "s5", "s4", "s2"]

    async def test_last_order_call_wins(self, db: FallbackClient) -> None:
        response = await (
            db.from_("studies").order("score").order("created_at", ascending=False).execute()
        )
        assert [r["id"] for r in response.data][0] == "s5"

    async def test_missing_values_sort_last_ascending(self, store: JsonRecordStore) -> None:
        await store.write("wallet", [{"id": "a"}, {"id": "b", "balance": 2}, {"id": "c", "balance": 1}])
        db = FallbackClient(store)
        asc = await db.from_("wallet").order("balance").execute()
        assert [r["id"] for r in asc.data] == ["c", "b", "a"]
        desc = await db.from_("wallet").order("balance", ascending=False).execute()
        assert [r["id"] for r in desc.data] == ["a", "b", "c"]

    async def test_incomparable_values_returned_as_error(self, store: JsonRecordStore) -> None:
        await store.write("wallet", [{"id": "a", "balance": 1}, {"id": "b", "balance": "two"}])
        response = await FallbackClient(store).from_("wallet").order("balance").execute()
        assert response.data is None
        assert isinstance(response.error, QueryExecutionError)


class TestLimit:
    @pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (3, 3), (4, 4), (10, 4)])
    async def test_returns_min_of_n_and_matches(self, db: FallbackClient, n: int, expected: int) -> None:
        response = await db.from_("studies").eq("status", "active").limit(n).execute()
        assert len(response.data) == expected

    async def test_applied_after_order(self, db: FallbackClient) -> None:
        response = await db.from_("studies").order("created_at", ascending=False).limit(2).execute()
        assert [r["id"] for r in response.data] == ["s5", "s4"]

    async def test_negative_limit_is_error(self, db: FallbackClient) -> None:
        response = await db.from_("studies").limit(-1).execute()
        assert response.data is None
        assert isinstance(response.error, QueryValidationError)


class TestSingle:
    async def test_returns_bare_record(self, db: FallbackClient) -> None:
        response = await db.from_("studies").eq("id", "s3").single().execute()
        assert response.error is None
        assert response.data == STUDIES[2]
        assert response.count == 1

    async def test_zero_matches_is_not_found(self, db: FallbackClient) -> None:
        response = await db.from_("studies").eq("id", "missing").single().execute()
        assert response.data is None
        assert isinstance(response.error, NoRowsFoundError)
        assert response.error.message == "No data found"
        assert response.count is None

    async def test_many_matches_takes_first_in_order(self, db: FallbackClient) -> None:
        response = await db.from_("studies").eq("status", "active").single().execute()
        assert response.error is None
        assert response.data["id"] == "s1"

    async def test_most_recent_active_study(self, client: FallbackClient) -> None:
        """Seeded store: most recently created active study comes back as a bare object."""
        response = await (
            client.from_("studies")
            .eq("status", "active")
            .order("created_at", ascending=False)
            .limit(1)
            .single()
            .execute()
        )
        assert response.error is None
        assert isinstance(response.data, dict)
        assert response.data["id"] == "study-002"


class TestInsert:
    async def test_round_trip(self, db: FallbackClient) -> None:
        record = {"id": "s9", "status": "paused", "settings": {"duration": 10}, "tags": ["a"]}
        inserted = await db.from_("studies").insert(record).execute()
        assert inserted.error is None
        assert inserted.data == record

        fetched = await db.from_("studies").eq("id", "s9").single().execute()
        assert fetched.data == record

    async def test_appends_preserving_order(self, db: FallbackClient) -> None:
        await db.from_("studies").insert([{"id": "s7"}, {"id": "s8"}]).execute()
        response = await db.from_("studies").select("id").execute()
        assert [r["id"] for r in response.data] == ["s1", "s2", "s3", "s4", "s5", "s7", "s8"]

    async def test_insert_into_missing_file_creates_it(self, store: JsonRecordStore) -> None:
        db = FallbackClient(store)
        response = await db.from_("transactions").insert({"id": "t1"}).execute()
        assert response.data == {"id": "t1"}
        assert await store.read("transactions") == [{"id": "t1"}]

    async def test_insert_many_with_single_returns_first(self, db: FallbackClient) -> None:
        response = await db.from_("studies").insert([{"id": "a"}, {"id": "b"}]).single().execute()
        assert response.data == {"id": "a"}

    async def test_no_id_assigned(self, db: FallbackClient) -> None:
        response = await db.from_("studies").insert({"title": "untitled"}).execute()
        assert response.data == {"title": "untitled"}

    async def test_duplicate_ids_not_rejected(self, db: FallbackClient) -> None:
        await db.from_("studies").insert({"id": "s1", "status": "copy"}).execute()
        response = await db.from_("studies").eq("id", "s1").execute()
        assert len(response.data) == 2

    async def test_non_mapping_rejected(self, db: FallbackClient) -> None:
        response = await db.from_("studies").insert(["not-a-record"]).execute()
        assert isinstance(response.error, QueryValidationError)
        assert len((await db.from_("studies").execute()).data) == len(STUDIES)

    async def test_concurrent_inserts_are_serialized(self, db: FallbackClient) -> None:
        await asyncio.gather(
            *(db.from_("applications").insert({"id": f"app-{i}"}).execute() for i in range(25))
        )
        response = await db.from_("applications").execute()
        assert {r["id"] for r in response.data} == {f"app-{i}" for i in range(25)}


class TestErrorsAsValues:
    async def test_unknown_collection(self, db: FallbackClient) -> None:
        response = await db.from_("payments").select("*").execute()
        assert response.data is None
        assert isinstance(response.error, UnknownCollectionError)
        assert response.ok is False

    async def test_unknown_collection_insert(self, db: FallbackClient) -> None:
        response = await db.from_("payments").insert({"id": "p"}).execute()
        assert isinstance(response.error, UnknownCollectionError)

    async def test_corrupt_file(self, db: FallbackClient, data_dir: Path) -> None:
        (data_dir / "studies.json").write_text("not json", encoding="utf-8")
        response = await db.from_("studies").execute()
        assert response.data is None
        assert isinstance(response.error, StorageReadError)
