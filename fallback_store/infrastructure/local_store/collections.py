"""Collection names and backing file names (schema-in-code).

The local store has no DDL. Each collection is one JSON file holding an array
of records; these constants are the single source of truth for which
collections exist. Names match the hosted backend's table names.

Example:
    from fallback_store.infrastructure.local_store.collections import COLLECTION_STUDIES

    response = await client.from_(COLLECTION_STUDIES).select("*").execute()
"""

COLLECTION_USERS = "users"
COLLECTION_PROFILES = "profiles"
COLLECTION_STUDIES = "studies"
COLLECTION_APPLICATIONS = "applications"
COLLECTION_WALLET = "wallet"
COLLECTION_TRANSACTIONS = "transactions"

ALL_COLLECTIONS: tuple[str, ...] = (
    COLLECTION_USERS,
    COLLECTION_PROFILES,
    COLLECTION_STUDIES,
    COLLECTION_APPLICATIONS,
    COLLECTION_WALLET,
    COLLECTION_TRANSACTIONS,
)

# collection -> file name under the data directory
COLLECTION_FILES: dict[str, str] = {name: f"{name}.json" for name in ALL_COLLECTIONS}
