"""Seed records written on first bootstrap.

Three role accounts (researcher, participant, admin) with matching profiles,
two active studies owned by the researcher, and applications, a wallet and
transactions for the participant. Ids are fixed so seeded records can be
referenced from tests and local tooling.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from fallback_store.domain.enums import (
    ApplicationStatus,
    ProfileRole,
    ProfileStatus,
    StudyStatus,
    TransactionType,
)
from fallback_store.infrastructure.local_store.collections import (
    COLLECTION_APPLICATIONS,
    COLLECTION_PROFILES,
    COLLECTION_STUDIES,
    COLLECTION_TRANSACTIONS,
    COLLECTION_USERS,
    COLLECTION_WALLET,
)
from fallback_store.shared.utils.datetime import utc_now

RESEARCHER_ID = "test-researcher-001"
PARTICIPANT_ID = "test-participant-001"
ADMIN_ID = "test-admin-001"

# (id, email, role, first_name)
TEST_ACCOUNTS: tuple[tuple[str, str, ProfileRole, str], ...] = (
    (RESEARCHER_ID, "abwanwr77+Researcher@gmail.com", ProfileRole.RESEARCHER, "Research"),
    (PARTICIPANT_ID, "abwanwr77+participant@gmail.com", ProfileRole.PARTICIPANT, "Participant"),
    (ADMIN_ID, "abwanwr77+admin@gmail.com", ProfileRole.ADMIN, "Admin"),
)


def build_seed_data(now: datetime | None = None) -> dict[str, list[dict[str, Any]]]:
    """Return seed records per collection, timestamped relative to now.

    study-002 is created one day after study-001, so ordering studies by
    created_at descending puts study-002 first.
    """
    now = now or utc_now()
    ts = now.isoformat()

    users = [
        {
            "id": user_id,
            "email": email,
            "user_metadata": {"role": role.value},
            "app_metadata": {},
            "created_at": ts,
            "updated_at": ts,
        }
        for user_id, email, role, _ in TEST_ACCOUNTS
    ]
    profiles = [
        {
            "id": user_id,
            "user_id": user_id,
            "first_name": first_name,
            "last_name": "User",
            "role": role.value,
            "status": ProfileStatus.ACTIVE.value,
            "created_at": ts,
            "updated_at": ts,
        }
        for user_id, _, role, first_name in TEST_ACCOUNTS
    ]
    studies = [
        {
            "id": "study-001",
            "title": "Mobile App Usability Study",
            "description": "Test the usability of our mobile application",
            "status": StudyStatus.ACTIVE.value,
            "type": "unmoderated",
            "created_by": RESEARCHER_ID,
            "settings": {"duration": 30, "payment": 25},
            "created_at": (now - timedelta(days=2)).isoformat(),
            "updated_at": ts,
        },
        {
            "id": "study-002",
            "title": "Website Navigation Study",
            "description": "Evaluate website navigation patterns",
            "status": StudyStatus.ACTIVE.value,
            "type": "unmoderated",
            "created_by": RESEARCHER_ID,
            "settings": {"duration": 20, "payment": 15},
            "created_at": (now - timedelta(days=1)).isoformat(),
            "updated_at": ts,
        },
    ]
    applications = [
        {
            "id": "app-001",
            "study_id": "study-001",
            "participant_id": PARTICIPANT_ID,
            "status": ApplicationStatus.APPROVED.value,
            "applied_at": ts,
            "reviewed_at": ts,
            "notes": "Qualified participant",
        },
        {
            "id": "app-002",
            "study_id": "study-002",
            "participant_id": PARTICIPANT_ID,
            "status": ApplicationStatus.PENDING.value,
            "applied_at": ts,
            "reviewed_at": None,
            "notes": None,
        },
    ]
    wallet = [
        {
            "id": f"wallet-{PARTICIPANT_ID}",
            "user_id": PARTICIPANT_ID,
            "balance": 125.50,
            "total_earned": 567.25,
            "pending_amount": 15.00,
            "created_at": ts,
            "updated_at": ts,
        }
    ]
    transactions = [
        {
            "id": "txn-001",
            "user_id": PARTICIPANT_ID,
            "amount": 25.00,
            "type": TransactionType.EARNING.value,
            "status": "completed",
            "description": "Payment for Mobile App Usability Study",
            "reference_id": "study-001",
            "created_at": (now - timedelta(days=7)).isoformat(),
        },
        {
            "id": "txn-002",
            "user_id": PARTICIPANT_ID,
            "amount": 100.50,
            "type": TransactionType.EARNING.value,
            "status": "completed",
            "description": "Payment for Website Navigation Study",
            "reference_id": "study-002",
            "created_at": (now - timedelta(days=14)).isoformat(),
        },
    ]
    return {
        COLLECTION_USERS: users,
        COLLECTION_PROFILES: profiles,
        COLLECTION_STUDIES: studies,
        COLLECTION_APPLICATIONS: applications,
        COLLECTION_WALLET: wallet,
        COLLECTION_TRANSACTIONS: transactions,
    }
