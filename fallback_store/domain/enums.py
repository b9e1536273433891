"""Domain enumerations for the fallback store.

Values match what the hosted backend stores, so seeded records and records
written by calling code look the same in both modes.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ProfileRole(_ValuesMixin, str, Enum):
    """Account role stored on profiles and in user metadata."""

    RESEARCHER = "researcher"
    PARTICIPANT = "participant"
    ADMIN = "admin"


class ProfileStatus(_ValuesMixin, str, Enum):
    """Profile account status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class StudyStatus(_ValuesMixin, str, Enum):
    """Study lifecycle status."""

    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class ApplicationStatus(_ValuesMixin, str, Enum):
    """Participant application status for a study."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TransactionType(_ValuesMixin, str, Enum):
    """Wallet transaction type."""

    EARNING = "earning"
    WITHDRAWAL = "withdrawal"
    BONUS = "bonus"
