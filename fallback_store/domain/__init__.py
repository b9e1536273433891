"""Domain layer: enums and exceptions.

No dependencies on infrastructure. Used by the application and
infrastructure layers.
"""

from fallback_store.domain.enums import (
    ApplicationStatus,
    ProfileRole,
    ProfileStatus,
    StudyStatus,
    TransactionType,
)
from fallback_store.domain.exceptions import (
    AuthenticationException,
    BootstrapFailureException,
    FallbackStoreException,
    InvalidTokenException,
    ProfileNotFoundException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "ApplicationStatus",
    "ProfileRole",
    "ProfileStatus",
    "StudyStatus",
    "TransactionType",
    # Exceptions
    "AuthenticationException",
    "BootstrapFailureException",
    "FallbackStoreException",
    "InvalidTokenException",
    "ProfileNotFoundException",
    "UserAlreadyExistsException",
    "UserNotFoundException",
    "ValidationException",
]
