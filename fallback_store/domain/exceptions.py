"""Domain exceptions for the fallback store.

Identity and lifecycle operations (sign-in, token checks, profile updates,
bootstrap) raise these. Data-access operations return storage errors as
values instead (see fallback_store.infrastructure.exceptions).
"""

from typing import Any


class FallbackStoreException(Exception):
    """Base exception for all fallback store errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. collection, user_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(FallbackStoreException):
    """Raised when input validation fails (e.g. malformed credentials)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(FallbackStoreException):
    """Raised when authentication fails."""

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: str = "AUTHENTICATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class InvalidTokenException(AuthenticationException):
    """Raised when a token is malformed or references an unknown user."""

    def __init__(self, reason: str = "Invalid token") -> None:
        """Initialize with the reason the token was rejected.

        Args:
            reason: Short description (never includes the token itself).
        """
        super().__init__(reason, "INVALID_TOKEN", {"reason": reason})


class UserNotFoundException(FallbackStoreException):
    """Raised when no user matches the given email or id."""

    def __init__(self, email: str | None = None, user_id: str | None = None) -> None:
        details: dict[str, Any] = {}
        if email is not None:
            details["email"] = email
        if user_id is not None:
            details["user_id"] = user_id
        super().__init__("User not found", "USER_NOT_FOUND", details)


class UserAlreadyExistsException(FallbackStoreException):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email is already registered",
            "USER_ALREADY_EXISTS",
            {"email": email},
        )


class ProfileNotFoundException(FallbackStoreException):
    """Raised when no profile references the given user id."""

    def __init__(self, user_id: str) -> None:
        """Initialize with the user id whose profile is missing.

        Args:
            user_id: Value looked up in profiles.user_id.
        """
        super().__init__(
            f"Profile not found for user: {user_id}",
            "PROFILE_NOT_FOUND",
            {"user_id": user_id},
        )


class BootstrapFailureException(FallbackStoreException):
    """Raised when the store cannot be initialized (e.g. data dir not creatable)."""

    def __init__(self, data_dir: str, reason: str) -> None:
        super().__init__(
            f"Failed to initialize fallback store at {data_dir}",
            "BOOTSTRAP_FAILURE",
            {"data_dir": data_dir, "reason": reason},
        )
