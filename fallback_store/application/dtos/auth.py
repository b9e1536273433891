"""DTOs for the fallback auth adapter (no dependency on storage)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthUser:
    """Denormalized user + profile view returned by sign-in and get_user."""

    id: str
    email: str
    user_metadata: dict[str, Any] = field(default_factory=dict)
    app_metadata: dict[str, Any] = field(default_factory=dict)
    created_at: str | None = None
    profile: dict[str, Any] | None = None

    @property
    def role(self) -> str | None:
        """Profile role, falling back to the role recorded in user metadata."""
        if self.profile and self.profile.get("role"):
            return self.profile["role"]
        return self.user_metadata.get("role")


@dataclass(frozen=True)
class Session:
    """Issued fallback session. Tokens are unsigned; development use only."""

    access_token: str
    refresh_token: str
    user: AuthUser
    token_type: str = "bearer"

    @property
    def token(self) -> str:
        return self.access_token


@dataclass(frozen=True)
class AuthResponse:
    """Result of auth operations. session is None for get_user."""

    user: AuthUser
    session: Session | None = None
