"""DTOs returned by the store facade and auth adapter."""

from fallback_store.application.dtos.auth import AuthResponse, AuthUser, Session
from fallback_store.application.dtos.query import QueryResponse

__all__ = ["AuthResponse", "AuthUser", "QueryResponse", "Session"]
