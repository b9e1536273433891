"""Input schemas (pydantic) for the auth adapter."""

from fallback_store.schemas.auth import SignInWithPasswordCredentials, SignUpCredentials

__all__ = ["SignInWithPasswordCredentials", "SignUpCredentials"]
