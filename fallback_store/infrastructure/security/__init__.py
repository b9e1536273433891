"""Security helpers: fallback token issue and parse."""

from fallback_store.infrastructure.security.tokens import (
    ParsedToken,
    create_access_token,
    create_refresh_token,
    is_fallback_token,
    parse_token,
)

__all__ = [
    "ParsedToken",
    "create_access_token",
    "create_refresh_token",
    "is_fallback_token",
    "parse_token",
]
