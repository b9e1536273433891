"""Opaque fallback tokens: "<prefix>-token-<user_id>-<issued_at_ms>".

Tokens are NOT signed. Anyone who can build a string in this format can
impersonate any user id. They exist only so offline development can run
without the hosted auth provider; never accept them outside fallback mode.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from fallback_store.domain.exceptions import InvalidTokenException
from fallback_store.shared.utils.datetime import from_timestamp_ms_utc, to_epoch_ms, utc_now

TOKEN_DELIMITER = "-"
ACCESS_KIND = "token"
REFRESH_KIND = "refresh"

_ISSUED_AT = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ParsedToken:
    """Fields recovered from a fallback token."""

    kind: str
    user_id: str
    issued_at: datetime


def _build(prefix: str, kind: str, user_id: str, issued_at: datetime | None) -> str:
    issued_ms = to_epoch_ms(issued_at or utc_now())
    return TOKEN_DELIMITER.join((prefix, kind, user_id, str(issued_ms)))


def create_access_token(prefix: str, user_id: str, issued_at: datetime | None = None) -> str:
    """Return an access token for user_id issued at issued_at (default now)."""
    return _build(prefix, ACCESS_KIND, user_id, issued_at)


def create_refresh_token(prefix: str, user_id: str, issued_at: datetime | None = None) -> str:
    """Return a refresh token for user_id issued at issued_at (default now)."""
    return _build(prefix, REFRESH_KIND, user_id, issued_at)


def is_fallback_token(token: str, prefix: str) -> bool:
    """Return True if token uses the fallback scheme (access or refresh)."""
    return isinstance(token, str) and token.startswith(prefix + TOKEN_DELIMITER)


def parse_token(token: str, prefix: str, kind: str = ACCESS_KIND) -> ParsedToken:
    """Split a token into kind, user id and issue time.

    The user id is everything between the kind and the last delimiter, so ids
    that contain "-" survive the round trip.

    Raises:
        InvalidTokenException: Wrong scheme or kind, empty user id, or an
            issue time that is not an ASCII digit run within datetime range.
    """
    if not isinstance(token, str):
        raise InvalidTokenException("Token must be a string")
    head = f"{prefix}{TOKEN_DELIMITER}{kind}{TOKEN_DELIMITER}"
    if not token.startswith(head):
        raise InvalidTokenException("Token is not a fallback token")
    user_id, sep, issued = token[len(head):].rpartition(TOKEN_DELIMITER)
    if not sep or not user_id or not _ISSUED_AT.fullmatch(issued):
        raise InvalidTokenException("Malformed fallback token")
    try:
        issued_at = from_timestamp_ms_utc(int(issued))
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTokenException("Malformed fallback token") from e
    return ParsedToken(kind=kind, user_id=user_id, issued_at=issued_at)
