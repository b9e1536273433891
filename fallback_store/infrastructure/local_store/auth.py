"""Fallback auth adapter backed by the local users/profiles collections.

Emulates the subset of a hosted auth provider the application needs offline:
sign-in, token lookup, sign-up and profile/metadata updates. Unlike query
execution, these operations raise on failure.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from fallback_store.application.dtos.auth import AuthResponse, AuthUser, Session
from fallback_store.domain.enums import ProfileStatus
from fallback_store.domain.exceptions import (
    InvalidTokenException,
    ProfileNotFoundException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)
from fallback_store.infrastructure.exceptions import StorageException
from fallback_store.infrastructure.local_store.collections import (
    COLLECTION_PROFILES,
    COLLECTION_USERS,
)
from fallback_store.infrastructure.local_store.record_store import JsonRecordStore, Record
from fallback_store.infrastructure.security.tokens import (
    create_access_token,
    create_refresh_token,
    parse_token,
)
from fallback_store.schemas.auth import SignInWithPasswordCredentials, SignUpCredentials
from fallback_store.shared.utils.datetime import utc_now, utc_now_iso
from fallback_store.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> dict[str, Any]:
    """Metadata may be stored as a dict or as a JSON-encoded string."""
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, str) and value:
        try:
            decoded = json.loads(value)
        except ValueError:
            return {}
        return decoded if isinstance(decoded, dict) else {}
    return {}


def _validate(model: type[BaseModel], credentials: Any) -> Any:
    if isinstance(credentials, model):
        return credentials
    try:
        return model.model_validate(credentials)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else None
        raise ValidationException(first.get("msg", "Invalid credentials"), field) from e


def _same_email(a: Any, b: str) -> bool:
    return isinstance(a, str) and a.casefold() == b.casefold()


class FallbackAuthClient:
    """Auth provider stand-in. Same calling style as the hosted client's auth API."""

    def __init__(self, store: JsonRecordStore, token_prefix: str = "fallback") -> None:
        self._store = store
        self.token_prefix = token_prefix

    def _to_user(self, user: Record, profile: Record | None) -> AuthUser:
        return AuthUser(
            id=user.get("id", ""),
            email=user.get("email", ""),
            user_metadata=_as_dict(user.get("user_metadata")),
            app_metadata=_as_dict(user.get("app_metadata")),
            created_at=user.get("created_at"),
            profile=dict(profile) if profile is not None else None,
        )

    async def _find_profile(self, user_id: str) -> Record | None:
        profiles = await self._store.read(COLLECTION_PROFILES)
        return next((p for p in profiles if p.get("user_id") == user_id), None)

    async def sign_in_with_password(
        self, credentials: Mapping[str, Any] | SignInWithPasswordCredentials
    ) -> AuthResponse:
        """Look up the user by email and issue a session. The password is not checked.

        Raises:
            ValidationException: credentials are malformed.
            UserNotFoundException: no user has this email.
        """
        creds = _validate(SignInWithPasswordCredentials, credentials)
        users = await self._store.read(COLLECTION_USERS)
        user = next((u for u in users if _same_email(u.get("email"), creds.email)), None)
        # Rows inserted through the query builder are not schema-checked.
        user_id = user.get("id") if user is not None else None
        if not user_id:
            raise UserNotFoundException(email=creds.email)

        now = utc_now()
        auth_user = self._to_user(user, await self._find_profile(user_id))
        session = Session(
            access_token=create_access_token(self.token_prefix, user_id, now),
            refresh_token=create_refresh_token(self.token_prefix, user_id, now),
            user=auth_user,
        )
        logger.info("Fallback sign-in for user %s", user_id)
        return AuthResponse(user=auth_user, session=session)

    async def get_user(self, token: str) -> AuthResponse:
        """Resolve an access token to its user.

        Raises:
            InvalidTokenException: token is malformed or its user no longer exists.
        """
        parsed = parse_token(token, self.token_prefix)
        users = await self._store.read(COLLECTION_USERS)
        user = next((u for u in users if u.get("id") == parsed.user_id), None)
        if user is None:
            raise InvalidTokenException("Token references an unknown user")
        return AuthResponse(user=self._to_user(user, await self._find_profile(parsed.user_id)))

    async def sign_up(
        self, credentials: Mapping[str, Any] | SignUpCredentials
    ) -> AuthResponse:
        """Create a user and its profile, then return a session for it.

        If the profile cannot be written the new user row is removed again,
        so a retry with the same email does not hit UserAlreadyExistsException.

        Raises:
            ValidationException: credentials are malformed.
            UserAlreadyExistsException: the email is already registered.
            StorageException: users or profiles could not be read or written.
        """
        creds = _validate(SignUpCredentials, credentials)
        now = utc_now().isoformat()
        user_id = generate_cuid()
        async with self._store.lock(COLLECTION_USERS):
            users = await self._store.read(COLLECTION_USERS)
            if any(_same_email(u.get("email"), creds.email) for u in users):
                raise UserAlreadyExistsException(creds.email)
            user: Record = {
                "id": user_id,
                "email": creds.email,
                "user_metadata": {"role": creds.role.value},
                "app_metadata": {},
                "created_at": now,
                "updated_at": now,
            }
            users.append(user)
            await self._store.write(COLLECTION_USERS, users)

        try:
            async with self._store.lock(COLLECTION_PROFILES):
                profiles = await self._store.read(COLLECTION_PROFILES)
                profiles.append({
                    "id": user_id,
                    "user_id": user_id,
                    "first_name": creds.first_name,
                    "last_name": creds.last_name,
                    "role": creds.role.value,
                    "status": ProfileStatus.ACTIVE.value,
                    "created_at": now,
                    "updated_at": now,
                })
                await self._store.write(COLLECTION_PROFILES, profiles)
        except StorageException:
            logger.warning("Profile write failed for new user %s, removing user row", user_id)
            await self._remove_user(user_id)
            raise

        logger.info("Fallback sign-up created user %s", user_id)
        return await self.sign_in_with_password(
            {"email": creds.email, "password": creds.password}
        )

    async def _remove_user(self, user_id: str) -> None:
        async with self._store.lock(COLLECTION_USERS):
            users = await self._store.read(COLLECTION_USERS)
            await self._store.write(
                COLLECTION_USERS, [u for u in users if u.get("id") != user_id]
            )

    async def update_profile(self, user_id: str, patch: Mapping[str, Any]) -> Record:
        """Shallow-merge patch onto the user's profile and stamp updated_at.

        Raises:
            ProfileNotFoundException: no profile has this user_id.
        """
        async with self._store.lock(COLLECTION_PROFILES):
            profiles = await self._store.read(COLLECTION_PROFILES)
            index = next(
                (i for i, p in enumerate(profiles) if p.get("user_id") == user_id),
                None,
            )
            if index is None:
                raise ProfileNotFoundException(user_id)
            profiles[index] = {
                **profiles[index],
                **dict(patch),
                "updated_at": utc_now_iso(),
            }
            await self._store.write(COLLECTION_PROFILES, profiles)
        logger.info("Updated fallback profile for user %s: %s", user_id, sorted(patch))
        return dict(profiles[index])

    async def update_user_metadata(self, user_id: str, patch: Mapping[str, Any]) -> AuthUser:
        """Shallow-merge patch into the user's user_metadata.

        Raises:
            UserNotFoundException: no user has this id.
        """
        async with self._store.lock(COLLECTION_USERS):
            users = await self._store.read(COLLECTION_USERS)
            index = next((i for i, u in enumerate(users) if u.get("id") == user_id), None)
            if index is None:
                raise UserNotFoundException(user_id=user_id)
            user = users[index]
            users[index] = {
                **user,
                "user_metadata": {**_as_dict(user.get("user_metadata")), **dict(patch)},
                "updated_at": utc_now_iso(),
            }
            await self._store.write(COLLECTION_USERS, users)
        return self._to_user(users[index], await self._find_profile(user_id))
