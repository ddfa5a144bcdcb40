"""
Mock Session/Identity Provider

CRITICAL: This is a development stand-in, NOT a security boundary.
Passwords are ignored and any email signs in.

States:
    signed-out  --login-->  signed-in
    signed-in   --logout--> signed-out

The identity is held by this object (owned by the application's
composition root) and mirrored into blob storage under
"<key_prefix>current_user" so init() can restore it after a restart.
"""

import asyncio
import hashlib
import json
from typing import Optional

import structlog
from pydantic import ValidationError

from lifemanager.config import AuthSettings, StorageSettings, get_settings
from lifemanager.models.session import UserSession
from lifemanager.services.storage.interface import (
    BlobStorageInterface,
    NotSignedInError,
    SerializationError,
)


SESSION_KEY = "current_user"


def fabricate_identity(email: str, display_name: Optional[str] = None) -> UserSession:
    """
    Build the deterministic identity for an email.

    The uid depends only on the normalized email, so the same email
    always maps to the same records.
    """
    normalized = email.strip().lower()
    digest = hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]
    if not display_name:
        local_part = normalized.split("@", 1)[0] or "user"
        display_name = local_part.replace(".", " ").replace("_", " ").title()
    return UserSession(
        uid=f"user_{digest}",
        email=email.strip(),
        display_name=display_name,
        email_verified=True,
    )


class SessionProvider:
    """Holds at most one signed-in identity."""

    def __init__(
        self,
        storage: BlobStorageInterface,
        storage_settings: Optional[StorageSettings] = None,
        auth_settings: Optional[AuthSettings] = None,
    ):
        settings = get_settings()
        self._storage = storage
        self._storage_settings = storage_settings or settings.storage
        self._auth_settings = auth_settings or settings.auth
        self._key = f"{self._storage_settings.key_prefix}{SESSION_KEY}"
        self._current: Optional[UserSession] = None
        self._logger = structlog.get_logger(__name__)

    @property
    def key(self) -> str:
        return self._key

    @property
    def current_user(self) -> Optional[UserSession]:
        return self._current

    @property
    def is_signed_in(self) -> bool:
        return self._current is not None

    def require_user(self) -> UserSession:
        """
        The current identity.

        Raises:
            NotSignedInError: If nobody is signed in
        """
        if self._current is None:
            raise NotSignedInError("No user is signed in")
        return self._current

    async def _delay(self, ms: int) -> None:
        if self._storage_settings.simulate_latency:
            await asyncio.sleep(ms / 1000)

    async def init(self) -> Optional[UserSession]:
        """
        Restore a persisted identity, if any.

        Call once at process start. Leaves the provider signed-out when
        nothing is persisted.
        """
        raw = await self._storage.get(self._key)
        if raw is None:
            self._current = None
            return None

        try:
            self._current = UserSession.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            if self._storage_settings.corrupt_blob_policy == "empty":
                self._logger.warning("session_unreadable", error=str(e))
                self._current = None
                return None
            raise SerializationError(f"Persisted session is unreadable: {e}") from e

        self._logger.info("session_restored", uid=self._current.uid)
        return self._current

    async def login(self, email: str, password: str) -> UserSession:
        """
        Sign in. The password is not checked.

        Returns:
            The fabricated identity for this email
        """
        await self._delay(self._storage_settings.login_latency_ms)
        user = fabricate_identity(email, self._auth_settings.display_name)
        await self._storage.set(self._key, json.dumps(user.to_document()))
        self._current = user
        self._logger.info("user_logged_in", uid=user.uid)
        return user

    async def logout(self) -> None:
        """Sign out and clear the persisted identity."""
        await self._delay(self._storage_settings.logout_latency_ms)
        previous = self._current
        self._current = None
        await self._storage.remove(self._key)
        self._logger.info(
            "user_logged_out",
            uid=previous.uid if previous else None,
        )

    def clear(self) -> None:
        """Forget the in-process identity without touching storage."""
        self._current = None
