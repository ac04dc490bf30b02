"""
Auth provider and profile lookup boundaries backed by Supabase.

This module is a thin, framework-agnostic adapter used by the Session Manager.
Both adapters are duck-typed against the async supabase client returned by
`supabase.acreate_client(...)` to avoid a hard dependency during testing. The
client is expected to expose:

- `.auth.get_session()`, `.auth.sign_in_with_password({...})`,
  `.auth.sign_up({...})`, `.auth.sign_out({...})` (all awaitable)
- `.table(name)` returning a PostgREST query builder whose `.execute()` is awaitable

Security: Never log credentials. Provider errors are logged by class name only
and converted into `AuthError` codes the form can display.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from .domain import ALLOWED_ROLES, AuthError, AuthUser, Profile

logger = logging.getLogger("edumanage.identity_access")


class AuthProvider(Protocol):
    async def check_session(self) -> Optional[AuthUser]: ...

    async def sign_in(self, email: str, password: str) -> AuthUser: ...

    async def sign_up(self, email: str, password: str, metadata: Dict[str, str]) -> AuthUser: ...

    async def sign_out(self, *, scope: str = "global") -> None: ...


class ProfileDirectory(Protocol):
    async def get_profile(self, user_id: str) -> Optional[Profile]: ...

    async def create_profile(self, user: AuthUser, *, full_name: str, role: str) -> None: ...


def _to_user(obj: Any) -> Optional[AuthUser]:
    """Map a gotrue User (or dict) to AuthUser; None when absent."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        uid, email = obj.get("id"), obj.get("email")
    else:
        uid, email = getattr(obj, "id", None), getattr(obj, "email", None)
    if not uid:
        return None
    return AuthUser(id=str(uid), email=str(email or ""))


class SupabaseAuthProvider:
    """Authenticate with email/password against Supabase Auth (GoTrue)."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def check_session(self) -> Optional[AuthUser]:
        session = await self._client.auth.get_session()
        return _to_user(getattr(session, "user", None)) if session else None

    async def sign_in(self, email: str, password: str) -> AuthUser:
        try:
            res = await self._client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as exc:
            logger.info("Sign-in rejected: %s", exc.__class__.__name__)
            raise AuthError("invalid_credentials", "Invalid email or password.") from exc
        user = _to_user(getattr(res, "user", None))
        if user is None or getattr(res, "session", None) is None:
            raise AuthError("invalid_credentials", "Invalid email or password.")
        return user

    async def sign_up(self, email: str, password: str, metadata: Dict[str, str]) -> AuthUser:
        try:
            res = await self._client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": dict(metadata)}}
            )
        except Exception as exc:
            logger.info("Sign-up rejected: %s", exc.__class__.__name__)
            detail = str(exc) or "Registration failed."
            raise AuthError("sign_up_rejected", detail) from exc
        user = _to_user(getattr(res, "user", None))
        if user is None:
            raise AuthError("sign_up_rejected", "Registration failed.")
        if getattr(res, "session", None) is None:
            # Email confirmation enabled on the project: account exists, no session yet.
            raise AuthError(
                "confirmation_pending",
                "Account created. Please confirm your email address, then sign in.",
            )
        return user

    async def sign_out(self, *, scope: str = "global") -> None:
        """End the session; "local" keeps the user's other devices signed in."""
        await self._client.auth.sign_out({"scope": scope})


class SupabaseProfileDirectory:
    """Single-row reads/writes against the `profiles` table."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        res = await self._client.table("profiles").select("*").eq("id", user_id).limit(1).execute()
        rows = getattr(res, "data", None) or []
        if not rows:
            return None
        return Profile.from_row(rows[0])

    async def create_profile(self, user: AuthUser, *, full_name: str, role: str) -> None:
        if role not in ALLOWED_ROLES:
            raise ValueError("invalid role")
        await self._client.table("profiles").insert(
            {"id": user.id, "email": user.email, "full_name": full_name, "role": role}
        ).execute()


__all__ = [
    "AuthProvider",
    "ProfileDirectory",
    "SupabaseAuthProvider",
    "SupabaseProfileDirectory",
]
