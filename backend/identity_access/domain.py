"""
Identity domain types: roles, users, profiles and session states.

Why:
- Centralize allowed roles so the auth form, the profile parser and the
  navigation never drift apart.
- Keep the session state machine vocabulary (states + transition events) in
  one place so the Session Manager and its subscribers agree on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

# Keep roles minimal and explicit. Immutable to prevent accidental mutation.
ALLOWED_ROLES = frozenset({"admin", "teacher", "student", "parent"})


class AuthError(Exception):
    """Sign-in or sign-up was rejected.

    `code` is a stable machine-readable identifier, `message` is safe to show
    to the user in the form.
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        super().__init__(code)
        self.code = code
        self.message = message or code


class SessionState(str, Enum):
    INITIALIZING = "initializing"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class AuthUser:
    """Identity reported by the auth provider."""

    id: str
    email: str


@dataclass(frozen=True)
class Profile:
    id: str
    email: str
    full_name: str
    role: str
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Profile":
        """Build a Profile from a `profiles` row.

        Unknown roles degrade to "student" so a malformed row never grants
        broader visibility than the least privileged role.
        """
        role = str(row.get("role") or "").lower()
        if role not in ALLOWED_ROLES:
            role = "student"
        return cls(
            id=str(row.get("id") or ""),
            email=str(row.get("email") or ""),
            full_name=str(row.get("full_name") or ""),
            role=role,
            avatar_url=row.get("avatar_url"),
            phone=row.get("phone"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    @property
    def initial(self) -> str:
        return self.full_name[:1].upper() if self.full_name else "U"


@dataclass(frozen=True)
class SessionTransition:
    """Typed event emitted by the Session Manager on every state change."""

    previous: SessionState
    current: SessionState
    user: Optional[AuthUser]

    @property
    def signed_in(self) -> bool:
        return self.current is SessionState.AUTHENTICATED and self.previous is not SessionState.AUTHENTICATED

    @property
    def signed_out(self) -> bool:
        return self.previous is SessionState.AUTHENTICATED and self.current is not SessionState.AUTHENTICATED


__all__ = [
    "ALLOWED_ROLES",
    "AuthError",
    "AuthUser",
    "Profile",
    "SessionState",
    "SessionTransition",
]
