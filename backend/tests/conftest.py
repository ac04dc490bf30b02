"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend (the Session Manager relies on
asyncio primitives) and provide in-process fakes for the auth provider, the
profile directory and the data backend so no test needs a Supabase project.
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Test-only helpers (memory_source) live beside the tests.
TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from backend.identity_access.domain import AuthError, AuthUser, Profile  # noqa: E402
from backend.web.context import AppContext, DashboardContext  # noqa: E402
from memory_source import InMemoryDataSource  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_edumanage_env(monkeypatch: pytest.MonkeyPatch):
    """Keep developer shells from leaking configuration into tests."""
    for var in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "EDUMANAGE_ENV",
        "EDUMANAGE_SESSION_TTL_SECONDS",
        "EDUMANAGE_LOG_LEVEL",
        "EDUMANAGE_ENABLE_DOTENV",
    ):
        monkeypatch.delenv(var, raising=False)


class FakeAuthProvider:
    """Email/password provider with a single stored session slot.

    `stored` plays the role of the persisted provider session: it is what
    `check_session()` reports. Optional `gate` events hold an operation until
    the test releases it.
    """

    def __init__(self) -> None:
        self.accounts: Dict[str, tuple[str, AuthUser]] = {}
        self.stored: Optional[AuthUser] = None
        self.require_confirmation = False
        self.fail_check = False
        self.fail_sign_out = False
        self.sign_in_gate: Optional[asyncio.Event] = None
        self.sign_up_gate: Optional[asyncio.Event] = None
        self.check_gate: Optional[asyncio.Event] = None
        self.calls: List[str] = []
        self.sign_out_scopes: List[str] = []

    def add_account(self, email: str, password: str, user_id: str) -> AuthUser:
        user = AuthUser(id=user_id, email=email)
        self.accounts[email] = (password, user)
        return user

    async def check_session(self) -> Optional[AuthUser]:
        self.calls.append("check_session")
        if self.check_gate is not None:
            await self.check_gate.wait()
        if self.fail_check:
            raise ConnectionError("provider unreachable")
        return self.stored

    async def sign_in(self, email: str, password: str) -> AuthUser:
        self.calls.append("sign_in")
        if self.sign_in_gate is not None:
            await self.sign_in_gate.wait()
        entry = self.accounts.get(email)
        if entry is None or entry[0] != password:
            raise AuthError("invalid_credentials", "Invalid email or password.")
        self.stored = entry[1]
        return entry[1]

    async def sign_up(self, email: str, password: str, metadata: Dict[str, str]) -> AuthUser:
        self.calls.append("sign_up")
        if self.sign_up_gate is not None:
            await self.sign_up_gate.wait()
        if email in self.accounts:
            raise AuthError("sign_up_rejected", "User already registered")
        user = self.add_account(email, password, f"user-{len(self.accounts) + 1}")
        if self.require_confirmation:
            raise AuthError("confirmation_pending", "Please confirm your email address, then sign in.")
        self.stored = user
        return user

    async def sign_out(self, *, scope: str = "global") -> None:
        self.calls.append("sign_out")
        self.sign_out_scopes.append(scope)
        if self.fail_sign_out:
            raise ConnectionError("provider unreachable")
        self.stored = None


class FakeProfileDirectory:
    def __init__(self, profiles: Optional[Dict[str, Profile]] = None) -> None:
        self.profiles: Dict[str, Profile] = dict(profiles or {})
        self.created: List[Dict[str, Any]] = []
        self.fail_create = False
        self.get_gate: Optional[asyncio.Event] = None

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        if self.get_gate is not None:
            await self.get_gate.wait()
        return self.profiles.get(user_id)

    async def create_profile(self, user: AuthUser, *, full_name: str, role: str) -> None:
        if self.fail_create:
            raise RuntimeError("insert failed")
        self.created.append({"id": user.id, "full_name": full_name, "role": role})
        self.profiles[user.id] = Profile(id=user.id, email=user.email, full_name=full_name, role=role)


COURSE_ROWS = [
    {
        "id": "c1",
        "course_code": "MATH101",
        "name": "Algebra I",
        "description": "Linear equations and functions",
        "credits": 3,
        "grade_level": "9th",
        "department": "Mathematics",
        "is_active": True,
    },
    {
        "id": "c2",
        "course_code": "PHY201",
        "name": "Physics",
        "description": None,
        "credits": 4,
        "grade_level": "11th",
        "department": "Science",
        "is_active": True,
    },
    {
        "id": "c3",
        "course_code": "ART100",
        "name": "Pottery",
        "description": "Retired course",
        "credits": 1,
        "grade_level": "10th",
        "department": "Arts",
        "is_active": False,
    },
]

ANNOUNCEMENT_ROWS = [
    {
        "id": "a1",
        "title": "Parent evening",
        "content": "Parent-teacher conferences take place next Thursday in the main hall.",
        "author_id": "u-admin",
        "target_audience": "parents",
        "priority": "high",
        "is_published": True,
        "publish_date": "2026-03-02T08:00:00Z",
    },
    {
        "id": "a2",
        "title": "Draft",
        "content": "Not yet published.",
        "author_id": "u-admin",
        "target_audience": "all",
        "priority": "low",
        "is_published": False,
        "publish_date": "2026-03-05T08:00:00Z",
    },
    {
        "id": "a3",
        "title": "Sports day",
        "content": "Sports day moves to Friday.",
        "author_id": "u-teacher",
        "target_audience": "students",
        "priority": "medium",
        "is_published": True,
        "publish_date": "2026-03-04T08:00:00Z",
    },
]

PROFILE_ROWS = [
    {"id": "u-admin", "email": "a@school.test", "full_name": "Alice Admin", "role": "admin"},
    {"id": "u-teacher", "email": "t@school.test", "full_name": "Tom Teacher", "role": "teacher"},
]


@pytest.fixture
def provider() -> FakeAuthProvider:
    p = FakeAuthProvider()
    p.add_account("a@school.test", "secret", "u-admin")
    p.add_account("t@school.test", "secret", "u-teacher")
    return p


@pytest.fixture
def profiles() -> FakeProfileDirectory:
    return FakeProfileDirectory({row["id"]: Profile.from_row(row) for row in PROFILE_ROWS})


@pytest.fixture
def source() -> InMemoryDataSource:
    return InMemoryDataSource(
        {"courses": COURSE_ROWS, "announcements": ANNOUNCEMENT_ROWS, "profiles": PROFILE_ROWS}
    )


@pytest.fixture
def dashboard_ctx(provider, profiles, source) -> DashboardContext:
    return DashboardContext.build(provider, profiles, source)


@pytest.fixture
def app_context(provider, profiles, source) -> AppContext:
    """AppContext whose dashboard contexts all share the fakes above.

    Sharing the provider mirrors one browser whose stored session survives a
    cookie reset, which is what the reconciliation tests need.
    """

    async def _factory() -> DashboardContext:
        return DashboardContext.build(provider, profiles, source)

    return AppContext(_factory)
