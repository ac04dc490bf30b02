"""
Explicit lifecycle objects for the web app.

Why:
    Instead of module-level singletons, the app owns one `AppContext`
    (constructed at startup, closed at shutdown). It hands out one
    `DashboardContext` per browser session: a Session Manager wired to a View
    Controller, both backed by that session's own Supabase client so tokens
    never leak between users.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from backend.identity_access.session_manager import SessionManager
from backend.identity_access.stores import SessionRecord, SessionStore
from backend.identity_access.supabase_auth import (
    AuthProvider,
    ProfileDirectory,
    SupabaseAuthProvider,
    SupabaseProfileDirectory,
)
from backend.school.queries import DataSource
from backend.school.supabase_source import SupabaseDataSource

from .config import Settings
from .dashboard import DashboardController, DashboardView

logger = logging.getLogger("edumanage.web")

# Seconds the first request waits for the provider before showing the loading page.
DEFAULT_INITIAL_CHECK_TIMEOUT = 5.0


@dataclass
class DashboardContext:
    session: SessionManager
    controller: DashboardController
    client: Any = None
    _unsubscribe: Optional[Callable[[], None]] = field(default=None, repr=False)
    _init_task: Optional["asyncio.Task[None]"] = field(default=None, repr=False)

    @classmethod
    def build(
        cls,
        provider: AuthProvider,
        profiles: ProfileDirectory,
        source: DataSource,
        *,
        client: Any = None,
    ) -> "DashboardContext":
        session = SessionManager(provider, profiles)
        controller = DashboardController(source)
        unsubscribe = controller.attach(session)
        return cls(session=session, controller=controller, client=client, _unsubscribe=unsubscribe)

    def view(self) -> DashboardView:
        return self.controller.view(self.session)

    async def start(self, timeout: float) -> None:
        """Run the initial session check, waiting at most `timeout` seconds.

        A slower check keeps running in the background; until it resolves the
        session reports `loading` and pages show the loading state.
        """
        self._init_task = asyncio.ensure_future(self.session.initialize())
        try:
            await asyncio.wait_for(asyncio.shield(self._init_task), timeout)
        except asyncio.TimeoutError:
            logger.info("Initial session check still pending after %.2fs", timeout)

    async def close(self) -> None:
        """Sign the provider session out locally, detach the controller, release the client."""
        if self._init_task is not None and not self._init_task.done():
            self._init_task.cancel()
        await self.session.close()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self.client is not None:
            await _release_client(self.client)
            self.client = None


async def _release_client(client: Any) -> None:
    """Close the client's PostgREST connection pool (duck-typed `aclose`)."""
    postgrest = getattr(client, "postgrest", None)
    aclose = getattr(postgrest, "aclose", None)
    if aclose is None:
        return
    try:
        await aclose()
    except Exception as exc:
        logger.warning("Closing backend client failed: %s", exc.__class__.__name__)


ContextFactory = Callable[[], Awaitable[DashboardContext]]


def supabase_context_factory(settings: Settings) -> ContextFactory:
    """Return a factory building a DashboardContext on a fresh async Supabase client."""

    async def _factory() -> DashboardContext:
        from supabase import acreate_client

        client = await acreate_client(settings.supabase_url, settings.supabase_anon_key)
        return DashboardContext.build(
            SupabaseAuthProvider(client),
            SupabaseProfileDirectory(client),
            SupabaseDataSource(client),
            client=client,
        )

    return _factory


class AppContext:
    """Process-level owner of all dashboard contexts."""

    def __init__(
        self,
        factory: ContextFactory,
        *,
        settings: Optional[Settings] = None,
        store: Optional[SessionStore] = None,
        initial_check_timeout: float = DEFAULT_INITIAL_CHECK_TIMEOUT,
    ):
        self.settings = settings
        self.store = store or SessionStore(ttl_seconds=settings.session_ttl_seconds if settings else 3600)
        self.initial_check_timeout = initial_check_timeout
        self._factory = factory

    @property
    def prod_like(self) -> bool:
        return bool(self.settings and self.settings.prod_like)

    async def open_session(self) -> SessionRecord:
        """Create a dashboard context and start its initial session check."""
        ctx = await self._factory()
        rec = self.store.create(context=ctx)
        await ctx.start(self.initial_check_timeout)
        return rec

    def lookup(self, session_id: Optional[str]) -> Optional[SessionRecord]:
        if not session_id:
            return None
        return self.store.get(session_id)

    async def purge_expired(self) -> int:
        expired = self.store.purge_expired()
        for rec in expired:
            await rec.context.close()
        if expired:
            logger.debug("Purged %d expired dashboard sessions", len(expired))
        return len(expired)

    async def close(self) -> None:
        for rec in self.store.pop_all():
            await rec.context.close()


__all__ = [
    "AppContext",
    "ContextFactory",
    "DEFAULT_INITIAL_CHECK_TIMEOUT",
    "DashboardContext",
    "supabase_context_factory",
]
