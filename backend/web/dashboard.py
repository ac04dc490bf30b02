"""
Dashboard View Controller: fetch orchestration and tab selection.

Why:
    Courses and announcements must be loaded exactly once per sign-in, never
    for an anonymous visitor, and a slow response from a previous session must
    not overwrite the data of the current one.

Behavior:
    - Subscribes to Session Manager transitions. On every edge into
      AUTHENTICATED the epoch is bumped and both collections are queried
      concurrently; on every edge out of it the epoch is bumped again and the
      collections are cleared.
    - A fetch commits its result only when the epoch it captured at issue time
      is still current. Any failure (query or row parsing) is logged and leaves
      the collection untouched; nothing propagates to the session transition.
    - Tab changes only update `active_tab`; they never trigger queries.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from backend.identity_access.domain import AuthUser, Profile, SessionTransition
from backend.identity_access.session_manager import SessionManager
from backend.school.models import Announcement, Course, DisplayStats, FetchError
from backend.school.queries import ACTIVE_COURSES_QUERY, PUBLISHED_ANNOUNCEMENTS_QUERY, DataSource

logger = logging.getLogger("edumanage.web.dashboard")

TABS: Tuple[str, ...] = (
    "dashboard",
    "students",
    "teachers",
    "courses",
    "attendance",
    "calendar",
    "reports",
    "settings",
)
DEFAULT_TAB = "dashboard"


@dataclass(frozen=True)
class DashboardView:
    """Everything the rendering layer needs for one render."""

    active_tab: str
    user: Optional[AuthUser]
    profile: Optional[Profile]
    courses: Tuple[Course, ...]
    announcements: Tuple[Announcement, ...]
    stats: DisplayStats


class DashboardController:
    def __init__(self, source: DataSource, *, seed_stats: DisplayStats | None = None) -> None:
        self._source = source
        self._seed_stats = seed_stats or DisplayStats()
        self._stats = self._seed_stats
        self._courses: Tuple[Course, ...] = ()
        self._announcements: Tuple[Announcement, ...] = ()
        self._active_tab = DEFAULT_TAB
        self._epoch = 0

    @property
    def active_tab(self) -> str:
        return self._active_tab

    @property
    def courses(self) -> Tuple[Course, ...]:
        return self._courses

    @property
    def announcements(self) -> Tuple[Announcement, ...]:
        return self._announcements

    @property
    def stats(self) -> DisplayStats:
        return self._stats

    @property
    def epoch(self) -> int:
        return self._epoch

    def attach(self, session: SessionManager):
        """Subscribe to the session's transitions; returns the unsubscribe callable."""
        return session.subscribe(self.on_session_transition)

    def set_active_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError("unknown_tab")
        self._active_tab = tab

    def view(self, session: SessionManager) -> DashboardView:
        return DashboardView(
            active_tab=self._active_tab,
            user=session.user,
            profile=session.profile,
            courses=self._courses,
            announcements=self._announcements,
            stats=self._stats,
        )

    async def on_session_transition(self, transition: SessionTransition) -> None:
        if transition.signed_in:
            self._epoch += 1
            await self.load(self._epoch)
        elif transition.signed_out:
            self._epoch += 1
            self._courses = ()
            self._announcements = ()
            self._stats = self._seed_stats

    async def load(self, epoch: int) -> None:
        await asyncio.gather(self.fetch_courses(epoch), self.fetch_announcements(epoch))

    async def fetch_courses(self, epoch: int) -> None:
        try:
            rows = await self._source.query(ACTIVE_COURSES_QUERY)
            courses = tuple(Course.from_row(row) for row in rows)
        except Exception as exc:
            logger.warning("Error fetching courses: %s", _reason(exc))
            return
        if epoch != self._epoch:
            logger.debug("Discarding stale courses result (epoch %s, current %s)", epoch, self._epoch)
            return
        self._courses = courses
        self._stats = replace(self._stats, active_courses=len(courses))

    async def fetch_announcements(self, epoch: int) -> None:
        try:
            rows = await self._source.query(PUBLISHED_ANNOUNCEMENTS_QUERY)
            announcements = tuple(Announcement.from_row(row) for row in rows)
        except Exception as exc:
            logger.warning("Error fetching announcements: %s", _reason(exc))
            return
        if epoch != self._epoch:
            logger.debug("Discarding stale announcements result (epoch %s, current %s)", epoch, self._epoch)
            return
        self._announcements = announcements


def _reason(exc: Exception) -> str:
    return exc.reason if isinstance(exc, FetchError) else exc.__class__.__name__


__all__ = ["DEFAULT_TAB", "TABS", "DashboardController", "DashboardView"]
