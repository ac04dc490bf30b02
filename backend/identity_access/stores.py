"""
In-memory store of per-browser dashboard contexts.

Why: Keep session state (auth tokens inside the Supabase client, fetched
collections) server-side and opaque to the browser. For multi-process
deployments, pin sessions to a worker or replace with a shared store.

Security: Cookies carry only an opaque session id. Session data stays server-side.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import secrets
import time


def _now() -> int:
    return int(time.time())


@dataclass
class SessionRecord:
    session_id: str
    context: Any
    expires_at: Optional[int] = None


class SessionStore:
    def __init__(self, ttl_seconds: int = 3600):
        self._data: Dict[str, SessionRecord] = {}
        self.ttl_seconds = ttl_seconds

    def create(self, *, context: Any) -> SessionRecord:
        sid = secrets.token_urlsafe(24)
        rec = SessionRecord(session_id=sid, context=context, expires_at=_now() + self.ttl_seconds)
        self._data[sid] = rec
        return rec

    def get(self, session_id: str) -> Optional[SessionRecord]:
        rec = self._data.get(session_id)
        if not rec:
            return None
        if rec.expires_at and rec.expires_at < _now():
            # Left in place so purge_expired() can hand it back for cleanup.
            return None
        # Sliding expiry: activity keeps the session alive.
        rec.expires_at = _now() + self.ttl_seconds
        return rec

    def delete(self, session_id: str) -> Optional[SessionRecord]:
        return self._data.pop(session_id, None)

    def purge_expired(self) -> List[SessionRecord]:
        now = _now()
        expired = [rec for rec in self._data.values() if rec.expires_at and rec.expires_at < now]
        for rec in expired:
            self._data.pop(rec.session_id, None)
        return expired

    def pop_all(self) -> List[SessionRecord]:
        records = list(self._data.values())
        self._data.clear()
        return records

    def __len__(self) -> int:
        return len(self._data)
