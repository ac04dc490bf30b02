"""
Supabase-backed implementation of the data-query boundary.

The adapter is duck-typed against the async supabase client (or a bare
postgrest AsyncPostgrestClient): `.table(name)` must return a query builder
supporting `select/eq/order/limit` and an awaitable `execute()` whose result
exposes `.data`.

Security:
- The client must be the per-session client carrying the user's access token,
  so row-level security applies to every read.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from .models import FetchError
from .queries import QuerySpec

logger = logging.getLogger("edumanage.school")


class SupabaseDataSource:
    """Translate QuerySpec into a PostgREST request."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def _builder(self, spec: QuerySpec) -> Any:
        q = self._client.table(spec.resource).select(spec.select_clause())
        for column, value in spec.filters:
            q = q.eq(column, value)
        if spec.order_by:
            q = q.order(spec.order_by, desc=spec.descending)
        if spec.limit is not None:
            q = q.limit(spec.limit)
        return q

    async def query(self, spec: QuerySpec) -> List[Dict[str, Any]]:
        try:
            res = await self._builder(spec).execute()
        except Exception as exc:
            logger.debug("Query on %s failed: %s", spec.resource, exc.__class__.__name__)
            raise FetchError(spec.resource, exc.__class__.__name__) from exc
        data = getattr(res, "data", None)
        if data is None:
            return []
        if not isinstance(data, list):
            raise FetchError(spec.resource, "unexpected_payload")
        return [dict(row) for row in data]


__all__ = ["SupabaseDataSource"]
