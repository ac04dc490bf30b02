"""Data-query boundary: a small "filter + order + limit [+ join]" read interface.

Keep this framework-agnostic so tests can supply simple fakes. The dashboard
issues exactly two query shapes, defined at the bottom of this module.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple


@dataclass(frozen=True)
class Join:
    """Embed fields of a related row under `alias` (PostgREST `alias:resource(fields)`)."""

    alias: str
    resource: str
    local_key: str
    fields: Tuple[str, ...]
    remote_key: str = "id"


@dataclass(frozen=True)
class QuerySpec:
    resource: str
    filters: Tuple[Tuple[str, Any], ...] = ()
    order_by: Optional[str] = None
    descending: bool = False
    limit: Optional[int] = None
    joins: Tuple[Join, ...] = field(default_factory=tuple)

    def select_clause(self) -> str:
        parts = ["*"]
        for j in self.joins:
            parts.append(f"{j.alias}:{j.resource}({','.join(j.fields)})")
        return ", ".join(parts)


class DataSource(Protocol):
    """Read rows for a QuerySpec. Implementations raise FetchError on failure."""

    async def query(self, spec: QuerySpec) -> List[Dict[str, Any]]: ...


ACTIVE_COURSES_QUERY = QuerySpec(
    resource="courses",
    filters=(("is_active", True),),
    limit=10,
)

PUBLISHED_ANNOUNCEMENTS_QUERY = QuerySpec(
    resource="announcements",
    filters=(("is_published", True),),
    order_by="publish_date",
    descending=True,
    limit=5,
    joins=(Join(alias="author", resource="profiles", local_key="author_id", fields=("full_name",)),),
)


__all__ = [
    "ACTIVE_COURSES_QUERY",
    "PUBLISHED_ANNOUNCEMENTS_QUERY",
    "DataSource",
    "Join",
    "QuerySpec",
]
