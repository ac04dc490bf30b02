"""In-memory data source for tests.

Applies the same filter/order/limit/join semantics PostgREST would, over
plain lists of dict rows. Every issued QuerySpec is recorded in `issued`.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from backend.school.models import FetchError
from backend.school.queries import QuerySpec


class InMemoryDataSource:
    def __init__(
        self,
        tables: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None,
        *,
        failing: Iterable[str] = (),
    ) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.failing: Set[str] = set(failing)
        self.issued: List[QuerySpec] = []

    def count(self, resource: str) -> int:
        return sum(1 for spec in self.issued if spec.resource == resource)

    async def query(self, spec: QuerySpec) -> List[Dict[str, Any]]:
        self.issued.append(spec)
        if spec.resource in self.failing:
            raise FetchError(spec.resource, "unavailable")
        rows = [r for r in self.tables.get(spec.resource, []) if self._matches(r, spec)]
        if spec.order_by:
            key = spec.order_by
            present = [r for r in rows if r.get(key) is not None]
            missing = [r for r in rows if r.get(key) is None]
            present.sort(key=lambda r: r[key], reverse=spec.descending)
            # PostgREST default: NULLS FIRST for DESC, NULLS LAST for ASC.
            rows = missing + present if spec.descending else present + missing
        if spec.limit is not None:
            rows = rows[: spec.limit]
        return [self._embed(dict(r), spec) for r in rows]

    @staticmethod
    def _matches(row: Mapping[str, Any], spec: QuerySpec) -> bool:
        return all(row.get(column) == value for column, value in spec.filters)

    def _embed(self, row: Dict[str, Any], spec: QuerySpec) -> Dict[str, Any]:
        for j in spec.joins:
            ref = row.get(j.local_key)
            related = next(
                (r for r in self.tables.get(j.resource, []) if ref is not None and r.get(j.remote_key) == ref),
                None,
            )
            row[j.alias] = {f: related.get(f) for f in j.fields} if related else None
        return row


__all__ = ["InMemoryDataSource"]
