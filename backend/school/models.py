"""School records consumed by the dashboard.

Rows come from the backend as plain dicts; these dataclasses are read-only
views over them. Parsing is lenient: missing optional columns default rather
than fail, because the dashboard only displays what it receives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

PRIORITIES = ("low", "medium", "high", "urgent")


class FetchError(Exception):
    """A read query against the data backend failed."""

    def __init__(self, resource: str, reason: str) -> None:
        super().__init__(f"{resource}: {reason}")
        self.resource = resource
        self.reason = reason


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class Course:
    id: str
    course_code: str
    name: str
    credits: int
    grade_level: str
    department: str
    is_active: bool
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Course":
        return cls(
            id=str(row.get("id") or ""),
            course_code=str(row.get("course_code") or ""),
            name=str(row.get("name") or ""),
            credits=_int(row.get("credits")),
            grade_level=str(row.get("grade_level") or ""),
            department=str(row.get("department") or ""),
            is_active=bool(row.get("is_active")),
            description=_opt_str(row.get("description")),
            created_at=_opt_str(row.get("created_at")),
            updated_at=_opt_str(row.get("updated_at")),
        )


@dataclass(frozen=True)
class Announcement:
    id: str
    title: str
    content: str
    target_audience: str
    priority: str
    is_published: bool
    publish_date: str
    author_id: Optional[str] = None
    expire_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    author_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Announcement":
        priority = str(row.get("priority") or "low").lower()
        if priority not in PRIORITIES:
            priority = "low"
        author = row.get("author")
        author_name = author.get("full_name") if isinstance(author, Mapping) else None
        return cls(
            id=str(row.get("id") or ""),
            title=str(row.get("title") or ""),
            content=str(row.get("content") or ""),
            target_audience=str(row.get("target_audience") or "all"),
            priority=priority,
            is_published=bool(row.get("is_published")),
            publish_date=str(row.get("publish_date") or ""),
            author_id=_opt_str(row.get("author_id")),
            expire_date=_opt_str(row.get("expire_date")),
            created_at=_opt_str(row.get("created_at")),
            updated_at=_opt_str(row.get("updated_at")),
            author_name=_opt_str(author_name),
        )

    def excerpt(self, limit: int = 100) -> str:
        return self.content[:limit]


@dataclass(frozen=True)
class DisplayStats:
    """Stat tile figures. Seeded locally; active_courses follows the live course count."""

    total_students: int = 1248
    total_teachers: int = 84
    active_courses: int = 42
    avg_attendance: float = 92.5


__all__ = [
    "PRIORITIES",
    "Announcement",
    "Course",
    "DisplayStats",
    "FetchError",
]
