"""Announcement list item for the dashboard."""

from datetime import datetime

from backend.school.models import Announcement

from ..base import Component

EXCERPT_LENGTH = 100


def format_publish_date(value: str) -> str:
    """Return the calendar date of an ISO timestamp; unparsable input is shown as-is."""
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


class AnnouncementItem(Component):
    def __init__(self, announcement: Announcement):
        self.announcement = announcement

    def render(self) -> str:
        a = self.announcement
        author_html = (
            f'<span class="announcement__author">{self.escape(a.author_name)}</span>' if a.author_name else ""
        )
        return (
            f'<article class="{self.modifier("announcement", a.priority)}" data-priority="{self.escape(a.priority)}">'
            f'<span class="announcement__badge" title="{self.escape(a.priority)} priority" aria-hidden="true">🔔</span>'
            '<div class="announcement__body">'
            f'<p class="announcement__title">{self.escape(a.title)}</p>'
            f'<p class="announcement__excerpt">{self.escape(a.excerpt(EXCERPT_LENGTH))}...</p>'
            f"{author_html}"
            "</div>"
            f'<time class="announcement__date" datetime="{self.escape(a.publish_date)}">'
            f"{self.escape(format_publish_date(a.publish_date))}</time>"
            "</article>"
        )
