"""
Tab bodies of the dashboard.

Rendering is a pure function of a `DashboardView`: the same view always
yields the same markup and nothing here triggers a query.
"""

from typing import Callable, Dict

from backend.school.samples import SAMPLE_STUDENTS, SAMPLE_TEACHERS
from backend.web.dashboard import DashboardView

from ..base import Component
from ..cards import AnnouncementItem, CourseCard, StatTile, StudentCard, TeacherCard

QUICK_ACTIONS = (
    ("➕", "Add New Student"),
    ("🎓", "Register Teacher"),
    ("📚", "Create Course"),
    ("🔔", "Send Announcement"),
)


def _page_header(title: str, action: str, subtitle: str = "") -> str:
    esc = Component.escape
    subtitle_html = f'<p class="page-header__subtitle">{esc(subtitle)}</p>' if subtitle else ""
    return (
        '<div class="page-header">'
        f'<div><h1 class="page-header__title">{esc(title)}</h1>{subtitle_html}</div>'
        f'<button type="button" class="btn btn-primary">＋ <span>{esc(action)}</span></button>'
        "</div>"
    )


class DashboardTab(Component):
    def __init__(self, view: DashboardView):
        self.view = view

    def render(self) -> str:
        name = self.view.profile.full_name if self.view.profile else ""
        subtitle = f"Welcome back, {name}! Here's what's happening at your school today."
        return (
            '<section class="tab tab--dashboard">'
            f'{_page_header("School Dashboard", "Add New", subtitle)}'
            f'<div class="stat-grid">{self._stats()}</div>'
            '<div class="dashboard-columns">'
            f'<div class="panel panel--wide"><h3 class="panel__title">Recent Announcements</h3>{self._announcements()}</div>'
            f'<div class="panel"><h3 class="panel__title">Quick Actions</h3>{self._quick_actions()}</div>'
            "</div>"
            "</section>"
        )

    def _stats(self) -> str:
        s = self.view.stats
        tiles = [
            StatTile("Total Students", f"{s.total_students:,}", icon="👥", trend="+5.2% from last month", tone="blue"),
            StatTile("Total Teachers", str(s.total_teachers), icon="🎓", trend="+2.1% from last month", tone="green"),
            StatTile("Active Courses", str(s.active_courses), icon="📚", trend="+3.8% from last month", tone="purple"),
            StatTile("Avg Attendance", f"{s.avg_attendance}%", icon="📊", trend="+1.2% from last month", tone="orange"),
        ]
        return "".join(t.render() for t in tiles)

    def _announcements(self) -> str:
        if not self.view.announcements:
            return '<div class="empty-state"><p>No announcements available</p></div>'
        items = "".join(AnnouncementItem(a).render() for a in self.view.announcements)
        return f'<div class="announcement-list">{items}</div>'

    def _quick_actions(self) -> str:
        buttons = "".join(
            f'<button type="button" class="quick-action"><span aria-hidden="true">{icon}</span><span>{self.escape(label)}</span></button>'
            for icon, label in QUICK_ACTIONS
        )
        return f'<div class="quick-actions">{buttons}</div>'


class StudentsTab(Component):
    def render(self) -> str:
        cards = "".join(StudentCard(s).render() for s in SAMPLE_STUDENTS)
        return (
            '<section class="tab tab--students">'
            f'{_page_header("Student Management", "Add Student")}'
            f'<div class="card-grid">{cards}</div>'
            "</section>"
        )


class TeachersTab(Component):
    def render(self) -> str:
        cards = "".join(TeacherCard(t).render() for t in SAMPLE_TEACHERS)
        return (
            '<section class="tab tab--teachers">'
            f'{_page_header("Teacher Management", "Add Teacher")}'
            f'<div class="card-grid">{cards}</div>'
            "</section>"
        )


class CoursesTab(Component):
    def __init__(self, view: DashboardView):
        self.view = view

    def render(self) -> str:
        if self.view.courses:
            body = "".join(CourseCard(c).render() for c in self.view.courses)
        else:
            body = (
                '<div class="empty-state">'
                "<p>No courses available</p>"
                '<p class="text-muted">Courses will appear here once they are added to the system</p>'
                "</div>"
            )
        return (
            '<section class="tab tab--courses">'
            f'{_page_header("Course Management", "Add Course")}'
            f'<div class="card-grid">{body}</div>'
            "</section>"
        )


class ComingSoonTab(Component):
    def render(self) -> str:
        return (
            '<section class="tab tab--placeholder">'
            '<div class="empty-state">'
            "<h2>Coming Soon</h2>"
            "<p>This section is under development.</p>"
            "</div>"
            "</section>"
        )


_TAB_RENDERERS: Dict[str, Callable[[DashboardView], Component]] = {
    "dashboard": DashboardTab,
    "students": lambda _view: StudentsTab(),
    "teachers": lambda _view: TeachersTab(),
    "courses": CoursesTab,
}


def render_tab(view: DashboardView) -> str:
    """Render the body of `view.active_tab`; tabs without content get a placeholder."""
    factory = _TAB_RENDERERS.get(view.active_tab)
    component = factory(view) if factory else ComingSoonTab()
    return component.render()
