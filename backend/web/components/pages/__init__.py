from .dashboard import ComingSoonTab, CoursesTab, DashboardTab, StudentsTab, TeachersTab, render_tab
from .status import SESSION_POLL_ID, LoadingPage, NotFoundPage

__all__ = [
    "ComingSoonTab",
    "CoursesTab",
    "DashboardTab",
    "LoadingPage",
    "NotFoundPage",
    "SESSION_POLL_ID",
    "StudentsTab",
    "TeachersTab",
    "render_tab",
]
