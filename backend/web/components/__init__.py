# EduManage component system
# Pure Python components for escaped HTML generation

from .base import Component
from .layout import Layout
from .navigation import AppHeader, Navigation, NAV_ITEMS
from .cards import AnnouncementItem, CourseCard, StatTile, StudentCard, TeacherCard
from .forms import AuthForm, FormField, SelectField, TextInputField
from .pages import LoadingPage, NotFoundPage, render_tab

__all__ = [
    "Component",
    "Layout",
    "AppHeader",
    "Navigation",
    "NAV_ITEMS",
    "AnnouncementItem",
    "CourseCard",
    "StatTile",
    "StudentCard",
    "TeacherCard",
    "AuthForm",
    "FormField",
    "SelectField",
    "TextInputField",
    "LoadingPage",
    "NotFoundPage",
    "render_tab",
]
